"""
Impact model registry — maps ImpactType to volume calculator classes.
"""

from ..models import ImpactType
from .normal_impact import NormalImpactCalculator
from .clean_impact import CleanImpactCalculator
from .base import BaseCalculator

IMPACT_MODEL_REGISTRY: dict[ImpactType, type] = {
    ImpactType.NORMAL: NormalImpactCalculator,
    ImpactType.CLEAN: CleanImpactCalculator,
}


def get_impact_model(impact_type) -> BaseCalculator:
    """Returns an instance of the volume model for an impact type, or raises ValueError."""
    try:
        key = ImpactType(impact_type)
    except ValueError:
        key = None
    if key not in IMPACT_MODEL_REGISTRY:
        raise ValueError(
            f"No volume model registered for impact type: {impact_type}. "
            f"Available: {[t.value for t in IMPACT_MODEL_REGISTRY]}"
        )
    return IMPACT_MODEL_REGISTRY[key]()


def has_impact_model(impact_type) -> bool:
    """Check if a volume model exists for an impact type."""
    try:
        return ImpactType(impact_type) in IMPACT_MODEL_REGISTRY
    except ValueError:
        return False


def list_impact_models() -> list[str]:
    """List all registered impact types."""
    return [t.value for t in IMPACT_MODEL_REGISTRY]
