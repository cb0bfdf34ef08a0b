"""
Crater energy calculator.

contact diameter + crater geometry + depth + impact type + material → joules.

All inputs arrive in centimeters and are converted to meters before any math.
Elliptical craters are reduced to an area-equivalent radius sqrt(a·b) for the
contact check and the Normal frustum; Clean impacts keep the true ellipse area.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Union

from ..errors import (
    CraterTooSmall,
    EnergyOutOfRange,
    InvalidCraterDimension,
    InvalidDepth,
    NoContactSelected,
)
from ..models import CircularCrater, EllipticalCrater
from ..units import (
    circle_area,
    cm_to_m,
    ellipse_area,
    equivalent_radius,
    is_positive_finite,
    parse_number,
    radius_from_diameter_cm,
)
from .base import CraterDimensions
from .material_lookup import MaterialLookup
from .registry import get_impact_model

logger = logging.getLogger(__name__)

CraterGeometry = Union[CircularCrater, EllipticalCrater]

WIDTH_HEIGHT_MESSAGE = "Please enter valid crater width and height (greater than 0)."


@dataclass(frozen=True)
class EnergyBreakdown:
    r_contact_m: float
    r_crater_m: float
    depth_m: float
    volume_m3: float
    strength_pa: float
    energy_j: float


class CraterEnergyCalculator:
    """Stateless. Safe to share one instance across sessions."""

    def __init__(self, lookup: Optional[MaterialLookup] = None):
        self.lookup = lookup or MaterialLookup()

    def compute_energy(self, contact_diameter_cm, crater: CraterGeometry,
                       depth_cm, impact_type, material_id: str) -> float:
        """Energy in joules. Raises an EnergyValidationError subclass on bad input."""
        return self.compute_breakdown(
            contact_diameter_cm, crater, depth_cm, impact_type, material_id
        ).energy_j

    def compute_breakdown(self, contact_diameter_cm, crater: CraterGeometry,
                          depth_cm, impact_type, material_id: str) -> EnergyBreakdown:
        logger.debug(
            "compute: contact=%s crater=%s depth=%s type=%s material=%s",
            contact_diameter_cm, crater, depth_cm, impact_type, material_id,
        )

        contact_cm = parse_number(contact_diameter_cm)
        if not is_positive_finite(contact_cm):
            raise NoContactSelected()

        depth = parse_number(depth_cm)
        if not is_positive_finite(depth):
            raise InvalidDepth()

        dims = self.resolve_dimensions(contact_cm, crater, depth)

        # Equal radii are fine; only a strictly narrower crater is rejected
        if dims.r_crater_m < dims.r_contact_m:
            raise CraterTooSmall()

        model = get_impact_model(impact_type)
        volume = model.volume(dims)
        strength = self.lookup.strength_of(material_id)
        energy = strength * volume
        if not math.isfinite(energy):
            logger.warning("Energy overflow: V=%s m³, strength=%s Pa", volume, strength)
            raise EnergyOutOfRange()

        logger.info(
            "Crater energy: %.6g J (%s, %s, V=%.6g m³)",
            energy, getattr(impact_type, "value", impact_type), material_id, volume,
        )
        return EnergyBreakdown(
            r_contact_m=dims.r_contact_m,
            r_crater_m=dims.r_crater_m,
            depth_m=dims.depth_m,
            volume_m3=volume,
            strength_pa=strength,
            energy_j=energy,
        )

    def resolve_dimensions(self, contact_cm: float, crater: CraterGeometry,
                           depth_cm: float) -> CraterDimensions:
        """Validate the active crater variant and convert everything to meters."""
        if isinstance(crater, CircularCrater):
            diameter = parse_number(crater.diameter_cm)
            if not is_positive_finite(diameter):
                raise InvalidCraterDimension()
            r_crater = radius_from_diameter_cm(diameter)
            base_area = circle_area(r_crater)
        elif isinstance(crater, EllipticalCrater):
            width = parse_number(crater.width_cm)
            height = parse_number(crater.height_cm)
            if not (is_positive_finite(width) and is_positive_finite(height)):
                raise InvalidCraterDimension(WIDTH_HEIGHT_MESSAGE)
            a = radius_from_diameter_cm(width)
            b = radius_from_diameter_cm(height)
            r_crater = equivalent_radius(a, b)
            base_area = ellipse_area(a, b)
        else:
            raise InvalidCraterDimension()

        return CraterDimensions(
            r_contact_m=radius_from_diameter_cm(contact_cm),
            r_crater_m=r_crater,
            depth_m=cm_to_m(depth_cm),
            base_area_m2=base_area,
        )
