"""
Material strength lookup.

Approximate strength limits in pascals, used as an energy-per-volume proxy:
Pa × m³ = J. The table is fixed at import time — changing a value is a
deploy, not a runtime operation.
"""

import logging

from ..errors import UnknownMaterial

logger = logging.getLogger(__name__)

# Strength limits (Pa)
MATERIAL_STRENGTHS = {
    "wood": 60e6,
    "concrete": 60e6,
    "reinforced_concrete": 120e6,
    "asphalt": 3e6,
    "brick": 15e6,
    "steel": 800e6,
    "iron": 400e6,
    "titanium": 1100e6,
    "ceramic": 80e6,
    "rock": 200e6,
    "soil": 0.3e6,
}

# Display names for the material picker
MATERIAL_LABELS = {
    "wood": "Wood",
    "concrete": "Concrete",
    "reinforced_concrete": "Reinforced concrete",
    "asphalt": "Asphalt",
    "brick": "Brick",
    "steel": "Steel",
    "iron": "Iron",
    "titanium": "Titanium",
    "ceramic": "Ceramic",
    "rock": "Rock",
    "soil": "Soil",
}


class MaterialLookup:
    """Read-only access to MATERIAL_STRENGTHS."""

    def strength_of(self, material_id: str) -> float:
        """Strength limit in Pa. Raises UnknownMaterial for ids not in the table."""
        strength = MATERIAL_STRENGTHS.get(material_id)
        if strength is None:
            logger.warning("Unknown material requested: %r", material_id)
            raise UnknownMaterial()
        return strength

    def has_material(self, material_id: str) -> bool:
        return material_id in MATERIAL_STRENGTHS

    def list_materials(self) -> list:
        """Catalog entries for the material picker, in table order."""
        return [
            {
                "id": material_id,
                "label": MATERIAL_LABELS.get(material_id, material_id),
                "strength_pa": strength,
                "strength_mpa": round(strength / 1e6, 3),
            }
            for material_id, strength in MATERIAL_STRENGTHS.items()
        ]
