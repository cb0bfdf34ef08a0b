"""
Clean (through) penetration.

Constant cross-section prism: mouth area × thickness. Elliptical craters use
the true ellipse area π·a·b, not the equivalent-radius circle.
"""

from .base import BaseCalculator, CraterDimensions


class CleanImpactCalculator(BaseCalculator):

    def volume(self, dims: CraterDimensions) -> float:
        return dims.base_area_m2 * dims.depth_m
