"""
Abstract base class for impact volume models.

Input: CraterDimensions (all lengths already in meters)
Output: displaced volume in m³
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CraterDimensions:
    """Resolved crater geometry in SI units."""
    r_contact_m: float
    r_crater_m: float      # equivalent circular radius for elliptical craters
    depth_m: float
    base_area_m2: float    # true mouth area: π·r² or π·a·b


class BaseCalculator(ABC):
    """All impact volume models inherit from this."""

    @abstractmethod
    def volume(self, dims: CraterDimensions) -> float:
        """Returns the displaced volume in cubic meters."""
        pass
