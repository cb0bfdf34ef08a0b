"""
Energy display formatting.

Auto mode picks J / kJ / MJ by magnitude; Full mode always shows whole joules.
Numbers are grouped en-US style ("1,234.5") and rounded half-up: to the
nearest integer for J, to at most 2 fractional digits for kJ and MJ.
"""

import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext

from .models import DisplayMode

KILO = 1e3
MEGA = 1e6


@dataclass(frozen=True)
class EnergyDisplay:
    magnitude: str
    unit: str

    @property
    def text(self) -> str:
        return f"{self.magnitude} {self.unit}"


PLACEHOLDER = EnergyDisplay(magnitude="0", unit="J")


def group_number(value: float, max_fraction_digits: int = 0) -> str:
    """
    Round half-up to at most `max_fraction_digits` and add thousands separators.
    Trailing fractional zeros are dropped: 1.50 → "1.5", 2.00 → "2".
    """
    with localcontext() as ctx:
        # wide enough for any finite float
        ctx.prec = 400
        exponent = Decimal(1).scaleb(-max_fraction_digits)
        # shortest round-trip form, so 1.005 rounds as written
        rounded = Decimal(repr(value)).quantize(exponent, rounding=ROUND_HALF_UP)
        text = f"{rounded:,.{max_fraction_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_energy(joules, mode=DisplayMode.AUTO) -> EnergyDisplay:
    """Render a joule value as a (magnitude, unit) pair. Missing values show as 0 J."""
    if joules is None or isinstance(joules, bool):
        return PLACEHOLDER
    try:
        joules = float(joules)
    except (TypeError, ValueError):
        return PLACEHOLDER
    if not math.isfinite(joules):
        return PLACEHOLDER

    if DisplayMode(mode) == DisplayMode.FULL:
        return EnergyDisplay(group_number(joules), "J")

    if joules >= MEGA:
        return EnergyDisplay(group_number(joules / MEGA, 2), "MJ")
    if joules >= KILO:
        return EnergyDisplay(group_number(joules / KILO, 2), "kJ")
    return EnergyDisplay(group_number(joules), "J")
