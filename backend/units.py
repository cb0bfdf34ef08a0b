# Unit conversion and input parsing — all user-facing lengths are centimeters,
# all internal math is SI (m, m², m³, Pa, J).

import math

CM_PER_M = 100.0


def parse_number(value) -> float:
    """
    Parse a numeric value from user input (number or string).
    Missing or unparseable input becomes NaN so positivity checks reject it.
    """
    if value is None or isinstance(value, bool):
        return math.nan
    try:
        return float(str(value).strip())
    except (ValueError, TypeError):
        return math.nan


def is_positive_finite(value: float) -> bool:
    return math.isfinite(value) and value > 0


def cm_to_m(cm: float) -> float:
    """Convert centimeters to meters."""
    return cm / CM_PER_M


def radius_from_diameter_cm(diameter_cm: float) -> float:
    """Radius in meters from a diameter in centimeters."""
    return cm_to_m(diameter_cm) / 2.0


def circle_area(radius_m: float) -> float:
    return math.pi * radius_m * radius_m


def ellipse_area(a_m: float, b_m: float) -> float:
    """Area from the two semi-axes."""
    return math.pi * a_m * b_m


def equivalent_radius(a_m: float, b_m: float) -> float:
    """Radius of the circle with the same area as the ellipse: sqrt(a·b)."""
    return math.sqrt(max(0.0, a_m * b_m))
