"""
Crater energy engine tests — material table, volume models, validation.

Tests:
1-4.   Material lookup
5-7.   Impact model registry
8-14.  Normal / clean volume geometry
15-23. Input validation and error order
"""

import math

import pytest

from backend.calculators.base import CraterDimensions
from backend.calculators.clean_impact import CleanImpactCalculator
from backend.calculators.crater_energy import CraterEnergyCalculator
from backend.calculators.material_lookup import MaterialLookup, MATERIAL_STRENGTHS
from backend.calculators.normal_impact import NormalImpactCalculator
from backend.calculators.registry import get_impact_model, has_impact_model, list_impact_models
from backend.errors import (
    CraterTooSmall,
    EnergyOutOfRange,
    EnergyValidationError,
    InvalidCraterDimension,
    InvalidDepth,
    NoContactSelected,
    UnknownMaterial,
)
from backend.models import CircularCrater, EllipticalCrater, ImpactType

calc = CraterEnergyCalculator()


def _frustum_volume(r_contact, r_crater, h):
    return math.pi * r_contact ** 2 * h + (math.pi * h / 3) * (
        r_crater ** 2 + r_crater * r_contact + r_contact ** 2)


# ============================================================
# Material lookup
# ============================================================

def test_material_table_values():
    """All 11 catalog materials with their strength limits in Pa."""
    assert MATERIAL_STRENGTHS == {
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


def test_strength_of_known_material():
    assert MaterialLookup().strength_of("titanium") == 1100e6


def test_strength_of_unknown_material_raises():
    with pytest.raises(UnknownMaterial) as exc:
        MaterialLookup().strength_of("unobtainium")
    assert exc.value.message == "Unknown material selected."


def test_list_materials_catalog():
    catalog = MaterialLookup().list_materials()
    assert len(catalog) == 11
    soil = next(m for m in catalog if m["id"] == "soil")
    assert soil["label"] == "Soil"
    assert soil["strength_mpa"] == 0.3


# ============================================================
# Registry
# ============================================================

def test_registry_has_both_impact_types():
    assert list_impact_models() == ["normal", "clean"]
    assert has_impact_model("normal")
    assert has_impact_model(ImpactType.CLEAN)
    assert not has_impact_model("glancing")


def test_registry_returns_model_instances():
    assert isinstance(get_impact_model("normal"), NormalImpactCalculator)
    assert isinstance(get_impact_model(ImpactType.CLEAN), CleanImpactCalculator)


def test_registry_unknown_type_raises():
    with pytest.raises(ValueError):
        get_impact_model("glancing")


# ============================================================
# Volume geometry
# ============================================================

def test_end_to_end_steel_normal():
    """5 cm contact, 10 cm crater, 2 cm deep, normal, steel."""
    breakdown = calc.compute_breakdown(5, CircularCrater(10), 2, ImpactType.NORMAL, "steel")
    assert breakdown.r_contact_m == pytest.approx(0.025)
    assert breakdown.r_crater_m == pytest.approx(0.05)
    assert breakdown.depth_m == pytest.approx(0.02)

    expected_volume = _frustum_volume(0.025, 0.05, 0.02)
    assert breakdown.volume_m3 == pytest.approx(expected_volume)
    assert breakdown.energy_j == pytest.approx(800e6 * expected_volume)
    assert breakdown.energy_j == pytest.approx(104719.755, rel=1e-6)


def test_equal_radii_normal_collapses_to_double_cylinder():
    """r_crater == r_contact → V = π r² h + π h/3 · 3r² = 2π r² h."""
    for d in (1.0, 5.0, 15.0):
        r = d / 200
        h = 0.03
        energy = calc.compute_energy(d, CircularCrater(d), 3, "normal", "wood")
        assert energy == pytest.approx(60e6 * 2 * math.pi * r * r * h)


def test_clean_circular_is_prism():
    energy = calc.compute_energy(5, CircularCrater(10), 2, "clean", "concrete")
    assert energy == pytest.approx(60e6 * math.pi * 0.05 ** 2 * 0.02)


def test_clean_elliptical_uses_true_ellipse_area():
    """Clean volume = π · a · b · h with a, b the semi-axes."""
    energy = calc.compute_energy(2, EllipticalCrater(20, 5), 4, "clean", "rock")
    a, b, h = 0.1, 0.025, 0.04
    assert energy == pytest.approx(200e6 * math.pi * a * b * h)


def test_elliptical_equivalent_radius():
    breakdown = calc.compute_breakdown(2, EllipticalCrater(20, 5), 1, "normal", "brick")
    assert breakdown.r_crater_m == pytest.approx(math.sqrt((20 / 200) * (5 / 200)))


def test_square_ellipse_matches_circle():
    """width == height behaves exactly like a circle of that diameter."""
    for impact in ("normal", "clean"):
        circle = calc.compute_energy(3, CircularCrater(12), 2.5, impact, "iron")
        ellipse = calc.compute_energy(3, EllipticalCrater(12, 12), 2.5, impact, "iron")
        assert ellipse == pytest.approx(circle)


def test_energy_linear_in_strength():
    """Doubling strength doubles energy: steel is 2× iron."""
    iron = calc.compute_energy(5, EllipticalCrater(14, 9), 2, "normal", "iron")
    steel = calc.compute_energy(5, EllipticalCrater(14, 9), 2, "normal", "steel")
    assert steel == pytest.approx(2 * iron)


def test_volume_models_directly():
    dims = CraterDimensions(r_contact_m=0.01, r_crater_m=0.02, depth_m=0.05, base_area_m2=0.001)
    assert CleanImpactCalculator().volume(dims) == pytest.approx(0.001 * 0.05)
    assert NormalImpactCalculator().volume(dims) == pytest.approx(_frustum_volume(0.01, 0.02, 0.05))


# ============================================================
# Validation
# ============================================================

def test_crater_smaller_than_contact_rejected():
    with pytest.raises(CraterTooSmall):
        calc.compute_energy(10, CircularCrater(9.99), 2, "normal", "steel")


def test_crater_equal_to_contact_accepted():
    assert calc.compute_energy(10, CircularCrater(10), 2, "normal", "steel") > 0


def test_elliptical_too_small_uses_equivalent_radius():
    """Width exceeds the contact, but sqrt(a·b) does not."""
    with pytest.raises(CraterTooSmall):
        calc.compute_energy(10, EllipticalCrater(20, 4), 2, "normal", "steel")


@pytest.mark.parametrize("depth", [0, -1, None, "", "abc", float("nan"), float("inf")])
def test_invalid_depth(depth):
    with pytest.raises(InvalidDepth):
        calc.compute_energy(5, CircularCrater(10), depth, "normal", "steel")


@pytest.mark.parametrize("diameter", [0, -3, None, "x", float("nan")])
def test_invalid_circular_diameter(diameter):
    with pytest.raises(InvalidCraterDimension) as exc:
        calc.compute_energy(5, CircularCrater(diameter), 2, "normal", "steel")
    assert "crater diameter" in exc.value.message


@pytest.mark.parametrize("width,height", [(10, 0), (None, 10), (10, "abc"), (-1, -1)])
def test_invalid_elliptical_dimensions(width, height):
    with pytest.raises(InvalidCraterDimension) as exc:
        calc.compute_energy(5, EllipticalCrater(width, height), 2, "normal", "steel")
    assert "width and height" in exc.value.message


@pytest.mark.parametrize("contact", [None, 0, -5, "abc"])
def test_missing_contact(contact):
    with pytest.raises(NoContactSelected):
        calc.compute_energy(contact, CircularCrater(10), 2, "normal", "steel")


def test_unknown_material_rejected():
    with pytest.raises(UnknownMaterial):
        calc.compute_energy(5, CircularCrater(10), 2, "normal", "kryptonite")


def test_depth_checked_before_crater():
    """Original alert order: depth first, then crater dimensions."""
    with pytest.raises(InvalidDepth):
        calc.compute_energy(5, CircularCrater(None), 0, "normal", "steel")


def test_string_inputs_are_parsed():
    numeric = calc.compute_energy(5, CircularCrater(10), 2, "normal", "steel")
    text = calc.compute_energy("5", CircularCrater(" 10 "), "2", "normal", "steel")
    assert text == pytest.approx(numeric)


def test_all_errors_are_validation_errors():
    for cls in (NoContactSelected, InvalidDepth, InvalidCraterDimension, CraterTooSmall,
                UnknownMaterial, EnergyOutOfRange):
        assert issubclass(cls, EnergyValidationError)
        assert cls().code


@pytest.mark.parametrize("impact", ["normal", "clean"])
def test_overflowing_volume_rejected(impact):
    """Finite inputs whose volume overflows to inf never come back as a result."""
    with pytest.raises(EnergyOutOfRange):
        calc.compute_energy(5, CircularCrater(1e160), 2, impact, "steel")


def test_large_but_finite_crater_accepted():
    energy = calc.compute_energy(5, CircularCrater(1e6), 2, "normal", "soil")
    assert math.isfinite(energy) and energy > 0
