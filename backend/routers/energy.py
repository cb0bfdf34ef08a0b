"""
Stateless energy API — one request in, one result out. No session.

POST /api/energy/calculate — compute crater energy and its display
POST /api/energy/format    — format an arbitrary joule value
"""

from fastapi import APIRouter

from .. import schemas
from ..calculators.crater_energy import CraterEnergyCalculator
from ..formatter import format_energy
from ..models import CircularCrater, EllipticalCrater, GeometryMode

router = APIRouter(prefix="/energy", tags=["energy"])

calculator = CraterEnergyCalculator()


def display_to_schema(display) -> schemas.EnergyDisplay:
    return schemas.EnergyDisplay(magnitude=display.magnitude, unit=display.unit, text=display.text)


@router.post("/calculate", response_model=schemas.EnergyResult,
             responses={422: {"model": schemas.ValidationErrorResponse}})
def calculate_energy(request: schemas.EnergyRequest):
    if request.geometry_mode == GeometryMode.WIDTH_HEIGHT:
        crater = EllipticalCrater(width_cm=request.crater_width_cm, height_cm=request.crater_height_cm)
    else:
        crater = CircularCrater(diameter_cm=request.crater_diameter_cm)

    # Validation errors are turned into 422 responses by the app-level handler
    breakdown = calculator.compute_breakdown(
        request.contact_diameter_cm,
        crater,
        request.depth_cm,
        request.impact_type,
        request.material,
    )
    display = format_energy(breakdown.energy_j, request.display_mode)

    return schemas.EnergyResult(
        energy_j=breakdown.energy_j,
        volume_m3=breakdown.volume_m3,
        strength_pa=breakdown.strength_pa,
        r_contact_m=breakdown.r_contact_m,
        r_crater_m=breakdown.r_crater_m,
        depth_m=breakdown.depth_m,
        display=display_to_schema(display),
    )


@router.post("/format", response_model=schemas.EnergyDisplay)
def format_joules(request: schemas.FormatRequest):
    return display_to_schema(format_energy(request.joules, request.display_mode))
