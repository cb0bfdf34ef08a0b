from fastapi import APIRouter, HTTPException
from typing import List
from .. import schemas
from ..calculators.material_lookup import MaterialLookup
from ..calculators.registry import list_impact_models
from ..models import CONTACT_OPTIONS, IMPACT_TYPE_LABELS, ImpactType

router = APIRouter(tags=["catalog"])

lookup = MaterialLookup()


def contact_to_schema(option) -> schemas.ContactOption:
    return schemas.ContactOption(
        key=option.key,
        label=option.label,
        group=option.group,
        diameter_cm=option.diameter_cm,
        display_text=option.display_text,
    )


@router.get("/materials/", response_model=List[schemas.Material])
def list_materials():
    return lookup.list_materials()


@router.get("/materials/{material_id}", response_model=schemas.Material)
def get_material(material_id: str):
    for material in lookup.list_materials():
        if material["id"] == material_id:
            return material
    raise HTTPException(status_code=404, detail=f"Material not found: {material_id}")


@router.get("/contacts/", response_model=List[schemas.ContactOption])
def list_contacts():
    """The 8 selectable contact surfaces, impact parts first."""
    return [contact_to_schema(opt) for opt in CONTACT_OPTIONS]


@router.get("/impact-types/", response_model=List[schemas.ImpactTypeOption])
def list_impact_types():
    """Impact types that have a registered volume model."""
    return [
        schemas.ImpactTypeOption(id=impact, label=IMPACT_TYPE_LABELS[ImpactType(impact)])
        for impact in list_impact_models()
    ]
