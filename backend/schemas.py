from pydantic import BaseModel
from typing import Optional, Union
from .models import DisplayMode, GeometryMode, ImpactType, ContactGroup

# Raw form values: numbers or the text a user typed. Parsed by the calculator.
RawNumber = Optional[Union[float, str]]


class Material(BaseModel):
    id: str
    label: str
    strength_pa: float
    strength_mpa: float


class ContactOption(BaseModel):
    key: str
    label: str
    group: ContactGroup
    diameter_cm: float
    display_text: str


class EnergyDisplay(BaseModel):
    magnitude: str
    unit: str
    text: str


class EnergyRequest(BaseModel):
    contact_diameter_cm: RawNumber = None
    geometry_mode: GeometryMode = GeometryMode.DIAMETER
    crater_diameter_cm: RawNumber = None
    crater_width_cm: RawNumber = None
    crater_height_cm: RawNumber = None
    depth_cm: RawNumber = None
    impact_type: ImpactType = ImpactType.NORMAL
    material: str
    display_mode: DisplayMode = DisplayMode.AUTO


class EnergyResult(BaseModel):
    energy_j: float
    volume_m3: float
    strength_pa: float
    r_contact_m: float
    r_crater_m: float
    depth_m: float
    display: EnergyDisplay


class FormatRequest(BaseModel):
    joules: Optional[float] = None
    display_mode: DisplayMode = DisplayMode.AUTO


class ValidationErrorResponse(BaseModel):
    error: str
    detail: str


# --- Session ---

class StartSessionRequest(BaseModel):
    material: Optional[str] = None
    display_mode: Optional[DisplayMode] = None


class ContactRequest(BaseModel):
    key: str


class GeometryRequest(BaseModel):
    mode: str


class SessionInputsRequest(BaseModel):
    crater_diameter: RawNumber = None
    crater_width: RawNumber = None
    crater_height: RawNumber = None
    depth: RawNumber = None
    impact_type: Optional[ImpactType] = None
    material: Optional[str] = None


class SessionStatus(BaseModel):
    session_id: str
    selected_contact: Optional[ContactOption] = None
    contact_display: str
    geometry_mode: GeometryMode
    crater_diameter: RawNumber = None
    crater_width: RawNumber = None
    crater_height: RawNumber = None
    depth: RawNumber = None
    impact_type: ImpactType
    material: str
    last_energy: Optional[float] = None
    display_mode: DisplayMode
    format_label: str
    display: EnergyDisplay


class ImpactTypeOption(BaseModel):
    id: ImpactType
    label: str
