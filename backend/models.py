from dataclasses import dataclass
import enum

from .errors import NoContactSelected


# --- Enums ---

class ImpactType(str, enum.Enum):
    NORMAL = "normal"   # partial penetration: cylinder + frustum
    CLEAN = "clean"     # through penetration: prism


IMPACT_TYPE_LABELS = {
    ImpactType.NORMAL: "Normal (partial penetration)",
    ImpactType.CLEAN: "Clean (through penetration)",
}


class DisplayMode(str, enum.Enum):
    AUTO = "auto"
    FULL = "full"


class GeometryMode(str, enum.Enum):
    DIAMETER = "diameter"
    WIDTH_HEIGHT = "wh"


class ContactGroup(str, enum.Enum):
    IMPACT = "impact"
    TARGET = "target"


CONTACT_GROUP_LABELS = {
    ContactGroup.IMPACT: "Impact part",
    ContactGroup.TARGET: "Target part",
}

NO_CONTACT_DISPLAY = "—"


# --- Contact options ---

@dataclass(frozen=True)
class ContactOption:
    key: str
    label: str
    group: ContactGroup
    diameter_cm: float

    @property
    def display_text(self) -> str:
        """Selection summary, e.g. 'Impact part — Fist (8 cm)'."""
        group = CONTACT_GROUP_LABELS.get(self.group, "")
        return f"{group} — {self.label} ({self.diameter_cm:g} cm)"


# The 8 selectable contact surfaces. Diameters in cm.
CONTACT_OPTIONS = [
    # Impact part — the thing doing the hitting
    ContactOption("fingertip", "Fingertip", ContactGroup.IMPACT, 1.5),
    ContactOption("knuckle", "Knuckle", ContactGroup.IMPACT, 3.0),
    ContactOption("fist", "Fist", ContactGroup.IMPACT, 8.0),
    ContactOption("palm", "Palm", ContactGroup.IMPACT, 10.0),
    # Target part — the surface being hit
    ContactOption("nail_head", "Nail head", ContactGroup.TARGET, 1.0),
    ContactOption("bolt", "Bolt", ContactGroup.TARGET, 2.0),
    ContactOption("pipe_end", "Pipe end", ContactGroup.TARGET, 5.0),
    ContactOption("plate", "Plate", ContactGroup.TARGET, 15.0),
]

CONTACT_OPTIONS_BY_KEY = {opt.key: opt for opt in CONTACT_OPTIONS}


def get_contact_option(key: str) -> ContactOption:
    """Look up a contact option by key. Unknown keys count as no selection."""
    if key not in CONTACT_OPTIONS_BY_KEY:
        raise NoContactSelected()
    return CONTACT_OPTIONS_BY_KEY[key]


# --- Crater geometry variants ---

@dataclass(frozen=True)
class CircularCrater:
    diameter_cm: float


@dataclass(frozen=True)
class EllipticalCrater:
    """Width and height are the two orthogonal diameters of the ellipse."""
    width_cm: float
    height_cm: float
