"""
Energy session — the state one user drives through the calculator.

Holds what the front end would otherwise keep in globals: the selected
contact, the geometry mode and raw inputs, the last result and the display
mode. The calculator and formatter stay pure; every mutation happens here,
through an explicit user action.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .calculators.crater_energy import CraterEnergyCalculator
from .calculators.registry import has_impact_model
from .config import settings
from .errors import EnergyValidationError, NoContactSelected
from .formatter import EnergyDisplay, format_energy
from .models import (
    CircularCrater,
    ContactOption,
    DisplayMode,
    EllipticalCrater,
    GeometryMode,
    ImpactType,
    NO_CONTACT_DISPLAY,
    get_contact_option,
)

logger = logging.getLogger(__name__)

# Singleton calculator — no state
calculator = CraterEnergyCalculator()


@dataclass
class EnergySession:
    selected_contact: Optional[ContactOption] = None
    geometry_mode: GeometryMode = GeometryMode.DIAMETER
    crater_diameter: Optional[str] = None
    crater_width: Optional[str] = None
    crater_height: Optional[str] = None
    depth: Optional[str] = None
    impact_type: ImpactType = ImpactType.NORMAL
    material: str = field(default_factory=lambda: settings.DEFAULT_MATERIAL)
    last_energy: Optional[float] = None
    display_mode: DisplayMode = field(default_factory=lambda: DisplayMode(settings.DEFAULT_DISPLAY_MODE))

    # --- Selection ---

    def select_contact(self, key: str) -> ContactOption:
        """Select exactly one contact option, replacing any previous selection."""
        option = get_contact_option(key)
        self.selected_contact = option
        logger.debug("Contact selected: %s", option.display_text)
        return option

    @property
    def contact_display(self) -> str:
        if self.selected_contact is None:
            return NO_CONTACT_DISPLAY
        return self.selected_contact.display_text

    # --- Modes ---

    def switch_geometry(self, mode) -> GeometryMode:
        """Anything other than width × height falls back to diameter."""
        if mode == GeometryMode.WIDTH_HEIGHT:
            self.geometry_mode = GeometryMode.WIDTH_HEIGHT
        else:
            self.geometry_mode = GeometryMode.DIAMETER
        return self.geometry_mode

    def toggle_display_format(self) -> EnergyDisplay:
        """Flip Auto/Full and re-render the stored result without recomputing."""
        if self.display_mode == DisplayMode.AUTO:
            self.display_mode = DisplayMode.FULL
        else:
            self.display_mode = DisplayMode.AUTO
        return self.render()

    @property
    def format_label(self) -> str:
        return "Format: Auto" if self.display_mode == DisplayMode.AUTO else "Format: Full"

    # --- Inputs ---

    def set_inputs(self, **inputs) -> None:
        """
        Update raw form inputs. Accepted keys: crater_diameter, crater_width,
        crater_height, depth, impact_type, material. An unknown impact type
        is rejected before anything changes; the rest is stored as typed and
        validated on calculate().
        """
        allowed = {"crater_diameter", "crater_width", "crater_height",
                   "depth", "impact_type", "material"}
        unknown = set(inputs) - allowed
        if unknown:
            raise TypeError(f"Unknown session inputs: {sorted(unknown)}")
        impact_type = inputs.get("impact_type")
        if impact_type is not None:
            if not has_impact_model(impact_type):
                raise ValueError(f"Unknown impact type: {impact_type}")
            inputs["impact_type"] = ImpactType(impact_type)
        for name, value in inputs.items():
            if value is None and name in ("impact_type", "material"):
                continue
            setattr(self, name, value)

    def crater_geometry(self):
        """The active crater variant built from the raw inputs."""
        if self.geometry_mode == GeometryMode.WIDTH_HEIGHT:
            return EllipticalCrater(width_cm=self.crater_width, height_cm=self.crater_height)
        return CircularCrater(diameter_cm=self.crater_diameter)

    # --- Actions ---

    def calculate(self) -> EnergyDisplay:
        """
        Run the calculator with the current selections.

        On success stores last_energy and returns the rendered display.
        On failure the validation error propagates and no state changes.
        """
        if self.selected_contact is None:
            logger.warning("Calculation rejected: %s", NoContactSelected.code)
            raise NoContactSelected()

        try:
            energy = calculator.compute_energy(
                self.selected_contact.diameter_cm,
                self.crater_geometry(),
                self.depth,
                self.impact_type,
                self.material,
            )
        except EnergyValidationError as e:
            logger.warning("Calculation rejected: %s", e.code)
            raise

        self.last_energy = energy
        return self.render()

    def render(self) -> EnergyDisplay:
        return format_energy(self.last_energy, self.display_mode)

    def reset(self) -> EnergyDisplay:
        """Clear selection, inputs and result. Material and display mode are kept."""
        self.selected_contact = None
        self.crater_diameter = None
        self.crater_width = None
        self.crater_height = None
        self.depth = None
        self.last_energy = None
        return self.render()
