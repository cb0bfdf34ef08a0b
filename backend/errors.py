"""
Validation errors raised by the energy calculation core.

Every error is a local input problem. The session and the API layer catch
them, show the message to the user, and leave prior state untouched.
"""

from typing import Optional


class EnergyValidationError(ValueError):
    """Base class for all calculation input failures."""

    code = "validation_error"
    default_message = "Invalid input."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NoContactSelected(EnergyValidationError):
    code = "no_contact_selected"
    default_message = "Please select one of the 8 contact options."


class InvalidDepth(EnergyValidationError):
    code = "invalid_depth"
    default_message = "Please enter a valid depth/thickness (greater than 0)."


class InvalidCraterDimension(EnergyValidationError):
    code = "invalid_crater_dimension"
    default_message = "Please enter a valid crater diameter (greater than 0)."


class CraterTooSmall(EnergyValidationError):
    code = "crater_too_small"
    default_message = (
        "Crater size is smaller than contact diameter — "
        "please enter correct crater dimensions."
    )


class UnknownMaterial(EnergyValidationError):
    code = "unknown_material"
    default_message = "Unknown material selected."


class EnergyOutOfRange(EnergyValidationError):
    code = "energy_out_of_range"
    default_message = "Crater dimensions are too large to compute an energy — please enter smaller values."
