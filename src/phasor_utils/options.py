"""Per-call conversion settings"""

from __future__ import annotations

from dataclasses import dataclass

from .numpy_types import AngleUnits, check_angle_units, check_bool, check_nonnegative_int

UNITS_SUFFIX = {"degrees": "°", "radians": " rad"}


@dataclass(frozen=True)
class RectOptions:
    """Settings for phasor to rectangular conversion"""
    input_units: AngleUnits = "degrees"

    def __post_init__(self):
        check_angle_units(self.input_units)


@dataclass(frozen=True)
class PhasorOptions:
    """
    Settings for rectangular to phasor conversion

    Parameters
    ----------
    angle_units : {"degrees", "radians"}
        Units of the returned phase
    return_data : bool
        Return ``(magnitudes, phases)`` arrays instead of formatted strings
    digits : int
        Decimal places of the engineering-notation mantissa in formatted output

    """
    angle_units: AngleUnits = "degrees"
    return_data: bool = False
    digits: int = 4

    def __post_init__(self):
        check_angle_units(self.angle_units)
        check_bool(self.return_data, "return_data")
        check_nonnegative_int(self.digits, "digits")

    @property
    def units_suffix(self) -> str:
        return UNITS_SUFFIX[self.angle_units]
