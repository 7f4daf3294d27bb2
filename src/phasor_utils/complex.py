"""Conversions between phasor and rectangular forms of complex data"""

from __future__ import annotations

import logging
from typing import NamedTuple

import numpy as np
import numpy.typing as npt

from .engineering import eng_notation
from .numpy_types import (
    AngleUnits,
    ComplexArray,
    RealArray,
    StrArray,
    check_angle_units,
    check_nonnegative_int,
    check_numeric_array,
    check_real_array,
    check_same_shape,
)
from .options import UNITS_SUFFIX, PhasorOptions, RectOptions

logger = logging.getLogger(__name__)

ANGLE_SYMBOL = "\u2220"


def phasor2rect(
    magnitudes: npt.ArrayLike, phases: npt.ArrayLike, *, input_units: AngleUnits = "degrees"
) -> ComplexArray:
    """
    Convert phasors to rectangular (complex) form

    Parameters
    ----------
    magnitudes : array_like of float
        Phasor magnitudes
    phases : array_like of float
        Phasor phases; must have the same shape as `magnitudes`
    input_units : {"degrees", "radians"}
        Units of `phases`

    Returns
    -------
    ComplexArray
        ``magnitudes * exp(1j * phases)`` with the shape of the inputs

    Raises
    ------
    InvalidArgument
        If shapes differ, inputs are not real or `input_units` is unknown

    Examples
    --------
    >>> phasor2rect([[1, 20], [-5, 1]], [[45, -30], [0, 90]])
    array([[ 0.70710678+0.70710678j, 17.32050808-10.j        ],
           [-5.        +0.j        ,  0.        +1.j        ]])

    """
    opts = RectOptions(input_units)
    mags = check_real_array(magnitudes, "magnitudes")
    phis = check_real_array(phases, "phases")
    check_same_shape(mags, phis, ("magnitudes", "phases"))

    if opts.input_units == "degrees":
        phis = np.deg2rad(phis)
    logger.debug("Converting %s phasors to rectangular form (%s)", mags.shape, opts.input_units)
    return mags * np.exp(1j * phis)


def rect2phasor(
    values: npt.ArrayLike,
    *,
    angle_units: AngleUnits = "degrees",
    return_data: bool = False,
    digits: int = 4,
) -> tuple[RealArray, RealArray] | StrArray:
    """
    Convert rectangular (complex) values to phasor form

    Parameters
    ----------
    values : array_like of complex
        Rectangular values of any shape
    angle_units : {"degrees", "radians"}
        Units of the resulting phase
    return_data : bool
        If True, return magnitude and phase arrays; otherwise return
        formatted phasor strings
    digits : int
        Decimal places of the mantissa in formatted strings

    Returns
    -------
    (RealArray, RealArray) or StrArray
        Magnitudes and phases, or strings such as ``"1.4142e+000 ∠ 45.0000e+000°"``;
        every array has the shape of `values`

    Raises
    ------
    InvalidArgument
        If `values` is not numeric or an option is out of range

    """
    opts = PhasorOptions(angle_units, return_data, digits)
    z = check_numeric_array(values, "values")

    mags = np.abs(z)
    phases = np.angle(z)
    if opts.angle_units == "degrees":
        phases = np.rad2deg(phases)
    logger.debug("Converting %s rectangular values to phasors (%s)", z.shape, opts.angle_units)

    if opts.return_data:
        return mags, phases

    suffix = opts.units_suffix
    fmt = np.frompyfunc(lambda m, p: _format_phasor(m, p, suffix, opts.digits), 2, 1)
    return np.asarray(fmt(mags, phases), dtype=str)


def _format_phasor(magnitude: float, phase: float, suffix: str, digits: int) -> str:
    mag_str, phase_str = eng_notation(magnitude, digits), eng_notation(phase, digits)
    return f"{mag_str} {ANGLE_SYMBOL} {phase_str}{suffix}"


def format_phasor(
    magnitude: float, phase: float, angle_units: AngleUnits = "degrees", digits: int = 4
) -> str:
    """Format single phasor as ``"<magnitude> ∠ <phase><units>"`` in engineering notation"""
    units = check_angle_units(angle_units)
    digits = check_nonnegative_int(digits, "digits")
    return _format_phasor(magnitude, phase, UNITS_SUFFIX[units], digits)


class Phasor(NamedTuple):
    """Single phasor value"""
    magnitude: float
    phase: float
    units: AngleUnits = "degrees"

    @classmethod
    def from_complex(cls, z: complex, units: AngleUnits = "degrees") -> Phasor:
        mag, phase = rect2phasor(z, angle_units=units, return_data=True)
        return cls(float(mag), float(phase), units)

    def to_complex(self) -> complex:
        return complex(phasor2rect(self.magnitude, self.phase, input_units=self.units))

    def __str__(self) -> str:
        return format_phasor(self.magnitude, self.phase, self.units)
