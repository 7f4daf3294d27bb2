from typing import Any, Literal, TypeGuard, get_args

import numpy as np
import numpy.typing as npt

RealArray = npt.NDArray[np.floating[Any]]  # magnitudes or phases, any shape
ComplexArray = npt.NDArray[np.complexfloating[Any, Any]]  # rectangular values, any shape
StrArray = npt.NDArray[np.str_]  # formatted phasors, same shape as the input

AngleUnits = Literal["degrees", "radians"]
ANGLE_UNITS: tuple[str, ...] = get_args(AngleUnits)


class InvalidArgument(ValueError):
    """Argument outside of the accepted set of values"""


def is_angle_units(units: object) -> TypeGuard[AngleUnits]:
    return isinstance(units, str) and units in ANGLE_UNITS


def is_bool(flag: object) -> TypeGuard[bool]:
    return isinstance(flag, (bool, np.bool_))


def is_nonnegative_int(num: object) -> TypeGuard[int]:
    return isinstance(num, (int, np.integer)) and not is_bool(num) and num >= 0


def is_number(num: object) -> bool:
    return isinstance(num, (int, float, np.integer, np.floating)) and not is_bool(num)


def is_real_array(arr: np.ndarray) -> bool:
    return arr.dtype.kind in "iuf"


def is_numeric_array(arr: np.ndarray) -> bool:
    return arr.dtype.kind in "iufc"


def _as_number_array(values: npt.ArrayLike) -> np.ndarray:
    # ints wider than int64 only fit in object arrays
    arr = np.asarray(values)
    if arr.dtype == object and arr.size and all(is_number(x) for x in arr.flat):
        return arr.astype(np.float64)
    return arr


def check_angle_units(units: object) -> AngleUnits:
    if is_angle_units(units):
        return units
    raise InvalidArgument(f"Angle units must be one of {ANGLE_UNITS}; got {units!r}")


def check_bool(flag: object, name: str) -> bool:
    if is_bool(flag):
        return bool(flag)
    raise InvalidArgument(f"{name} must be a boolean; got {flag!r}")


def check_nonnegative_int(num: object, name: str) -> int:
    if is_nonnegative_int(num):
        return int(num)
    raise InvalidArgument(f"{name} must be a nonnegative integer; got {num!r}")


def check_real_array(values: npt.ArrayLike, name: str) -> RealArray:
    arr = _as_number_array(values)
    if not is_real_array(arr):
        raise InvalidArgument(f"{name} must be real-valued; got dtype {arr.dtype}")
    return arr.astype(np.float64, copy=False)


def check_numeric_array(values: npt.ArrayLike, name: str) -> ComplexArray:
    arr = _as_number_array(values)
    if not is_numeric_array(arr):
        raise InvalidArgument(f"{name} must be numeric; got dtype {arr.dtype}")
    return arr.astype(np.complex128, copy=False)


def check_same_shape(a: np.ndarray, b: np.ndarray, names: tuple[str, str]) -> None:
    if a.shape != b.shape:
        raise InvalidArgument(
            f"{names[0]} and {names[1]} must have the same shape; got {a.shape} and {b.shape}"
        )
