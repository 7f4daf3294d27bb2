"""
Engineering notation formatting

Numbers are written as a mantissa in the [1, 1000) range times a power of
1000, with the exponent padded to three digits and an explicit sign, e.g.
``609.5066e-003`` or ``47.0027e+003``.

"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

import numpy as np

from .numpy_types import check_nonnegative_int


def _exponent_str(exponent: int) -> str:
    return f"e{exponent:+04d}"


def eng_notation(value: float, digits: int = 4) -> str:
    """
    Format real number in engineering notation

    Parameters
    ----------
    value : float
        Number to format
    digits : int
        Decimal places of the mantissa

    Returns
    -------
    str
        ``"<mantissa>e<sign><exponent>"``; ``"NaN"``, ``"Inf"`` or ``"-Inf"``
        for non-finite values

    Notes
    -----
    Rounding is half away from zero and is applied to the shortest decimal
    representation of ``value``. A mantissa rounded up to 1000 moves to the
    next exponent, so ``999.99995`` is written as ``1.0000e+003``.

    """
    digits = check_nonnegative_int(digits, "digits")
    value = float(value)
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "Inf" if value > 0 else "-Inf"
    if value == 0:
        return f"{0:.{digits}f}{_exponent_str(0)}"

    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits + 20)
        d = Decimal(repr(value))
        exponent = d.adjusted() // 3 * 3
        mantissa = d.scaleb(-exponent).quantize(quantum, rounding=ROUND_HALF_UP)
        if abs(mantissa) >= 1000:
            exponent += 3
            mantissa = d.scaleb(-exponent).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{mantissa:f}{_exponent_str(exponent)}"
