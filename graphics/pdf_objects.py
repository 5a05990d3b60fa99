"""
Conversion of Python values into pikepdf objects.
"""
import math
from decimal import Decimal
from typing import Iterable, Union

import pikepdf
from pikepdf import Name


def pdf_number(value) -> Union[int, Decimal]:
    """
    Convert a number into a pikepdf operand.

    Integral values become integers, others a Decimal with 5 fractional
    digits, which is how reals are written into content streams.

    Raises:
        TypeError: If value is a boolean
        ValueError: If value is NaN or infinite
    """
    if isinstance(value, bool):
        raise TypeError("booleans are not PDF numbers")
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"cannot write non-finite number: {value}")
    rounded = round(value, 5)
    if rounded.is_integer():
        return int(rounded)
    return Decimal(f"{rounded:.5f}")


def pdf_name(name: str) -> Name:
    """Name object for a bare name such as 'DeviceRGB'."""
    return Name(name if name.startswith('/') else '/' + name)


def pdf_array(values: Iterable[float]) -> pikepdf.Array:
    """Array of numbers."""
    return pikepdf.Array([pdf_number(v) for v in values])
