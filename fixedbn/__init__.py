"""
fixedbn - fixed-width unsigned big numbers built from numpy limbs.
"""

from .arith import add, shift_left, shift_left_1, shift_right, shift_right_1, sub
from .batch import BatchModExp
from .bignum import BigNum
from .errors import (BigNumError, BigNumOverflowError, BitIndexError, DivideByZeroError,
                     NegativeResultError, Status, WidthMismatchError, raise_for_status)
from .formatting import format_hex, print_hex
from .layout import DEFAULT_LAYOUT, Layout
from .loading import load_int, to_int
from .muldiv import div, mul
from .powmod import powmod
from .primitives import clear, compare, copy, get_bit, is_zero, set_bit

__version__ = "0.1.0"
