import numpy as np

from .arith import add, shift_left, shift_right, sub
from .errors import Status, raise_for_status
from .formatting import format_hex
from .layout import DEFAULT_LAYOUT
from .loading import load_int, to_int
from .muldiv import div, mul
from .powmod import powmod
from .primitives import compare, is_zero, same_layout


class BigNum:
    """
    Fixed-width unsigned integer stored as a numpy array of limbs,
    least significant limb first.

    The module-level operations (add, sub, mul, div, powmod, ...) write into
    caller-supplied outputs and return a Status. The operators below are
    shorthands that allocate the output and raise on a non-OK status.
    """

    def __init__(self, value=0, layout=None):
        # value can be an integer, a numpy array of limbs or another BigNum
        if isinstance(value, BigNum):
            self.layout = layout or value.layout
            same_layout(self, value)
            self.limbs = value.limbs.copy()
        elif isinstance(value, (int, np.integer)):
            self.layout = layout or DEFAULT_LAYOUT
            self.limbs = np.zeros(self.layout.n_limbs, dtype=self.layout.limb_dtype)
            status = load_int(value, self)
            if status is not Status.OK:
                raise_for_status(status, "loading {:#x}".format(int(value)))
        elif isinstance(value, np.ndarray):
            self.layout = layout or DEFAULT_LAYOUT
            if value.dtype != self.layout.limb_dtype or value.shape != (self.layout.n_limbs,):
                raise ValueError("Value must be a numpy array of {} {} elements".format(
                    self.layout.n_limbs, np.dtype(self.layout.limb_dtype).name))
            self.limbs = value.copy()
        else:
            raise TypeError("Unsupported type for BigNum initialization")

    def copy(self):
        return BigNum(self)

    def zeros_like(self):
        return BigNum(0, self.layout)

    def _binary(self, op, other):
        if not isinstance(other, BigNum):
            return NotImplemented
        out = self.zeros_like()
        raise_for_status(op(self, other, out), op.__name__)
        return out

    def __add__(self, other):
        return self._binary(add, other)

    def __sub__(self, other):
        return self._binary(sub, other)

    def __mul__(self, other):
        return self._binary(mul, other)

    def __divmod__(self, other):
        if not isinstance(other, BigNum):
            return NotImplemented
        quotient = self.zeros_like()
        remainder = self.zeros_like()
        raise_for_status(div(self, other, quotient, remainder), "div")
        return quotient, remainder

    def __floordiv__(self, other):
        quotient, _ = self.__divmod__(other)
        return quotient

    def __mod__(self, other):
        _, remainder = self.__divmod__(other)
        return remainder

    def _coerce(self, other):
        # plain integers are loaded into this value's layout
        if isinstance(other, BigNum):
            return other
        if isinstance(other, (int, np.integer)):
            return BigNum(other, self.layout)
        return None

    def __pow__(self, exponent, modulus=None):
        if modulus is None:
            raise TypeError("BigNum only supports modular pow(base, exponent, modulus)")
        exponent, modulus = self._coerce(exponent), self._coerce(modulus)
        if exponent is None or modulus is None:
            return NotImplemented
        result = self.zeros_like()
        raise_for_status(powmod(self, exponent, modulus, result), "powmod")
        return result

    def __lshift__(self, count):
        out = self.zeros_like()
        shift_left(self, count, out)
        return out

    def __rshift__(self, count):
        out = self.zeros_like()
        shift_right(self, count, out)
        return out

    def __eq__(self, other):
        if not isinstance(other, BigNum):
            return NotImplemented
        if (self.layout.bits, self.layout.limb_bits) != (other.layout.bits, other.layout.limb_bits):
            return False
        return compare(self, other) == 0

    __hash__ = None

    def __lt__(self, other):
        if not isinstance(other, BigNum):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other):
        if not isinstance(other, BigNum):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other):
        if not isinstance(other, BigNum):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other):
        if not isinstance(other, BigNum):
            return NotImplemented
        return compare(self, other) >= 0

    def __bool__(self):
        return not is_zero(self)

    def __int__(self):
        return to_int(self)

    __index__ = __int__

    def __repr__(self):
        return "BigNum({:#x}, bits={}, limb_bits={})".format(
            to_int(self), self.layout.bits, self.layout.limb_bits)

    def __str__(self):
        return format_hex(self)
