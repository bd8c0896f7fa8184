import logging

from .arith import shift_right_1
from .errors import Status
from .loading import load_int
from .muldiv import div, mul
from .primitives import copy, get_bit, is_zero, same_layout

logger = logging.getLogger(__name__)


def _mulmod(a, b, modulus, out):
    status = mul(a, b, out)
    if status is not Status.OK:
        return status
    return div(out, modulus, None, out)


def powmod(base, exponent, modulus, result):
    """
    Modular exponentiation by right-to-left square-and-multiply.

    Operation: result = base ^ exponent mod modulus

    Every intermediate product is reduced before the next one, but the product
    of two residues still has to fit in W bits, so W must be at least twice
    the width of the modulus. Otherwise mul reports Status.OVERFLOW and it is
    returned as is.

    :return: Status.DIVIDE_BY_ZERO if modulus is zero, whatever the exponent.
    """
    same_layout(base, exponent, modulus, result)
    if is_zero(modulus):
        logger.debug("powmod: modulus is zero")
        return Status.DIVIDE_BY_ZERO

    acc = base.zeros_like()
    load_int(1, acc)
    # 1 mod 1 == 0
    div(acc, modulus, None, acc)
    b = base.zeros_like()
    div(base, modulus, None, b)
    e = exponent.copy()

    while not is_zero(e):
        if get_bit(e, 0):
            status = _mulmod(acc, b, modulus, acc)
            if status is not Status.OK:
                logger.debug("powmod: multiply step failed: %s", status.value)
                return status
        shift_right_1(e, e)
        if is_zero(e):
            break
        status = _mulmod(b, b, modulus, b)
        if status is not Status.OK:
            logger.debug("powmod: squaring step failed: %s", status.value)
            return status

    copy(acc, result)
    return Status.OK
