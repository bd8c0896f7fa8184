"""
Binary long multiplication and restoring binary long division.

Both are built only from the limb primitives and the carry-propagating
arithmetic, one bit of the operand per step.
"""

import logging

from .arith import add, shift_left_1, shift_right_1, sub
from .errors import Status
from .primitives import compare, copy, get_bit, is_zero, same_layout, set_bit

logger = logging.getLogger(__name__)


def mul(a, b, out):
    """
    Multiply two BigNums by shift-and-add.

    Operation: out = a * b

    Works on private copies, so out may alias a or b.

    Unlike plain shift-and-add, this also reports overflow when the shifted
    multiplicand loses its top bit while bits of a remain, for example
    2 * 2^(W-1). Products that fit give the same result.

    :return: Status.OVERFLOW if the product does not fit in W bits; out is
        left untouched in that case.
    """
    layout = same_layout(a, b, out)
    top = layout.bits - 1
    x = a.copy()
    y = b.copy()
    acc = a.zeros_like()

    while not is_zero(x):
        if get_bit(x, 0):
            status = add(acc, y, acc)
            if status is not Status.OK:
                logger.debug("mul: partial sum overflowed %d bits", layout.bits)
                return status
        shift_right_1(x, x)
        # y is about to lose a bit while a still has bits left to multiply it with
        if get_bit(y, top) and not is_zero(x):
            logger.debug("mul: shifted multiplicand overflowed %d bits", layout.bits)
            return Status.OVERFLOW
        shift_left_1(y, y)

    copy(acc, out)
    return Status.OK


def div(n, d, q=None, r=None):
    """
    Divide n by d with restoring binary long division.

    Operation: q = n / d, r = n % d

    :param n: Dividend
    :param d: Divisor
    :param q: Quotient output, or None if not wanted
    :param r: Remainder output, or None if not wanted
    :return: Status.DIVIDE_BY_ZERO if d is zero, outputs untouched.
    """
    layout = same_layout(n, d, *[x for x in (q, r) if x is not None])
    if is_zero(d):
        logger.debug("div: divisor is zero")
        return Status.DIVIDE_BY_ZERO

    top = layout.bits - 1
    rem = n.zeros_like()
    quot = n.zeros_like()

    for i in range(top, -1, -1):
        # with d >= 2^(W-1) the shifted remainder can need W+1 bits
        carry = get_bit(rem, top)
        shift_left_1(rem, rem)
        set_bit(rem, 0, get_bit(n, i))
        if carry:
            # true remainder is 2^W + rem > d; the wrapped difference is exact
            sub(rem, d, rem, trap_negative=False)
            set_bit(quot, i, True)
        elif compare(rem, d) >= 0:
            status = sub(rem, d, rem, trap_negative=True)
            if status is not Status.OK:
                logger.debug("div: subtraction failed at bit %d: %s", i, status.value)
                return status
            set_bit(quot, i, True)

    if q is not None:
        copy(quot, q)
    if r is not None:
        copy(rem, r)
    return Status.OK
