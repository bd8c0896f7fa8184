"""
Carry-propagating addition and subtraction, and bit shifts.

Addition and subtraction walk the limbs from least to most significant with an
accumulator twice as wide as a limb: the low limb_bits of the accumulator are
stored, the rest is carried (or borrowed) into the next limb.
"""

import numpy as np

from .errors import Status
from .primitives import same_layout


def add(a, b, out):
    """
    Add two BigNums.

    Operation: out = a + b

    :return: Status.OVERFLOW if the sum does not fit in the layout width, in
        which case out holds the low bits of the sum.
    """
    layout = same_layout(a, b, out)
    acc = layout.acc_dtype
    # numpy 1.x promotes uint64 with a Python int to float64
    mask, shift = acc(layout.limb_mask), acc(layout.limb_bits)
    x, y, dst = a.limbs, b.limbs, out.limbs

    m = acc(0)
    for i in range(layout.n_limbs):
        m += acc(x[i]) + acc(y[i])
        dst[i] = m & mask
        m >>= shift

    # a stray carry means the true sum needs more than W bits
    if m:
        return Status.OVERFLOW
    return Status.OK


def sub(a, b, out, trap_negative=None):
    """
    Subtract b from a.

    Operation: out = a - b (mod 2^W)

    out always receives the wrapped difference. When a < b the result depends
    on the policy: with trap_negative the call returns Status.NEGATIVE_RESULT,
    otherwise Status.OK. trap_negative=None uses the policy of a's layout.
    """
    layout = same_layout(a, b, out)
    if trap_negative is None:
        trap_negative = layout.trap_negative
    sacc = layout.signed_acc_dtype
    mask, shift = sacc(layout.limb_mask), sacc(layout.limb_bits)
    x, y, dst = a.limbs, b.limbs, out.limbs

    m = sacc(0)
    for i in range(layout.n_limbs):
        m = sacc(x[i]) - sacc(y[i]) + m
        dst[i] = m & mask
        # arithmetic shift: -1 while borrowing, 0 otherwise
        m >>= shift

    if m and trap_negative:
        return Status.NEGATIVE_RESULT
    return Status.OK


def shift_left(a, count, out):
    """
    Shift a left by `count` bits into out. Bits moved past the top are lost.

    a and out may be the same BigNum.
    """
    if count < 0:
        raise ValueError("negative shift count")
    layout = same_layout(a, out)
    n = layout.n_limbs
    words, bits = divmod(count, layout.limb_bits)

    acc = layout.acc_dtype
    src = a.limbs.astype(acc)
    res = np.zeros_like(src)
    if words < n:
        res[words:] = src[:n - words]
    if bits:
        spill = res >> acc(layout.limb_bits - bits)
        res = (res << acc(bits)) & acc(layout.limb_mask)
        res[1:] |= spill[:-1]

    out.limbs[:] = res.astype(layout.limb_dtype)
    return Status.OK


def shift_right(a, count, out):
    """
    Shift a right by `count` bits into out. Bits moved past bit 0 are lost.

    a and out may be the same BigNum.
    """
    if count < 0:
        raise ValueError("negative shift count")
    layout = same_layout(a, out)
    n = layout.n_limbs
    words, bits = divmod(count, layout.limb_bits)

    acc = layout.acc_dtype
    src = a.limbs.astype(acc)
    res = np.zeros_like(src)
    if words < n:
        res[:n - words] = src[words:]
    if bits:
        spill = (res << acc(layout.limb_bits - bits)) & acc(layout.limb_mask)
        res = res >> acc(bits)
        res[:-1] |= spill[1:]

    out.limbs[:] = res.astype(layout.limb_dtype)
    return Status.OK


def shift_left_1(a, out):
    """Operation: out = a << 1. The top bit of a is discarded."""
    return shift_left(a, 1, out)


def shift_right_1(a, out):
    """Operation: out = a >> 1."""
    return shift_right(a, 1, out)
