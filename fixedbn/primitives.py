"""
Limb-level primitives: clearing, copying, zero test, comparison and bit access.
"""

import numpy as np

from .errors import BitIndexError, Status, WidthMismatchError


def same_layout(first, *others):
    """
    Return the layout shared by all operands.

    Only the shape (width and limb width) has to agree; the subtraction policy
    is taken from the first operand by the operations that use it.
    """
    layout = first.layout
    for other in others:
        if (other.layout.bits, other.layout.limb_bits) != (layout.bits, layout.limb_bits):
            raise WidthMismatchError(
                "operands differ in shape: {}/{} bits vs {}/{} bits".format(
                    layout.bits, layout.limb_bits, other.layout.bits, other.layout.limb_bits))
    return layout


def clear(out):
    out.limbs.fill(0)
    return Status.OK


def copy(src, out):
    same_layout(src, out)
    np.copyto(out.limbs, src.limbs)
    return Status.OK


def is_zero(a):
    return not a.limbs.any()


def compare(a, b):
    """
    Three-way comparison.

    :return: -1 if a < b, 0 if a == b, 1 if a > b
    """
    same_layout(a, b)
    differ = np.flatnonzero(a.limbs != b.limbs)
    if differ.size == 0:
        return 0
    top = differ[-1]
    return -1 if a.limbs[top] < b.limbs[top] else 1


def _locate(a, index):
    layout = a.layout
    if not 0 <= index < layout.bits:
        return None
    return divmod(index, layout.limb_bits)


def get_bit(a, index):
    """
    Return bit `index` of a (0 is the least significant bit).

    :raises BitIndexError: if index is outside [0, W). Unlike set_bit, no
        status is returned, since the result is the bit itself.
    """
    where = _locate(a, index)
    if where is None:
        raise BitIndexError("bit index {} outside [0, {})".format(index, a.layout.bits))
    limb, offset = where
    return bool((int(a.limbs[limb]) >> offset) & 1)


def set_bit(a, index, value):
    """Set or clear bit `index` of a in place."""
    where = _locate(a, index)
    if where is None:
        return Status.INDEX_OUT_OF_RANGE
    limb, offset = where
    word = int(a.limbs[limb])
    if value:
        word |= 1 << offset
    else:
        word &= ~(1 << offset)
    a.limbs[limb] = word
    return Status.OK
