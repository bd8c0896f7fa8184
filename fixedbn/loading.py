"""
Conversion between native Python integers and BigNum limbs.
"""

from .errors import Status
from .primitives import clear


def load_int(value, out):
    """
    Load a non-negative integer into out, low limb first.

    :return: Status.OVERFLOW if value needs more than W bits; out then holds
        the low W bits of value.
    """
    value = int(value)
    if value < 0:
        raise ValueError("BigNum is unsigned, cannot load {}".format(value))
    layout = out.layout
    clear(out)
    for i in range(layout.n_limbs):
        if not value:
            break
        out.limbs[i] = value & layout.limb_mask
        value >>= layout.limb_bits
    if value:
        return Status.OVERFLOW
    return Status.OK


def to_int(a):
    """Combine the limbs of a back into a Python integer."""
    value = 0
    for limb in reversed(a.limbs):
        value = (value << a.layout.limb_bits) | int(limb)
    return value
