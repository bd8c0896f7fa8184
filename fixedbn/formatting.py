import sys


def format_hex(a):
    """
    Render a BigNum in hexadecimal.

    Limbs are printed most significant first, each zero-padded to limb_bits/4
    digits and separated by an underscore, without a 0x prefix.
    """
    width = a.layout.hex_digits
    return "_".join("{:0{}X}".format(int(limb), width) for limb in reversed(a.limbs))


def print_hex(prefix, a, file=None):
    """Print a BigNum in hexadecimal, prefixed with `prefix` and followed by a newline."""
    print(prefix + format_hex(a), file=file or sys.stdout)
