"""
Demonstration driver: runs a few operations and prints the limbs in hex.

    python -m fixedbn [--bits 64] [--limb-bits 32] [--trap-negative] [-v]
"""

import argparse
import logging

from . import (BigNum, Layout, Status, add, clear, div, load_int, mul, powmod, print_hex,
               shift_left_1, shift_right_1, sub)

BASIC_CONFIG = {
    "level": logging.INFO,
    "format": '[%(asctime)s] %(message)s',
    "datefmt": '%m/%d/%Y %H:%M:%S',
}

logger = logging.getLogger("fixedbn")


def _report(name, status):
    if status is not Status.OK:
        logger.info("%s returned %s", name, status.value)


def run_demo(layout):
    a, b, c = BigNum(0, layout), BigNum(0, layout), BigNum(0, layout)
    top = layout.n_limbs - 1
    mask = layout.limb_mask

    print("N_LIMBS = {}, LIMB_BITS = {}".format(layout.n_limbs, layout.limb_bits))

    print("-- clear and add --")
    clear(a)
    clear(b)
    a.limbs[0] = b.limbs[0] = mask
    _report("add", add(a, b, c))
    print_hex("a   = ", a)
    print_hex("b   = ", b)
    print_hex("a+b = ", c)

    print("-- shift left --")
    clear(c)
    c.limbs[0] = 1 << (layout.limb_bits - 2)
    print_hex("c     = ", c)
    shift_left_1(c, c)
    print_hex("shl 1 = ", c)
    shift_left_1(c, b)
    print_hex("shlCp = ", b)
    print_hex("orig  = ", c)

    print("-- clear and shr --")
    clear(c)
    c.limbs[min(1, top)] = 1
    print_hex("c     = ", c)
    shift_right_1(c, c)
    print_hex("shr 1 = ", c)
    shift_right_1(c, b)
    print_hex("shrCp = ", b)
    print_hex("orig  = ", c)

    print("-- clear and subtract --")
    load_int(0x42FFEAFFEE & ((1 << layout.bits) - 1), a)
    load_int(0x03DDAEAFEA & ((1 << layout.bits) - 1), b)
    _report("sub", sub(a, b, c))
    print_hex("a     = ", a)
    print_hex("b     = ", b)
    print_hex("a - b = ", c)

    clear(a)
    clear(b)
    a.limbs[min(1, top)] = 1
    b.limbs[min(1, top)] = 2
    _report("sub", sub(a, b, c))
    print_hex("a     = ", a)
    print_hex("b     = ", b)
    print_hex("a - b = ", c)

    print("-- multiply, divide, powmod --")
    load_int(0xFEED, a)
    load_int(0xBEEF, b)
    _report("mul", mul(a, b, c))
    print_hex("a * b = ", c)
    _report("div", div(c, b, a, None))
    print_hex("c / b = ", a)

    load_int(4, a)
    load_int(13, b)
    modulus = BigNum(0, layout)
    _report("load_int", load_int(497, modulus))
    _report("powmod", powmod(a, b, modulus, c))
    print_hex("4^13 mod 497 = ", c)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Fixed-width bignum demonstration.')
    parser.add_argument('--bits', type=int, default=64, help='total width in bits [default=64]')
    parser.add_argument('--limb-bits', type=int, default=16, choices=(8, 16, 32),
                        help='limb width in bits [default=16]')
    parser.add_argument('--trap-negative', action='store_true',
                        help='report negative subtraction results instead of wrapping')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    args = parser.parse_args(argv)

    config = dict(BASIC_CONFIG)
    if args.verbose:
        config["level"] = logging.DEBUG
    logging.basicConfig(**config)

    try:
        layout = Layout(bits=args.bits, limb_bits=args.limb_bits, trap_negative=args.trap_negative)
    except ValueError as e:
        parser.error(str(e))
    run_demo(layout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
