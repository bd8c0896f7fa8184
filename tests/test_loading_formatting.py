import numpy as np
import pytest

from fixedbn import BigNum, Layout, Status, format_hex, load_int, print_hex, to_int


def test_load_int_round_trip(bn, layout, rng):
    values = [0, 1, layout.limb_mask, layout.limb_mask + 1, (1 << layout.bits) - 1]
    values += [rng.getrandbits(layout.bits) for _ in range(20)]
    for value in values:
        out = bn(0x55)
        assert load_int(value, out) is Status.OK
        assert to_int(out) == value


def test_load_int_fills_low_limb_first(layout):
    out = BigNum(0, layout)
    load_int(1 << layout.limb_bits, out)
    assert int(out.limbs[0]) == 0
    assert int(out.limbs[1]) == 1


def test_load_int_overflow(bn, layout):
    out = bn()
    assert load_int(1 << layout.bits, out) is Status.OVERFLOW
    assert to_int(out) == 0
    assert load_int((1 << (layout.bits + 5)) | 3, out) is Status.OVERFLOW
    assert to_int(out) == 3


def test_load_int_accepts_numpy_integers(bn):
    out = bn()
    assert load_int(np.uint16(0xBEEF), out) is Status.OK
    assert to_int(out) == 0xBEEF


def test_load_int_rejects_negative(bn):
    with pytest.raises(ValueError):
        load_int(-1, bn())


@pytest.mark.parametrize("bits, limb_bits, value, expected", [
    (64, 32, 0x1FFFFFFFE, "00000001_FFFFFFFE"),
    (64, 32, 0x80000000, "00000000_80000000"),
    (64, 16, 0x1BD, "0000_0000_0000_01BD"),
    (32, 8, 0xDEADBEEF, "DE_AD_BE_EF"),
    (16, 16, 0, "0000"),
    (128, 32, (1 << 128) - 1, "FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF"),
])
def test_format_hex(bits, limb_bits, value, expected):
    assert format_hex(BigNum(value, Layout(bits=bits, limb_bits=limb_bits))) == expected


def test_print_hex(capsys):
    a = BigNum(0x1FFFFFFFE, Layout(bits=64, limb_bits=32))
    print_hex("a+b = ", a)
    assert capsys.readouterr().out == "a+b = 00000001_FFFFFFFE\n"
