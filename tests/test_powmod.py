import pytest

from fixedbn import BigNum, Layout, Status, powmod, to_int


def run_powmod(bn, base, exponent, modulus):
    result = bn(0xAA)
    status = powmod(bn(base), bn(exponent), bn(modulus), result)
    return status, to_int(result)


def test_textbook_example(bn):
    assert run_powmod(bn, 4, 13, 497) == (Status.OK, 445)


def test_matches_native_pow(bn, layout, rng):
    half = layout.bits // 2
    for _ in range(8):
        modulus = rng.getrandbits(half) or 1
        base = rng.getrandbits(half)
        exponent = rng.getrandbits(16)
        assert run_powmod(bn, base, exponent, modulus) == (Status.OK, pow(base, exponent, modulus))


@pytest.mark.parametrize("base, exponent, modulus, expected", [
    (5, 0, 7, 1),
    (0, 0, 7, 1),
    (0, 5, 7, 0),
    (123, 45, 1, 0),
    (123, 0, 1, 0),
    (10, 1, 7, 3),
    (1000, 3, 13, pow(1000, 3, 13)),
])
def test_edge_cases(bn, base, exponent, modulus, expected):
    assert run_powmod(bn, base, exponent, modulus) == (Status.OK, expected)


@pytest.mark.parametrize("exponent", [0, 1, 13])
def test_zero_modulus(bn, exponent):
    status, result = run_powmod(bn, 4, exponent, 0)
    assert status is Status.DIVIDE_BY_ZERO
    assert result == 0xAA


def test_overflow_propagates(layout):
    modulus = BigNum((1 << layout.bits) - 1, layout)
    base = BigNum(1 << (layout.bits - 1), layout)
    result = BigNum(0, layout)
    assert powmod(base, BigNum(2, layout), modulus, result) is Status.OVERFLOW


def test_result_may_alias_inputs(bn):
    base = bn(4)
    assert powmod(base, bn(13), bn(497), base) is Status.OK
    assert to_int(base) == 445

    modulus = bn(497)
    assert powmod(bn(4), bn(13), modulus, modulus) is Status.OK
    assert to_int(modulus) == 445


def test_inputs_untouched(bn):
    base, exponent, modulus = bn(4), bn(13), bn(497)
    powmod(base, exponent, modulus, bn())
    assert (to_int(base), to_int(exponent), to_int(modulus)) == (4, 13, 497)


def test_rsa_round_trip():
    p, q = 1000003, 999983
    n = p * q
    e = 65537
    d = pow(e, -1, (p - 1) * (q - 1))
    layout = Layout(bits=96, limb_bits=32)

    message = BigNum(123456789, layout)
    cipher = BigNum(0, layout)
    plain = BigNum(0, layout)
    assert powmod(message, BigNum(e, layout), BigNum(n, layout), cipher) is Status.OK
    assert to_int(cipher) == pow(123456789, e, n)
    assert powmod(cipher, BigNum(d, layout), BigNum(n, layout), plain) is Status.OK
    assert to_int(plain) == 123456789
