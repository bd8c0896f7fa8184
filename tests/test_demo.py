import logging

import pytest

from fixedbn.__main__ import main


def test_demo_output(capsys):
    assert main(["--bits", "64", "--limb-bits", "32"]) == 0
    out = capsys.readouterr().out.splitlines()

    assert "N_LIMBS = 2, LIMB_BITS = 32" in out
    assert "a+b = 00000001_FFFFFFFE" in out
    assert "shl 1 = 00000000_80000000" in out
    assert "shlCp = 00000001_00000000" in out
    assert "shr 1 = 00000000_80000000" in out
    assert "shrCp = 00000000_40000000" in out
    assert "a - b = 0000003F_223C5004" in out
    assert "a - b = FFFFFFFF_00000000" in out
    assert "a * b = 00000000_BE21E543" in out
    assert "c / b = 00000000_0000FEED" in out
    assert "4^13 mod 497 = 00000000_000001BD" in out


def test_demo_reports_trapped_subtraction(capsys, caplog):
    caplog.set_level(logging.INFO, logger="fixedbn")
    assert main(["--bits", "64", "--limb-bits", "16", "--trap-negative"]) == 0
    assert "sub returned negative result" in caplog.text
    assert "4^13 mod 497 = 0000_0000_0000_01BD" in capsys.readouterr().out


def test_demo_rejects_bad_layout(capsys):
    with pytest.raises(SystemExit):
        main(["--bits", "40", "--limb-bits", "16"])
