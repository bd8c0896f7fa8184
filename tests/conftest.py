import random

import pytest

from fixedbn import BigNum, Layout

LAYOUTS = [
    Layout(bits=64, limb_bits=16),
    Layout(bits=32, limb_bits=8),
    Layout(bits=96, limb_bits=32),
]


@pytest.fixture(params=LAYOUTS, ids=lambda l: "{}x{}".format(l.bits, l.limb_bits))
def layout(request):
    return request.param


@pytest.fixture
def bn(layout):
    def make(value=0):
        return BigNum(value, layout)
    return make


@pytest.fixture
def rng():
    # fixed seed for reproducible tests
    return random.Random(42)
