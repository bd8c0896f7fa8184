from dataclasses import dataclass, replace

import numpy as np

# limb_bits -> (limb dtype, unsigned accumulator, signed accumulator)
_DTYPES = {
    8: (np.uint8, np.uint16, np.int16),
    16: (np.uint16, np.uint32, np.int32),
    32: (np.uint32, np.uint64, np.int64),
}


@dataclass(frozen=True)
class Layout:
    """
    Fixed shape shared by every operand of an operation.

    :param bits: Total width W of a value, a multiple of limb_bits.
    :param limb_bits: Width of one limb (8, 16 or 32).
    :param trap_negative: Default subtraction policy. False wraps around
        modulo 2^W, True reports a negative result.
    """
    bits: int = 128
    limb_bits: int = 16
    trap_negative: bool = False

    def __post_init__(self):
        if self.limb_bits not in _DTYPES:
            raise ValueError(
                "limb_bits must be one of {}, got {}".format(sorted(_DTYPES), self.limb_bits))
        if self.bits <= 0 or self.bits % self.limb_bits:
            raise ValueError(
                "bits must be a positive multiple of {}, got {}".format(self.limb_bits, self.bits))

    @property
    def n_limbs(self):
        return self.bits // self.limb_bits

    @property
    def limb_mask(self):
        return (1 << self.limb_bits) - 1

    @property
    def hex_digits(self):
        return self.limb_bits // 4

    @property
    def limb_dtype(self):
        return _DTYPES[self.limb_bits][0]

    @property
    def acc_dtype(self):
        return _DTYPES[self.limb_bits][1]

    @property
    def signed_acc_dtype(self):
        return _DTYPES[self.limb_bits][2]

    def with_bits(self, bits):
        return replace(self, bits=bits)


DEFAULT_LAYOUT = Layout()
