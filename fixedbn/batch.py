import logging

import numpy as np

from .bignum import BigNum
from .errors import BigNumOverflowError, Status, raise_for_status
from .layout import DEFAULT_LAYOUT, Layout
from .powmod import powmod

logger = logging.getLogger(__name__)


class BatchModExp:
    """
    Modular exponentiation over many values at once.

    Values travel as a 2-D numpy array of limbs, one row per number, the same
    least-significant-first layout a single BigNum uses.
    """

    def __init__(self, layout=None):
        self.layout = layout or DEFAULT_LAYOUT

    @classmethod
    def for_modulus(cls, modulus, limb_bits=16):
        """Pick a layout wide enough to hold the product of two residues."""
        bits = 2 * max(int(modulus).bit_length(), 1)
        bits = -(-bits // limb_bits) * limb_bits
        return cls(Layout(bits=bits, limb_bits=limb_bits))

    def convert_to_chunks(self, numbers):
        """
        Convert a list of integers into rows of limbs.
        """
        layout = self.layout
        chunked = np.zeros((len(numbers), layout.n_limbs), dtype=layout.limb_dtype)
        for i, num in enumerate(numbers):
            num = int(num)
            if num < 0:
                raise ValueError("BigNum is unsigned, cannot load {}".format(num))
            if num.bit_length() > layout.bits:
                raise BigNumOverflowError(
                    "{:#x} does not fit in {} bits".format(num, layout.bits))
            for j in range(layout.n_limbs):
                chunked[i, j] = num & layout.limb_mask
                num >>= layout.limb_bits
        return chunked

    def convert_from_chunks(self, chunked):
        """
        Convert rows of limbs back into integers.
        """
        numbers = []
        for chunks in chunked:
            num = 0
            for i in reversed(range(self.layout.n_limbs)):
                num = (num << self.layout.limb_bits) | int(chunks[i])
            numbers.append(num)
        return numbers

    def mod_exp(self, numbers, exponents, mod):
        """
        Perform modular exponentiation: result = numbers^exponents % mod
        :param numbers: List of integers (bases)
        :param exponents: List of integers (exponents), one per base
        :param mod: Single integer (modulus)
        :return: List of integers (results)
        """
        if len(numbers) != len(exponents):
            raise ValueError("need one exponent per number")
        chunked_numbers = self.convert_to_chunks(numbers)
        chunked_exponents = self.convert_to_chunks(exponents)
        modulus = BigNum(self.convert_to_chunks([mod])[0], self.layout)

        results = np.zeros_like(chunked_numbers)
        for row, (number, exponent) in enumerate(zip(chunked_numbers, chunked_exponents)):
            result = BigNum(0, self.layout)
            status = powmod(BigNum(number, self.layout), BigNum(exponent, self.layout),
                            modulus, result)
            if status is not Status.OK:
                logger.debug("mod_exp: row %d failed: %s", row, status.value)
            raise_for_status(status, "row {}".format(row))
            results[row] = result.limbs

        return self.convert_from_chunks(results)

    def encrypt(self, messages, e, n):
        """Textbook RSA: C = M^e mod n for every message."""
        for message in messages:
            if message >= n:
                raise ValueError("Message must be smaller than modulus n")
        return self.mod_exp(messages, [e] * len(messages), n)

    def decrypt(self, ciphertexts, d, n):
        # RSA decryption is the same operation with the private exponent
        return self.encrypt(ciphertexts, d, n)
