"""
CENC CTR - Counter block derivation
The two IV widths defined by ISO/IEC 23001-7 behave differently:

* 16-byte IV: the IV is the full 128-bit counter. Block ``n`` of a sample is
  encrypted under ``IV + n``, and the next sample's IV is the current IV plus
  the number of blocks the sample used.
* 8-byte IV: the IV is a 64-bit nonce and the low 64 bits of the counter
  block hold a per-sample block counter that restarts at zero. The next
  sample's IV is the current IV plus one.

The 16-byte counter carries across bit 64 within a sample. Decryptors that
wrap only the low 64 bits produce different output once a sample crosses
that boundary.
"""

import struct

from .errors import CounterOverflowError, InvalidIvSizeError

MASK_64 = (1 << 64) - 1
MASK_128 = (1 << 128) - 1


class Iv128Counter:

    iv_size = 16

    def __init__(self, iv):
        self.iv = bytes(iv)
        self._value = int.from_bytes(self.iv, "big")

    def counter_block(self, index):
        return ((self._value + index) & MASK_128).to_bytes(16, "big")

    def next_iv(self, blocks_consumed):
        return ((self._value + blocks_consumed) & MASK_128).to_bytes(16, "big")


class Iv64Counter:

    iv_size = 8

    def __init__(self, iv):
        self.iv = bytes(iv)
        self._value = int.from_bytes(self.iv, "big")

    def counter_block(self, index):
        # low 64 bits are the per-sample block counter
        if index > MASK_64:
            raise CounterOverflowError("Block counter overflowed 64 bits within one sample")
        return self.iv + struct.pack(">Q", index)

    def next_iv(self, blocks_consumed):
        # +1 per sample regardless of blocks used
        return ((self._value + 1) & MASK_64).to_bytes(8, "big")


def counter_for_iv(iv):
    # pick the counter variant matching the IV width
    if len(iv) == 16:
        return Iv128Counter(iv)
    if len(iv) == 8:
        return Iv64Counter(iv)
    raise InvalidIvSizeError(len(iv))
