import unittest

from cenc_ctr import CounterOverflowError, InvalidIvSizeError, Iv128Counter, Iv64Counter, counter_for_iv


class TestCounterBlocks(unittest.TestCase):
    def test_128_bit_counter_adds_index(self):
        counter = Iv128Counter(bytes(15) + b"\x05")
        self.assertEqual(counter.counter_block(0), bytes(15) + b"\x05")
        self.assertEqual(counter.counter_block(3), bytes(15) + b"\x08")

    def test_128_bit_counter_wraps(self):
        counter = Iv128Counter(b"\xff" * 16)
        self.assertEqual(counter.counter_block(1), bytes(16))

    def test_64_bit_counter_appends_index(self):
        nonce = bytes(range(1, 9))
        counter = Iv64Counter(nonce)
        self.assertEqual(counter.counter_block(0), nonce + bytes(8))
        self.assertEqual(counter.counter_block(258), nonce + bytes(6) + b"\x01\x02")

    def test_64_bit_counter_overflow(self):
        counter = Iv64Counter(bytes(8))
        self.assertEqual(counter.counter_block((1 << 64) - 1), bytes(8) + b"\xff" * 8)
        with self.assertRaises(CounterOverflowError):
            counter.counter_block(1 << 64)

    def test_counter_for_iv(self):
        self.assertIsInstance(counter_for_iv(bytes(16)), Iv128Counter)
        self.assertIsInstance(counter_for_iv(bytes(8)), Iv64Counter)
        with self.assertRaises(InvalidIvSizeError):
            counter_for_iv(bytes(12))


if __name__ == "__main__":
    unittest.main()
