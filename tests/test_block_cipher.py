import binascii
import unittest

from cenc_ctr import create_block_cipher, get_block_cipher, list_block_ciphers, InvalidKeySizeError

# FIPS-197 Appendix C.1
KEY = binascii.unhexlify("000102030405060708090a0b0c0d0e0f")
BLOCK = binascii.unhexlify("00112233445566778899aabbccddeeff")
EXPECTED = binascii.unhexlify("69c4e0d86a7b0430d8cdb78070b4c55a")


class TestBlockCiphers(unittest.TestCase):
    def test_backends_registered(self):
        self.assertIn("pycryptodome", list_block_ciphers())
        self.assertIn("cryptography", list_block_ciphers())

    def test_known_answer(self):
        for backend in list_block_ciphers():
            with self.subTest(backend=backend):
                cipher = create_block_cipher(KEY, backend)
                self.assertEqual(cipher.encrypt_block(BLOCK), EXPECTED)
                # repeated calls are independent
                self.assertEqual(cipher.encrypt_block(BLOCK), EXPECTED)

    def test_rejects_short_block(self):
        cipher = create_block_cipher(KEY)
        with self.assertRaises(ValueError):
            cipher.encrypt_block(BLOCK[:15])

    def test_rejects_bad_key(self):
        for backend in list_block_ciphers():
            with self.subTest(backend=backend):
                with self.assertRaises(InvalidKeySizeError):
                    create_block_cipher(KEY[:13], backend)

    def test_unknown_backend(self):
        with self.assertRaises(ValueError):
            get_block_cipher("nss")


if __name__ == "__main__":
    unittest.main()
