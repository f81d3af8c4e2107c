"""
CENC CTR - AES-128 single-block primitives
Provides the BlockEncrypt(key, block) -> block operation the CTR cipher is
built on, backed by PyCryptodome or by the cryptography package.
"""

import logging

from Crypto.Cipher import AES as CryptoAES
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .key_utils import validate_key

# setup logging
logger = logging.getLogger("CencCtr")

# dictionary to track block cipher backends
BLOCK_CIPHERS = {}

def register_block_cipher(name):
    # register a block cipher backend under a name
    def decorator(impl_class):
        BLOCK_CIPHERS[name] = impl_class
        return impl_class
    return decorator

def get_block_cipher(name):
    # get a backend class by name
    try:
        return BLOCK_CIPHERS[name]
    except KeyError:
        raise ValueError(f"Unknown block cipher backend: {name}. "
                         f"Available: {', '.join(list_block_ciphers())}") from None

def list_block_ciphers():
    # list all registered backends
    return list(BLOCK_CIPHERS.keys())


@register_block_cipher("pycryptodome")
class PyCryptodomeBlockCipher:
    # raw AES-128 block encryption via PyCryptodome ECB

    def __init__(self, key):
        self._aes = CryptoAES.new(validate_key(key), CryptoAES.MODE_ECB)

    def encrypt_block(self, block):
        """
        Encrypt exactly one 16-byte block.
        
        Args:
            block: 16-byte input block
            
        Returns:
            bytes: 16-byte encrypted block
        """
        if len(block) != 16:
            raise ValueError(f"Block must be 16 bytes, got {len(block)}")
        return self._aes.encrypt(bytes(block))


@register_block_cipher("cryptography")
class CryptographyBlockCipher:
    # raw AES-128 block encryption via cryptography ECB

    def __init__(self, key):
        self._encryptor = Cipher(algorithms.AES(validate_key(key)), modes.ECB()).encryptor()

    def encrypt_block(self, block):
        if len(block) != 16:
            raise ValueError(f"Block must be 16 bytes, got {len(block)}")
        # ECB is stateless across blocks
        return self._encryptor.update(bytes(block))

def create_block_cipher(key, backend="pycryptodome"):

    impl_class = get_block_cipher(backend)
    logger.debug(f"Using {backend} block cipher backend")
    return impl_class(key)
