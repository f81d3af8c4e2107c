import logging

# configure logging
logger = logging.getLogger("CencCtr")
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

# import components
from .base import EncryptorBase, AES_BLOCK_SIZE, KEY_SIZE, IV_SIZES
from .errors import (
    EncryptorError,
    InvalidKeySizeError,
    InvalidIvSizeError,
    NotInitializedError,
    CounterOverflowError
)
from .key_utils import generate_key, generate_iv, format_key_size, hex_encode
from .block_cipher import register_block_cipher, get_block_cipher, list_block_ciphers, create_block_cipher
from .counter import Iv128Counter, Iv64Counter, counter_for_iv
from .aes_ctr import AesCtrEncryptor
from .config import DEFAULT_CONFIG, load_config, set_log_level
from .implementation import (
    create_encryptor,
    create_pycryptodome_encryptor,
    create_cryptography_encryptor
)

__all__ = [
    'EncryptorBase',
    'AES_BLOCK_SIZE',
    'KEY_SIZE',
    'IV_SIZES',
    'EncryptorError',
    'InvalidKeySizeError',
    'InvalidIvSizeError',
    'NotInitializedError',
    'CounterOverflowError',
    'generate_key',
    'generate_iv',
    'format_key_size',
    'hex_encode',
    'register_block_cipher',
    'get_block_cipher',
    'list_block_ciphers',
    'create_block_cipher',
    'Iv128Counter',
    'Iv64Counter',
    'counter_for_iv',
    'AesCtrEncryptor',
    'DEFAULT_CONFIG',
    'load_config',
    'set_log_level',
    'create_encryptor',
    'create_pycryptodome_encryptor',
    'create_cryptography_encryptor',
]
