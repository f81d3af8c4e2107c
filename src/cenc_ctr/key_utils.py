import os
import binascii

from .errors import InvalidKeySizeError, InvalidIvSizeError

def format_key_size(size_bits):

    # convert key form bits to bytes
    return size_bits // 8

def generate_key(key_size=128):

    key_bytes = format_key_size(int(key_size))
    
    # only AES-128 is supported
    if key_bytes != 16:
        raise InvalidKeySizeError(key_bytes)
    
    return os.urandom(key_bytes)

def generate_iv(iv_size=8):

    # 8 bytes (64-bit nonce) or 16 bytes (full counter seed)
    if iv_size not in (8, 16):
        raise InvalidIvSizeError(iv_size)
    
    return os.urandom(iv_size)

def _as_bytes(value, name):

    # bytes(16) would silently build 16 zero bytes
    if isinstance(value, int):
        raise TypeError(f"{name} must be a bytes-like object, not int")
    return bytes(value)

def validate_key(key):

    key = _as_bytes(key, "Key")
    if len(key) != 16:
        raise InvalidKeySizeError(len(key))
    return key

def validate_iv(iv):

    iv = _as_bytes(iv, "IV")
    if len(iv) not in (8, 16):
        raise InvalidIvSizeError(len(iv))
    return iv

def hex_encode(data):
    
    # upper-case hex, used for diagnostics only
    return binascii.hexlify(bytes(data)).decode("ascii").upper()
