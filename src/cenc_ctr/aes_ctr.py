#!/usr/bin/env python3
"""
CENC CTR - AES-CTR Encryptor
Provides stateful AES-128 CTR encryption/decryption for Common Encryption
samples delivered as one or more subsamples.
"""

import logging

from .base import EncryptorBase, AES_BLOCK_SIZE
from .block_cipher import create_block_cipher, get_block_cipher
from .counter import counter_for_iv
from .errors import EncryptorError, NotInitializedError
from .key_utils import validate_key, validate_iv, generate_iv, hex_encode

# setup logging
logger = logging.getLogger("CencCtr")


class AesCtrEncryptor(EncryptorBase):
    """
    AES-128 CTR encryptor following the CENC IV conventions.
    
    One instance encrypts one sample at a time: the sample may be fed
    through any number of encrypt/decrypt calls and produces the same bytes
    as a single call over the whole sample. Call update_iv() between
    samples. Instances are not thread-safe.
    """
    
    def __init__(self, backend="pycryptodome", **kwargs):
        super().__init__(key_size="128", mode="CTR", backend=backend, **kwargs)
        
        # fail early on an unknown backend
        get_block_cipher(backend)
        if backend == "pycryptodome":
            self.description = "PyCryptodome AES-128 in CENC CTR mode"
        else:
            self.description = f"{backend} AES-128 in CENC CTR mode"
        
        self._cipher = None
        self._counter = None
        self._keystream = b""
        self._offset = AES_BLOCK_SIZE
        self._blocks_consumed = 0
    
    def initialize_with_iv(self, key, iv):
        """
        Initialize with a key and an explicit IV.
        
        Args:
            key: 16-byte AES key
            iv: 8-byte or 16-byte initialization vector
            
        Raises:
            InvalidKeySizeError: key is not 16 bytes
            InvalidIvSizeError: IV is neither 8 nor 16 bytes
        """
        try:
            key = validate_key(key)
            counter = counter_for_iv(validate_iv(iv))
        except EncryptorError as e:
            logger.warning(f"Rejected initialization: {e}")
            raise
        
        self._cipher = create_block_cipher(key, self.backend)
        self._set_counter(counter)
        logger.debug(f"Initialized with {counter.iv_size}-byte IV {hex_encode(counter.iv)}")
    
    def initialize_with_random_iv(self, key, iv_size):
        """
        Initialize with a key and a freshly generated random IV.
        
        Args:
            key: 16-byte AES key
            iv_size: IV size in bytes, 8 or 16
        """
        try:
            validate_key(key)
            iv = generate_iv(iv_size)
        except EncryptorError as e:
            logger.warning(f"Rejected initialization: {e}")
            raise
        
        self.initialize_with_iv(key, iv)
    
    def set_iv(self, iv):
        """
        Resynchronize to a recorded IV, keeping the current key.
        
        Args:
            iv: 8-byte or 16-byte initialization vector
            
        Raises:
            NotInitializedError: no key has been set yet
            InvalidIvSizeError: IV is neither 8 nor 16 bytes
        """
        if self._cipher is None:
            raise NotInitializedError("set IV")
        try:
            counter = counter_for_iv(validate_iv(iv))
        except EncryptorError as e:
            logger.warning(f"Rejected IV: {e}")
            raise
        
        self._set_counter(counter)
    
    def update_iv(self):
        """
        Advance to the IV of the next sample.
        
        16-byte IVs move forward by the number of blocks the finished sample
        used; 8-byte IVs move forward by exactly one.
        """
        if self._cipher is None:
            raise NotInitializedError("update IV")
        
        new_iv = self._counter.next_iv(self._blocks_consumed)
        logger.debug(f"IV advanced after {self._blocks_consumed} blocks: "
                     f"{hex_encode(self._counter.iv)} -> {hex_encode(new_iv)}")
        self._set_counter(counter_for_iv(new_iv))
    
    @property
    def iv(self):
        if self._counter is None:
            return None
        return self._counter.iv
    
    @property
    def block_offset(self):
        # position inside the current keystream block
        return self._offset % AES_BLOCK_SIZE
    
    def process(self, data, output=None):
        """
        XOR data with the keystream, continuing from the previous call.
        
        Args:
            data: bytes-like object or str (UTF-8 encoded) to transform
            output: optional writable buffer of the same length; may be
                the input buffer itself for in-place operation
            
        Returns:
            bytes if no output buffer was given, otherwise the output buffer
        """
        if self._cipher is None:
            raise NotInitializedError("process data")
        
        if isinstance(data, str):
            data = data.encode("utf-8")
        
        src = memoryview(data).cast("B")
        length = len(src)
        
        if output is None:
            result = bytearray(length)
            dst = memoryview(result)
        else:
            result = output
            dst = memoryview(output).cast("B")
            if dst.readonly:
                raise ValueError("Output buffer must be writable")
            if len(dst) != length:
                raise ValueError(f"Output buffer size {len(dst)} does not match input size {length}")
        
        pos = 0
        while pos < length:
            # derive the next keystream block at a block boundary
            if self._offset == AES_BLOCK_SIZE:
                counter_block = self._counter.counter_block(self._blocks_consumed)
                self._keystream = self._cipher.encrypt_block(counter_block)
                self._blocks_consumed += 1
                self._offset = 0
            
            n = min(length - pos, AES_BLOCK_SIZE - self._offset)
            chunk = int.from_bytes(src[pos:pos + n].tobytes(), "big")
            stream = int.from_bytes(self._keystream[self._offset:self._offset + n], "big")
            dst[pos:pos + n] = (chunk ^ stream).to_bytes(n, "big")
            
            pos += n
            self._offset += n
        
        if output is None:
            return bytes(result)
        return result
    
    def encrypt(self, data, output=None):
        # CTR is self-inverse
        return self.process(data, output)
    
    def decrypt(self, ciphertext, output=None):
        return self.process(ciphertext, output)
    
    def _set_counter(self, counter):
        self._counter = counter
        self._blocks_consumed = 0
        self._keystream = b""
        self._offset = AES_BLOCK_SIZE
