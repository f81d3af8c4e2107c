"""
CENC CTR - Encryptor errors
All errors are raised synchronously and leave the encryptor state untouched.
"""


class EncryptorError(ValueError):
    pass


class InvalidKeySizeError(EncryptorError):
    
    def __init__(self, size):
        super().__init__(f"Invalid key size: {size} bytes. Only AES-128 (16 bytes) is supported.")
        self.size = size


class InvalidIvSizeError(EncryptorError):
    
    def __init__(self, size):
        super().__init__(f"Invalid IV size: {size} bytes. Must be 8 or 16 bytes.")
        self.size = size


class NotInitializedError(EncryptorError):
    
    def __init__(self, operation):
        super().__init__(f"Cannot {operation}: encryptor is not initialized")
        self.operation = operation


class CounterOverflowError(EncryptorError):
    pass
