from .key_utils import generate_key

# AES block and CENC sizes (bytes)
AES_BLOCK_SIZE = 16
KEY_SIZE = 16
IV_SIZES = (8, 16)


class EncryptorBase:
    
    def __init__(self, key_size="128", mode="CTR", **kwargs):
        self.key_size = int(key_size)
        self.mode = mode
        self.name = "AES"
        self.description = f"AES-{key_size} in {mode} mode"
        self.backend = kwargs.get('backend', 'pycryptodome')
    
    def generate_key(self):
        # delegate key generation to the utility function
        return generate_key(self.key_size)
    
    def encrypt(self, data, output=None):
        raise NotImplementedError("Subclasses must implement this method")
    
    def decrypt(self, ciphertext, output=None):
        raise NotImplementedError("Subclasses must implement this method")
