from .aes_ctr import AesCtrEncryptor
from .config import validate_config, DEFAULT_CONFIG

def create_encryptor(key, iv=None, config=None):
    
    # build an initialized encryptor from a configuration dict
    config = validate_config(config or DEFAULT_CONFIG)
    encryptor = AesCtrEncryptor(backend=config["backend"])
    
    if iv is None:
        encryptor.initialize_with_random_iv(key, config["iv_size"])
    else:
        encryptor.initialize_with_iv(key, iv)
    
    return encryptor

def create_pycryptodome_encryptor(key, iv=None):

    return create_encryptor(key, iv, {"backend": "pycryptodome"})

def create_cryptography_encryptor(key, iv=None):

    return create_encryptor(key, iv, {"backend": "cryptography"})
