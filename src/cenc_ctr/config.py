import json
import logging

from .block_cipher import list_block_ciphers

# setup logging
logger = logging.getLogger("CencCtr")

DEFAULT_CONFIG = {
    "backend": "pycryptodome",
    "iv_size": 8,
    "log_level": "INFO",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

def validate_config(config):
    # check values and drop unknown keys
    result = dict(DEFAULT_CONFIG)
    for name, value in config.items():
        if name not in DEFAULT_CONFIG:
            logger.warning(f"Ignoring unknown config option: {name}")
            continue
        result[name] = value
    
    if result["backend"] not in list_block_ciphers():
        raise ValueError(f"Unsupported backend: {result['backend']}")
    if result["iv_size"] not in (8, 16):
        raise ValueError(f"Unsupported IV size: {result['iv_size']}. Must be 8 or 16.")
    result["log_level"] = str(result["log_level"]).upper()
    if result["log_level"] not in LOG_LEVELS:
        raise ValueError(f"Unsupported log level: {result['log_level']}")
    
    return result

def load_config(config_file=None):
    """
    Load a JSON configuration file merged over the defaults.
    
    Args:
        config_file: Path to the JSON file. If None, the defaults are used.
        
    Returns:
        dict: Validated configuration
    """
    if config_file is None:
        return dict(DEFAULT_CONFIG)
    
    try:
        with open(config_file, 'r') as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error loading configuration: {str(e)}")
        raise
    
    if not isinstance(config, dict):
        raise ValueError("Configuration file must contain a JSON object")
    
    config = validate_config(config)
    set_log_level(config["log_level"])
    return config

def set_log_level(level):
    # apply a configured level to the package logger
    logger.setLevel(getattr(logging, str(level).upper()))
