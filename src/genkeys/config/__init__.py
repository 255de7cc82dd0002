from genkeys.config.loader import load_config, output_path
from genkeys.config.model import GenkeysConfig

__all__ = ["GenkeysConfig", "load_config", "output_path"]
