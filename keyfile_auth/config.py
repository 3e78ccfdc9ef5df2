import os
import logging
from typing import Dict, Any

from dotenv import load_dotenv

from keyfile_auth.adapters.local.file_key_store import DEFAULT_MAX_LINE_LENGTH, FileKeyStore

logger = logging.getLogger(__name__)

load_dotenv()

DEFAULT_KEYS_FILE = "/data/api-keys.txt"
DEFAULT_NAME_SEPARATOR = "="
DEFAULT_API_KEY_HEADER = "x-api-key"


class Config:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self.debug = os.environ.get("DEBUG", "0") == "1"
        self.keys_file = os.environ.get("API_KEYS_FILE", DEFAULT_KEYS_FILE)
        # An explicitly empty separator is kept so the store can reject it
        self.name_separator = os.environ.get("API_KEY_NAME_SEPARATOR", DEFAULT_NAME_SEPARATOR)
        self.max_line_length = int(os.environ.get("API_KEY_MAX_LINE_LENGTH", DEFAULT_MAX_LINE_LENGTH))
        self.api_key_header = os.environ.get("API_KEY_HEADER", DEFAULT_API_KEY_HEADER).lower()

    def reload(self):
        """Re-read the environment into this instance."""
        self._initialize()

    def as_dict(self) -> Dict[str, Any]:
        return {
            "debug": self.debug,
            "keys_file": self.keys_file,
            "name_separator": self.name_separator,
            "max_line_length": self.max_line_length,
            "api_key_header": self.api_key_header,
        }


config = Config()


def get_config() -> Config:
    return config


def create_key_store(cfg: Config) -> FileKeyStore:
    """Create the file-backed key store and load the configured keys file.

    Load errors (missing file, unreadable file, oversized line) propagate.
    """
    key_store = FileKeyStore(
        cfg.name_separator,
        logger=logging.getLogger("keyfile_auth.key_store"),
        max_line_length=cfg.max_line_length,
    )
    key_store.load(cfg.keys_file)
    logger.info(f"Key store: {type(key_store).__name__} loaded {len(key_store)} keys from {cfg.keys_file}")
    return key_store
