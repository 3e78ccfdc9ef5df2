"""In-memory API key validation backed by a flat keys file."""

from .adapters.local.file_key_store import FileKeyStore
from .errors import EmptyNameSeparatorError, KeyStoreError, LineTooLongError
from .ports.key_store import KeyStorePort

__all__ = [
    "EmptyNameSeparatorError",
    "FileKeyStore",
    "KeyStoreError",
    "KeyStorePort",
    "LineTooLongError",
]
