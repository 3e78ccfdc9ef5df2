"""Local adapters: keys loaded from files on disk."""

from .file_key_store import FileKeyStore

__all__ = ["FileKeyStore"]
