"""KeyStorePort — abstract interface for API key validation."""

from abc import ABC, abstractmethod
from typing import Optional


class KeyStorePort(ABC):
    @abstractmethod
    def load(self, path: str) -> None:
        """Load API keys from the file at path, adding to those already loaded."""

    @abstractmethod
    def is_api_key_valid(self, api_key: Optional[str]) -> bool:
        """Return True if the key was loaded from any keys file."""
