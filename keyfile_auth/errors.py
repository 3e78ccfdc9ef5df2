"""Errors raised by the API key store."""


class KeyStoreError(Exception):
    """Base class for key store failures."""


class EmptyNameSeparatorError(KeyStoreError, ValueError):
    """Raised when a key store is constructed with an empty name separator."""

    def __init__(self):
        super().__init__("name separator cannot be empty")


class LineTooLongError(KeyStoreError):
    """Raised when a line in a keys file exceeds the configured scan limit."""

    def __init__(self, file_path: str, line_number: int, max_line_length: int):
        self.file_path = file_path
        self.line_number = line_number
        self.max_line_length = max_line_length
        super().__init__(
            f"{file_path}:{line_number}: line does not fit in {max_line_length} bytes"
        )
