"""FileKeyStore — validates API keys loaded from a flat `name=key` text file."""

import logging
import threading
from typing import BinaryIO, Iterator, Optional

from keyfile_auth.domain.models import KeyEntry, KeySnapshot
from keyfile_auth.errors import EmptyNameSeparatorError, LineTooLongError
from keyfile_auth.ports.key_store import KeyStorePort

SERVICE_NAME = "api_key_local"
DEFAULT_MAX_LINE_LENGTH = 64 * 1024

# Unicode White_Space characters; str.strip() would also drop \x1c-\x1f
WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class FileKeyStore(KeyStorePort):
    """Holds the API keys read from one or more keys files.

    Each line of a keys file is `<service name><separator><api key>`. Blank
    lines and lines starting with `#` are ignored. Lines without the
    separator are dropped silently; lines with an empty name or key are
    dropped with a warning on the configured logger.

    Loads are additive and serialized. Validity checks never block: they
    read whichever snapshot the last completed load published.
    """

    def __init__(
        self,
        name_separator: str,
        logger: Optional[logging.Logger] = None,
        max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
    ):
        if not name_separator:
            raise EmptyNameSeparatorError()
        if max_line_length <= 0:
            raise ValueError(f"max_line_length must be positive, got {max_line_length}")

        self._name_separator = name_separator
        self._logger = logger
        self._max_line_length = max_line_length
        self._snapshot = KeySnapshot()
        self._load_lock = threading.Lock()

    @property
    def name_separator(self) -> str:
        return self._name_separator

    def load(self, path: str) -> None:
        file = open(path, "rb")
        with self._load_lock:
            entries: list[KeyEntry] = []
            try:
                for line in self._read_lines(file, path):
                    entry = self._parse_line(line, path)
                    if entry is not None:
                        entries.append(entry)
            finally:
                # Entries read before a scan error are kept
                self._snapshot = self._snapshot.extend(entries)
                self._close(file, path)

    def is_api_key_valid(self, api_key: Optional[str]) -> bool:
        if api_key is None:
            return False
        return api_key in self._snapshot.valid_keys

    def get_api_key(self, service_name: str) -> Optional[str]:
        """Return the key most recently loaded for service_name, or None."""
        return self._snapshot.keys_by_name.get(service_name)

    def service_names(self) -> list[str]:
        return sorted(self._snapshot.keys_by_name)

    def __len__(self) -> int:
        return len(self._snapshot.valid_keys)

    def _read_lines(self, file: BinaryIO, path: str) -> Iterator[str]:
        """Yield decoded lines without their terminators.

        A line, newline included, must fit in max_line_length bytes. Each
        line is decoded on its own, so invalid UTF-8 bytes survive as lone
        surrogates instead of failing the whole file.
        """
        line_number = 0
        while True:
            chunk = file.readline(self._max_line_length)
            if not chunk:
                return
            line_number += 1
            if chunk.endswith(b"\n"):
                chunk = chunk[:-1]
            elif len(chunk) >= self._max_line_length:
                raise LineTooLongError(path, line_number, self._max_line_length)
            if chunk.endswith(b"\r"):
                chunk = chunk[:-1]
            yield chunk.decode("utf-8", errors="surrogateescape")

    def _parse_line(self, line: str, path: str) -> Optional[KeyEntry]:
        stripped = line.strip(WHITESPACE)
        if not stripped or stripped.startswith("#"):
            return None

        parts = line.split(self._name_separator, 1)
        if len(parts) != 2:
            return None

        service_name = parts[0].strip(WHITESPACE)
        api_key = parts[1].strip(WHITESPACE)
        if not service_name or not api_key:
            self._log(
                logging.WARNING,
                f"Invalid line in service API keys file {path}: {line!r}",
                line=line,
                file_path=path,
            )
            return None

        return KeyEntry(service_name=service_name, api_key=api_key)

    def _close(self, file: BinaryIO, path: str) -> None:
        try:
            file.close()
        except OSError as e:
            self._log(
                logging.ERROR,
                f"Failed to close service API keys file {path}: {e}",
                file_path=path,
                error=str(e),
            )

    def _log(self, level: int, msg: str, **fields) -> None:
        if self._logger is None:
            return
        self._logger.log(level, msg, extra={"service": SERVICE_NAME, **fields})
