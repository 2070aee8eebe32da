"""
Read-only access to a registry hive.

The resolver only needs a handful of operations: open a key, walk its
subkeys in store order and read string values. RegistryHive describes
them so the live registry (scripts.winreg_hive) and in-memory hives used
in tests are interchangeable.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any, Iterator, Optional, Tuple

UNINSTALL_REL_PATH = r"SOFTWARE\Microsoft\Windows\CurrentVersion\Uninstall"
WOW6432_UNINSTALL_REL_PATH = r"SOFTWARE\WOW6432Node\Microsoft\Windows\CurrentVersion\Uninstall"
APP_PATHS_REL_PATH = r"SOFTWARE\Microsoft\Windows\CurrentVersion\App Paths"

# Value types, same numbers as winreg.REG_*
REG_SZ = 1
REG_EXPAND_SZ = 2
REG_BINARY = 3
REG_MULTI_SZ = 7


class RegistryHive(ABC):

    @abstractmethod
    def open_key(self, path: str) -> AbstractContextManager[Any]:
        """Open `path` relative to the hive root. Raises OSError if it does not exist."""
        raise NotImplementedError

    @abstractmethod
    def open_subkey(self, key: Any, name: str) -> AbstractContextManager[Any]:
        """Open a direct child of an already opened key."""
        raise NotImplementedError

    @abstractmethod
    def iter_subkey_names(self, key: Any) -> Iterator[str]:
        """Yield child key names in the order the store exposes them."""
        raise NotImplementedError

    @abstractmethod
    def query_value(self, key: Any, name: str) -> Tuple[Any, int]:
        """Return (data, REG_* type). Raises FileNotFoundError if the value does not exist."""
        raise NotImplementedError

    @abstractmethod
    def expand_environment_strings(self, text: str) -> str:
        raise NotImplementedError

    def read_string(self, key: Any, name: str) -> Optional[str]:
        """
        Return value `name` of `key` as text, with REG_EXPAND_SZ variables expanded.

        Returns None when the value does not exist or holds no text. Any
        other read failure is raised to the caller.
        """
        try:
            value, reg_type = self.query_value(key, name)
        except FileNotFoundError:
            return None

        text = as_text(value)
        if text is not None and reg_type == REG_EXPAND_SZ:
            text = self.expand_environment_strings(text)
        return text


def as_text(value: Any) -> Optional[str]:
    """
    Convert raw registry data to text.

    REG_BINARY is decoded with NULs dropped (UTF-16LE data stored as binary
    is common); binary data without any text is treated as absent.
    """
    if value is None:
        return None
    if isinstance(value, bytes):
        text = value.decode("utf-16-le" if b"\x00" in value else "utf-8", errors="ignore")
        text = text.replace("\x00", "")
        return text or None
    if isinstance(value, list):
        return "\n".join(str(v) for v in value)
    return str(value)
