"""Shared fixtures: an in-memory registry hive standing in for HKLM."""

import re
import threading
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Tuple

import pytest

from scripts.registry import (
    APP_PATHS_REL_PATH,
    UNINSTALL_REL_PATH,
    WOW6432_UNINSTALL_REL_PATH,
    REG_BINARY,
    REG_SZ,
    RegistryHive,
)


class FakeHive(RegistryHive):
    """
    Keys are stored by full path, values as plain dicts. A value that is an
    exception instance is raised when read; paths listed in `unreadable`
    raise PermissionError when opened. Give a value as `(data, REG_* type)`
    to store it with an explicit type; `environment` feeds REG_EXPAND_SZ.
    """

    def __init__(self, unreadable: tuple[str, ...] = (), environment: Optional[dict[str, str]] = None):
        self._keys: dict[str, tuple[str, dict[str, Any]]] = {}
        self._unreadable = {p.lower() for p in unreadable}
        self.environment = {k.lower(): v for k, v in (environment or {}).items()}
        self._lock = threading.Lock()
        self.open_handles = 0
        self.opened: list[str] = []

    def add_key(self, path: str, values: Optional[dict[str, Any]] = None) -> "FakeHive":
        self._keys[path.lower()] = (path, dict(values or {}))
        return self

    def add_record(self, root: str, key_name: str, **values: Any) -> "FakeHive":
        if root.lower() not in self._keys:
            self.add_key(root)
        return self.add_key(f"{root}\\{key_name}", values)

    def add_app_path(self, exe_name: str, path: Any) -> "FakeHive":
        return self.add_key(f"{APP_PATHS_REL_PATH}\\{exe_name}", {"Path": path})

    def make_unreadable(self, path: str) -> "FakeHive":
        self._unreadable.add(path.lower())
        return self

    @contextmanager
    def _open(self, path: str) -> Iterator[str]:
        lower = path.lower()
        if lower in self._unreadable:
            raise PermissionError(f"Access is denied: {path}")
        if lower not in self._keys:
            raise FileNotFoundError(f"No such key: {path}")
        with self._lock:
            self.open_handles += 1
            self.opened.append(self._keys[lower][0])
        try:
            yield self._keys[lower][0]
        finally:
            with self._lock:
                self.open_handles -= 1

    def open_key(self, path: str):
        return self._open(path)

    def open_subkey(self, key: str, name: str):
        return self._open(f"{key}\\{name}")

    def iter_subkey_names(self, key: str) -> Iterator[str]:
        prefix = key.lower() + "\\"
        for lower, (path, _) in list(self._keys.items()):
            rest = lower[len(prefix):]
            if lower.startswith(prefix) and "\\" not in rest:
                yield path[len(prefix):]

    def query_value(self, key: str, name: str) -> Tuple[Any, int]:
        values = self._keys[key.lower()][1]
        if name not in values:
            raise FileNotFoundError(f"No such value: {name}")
        value = values[name]
        if isinstance(value, Exception):
            raise value
        if isinstance(value, tuple):
            return value
        return value, REG_BINARY if isinstance(value, bytes) else REG_SZ

    def expand_environment_strings(self, text: str) -> str:
        # Unknown variables stay as written, like ExpandEnvironmentStrings
        return re.sub(r"%([^%]+)%", lambda m: self.environment.get(m.group(1).lower(), m.group(0)), text)


NATIVE = UNINSTALL_REL_PATH
WOW = WOW6432_UNINSTALL_REL_PATH


@pytest.fixture
def hive() -> FakeHive:
    """Empty hive with both uninstall roots present."""
    return FakeHive().add_key(NATIVE).add_key(WOW)


@pytest.fixture
def populated_hive(hive: FakeHive) -> FakeHive:
    hive.add_record(NATIVE, "{23170F69-40C1-2702-2301-000001000000}",
                    DisplayName="7-Zip 23.01 (x64)", InstallLocation="C:\\Program Files\\7-Zip\\")
    hive.add_record(NATIVE, "Google Chrome",
                    DisplayName="Google Chrome", InstallLocation="C:\\Program Files\\Google\\Chrome\\Application")
    hive.add_record(NATIVE, "Notepad++", DisplayName="Notepad++ (64-bit x64)")
    hive.add_record(WOW, "Steam",
                    DisplayName="Steam", InstallLocation="C:\\Program Files (x86)\\Steam")
    hive.add_record(WOW, "{4A03706F-666A-4037-7777-5F2748764D10}",
                    DisplayName="Java 8 Update 381", InstallLocation="C:\\Program Files (x86)\\Java\\jre-1.8\\")
    return hive
