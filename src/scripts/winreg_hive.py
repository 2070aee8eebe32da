# winreg_hive.py
# Windows-only. Live HKEY_LOCAL_MACHINE view for the install directory resolver.
import winreg
from typing import Any, Iterator, Tuple

from scripts.registry import RegistryHive

# 64-bit registry view: WOW6432Node is then reachable as a plain subkey
KEY_READ64 = winreg.KEY_READ | winreg.KEY_WOW64_64KEY


class LocalMachineHive(RegistryHive):

    def __init__(self, access: int = KEY_READ64):
        self._access = access

    def open_key(self, path: str):
        return winreg.OpenKeyEx(winreg.HKEY_LOCAL_MACHINE, path, 0, self._access)

    def open_subkey(self, key, name: str):
        return winreg.OpenKeyEx(key, name, 0, self._access)

    def iter_subkey_names(self, key) -> Iterator[str]:
        subcount, _, _ = winreg.QueryInfoKey(key)
        for i in range(subcount):
            try:
                yield winreg.EnumKey(key, i)
            except OSError:
                # Key removed while enumerating
                continue

    def query_value(self, key, name: str) -> Tuple[Any, int]:
        return winreg.QueryValueEx(key, name)

    def expand_environment_strings(self, text: str) -> str:
        return winreg.ExpandEnvironmentStrings(text)
