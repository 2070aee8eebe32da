"""
Install directory lookup by product name.

Searches the uninstall keys of HKLM (native view first, then WOW6432Node)
for the first product whose DisplayName contains the query, ignoring case,
and returns its install directory:

    from scripts.install_directory import find_install_directory
    find_install_directory("chrome")  # -> Path('C:/Program Files/Google/Chrome/Application') or None

When InstallLocation is missing or empty the App Paths entry
"<DisplayName>.exe" is consulted instead. The returned path is not checked
for existence. Registry failures never reach the caller: an unreadable root
counts as empty and an unreadable record is skipped.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from scripts.registry import (
    APP_PATHS_REL_PATH,
    UNINSTALL_REL_PATH,
    WOW6432_UNINSTALL_REL_PATH,
    RegistryHive,
)

logger = logging.getLogger(__name__)


class RegistrationRoot(Enum):
    # Declaration order is search order
    NATIVE = UNINSTALL_REL_PATH
    WOW6432 = WOW6432_UNINSTALL_REL_PATH


@dataclass(frozen=True)
class SoftwareRecord:
    key_name: str
    display_name: Optional[str] = None
    install_location: Optional[str] = None


def local_machine() -> RegistryHive:
    """Live HKLM hive. winreg is only importable on Windows, so load it on first use."""
    from scripts.winreg_hive import LocalMachineHive
    return LocalMachineHive()


def _fold_case(s: str) -> str:
    # Per-character upper case only: no expansions such as "\u00df" -> "SS"
    return "".join(c.upper() if len(c.upper()) == 1 else c for c in s)


def matches_query(display_name: Optional[str], query: str) -> bool:
    """Ordinal, case-insensitive substring test. Each character is compared on its own."""
    if display_name is None:
        return False
    return _fold_case(query) in _fold_case(display_name)


def read_record(hive: RegistryHive, root_key, key_name: str) -> SoftwareRecord:
    with hive.open_subkey(root_key, key_name) as sk:
        return SoftwareRecord(
            key_name=key_name,
            display_name=hive.read_string(sk, "DisplayName"),
            install_location=hive.read_string(sk, "InstallLocation"),
        )


def lookup_app_path(hive: RegistryHive, display_name: str) -> Optional[str]:
    """Read `Path` from App Paths\\<display_name>.exe, or None if it is unavailable."""
    try:
        with hive.open_key(f"{APP_PATHS_REL_PATH}\\{display_name}.exe") as key:
            return hive.read_string(key, "Path") or None
    except Exception as e:
        logger.debug("No App Paths entry for %r: %s", display_name, e)
        return None


def _search_root(hive: RegistryHive, root: RegistrationRoot, query: str) -> Optional[str]:
    """
    Resolve `query` within one uninstall root.

    Only the first matching record is considered: if it yields no directory
    the root is done, later records in it are not examined.
    """
    try:
        with hive.open_key(root.value) as rk:
            for key_name in hive.iter_subkey_names(rk):
                try:
                    record = read_record(hive, rk, key_name)
                except Exception as e:
                    logger.debug("Skipping unreadable record %s\\%s: %s", root.value, key_name, e)
                    continue

                if not matches_query(record.display_name, query):
                    continue

                logger.debug("%r matched %r under %s", query, record.display_name, root.name)
                if record.install_location:
                    return record.install_location
                return lookup_app_path(hive, record.display_name)
    except Exception as e:
        logger.debug("Uninstall root %s unavailable: %s", root.name, e)
    return None


def find_install_directory(query: str, hive: Optional[RegistryHive] = None) -> Optional[Path]:
    """
    Return the install directory of the first registered product whose
    display name contains `query` (case-insensitive), or None.

    Args:
        query: part of the product display name; an empty string matches any product.
        hive: registry to search, HKLM by default.
    """
    if hive is None:
        try:
            hive = local_machine()
        except Exception as e:
            logger.debug("Registry not available: %s", e)
            return None

    for root in RegistrationRoot:
        path = _search_root(hive, root, query)
        if path:
            return Path(path)

    return None


async def find_install_directory_async(query: str, hive: Optional[RegistryHive] = None) -> Optional[Path]:
    """Same as find_install_directory, run on a worker thread."""
    return await asyncio.to_thread(find_install_directory, query, hive)
