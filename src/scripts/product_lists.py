"""
Product lists: text files with one product name per line, stored in the
'ProductLists' folder next to the executable (or the project root when
running from source).

    # vendors.txt
    Google Chrome
    7-Zip
    notepad++

Blank lines and lines starting with '#' are ignored.
"""

import asyncio
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from core.utils import get_folder_path
from scripts.install_directory import find_install_directory_async
from scripts.registry import RegistryHive

PRODUCT_LISTS_FOLDER = "ProductLists"


class ProductListError(RuntimeError):
    pass


def get_product_lists_storage() -> Path:
    """Return absolute path to 'ProductLists' storage folder."""
    return get_folder_path(PRODUCT_LISTS_FOLDER)


def list_product_lists(storage: Optional[Path] = None) -> List[Path]:
    storage = storage or get_product_lists_storage()
    if not storage.is_dir():
        return []
    files = [f for f in storage.glob("*.txt") if f.is_file()]
    return sorted(files, key=lambda f: f.name.lower())


def read_product_list(path: Path) -> List[str]:
    try:
        with path.open("r", encoding="utf-8") as f:
            lines = [line.strip() for line in f]
    except FileNotFoundError as e:
        raise ProductListError(f"File '{path.name}' not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ProductListError(f"Error reading file '{path.name}': {e}") from e

    return [line for line in lines if line and not line.startswith("#")]


async def resolve_queries(
        queries: Iterable[str],
        hive: Optional[RegistryHive] = None,
) -> List[Tuple[str, Optional[Path]]]:
    """Resolve all queries concurrently. Result keeps the input order."""
    queries = list(queries)
    paths = await asyncio.gather(*(find_install_directory_async(q, hive) for q in queries))
    return list(zip(queries, paths))
