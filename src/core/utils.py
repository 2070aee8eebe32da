import os
import sys
from pathlib import Path


def cls():
    os.system('cls' if os.name == 'nt' else 'clear')


def get_base_path() -> Path:
    """
    Folder that holds the data folders (ProductLists, ...).
    - Frozen exe (PyInstaller): the exe directory.
    - Source checkout: the project root, one level above 'src'.
    """
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent

    return Path(__file__).resolve().parent.parent.parent


def get_folder_path(folder_name: str) -> Path:
    """Return absolute Path to a data folder under get_base_path()."""
    return get_base_path() / folder_name
