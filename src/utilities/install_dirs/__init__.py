from core.navigation import FolderNode
from utilities.install_dirs.find import FindDirectory
from utilities.install_dirs.lists import ProductLists


class InstallDirs(FolderNode):
    CHILDREN = [
        FindDirectory(),
        ProductLists(),
    ]

    def get_name(self) -> str:
        return "Install directories"
