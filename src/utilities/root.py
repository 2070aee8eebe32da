from core.navigation import FolderNode
from utilities.install_dirs import InstallDirs


class RootNode(FolderNode):
    CHILDREN = [
        InstallDirs(),
    ]

    def get_name(self):
        return 'Root'
