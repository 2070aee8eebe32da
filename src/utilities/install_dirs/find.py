from colorama import Fore, Style, init
from prompt_toolkit import prompt

from core.navigation import NavigationNode
from scripts.install_directory import find_install_directory


class FindDirectory(NavigationNode):

    def get_name(self) -> str:
        return 'Find'

    def process(self):
        init(autoreset=True)

        query = prompt("Product name (empty to go back): ").strip()
        if not query:
            self.move_back()
            return

        print(f"Searching registry for '{query}'...")
        path = find_install_directory(query)

        if path is None:
            print(f"{Fore.YELLOW}No install directory found for '{query}'{Style.RESET_ALL}")
        else:
            print(f"{Fore.GREEN}{path}{Style.RESET_ALL}")

        self.wait_back()
