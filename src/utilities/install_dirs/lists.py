import asyncio
from pathlib import Path

from colorama import Fore, Style, init
from prompt_toolkit.shortcuts import ProgressBar

from core.navigation import FolderNode, NavigationNode
from scripts.product_lists import ProductListError, list_product_lists, read_product_list, resolve_queries


class ProductListNode(NavigationNode):
    def __init__(self, path: Path):
        super().__init__()
        self._path = path

    def get_name(self) -> str:
        return self._path.stem

    def process(self):
        init(autoreset=True)

        try:
            queries = read_product_list(self._path)
        except ProductListError as e:
            print(f"{Fore.RED}Error: {e}{Style.RESET_ALL}")
            self.wait_back()
            return

        if not queries:
            print(f"{Fore.YELLOW}Warning: No products listed in {self._path.name}{Style.RESET_ALL}")
            self.wait_back()
            return

        try:
            # Single-step progress bar while the lookups run
            with ProgressBar(title=f"Resolving {len(queries)} product(s)") as pb:
                for _ in pb(range(1), label="Reading registry ..."):
                    results = asyncio.run(resolve_queries(queries))
        except Exception as e:
            print(f"{Fore.RED}Unexpected error: {e}{Style.RESET_ALL}")
            self.wait_back()
            return

        width = max(len(q) for q in queries)
        print("\n" + "=" * 80)
        for query, path in results:
            if path is None:
                print(f"{query:<{width}}  {Fore.YELLOW}not found{Style.RESET_ALL}")
            else:
                print(f"{query:<{width}}  {Fore.GREEN}{path}{Style.RESET_ALL}")
        print("=" * 80)

        found = sum(1 for _, path in results if path is not None)
        print(f"Resolved {found} of {len(results)}")

        self.wait_back()


class ProductLists(FolderNode):

    def build_children(self) -> list[NavigationNode]:
        # Rebuild list every time the folder is opened
        return [ProductListNode(path) for path in list_product_lists()]

    def get_name(self) -> str:
        return 'Lists'
