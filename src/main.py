import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from scripts.install_directory import find_install_directory
from scripts.product_lists import ProductListError, read_product_list, resolve_queries

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find where a product is installed using the Windows uninstall registry keys.",
    )
    parser.add_argument("query", nargs="?", help="part of the product display name (case-insensitive)")
    parser.add_argument("--list", type=Path, dest="list_file", help="text file with one product name per line")
    parser.add_argument("--verbose", "-v", action="store_true", help="log skipped registry entries")
    return parser.parse_args(argv)


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def run_query(query: str) -> int:
    path = find_install_directory(query)
    if path is None:
        return 1
    print(path)
    return 0


def run_list(list_file: Path) -> int:
    try:
        queries = read_product_list(list_file)
    except ProductListError as e:
        print(e, file=sys.stderr)
        return 2

    for query, path in asyncio.run(resolve_queries(queries)):
        print(f"{query}\t{path if path is not None else '-'}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    if args.list_file is not None:
        return run_list(args.list_file)
    if args.query is not None:
        return run_query(args.query)

    # Interactive menu; prompt_toolkit only needed here
    from core.loop import main_loop
    main_loop()

    if os.name == 'nt':
        os.system("pause")
    return 0


if __name__ == "__main__":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

    sys.exit(main())
