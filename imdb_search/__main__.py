"""Command-line entry point. Allows python -m imdb_search."""

import argparse
import sys

from imdb_search.engine import IMDBSearchEngine
from imdb_search.exceptions import IMDBSearchError
from imdb_search.search.types import FoundResults, TitleSearch
from imdb_search.settings import settings
from imdb_search.utils.logger import setup_logger


def run_title_search(query: str, start: int | None, count: int | None) -> TitleSearch:
    """Run an advanced title listing search and print each item."""
    with IMDBSearchEngine() as engine:
        listing = engine.search_titles(query, start=start, count=count)

    for item in listing:
        print(item)
        people = item.join_people(lambda role: f"{role}: ", " | ", lambda p: p.name, ", ")
        if people:
            print(f"- {people}")
        print(f"- {item.title.absolute_url(engine.base_uri)}")
        print()

    return listing


def run_find(query: str) -> FoundResults:
    """Run a quick find search and print one line per result."""
    with IMDBSearchEngine() as engine:
        results = engine.find_titles(query)

    for found in results:
        print(f"{found.title_id}\t{found.title}\t{found.absolute_url(engine.base_uri)}")

    return results


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="imdb_search",
        description="Search IMDb titles",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    title_parser = subparsers.add_parser("title", help="Advanced title listing search")
    title_parser.add_argument("query", help="Title to search for")
    title_parser.add_argument("--start", type=int, default=None, help="1-based result offset")
    title_parser.add_argument("--count", type=int, default=None, help="Results per page (1-255)")

    find_parser = subparsers.add_parser("find", help="Quick find over titles")
    find_parser.add_argument("query", help="Title to search for")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and dispatch to the requested search."""
    args = build_parser().parse_args(argv)

    setup_logger(
        "imdb_search",
        level=settings.log_level,
        log_dir=settings.logging.log_path if settings.logging.to_file else None,
    )

    try:
        if args.command == "title":
            run_title_search(args.query, args.start, args.count)
        else:
            run_find(args.query)
    except (IMDBSearchError, ValueError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
