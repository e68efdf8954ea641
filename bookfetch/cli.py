from __future__ import annotations

import argparse
import json
import logging
import sys

from bookfetch.core.async_utils import run_async
from bookfetch.core.config import settings
from bookfetch.core.exceptions import BookFetchError
from bookfetch.ingestion.fetch import fetch_books, new_client


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookfetch",
        description="Fetch books from an HTTP endpoint and print them as {title, author, isbn} JSON.",
    )
    parser.add_argument("api_url", metavar="API_URL", nargs="?", default="")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help=f"request timeout in seconds (default: {settings.fetch_timeout_secs})",
    )
    return parser


async def _run(api_url: str, timeout: float | None):
    async with new_client(timeout) as client:
        return await fetch_books(api_url, client=client)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level, stream=sys.stderr)

    if not args.api_url:
        parser.print_usage(sys.stderr)
        return 2

    try:
        books = run_async(_run(args.api_url, args.timeout))
    except BookFetchError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(json.dumps([b.model_dump() for b in books], indent=2, ensure_ascii=False))
    return 0
