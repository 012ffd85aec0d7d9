#!/usr/bin/env python3
"""
Command-line interface for the link shortener.

Works on the JSON link file directly, so it can be used with or without the
server running. Writes from here and from a running server are not
coordinated; the last writer wins.

Usage:
    python shortener_cli.py shorten <url> [--short-code CODE]
    python shortener_cli.py get <short_code>
    python shortener_cli.py list
"""

import argparse
import asyncio
import json
import sys
import os
from typing import Optional

# Add parent directories to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from lib.database.json_store import JSONFileLinkStore
from lib.errors import ShortenerError
from lib.service import LinkShortenerService
from lib.shortcode import ShortCodeGenerator
from lib.common.logging_config import setup_logging


class LinkShortenerCLI:
    """Command-line interface for the link shortener."""

    def __init__(self, data_file: str, verbose: bool = False):
        """Initialize CLI."""
        self.data_file = data_file
        self.verbose = verbose
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")
        self.service = None

    def initialize(self):
        """Build the store and service."""
        store = JSONFileLinkStore(path=self.data_file, logger=self.logger)
        self.service = LinkShortenerService(
            store=store,
            short_code_generator=ShortCodeGenerator(),
            logger=self.logger,
        )

    async def cleanup(self):
        """Cleanup resources."""
        if self.service:
            await self.service.close()

    async def shorten(self, url: str, short_code: Optional[str] = None) -> int:
        """Shorten a URL."""
        try:
            result = await self.service.create_short_url(url, short_code)
        except ShortenerError as e:
            print(json.dumps({"success": False, "error": str(e)}, indent=2), file=sys.stderr)
            return 1

        print(json.dumps({
            "success": True,
            "shortCode": result["short_code"],
            "url": result["original_url"],
        }, indent=2))
        return 0

    async def get(self, short_code: str) -> int:
        """Print the original URL for a short code."""
        original_url = await self.service.get_original_url(short_code)

        if not original_url:
            print(json.dumps({
                "success": False,
                "error": f"Short code '{short_code}' not found"
            }, indent=2), file=sys.stderr)
            return 1

        print(json.dumps({
            "success": True,
            "shortCode": short_code,
            "url": original_url
        }, indent=2))
        return 0

    async def list_links(self) -> int:
        """Print every stored link."""
        links = await self.service.list_links()

        print(json.dumps({
            "success": True,
            "count": len(links),
            "links": links
        }, indent=2))
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Link Shortener CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s shorten https://example.com/long/url

  # Shorten with a chosen code
  %(prog)s shorten https://example.com/long/url --short-code mylink

  # Look up a code
  %(prog)s get mylink

  # Dump every link
  %(prog)s list
        """
    )

    parser.add_argument(
        "--data-file",
        default=os.getenv("DATA_FILE", "data/links.json"),
        help="Link file path (default: from DATA_FILE env or data/links.json)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")
    shorten_parser.add_argument("--short-code", help="Custom short code")

    get_parser = subparsers.add_parser("get", help="Get original URL")
    get_parser.add_argument("short_code", help="Short code to lookup")

    subparsers.add_parser("list", help="List all links")

    return parser


async def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cli = LinkShortenerCLI(data_file=args.data_file, verbose=args.verbose)
    cli.initialize()

    try:
        if args.command == "shorten":
            return await cli.shorten(args.url, args.short_code)
        elif args.command == "get":
            return await cli.get(args.short_code)
        elif args.command == "list":
            return await cli.list_links()
        else:
            parser.print_help()
            return 1
    finally:
        await cli.cleanup()


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
