#!/usr/bin/env python3
"""
Seed sample links into the link file.

Usage:
    python seed_links.py --data-file data/links.json --count 10
"""

import argparse
import asyncio
import sys
import os
import random

# Add parent directories to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from lib.database.json_store import JSONFileLinkStore
from lib.errors import ShortCodeExistsError
from lib.service import LinkShortenerService
from lib.shortcode import ShortCodeGenerator
from lib.common.logging_config import setup_logging


SAMPLE_URLS = [
    "https://github.com/python/cpython",
    "https://docs.python.org/3/library/asyncio.html",
    "https://fastapi.tiangolo.com/",
    "https://www.uvicorn.org/",
    "https://docs.pydantic.dev/latest/",
    "https://stackoverflow.com/questions/tagged/python",
    "https://news.ycombinator.com/",
    "https://www.reddit.com/r/programming/",
]


async def seed(data_file: str, count: int, logger) -> int:
    """Create ``count`` sample links and return how many were stored."""
    store = JSONFileLinkStore(path=data_file, logger=logger)
    service = LinkShortenerService(
        store=store,
        short_code_generator=ShortCodeGenerator(),
        logger=logger,
        max_collision_retries=3,
    )

    created = 0
    for i in range(count):
        url = f"{random.choice(SAMPLE_URLS)}?test={i}&seed=true"
        try:
            result = await service.create_short_url(url)
        except ShortCodeExistsError as e:
            logger.warning(f"Failed to create link {i}: {e}")
            continue
        logger.info(f"Created: {result['short_code']} -> {url}")
        created += 1

    links = await service.list_links()
    logger.info(f"Total links in {data_file}: {len(links)}")
    await service.close()
    return created


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed sample links")
    parser.add_argument(
        "--data-file",
        default=os.getenv("DATA_FILE", "data/links.json"),
        help="Link file path"
    )
    parser.add_argument("--count", type=int, default=10, help="Number of links to create")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    args = parser.parse_args()

    logger = setup_logging(level="DEBUG" if args.verbose else "INFO")

    try:
        created = asyncio.run(seed(args.data_file, args.count, logger))
    except Exception as e:
        logger.error(f"Error seeding links: {e}")
        return 1

    logger.info(f"Successfully created {created} links")
    return 0


if __name__ == "__main__":
    sys.exit(main())
