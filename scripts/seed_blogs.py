"""Seed sample blogs into the JSON-file blog store.

Usage:
    python -m scripts.seed_blogs                    # uses DATA_DIR from settings
    python -m scripts.seed_blogs --data-dir ./data  # explicit directory
    python -m scripts.seed_blogs --clear            # drop existing blogs first
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from bloglist.config import get_settings
from bloglist.services.storage import BLOGS_FILE, JsonFileStore
from bloglist.services.validator import validate_for_create

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("seed_blogs")

SEED_BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
    {
        "title": "First class tests",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.htmll",
        "likes": 10,
    },
    {
        "title": "TDD harms architecture",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2017/03/03/TDD-Harms-Architecture.html",
        "likes": 0,
    },
    {
        "title": "Type wars",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html",
        "likes": 2,
    },
]


async def seed(data_dir: Path, clear: bool) -> int:
    store = JsonFileStore(data_dir / BLOGS_FILE, "blogs")
    if clear:
        await store.clear()
    for payload in SEED_BLOGS:
        stored = await store.insert(validate_for_create(payload).model_dump())
        logger.info("Saved blog %s: %s", stored["id"], stored["title"])
    return await store.count()


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--data-dir", default=get_settings().data_dir)
    parser.add_argument("--clear", action="store_true")
    args = parser.parse_args()

    if not args.data_dir:
        print("give a data directory (--data-dir or DATA_DIR)", file=sys.stderr)
        return 1

    total = asyncio.run(seed(Path(args.data_dir), args.clear))
    print(f"Seeded {len(SEED_BLOGS)} blogs, {total} in store.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
