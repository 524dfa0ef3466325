"""
Music Catalog - Entry Point

Run with: python -m music_catalog
"""

import argparse
import asyncio
import logging
import sys
import tomllib
from pathlib import Path

from music_catalog import __version__
from music_catalog.config import reload_config
from music_catalog.core import CoreError
from music_catalog.demo import run_demo
from music_catalog.users import fetch_user


def setup_logging(level: str = "INFO", verbose: bool = False) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from third-party libraries
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="music_catalog",
        description="Music Catalog - an in-memory playlist and song catalog",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to a catalog TOML config (default: bundled catalog.toml)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("demo", help="Seed a catalog, sort it and print it")

    fetch = subparsers.add_parser("fetch-user", help="Look up a user after a simulated delay")
    fetch.add_argument("user_id", type=int, help="User id to look up")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the application."""
    args = parse_args(argv)
    try:
        config = reload_config(args.config)
    except (OSError, tomllib.TOMLDecodeError) as e:
        print(f"Cannot load config: {e}", file=sys.stderr)
        return 2
    setup_logging(level=config.log_level, verbose=args.verbose)

    logger = logging.getLogger(__name__)

    try:
        if args.command == "demo":
            run_demo(config=config)
        elif args.command == "fetch-user":
            user = asyncio.run(fetch_user(args.user_id, config=config.users))
            print(f"{user.id}: {user.name}")
    except CoreError as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception("Fatal error: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
