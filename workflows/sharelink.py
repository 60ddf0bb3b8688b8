"""
Workflow: Share-Link Tools
==========================
Decode and upgrade multiplayer/share links from the command line.

USAGE:
    # Print the decoded record as JSON
    uv run python -m workflows.sharelink decode "lexica://multiplayer?b=...&mv=20007&..."

    # Re-serialize an old link in the current format
    uv run python -m workflows.sharelink upgrade "lexica://multiplayer?b=...&mv=20007&..."

    # More logging
    uv run python -m workflows.sharelink -v decode "https://lexica.github.io/share/?b=..."
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import argparse
from typing import List, Optional

from dotenv import load_dotenv
from loguru import logger

from lib.sharelink.errors import ShareLinkError
from services.sharelink.service import parse_game, upgrade_link


def run_decode(uri: str) -> None:
    """Print the decoded record."""
    record = parse_game(uri)
    print(record.model_dump_json(indent=2))


def run_upgrade(uri: str) -> None:
    """Print the current-format link."""
    print(upgrade_link(uri))


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Decode and upgrade share links")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    decode_parser = subparsers.add_parser("decode", help="Print a link's record as JSON")
    decode_parser.add_argument("uri", help="Multiplayer or share link")

    upgrade_parser = subparsers.add_parser("upgrade", help="Re-serialize a link in the current format")
    upgrade_parser.add_argument("uri", help="Multiplayer or share link")

    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "INFO", format="<level>{level: <8}</level> | {message}")

    try:
        if args.command == "decode":
            run_decode(args.uri)
        else:
            run_upgrade(args.uri)
    except ShareLinkError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
