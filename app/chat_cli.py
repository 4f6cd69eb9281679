"""
CLI layer
Purpose: Terminal-only glue. Parses the command line, loads the environment
and logging, and delegates everything else to groq_chat.session so the chat
logic can be unit tested without a real terminal or network.
"""

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from groq_chat.session import run_chat


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="groq-chat",
        description="A CLI chat application using Groq",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="verbose output"
    )
    return parser


def resolve_log_level(name: Optional[str]) -> int:
    """Map a level name such as "INFO" to its number; unknown names give WARNING."""
    level = logging.getLevelName((name or "WARNING").strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging() -> None:
    logging.basicConfig(
        level=resolve_log_level(os.getenv("LOG_LEVEL")),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    load_dotenv()  # Load environment variables from .env file if present
    configure_logging()

    return run_chat(verbose=args.verbose)


if __name__ == "__main__":
    sys.exit(main())
