#!/usr/bin/env python3
"""
PAI ops core: argument parsing and logging shared by scripts in ops/.

Scripts return an exit code from main() instead of calling sys.exit()
themselves, so they work both as console scripts and under test.
"""

import argparse
import logging

# Operator scripts log to stderr; stdout is reserved for command output
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("PAI")

EXIT_OK = 0
EXIT_FAILURE = 1


def setup_script(description: str) -> argparse.ArgumentParser:
    """
    Parser with the flags every ops script accepts.

    Usage:
        parser = setup_script("Inspect agent definitions")
        subparsers = parser.add_subparsers(dest="command", required=True)
        args = parser.parse_args(argv)
        handle_debug(args)
    """
    parser = argparse.ArgumentParser(
        description=description, formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def handle_debug(args: argparse.Namespace) -> None:
    """Switch the PAI logger to DEBUG when --debug was passed."""
    if getattr(args, "debug", False):
        logger.setLevel(logging.DEBUG)
        logger.debug("Debug mode enabled")


def fail(message: str) -> int:
    """Report a failure on stderr and return the failure exit code."""
    logger.error(f"❌ {message}")
    return EXIT_FAILURE
