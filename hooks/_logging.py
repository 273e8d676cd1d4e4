"""
Logging helpers for hook runners.

Hooks talk to the host over stdout, so all diagnostics go to stderr.
Debug output is silent unless PAI_HOOK_DEBUG=1.
"""

import logging
import os
import sys

_LOGGER_NAME = "pai.hooks"


def _build_logger() -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    debug = os.environ.get("PAI_HOOK_DEBUG", "0") == "1"
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    return logger


logger = _build_logger()


def log_debug(component: str, message: str) -> None:
    """Log a debug message tagged with the emitting component."""
    logger.debug("%s: %s", component, message)


def diagnostic(tag: str, message: str) -> None:
    """Operator-facing one-liner on stderr (always shown)."""
    print(f"[{tag}] {message}", file=sys.stderr)
