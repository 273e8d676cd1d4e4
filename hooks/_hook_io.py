"""
Hook payload I/O: bounded stdin read and JSON decoding.

The host does not always close stdin after writing the event, so a plain
sys.stdin.read() could block forever. Reads are bounded by a deadline and
whatever arrived by then is used.
"""

import json
import os
import select
import sys
import time
from typing import Optional

from _logging import log_debug


def read_stdin(timeout_seconds: float, stream=None) -> str:
    """Read all available stdin, giving up after timeout_seconds.

    After the first chunk arrives a short follow-up wait drains the rest.
    """
    stream = stream if stream is not None else sys.stdin
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        log_debug("hook_io", "stdin has no file descriptor")
        return ""

    chunks: list[bytes] = []
    remaining = timeout_seconds
    while remaining > 0:
        start = time.monotonic()
        try:
            ready, _, _ = select.select([fd], [], [], remaining)
        except (OSError, ValueError) as e:
            log_debug("hook_io", f"select failed: {e}")
            break
        if not ready:
            if not chunks:
                log_debug("hook_io", f"no input within {timeout_seconds}s")
            break

        chunk = os.read(fd, 65536)
        if not chunk:
            break
        chunks.append(chunk)
        remaining = min(0.1, remaining - (time.monotonic() - start))

    return b"".join(chunks).decode("utf-8", errors="replace")


def parse_payload(raw: str) -> dict:
    """Decode one JSON object; anything else becomes an empty payload."""
    if not raw or not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, ValueError) as e:
        log_debug("hook_io", f"malformed payload: {e}")
        return {}
    return data if isinstance(data, dict) else {}


def read_payload(timeout_seconds: float, stream=None) -> dict:
    """Read and decode the hook event from stdin."""
    return parse_payload(read_stdin(timeout_seconds, stream))


def extract_command(tool_input) -> Optional[str]:
    """Pull the shell command out of a Bash tool_input.

    tool_input is usually {"command": ...}; some hosts send it as a JSON
    string, or as the bare command string.
    """
    if isinstance(tool_input, str):
        stripped = tool_input.strip()
        if stripped.startswith("{"):
            try:
                decoded = json.loads(stripped)
            except (json.JSONDecodeError, ValueError):
                return tool_input
            if isinstance(decoded, dict):
                tool_input = decoded
            else:
                return tool_input
        else:
            return tool_input or None

    if isinstance(tool_input, dict):
        command = tool_input.get("command")
        return command if isinstance(command, str) and command else None
    return None
