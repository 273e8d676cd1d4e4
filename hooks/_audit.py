"""
Security Audit Log: append-only record of blocked and confirmation-gated commands.

Storage: $PAI_DIR/history/security/security-events.jsonl (one JSON object per line)

Writes are fire-and-forget. A failed write is logged at debug level and never
reaches the caller, so logging cannot change a decision.
"""

from __future__ import annotations

import fcntl
import json
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from _config import get_limit, load_settings
from _logging import log_debug

EVENT_BLOCKED = "blocked"
EVENT_CONFIRMATION = "confirmation_required"


def build_event(
    event_type: str,
    category: str,
    pattern: str,
    command: str,
    session_id: str,
) -> dict[str, Any]:
    """Shape one audit record; the command is truncated to a preview."""
    preview_chars = get_limit("command_preview_chars")
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "type": event_type,
        "category": category,
        "pattern": pattern,
        "command": command[:preview_chars],
        "session_id": session_id or "unknown",
    }


def _append_event(path: Path, event: dict[str, Any]) -> None:
    """Append a single event under a non-blocking file lock.

    A lock held by another writer skips the record so the hook never waits.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a") as f:
            try:
                fcntl.flock(f.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
            except BlockingIOError:
                log_debug("audit", f"log busy, skipped {event['type']} event")
                return
            f.write(json.dumps(event) + "\n")
            fcntl.flock(f.fileno(), fcntl.LOCK_UN)
    except OSError as e:
        log_debug("audit", f"security event write failed: {e}")


def log_security_event(
    event_type: str,
    category: str,
    pattern: str,
    command: str,
    session_id: str,
    path: Optional[Path] = None,
) -> threading.Thread:
    """Record a security event on a background thread and return immediately.

    The thread is non-daemon, so the interpreter finishes the write before the
    hook process exits.
    """
    event = build_event(event_type, category, pattern, command, session_id)
    target = path if path is not None else load_settings().audit_log_path

    thread = threading.Thread(target=_append_event, args=(target, event))
    thread.start()
    return thread

