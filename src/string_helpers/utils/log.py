"""
log.py.

Does: Topic-gated debug printer controlled by STRING_HELPERS_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Used by the demo CLI and tests.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "enable_topics", "enabled", "reload_topics"]

ENV_VAR = "STRING_HELPERS_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable STRING_HELPERS_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enable_topics(*topics: str) -> None:
    """Does: Switch topics on for this process without touching the environment."""
    _DEBUG_TOPICS.update(t.strip().lower() for t in topics if t.strip())


def enabled(topic: str) -> bool:
    """Does: Tell whether `topic` (or 'all') is switched on."""
    return "all" in _DEBUG_TOPICS or topic.lower().strip() in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "split",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if enabled via STRING_HELPERS_DEBUG_TOPICS.
    """
    if not enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
