"""Display helpers for history entries."""

from datetime import datetime
from typing import Optional, Tuple

from ..core.history import Entry

PREVIEW_LIMIT = 200


def format_age(seconds: int) -> str:
    """Format an age in seconds as 'Ns ago', 'Nm ago' or 'Nh ago'"""
    seconds = max(0, int(seconds))
    if seconds < 60:
        return f"{seconds}s ago"
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    return f"{seconds // 3600}h ago"


def entry_age(entry: Entry, now: Optional[datetime] = None) -> int:
    """Whole seconds since the entry was captured"""
    now = now or datetime.now()
    return max(0, int((now - entry.captured_at).total_seconds()))


def preview(content: str, limit: int = PREVIEW_LIMIT) -> str:
    if len(content) > limit:
        return f"{content[:limit]}..."
    return content


def summary_line(content: str, limit: int = 80) -> str:
    """Single line version of content for list rows"""
    text = " ".join(content.split())
    return text[:limit] + "..." if len(text) > limit else text


def content_stats(content: str) -> Tuple[int, int]:
    """Return (chars, lines) for content.

    Lines end at "\\n" only; a trailing newline does not start a new line.
    """
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return len(content), len(lines)


def rank_label(rank: int) -> str:
    return f"#{rank + 1}"


def empty_message(search_filter: str) -> str:
    if search_filter:
        return "🔍 No matches found for your search."
    return "📝 No clipboard history yet. Copy something to get started!"


def format_row(rank: int, entry: Entry, now: Optional[datetime] = None) -> str:
    """Listbox row for a ranked entry"""
    return f"{rank_label(rank)}  🕒 {format_age(entry_age(entry, now))}  {summary_line(entry.content)}"
