"""Search over clipboard history."""

from typing import Iterable, List, Tuple

from .history import Entry


def query(entries: Iterable[Entry], search_filter: str = "") -> List[Tuple[int, Entry]]:
    """Filter entries by case-insensitive substring.

    Args:
        entries: History contents in rank order, e.g. a HistoryStore or its snapshot
        search_filter: Text to look for. Empty matches everything.

    Returns:
        List of (rank, entry) pairs. Ranks are positions in ``entries`` before
        filtering, so "#3" stays "#3" when the first two entries are hidden.
    """
    ranked = list(enumerate(entries))
    if not search_filter:
        return ranked

    needle = search_filter.lower()
    return [(rank, entry) for rank, entry in ranked if needle in entry.content.lower()]
