"""Compare and sort titles bibliographically."""

import logging
from typing import Iterable, List, Tuple

from bibsort.titles.keys import title_key

logger = logging.getLogger(__name__)


def less(a: str, b: str) -> bool:
    """Return True if title a files before title b."""
    return title_key(a) < title_key(b)


def keyed_titles(titles: Iterable[str], reverse: bool = False) -> List[Tuple[str, str]]:
    """Return (key, title) pairs in bibliographic order.

    title_key() runs once per title, however many comparisons the sort
    makes. Titles with equal keys keep their input order.
    """
    pairs = [(title_key(title), title) for title in titles]
    logger.debug("Sorting %d titles", len(pairs))
    pairs.sort(key=lambda pair: pair[0], reverse=reverse)
    return pairs


def sort_titles(titles: List[str], reverse: bool = False) -> None:
    """Sort a list of titles in place."""
    titles[:] = [title for _, title in keyed_titles(titles, reverse=reverse)]


def sorted_titles(titles: Iterable[str], reverse: bool = False) -> List[str]:
    """Return a new list of the titles in bibliographic order."""
    return [title for _, title in keyed_titles(titles, reverse=reverse)]
