import re
from typing import Iterable, Iterator, List, Optional

MAX_KEYWORDS = 12

_SCHEME_RE = re.compile(r"https?://")
_SEPARATOR_RE = re.compile(r"[-_]")
_EXTENSION_RE = re.compile(r"\.[a-zA-Z0-9]+$")
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9\s]")


class KeywordPool:
    """
    Ordered set of strings that stops accepting entries once ``cap`` is reached.

    Footer keywords, tags and hashtags are all read from the same pool so they
    can never disagree on content or order.
    """

    def __init__(self, cap: int, items: Iterable[str] = ()):
        self.cap = cap
        self._items: List[str] = []
        self._seen = set()
        self.extend(items)

    def add(self, item: str) -> bool:
        if not item or item in self._seen or self.is_full:
            return False
        self._seen.add(item)
        self._items.append(item)
        return True

    def extend(self, items: Iterable[str]) -> None:
        for item in items:
            self.add(item)

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.cap

    def head(self, n: int) -> List[str]:
        return self._items[:n]

    def as_list(self) -> List[str]:
        return list(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._seen


def normalize_keywords(source: Optional[str], limit: int = MAX_KEYWORDS) -> List[str]:
    """
    Turns a filename or URL into at most ``limit`` unique lowercase tokens,
    in order of first appearance.
    """
    if not source:
        return []

    cleaned = _SCHEME_RE.sub(" ", source)
    cleaned = _SEPARATOR_RE.sub(" ", cleaned)
    cleaned = _EXTENSION_RE.sub("", cleaned)
    cleaned = _NON_ALNUM_RE.sub(" ", cleaned).lower()

    return KeywordPool(limit, cleaned.split()).as_list()


def to_title_case(text: str) -> str:
    """Upper-cases the first letter of every space-separated word, leaving the rest untouched."""
    return " ".join(word[0].upper() + word[1:] for word in text.split(" ") if word)
