"""In-memory tracking of already-seen URLs by canonical key."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional

from .engine import UriLike
from .keys import CanonicalKeyGenerator


class DuplicateTracker:
    """Track which URLs have been seen, treating equivalent URLs as one."""

    def __init__(self, key_generator: Optional[CanonicalKeyGenerator] = None) -> None:
        self.key_generator = key_generator or CanonicalKeyGenerator()
        self._seen: set[int] = set()

    def __len__(self) -> int:
        return len(self._seen)

    def __contains__(self, url: UriLike) -> bool:
        return self.is_duplicate(url)

    def is_duplicate(self, url: UriLike) -> bool:
        """Return True if an equivalent URL was already recorded."""

        return self.key_generator.get_url_key(url) in self._seen

    def add(self, url: UriLike) -> bool:
        """Record a URL; return True if no equivalent URL was seen before."""

        url_key = self.key_generator.get_url_key(url)
        if url_key in self._seen:
            return False
        self._seen.add(url_key)
        return True

    def filter_new(self, urls: Iterable[UriLike]) -> Iterator[UriLike]:
        """Yield URLs not seen before, recording them as they pass."""

        for url in urls:
            if self.add(url):
                yield url

    def reset(self) -> None:
        """Forget every recorded URL."""

        self._seen.clear()
