"""In-process article cache with two indices: id → Article and permalink → id.

Both tables are guarded by one lock so a concurrent ``put``/``remove`` can
never leave a permalink pointing at an id the other table does not hold.
The lock only covers index mutation; the cache never performs I/O.

Articles are copied on the way in and on the way out, so a caller mutating
a returned Article cannot change what the cache holds.

Every ``put``/``remove`` stamps the article id with a new version. A
read-through fill opens a ``fill_window()`` before going to the store and
hands the window's version to ``put_if_unchanged``; if the id was written or
removed in the meantime the fill is dropped, so a slow reader can never
resurrect a deleted or stale row.

Usage:
    cache = ArticleCache(capacity=500)    # 0 → unbounded
    cache.put(article)
    cache.get(article.id)
    cache.get_by_permalink(article.permalink)
    cache.remove(article.id)

    with cache.fill_window() as since:
        article = await store.get(article_id)
        cache.put_if_unchanged(article, since)
"""

import logging
from collections import Counter, OrderedDict
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from threading import Lock

from blogrepo.domain.entities import Article

logger = logging.getLogger(__name__)


class ArticleCache:
    """Dual-indexed article cache with an optional LRU bound."""

    def __init__(self, capacity: int = 0):
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._articles: OrderedDict[str, Article] = OrderedDict()
        self._permalinks: dict[str, str] = {}
        self._lock = Lock()
        # Write versions, kept only while some fill window could still see them.
        self._version = 0
        self._written: dict[str, int] = {}
        self._cleared_at = 0
        self._open_windows: Counter[int] = Counter()

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, article_id: str) -> Article | None:
        with self._lock:
            article = self._articles.get(article_id)
            if article is not None and self._capacity:
                self._articles.move_to_end(article_id)
            return replace(article) if article is not None else None

    def get_by_permalink(self, permalink: str) -> Article | None:
        with self._lock:
            article_id = self._permalinks.get(permalink)
            if article_id is None:
                return None
            article = self._articles.get(article_id)
            if article is not None and self._capacity:
                self._articles.move_to_end(article_id)
            return replace(article) if article is not None else None

    def put(self, article: Article) -> None:
        """Insert or overwrite ``article`` under its current id and permalink.

        A previously cached version with a different permalink loses its old
        permalink mapping.
        """
        if not article.id:
            raise ValueError("Cannot cache an article without an id")

        with self._lock:
            self._mark_written(article.id)
            evicted = self._store(article)

        logger.debug("Cached article %s (permalink=%r)", article.id, article.permalink)
        for evicted_id in evicted:
            logger.debug("Evicted article %s (capacity=%d)", evicted_id, self._capacity)

    @contextmanager
    def fill_window(self) -> Iterator[int]:
        """Open a read-through window and yield its version.

        Pass the version to ``put_if_unchanged`` once the store has answered.
        """
        with self._lock:
            since = self._version
            self._open_windows[since] += 1
        try:
            yield since
        finally:
            with self._lock:
                self._open_windows[since] -= 1
                if not self._open_windows[since]:
                    del self._open_windows[since]
                self._prune_written()

    def put_if_unchanged(self, article: Article, since: int) -> bool:
        """Cache ``article`` unless its id was written, removed or cleared after ``since``."""
        if not article.id:
            raise ValueError("Cannot cache an article without an id")

        with self._lock:
            if self._cleared_at > since or self._written.get(article.id, 0) > since:
                stale = True
                evicted = []
            else:
                stale = False
                evicted = self._store(article)

        if stale:
            logger.debug("Dropped stale fill for article %s (window %d)", article.id, since)
            return False
        logger.debug("Cached article %s (permalink=%r)", article.id, article.permalink)
        for evicted_id in evicted:
            logger.debug("Evicted article %s (capacity=%d)", evicted_id, self._capacity)
        return True

    def remove(self, article_id: str) -> None:
        with self._lock:
            self._mark_written(article_id)
            article = self._articles.pop(article_id, None)
            if article is None:
                return
            self._drop_permalink(article)
        logger.debug("Removed article %s from cache", article_id)

    def clear(self) -> None:
        with self._lock:
            self._version += 1
            self._cleared_at = self._version
            self._written.clear()
            self._articles.clear()
            self._permalinks.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._articles)

    def __contains__(self, article_id: object) -> bool:
        with self._lock:
            return article_id in self._articles

    # ── Internal (caller holds the lock) ────────────────────────────

    def _store(self, article: Article) -> list[str]:
        previous = self._articles.pop(article.id, None)
        if previous is not None and previous.permalink != article.permalink:
            self._drop_permalink(previous)
            logger.debug(
                "Permalink changed for article %s: %r → %r",
                article.id, previous.permalink, article.permalink,
            )

        self._articles[article.id] = replace(article)
        if article.permalink:
            self._permalinks[article.permalink] = article.id
        return self._evict_overflow()

    def _mark_written(self, article_id: str) -> None:
        if not self._open_windows:
            return
        self._version += 1
        self._written[article_id] = self._version

    def _prune_written(self) -> None:
        if not self._open_windows:
            self._written.clear()
            return
        oldest = min(self._open_windows)
        for article_id in [i for i, v in self._written.items() if v <= oldest]:
            del self._written[article_id]

    def _drop_permalink(self, article: Article) -> None:
        # Another article may have claimed the permalink since.
        if self._permalinks.get(article.permalink) == article.id:
            del self._permalinks[article.permalink]

    def _evict_overflow(self) -> list[str]:
        evicted: list[str] = []
        if not self._capacity:
            return evicted
        while len(self._articles) > self._capacity:
            article_id, article = self._articles.popitem(last=False)
            self._drop_permalink(article)
            evicted.append(article_id)
        return evicted
