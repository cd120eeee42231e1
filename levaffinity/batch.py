"""Score many candidate strings against one word, serially or in threads."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional, Sequence

from .distance import affinity, distance

__all__ = ["Match", "iter_matches", "match_all", "apply_matches"]

KeyFunc = Optional[Callable[[Any], Any]]

DEFAULT_WORKERS = 2


@dataclass(frozen=True)
class Match:
    """The result of comparing one item's text with the search word."""

    item: Any
    text: Any
    distance: int
    affinity: float


def _score(word: Any, item: Any, key: KeyFunc) -> Match:
    text = key(item) if key is not None else item
    edit_distance = distance(word, text, False)
    return Match(
        item=item,
        text=text,
        distance=edit_distance,
        affinity=affinity(len(word), len(text), edit_distance),
    )


def iter_matches(word: Any, items: Iterable[Any], key: KeyFunc = None) -> Iterator[Match]:
    """Yield a case-insensitive :class:`Match` for each item, in order.

    ``key`` extracts the text to compare from an item; without it the item
    itself is compared.
    """
    for item in items:
        yield _score(word, item, key)


def _chunks(items: Sequence[Any], workers: int) -> List[Sequence[Any]]:
    """Split into ``workers`` contiguous slices; the last takes the remainder."""
    per_worker = len(items) // workers
    bounds = [index * per_worker for index in range(workers)] + [len(items)]
    return [items[start:end] for start, end in zip(bounds, bounds[1:])]


def _check_workers(workers: int) -> None:
    if workers < 1:
        raise ValueError("workers must be at least 1")


def match_all(
    word: Any,
    items: Iterable[Any],
    key: KeyFunc = None,
    workers: int = DEFAULT_WORKERS,
) -> List[Match]:
    """Return a :class:`Match` for every item, computed by ``workers`` threads.

    The result keeps the order of ``items``.
    """
    _check_workers(workers)
    pool_items = list(items)
    if workers == 1:
        return list(iter_matches(word, pool_items, key))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        parts = pool.map(
            lambda chunk: list(iter_matches(word, chunk, key)),
            _chunks(pool_items, workers),
        )
        return [match for part in parts for match in part]


def apply_matches(
    word: Any,
    items: Iterable[Any],
    key: KeyFunc,
    callback: Callable[[Match], Any],
    workers: int = 1,
) -> int:
    """Call ``callback`` with the :class:`Match` of every item.

    With more than one worker the items are split into contiguous slices and
    each slice is handled in its own thread, so callbacks may run
    concurrently. Returns the number of items processed.
    """
    _check_workers(workers)
    pool_items = list(items)

    def run(chunk: Sequence[Any]) -> int:
        count = 0
        for match in iter_matches(word, chunk, key):
            callback(match)
            count += 1
        return count

    if workers == 1:
        return run(pool_items)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return sum(pool.map(run, _chunks(pool_items, workers)))