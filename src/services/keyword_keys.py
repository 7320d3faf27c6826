"""
Keyword identity helpers shared by the cleaning and analysis stages.

All keyword equality in the pipeline is case-insensitive exact-string
matching, so every stage keys its bookkeeping on `normalize_keyword`.
"""

from typing import Callable, Dict, Generic, List, Tuple, TypeVar

T = TypeVar("T")

METRIC_FIELDS = ("search_volume", "cpc", "kd")


def normalize_keyword(keyword: str) -> str:
    return keyword.lower()


class FirstSeenIndex(Generic[T]):
    """Insertion-ordered map from normalized keyword to the value recorded
    the first time that keyword was encountered.

    Later encounters of the same normalized form never replace the stored
    value; callers decide what to do with them via the `is_new` flag.
    """

    def __init__(self) -> None:
        self._items: Dict[str, T] = {}

    def first_seen(self, keyword: str, factory: Callable[[], T]) -> Tuple[T, bool]:
        key = normalize_keyword(keyword)
        if key in self._items:
            return self._items[key], False
        value = factory()
        self._items[key] = value
        return value, True

    def mark(self, keyword: str) -> bool:
        """Record `keyword`; return True only on its first encounter."""
        _, is_new = self.first_seen(keyword, lambda: None)
        return is_new

    def values(self) -> List[T]:
        return list(self._items.values())


def fill_missing_metrics(target: object, source: object) -> None:
    """Copy metric values from `source` onto `target` where `target` has none.

    A value that is already set is never overwritten.
    """
    for name in METRIC_FIELDS:
        if getattr(target, name) is None:
            value = getattr(source, name)
            if value is not None:
                setattr(target, name, value)


class IdSequence:
    """Run-scoped generator for CleanableItem ids."""

    def __init__(self, prefix: str = "clean") -> None:
        self._prefix = prefix
        self._counter = 0

    def next_id(self) -> str:
        self._counter += 1
        return f"{self._prefix}_{self._counter}"
