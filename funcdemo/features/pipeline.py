"""
Lazy stream pipelines over in-memory sequences.

Intermediate operations (filter, map, ...) build a new stage without
touching the data. A terminal operation (to_list, reduce, group_by, ...)
pulls the elements through every stage in order. A stream can be
consumed once; a second terminal operation raises StreamConsumedError.
"""

import functools
import itertools
import typing
from typing import Any, Callable, Generic, Hashable, Iterable, Iterator, TypeVar

from ..errors import InvalidInputError, StreamConsumedError
from .aggregation import Summary, summarize
from .optional import Optional

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)

_NO_IDENTITY = object()


def group_by(items: Iterable[T], classifier: Callable[[T], K]) -> dict[K, list[T]]:
    """
    Partition items into groups keyed by ``classifier``.

    Keys appear in first-seen order and each group keeps input order, so
    every element lands in exactly one group.
    """
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(classifier(item), []).append(item)
    return groups


def partition_by(items: Iterable[T], predicate: Callable[[T], bool]) -> dict[bool, list[T]]:
    """Split items on a predicate. Both ``True`` and ``False`` keys are always present."""
    parts: dict[bool, list[T]] = {True: [], False: []}
    for item in items:
        parts[bool(predicate(item))].append(item)
    return parts


class Stream(Generic[T]):
    """Single-use, lazily evaluated sequence of elements."""

    def __init__(self, source: Iterable[T]):
        if source is None:
            raise InvalidInputError("Stream source is required", value=None, expected="iterable")
        self._source: Iterator[T] = iter(source)
        self._consumed = False

    @classmethod
    def of(cls, *items: T) -> "Stream[T]":
        return cls(items)

    @classmethod
    def empty(cls) -> "Stream[Any]":
        return cls(())

    @classmethod
    def iterate(cls, seed: T, step: Callable[[T], T]) -> "Stream[T]":
        """Infinite stream seed, step(seed), step(step(seed)), ... Bound it with limit()."""
        def generate() -> Iterator[T]:
            value = seed
            while True:
                yield value
                value = step(value)
        return cls(generate())

    def _chain(self, iterator: Iterator[R]) -> "Stream[R]":
        self._take()
        return Stream(iterator)

    def _take(self) -> Iterator[T]:
        if self._consumed:
            raise StreamConsumedError()
        self._consumed = True
        return self._source

    # Intermediate operations

    def filter(self, predicate: Callable[[T], bool]) -> "Stream[T]":
        return self._chain(item for item in self._source if predicate(item))

    def map(self, fn: Callable[[T], R]) -> "Stream[R]":
        return self._chain(fn(item) for item in self._source)

    def flat_map(self, fn: Callable[[T], Iterable[R]]) -> "Stream[R]":
        return self._chain(itertools.chain.from_iterable(fn(item) for item in self._source))

    def peek(self, action: Callable[[T], Any]) -> "Stream[T]":
        """Run ``action`` on each element as it flows past."""
        def observe() -> Iterator[T]:
            for item in self._source:
                action(item)
                yield item
        return self._chain(observe())

    def distinct(self) -> "Stream[T]":
        def unique() -> Iterator[T]:
            seen = set()
            for item in self._source:
                if item not in seen:
                    seen.add(item)
                    yield item
        return self._chain(unique())

    def sorted(self, key: typing.Optional[Callable[[T], Any]] = None, reverse: bool = False) -> "Stream[T]":
        def ordered() -> Iterator[T]:
            yield from sorted(self._source, key=key, reverse=reverse)
        return self._chain(ordered())

    def limit(self, max_size: int) -> "Stream[T]":
        if max_size < 0:
            raise InvalidInputError("limit must be non-negative", value=max_size)
        return self._chain(itertools.islice(self._source, max_size))

    def skip(self, count: int) -> "Stream[T]":
        if count < 0:
            raise InvalidInputError("skip must be non-negative", value=count)
        return self._chain(itertools.islice(self._source, count, None))

    # Terminal operations

    def to_list(self) -> list[T]:
        return list(self._take())

    def for_each(self, action: Callable[[T], Any]) -> None:
        for item in self._take():
            action(item)

    def reduce(self, fn: Callable[[Any, T], Any], identity: Any = _NO_IDENTITY) -> Any:
        """
        Fold elements left to right.

        With an identity the result is always a plain value (the identity
        for an empty stream). Without one the result is an Optional, empty
        when the stream had no elements.
        """
        items = self._take()
        if identity is not _NO_IDENTITY:
            return functools.reduce(fn, items, identity)

        first = next(items, _NO_IDENTITY)
        if first is _NO_IDENTITY:
            return Optional.empty()
        return Optional.of(functools.reduce(fn, items, first))

    def count(self) -> int:
        return sum(1 for _ in self._take())

    def sum(self) -> Any:
        return sum(self._take())

    def summary(self) -> Summary:
        return summarize(self._take())

    def group_by(self, classifier: Callable[[T], K]) -> dict[K, list[T]]:
        return group_by(self._take(), classifier)

    def partition_by(self, predicate: Callable[[T], bool]) -> dict[bool, list[T]]:
        return partition_by(self._take(), predicate)

    def join(self, separator: str = "") -> str:
        return separator.join(str(item) for item in self._take())

    def find_first(self) -> Optional:
        return Optional.of_nullable(next(self._take(), None))

    def any_match(self, predicate: Callable[[T], bool]) -> bool:
        return any(predicate(item) for item in self._take())

    def all_match(self, predicate: Callable[[T], bool]) -> bool:
        return all(predicate(item) for item in self._take())

    def none_match(self, predicate: Callable[[T], bool]) -> bool:
        return not any(predicate(item) for item in self._take())
