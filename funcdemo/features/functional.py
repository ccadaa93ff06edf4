"""
Functional interface wrappers with composition.

Each wrapper holds a plain callable and adds the composition helpers the
functional interfaces provide as default methods (``and_then``, ``negate``
and friends) plus a few static factories (``identity``, ``is_equal``).
Wrappers are themselves callable, so they can be passed anywhere a plain
function is expected.
"""

from typing import Any, Callable, Generic, TypeVar

from ..errors import InvalidInputError

T = TypeVar("T")
R = TypeVar("R")
V = TypeVar("V")


def _require_callable(fn: Any, role: str) -> None:
    if not callable(fn):
        raise InvalidInputError(
            f"{role} requires a callable, got {type(fn).__name__}",
            value=fn,
            expected="callable"
        )


class Predicate(Generic[T]):
    """Boolean-valued function of one argument."""

    def __init__(self, fn: Callable[[T], bool]):
        _require_callable(fn, "Predicate")
        self._fn = fn

    def test(self, value: T) -> bool:
        return bool(self._fn(value))

    __call__ = test

    def and_(self, other: Callable[[T], bool]) -> "Predicate[T]":
        """Short-circuiting logical AND of this predicate and another."""
        other_pred = Predicate.of(other)
        return Predicate(lambda v: self.test(v) and other_pred.test(v))

    def or_(self, other: Callable[[T], bool]) -> "Predicate[T]":
        """Short-circuiting logical OR of this predicate and another."""
        other_pred = Predicate.of(other)
        return Predicate(lambda v: self.test(v) or other_pred.test(v))

    def negate(self) -> "Predicate[T]":
        return Predicate(lambda v: not self.test(v))

    @staticmethod
    def of(fn: Callable[[T], bool]) -> "Predicate[T]":
        """Wrap a callable, returning it unchanged if already a Predicate."""
        if isinstance(fn, Predicate):
            return fn
        return Predicate(fn)

    @staticmethod
    def is_equal(target: Any) -> "Predicate[Any]":
        """Predicate testing equality with ``target``."""
        return Predicate(lambda v: v == target)

    @staticmethod
    def not_(fn: Callable[[T], bool]) -> "Predicate[T]":
        return Predicate.of(fn).negate()


class Function(Generic[T, R]):
    """Function of one argument producing a result."""

    def __init__(self, fn: Callable[[T], R]):
        _require_callable(fn, "Function")
        self._fn = fn

    def apply(self, value: T) -> R:
        return self._fn(value)

    __call__ = apply

    def and_then(self, after: Callable[[R], V]) -> "Function[T, V]":
        """Apply this function, then ``after`` to its result."""
        _require_callable(after, "Function.and_then")
        return Function(lambda v: after(self.apply(v)))

    def compose(self, before: Callable[[V], T]) -> "Function[V, R]":
        """Apply ``before`` first, then this function to its result."""
        _require_callable(before, "Function.compose")
        return Function(lambda v: self.apply(before(v)))

    @staticmethod
    def identity() -> "Function[Any, Any]":
        return Function(lambda v: v)


class Consumer(Generic[T]):
    """Operation on one argument that returns nothing and acts by side effect."""

    def __init__(self, fn: Callable[[T], Any]):
        _require_callable(fn, "Consumer")
        self._fn = fn

    def accept(self, value: T) -> None:
        self._fn(value)

    __call__ = accept

    def and_then(self, after: Callable[[T], Any]) -> "Consumer[T]":
        """Run this consumer, then ``after``, on the same argument."""
        _require_callable(after, "Consumer.and_then")

        def chained(value: T) -> None:
            self.accept(value)
            after(value)

        return Consumer(chained)


class Supplier(Generic[T]):
    """Zero-argument factory of values."""

    def __init__(self, fn: Callable[[], T]):
        _require_callable(fn, "Supplier")
        self._fn = fn

    def get(self) -> T:
        return self._fn()

    __call__ = get

    def memoize(self) -> "Supplier[T]":
        """Supplier that evaluates this one on first use and caches the value."""
        cache: list = []

        def cached() -> T:
            if not cache:
                cache.append(self.get())
            return cache[0]

        return Supplier(cached)
