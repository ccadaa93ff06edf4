"""
Container for a value that may be absent.

``Optional`` makes absence explicit: callers pick a fallback with
``or_else``/``or_else_get`` instead of checking for None. ``None`` is
never a present value; ``of_nullable(None)`` is the empty Optional.
"""

import typing
from typing import Any, Callable, Generic, TypeVar

from ..errors import AbsentValueError, InvalidInputError

T = TypeVar("T")
R = TypeVar("R")


class Optional(Generic[T]):
    """Either holds exactly one non-None value or is empty."""

    __slots__ = ("_value",)

    def __init__(self, value: Any = None):
        self._value = value

    @classmethod
    def of(cls, value: T) -> "Optional[T]":
        if value is None:
            raise InvalidInputError(
                "Optional.of() requires a non-None value",
                value=None,
                expected="non-None value"
            )
        return cls(value)

    @classmethod
    def of_nullable(cls, value: Any) -> "Optional[Any]":
        if value is None:
            return cls.empty()
        return cls(value)

    @classmethod
    def empty(cls) -> "Optional[Any]":
        return _EMPTY

    def is_present(self) -> bool:
        return self._value is not None

    def is_empty(self) -> bool:
        return self._value is None

    def get(self) -> T:
        if self._value is None:
            raise AbsentValueError()
        return self._value

    def if_present(self, action: Callable[[T], Any]) -> None:
        if self._value is not None:
            action(self._value)

    def if_present_or_else(self, action: Callable[[T], Any], empty_action: Callable[[], Any]) -> None:
        if self._value is not None:
            action(self._value)
        else:
            empty_action()

    def or_else(self, other: Any) -> Any:
        return self._value if self._value is not None else other

    def or_else_get(self, supplier: Callable[[], Any]) -> Any:
        """Like or_else, but the fallback is only computed when empty."""
        return self._value if self._value is not None else supplier()

    def or_else_raise(self, exc_factory: typing.Optional[Callable[[], Exception]] = None) -> T:
        if self._value is not None:
            return self._value
        if exc_factory is None:
            raise AbsentValueError()
        raise exc_factory()

    def map(self, fn: Callable[[T], R]) -> "Optional[R]":
        if self._value is None:
            return self
        return Optional.of_nullable(fn(self._value))

    def flat_map(self, fn: Callable[[T], "Optional[R]"]) -> "Optional[R]":
        if self._value is None:
            return self
        result = fn(self._value)
        if not isinstance(result, Optional):
            raise InvalidInputError(
                "flat_map function must return an Optional",
                value=result,
                expected="Optional"
            )
        return result

    def filter(self, predicate: Callable[[T], bool]) -> "Optional[T]":
        if self._value is None or predicate(self._value):
            return self
        return Optional.empty()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return self.is_present()

    def __repr__(self) -> str:
        if self._value is None:
            return "Optional.empty"
        return f"Optional[{self._value!r}]"


_EMPTY = Optional()
