"""
Single-method callback shapes and their combinators.

Every wrapper here is itself callable, so a plain function or lambda can be
used wherever one is expected, and a wrapper can be passed anywhere a plain
callable is accepted. Wrappers hold no state besides the callables they were
built from.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")
V = TypeVar("V")


def compose(f: Callable[[T], R], g: Callable[[R], V]) -> "Function[T, V]":
    """Return ``h`` such that ``h(x) == g(f(x))``."""

    def composed(value: T) -> V:
        return g(f(value))

    return Function(composed)


class Function(Generic[T, R]):
    """One argument in, one result out."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[T], R]) -> None:
        if not callable(fn):
            raise TypeError(f"expected a callable, got {type(fn).__name__}")
        self._fn = fn

    def __call__(self, value: T) -> R:
        return self._fn(value)

    def apply(self, value: T) -> R:
        return self._fn(value)

    def and_then(self, after: Callable[[R], V]) -> "Function[T, V]":
        return compose(self._fn, after)

    def compose(self, before: Callable[[V], T]) -> "Function[V, R]":
        return compose(before, self._fn)

    @staticmethod
    def identity() -> "Function[Any, Any]":
        return Function(lambda value: value)


class UnaryOperator(Function[T, T]):
    """A Function whose argument and result have the same type."""

    __slots__ = ()

    @staticmethod
    def identity() -> "UnaryOperator[Any]":
        return UnaryOperator(lambda value: value)


class BiFunction(Generic[T, U, R]):
    """Two arguments in, one result out."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[T, U], R]) -> None:
        if not callable(fn):
            raise TypeError(f"expected a callable, got {type(fn).__name__}")
        self._fn = fn

    def __call__(self, first: T, second: U) -> R:
        return self._fn(first, second)

    def apply(self, first: T, second: U) -> R:
        return self._fn(first, second)

    def and_then(self, after: Callable[[R], V]) -> "BiFunction[T, U, V]":
        fn = self._fn
        return BiFunction(lambda first, second: after(fn(first, second)))


class Predicate(Generic[T]):
    """One argument in, a boolean out."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[T], bool]) -> None:
        if not callable(fn):
            raise TypeError(f"expected a callable, got {type(fn).__name__}")
        self._fn = fn

    def __call__(self, value: T) -> bool:
        return bool(self._fn(value))

    def test(self, value: T) -> bool:
        return self(value)

    def and_(self, other: Callable[[T], bool]) -> "Predicate[T]":
        return Predicate(lambda value: self(value) and bool(other(value)))

    def or_(self, other: Callable[[T], bool]) -> "Predicate[T]":
        return Predicate(lambda value: self(value) or bool(other(value)))

    def negate(self) -> "Predicate[T]":
        return Predicate(lambda value: not self(value))

    @staticmethod
    def is_equal(target: Any) -> "Predicate[Any]":
        return Predicate(lambda value: value == target)


class Supplier(Generic[R]):
    """No arguments in, a value out; each call may produce a new value."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[], R]) -> None:
        if not callable(fn):
            raise TypeError(f"expected a callable, got {type(fn).__name__}")
        self._fn = fn

    def __call__(self) -> R:
        return self._fn()

    def get(self) -> R:
        return self._fn()


class Consumer(Generic[T]):
    """
    One argument in, nothing out.

    Whatever the wrapped callable returns is dropped, including inside
    ``and_then`` chains: the second consumer receives the original argument,
    not the first one's result.
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[T], Any]) -> None:
        if not callable(fn):
            raise TypeError(f"expected a callable, got {type(fn).__name__}")
        self._fn = fn

    def __call__(self, value: T) -> None:
        self._fn(value)

    def accept(self, value: T) -> None:
        self._fn(value)

    def and_then(self, after: Callable[[T], Any]) -> "Consumer[T]":
        def chained(value: T) -> None:
            self._fn(value)
            after(value)

        return Consumer(chained)


__all__ = [
    "compose",
    "Function",
    "UnaryOperator",
    "BiFunction",
    "Predicate",
    "Supplier",
    "Consumer",
]
