"""Generic lazy adaptors that work on any iterable, including split ranges.

    >>> pieces = " a, ,b,c" | Split(",") | DropIf(lambda s: not (s | Trim())) | Take(2)
    >>> [str(p) for p in pieces]
    [' a', 'b']
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from itertools import islice
from typing import Generic, TypeVar

T = TypeVar("T")


class DropIfRange(Generic[T]):
    """Elements of ``base`` for which ``predicate`` is false."""

    __slots__ = ("base", "predicate")

    def __init__(self, base: Iterable[T], predicate: Callable[[T], object]) -> None:
        self.base = base
        self.predicate = predicate

    def __iter__(self) -> Iterator[T]:
        predicate = self.predicate
        for item in self.base:
            if not predicate(item):
                yield item


class DropIf(Generic[T]):
    """Skip every element that satisfies ``predicate``.

    The skip is applied at the front and again after every advance, so this
    removes all matching elements, not only a leading run.
    """

    __slots__ = ("predicate",)

    def __init__(self, predicate: Callable[[T], object]) -> None:
        self.predicate = predicate

    def apply(self, base: Iterable[T]) -> DropIfRange[T]:
        return DropIfRange(base, self.predicate)

    def __ror__(self, base: Iterable[T]) -> DropIfRange[T]:
        return self.apply(base)


class TakeRange(Generic[T]):
    """At most ``n`` elements from the front of ``base``."""

    __slots__ = ("base", "n")

    def __init__(self, base: Iterable[T], n: int) -> None:
        self.base = base
        self.n = n

    def __iter__(self) -> Iterator[T]:
        if self.n <= 0:
            return iter(())
        # islice stops before pulling element n+1 from the base iterator.
        return islice(self.base, self.n)


class Take(Generic[T]):
    """Limit a sequence to its first ``n`` elements; ``n <= 0`` yields nothing."""

    __slots__ = ("n",)

    def __init__(self, n: int) -> None:
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Take count must be an int, got {type(n).__name__}")
        self.n = n

    def apply(self, base: Iterable[T]) -> TakeRange[T]:
        return TakeRange(base, self.n)

    def __ror__(self, base: Iterable[T]) -> TakeRange[T]:
        return self.apply(base)
