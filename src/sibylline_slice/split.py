"""Splitting a slice on a delimiter character or a delimiter pair.

:class:`Split` and :class:`SplitBetween` are lazy: piping a source through
them returns a range object whose iterator computes each element from the
remaining part of the source on demand. Iterating the range again starts
over from the captured source. :class:`SplitEager` materializes the same
tokens as a list.
"""

from __future__ import annotations

from collections.abc import Iterator

from .bounds import After
from .primitives import Search
from .view import Slice, Sliceable, as_pattern, as_slice


def _check_delimiter(delimiter: Sliceable) -> str:
    delimiter = as_pattern(delimiter)
    if len(delimiter) != 1:
        raise ValueError(f"Split delimiter must be a single character, got {delimiter!r}")
    return delimiter


# ---------------------------------------------------------------------------
# Single delimiter
# ---------------------------------------------------------------------------


class SplitRange:
    """Lazy sequence of the pieces of ``source`` separated by ``delimiter``.

    Consecutive delimiters produce empty pieces. A trailing delimiter does
    not produce a final empty piece, because iteration stops as soon as
    nothing is left to scan.
    """

    __slots__ = ("source", "delimiter")

    def __init__(self, source: Slice, delimiter: str) -> None:
        self.source = source
        self.delimiter = delimiter

    def __iter__(self) -> Iterator[Slice]:
        rest = self.source
        while rest:
            pos = rest.find(self.delimiter)
            if pos == -1:
                yield rest
                return
            yield rest.view(0, pos)
            rest = rest.view(pos + 1)

    def size(self) -> int:
        """Number of pieces iteration will produce, computed without iterating.

        An empty source produces no pieces, so its size is 0 rather than the
        1 that "delimiters plus one" would give.
        """
        if not self.source:
            return 0
        trailing = self.source.endswith(self.delimiter)
        return self.source.count(self.delimiter) + (not trailing)

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"SplitRange({self.source!r}, delimiter={self.delimiter!r})"


class Split:
    """Lazily split a slice on a single delimiter character.

    Example::

        >>> [str(piece) for piece in "a,,b" | Split.by(",")]
        ['a', '', 'b']
    """

    __slots__ = ("delimiter",)

    def __init__(self, delimiter: Sliceable) -> None:
        self.delimiter = _check_delimiter(delimiter)

    @classmethod
    def by(cls, delimiter: Sliceable) -> Split:
        return cls(delimiter)

    def apply(self, source: Sliceable) -> SplitRange:
        return SplitRange(as_slice(source), self.delimiter)

    def collect(self, source: Sliceable) -> list[Slice]:
        """Eager form of :meth:`apply`."""
        return SplitEager(source).by(self.delimiter)

    def __ror__(self, source: Sliceable) -> SplitRange:
        return self.apply(source)


class SplitEager:
    """Split a slice up front, for callers that need random access or several passes."""

    __slots__ = ("source",)

    def __init__(self, source: Sliceable) -> None:
        self.source = as_slice(source)

    def by(self, delimiter: Sliceable) -> list[Slice]:
        return list(SplitRange(self.source, _check_delimiter(delimiter)))


# ---------------------------------------------------------------------------
# Delimiter pair
# ---------------------------------------------------------------------------


class SplitBetweenRange:
    """Lazy sequence of the text enclosed by successive ``left``/``right`` pairs.

    Pairs are resolved one after another in scan order; nesting is not
    understood. The first element is ``Between("", right)`` of the text after
    the first ``left``, so it runs to the end when ``right`` is missing. After
    each advance, iteration stops as soon as no ``right`` remains, so a later
    unterminated pair is not yielded.
    """

    __slots__ = ("source", "left", "right")

    def __init__(self, source: Slice, left: Sliceable, right: Sliceable) -> None:
        self.source = source
        self.left = left
        self.right = right

    def __iter__(self) -> Iterator[Slice]:
        find_right = Search(self.right)
        skip_left = After(self.left)
        right_len = len(self.right)

        rest = skip_left.apply(self.source)
        while rest:
            pos = find_right.locate(rest)
            if pos is None:
                # Only the first element gets here: it runs to the end of the source.
                yield rest
                return
            yield rest.view(0, pos)

            start = rest.start
            rest = skip_left.apply(rest.view(pos + right_len))
            if rest.start == start:
                # Both delimiters are empty; nothing would ever be consumed.
                return
            if find_right.locate(rest) is None:
                return

    def __repr__(self) -> str:
        return f"SplitBetweenRange({self.source!r}, left={self.left!r}, right={self.right!r})"


class SplitBetween:
    """Lazily extract every span enclosed by a ``left``/``right`` delimiter pair.

    Example::

        >>> [str(tag) for tag in "<a><b><c>" | SplitBetween("<", ">")]
        ['a', 'b', 'c']
    """

    __slots__ = ("left", "right")

    def __init__(self, left: Sliceable, right: Sliceable) -> None:
        self.left = left
        self.right = right

    def apply(self, source: Sliceable) -> SplitBetweenRange:
        return SplitBetweenRange(as_slice(source), self.left, self.right)

    def __ror__(self, source: Sliceable) -> SplitBetweenRange:
        return self.apply(source)
