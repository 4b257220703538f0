"""Stateless slice primitives: trimming, searching and counting."""

from __future__ import annotations

import string

from .view import Slice, Sliceable, as_pattern, as_slice


class Trim:
    """Strip leading and trailing characters that belong to a character set.

    ``exclude`` is treated as a set of characters, not as a literal
    prefix/suffix::

        >>> str("--a-b--" | Trim("-"))
        'a-b'
    """

    __slots__ = ("exclude",)

    def __init__(self, exclude: Sliceable = string.whitespace) -> None:
        self.exclude = frozenset(as_pattern(exclude))

    def apply(self, source: Sliceable) -> Slice:
        view = as_slice(source)
        buffer, start, stop = view.buffer, view.start, view.stop
        exclude = self.exclude

        while start < stop and buffer[start] in exclude:
            start += 1
        if start == stop:
            return view.at_end()

        while buffer[stop - 1] in exclude:
            stop -= 1
        return Slice(buffer, start, stop)

    def __ror__(self, source: Sliceable) -> Slice:
        return self.apply(source)


class Search:
    """Exact substring search bounded to a slice."""

    __slots__ = ("pattern",)

    def __init__(self, pattern: Sliceable) -> None:
        self.pattern = pattern

    def locate(self, source: Sliceable) -> int | None:
        """Offset of the first match relative to *source*, or ``None`` if absent.

        An empty pattern matches at offset 0.
        """
        pos = as_slice(source).find(as_pattern(self.pattern))
        return None if pos == -1 else pos

    def within(self, source: Sliceable) -> int:
        """Offset of the first match; ``len(source)`` (the end) when absent."""
        pos = self.locate(source)
        return len(source) if pos is None else pos


class Count:
    """Count non-overlapping occurrences, scanning left to right.

    An empty source, or one without a match, counts 0. The scan resumes
    right after the end of each match. An empty pattern never advances the
    scan and counts 0.
    """

    __slots__ = ("pattern",)

    def __init__(self, pattern: Sliceable) -> None:
        self.pattern = pattern

    def within(self, source: Sliceable) -> int:
        pattern = as_pattern(self.pattern)
        view = as_slice(source)
        if not pattern or not view:
            return 0
        return view.count(pattern)
