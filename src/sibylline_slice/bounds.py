"""Delimiter-bounded extraction.

Both adaptors return views into the source and support the in-place pipe::

    body = page | After("<body>")
    body |= Between("<p>", "</p>")

A bound that is not found is reported explicitly by
:meth:`~sibylline_slice.primitives.Search.locate`; the result is then an
empty view at the end of the source rather than a view holding the
unmatched remainder.
"""

from __future__ import annotations

from .primitives import Search
from .view import Slice, Sliceable, as_slice


class After:
    """Everything after the first occurrence of ``left``."""

    __slots__ = ("left",)

    def __init__(self, left: Sliceable) -> None:
        self.left = left

    def apply(self, source: Sliceable) -> Slice:
        view = as_slice(source)
        pos = Search(self.left).locate(view)
        if pos is None:
            return view.at_end()
        return view.view(pos + len(self.left))

    def __ror__(self, source: Sliceable) -> Slice:
        return self.apply(source)


class Between:
    """The text strictly between ``left`` and the next ``right`` after it.

    - ``left`` missing: empty view at the end of the source.
    - ``right`` missing: everything after ``left`` (same as :class:`After`).
    """

    __slots__ = ("left", "right")

    def __init__(self, left: Sliceable, right: Sliceable) -> None:
        self.left = left
        self.right = right

    def apply(self, source: Sliceable) -> Slice:
        rest = After(self.left).apply(source)
        pos = Search(self.right).locate(rest)
        if pos is None:
            return rest
        return rest.view(0, pos)

    def __ror__(self, source: Sliceable) -> Slice:
        return self.apply(source)
