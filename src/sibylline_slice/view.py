"""Non-owning string views.

A :class:`Slice` references a caller-owned ``str`` by ``(buffer, start, stop)``
and never copies it. Sub-views share the same buffer; text is only
materialized by ``str(view)`` or :attr:`Slice.text`.

A view holds a reference to its buffer, so the buffer lives at least as
long as the view does.
"""

from __future__ import annotations

from typing import Union


class Slice:
    """Read-only window ``buffer[start:stop]`` into a shared string."""

    __slots__ = ("buffer", "start", "stop")

    def __init__(self, buffer: str, start: int = 0, stop: int | None = None) -> None:
        size = len(buffer)
        if stop is None or stop > size:
            stop = size
        start = min(max(start, 0), size)
        self.buffer = buffer
        self.start = start
        self.stop = max(stop, start)

    @staticmethod
    def of(source: Sliceable) -> Slice:
        """View *source* in full; slices are returned unchanged."""
        if isinstance(source, Slice):
            return source
        return Slice(source)

    @property
    def text(self) -> str:
        """Materialize the viewed characters as a new string."""
        return self.buffer[self.start : self.stop]

    def view(self, start: int, stop: int | None = None) -> Slice:
        """Sub-view using offsets relative to this view's start."""
        size = len(self)
        stop = size if stop is None else min(stop, size)
        start = max(0, min(start, stop))
        return Slice(self.buffer, self.start + start, self.start + stop)

    def at_end(self) -> Slice:
        """Empty view positioned at this view's end."""
        return Slice(self.buffer, self.stop, self.stop)

    def find(self, pattern: str, offset: int = 0) -> int:
        """Like ``str.find`` but bounded to the view; result is relative, -1 if absent."""
        pos = self.buffer.find(pattern, self.start + offset, self.stop)
        return -1 if pos == -1 else pos - self.start

    def count(self, pattern: str) -> int:
        return self.buffer.count(pattern, self.start, self.stop)

    def endswith(self, suffix: str) -> bool:
        return self.buffer.endswith(suffix, self.start, self.stop)

    def __len__(self) -> int:
        return self.stop - self.start

    def __bool__(self) -> bool:
        return self.stop > self.start

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Slice({self.text!r}, start={self.start}, stop={self.stop})"

    def __getitem__(self, key: int | slice) -> str | Slice:
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise TypeError("Slice does not support a step when slicing")
            start, stop, _ = key.indices(len(self))
            return self.view(start, stop)
        size = len(self)
        if key < 0:
            key += size
        if not 0 <= key < size:
            raise IndexError("Slice index out of range")
        return self.buffer[self.start + key]

    def __contains__(self, pattern: object) -> bool:
        return self.find(str(pattern)) != -1

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Slice):
            return len(self) == len(other) and self.text == other.text
        if isinstance(other, str):
            return len(self) == len(other) and self.buffer.startswith(other, self.start, self.stop)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)


Sliceable = Union[str, Slice]


def as_slice(source: Sliceable) -> Slice:
    """Coerce a ``str`` or :class:`Slice` into a :class:`Slice`."""
    return Slice.of(source)


def as_pattern(pattern: Sliceable) -> str:
    """Text of a delimiter, which may be given as a ``str`` or a :class:`Slice`."""
    return pattern.text if isinstance(pattern, Slice) else pattern
