"""Single-pass token substitution.

A :class:`BatchReplace` table maps literal tokens, markers included, to
their replacements::

    >>> table = BatchReplace(("${name}", "world"), ("${x}", "1"))
    >>> table.within("hello ${name}, ${x}${x}, ${unknown}")
    'hello world, 11, ${unknown}'

Unknown tokens and an unterminated trailing token are copied through
unchanged. Replacement text is never scanned again, so a replacement that
itself contains a token is not expanded.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from .primitives import Count
from .view import Sliceable, as_pattern, as_slice

log = logging.getLogger(__name__)

DEFAULT_OPEN_MARKER = "${"
DEFAULT_CLOSE_MARKER = "}"


class BatchReplace:
    """Ordered, immutable substitution table.

    Args:
        *pairs: ``(token, replacement)`` pairs. When a token appears more
            than once the first pair wins.
        open_marker: Text that starts a token.
        close_marker: Text that ends a token.
    """

    __slots__ = ("pairs", "open_marker", "close_marker", "_lookup")

    def __init__(
        self,
        *pairs: tuple[Sliceable, Sliceable],
        open_marker: str = DEFAULT_OPEN_MARKER,
        close_marker: str = DEFAULT_CLOSE_MARKER,
    ) -> None:
        if not open_marker or not close_marker:
            raise ValueError("Token markers must be non-empty")

        normalized: list[tuple[str, str]] = []
        for pair in pairs:
            if len(pair) != 2:
                raise ValueError(f"Substitution pairs need a token and a replacement, got {pair!r}")
            token, replacement = pair
            normalized.append((as_pattern(token), as_pattern(replacement)))

        self.pairs: tuple[tuple[str, str], ...] = tuple(normalized)
        self.open_marker = open_marker
        self.close_marker = close_marker

        # First occurrence of a token wins, later duplicates are ignored.
        lookup: dict[str, str] = {}
        for token, replacement in self.pairs:
            lookup.setdefault(token, replacement)
        self._lookup = lookup

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str], **markers: str) -> BatchReplace:
        """Build a table from a mapping, keeping its iteration order."""
        return cls(*mapping.items(), **markers)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]], **markers: str) -> BatchReplace:
        return cls(*pairs, **markers)

    def lookup(self, token: str) -> str | None:
        """Replacement for *token*, or ``None`` if the table does not know it."""
        return self._lookup.get(token)

    def estimate(self, source: Sliceable) -> int:
        """Approximate length of the rewritten text.

        Tokens that overlap one another are not modelled, so this is a
        sizing hint rather than an exact bound.
        """
        total = len(source)
        for token, replacement in self.pairs:
            total += (len(replacement) - len(token)) * Count(token).within(source)
        return total

    def within(self, source: Sliceable) -> str:
        """Rewrite *source* in one left-to-right pass and return the new text."""
        view = as_slice(source)
        buffer, pos, end = view.buffer, view.start, view.stop
        open_marker, close_marker = self.open_marker, self.close_marker

        if log.isEnabledFor(logging.DEBUG):
            log.debug(
                "Rewriting %d chars with %d tokens (estimated output %d chars)",
                len(view),
                len(self.pairs),
                self.estimate(view),
            )

        out: list[str] = []
        replaced = 0
        while pos < end:
            token_start = buffer.find(open_marker, pos, end)
            if token_start == -1:
                out.append(buffer[pos:end])
                break
            out.append(buffer[pos:token_start])

            token_end = buffer.find(close_marker, token_start + len(open_marker), end)
            if token_end == -1:
                # Unterminated token: pass the fragment through.
                out.append(buffer[token_start:end])
                break
            token_end += len(close_marker)

            token = buffer[token_start:token_end]
            replacement = self._lookup.get(token)
            if replacement is None:
                out.append(token)
            else:
                out.append(replacement)
                replaced += 1
            pos = token_end

        log.debug("Replaced %d tokens", replaced)
        return "".join(out)

    def __ror__(self, source: Sliceable) -> str:
        return self.within(source)

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.pairs)

    def __repr__(self) -> str:
        return f"BatchReplace({len(self.pairs)} pairs, markers={self.open_marker!r}...{self.close_marker!r})"
