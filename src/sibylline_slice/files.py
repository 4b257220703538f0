"""Loading and saving whole text buffers.

Both helpers swallow I/O failures: a file that cannot be read loads as an
empty string and a destination that cannot be opened is skipped. The
failure is logged so it is not completely silent.
"""

from __future__ import annotations

import logging
import os

from .view import Sliceable, as_slice

log = logging.getLogger(__name__)

StrPath = str | os.PathLike


def load_file_content(path: StrPath, encoding: str = "utf-8") -> str:
    """Return the whole file as text, or ``""`` if it cannot be read."""
    try:
        with open(path, encoding=encoding, newline="") as fin:
            return fin.read()
    except (OSError, UnicodeDecodeError) as exc:
        log.warning("Could not load %s: %s", path, exc)
        return ""


class Write:
    """Write a slice verbatim to a file::

    Write(source | Between("<body>", "</body>")).to("body.html")
    """

    __slots__ = ("source",)

    def __init__(self, source: Sliceable) -> None:
        self.source = as_slice(source)

    def to(self, location: StrPath, encoding: str = "utf-8") -> bool:
        """Truncate or create *location* and write the slice into it.

        Returns:
            True if the file was written, False if it could not be opened.
        """
        try:
            # newline="" keeps line endings exactly as they are in the buffer.
            with open(location, "w", encoding=encoding, newline="") as fout:
                fout.write(self.source.text)
        except OSError as exc:
            log.warning("Could not write %s: %s", location, exc)
            return False
        return True
