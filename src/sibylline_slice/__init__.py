"""Slice: composable, copy-free slicing, splitting and token substitution."""

from .bounds import After, Between
from .files import Write, load_file_content
from .primitives import Count, Search, Trim
from .ranges import DropIf, DropIfRange, Take, TakeRange
from .replace import BatchReplace
from .split import Split, SplitBetween, SplitBetweenRange, SplitEager, SplitRange
from .view import Slice, as_slice

__all__ = [
    "Slice",
    "as_slice",
    "Trim",
    "Search",
    "Count",
    "After",
    "Between",
    "Split",
    "SplitRange",
    "SplitEager",
    "SplitBetween",
    "SplitBetweenRange",
    "DropIf",
    "DropIfRange",
    "Take",
    "TakeRange",
    "BatchReplace",
    "load_file_content",
    "Write",
    "TableConfig",
]


def __getattr__(name: str):
    if name == "TableConfig":
        # Cache on module to avoid repeated imports
        import sys

        from .config import TableConfig

        setattr(sys.modules[__name__], name, TableConfig)
        return TableConfig
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
