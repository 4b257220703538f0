"""Sample rewrite exercising known, unknown and repeated tokens."""

from .replace import BatchReplace

DEMO_TEXT = (
    "this is ${item1}, not ${item 1}; lets see ${a  b c}; its ${item1} again; "
    "${k} can be replaced. and this is the ${last}"
)

DEMO_TABLE = BatchReplace(
    ("${item1}", " item 1"),
    ("${a  b c}", "[ a b c ]"),
    ("${k}", "1234"),
    ("${unused}", "1231123"),
    ("${last}", "!~LAST~!"),
)


def demo_batch_replace(table: BatchReplace | None = None) -> str:
    """Rewrite :data:`DEMO_TEXT` with *table* (the built-in sample table by default)."""
    if table is None:
        table = DEMO_TABLE
    return table.within(DEMO_TEXT)
