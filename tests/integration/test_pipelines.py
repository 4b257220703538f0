"""Composed pipelines over realistic buffers."""

from sibylline_slice import (
    After,
    BatchReplace,
    Between,
    Count,
    DropIf,
    Search,
    Split,
    SplitBetween,
    SplitEager,
    Take,
    Trim,
)

CONFIG_TEXT = """\
# comment
[server]
host = example.org
port = 8080

[client]
retries = 3
"""


class TestPipelines:
    def test_section_values(self):
        section = CONFIG_TEXT | After("[server]") | Between("", "[")
        lines = section | Split("\n") | DropIf(lambda line: not (line | Trim()))
        pairs = {str(k | Trim()): str(v | Trim()) for k, v in (SplitEager(line).by("=") for line in lines)}
        assert pairs == {"host": "example.org", "port": "8080"}

    def test_all_sections(self):
        names = [str(n) for n in CONFIG_TEXT | SplitBetween("[", "]")]
        assert names == ["server", "client"]

    def test_first_two_nonblank_lines(self):
        lines = CONFIG_TEXT | Split("\n") | DropIf(lambda line: not line or line.find("#") == 0) | Take(2)
        assert [str(line) for line in lines] == ["[server]", "host = example.org"]

    def test_every_stage_views_the_original_buffer(self):
        buf = CONFIG_TEXT
        port = buf | After("port") | Between("= ", "\n")
        assert port == "8080"
        assert port.buffer is buf
        assert Search("8080").within(buf) == port.start

    def test_template_rewrite_after_extraction(self):
        page = "<tpl>Dear ${name}, you owe ${amount}.</tpl><footer/>"
        body = page | Between("<tpl>", "</tpl>")
        table = BatchReplace(("${name}", "Ada"), ("${amount}", "$3"))
        assert Count("${").within(body) == 2
        assert table.within(body) == "Dear Ada, you owe $3."
        assert table.estimate(body) == len(table.within(body))
