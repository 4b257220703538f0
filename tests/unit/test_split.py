"""Tests for lazy and eager splitting."""

import pytest

from sibylline_slice.split import Split, SplitBetween, SplitBetweenRange, SplitEager, SplitRange
from sibylline_slice.view import Slice


def texts(pieces):
    return [str(p) for p in pieces]


class TestSplit:
    def test_simple(self):
        pieces = "a,b" | Split(",")
        assert texts(pieces) == ["a", "b"]
        assert pieces.size() == 2

    def test_by_alias(self):
        assert texts("x;y;z" | Split.by(";")) == ["x", "y", "z"]

    def test_consecutive_delimiters_yield_empty_pieces(self):
        pieces = "a,,b" | Split(",")
        assert texts(pieces) == ["a", "", "b"]
        assert pieces.size() == 3

    def test_trailing_delimiter_adds_no_piece(self):
        pieces = "a,,b," | Split(",")
        assert texts(pieces) == ["a", "", "b"]
        assert pieces.size() == 3
        assert len(pieces) == 3

    def test_leading_delimiter(self):
        pieces = ",a" | Split(",")
        assert texts(pieces) == ["", "a"]
        assert pieces.size() == 2

    def test_no_delimiter(self):
        pieces = "abc" | Split(",")
        assert texts(pieces) == ["abc"]
        assert pieces.size() == 1

    def test_empty_source(self):
        pieces = "" | Split(",")
        assert list(pieces) == []
        assert pieces.size() == 0

    def test_only_delimiter(self):
        pieces = "," | Split(",")
        assert texts(pieces) == [""]
        assert pieces.size() == 1

    @pytest.mark.parametrize("text", ["a,b,c", "a,,b,", ",", ",,x", "abc", "a,b,,"])
    def test_size_matches_iteration(self, text):
        pieces = text | Split(",")
        assert pieces.size() == len(list(pieces))

    def test_pieces_are_views(self):
        buf = "one two"
        first, second = buf | Split(" ")
        assert isinstance(first, Slice)
        assert first.buffer is buf and second.buffer is buf
        assert (second.start, second.stop) == (4, 7)

    def test_is_lazy(self):
        pieces = iter("a,b,c" | Split(","))
        assert next(pieces) == "a"
        assert next(pieces) == "b"

    def test_reiterating_restarts(self):
        pieces = "a,b" | Split(",")
        assert texts(pieces) == texts(pieces) == ["a", "b"]

    def test_split_slice(self):
        source = Slice("[1,2,3]", 1, 6)
        assert texts(source | Split(",")) == ["1", "2", "3"]

    def test_returns_range(self):
        assert isinstance("a" | Split(","), SplitRange)

    def test_multi_character_delimiter_rejected(self):
        with pytest.raises(ValueError, match="single character"):
            Split(", ")
        with pytest.raises(ValueError):
            Split("")

    def test_collect(self):
        result = Split(",").collect("a,b")
        assert isinstance(result, list)
        assert result == ["a", "b"]


class TestSplitEager:
    def test_same_tokens_as_lazy(self):
        for text in ["a,b,c", "a,,b,", "", ",x", "abc"]:
            assert SplitEager(text).by(",") == list(text | Split(","))

    def test_returns_list_of_views(self):
        buf = "k=v"
        result = SplitEager(buf).by("=")
        assert result == ["k", "v"]
        assert all(isinstance(p, Slice) and p.buffer is buf for p in result)

    def test_random_access(self):
        result = SplitEager("x y z").by(" ")
        assert result[2] == "z"
        assert len(result) == 3

    def test_delimiter_checked(self):
        with pytest.raises(ValueError):
            SplitEager("a").by("ab")


class TestSplitBetween:
    def test_successive_pairs(self):
        assert texts("<a><b><c>" | SplitBetween("<", ">")) == ["a", "b", "c"]

    def test_text_between_pairs_is_skipped(self):
        source = "x <a> y <bc> z"
        assert texts(source | SplitBetween("<", ">")) == ["a", "bc"]

    def test_multi_character_delimiters(self):
        source = "{{first}} and {{second}}"
        assert texts(source | SplitBetween("{{", "}}")) == ["first", "second"]

    def test_no_left_delimiter(self):
        assert list("abc>" | SplitBetween("<", ">")) == []

    def test_empty_source(self):
        assert list("" | SplitBetween("<", ">")) == []

    def test_unterminated_last_pair_is_dropped(self):
        assert texts("<a><b" | SplitBetween("<", ">")) == ["a"]

    def test_unterminated_first_pair_runs_to_end(self):
        assert texts("<a" | SplitBetween("<", ">")) == ["a"]
        assert texts("x <abc" | SplitBetween("<", ">")) == ["abc"]

    def test_unterminated_pair_after_complete_one_is_dropped(self):
        assert texts("<a> <b" | SplitBetween("<", ">")) == ["a"]

    def test_empty_elements(self):
        assert texts("<><b>" | SplitBetween("<", ">")) == ["", "b"]
        assert texts("<>" | SplitBetween("<", ">")) == [""]

    def test_nesting_is_not_understood(self):
        assert texts("<a<b>c>" | SplitBetween("<", ">")) == ["a<b"]

    def test_same_left_and_right(self):
        assert texts('"a" "b"' | SplitBetween('"', '"')) == ["a", "b"]

    def test_elements_are_views(self):
        buf = "[x][yy]"
        pieces = list(buf | SplitBetween("[", "]"))
        assert all(p.buffer is buf for p in pieces)
        assert (pieces[1].start, pieces[1].stop) == (4, 6)

    def test_reiterating_restarts(self):
        pieces = "<a><b>" | SplitBetween("<", ">")
        assert isinstance(pieces, SplitBetweenRange)
        assert texts(pieces) == texts(pieces)

    def test_empty_delimiters_terminate(self):
        assert texts("abc" | SplitBetween("", "")) == [""]
