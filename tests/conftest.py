"""Shared test fixtures for sibylline-slice."""

import pytest

from sibylline_slice.replace import BatchReplace


@pytest.fixture
def greeting_table():
    """A small substitution table with a duplicate token."""
    return BatchReplace(
        ("${name}", "world"),
        ("${x}", "1"),
        ("${name}", "ignored"),
    )


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point HOME and the working directory at an empty temp tree."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    return home, work
