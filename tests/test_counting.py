"""Tests for per-kind counts."""

from todoscan.core.counting import count_by_kind, filter_by_kind
from todoscan.core.extractor import TodoExtractor
from todoscan.core.types import TodoKind

from .conftest import SAMPLE_LIB, SAMPLE_MAIN, make_entry


def test_counts_of_sample_project():
    entries = TodoExtractor().scan_many([("main.rs", SAMPLE_MAIN), ("lib.rs", SAMPLE_LIB)])
    counts = count_by_kind(entries)

    assert counts.todo == 3
    assert counts.fixme == 2
    assert counts.total == len(entries) == 5
    assert counts.as_dict() == {"TODO": 3, "FIXME": 2}


def test_counts_of_nothing():
    counts = count_by_kind([])

    assert counts.todo == 0
    assert counts.fixme == 0
    assert counts[TodoKind.FIXME] == 0
    assert list(counts) == [TodoKind.TODO, TodoKind.FIXME]


def test_filter_by_kind():
    entries = [
        make_entry(line=1, kind=TodoKind.TODO),
        make_entry(line=2, kind=TodoKind.FIXME),
        make_entry(line=3, kind=TodoKind.TODO),
    ]

    assert [e.line for e in filter_by_kind(entries, TodoKind.TODO)] == [1, 3]
    assert [e.line for e in filter_by_kind(entries, TodoKind.FIXME)] == [2]


def test_kind_presentation():
    assert TodoKind.TODO.label == "TODO"
    assert TodoKind.FIXME.label == "FIXME"
    assert TodoKind.TODO.icon != TodoKind.FIXME.icon
