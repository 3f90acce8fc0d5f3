"""Tests for docstring sample extraction and the sample table."""

from __future__ import annotations

import textwrap
import types

import pytest

from aockit.puzzles.samples import (
    Sample,
    SampleTable,
    extract_samples,
    parse_docstring,
    samples_from_module,
    samples_from_path,
)
from tests.conftest import load_module

PUZZLE_SOURCE = textwrap.dedent('''
    """Puzzles for one day."""

    def day1(inp):
        """Sum the numbers.

        want=6
        1
        2
        3
        """
        return sum(int(x) for x in inp.lines())

    def day1b(inp):
        """want=42"""
        return 42

    def helper(x):
        """Not a puzzle."""
        return x

    def day2(inp):
        """Longest line.

          want=abc
          abc
            de
        """
        return max(inp.lines(), key=len)

    def day2b(inp):
        """
        want=2
        """
        return 2

    class Ignored:
        def day9(self):
            """want=9
            nested
            """
''')


class TestParseDocstring:
    def test_want_with_input(self) -> None:
        assert parse_docstring("Title.\n\n    want=3\n    x\n    y\n    z\n    ") == ("3", "x\ny\nz\n")

    def test_want_alone(self) -> None:
        assert parse_docstring("want=42") == ("42", "")

    def test_no_want(self) -> None:
        assert parse_docstring("Just prose, wanted=nothing.") is None

    def test_want_value_keeps_inner_spaces(self) -> None:
        assert parse_docstring("want=a b c  ") == ("a b c", "")


class TestExtractSamples:
    def test_captures_want_and_input(self) -> None:
        table = extract_samples(PUZZLE_SOURCE)
        assert table.get("day1") == Sample(want="6", input="1\n2\n3\n")

    def test_want_without_input_inherits_previous(self) -> None:
        table = extract_samples(PUZZLE_SOURCE)
        assert table.get("day1b") == Sample(want="42", input="1\n2\n3\n")
        assert table.get("day2b") == Sample(want="2", input=table.get("day2").input)

    def test_relative_indentation_preserved(self) -> None:
        table = extract_samples(PUZZLE_SOURCE)
        assert table.get("day2") == Sample(want="abc", input="abc\n  de\n")

    def test_only_declaring_functions_recorded(self) -> None:
        table = extract_samples(PUZZLE_SOURCE)
        assert table.names() == ["day1", "day1b", "day2", "day2b"]
        assert "helper" not in table
        assert "day9" not in table

    def test_first_want_without_any_input(self) -> None:
        table = extract_samples('def day3(inp):\n    """want=0"""\n')
        assert table.get("day3") == Sample(want="0", input="")

    def test_invalid_source(self) -> None:
        with pytest.raises(SyntaxError):
            extract_samples("def broken(:\n")

    def test_from_path(self, tmp_path) -> None:
        path = tmp_path / "puzzles.py"
        path.write_text(PUZZLE_SOURCE, encoding="utf-8")
        assert len(samples_from_path(path)) == 4

    def test_from_module(self, puzzle_script) -> None:
        mod = load_module(puzzle_script)

        table = samples_from_module(mod)
        assert table.get("day5") == Sample(want="3", input="x\ny\nz\n")
        assert table.get("day5b") == Sample(want="z", input="x\ny\nz\n")

    def test_module_without_source(self) -> None:
        with pytest.raises((OSError, TypeError)):
            samples_from_module(types.ModuleType("nowhere"))


class TestSampleTable:
    def test_merge_keeps_existing(self) -> None:
        table = SampleTable()
        table.add("day1", 6, "a\n")
        other = SampleTable({"day1": Sample("7", "b\n"), "day2": Sample("1", "c\n")})
        table.merge(other)
        assert table.get("day1") == Sample("6", "a\n")
        assert table.get("day2") == Sample("1", "c\n")

    def test_merge_replace(self) -> None:
        table = SampleTable({"day1": Sample("6", "a\n")})
        table.merge(SampleTable({"day1": Sample("7", "b\n")}), replace=True)
        assert table.get("day1") == Sample("7", "b\n")

    def test_want_is_stringified(self) -> None:
        assert SampleTable().add("day1", 12, "").want == "12"
