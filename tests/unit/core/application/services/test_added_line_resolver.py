import pytest

from authorship_engine.core.application.services.added_line_resolver import (
    added_lines,
    added_lines_for_files,
    is_binary,
)
from authorship_engine.core.domain.diff import AddedLineSet


class TestAddedLines:
    def test_inserted_lines_between_and_after_existing_ones(self):
        assert added_lines("A\nB\nC", "A\nX\nB\nC\nD") == {2, 5}

    def test_blank_lines_interleaved_with_existing_ones(self):
        old = "Line 1\nLine 2\nLine 3\n"
        new = "Line 1\n\nLine 2\n\nLine 3\n\nNew Line\n"

        assert added_lines(old, new) == {2, 4, 6, 7}

    def test_identical_texts_add_nothing(self):
        text = "import os\n\nprint(os.getcwd())\n"

        assert added_lines(text, text) == set()

    def test_every_line_is_added_to_an_empty_file(self):
        assert added_lines("", "a\nb\nc\n") == {1, 2, 3}

    def test_emptying_a_file_adds_nothing(self):
        assert added_lines("a\nb\n", "") == set()

    def test_modified_line_counts_as_added(self):
        assert added_lines("x = 1\ny = 2\n", "x = 1\ny = 3\n") == {2}

    def test_lines_shifted_by_a_deletion_are_not_added(self):
        assert added_lines("a\nb\nc\nd\n", "a\nc\nd\n") == set()

    def test_repeated_block_is_reported_at_its_end(self):
        assert added_lines("a\nb\n", "a\nb\na\nb\n") == {3, 4}

    def test_inserted_function_is_reported_whole(self):
        old = "def a():\n    pass\n\ndef c():\n    pass\n"
        new = "def a():\n    pass\n\ndef b():\n    pass\n\ndef c():\n    pass\n"

        assert added_lines(old, new) == {4, 5, 6}

    def test_repeated_lines_are_not_reported_as_rewritten(self):
        old = "}\nd\nb\n  x\na\nc\nc\nc\n"
        new = "}\nd\nb\n  x\na\nb\nc\nd\nc\nc\n  x\n  x\n"

        assert added_lines(old, new) == {6, 8, 11, 12}

    def test_bytes_input(self):
        assert added_lines(b"a\n", b"a\n\xff\n") == {2}

    @pytest.mark.parametrize(
        "old,new",
        [
            ("a\nb\nc\n", "c\nb\na\n"),
            ("x\n" * 5, "x\n" * 8),
            ("one\ntwo\n", "zero\none\ntwo\nthree\n"),
            ("\n\n\n", "\n\nsomething\n\n"),
        ],
    )
    def test_results_are_valid_line_numbers(self, old, new):
        result = added_lines(old, new)

        assert result <= set(range(1, new.count("\n") + 1))
        assert added_lines(old, new) == result

    def test_modifications_and_trailing_addition(self):
        old = "a\nb\nc\nd\ne\n"
        new = "a\nB\nc\nd\nE\nf\n"

        result = added_lines(old, new)

        assert result == {2, 5, 6}


class TestIsBinary:
    def test_nul_byte_marks_binary(self):
        assert is_binary(b"\x89PNG\x00\x00")
        assert is_binary("a\0b")

    def test_plain_text_is_not_binary(self):
        assert not is_binary(b"hello\n")
        assert not is_binary("hello\n")


class TestAddedLinesForFiles:
    def test_collects_per_path(self):
        old_files = {"src/app.py": "a\nb\n", "README.md": "# title\n"}
        new_files = {"src/app.py": "a\nnew\nb\n", "README.md": "# title\n"}

        result = added_lines_for_files(old_files, new_files)

        assert isinstance(result, AddedLineSet)
        assert result == {"src/app.py": frozenset({2})}

    def test_new_file_is_compared_against_empty_content(self):
        result = added_lines_for_files({}, {"docs/new.md": "one\ntwo\n"})

        assert result.sorted_lines("docs/new.md") == [1, 2]

    def test_new_bytes_file(self):
        result = added_lines_for_files({}, {"data.txt": b"one\n"})

        assert result.lines_for("data.txt") == frozenset({1})

    def test_deleted_and_binary_files_are_left_out(self):
        old_files = {"gone.txt": "bye\n", "logo.png": b"\x89PNG\x00"}
        new_files = {"logo.png": b"\x89PNG\x00\x01"}

        result = added_lines_for_files(old_files, new_files)

        assert len(result) == 0
        assert result.lines_for("gone.txt") == frozenset()
