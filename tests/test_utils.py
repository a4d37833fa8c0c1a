"""Tests for utils.py — file reading and line iteration."""

from __future__ import annotations

import pytest

from maxgrep.exceptions import FileReadError
from maxgrep.utils import iter_lines, read_text_file

# ---------------------------------------------------------------------------
# iter_lines
# ---------------------------------------------------------------------------


class TestIterLines:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            pytest.param("", [], id="empty"),
            pytest.param("a", ["a"], id="single-no-newline"),
            pytest.param("a\nb", ["a", "b"], id="two-lines"),
            pytest.param("a\nb\n", ["a", "b"], id="trailing-newline"),
            pytest.param("\n", [""], id="only-newline"),
            pytest.param("a\n\nb", ["a", "", "b"], id="blank-line"),
            pytest.param("a\n\n", ["a", ""], id="blank-then-trailing"),
            pytest.param("a\r\nb\r\n", ["a", "b"], id="crlf"),
            pytest.param("a\r", ["a\r"], id="trailing-cr-at-eof-kept"),
            pytest.param("a\rb\nc", ["a\rb", "c"], id="bare-cr-not-a-break"),
            pytest.param("a\x0bb c", ["a\x0bb c"], id="other-separators-not-breaks"),
        ],
    )
    def test_split(self, text: str, expected: list[str]):
        assert list(iter_lines(text)) == expected

    def test_is_lazy(self):
        lines = iter_lines("x\ny")
        assert next(lines) == "x"


# ---------------------------------------------------------------------------
# read_text_file
# ---------------------------------------------------------------------------


class TestReadTextFile:
    def test_reads_content(self, make_file):
        path = make_file("hello\nworld\n")
        assert read_text_file(path) == "hello\nworld\n"

    def test_preserves_crlf(self, make_file):
        path = make_file("a\r\nb")
        assert read_text_file(path) == "a\r\nb"

    def test_missing_file(self, tmp_path):
        missing = str(tmp_path / "nope.txt")
        with pytest.raises(FileReadError) as exc_info:
            read_text_file(missing)
        assert exc_info.value.path == missing
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory(self, tmp_path):
        with pytest.raises(FileReadError) as exc_info:
            read_text_file(str(tmp_path))
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "bin.dat"
        path.write_bytes(b"ok\n\xff\xfe\n")
        with pytest.raises(FileReadError) as exc_info:
            read_text_file(str(path))
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
        assert "utf-8" in str(exc_info.value)
