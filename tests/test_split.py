"""
Tests for splitting text into lines.
"""
import pytest

from minigrep.behaviour.search.pipeline_components.a02_split import split_lines


class TestSplitLines:
    """Tests for split_lines."""

    @pytest.mark.parametrize(
        "contents, expected",
        [
            ("", []),
            ("\n", [""]),
            ("one", ["one"]),
            ("one\ntwo", ["one", "two"]),
            ("one\ntwo\n", ["one", "two"]),
            ("one\n\nthree", ["one", "", "three"]),
            ("one\r\ntwo\r\n", ["one", "two"]),
            ("\r\n", [""]),
            ("one\rtwo", ["one\rtwo"]),
            ("one\r", ["one\r"]),
            ("one\n\n", ["one", ""]),
        ],
    )
    def test_split(self, contents, expected):
        """Lines split on LF and CRLF only."""
        assert list(split_lines(contents)) == expected

    def test_crlf_matches_lf(self):
        """CRLF text splits into the same lines as LF text."""
        lf = "a\nb\nc"

        assert list(split_lines(lf.replace("\n", "\r\n"))) == list(split_lines(lf))

    def test_lazy(self):
        """Lines are produced one at a time."""
        lines = split_lines("first\nsecond")

        assert next(lines) == "first"
        assert next(lines) == "second"
        with pytest.raises(StopIteration):
            next(lines)

    def test_rejoin(self):
        """Joining the lines with newlines gives back the text."""
        contents = "a\n\nb c\nd"

        assert "\n".join(split_lines(contents)) == contents
