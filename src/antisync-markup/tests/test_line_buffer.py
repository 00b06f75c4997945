"""Unit tests for line buffers."""

import pytest

from antisync_markup.buffer import LineBuffer, Marker


class TestStrip:
    """Tests for LineBuffer.strip."""

    def test_strip_removes_leading_and_trailing_markers(self):
        """Test that markers at both ends are dropped."""
        buffer = LineBuffer([Marker.SEPARATOR, Marker.BLANK_LINE, "text", Marker.SEPARATOR])

        buffer.strip()

        assert buffer.elements == ["text"]

    def test_strip_keeps_inner_markers(self):
        """Test that markers between literals survive."""
        buffer = LineBuffer(["a", Marker.BLANK_LINE, Marker.SEPARATOR, "b"])

        buffer.strip()

        assert buffer.elements == ["a", Marker.BLANK_LINE, Marker.SEPARATOR, "b"]

    def test_strip_markers_only_empties_buffer(self):
        """Test that a buffer of markers becomes empty."""
        buffer = LineBuffer([Marker.SEPARATOR, Marker.BLANK_LINE, Marker.SEPARATOR])

        buffer.strip()

        assert len(buffer) == 0

    @pytest.mark.parametrize(
        "elements",
        [
            [],
            ["x"],
            [Marker.BLANK_LINE, "x", Marker.SEPARATOR, "y", Marker.BLANK_LINE],
            [Marker.SEPARATOR, Marker.SEPARATOR, "x"],
        ],
    )
    def test_ends_are_literal_after_strip(self, elements):
        """Test that first and last elements are never markers after strip."""
        buffer = LineBuffer(list(elements))

        buffer.strip()

        if len(buffer):
            assert isinstance(buffer.elements[0], str)
            assert isinstance(buffer.last, str)


class TestFormat:
    """Tests for LineBuffer.format."""

    def test_format_empty_buffer_is_none(self):
        """Test that an empty buffer formats to None."""
        assert LineBuffer().format() is None

    def test_format_markers_only_is_none(self):
        """Test that a buffer holding only markers formats to None."""
        assert LineBuffer([Marker.SEPARATOR, Marker.BLANK_LINE]).format() is None

    def test_format_translates_markers(self):
        """Test marker translation between literals."""
        buffer = LineBuffer(["a\n", Marker.SEPARATOR, "b", Marker.BLANK_LINE, "c"])

        assert buffer.format() == 'a\n</div><div class="stuff">\nb\nc'

    def test_literal_matching_marker_value_is_not_translated(self):
        """Test that literal text equal to a marker's value stays literal."""
        buffer = LineBuffer(["separator", "blank_line"])

        assert buffer.format() == "separatorblank_line"


class TestRstripLast:
    """Tests for LineBuffer.rstrip_last."""

    def test_rstrip_last_literal(self):
        """Test trailing whitespace removal on the last literal."""
        buffer = LineBuffer(["first\n", "second  \n"])

        buffer.rstrip_last()

        assert buffer.elements == ["first\n", "second"]

    def test_rstrip_last_marker_is_noop(self):
        """Test that a trailing marker is left alone."""
        buffer = LineBuffer(["text\n", Marker.SEPARATOR])

        buffer.rstrip_last()

        assert buffer.elements == ["text\n", Marker.SEPARATOR]

    def test_rstrip_last_empty_buffer(self):
        """Test that an empty buffer stays empty."""
        buffer = LineBuffer()

        buffer.rstrip_last()

        assert buffer.last is None
