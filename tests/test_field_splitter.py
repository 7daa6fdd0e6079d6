"""
Unit tests for splitting a line and selecting fields
"""
import pytest

from filtering.field_splitter import split_by_delimiter, get_field, select_field
from utils.errors import FieldNotFoundError


class TestSplitByDelimiter:
    """Test splitting on a literal delimiter"""

    def test_basic_split(self):
        """Test a comma separated line"""
        assert split_by_delimiter("abc,efg", ",") == ["abc", "efg"]

    def test_missing_delimiter_gives_whole_text(self):
        """Test a delimiter that never occurs yields one segment"""
        for text in ["abc", "", "a b c", "a;b"]:
            assert split_by_delimiter(text, ",") == [text]

    def test_consecutive_delimiters_keep_empty_segment(self):
        """Test empty segments are kept in place"""
        assert split_by_delimiter("a,,b", ",") == ["a", "", "b"]
        assert split_by_delimiter(",a,", ",") == ["", "a", ""]

    def test_multi_character_delimiter(self):
        """Test delimiters longer than one character"""
        assert split_by_delimiter("one::two::three", "::") == ["one", "two", "three"]

    def test_delimiter_is_literal(self):
        """Test regex metacharacters are matched literally"""
        assert split_by_delimiter("a.b|c", ".") == ["a", "b|c"]
        assert split_by_delimiter("a.b|c", "|") == ["a.b", "c"]

    def test_rejoin_reconstructs_text(self):
        """Test joining the segments with the delimiter restores the text"""
        cases = [
            ("abc,efg", ","),
            ("a,,b,", ","),
            ("", ","),
            ("no delimiter here", "::"),
            ("x--y----z", "--"),
            ("abc", ""),
            ("", ""),
        ]
        for text, delimiter in cases:
            assert delimiter.join(split_by_delimiter(text, delimiter)) == text

    def test_empty_delimiter_splits_every_character(self):
        """Test an empty delimiter matches at both ends and between characters"""
        assert split_by_delimiter("abc", "") == ["", "a", "b", "c", ""]
        assert split_by_delimiter("", "") == ["", ""]

    def test_unit_separator_delimiter(self):
        """Test ASCII separator characters split like any other delimiter"""
        assert split_by_delimiter("a\x1fb\x1f", "\x1f") == ["a", "b", ""]


class TestGetField:
    """Test selecting a field by index"""

    def test_index_zero_returns_first_segment(self):
        """Test index 0 always succeeds on a non-empty sequence"""
        assert get_field(["abc", "efg"], 0) == "abc"
        assert get_field([""], 0) == ""

    def test_last_index(self):
        """Test the last valid index"""
        assert get_field(["abc", "efg"], 1) == "efg"

    def test_index_past_end_raises(self):
        """Test any index at or past the length is not found"""
        fields = ["abc", "efg"]
        for index in [2, 5, 100]:
            with pytest.raises(FieldNotFoundError) as exc_info:
                get_field(fields, index)
            assert exc_info.value.index == index
            assert exc_info.value.field_count == 2

    def test_empty_sequence_raises(self):
        """Test an empty sequence has no fields"""
        with pytest.raises(FieldNotFoundError):
            get_field([], 0)

    def test_negative_index_raises(self):
        """Test negative indexes do not count from the end"""
        with pytest.raises(FieldNotFoundError):
            get_field(["abc", "efg"], -1)

    def test_error_message(self):
        """Test the error message names the index"""
        with pytest.raises(FieldNotFoundError, match="No field found at index 5"):
            get_field(["abc", "efg"], 5)

    def test_error_is_index_error(self):
        """Test callers can catch the error as an IndexError"""
        with pytest.raises(IndexError):
            get_field(["abc"], 3)


class TestSelectField:
    """Test split and select together"""

    def test_select_field(self):
        """Test selecting the second column"""
        assert select_field("name:age:city", ":", 1) == "age"

    def test_select_without_delimiter(self):
        """Test only index 0 works when the delimiter is absent"""
        assert select_field("whole line", ",", 0) == "whole line"
        with pytest.raises(FieldNotFoundError):
            select_field("whole line", ",", 1)
