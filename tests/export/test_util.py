import pytest

from bae_tools.export.util import clean_txt_cell, extract_headers, format_txt_tags


@pytest.mark.parametrize(
    "records,expected",
    [
        ([{"a": "1", "b": "2"}, {"b": "3", "c": "4"}], ["a", "b", "c"]),
        ([{"c": "1"}, {"a": "2", "c": "3"}, {"b": "4"}], ["c", "a", "b"]),
        ([{}, {"a": "1"}], ["a"]),
        ([], []),
    ],
)
def test_extract_headers(records: list[dict[str, str]], expected: list[str]) -> None:
    assert extract_headers(records) == expected


@pytest.mark.parametrize(
    "given,expected",
    [
        ("friends", "[ friends ]"),
        ("friend : 2, vip", "[ friend : 2, vip ]"),
        ('{"friend : 2"},vip', "[ friend : 2, vip ]"),
        ("note : line one\nline two", "[ note : line oneline two ]"),
        ("note : a\r\nb, vip", "[ note : ab, vip ]"),
    ],
)
def test_format_txt_tags(given: str, expected: str) -> None:
    assert format_txt_tags(given) == expected


@pytest.mark.parametrize(
    "given,expected",
    [
        ("Amy Bee", "Amy Bee"),
        ('say "hi"', "say hi"),
        ("Block 312, Amy Street 1", "Block 312 Amy Street 1"),
        ("line one\nline two\r", "line oneline two"),
        ("back\\slash", "backslash"),
        ("", ""),
    ],
)
def test_clean_txt_cell(given: str, expected: str) -> None:
    assert clean_txt_cell(given) == expected
