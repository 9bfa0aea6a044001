import pytest

from resxml import escape_xml_chars


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Tom & Jerry", "Tom &amp; Jerry"),
        ("a < b > c", "a &lt; b > c"),
        ("x]]>y", "x]]&gt;y"),
        ("]]]>", "]]]&gt;"),
        ("<![CDATA[x]]>", "&lt;![CDATA[x]]&gt;"),
        ("plain text", "plain text"),
    ],
)
def test_escape_xml_chars(text: str, expected: str) -> None:
    assert escape_xml_chars(text) == expected


def test_escape_does_not_rescan_replacements():
    assert escape_xml_chars("&lt;") == "&amp;lt;"
    assert escape_xml_chars(escape_xml_chars("&")) == "&amp;amp;"


def test_escape_absent_and_empty():
    assert escape_xml_chars(None) is None
    assert escape_xml_chars("") == ""
