import pytest

from resxml import encode_as_xml_value


def test_absent_and_empty_unchanged():
    assert encode_as_xml_value(None) is None
    assert encode_as_xml_value("") == ""


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("hello", "hello"),
        ("hello world", "hello world"),
        ("a  b", '"a  b"'),
        ("  ", '"  "'),
        (" lead", '" lead"'),
        ("trail ", '"trail "'),
        ("it's", '"it\'s"'),
        ("a\nb", '"a\nb"'),
    ],
)
def test_quoting(text: str, expected: str) -> None:
    assert encode_as_xml_value(text) == expected


def test_backslash_and_quote_escaped():
    assert encode_as_xml_value('say "hi"') == 'say \\"hi\\"'
    assert encode_as_xml_value("back\\slash") == "back\\\\slash"


def test_sentinel_lead_characters():
    assert encode_as_xml_value("#tag") == "\\#tag"
    assert encode_as_xml_value("@string/app_name") == "\\@string/app_name"
    assert encode_as_xml_value("#a  b") == '"\\#a  b"'


def test_style_tags_pass_through():
    result = encode_as_xml_value("<b>hi</b>")
    assert result == "<b>hi</b>"
    assert "<b>" in result and "</b>" in result


def test_tag_contents_not_escaped():
    assert encode_as_xml_value('<a href="x">go</a>') == '<a href="x">go</a>'


def test_quoted_segment_inside_tags():
    assert encode_as_xml_value("<b>it's</b>") == '<b>"it\'s"</b>'


def test_segment_closed_before_tag():
    assert encode_as_xml_value("it's <b>bold</b>") == '"it\'s "<b>bold</b>'
    assert encode_as_xml_value("a  <b>") == '"a  "<b>'


def test_trailing_space_after_tag():
    assert encode_as_xml_value("<b>x</b> ") == '<b>x</b>" "'


def test_unterminated_tag():
    assert encode_as_xml_value("a<b") == "a<b"


def test_control_characters():
    assert encode_as_xml_value("\x01") == "\\u0001"
    assert encode_as_xml_value("a\x00b") == "a\\u0000b"


def test_trailing_nul_dropped():
    assert encode_as_xml_value("abc\x00") == "abc"
    assert encode_as_xml_value("#\x00") == "\\#"
    assert encode_as_xml_value("a\\\x00") == "a\\\\"
