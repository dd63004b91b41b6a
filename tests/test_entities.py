import pytest

from aur_news.entities import EntityDecodeError, decode_entities, decode_html


def test_decode_entities_named_entity():
    assert decode_entities("&amp;") == "&"


def test_decode_entities_unknown_entity_is_left_alone():
    assert decode_entities("&bogus;") == "&bogus;"


def test_decode_entities_numeric_references():
    assert decode_entities("&#60;tag&#x3E;") == "<tag>"


def test_decode_entities_text_without_entities_is_unchanged():
    assert decode_entities("nothing to see") == "nothing to see"


def test_decode_entities_falls_back_to_whole_input():
    # One bad reference keeps the whole string undecoded.
    assert decode_entities("&lt;ok&gt; &nope;") == "&lt;ok&gt; &nope;"
    assert decode_entities("fish & chips &amp; peas") == "fish & chips &amp; peas"


@pytest.mark.parametrize(
    "value",
    ["&amp", "&", "&#;", "&#xZZ;", "&#0;", "&#xD800;", "&#1114112;", "&bogus;"],
)
def test_decode_html_rejects_malformed_references(value):
    with pytest.raises(EntityDecodeError):
        decode_html(value)


def test_decode_html_handles_mixed_text():
    assert decode_html("a &lt; b &amp;&amp; c &quot;d&quot;") == 'a < b && c "d"'


def test_decode_html_rejects_overlong_references_before_converting():
    with pytest.raises(EntityDecodeError):
        decode_html("&#" + "9" * 5000 + ";")
    with pytest.raises(EntityDecodeError):
        decode_html("&#x" + "F" * 5000 + ";")


def test_decode_html_allows_leading_zeros():
    assert decode_html("&#00000000065;&#x0000041;") == "AA"
