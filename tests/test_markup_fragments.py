import pytest

from diff_filters.accept_fragment import accept
from diff_filters.capabilities import Fragment
from diff_filters.markup_fragments import iter_fragments

HTML = """<!-- saved copy -->
<html>
<head><title>Weekly report</title></head>
<body>
<item tag="v2.1">Item <b>bold</b> tail</item>
<ranking>3</ranking>
<p data-ranking="12">Plain paragraph</p>
</body>
</html>
"""


def _by_text(fragments):
    return {str(f): f for f in fragments}


def test_fragments_in_document_order():
    texts = [str(f) for f in iter_fragments(HTML)]
    assert texts == ["Weekly report", "v2.1", "Item", "bold", "tail", "3", "12", "Plain paragraph"]


def test_fragment_capabilities():
    fragments = _by_text(iter_fragments(HTML))
    assert isinstance(fragments["Weekly report"], Fragment)
    assert fragments["Weekly report"].is_tag_content("title")
    assert not fragments["Weekly report"].is_tag_content("TITLE")  # tag names are case-sensitive
    assert not fragments["Weekly report"].is_attribute_value("title")

    assert fragments["v2.1"].is_attribute_value("tag")
    assert fragments["v2.1"].is_inside_tag("item")
    assert fragments["v2.1"].is_attribute_value("TAG")  # attribute names ignore case
    assert not fragments["v2.1"].is_tag_content("item")

    assert fragments["bold"].is_tag_content("b")
    assert not fragments["bold"].is_tag_content("item")  # nearest enclosing tag only
    assert fragments["tail"].is_tag_content("item")  # tail text belongs to the parent
    assert fragments["Item"].is_inside_tag("item")  # text inside the element counts too
    assert fragments["bold"].is_inside_tag("b") and not fragments["bold"].is_inside_tag("item")


def test_accept_over_markup():
    accepted = [str(f) for f in iter_fragments(HTML) if accept(f)]
    assert accepted == ["Weekly report", "v2.1", "3"]


def test_empty_markup_yields_nothing():
    assert list(iter_fragments("")) == []
    assert list(iter_fragments("   \n")) == []


SELECTOR_HTML = '<div class="note wide" id="main" role="navigation" hidden>Body</div>'


@pytest.mark.parametrize(
    "selector,expected",
    [
        ("div", True),
        ("span", False),
        ("div.note", True),
        ("div.wid", True),  # class contains
        ("div.other", False),
        ("div#main", True),
        ("div#mai", False),  # id equals
        ("div[hidden]", True),
        ("div[title]", False),
        ('div[role="navigation"]', True),
        ('div[role="nav"]', False),
        ('div[role*="nav"]', True),
        ('div[title*="nav"]', False),
        ('div[role~"nav"]', True),  # unknown operator falls back to the tag name
        ('span[role="navigation"]', False),
    ],
)
def test_tag_selectors(selector, expected):
    (fragment,) = [f for f in iter_fragments(SELECTOR_HTML) if f.attribute is None]
    assert fragment.is_tag_content(selector) is expected
    assert fragment.is_inside_tag(selector) is expected


def test_attribute_values_match_selectors_only_as_inside_tag():
    role = next(f for f in iter_fragments(SELECTOR_HTML) if f.is_attribute_value("role"))
    assert role.is_inside_tag("div.note")
    assert not role.is_tag_content("div.note")
