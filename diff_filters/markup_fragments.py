from dataclasses import dataclass
from typing import Iterable
from lxml import etree as ET
import re

_WHITESPACE = re.compile(r'\s+')  # regex to match whitespace sequences
_NOT_NAME = re.compile(r'[^\w-]+')  # anything that cannot be part of an attribute name

@dataclass(frozen=True)
class MarkupFragment:
    text : str  # fragment text as it appears in the markup
    element : ET.Element  # nearest enclosing element
    attribute : str | None = None  # attribute name if the text is an attribute value

    def is_attribute_value(self, name: str) -> bool:
        '''checks if the fragment is the value of the given attribute (name is case-insensitive)'''
        return self.attribute is not None and self.attribute.lower() == name.strip().lower()

    def is_inside_tag(self, name: str) -> bool:
        '''checks if the nearest enclosing element matches the tag selector, e.g. "div", "div.note", "a[href*=\"x\"]"'''
        return _matches_tag(self.element, name)

    def is_tag_content(self, name: str) -> bool:
        '''like is_inside_tag, but only for text between the tags, never for attribute values'''
        return self.attribute is None and _matches_tag(self.element, name)

    def __str__(self) -> str: return self.text


def iter_fragments(markup: str) -> Iterable[MarkupFragment]:
    '''main function: markup -> attribute values and text runs in document order'''
    if not markup or not markup.strip(): return
    yield from _get_fragments(_markup_to_ET(markup))


def _markup_to_ET(markup: str) -> ET.Element:
    '''parses HTML (or HTML-ish XML) leniently; unknown tags like <ranking> stay as elements'''
    import html5lib
    doc = html5lib.parse(markup, treebuilder='lxml', namespaceHTMLElements=False)  # tags come back lowercase
    return doc.getroot()

def _get_fragments(node: ET.Element) -> Iterable[MarkupFragment]:
    '''recursive into lxml tree and yields fragments'''
    if not _get_tag(node): return  # comment or processing instruction

    for name, value in node.attrib.items():
        if isinstance(name, str): yield MarkupFragment(text=value, element=node, attribute=name)

    if node.text and _has_text(node.text): yield MarkupFragment(text=node.text.strip(), element=node)  # text before children

    for child in node:  # iterate children
        yield from _get_fragments(child)  # recursive call
        if child.tail and _has_text(child.tail):  # text after child belongs to this node
            yield MarkupFragment(text=child.tail.strip(), element=node)

def _get_tag(node: ET.Element) -> str:
    '''tag name of an element, empty for comments and processing instructions'''
    return node.tag if isinstance(node.tag, str) else ''

def _has_text(text: str) -> bool: return bool(_WHITESPACE.sub('', text))


# --- TAG SELECTORS ---------------------------------------------------------
# "div"               tag name only (case-sensitive)
# "div.note"          class attribute contains "note"
# "div#main"          id attribute equals "main"
# "div[hidden]"       attribute present
# "div[role="nav"]"   attribute equals value
# "div[role*="na"]"   attribute contains value

def _matches_tag(node: ET.Element, selector: str) -> bool:
    '''checks the element against a tag selector'''
    name, check = _parse_selector(selector)
    return _get_tag(node) == name and (check is None or check(node.attrib))

def _parse_selector(selector: str):
    '''splits a selector into the tag name and an optional attribute check (None: name only)'''
    selector = selector.strip()
    opened, closed = selector.find('['), selector.find(']')
    if opened >= 0 and closed >= opened:
        return selector[:opened].strip(), _parse_bracket(selector[opened + 1 : closed].strip())
    if selector.find('.') > 0:
        name, cls = selector.split('.', 1)
        return name.strip(), lambda attr: cls.strip() in (attr.get('class') or '')  # substring match
    if selector.find('#') > 0:
        name, id_val = selector.split('#', 1)
        return name.strip(), lambda attr: attr.get('id') == id_val.strip()  # exact match
    return selector, None

def _parse_bracket(inner: str):
    if '"' not in inner:  # [attr]
        attr_name = _NOT_NAME.sub('', inner)
        return (lambda attr: attr_name in attr) if attr_name else None
    head, _, rest = inner.partition('"')
    value = rest.split('"', 1)[0]
    head = head.strip()
    if head.endswith('*='):  # [attr*="v"]
        attr_name = head[:-2].strip()
        return lambda attr: attr_name in attr and value in attr[attr_name]
    if head.endswith('='):  # [attr="v"]
        attr_name = head[:-1].strip()
        return lambda attr: attr.get(attr_name) == value
    return None  # unknown operator, fall back to the tag name
