"""Child-element text extraction for ONIX product elements.

Every subitem builder reads its values through these helpers. Names are
lxml ElementPath expressions relative to the element, so both direct
children ("ContributorRole") and nested children ("Stock/LocationName")
can be addressed.
"""

import re
from typing import List, Optional

from lxml import etree

from .exceptions import NotFoundError

CDATA_OPEN = "<![CDATA["
_CDATA_CLOSE_RE = re.compile(r"\]\]>*$")


def text_content(element: etree._Element) -> str:
    """Return all descendant text of `element` (DOM textContent, no tail)."""
    return etree.tostring(element, method="text", encoding="unicode", with_tail=False)


def clean_literal_data(text: Optional[str]) -> Optional[str]:
    """Strip literal CDATA markers left inside a text node.

    Some feeds double-wrap rich text, so after parsing the value still reads
    "<![CDATA[...]]>". The opening marker is removed wherever it occurs, the
    closing marker only at the end.
    """
    if not text:
        return text
    text = text.replace(CDATA_OPEN, "")
    return _CDATA_CLOSE_RE.sub("", text)


def inner_markup(element: etree._Element) -> str:
    """Serialize the content of `element` without its own start/end tags.

    Used for XHTML-formatted text blocks where `text_content` would lose the
    markup.
    """
    parts = [element.text or ""]
    for child in element:
        parts.append(etree.tostring(child, encoding="unicode", with_tail=True))
    return "".join(parts)


def child_text(element: etree._Element, name: str) -> Optional[str]:
    """Text content of the first child matching `name`, or None."""
    child = element.find(name)
    if child is None:
        return None
    return text_content(child)


def single_child_text(element: etree._Element, name: str) -> str:
    """Text content of the first child matching `name`.

    Raises:
        NotFoundError: if no such child exists
    """
    value = child_text(element, name)
    if value is None:
        raise NotFoundError.child(name)
    return value


def all_child_texts(element: etree._Element, name: str) -> List[str]:
    """Text content of every child matching `name`, in document order."""
    return [text_content(child) for child in element.findall(name)]


def has_child(element: etree._Element, name: str) -> bool:
    return element.find(name) is not None
