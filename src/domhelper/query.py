"""CSS selector queries.

Selectors are translated to XPath with cssselect and evaluated with the
document's cached lxml evaluator. Results are always in document order.
"""

from typing import TYPE_CHECKING, cast

import cssselect
from lxml import etree

from domhelper.cache import translate
from domhelper.exceptions import SelectorSyntaxError, UnsupportedSelectorError

if TYPE_CHECKING:
    from lxml.html import HtmlElement

    from domhelper.document import Document


def selector_to_xpath(selector: str, prefix: str, xhtml: bool = False) -> str:
    """Translate a CSS selector into an XPath expression.

    Args:
        selector: CSS selector group (e.g. "div.item, #main > p")
        prefix: XPath axis prepended to every selector in the group
        xhtml: Whether element/attribute names are case-sensitive

    Returns:
        XPath expression

    Raises:
        SelectorSyntaxError: If the selector is empty or malformed
        UnsupportedSelectorError: If the selector has no XPath equivalent
    """
    if not selector or not selector.strip():
        raise SelectorSyntaxError("Selector cannot be empty")

    try:
        return translate(selector, prefix, xhtml)
    except cssselect.SelectorSyntaxError as e:
        raise SelectorSyntaxError(f"Invalid CSS selector {selector!r}: {e}") from e
    except cssselect.ExpressionError as e:
        raise UnsupportedSelectorError(f"Unsupported CSS selector {selector!r}: {e}") from e


def query_selector_all(doc: "Document", selector: str) -> list["HtmlElement"]:
    """Select all elements of a document matching a CSS selector.

    Args:
        doc: Document to search
        selector: CSS selector group

    Returns:
        Matching elements in document order (empty list when nothing matches)

    Raises:
        SelectorSyntaxError: If the selector is malformed
        UnsupportedSelectorError: If the selector has no XPath equivalent

    Examples:
        >>> from domhelper.loader import load_html
        >>> doc = load_html('<p class="a">1</p><p>2</p><p class="a">3</p>')
        >>> [p.text for p in query_selector_all(doc, "p.a")]
        ['1', '3']
    """
    cache = doc.path_query_cache
    xpath = selector_to_xpath(selector, doc.query_prefix, cache.xhtml)

    try:
        matches = cache.evaluator(xpath)
    except etree.XPathError as e:
        # e.g. namespace prefixes (ns|p) that no namespace map binds
        raise UnsupportedSelectorError(f"Unsupported CSS selector {selector!r}: {e}") from e

    # Node-set expressions always yield a list of elements
    return cast("list[HtmlElement]", matches)


def query_selector(doc: "Document", selector: str) -> "HtmlElement | None":
    """Return the first element matching a CSS selector, or None.

    Raises:
        SelectorSyntaxError: If the selector is malformed
        UnsupportedSelectorError: If the selector has no XPath equivalent
    """
    matches = query_selector_all(doc, selector)
    return matches[0] if matches else None
