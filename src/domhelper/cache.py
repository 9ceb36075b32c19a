"""Per-document XPath evaluator and CSS translator cache.

Each Document owns one PathQueryCache. The evaluator is created on first use
and bound to the live tree, so it sees every later mutation. Translators are
stateless and shared process-wide.
"""

import logging
from functools import cache, lru_cache
from typing import TYPE_CHECKING

from cssselect import HTMLTranslator
from lxml import etree

if TYPE_CHECKING:
    from lxml.html import HtmlElement

    from domhelper.types import SelectorTranslator, XPathEvaluator

logger = logging.getLogger(__name__)

DOCUMENT_PREFIX = "descendant-or-self::"
FRAGMENT_PREFIX = "descendant::"


@cache
def get_translator(xhtml: bool = False) -> "SelectorTranslator":
    """Return the shared cssselect translator for the given mode.

    Examples:
        >>> get_translator() is get_translator()
        True
    """
    return HTMLTranslator(xhtml=xhtml)


@lru_cache(maxsize=512)
def translate(selector: str, prefix: str = DOCUMENT_PREFIX, xhtml: bool = False) -> str:
    """Translate a CSS selector group to XPath, memoizing the result.

    cssselect exceptions propagate unchanged; callers map them.

    Examples:
        >>> translate("p", prefix="descendant::")
        'descendant::p'
    """
    xpath = get_translator(xhtml).css_to_xpath(selector, prefix=prefix)
    logger.debug(f"Translated {selector!r} -> {xpath!r}")
    return xpath


class PathQueryCache:
    """Lazily built XPath evaluator and translator for one document.

    Attributes:
        root: Element queries are evaluated against
        xhtml: Whether selector names are case-sensitive
    """

    def __init__(self, root: "HtmlElement", xhtml: bool = False) -> None:
        self.root = root
        self.xhtml = xhtml
        self._evaluator: "XPathEvaluator | None" = None

    @property
    def evaluator(self) -> "XPathEvaluator":
        """XPath evaluator bound to the document root, created on first use."""
        if self._evaluator is None:
            self._evaluator = etree.XPathElementEvaluator(self.root)
            logger.debug(f"Created XPath evaluator for <{self.root.tag}>")
        return self._evaluator

    @property
    def translator(self) -> "SelectorTranslator":
        return get_translator(self.xhtml)

    @property
    def is_initialized(self) -> bool:
        return self._evaluator is not None
