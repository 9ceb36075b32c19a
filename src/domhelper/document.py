"""Document wrapper.

Composes a parsed lxml tree with its own PathQueryCache, so repeated queries
against the same document reuse one XPath evaluator without attaching state
to lxml objects.
"""

from html import escape
from typing import TYPE_CHECKING, cast

from lxml import html as lxml_html

from domhelper.cache import DOCUMENT_PREFIX, FRAGMENT_PREFIX, PathQueryCache
from domhelper.config import DomHelperConfig
from domhelper.query import query_selector, query_selector_all

if TYPE_CHECKING:
    from lxml.html import HtmlElement


class Document:
    """A parsed HTML document or fragment.

    Full documents are rooted at their ``<html>`` element. Fragments are held
    by a synthetic container element which stands in for the DOM document
    node: it is the parent of the top-level nodes, but queries never match it
    and to_html() never emits it.

    Attributes:
        root: Root element (``<html>`` or the fragment container)
        fragment: True if the document was loaded from a fragment
        config: Options the document was loaded with
        path_query_cache: Lazily initialized evaluator/translator pair
    """

    def __init__(
        self,
        root: "HtmlElement",
        *,
        fragment: bool = False,
        config: DomHelperConfig | None = None,
    ) -> None:
        self.root = root
        self.fragment = fragment
        self.config = config or DomHelperConfig()
        self.path_query_cache = PathQueryCache(root, xhtml=self.config.query.xhtml)

    def __repr__(self) -> str:
        kind = "fragment" if self.fragment else "document"
        return f"<Document {kind} root=<{self.root.tag}>>"

    @property
    def query_prefix(self) -> str:
        """XPath axis selectors are evaluated on (excludes the container)."""
        return FRAGMENT_PREFIX if self.fragment else DOCUMENT_PREFIX

    @property
    def children(self) -> list["HtmlElement"]:
        """Top-level elements of the document."""
        if self.fragment:
            return list(self.root)
        return [self.root]

    def query_selector_all(self, selector: str) -> list["HtmlElement"]:
        """Select nodes using a CSS selector. See query.query_selector_all()."""
        return query_selector_all(self, selector)

    def query_selector(self, selector: str) -> "HtmlElement | None":
        return query_selector(self, selector)

    def to_html(self) -> str:
        """Serialize the document back to markup.

        Examples:
            >>> from domhelper.loader import load_html
            >>> load_html("<p>a</p><p>b</p>").to_html()
            '<p>a</p><p>b</p>'
        """
        if not self.fragment:
            return cast("str", lxml_html.tostring(self.root.getroottree(), encoding="unicode"))

        parts = [escape(self.root.text or "", quote=False)]
        for child in self.root:
            parts.append(cast("str", lxml_html.tostring(child, encoding="unicode", with_tail=True)))
        return "".join(parts)
