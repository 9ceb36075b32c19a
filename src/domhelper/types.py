"""Type definitions and protocols for domhelper.

Common type definitions used across the domhelper package, including protocols
for lxml types which have incomplete type stubs.
"""

from typing import Any, Protocol


# Protocols for lxml type safety (lxml has incomplete type stubs)
class LxmlElement(Protocol):
    """Protocol for the lxml Element methods the helpers rely on."""

    text: str | None
    tail: str | None

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get attribute value."""
        ...

    def set(self, key: str, value: str) -> None:
        """Set attribute value."""
        ...

    def getparent(self) -> "LxmlElement | None":
        """Return the parent element or None for a root."""
        ...

    def getprevious(self) -> "LxmlElement | None":
        """Return the preceding sibling element."""
        ...

    def getnext(self) -> "LxmlElement | None":
        """Return the following sibling element."""
        ...


class XPathEvaluator(Protocol):
    """Protocol for lxml XPath evaluators bound to a tree."""

    def __call__(self, _path: str, **_variables: Any) -> Any:
        """Evaluate an XPath expression."""
        ...


class SelectorTranslator(Protocol):
    """Protocol for CSS-to-XPath translators (cssselect)."""

    def css_to_xpath(self, css: str, prefix: str = ...) -> str:
        """Translate a CSS selector group into an XPath expression."""
        ...
