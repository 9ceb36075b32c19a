"""Custom exceptions for domhelper."""


class DomHelperError(Exception):
    """Base exception for all domhelper errors."""


class ConfigError(DomHelperError):
    """Raised when configuration is invalid or cannot be loaded."""


class SelectorError(DomHelperError, ValueError):
    """Raised when a CSS selector cannot be turned into an XPath query."""


class SelectorSyntaxError(SelectorError):
    """Raised when a CSS selector is malformed."""


class UnsupportedSelectorError(SelectorError):
    """Raised when a valid CSS selector uses a construct XPath cannot express.

    Pseudo-elements (``p::first-line``) and unknown pseudo-classes fall in
    this category.
    """


class NoParentError(DomHelperError, ValueError):
    """Raised when a tree edit is attempted relative to a parentless node."""


class HierarchyError(DomHelperError, ValueError):
    """Raised when an insertion would make a node its own descendant."""
