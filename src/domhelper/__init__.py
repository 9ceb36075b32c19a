"""domhelper - CSS selector queries and tree edits for lxml HTML documents."""

from importlib.metadata import PackageNotFoundError, version

from domhelper.classlist import class_list, class_list_add, class_list_contains, class_list_remove
from domhelper.document import Document
from domhelper.exceptions import (
    ConfigError,
    DomHelperError,
    HierarchyError,
    NoParentError,
    SelectorError,
    SelectorSyntaxError,
    UnsupportedSelectorError,
)
from domhelper.loader import load_html
from domhelper.nodes import insert_after, insert_before, remove_node
from domhelper.query import query_selector, query_selector_all

try:
    __version__ = version("dom-helper")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "ConfigError",
    "Document",
    "DomHelperError",
    "HierarchyError",
    "NoParentError",
    "SelectorError",
    "SelectorSyntaxError",
    "UnsupportedSelectorError",
    "class_list",
    "class_list_add",
    "class_list_contains",
    "class_list_remove",
    "insert_after",
    "insert_before",
    "load_html",
    "query_selector",
    "query_selector_all",
    "remove_node",
]
