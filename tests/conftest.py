"""Pytest fixtures for domhelper tests."""

import logging
from collections.abc import Callable, Generator

import pytest
from lxml import html as lxml_html
from lxml.html import HtmlElement

from domhelper.document import Document
from domhelper.loader import load_html


@pytest.fixture
def items_doc() -> Document:
    """Fragment with three divs, two of them carrying class="item"."""
    return load_html('<div class="item">1</div><div>2</div><div class="item">3</div>')


@pytest.fixture
def list_doc() -> Document:
    """Fragment with a single list of three items."""
    return load_html("<ul><li>A</li><li>B</li><li>C</li></ul>")


@pytest.fixture
def full_doc() -> Document:
    """Complete HTML document with doctype, head and body."""
    return load_html(
        "<!DOCTYPE html>"
        "<html><head><title>Title</title></head>"
        '<body><div id="main"><p class="lead">First</p><p>Second</p></div></body></html>'
    )


@pytest.fixture
def make_element() -> Callable[..., HtmlElement]:
    """Factory for parentless elements.

    Example:
        span = make_element("span", "text", **{"class": "x"})
    """

    def _make(tag: str, text: str | None = None, **attrib: str) -> HtmlElement:
        element = lxml_html.Element(tag, **attrib)
        element.text = text
        return element

    return _make


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Restore root and domhelper logger state after logging setup tests."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    names = ("domhelper.loader", "domhelper.cache")
    loggers = {name: logging.getLogger(name).level for name in names}

    yield

    root.handlers[:] = handlers
    root.setLevel(level)
    for name, logger_level in loggers.items():
        logging.getLogger(name).setLevel(logger_level)
