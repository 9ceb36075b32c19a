"""Tests for tolerant HTML loading."""

import logging

import pytest

from domhelper.config import DomHelperConfig, LoaderConfig
from domhelper.document import Document
from domhelper.loader import load_html


def test_unclosed_list_items_become_siblings() -> None:
    """Test unclosed <li> tags are closed by the parser instead of raising."""
    doc = load_html("<ul><li>A<li>B</ul>")

    assert [el.tag for el in doc.children] == ["ul"]
    items = list(doc.children[0])
    assert [li.tag for li in items] == ["li", "li"]
    assert [li.text for li in items] == ["A", "B"]


def test_fragment_gets_no_implied_wrappers() -> None:
    """Test fragments are not wrapped in <html>/<body>."""
    doc = load_html("<p>Hello</p>")

    assert doc.fragment is True
    assert doc.to_html() == "<p>Hello</p>"
    assert doc.query_selector_all("html, head, body") == []


def test_full_document_keeps_html_root(full_doc: Document) -> None:
    """Test complete documents are rooted at their <html> element."""
    assert full_doc.fragment is False
    assert full_doc.root.tag == "html"
    assert full_doc.root.getparent() is None
    assert [t.text for t in full_doc.query_selector_all("title")] == ["Title"]


@pytest.mark.parametrize(
    "markup",
    [
        "<html><body><p>x</p></body></html>",
        "  <HTML lang='en'><body><p>x</p></body></HTML>",
        "<!-- generated --><!DOCTYPE html><html><body><p>x</p></body></html>",
    ],
)
def test_full_document_detection(markup: str) -> None:
    """Test doctype/html prefixes are recognized as complete documents."""
    doc = load_html(markup)

    assert doc.fragment is False
    assert doc.root.tag == "html"


@pytest.mark.parametrize(
    "markup",
    [
        "<div><span>unclosed<p>oops</div></b>",
        "<table><tr><td>cell</table></i>",
        "<p <b>broken attr</p>",
        "<<>>",
        "</div>",
        "\x0c<p>x</p>",
        "text\x0c<p>x</p>",
        "<p>x</p>\x0c",
        "a\x00b<p>x</p>",
    ],
)
def test_malformed_markup_never_raises(markup: str) -> None:
    """Test malformed markup returns a best-effort document."""
    doc = load_html(markup)

    assert doc.fragment is True
    assert isinstance(doc.to_html(), str)


@pytest.mark.parametrize("markup", ["", b""])
def test_empty_markup_gives_empty_document(markup: str | bytes) -> None:
    """Test empty input yields a document without children."""
    doc = load_html(markup)

    assert doc.children == []
    assert doc.to_html() == ""
    assert doc.query_selector_all("*") == []


def test_leading_text_is_kept() -> None:
    """Test text before the first element survives the round trip."""
    doc = load_html("Hello <b>World</b>!")

    assert [el.tag for el in doc.children] == ["b"]
    assert doc.root.text == "Hello "
    assert doc.to_html() == "Hello <b>World</b>!"


def test_head_elements_in_fragment_are_kept() -> None:
    """Test elements libxml would move to <head> stay in the fragment."""
    doc = load_html("<title>T</title><p>x</p>")

    assert [el.tag for el in doc.children] == ["title", "p"]


def test_non_ascii_characters_survive_ascii_encoding() -> None:
    """Test characters outside the encoding become references and decode back."""
    config = DomHelperConfig(loader=LoaderConfig(encoding="ascii"))

    doc = load_html("<p>café ☃</p>", config)

    assert doc.children[0].text == "café ☃"


def test_bytes_are_decoded_with_configured_encoding() -> None:
    """Test bytes input is decoded before parsing."""
    doc = load_html("<p>naïve</p>".encode())

    assert doc.children[0].text == "naïve"


def test_custom_fragment_container() -> None:
    """Test the fragment container tag comes from the config."""
    config = DomHelperConfig(loader=LoaderConfig(fragment_container="section"))

    doc = load_html("<p>x</p><p>y</p>", config)

    assert doc.root.tag == "section"
    assert doc.query_selector_all("section") == []
    assert len(doc.query_selector_all("p")) == 2


def test_remove_comments_option() -> None:
    """Test comments are dropped when configured."""
    config = DomHelperConfig(loader=LoaderConfig(remove_comments=True))

    doc = load_html("<p>x</p><!-- note --><p>y</p>", config)

    assert "note" not in doc.to_html()
    assert len(doc.children) == 2


def test_parse_errors_are_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    """Test suppressed parser errors are reported through logging."""
    with caplog.at_level(logging.DEBUG, logger="domhelper.loader"):
        doc = load_html("<div></span></div>")

    assert [el.tag for el in doc.children] == ["div"]
    assert "Suppressed 1 HTML parse error(s)" in caplog.text
    assert "Unexpected end tag : span" in caplog.text


def test_parse_error_logging_can_be_disabled(caplog: pytest.LogCaptureFixture) -> None:
    """Test log_parse_errors=False keeps the loader quiet."""
    config = DomHelperConfig(loader=LoaderConfig(log_parse_errors=False))

    with caplog.at_level(logging.DEBUG, logger="domhelper.loader"):
        load_html("<div></span></div>", config)

    assert "Suppressed" not in caplog.text


def test_form_feed_in_leading_text_becomes_space() -> None:
    """Test form feeds in leading fragment text become spaces."""
    doc = load_html("lead\x0cing <p>x</p>")

    assert doc.root.text == "lead ing "
    assert [el.tag for el in doc.children] == ["p"]
    assert doc.to_html() == "lead ing <p>x</p>"
