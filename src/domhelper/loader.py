"""Tolerant HTML loading.

Markup is parsed with lxml's recovering HTML parser. Parse errors never reach
the caller: the best-effort tree is returned and the error count is logged.
Fragments keep exactly the structure of the input; libxml's implied
``<html>``/``<head>``/``<body>`` wrappers are stripped again and the content
is held in the document's fragment container.
"""

import logging
import re
from typing import TYPE_CHECKING

from lxml import etree
from lxml import html as lxml_html

from domhelper.config import DomHelperConfig
from domhelper.document import Document

if TYPE_CHECKING:
    from lxml.html import HtmlElement

logger = logging.getLogger(__name__)

# Markup that is a complete document rather than a fragment
FULL_DOCUMENT_REGEX = re.compile(r"^\s*(?:<!--.*?-->\s*)*<(?:!doctype|html[\s>/])", re.I | re.S)

# Characters lxml refuses in .text/.tail (not allowed in XML 1.0)
XML_INVALID_CHARS_REGEX = re.compile(r"[\x00-\x08\x0b\x0e-\x1f\ufffe\uffff\ud800-\udfff]")


def _encode(markup: str, encoding: str) -> bytes:
    """Re-encode markup, turning unrepresentable characters into references."""
    return markup.encode(encoding, errors="xmlcharrefreplace")


def _create_parser(config: DomHelperConfig) -> lxml_html.HTMLParser:
    return lxml_html.HTMLParser(
        encoding=config.loader.encoding,
        recover=True,
        no_network=True,
        remove_comments=config.loader.remove_comments,
        remove_pis=config.loader.remove_pis,
    )


def _clean_text(text: str) -> str:
    """Turn form feeds into spaces and drop other XML-forbidden characters."""
    return XML_INVALID_CHARS_REGEX.sub("", text.replace("\f", " "))


def _append_text(element: "HtmlElement", text: str | None) -> None:
    if not text:
        return
    if len(element):
        last = element[-1]
        last.tail = _clean_text((last.tail or "") + text)
    else:
        element.text = _clean_text((element.text or "") + text)


def _collect_fragment(document: "HtmlElement", container: "HtmlElement") -> None:
    """Move everything libxml placed under head/body into the container."""
    for section in list(document):
        if section.tag not in ("head", "body"):
            continue
        _append_text(container, section.text)
        for child in list(section):
            container.append(child)
        _append_text(container, section.tail)


def _log_parse_errors(parser: lxml_html.HTMLParser, config: DomHelperConfig) -> None:
    if not config.loader.log_parse_errors:
        return
    errors = parser.error_log
    if errors:
        logger.debug(f"Suppressed {len(errors)} HTML parse error(s); first: {errors[0].message}")


def load_html(markup: str | bytes, config: DomHelperConfig | None = None) -> Document:
    """Create a Document from an HTML string, suppressing parse errors.

    Args:
        markup: HTML document or fragment. Bytes are decoded with the
            configured encoding.
        config: Loader and query options (defaults when omitted)

    Returns:
        Parsed Document. Malformed markup yields the parser's best-effort
        tree; unparseable or empty markup yields an empty fragment document.

    Examples:
        >>> doc = load_html("<ul><li>A<li>B</ul>")
        >>> [li.text for li in doc.children[0]]
        ['A', 'B']
    """
    if config is None:
        config = DomHelperConfig()

    encoding = config.loader.encoding
    if isinstance(markup, bytes):
        markup = markup.decode(encoding, errors="replace")

    data = _encode(markup, encoding)
    parser = _create_parser(config)
    container = parser.makeelement(config.loader.fragment_container)

    try:
        if FULL_DOCUMENT_REGEX.match(markup):
            root = lxml_html.document_fromstring(data, parser=parser)
            _log_parse_errors(parser, config)
            return Document(root, config=config)

        wrapped = b"<html><body>" + data + b"</body></html>"
        document = lxml_html.document_fromstring(wrapped, parser=parser)
        _log_parse_errors(parser, config)
        _collect_fragment(document, container)
    except (etree.ParserError, etree.XMLSyntaxError) as e:
        logger.warning(f"HTML parsing failed: {e}. Returning an empty document.")

    return Document(container, fragment=True, config=config)
