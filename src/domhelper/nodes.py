"""Node insertion and removal.

lxml stores the text following an element in the element's ``tail``. The
helpers here keep that text where it was when an element is moved or
removed, so the surrounding text behaves like DOM text nodes.
"""

import logging
from typing import TYPE_CHECKING

from domhelper.exceptions import HierarchyError, NoParentError

if TYPE_CHECKING:
    from lxml.html import HtmlElement

logger = logging.getLogger(__name__)


def _require_parent(node: "HtmlElement", missing_ok: bool) -> "HtmlElement | None":
    parent = node.getparent()
    if parent is None and not missing_ok:
        raise NoParentError(f"<{node.tag}> element has no parent")
    return parent


def _move_tail_before(node: "HtmlElement", parent: "HtmlElement") -> None:
    """Hand the node's tail text to whatever precedes it in the parent."""
    if not node.tail:
        return

    previous = node.getprevious()
    if previous is not None:
        previous.tail = (previous.tail or "") + node.tail
    else:
        parent.text = (parent.text or "") + node.tail
    node.tail = None


def _detach(node: "HtmlElement") -> None:
    parent = node.getparent()
    if parent is None:
        return
    _move_tail_before(node, parent)
    parent.remove(node)


def _check_hierarchy(node: "HtmlElement", reference: "HtmlElement") -> None:
    if any(ancestor is node for ancestor in reference.iterancestors()):
        raise HierarchyError(f"Cannot insert <{node.tag}> next to one of its own descendants")


def remove_node(node: "HtmlElement", *, missing_ok: bool = False) -> None:
    """Remove a node from its parent.

    Text that followed the node stays in place. After the call the node has
    no parent and can be inserted elsewhere.

    Args:
        node: Element to remove
        missing_ok: If True, silently ignore a node without a parent

    Raises:
        NoParentError: If the node has no parent and missing_ok is False
    """
    parent = _require_parent(node, missing_ok)
    if parent is None:
        logger.debug(f"<{node.tag}> has no parent, nothing to remove")
        return

    _detach(node)


def insert_before(
    node: "HtmlElement",
    reference: "HtmlElement",
    *,
    missing_ok: bool = False,
) -> None:
    """Insert a node immediately before a reference node.

    If the node is already in a tree it is moved.

    Args:
        node: Element to insert
        reference: Element the node is inserted in front of
        missing_ok: If True, silently ignore a reference without a parent

    Raises:
        NoParentError: If the reference has no parent and missing_ok is False
        HierarchyError: If the node is an ancestor of the reference
    """
    parent = _require_parent(reference, missing_ok)
    if parent is None or node is reference:
        return

    _check_hierarchy(node, reference)
    _detach(node)
    reference.addprevious(node)


def insert_after(
    node: "HtmlElement",
    reference: "HtmlElement",
    *,
    missing_ok: bool = False,
) -> None:
    """Insert a node immediately after a reference node.

    The node is inserted in front of the reference's next sibling, or
    appended to the parent when the reference is the last child. Text that
    followed the reference ends up after the inserted node.

    Args:
        node: Element to insert
        reference: Element the node is inserted after
        missing_ok: If True, silently ignore a reference without a parent

    Raises:
        NoParentError: If the reference has no parent and missing_ok is False
        HierarchyError: If the node is an ancestor of the reference
    """
    parent = _require_parent(reference, missing_ok)
    if parent is None or node is reference:
        return

    _check_hierarchy(node, reference)
    _detach(node)

    # Element and following text must stay adjacent to the reference
    node.tail, reference.tail = reference.tail, None

    following = reference.getnext()
    if following is None:
        parent.append(node)
    else:
        following.addprevious(node)
