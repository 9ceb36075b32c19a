"""Class list manipulation.

A class list is the lowercased, whitespace-split view of an element's
``class`` attribute. It is never stored: every read parses the attribute and
every write replaces the attribute value in full.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domhelper.types import LxmlElement


def _normalize_names(classes: Iterable[str] | str) -> list[str]:
    """Strip and lowercase class names, dropping blank ones.

    A bare string counts as a single class name, not as an iterable of
    characters.
    """
    if isinstance(classes, str):
        classes = [classes]

    names = []
    for name in classes:
        name = name.strip().lower()
        if name:
            names.append(name)
    return names


def _write_class_list(node: "LxmlElement", class_list: list[str]) -> None:
    node.set("class", " ".join(class_list))


def class_list(node: "LxmlElement") -> list[str]:
    """Return the list of classes of an element.

    Args:
        node: Element to read

    Returns:
        Lowercased class names in attribute order, ``[]`` if the element has
        no class attribute. Empty tokens from surrounding whitespace are not
        included.

    Examples:
        >>> from lxml import html
        >>> class_list(html.fragment_fromstring('<p class=" Lead  INTRO">x</p>'))
        ['lead', 'intro']
        >>> class_list(html.fragment_fromstring("<p>x</p>"))
        []
    """
    value = node.get("class")
    if value is None:
        return []

    return value.lower().split()


def class_list_contains(node: "LxmlElement", name: str) -> bool:
    """Check whether an element carries a class (case-insensitive)."""
    return name.strip().lower() in class_list(node)


def class_list_add(node: "LxmlElement", classes: Iterable[str] | str) -> None:
    """Add classes to an element, omitting any that are already present.

    New classes are appended in input order after the existing ones. The
    class attribute is rewritten even when nothing was added.

    Args:
        node: Element to modify
        classes: Class names to add (a single string is one name)

    Examples:
        >>> from lxml import html
        >>> p = html.fragment_fromstring('<p class="a">x</p>')
        >>> class_list_add(p, ["B", "a", "c", "b"])
        >>> p.get("class")
        'a b c'
    """
    current = class_list(node)

    for name in _normalize_names(classes):
        if name in current:
            continue
        current.append(name)

    _write_class_list(node, current)


def class_list_remove(node: "LxmlElement", classes: Iterable[str] | str) -> None:
    """Remove classes from an element.

    Only the first occurrence of each name is removed; names that are not
    present are ignored. Nothing is written when the element has no classes.

    Args:
        node: Element to modify
        classes: Class names to remove (a single string is one name)
    """
    current = class_list(node)

    if not current:
        return

    for name in _normalize_names(classes):
        if name in current:
            current.remove(name)

    _write_class_list(node, current)
