"""Shared lxml helpers for the manifest loader and feed parser."""

from typing import Iterator, Optional, Type

from lxml import etree


def make_parser() -> etree.XMLParser:
    """Strict parser: no recovery, no network access, no entity expansion."""
    return etree.XMLParser(recover=False, resolve_entities=False, no_network=True)


def parse_document(data: bytes, error_cls: Type[Exception], what: str) -> etree._Element:
    """Parse bytes into a root element.

    Args:
        data: Raw document bytes
        error_cls: Exception raised when the document is not well-formed
        what: Document kind used in the error message

    Raises:
        error_cls: If the document is empty or not well-formed
    """
    if not data or not data.strip():
        raise error_cls(f"{what} is empty")
    try:
        return etree.fromstring(data, parser=make_parser())
    except (etree.XMLSyntaxError, ValueError) as e:
        raise error_cls(f"{what} is not well-formed: {e}") from e


def local_children(element: etree._Element, tag: str) -> Iterator[etree._Element]:
    """Yield un-namespaced child elements named ``tag``, in document order."""
    for child in element:
        if child.tag == tag:
            yield child


def first_child(element: etree._Element, tag: str) -> Optional[etree._Element]:
    return next(local_children(element, tag), None)


def direct_text(element: Optional[etree._Element]) -> str:
    """Character data directly inside ``element``, CDATA included, unstripped.

    Text belonging to nested elements is skipped. Unexpanded entity
    references are kept literally, e.g. ``&foo;``.
    """
    if element is None:
        return ""
    parts = [element.text or ""]
    for child in element:
        if child.tag is etree.Entity:
            parts.append(child.text or "")
        parts.append(child.tail or "")
    return "".join(parts)


def child_text(element: etree._Element, tag: str) -> str:
    return direct_text(first_child(element, tag))
