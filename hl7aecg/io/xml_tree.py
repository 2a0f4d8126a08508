from __future__ import annotations

from pathlib import Path
from typing import Any, List, Protocol
import xml.etree.ElementTree as ET

from hl7aecg.core.exceptions import DocumentReadError


def local_name(tag: str) -> str:
    """Strip the namespace part of an ElementTree tag or attribute name.

    Examples
    --------
    "{urn:hl7-org:v3}series"                          -> "series"
    "{http://www.w3.org/2001/XMLSchema-instance}type" -> "type"
    "code"                                            -> "code"
    """
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


class XmlNavigator(Protocol):
    """Protocol for walking a parsed XML document.

    Tags and attribute names are matched on their local name so that
    documents with and without the HL7 v3 default namespace read the same.
    """

    def children(self, element: Any, tag: str) -> List[Any]:
        ...

    def first(self, element: Any, tag: str) -> Any | None:
        ...

    def attribute(self, element: Any, name: str) -> str | None:
        ...

    def attributes(self, element: Any) -> list[tuple[str, str]]:
        ...

    def text(self, element: Any) -> str:
        ...


class EtreeNavigator:
    """Concrete implementation of XmlNavigator on xml.etree.ElementTree.

    `children` searches all descendants in document order, the same
    semantics as DOM getElementsByTagName.
    """

    def children(self, element: ET.Element, tag: str) -> List[ET.Element]:
        return [
            el for el in element.iter()
            if el is not element and isinstance(el.tag, str) and local_name(el.tag) == tag
        ]

    def first(self, element: ET.Element, tag: str) -> ET.Element | None:
        for el in element.iter():
            if el is not element and isinstance(el.tag, str) and local_name(el.tag) == tag:
                return el
        return None

    def attribute(self, element: ET.Element, name: str) -> str | None:
        for key, value in element.attrib.items():
            if local_name(key) == name:
                return value
        return None

    def attributes(self, element: ET.Element) -> list[tuple[str, str]]:
        # Document order, namespace stripped
        return [(local_name(key), value) for key, value in element.attrib.items()]

    def text(self, element: ET.Element) -> str:
        return "".join(element.itertext())


def read_document(path: str | Path) -> ET.Element:
    """Parse an XML file and return its root element.

    Raises
    ------
    DocumentReadError
        If the file cannot be opened or is not well-formed XML.
    """
    try:
        tree = ET.parse(str(path))
    except ET.ParseError as e:
        raise DocumentReadError(f"Failed to parse XML: {e}", source=str(path)) from e
    except OSError as e:
        raise DocumentReadError(f"Failed to read XML file: {e}", source=str(path)) from e
    return tree.getroot()
