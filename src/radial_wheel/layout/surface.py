"""Drawing surface boundary and its SVG implementation."""

import xml.etree.ElementTree as ET
from collections.abc import Iterable
from typing import Any, Protocol

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class DrawingSurface(Protocol):
    """What the layout engine needs from a drawing backend."""

    @property
    def root(self) -> Any: ...

    def create(self, parent: Any, tag: str, classes: Iterable[str] = (), id: str | None = None) -> Any:
        """Create a ``tag`` node tagged with ``classes`` as the last child of ``parent``."""
        ...

    def set_attribute(self, node: Any, name: str, value: object) -> None: ...

    def set_text(self, node: Any, text: str) -> None: ...

    def resolve(self, id: str) -> Any | None:
        """Return the node with this id, or None."""
        ...


class SvgSurface:
    """Builds an SVG document in memory with ElementTree.

    Args:
        size: Width and height of the square viewBox.
    """

    def __init__(self, size: float):
        self._root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NAMESPACE,
                "viewBox": f"0 0 {_fmt(size)} {_fmt(size)}",
                "preserveAspectRatio": "xMidYMid meet",
            },
        )
        self._by_id: dict[str, ET.Element] = {}

    @property
    def root(self) -> ET.Element:
        return self._root

    def create(
        self,
        parent: ET.Element,
        tag: str,
        classes: Iterable[str] = (),
        id: str | None = None,
    ) -> ET.Element:
        elem = ET.SubElement(parent, tag)
        classes = list(classes)
        if classes:
            elem.set("class", " ".join(classes))
        if id is not None:
            if id in self._by_id:
                raise ValueError(f"Duplicate element id: {id}")
            elem.set("id", id)
            self._by_id[id] = elem
        return elem

    def set_attribute(self, node: ET.Element, name: str, value: object) -> None:
        node.set(name, value if isinstance(value, str) else _fmt(value))

    def set_text(self, node: ET.Element, text: str) -> None:
        node.text = text

    def resolve(self, id: str) -> ET.Element | None:
        return self._by_id.get(id)

    def find_all(self, css_class: str) -> list[ET.Element]:
        """All elements carrying ``css_class``, in document order."""
        return [
            elem for elem in self._root.iter() if css_class in elem.get("class", "").split()
        ]

    def to_string(self) -> str:
        """Serialize the document."""
        return ET.tostring(self._root, encoding="unicode")


def _fmt(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
