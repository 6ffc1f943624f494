"""
Response tree
-------------
GoodReads answers with a ``<GoodreadsResponse>`` envelope wrapping one or
more domain nodes. The envelope is parsed into :class:`Node` objects that are
addressed by name; a missing node is always ``None``, never an empty node.
"""

import logging
import xml.etree.ElementTree as ET
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union

from goodreads.transport import NotFound

logger = logging.getLogger(__name__)


def _keep_text(value: Optional[str]) -> Optional[str]:
    # whitespace-only text is layout, not content
    if value is None or not value.strip():
        return None
    return value


class Node:
    def __init__(
        self,
        name: str,
        attributes: Optional[Dict[str, str]] = None,
        text: Optional[str] = None,
        children: Optional[List["Node"]] = None,
    ):
        self.name = name
        self._attributes = dict(attributes or {})
        self.text = text
        self.tail: Optional[str] = None
        self._children: List[Node] = list(children or [])
        self._aliases: Dict[str, Node] = {}

    @classmethod
    def from_element(cls, element: ET.Element) -> "Node":
        """Convert an ElementTree element; walks with a stack, so depth is unbounded."""
        root = cls._from_single(element)
        stack = [(element, root)]
        while stack:
            parent_element, parent = stack.pop()
            for child_element in parent_element:
                child = cls._from_single(child_element)
                parent._children.append(child)
                stack.append((child_element, child))
        return root

    @classmethod
    def _from_single(cls, element: ET.Element) -> "Node":
        node = cls(element.tag, attributes=element.attrib, text=_keep_text(element.text))
        node.tail = _keep_text(element.tail)
        return node

    @property
    def attrib(self) -> Mapping[str, str]:
        return MappingProxyType(self._attributes)

    def attribute(self, name: str) -> Optional[str]:
        return self._attributes.get(name)

    def first_attribute(self) -> Optional[str]:
        for value in self._attributes.values():
            return value
        return None

    def child(self, name: str) -> Optional["Node"]:
        for node in self._children:
            if node.name == name:
                return node
        return self._aliases.get(name)

    def children(self) -> List[Tuple[str, "Node"]]:
        return [(node.name, node) for node in self._children]

    def children_named(self, name: str) -> List["Node"]:
        return [node for node in self._children if node.name == name]

    def child_text(self, name: str) -> Optional[str]:
        node = self.child(name)
        return node.text if node is not None else None

    def add_alias(self, alias: str, node: "Node") -> None:
        self._aliases[alias] = node

    def __repr__(self) -> str:
        return f"<Node {self.name} attrs={self._attributes} children={len(self._children)}>"


def parse_xml(body: Union[str, bytes, NotFound, None]) -> Optional[Node]:
    """Parse a response body; ``None`` when it is missing or not valid XML."""
    if body is None or isinstance(body, NotFound):
        return None
    if not body:
        return None
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        logger.debug(f"Could not parse response body: {e}")
        return None
    return Node.from_element(root)


def expand_search_aliases(search: Node) -> Node:
    # only immediate children: <results-start> -> results_start
    for name, node in search.children():
        if "-" in name:
            alias = name.replace("-", "_")
            search.add_alias(alias, node)
            logger.debug(f"Aliased search field {name} as {alias}")
    return search
