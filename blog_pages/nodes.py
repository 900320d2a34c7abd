"""Renderable node values and the primitives that build them.

Every component in the page pipeline produces :class:`RenderNode` values
instead of touching a live document. Nodes are immutable once constructed, so
a tree is built bottom-up and handed to a rendering surface in a single,
explicit step.

Examples
--------
>>> from blog_pages.nodes import make_element, make_text
>>> link = make_element("a", {"href": "/home"}, [make_text("Home")])
>>> link.kind
<NodeKind.ELEMENT: 'element'>
>>> link.children[0].text
'Home'
"""

from __future__ import annotations

import dataclasses as dc
import enum
import re
import typing as typ
from types import MappingProxyType

if typ.TYPE_CHECKING:
    import collections.abc as cabc

LIST_TAGS = frozenset({"ul", "ol"})
TAG_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9-]*")
ATTRIBUTE_PATTERN = re.compile(r"[A-Za-z_:][A-Za-z0-9_:.-]*")


class InvalidTagError(ValueError):
    """Raised when an element tag is empty or not a valid element name."""


class InvalidNodeError(ValueError):
    """Raised when a node mixes text and children or has a bad attribute name."""


class NodeKind(enum.Enum):
    """Shape of a :class:`RenderNode`."""

    TEXT = "text"
    ELEMENT = "element"
    LIST = "list"


@dc.dataclass(frozen=True, slots=True)
class RenderNode:
    """A single node of a renderable page tree.

    Attributes
    ----------
    kind : NodeKind
        Whether the node is a text leaf, a generic element, or a list element.
    tag : str | None
        Element tag name; ``None`` for text nodes.
    children : tuple[RenderNode, ...]
        Ordered child nodes. Always empty for text nodes.
    attributes : Mapping[str, str]
        Read-only attribute values stored verbatim; escaping belongs to the
        surface.
    text : str | None
        Inline text content; only text nodes carry it.
    """

    kind: NodeKind
    tag: str | None = None
    children: tuple[RenderNode, ...] = ()
    attributes: typ.Mapping[str, str] = dc.field(default_factory=dict)
    text: str | None = None

    def __post_init__(self) -> None:
        """Validate the node and freeze its attributes."""
        if self.kind is not NodeKind.TEXT and not TAG_PATTERN.fullmatch(self.tag or ""):
            msg = f"Invalid element tag {self.tag!r}."
            raise InvalidTagError(msg)
        for name in self.attributes:
            if not ATTRIBUTE_PATTERN.fullmatch(name):
                msg = f"Invalid attribute name {name!r} on <{self.tag}>."
                raise InvalidNodeError(msg)
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        if self.text is not None and self.children:
            msg = "A node cannot hold both text content and children."
            raise InvalidNodeError(msg)
        if self.kind is NodeKind.TEXT and self.text is None:
            msg = "Text nodes require text content."
            raise InvalidNodeError(msg)
        if self.kind is not NodeKind.TEXT and self.text is not None:
            msg = f"Element <{self.tag}> cannot carry inline text; wrap it in a text node."
            raise InvalidNodeError(msg)

    @property
    def is_leaf(self) -> bool:
        """Return ``True`` for text nodes."""
        return self.kind is NodeKind.TEXT

    def iter_text(self) -> cabc.Iterator[str]:
        """Yield the text of every descendant text node in document order."""
        if self.text is not None:
            yield self.text
        for child in self.children:
            yield from child.iter_text()

    @property
    def text_content(self) -> str:
        """Return the concatenated text of this subtree."""
        return "".join(self.iter_text())


def make_element(
    tag: str,
    attributes: cabc.Mapping[str, str] | None = None,
    children: cabc.Iterable[RenderNode] = (),
) -> RenderNode:
    """Build an element node.

    Parameters
    ----------
    tag : str
        Element name such as ``"div"`` or ``"ul"``. ``ul`` and ``ol`` produce
        :attr:`NodeKind.LIST` nodes.
    attributes : Mapping[str, str], optional
        Attribute values; copied so later changes to the caller's mapping do
        not leak into the node.
    children : Iterable[RenderNode], optional
        Child nodes in rendering order.

    Raises
    ------
    InvalidTagError
        If ``tag`` is empty, only whitespace, or not a valid element name
        (a letter followed by letters, digits, or hyphens).
    """
    name = (tag or "").strip()
    if not name:
        msg = "Element tag must be a non-empty string."
        raise InvalidTagError(msg)
    kind = NodeKind.LIST if name.lower() in LIST_TAGS else NodeKind.ELEMENT
    return RenderNode(
        kind=kind,
        tag=name,
        children=tuple(children),
        attributes=dict(attributes or {}),
    )


def make_text(value: object) -> RenderNode:
    """Build a text leaf from ``value``; non-strings are converted with ``str``."""
    return RenderNode(kind=NodeKind.TEXT, text=str(value))


def text_element(
    tag: str, value: object, attributes: cabc.Mapping[str, str] | None = None
) -> RenderNode:
    """Build an element wrapping a single text node."""
    return make_element(tag, attributes, [make_text(value)])


__all__ = [
    "InvalidNodeError",
    "InvalidTagError",
    "NodeKind",
    "RenderNode",
    "make_element",
    "make_text",
    "text_element",
]
