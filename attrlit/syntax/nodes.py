"""
JSX syntax nodes consumed by the attribute rules.

The parser that produces the tree is external; documents arrive as ESTree
JSON. Only the node kinds the rules inspect get their own dataclass. Every
other kind becomes an OtherNode carrying its ESTree type name, so the
extractors can degrade explicitly instead of guessing at dict shapes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Union


@dataclass(frozen=True)
class Position:
    line: int
    column: int


@dataclass(frozen=True)
class OtherNode:
    """Any ESTree node kind outside the closed set below."""

    node_type: str


@dataclass(frozen=True)
class JSXIdentifier:
    type: ClassVar[str] = "JSXIdentifier"

    name: str


@dataclass(frozen=True)
class JSXNamespacedName:
    type: ClassVar[str] = "JSXNamespacedName"

    namespace: JSXIdentifier
    name: JSXIdentifier


@dataclass(frozen=True)
class JSXMemberExpression:
    type: ClassVar[str] = "JSXMemberExpression"

    object: "TagName"
    property: "TagName"


TagName = Union[JSXIdentifier, JSXMemberExpression, JSXNamespacedName, OtherNode]


@dataclass(frozen=True)
class Literal:
    type: ClassVar[str] = "Literal"

    value: Any


@dataclass(frozen=True)
class JSXEmptyExpression:
    type: ClassVar[str] = "JSXEmptyExpression"


@dataclass(frozen=True)
class JSXExpressionContainer:
    type: ClassVar[str] = "JSXExpressionContainer"

    expression: Union[Literal, JSXEmptyExpression, OtherNode]


AttributeValue = Union[Literal, JSXExpressionContainer, OtherNode, None]


@dataclass(frozen=True)
class JSXAttribute:
    type: ClassVar[str] = "JSXAttribute"

    name: Union[JSXIdentifier, JSXNamespacedName]
    value: AttributeValue = None
    loc: Position | None = None


@dataclass(frozen=True)
class JSXSpreadAttribute:
    type: ClassVar[str] = "JSXSpreadAttribute"

    loc: Position | None = None


@dataclass(frozen=True)
class JSXOpeningElement:
    type: ClassVar[str] = "JSXOpeningElement"

    name: TagName
    attributes: tuple[Union[JSXAttribute, JSXSpreadAttribute], ...] = field(default_factory=tuple)
    loc: Position | None = None


# ---------------------------------------------------------------------------
# ESTree conversion
# ---------------------------------------------------------------------------


def _type_of(raw: Any) -> str:
    if isinstance(raw, dict):
        return str(raw.get("type", ""))
    return ""


def position_from_estree(raw: Any) -> Position | None:
    """Read the start position of an ESTree node (1-based line, 0-based column)."""
    if not isinstance(raw, dict):
        return None
    loc = raw.get("loc")
    if not isinstance(loc, dict) or not isinstance(loc.get("start"), dict):
        return None
    start = loc["start"]
    try:
        return Position(line=int(start.get("line", 0)), column=int(start.get("column", 0)))
    except (TypeError, ValueError):
        return None


def _identifier(raw: Any) -> JSXIdentifier:
    name = raw.get("name") if isinstance(raw, dict) else None
    return JSXIdentifier(name=name if isinstance(name, str) else "")


def tag_name_from_estree(raw: Any) -> TagName:
    node_type = _type_of(raw)
    if node_type == "JSXIdentifier":
        return _identifier(raw)
    if node_type == "JSXMemberExpression":
        return JSXMemberExpression(
            object=tag_name_from_estree(raw.get("object")),
            property=tag_name_from_estree(raw.get("property")),
        )
    if node_type == "JSXNamespacedName":
        return JSXNamespacedName(
            namespace=_identifier(raw.get("namespace")),
            name=_identifier(raw.get("name")),
        )
    return OtherNode(node_type=node_type)


def value_from_estree(raw: Any) -> AttributeValue:
    if raw is None:
        return None
    node_type = _type_of(raw)
    if node_type == "Literal":
        return Literal(value=raw.get("value"))
    if node_type == "JSXExpressionContainer":
        expression = raw.get("expression")
        expression_type = _type_of(expression)
        if expression_type == "Literal":
            return JSXExpressionContainer(expression=Literal(value=expression.get("value")))
        if expression_type == "JSXEmptyExpression":
            return JSXExpressionContainer(expression=JSXEmptyExpression())
        return JSXExpressionContainer(expression=OtherNode(node_type=expression_type))
    return OtherNode(node_type=node_type)


def attribute_from_estree(raw: Any) -> JSXAttribute | JSXSpreadAttribute | None:
    """Convert one entry of an opening element's attribute list."""
    node_type = _type_of(raw)
    if node_type == "JSXSpreadAttribute":
        return JSXSpreadAttribute(loc=position_from_estree(raw))
    if node_type != "JSXAttribute":
        return None

    raw_name = raw.get("name")
    if _type_of(raw_name) == "JSXNamespacedName":
        name: JSXIdentifier | JSXNamespacedName = JSXNamespacedName(
            namespace=_identifier(raw_name.get("namespace")),
            name=_identifier(raw_name.get("name")),
        )
    else:
        name = _identifier(raw_name)

    return JSXAttribute(
        name=name,
        value=value_from_estree(raw.get("value")),
        loc=position_from_estree(raw),
    )


def opening_element_from_estree(raw: dict[str, Any]) -> JSXOpeningElement:
    """Build a JSXOpeningElement from its ESTree dict."""
    attributes = []
    for item in raw.get("attributes") or []:
        attribute = attribute_from_estree(item)
        if attribute is not None:
            attributes.append(attribute)

    return JSXOpeningElement(
        name=tag_name_from_estree(raw.get("name")),
        attributes=tuple(attributes),
        loc=position_from_estree(raw),
    )
