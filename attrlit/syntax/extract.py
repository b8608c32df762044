"""Extract component names, attribute names and literal values from JSX nodes."""

from __future__ import annotations

from typing import Any

from .nodes import (
    AttributeValue,
    JSXAttribute,
    JSXExpressionContainer,
    JSXIdentifier,
    JSXMemberExpression,
    JSXNamespacedName,
    Literal,
    TagName,
)


def component_name(node: TagName) -> str:
    """Return the dotted / namespaced component name of a tag.

    `<Button>` gives "Button", `<Some.Provider>` gives "Some.Provider",
    `<Button:namespace>` gives "Button:namespace".
    """
    if isinstance(node, JSXIdentifier):
        return node.name
    if isinstance(node, JSXMemberExpression):
        return f"{component_name(node.object)}.{component_name(node.property)}"
    if isinstance(node, JSXNamespacedName):
        return f"{component_name(node.namespace)}:{component_name(node.name)}"
    # OtherNode: tag kinds the JSX grammar may grow later.
    return ""


def attribute_name(node: JSXAttribute) -> str:
    name = node.name
    if isinstance(name, JSXNamespacedName):
        return f"{name.namespace.name}:{name.name.name}"
    return name.name


def _literal_text(value: Any) -> str | None:
    """String form of a literal value as JavaScript's toString() renders it."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def attribute_value(node: AttributeValue) -> str | None:
    """Return the string literal carried by an attribute value, or None.

    Only `attr="text"` and `attr={"text"}` produce a value. Boolean shorthand,
    template literals, identifiers and empty containers give None.

    Note: a direct literal whose text is empty (`attr=""`) also gives None,
    while `attr={""}` gives "". Both behaviours are relied upon.
    """
    if node is None:
        return None
    if isinstance(node, Literal):
        return _literal_text(node.value) or None
    if not isinstance(node, JSXExpressionContainer):
        return None

    expression = node.expression
    if not isinstance(expression, Literal):
        return None
    if not isinstance(expression.value, str):
        return None
    return expression.value
