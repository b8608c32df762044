from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Literal, Union


ExpressionKind = Literal["and", "or", "not", "criteria"]


class RuleConfigError(ValueError):
    """Rule options that cannot be turned into an expression tree."""


@dataclass(frozen=True)
class AttributeDescriptor:
    component: str
    name: str
    value: str


@dataclass(frozen=True)
class And:
    kind: ClassVar[ExpressionKind] = "and"

    children: tuple["RuleExpression", ...] = ()


@dataclass(frozen=True)
class Or:
    kind: ClassVar[ExpressionKind] = "or"

    children: tuple["RuleExpression", ...] = ()


@dataclass(frozen=True)
class Not:
    kind: ClassVar[ExpressionKind] = "not"

    child: "RuleExpression"


def _end_anchors(source: str) -> str:
    """Rewrite `$` outside character classes to `\\Z` (end of string only)."""
    out: list[str] = []
    in_class = False
    escaped = False
    for ch in source:
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif in_class:
            in_class = ch != "]"
        elif ch == "[":
            in_class = True
        elif ch == "$":
            out.append(r"\Z")
            continue
        out.append(ch)
    return "".join(out)


def compile_patterns(sources: Iterable[str], *, where: str = "pattern") -> tuple[re.Pattern[str], ...]:
    """
    Compile pattern sources written for JavaScript's RegExp (no flags).

    `$` matches only at the very end and `\\w` / `\\d` / `\\b` are ASCII-only,
    so "^dark$" does not match "dark\\n" and "^\\w+$" does not match "café".
    With re.ASCII, `\\s` is ASCII-only too, unlike JavaScript.
    """
    compiled: list[re.Pattern[str]] = []
    for index, source in enumerate(sources):
        try:
            compiled.append(re.compile(_end_anchors(source), re.ASCII))
        except re.error as e:
            raise RuleConfigError(f"{where}[{index}]: invalid regular expression {source!r}: {e}") from e
    return tuple(compiled)


@dataclass(frozen=True)
class Criteria:
    """Leaf expression. Matches when any one configured axis matches."""

    kind: ClassVar[ExpressionKind] = "criteria"

    attribute_names: frozenset[str] = frozenset()
    attribute_patterns: tuple[re.Pattern[str], ...] = ()
    component_names: frozenset[str] = frozenset()
    component_patterns: tuple[re.Pattern[str], ...] = ()
    values: frozenset[str] = frozenset()
    value_patterns: tuple[re.Pattern[str], ...] = ()

    @classmethod
    def of(
        cls,
        *,
        attributes: Iterable[str] = (),
        attribute_patterns: Iterable[str] = (),
        components: Iterable[str] = (),
        component_patterns: Iterable[str] = (),
        values: Iterable[str] = (),
        value_patterns: Iterable[str] = (),
        where: str = "criteria",
    ) -> Criteria:
        """Build a leaf from plain strings, compiling the pattern axes."""
        return cls(
            attribute_names=frozenset(attributes),
            attribute_patterns=compile_patterns(attribute_patterns, where=f"{where}.attributePatterns"),
            component_names=frozenset(components),
            component_patterns=compile_patterns(component_patterns, where=f"{where}.componentPatterns"),
            values=frozenset(values),
            value_patterns=compile_patterns(value_patterns, where=f"{where}.valuePatterns"),
        )


RuleExpression = Union[And, Or, Not, Criteria]


@dataclass(frozen=True)
class RuleOptions:
    """Normalized only / ignore filters for one rule activation."""

    only: Or = field(default_factory=Or)
    ignore: Or = field(default_factory=Or)
