"""
Rule: no-attribute-string-literals.

Reports JSX attributes whose value is a raw string literal, e.g.
`<Button tone="primary" />`, so design-system props go through tokens
instead. The `only` and `ignore` options narrow what is reported.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Protocol

from ..syntax.extract import attribute_name, attribute_value, component_name
from ..syntax.nodes import JSXAttribute, JSXOpeningElement
from .filters import is_reportable
from .load import parse_options
from .schema import AttributeDescriptor, RuleOptions


RULE_ID = "no-attribute-string-literals"

MESSAGE = "Attribute `{name}` on component `{component}` has invalid string literal `{value}`."


@dataclass
class LintResult:
    """A single reported attribute."""

    rule: str
    message: str
    file: Path | None = None
    line: int | None = None
    column: int | None = None

    def __str__(self) -> str:
        loc = self.file.name if self.file else "<input>"
        if self.line:
            loc += f":{self.line}"
            if self.column is not None:
                loc += f":{self.column}"
        return f"ERROR: [{self.rule}] {loc} - {self.message}"


class Reporter(Protocol):
    def report(self, node: JSXAttribute, message: str) -> None: ...


class ResultCollector:
    """Reporter that records each report as a LintResult."""

    def __init__(self, rule: str = RULE_ID, file: Path | None = None):
        self.rule = rule
        self.file = file
        self.results: list[LintResult] = []

    def report(self, node: JSXAttribute, message: str) -> None:
        self.results.append(
            LintResult(
                rule=self.rule,
                message=message,
                file=self.file,
                line=node.loc.line if node.loc else None,
                column=node.loc.column if node.loc else None,
            )
        )


class NoAttributeStringLiterals:
    """Flag string-literal attribute values not excused by the options."""

    rule_id = RULE_ID

    def __init__(self, options: RuleOptions | None = None):
        self.options = options or RuleOptions()

    @classmethod
    def create(cls, raw_options: Mapping[str, Any] | None = None) -> NoAttributeStringLiterals:
        """Activate the rule from a raw `{only?, ignore?}` object."""
        return cls(parse_options(raw_options))

    def descriptors(self, node: JSXOpeningElement) -> list[tuple[AttributeDescriptor, JSXAttribute]]:
        """Descriptors for the string-valued attributes of a tag, in source order."""
        component = component_name(node.name)
        entries: list[tuple[AttributeDescriptor, JSXAttribute]] = []
        for attribute in node.attributes:
            if not isinstance(attribute, JSXAttribute):
                continue
            value = attribute_value(attribute.value)
            if value is None:
                continue
            entries.append(
                (AttributeDescriptor(component=component, name=attribute_name(attribute), value=value), attribute)
            )
        return entries

    def visit_opening_element(self, node: JSXOpeningElement, reporter: Reporter) -> None:
        for descriptor, attribute in self.descriptors(node):
            if not is_reportable(self.options, descriptor):
                continue
            reporter.report(
                attribute,
                MESSAGE.format(name=descriptor.name, component=descriptor.component, value=descriptor.value),
            )
