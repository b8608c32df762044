"""Attribute rules (options as data, matching as code)."""

from .load import load_options, parse_expression, parse_options
from .no_attribute_string_literals import RULE_ID, LintResult, NoAttributeStringLiterals
from .schema import RuleConfigError, RuleOptions

RULES: dict[str, type[NoAttributeStringLiterals]] = {
    RULE_ID: NoAttributeStringLiterals,
}

RULE_EXPLANATIONS: dict[str, str] = {
    RULE_ID: (
        "Reports JSX attributes whose value is a raw string literal "
        '(`tone="primary"` or `tone={"primary"}`). `ignore` excuses matching '
        "attributes; `only` restricts the check to matching attributes and is "
        "applied before `ignore`."
    ),
}

__all__ = [
    "RULES",
    "RULE_EXPLANATIONS",
    "LintResult",
    "NoAttributeStringLiterals",
    "RuleConfigError",
    "RuleOptions",
    "load_options",
    "parse_expression",
    "parse_options",
]
