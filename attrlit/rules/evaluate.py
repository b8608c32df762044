from __future__ import annotations

import re
from typing import Iterable

from .schema import And, AttributeDescriptor, Criteria, Not, Or, RuleExpression


def _any_search(patterns: Iterable[re.Pattern[str]], text: str) -> bool:
    return any(p.search(text) for p in patterns)


def criteria_matches(criteria: Criteria, attr: AttributeDescriptor) -> bool:
    """True if any axis of the leaf matches; a leaf with no axes never matches."""
    if attr.name in criteria.attribute_names:
        return True
    if _any_search(criteria.attribute_patterns, attr.name):
        return True

    if attr.component in criteria.component_names:
        return True
    if _any_search(criteria.component_patterns, attr.component):
        return True

    if attr.value in criteria.values:
        return True
    if _any_search(criteria.value_patterns, attr.value):
        return True

    return False


def evaluate(expr: RuleExpression, attr: AttributeDescriptor) -> bool:
    if isinstance(expr, And):
        return all(evaluate(child, attr) for child in expr.children)
    if isinstance(expr, Or):
        return any(evaluate(child, attr) for child in expr.children)
    if isinstance(expr, Not):
        return not evaluate(expr.child, attr)
    if isinstance(expr, Criteria):
        return criteria_matches(expr, attr)
    raise TypeError(f"Unknown rule expression: {expr!r}")
