"""Only / ignore filtering of attribute descriptors."""

from __future__ import annotations

from typing import Iterable

from .evaluate import evaluate
from .schema import AttributeDescriptor, RuleOptions


def is_reportable(options: RuleOptions, attr: AttributeDescriptor) -> bool:
    """
    Decide whether an attribute is reported.

    `only` selects first (an empty `only` selects everything), then `ignore`
    removes matches from that selection. Changing this order changes which
    attributes are reported.
    """
    included = not options.only.children or evaluate(options.only, attr)
    excluded = evaluate(options.ignore, attr)
    return included and not excluded


def filter_reportable(options: RuleOptions, attrs: Iterable[AttributeDescriptor]) -> list[AttributeDescriptor]:
    return [a for a in attrs if is_reportable(options, a)]
