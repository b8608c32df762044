"""Run attribute rules over ESTree documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .rules.no_attribute_string_literals import LintResult, NoAttributeStringLiterals, ResultCollector
from .syntax.nodes import OtherNode, opening_element_from_estree
from .syntax.walk import iter_opening_elements

logger = logging.getLogger(__name__)


def lint_tree(
    tree: Any,
    rule: NoAttributeStringLiterals,
    *,
    file: Path | None = None,
) -> list[LintResult]:
    """Visit every opening element of an ESTree document with `rule`."""
    collector = ResultCollector(rule=rule.rule_id, file=file)
    visited = 0
    for raw in iter_opening_elements(tree):
        node = opening_element_from_estree(raw)
        if isinstance(node.name, OtherNode):
            logger.debug("Unrecognized tag name node %r in %s", node.name.node_type, file or "<input>")
        rule.visit_opening_element(node, collector)
        visited += 1

    logger.debug("Visited %d opening elements in %s", visited, file or "<input>")
    return collector.results


def lint_file(path: Path, rule: NoAttributeStringLiterals) -> list[LintResult]:
    """Lint one ESTree JSON file."""
    tree = json.loads(path.read_text(encoding="utf-8"))
    return lint_tree(tree, rule, file=path)
