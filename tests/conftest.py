"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from attrlit.linter import lint_tree
from attrlit.rules import NoAttributeStringLiterals


@pytest.fixture
def run_rule() -> Callable[..., list[str]]:
    """Lint an ESTree document with the given options; return the messages."""

    def _run(tree: Any, options: dict[str, Any] | None = None) -> list[str]:
        rule = NoAttributeStringLiterals.create(options)
        return [r.message for r in lint_tree(tree, rule)]

    return _run
