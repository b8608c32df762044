"""Locate JSX opening elements in an ESTree document."""

from __future__ import annotations

from typing import Any, Iterator

# Keys that hold positional metadata or back-references rather than child nodes.
_SKIP_KEYS = frozenset({"loc", "range", "parent", "tokens", "comments"})


def iter_opening_elements(tree: Any) -> Iterator[dict[str, Any]]:
    """Yield every raw JSXOpeningElement dict in source order.

    Walks depth-first with an explicit stack so deeply nested markup
    does not hit the recursion limit.
    """
    stack: list[Any] = [tree]
    while stack:
        current = stack.pop()
        if isinstance(current, dict):
            if current.get("type") == "JSXOpeningElement":
                yield current
            children = [v for k, v in current.items() if k not in _SKIP_KEYS and isinstance(v, (dict, list))]
            stack.extend(reversed(children))
        elif isinstance(current, list):
            stack.extend(reversed(current))
