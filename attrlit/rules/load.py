from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from .schema import And, Criteria, Not, Or, RuleConfigError, RuleExpression, RuleOptions


_COMBINATOR_KEYS = ("and", "or", "not")

# Configuration key -> Criteria.of() keyword.
_CRITERIA_KEYS = {
    "attributes": "attributes",
    "attributePatterns": "attribute_patterns",
    "components": "components",
    "componentPatterns": "component_patterns",
    "values": "values",
    "valuePatterns": "value_patterns",
}

_OPTION_KEYS = ("only", "ignore")


def _string_list(value: Any, where: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise RuleConfigError(f"{where}: expected a list of strings")
    return value


def _expression_list(value: Any, where: str) -> tuple[RuleExpression, ...]:
    if not isinstance(value, list):
        raise RuleConfigError(f"{where}: expected a list of expressions")
    return tuple(parse_expression(item, where=f"{where}[{i}]") for i, item in enumerate(value))


def parse_expression(raw: Any, *, where: str = "expression") -> RuleExpression:
    """
    Parse one rule expression.

    The shape decides the variant: {"and": [...]}, {"or": [...]}, {"not": {...}},
    or a criteria leaf built from the axis keys. Combinator keys cannot be
    mixed with any other key.
    """
    if not isinstance(raw, Mapping):
        raise RuleConfigError(f"{where}: expected an object, got {type(raw).__name__}")

    combinators = [k for k in _COMBINATOR_KEYS if k in raw]
    if combinators:
        if len(raw) != 1:
            raise RuleConfigError(f"{where}: '{combinators[0]}' cannot be combined with other keys")
        key = combinators[0]
        if key == "and":
            return And(children=_expression_list(raw["and"], f"{where}.and"))
        if key == "or":
            return Or(children=_expression_list(raw["or"], f"{where}.or"))
        return Not(child=parse_expression(raw["not"], where=f"{where}.not"))

    unknown = sorted(k for k in raw if k not in _CRITERIA_KEYS)
    if unknown:
        raise RuleConfigError(f"{where}: unknown key(s): {', '.join(map(str, unknown))}")

    kwargs = {
        _CRITERIA_KEYS[key]: _string_list(value, f"{where}.{key}")
        for key, value in raw.items()
    }
    return Criteria.of(where=where, **kwargs)


def normalize(raw: Any, *, where: str) -> Or:
    """Wrap a single expression, a list of expressions, or nothing into an Or."""
    if raw is None:
        return Or()
    if isinstance(raw, list):
        return Or(children=_expression_list(raw, where))
    return Or(children=(parse_expression(raw, where=where),))


def parse_options(raw: Mapping[str, Any] | None) -> RuleOptions:
    """Build RuleOptions from the `{only?, ignore?}` configuration object."""
    if raw is None:
        return RuleOptions()
    if not isinstance(raw, Mapping):
        raise RuleConfigError(f"options: expected an object, got {type(raw).__name__}")

    unknown = sorted(k for k in raw if k not in _OPTION_KEYS)
    if unknown:
        raise RuleConfigError(f"options: unknown key(s): {', '.join(map(str, unknown))}")

    return RuleOptions(
        only=normalize(raw.get("only"), where="only"),
        ignore=normalize(raw.get("ignore"), where="ignore"),
    )


def load_options(path: Path) -> RuleOptions:
    """
    Load rule options from a TOML or JSON file.

    TOML files hold `only` / `ignore` as a table or an array of tables;
    JSON files hold the same object ESLint would receive.
    """
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise RuleConfigError(f"{path}: not valid UTF-8 ({e})") from e

    if suffix == ".toml":
        import tomllib

        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise RuleConfigError(f"{path}: {e}") from e
    elif suffix == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise RuleConfigError(f"{path}: {e}") from e
    else:
        raise RuleConfigError(f"{path}: unsupported config format (expected .toml or .json)")

    return parse_options(data)
