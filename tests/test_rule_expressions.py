"""Tests for rule expression evaluation and the only / ignore filter."""

from __future__ import annotations

import pytest

from attrlit.rules.evaluate import evaluate
from attrlit.rules.filters import filter_reportable, is_reportable
from attrlit.rules.schema import And, AttributeDescriptor, Criteria, Not, Or, RuleOptions

BUTTON_AS = AttributeDescriptor(component="Button", name="as", value="p")
OTHER_PROP = AttributeDescriptor(component="Other", name="prop", value="hey")
BOX_THEME = AttributeDescriptor(component="Box", name="theme", value="primary-variant")

ALL = [BUTTON_AS, OTHER_PROP, BOX_THEME]


@pytest.mark.parametrize("attr", ALL)
def test_empty_and_is_true_empty_or_is_false(attr: AttributeDescriptor):
    assert evaluate(And(), attr) is True
    assert evaluate(Or(), attr) is False


@pytest.mark.parametrize("attr", ALL)
@pytest.mark.parametrize(
    "expr",
    [
        Criteria.of(components=["Button"]),
        Criteria.of(value_patterns=["^pri"]),
        And((Criteria.of(components=["Button"]), Criteria.of(attributes=["as"]))),
        Or(),
    ],
)
def test_double_negation(expr, attr: AttributeDescriptor):
    assert evaluate(Not(Not(expr)), attr) == evaluate(expr, attr)


def test_empty_criteria_never_matches():
    assert not any(evaluate(Criteria(), a) for a in ALL)


def test_value_pattern_is_substring_search():
    assert evaluate(Criteria.of(value_patterns=["primary"]), BOX_THEME)
    assert not evaluate(Criteria.of(value_patterns=["^variant"]), BOX_THEME)


def test_exact_value_does_not_match_substring():
    assert not evaluate(Criteria.of(values=["primary"]), BOX_THEME)


@pytest.mark.parametrize(
    "criteria",
    [
        Criteria.of(attributes=["as"]),
        Criteria.of(attribute_patterns=["^a"]),
        Criteria.of(components=["Button"]),
        Criteria.of(component_patterns=["utt"]),
        Criteria.of(values=["p"]),
        Criteria.of(value_patterns=["^p$"]),
    ],
)
def test_each_axis_matches_on_its_own(criteria: Criteria):
    assert evaluate(criteria, BUTTON_AS)
    assert not evaluate(criteria, OTHER_PROP)


def test_axes_combine_with_or():
    criteria = Criteria.of(components=["Nope"], attributes=["as"])
    assert evaluate(criteria, BUTTON_AS)


def test_and_requires_all_children():
    expr = And((Criteria.of(components=["Button"]), Criteria.of(attributes=["as"])))
    assert evaluate(expr, BUTTON_AS)
    assert not evaluate(expr, AttributeDescriptor(component="Button", name="notAs", value="p"))
    assert not evaluate(expr, AttributeDescriptor(component="NotButton", name="as", value="p"))


def test_unknown_expression_raises_type_error():
    with pytest.raises(TypeError):
        evaluate({"components": ["Button"]}, BUTTON_AS)  # type: ignore[arg-type]


def test_empty_only_reports_everything_not_ignored():
    options = RuleOptions(ignore=Or((Criteria.of(values=["hey"]),)))
    assert filter_reportable(options, ALL) == [BUTTON_AS, BOX_THEME]


def test_only_excludes_other_components_regardless_of_ignore():
    only = Or((Criteria.of(components=["Button"]),))
    for ignore in (Or(), Or((Criteria.of(components=["Button"]),)), Or((Not(Criteria.of(components=["Other"])),))):
        options = RuleOptions(only=only, ignore=ignore)
        assert not is_reportable(options, OTHER_PROP)


def test_ignore_applies_on_top_of_only():
    options = RuleOptions(
        only=Or((Criteria.of(components=["Button", "Box"]),)),
        ignore=Or((Criteria.of(attributes=["theme"]),)),
    )
    assert filter_reportable(options, ALL) == [BUTTON_AS]


def test_default_options_report_everything():
    assert filter_reportable(RuleOptions(), ALL) == ALL


def test_dollar_anchor_matches_only_at_end_of_value():
    criteria = Criteria.of(value_patterns=["^dark$"])
    assert evaluate(criteria, AttributeDescriptor(component="Box", name="theme", value="dark"))
    assert not evaluate(criteria, AttributeDescriptor(component="Box", name="theme", value="dark\n"))


def test_dollar_inside_class_or_escaped_stays_literal():
    criteria = Criteria.of(value_patterns=["[$]5", "\\$10"])
    assert evaluate(criteria, AttributeDescriptor(component="Price", name="label", value="$5"))
    assert evaluate(criteria, AttributeDescriptor(component="Price", name="label", value="$10"))


def test_word_class_is_ascii_only():
    criteria = Criteria.of(value_patterns=["^\\w+$"])
    assert evaluate(criteria, AttributeDescriptor(component="Menu", name="item", value="cafe"))
    assert not evaluate(criteria, AttributeDescriptor(component="Menu", name="item", value="café"))
