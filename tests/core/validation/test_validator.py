# tests/core/validation/test_validator.py
"""
Testes do validador de parâmetros obrigatórios.

Os testes asseguram que:
- campos obrigatórios ausentes geram a mensagem canônica
- o predicado de ausência é estrito por tipo
- campos invisíveis nunca geram issues
- filhos de containers só são verificados quando o container existe
- instâncias repetidas são verificadas item a item
- nodes desabilitados não geram issues

Invariantes:
    - O validador nunca levanta exceção
    - Relatório vazio significa ausência de issues
"""

from types import MappingProxyType

import pytest

from atlas_params.core.node import Node
from atlas_params.core.schema.types import FieldDescriptor, FieldKind, VisibilityRule
from atlas_params.core.validation.validator import (
    get_node_parameters_issues,
    get_parameter_issues,
    is_value_missing,
    validate_parameters,
)


def _required(name, kind=FieldKind.TEXT, **kwargs):
    return FieldDescriptor(name=name, kind=kind, required=True, **kwargs)


@pytest.mark.parametrize(
    "kind, value, missing",
    [
        (FieldKind.TEXT, "", True),
        (FieldKind.TEXT, None, True),
        (FieldKind.TEXT, "x", False),
        (FieldKind.MULTI_SELECT, [], True),
        (FieldKind.MULTI_SELECT, ["a"], False),
        (FieldKind.DATE, None, True),
        (FieldKind.DATE, "2024-01-01", False),
        (FieldKind.NUMBER, None, False),
        (FieldKind.BOOLEAN, False, False),
    ],
)
def test_missing_predicate_is_strict_per_kind(kind, value, missing):
    assert is_value_missing(FieldDescriptor(name="f", kind=kind), value) is missing


def test_required_text_uses_display_name_in_message():
    field = _required("api_key", display_name="API Key")
    issues = get_parameter_issues(field, {})
    assert issues.parameters == {"api_key": ['Parameter "API Key" is required.']}


def test_filled_required_field_has_no_issues(name_filters_fields):
    issues = validate_parameters(name_filters_fields, {"name": "n"})
    assert issues.is_empty()


def test_empty_required_text_is_reported(name_filters_fields):
    issues = validate_parameters(name_filters_fields, {"name": ""})
    assert issues.parameters == {"name": ['Parameter "name" is required.']}


def test_optional_group_child_is_not_reported(name_filters_fields):
    issues = validate_parameters(name_filters_fields, {"name": "", "filters": [{"value": ""}]})
    assert issues.to_dict() == {"parameters": {"name": ['Parameter "name" is required.']}}


def test_hidden_required_field_is_not_reported():
    fields = (
        FieldDescriptor(name="mode", kind=FieldKind.OPTIONS, default="a"),
        _required("extra", visibility=VisibilityRule(show={"mode": ["b"]})),
    )
    assert validate_parameters(fields, {"mode": "a"}).is_empty()
    assert validate_parameters(fields, {}).is_empty()
    assert validate_parameters(fields, {"mode": "b"}).parameters == {
        "extra": ['Parameter "extra" is required.'],
    }


def test_repeated_required_scalar_is_checked_per_item():
    field = _required("tags", repeated=True)
    issues = get_parameter_issues(field, {"tags": ["a", "", None]})
    assert issues.parameters == {"tags": ['Parameter "tags" is required.'] * 2}


def test_group_children_checked_only_when_group_exists():
    fields = (
        FieldDescriptor(
            name="filters",
            kind=FieldKind.GROUP,
            repeated=True,
            children=(_required("value"),),
        ),
    )
    assert validate_parameters(fields, {}).is_empty()

    issues = validate_parameters(fields, {"filters": [{"value": "a"}, {}, {"value": ""}]})
    assert issues.parameters == {"value": ['Parameter "value" is required.'] * 2}


def test_single_group_child_visibility_uses_nested_scope():
    fields = (
        FieldDescriptor(
            name="options",
            kind=FieldKind.GROUP,
            children=(
                FieldDescriptor(name="kind", kind=FieldKind.OPTIONS),
                _required("query", visibility=VisibilityRule(show={"kind": ["sql"]})),
            ),
        ),
    )
    assert validate_parameters(fields, {"options": {"kind": "rest"}}).is_empty()
    assert not validate_parameters(fields, {"options": {"kind": "sql"}}).is_empty()


def test_named_group_items_are_validated(headers_fields):
    values = {
        "headers": {"header": [{"name": ""}, {"name": "X"}]},
        "auth": {"basic": {}},
    }
    issues = validate_parameters(headers_fields, values)
    assert issues.parameters == {
        "name": ['Parameter "name" is required.'],
        "user": ['Parameter "user" is required.'],
    }


def test_unselected_named_group_is_not_validated(headers_fields):
    assert validate_parameters(headers_fields, {"auth": {"token": {}}}).is_empty()


def test_values_are_not_mutated(headers_fields):
    values = {"headers": {"header": [{"name": ""}]}}
    validate_parameters(headers_fields, values)
    assert values == {"headers": {"header": [{"name": ""}]}}


def test_node_issues_none_when_clean_or_disabled(name_filters_fields):
    assert get_node_parameters_issues(name_filters_fields, Node(name="n1", type="search", parameters={"name": "x"})) is None
    assert get_node_parameters_issues(name_filters_fields, Node(name="n2", type="search", disabled=True)) is None


def test_node_issues_reported(name_filters_fields):
    issues = get_node_parameters_issues(name_filters_fields, Node(name="n1", type="search"))
    assert issues is not None
    assert issues.parameters == {"name": ['Parameter "name" is required.']}


def test_read_only_mappings_are_validated_like_dicts(name_filters_fields):
    filled = MappingProxyType({"name": "n", "filters": [MappingProxyType({"value": "a"})]})
    assert validate_parameters(name_filters_fields, filled).is_empty()

    empty = MappingProxyType({"name": ""})
    assert validate_parameters(name_filters_fields, empty).parameters == {
        "name": ['Parameter "name" is required.'],
    }
