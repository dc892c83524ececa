# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas Params.

Este módulo define fixtures reutilizáveis que fornecem:
- schemas mínimos e determinísticos (escalares, groups, named group sets)
- registry de tipos pré-populado
- YAMLs de configuração semelhantes ao uso real

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Schemas são construídos diretamente com as dataclasses do core
    - Imports do core são realizados de forma lazy para melhorar a
      clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Schemas retornados são imutáveis e podem ser compartilhados

Este módulo existe como infraestrutura de teste e não
como validação funcional do motor.
"""

import pytest


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def config_defaults_yaml() -> str:
    """YAML de defaults com a política padrão de resolução."""
    return """
resolution:
  inject_defaults: true
  include_hidden: false
validation:
  skip_disabled_nodes: true
"""


@pytest.fixture
def config_local_yaml() -> str:
    """YAML local que sobrescreve apenas `include_hidden`."""
    return """
resolution:
  include_hidden: true
"""


# =====================================================
# Schema fixtures
# =====================================================

@pytest.fixture
def mode_extra_fields():
    """
    Schema com dependência de visibilidade entre irmãos.

    - mode: options "a" / "b" (default "a")
    - extra: texto visível apenas quando mode == "b" (default "x")
    """
    from atlas_params.core.schema.types import FieldDescriptor, FieldKind, VisibilityRule

    return (
        FieldDescriptor(name="mode", kind=FieldKind.OPTIONS, default="a", options=("a", "b")),
        FieldDescriptor(
            name="extra",
            kind=FieldKind.TEXT,
            default="x",
            visibility=VisibilityRule(show={"mode": ["b"]}),
        ),
    )


@pytest.fixture
def name_filters_fields():
    """
    Schema com texto obrigatório e group repetido.

    - name: texto obrigatório (default "")
    - filters: group repetido com um filho texto `value` (não obrigatório)
    """
    from atlas_params.core.schema.types import FieldDescriptor, FieldKind

    return (
        FieldDescriptor(name="name", kind=FieldKind.TEXT, default="", required=True),
        FieldDescriptor(
            name="filters",
            kind=FieldKind.GROUP,
            repeated=True,
            default=[],
            children=(FieldDescriptor(name="value", kind=FieldKind.TEXT, default=""),),
        ),
    )


@pytest.fixture
def headers_fields():
    """
    Schema com `named_group_set` repetido e único.

    - headers (repetido): grupo "header" com `name` (obrigatório) e `value`
    - auth (único): grupos "basic" (user, password) e "token" (token)
    """
    from atlas_params.core.schema.types import FieldDescriptor, FieldKind, NamedGroup

    return (
        FieldDescriptor(
            name="headers",
            kind=FieldKind.NAMED_GROUP_SET,
            repeated=True,
            default={},
            groups=(
                NamedGroup(
                    name="header",
                    display_name="Header",
                    fields=(
                        FieldDescriptor(name="name", kind=FieldKind.TEXT, default="", required=True),
                        FieldDescriptor(name="value", kind=FieldKind.TEXT, default="v"),
                    ),
                ),
            ),
        ),
        FieldDescriptor(
            name="auth",
            kind=FieldKind.NAMED_GROUP_SET,
            default={},
            groups=(
                NamedGroup(
                    name="basic",
                    fields=(
                        FieldDescriptor(name="user", kind=FieldKind.TEXT, default="", required=True),
                        FieldDescriptor(name="password", kind=FieldKind.TEXT, default=""),
                    ),
                ),
                NamedGroup(
                    name="token",
                    fields=(FieldDescriptor(name="token", kind=FieldKind.TEXT, default="t0"),),
                ),
            ),
        ),
    )


@pytest.fixture
def registry(mode_extra_fields, name_filters_fields):
    """Registry com os tipos `switch` e `search`."""
    from atlas_params.core.schema.registry import FieldTypeDescription, FieldTypeRegistry

    reg = FieldTypeRegistry()
    reg.add(FieldTypeDescription(name="switch", fields=mode_extra_fields))
    reg.add(FieldTypeDescription(name="search", display_name="Search", fields=name_filters_fields))
    return reg
