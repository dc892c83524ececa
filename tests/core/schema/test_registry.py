# tests/core/schema/test_registry.py
"""
Testes do registry de tipos de campo.

Decisões arquiteturais:
    - Nomes de tipo são únicos
    - Lookup de tipo inexistente é erro explícito
"""

import pytest

from atlas_params.core.schema.errors import DuplicateFieldTypeError, RegistryError, UnknownFieldTypeError
from atlas_params.core.schema.registry import FieldTypeDescription, FieldTypeRegistry
from atlas_params.core.schema.types import FieldDescriptor


def test_registry_preserves_registration_order(registry):
    assert [d.name for d in registry.list()] == ["switch", "search"]
    assert registry.has("search")
    assert registry.get("search").display_name == "Search"
    assert registry.get("switch").display_name == "switch"


def test_duplicate_type_is_rejected(registry):
    with pytest.raises(DuplicateFieldTypeError):
        registry.add(FieldTypeDescription(name="switch", fields=()))


def test_unknown_type_is_rejected(registry):
    with pytest.raises(UnknownFieldTypeError) as info:
        registry.get("missing")
    assert isinstance(info.value, RegistryError)
    assert isinstance(info.value, KeyError)
    assert str(info.value) == "Unknown field type: missing"


def test_type_name_must_be_non_empty():
    with pytest.raises(ValueError):
        FieldTypeRegistry().add(FieldTypeDescription(name=" ", fields=(FieldDescriptor(name="a"),)))
