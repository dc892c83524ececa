# src/atlas_params/core/schema/__init__.py
"""
Camada de schema de campos do Atlas Params.

Este pacote contém o modelo declarativo de campos consumido pelo motor
de resolução, o loader de documentos YAML/JSON, a validação estrutural
desses documentos e o registry que mapeia nomes de tipo para schemas.

Invariantes:
    - Schemas materializados são imutáveis
    - Nomes repetidos no mesmo nível são preservados em ordem
    - Documentos inválidos nunca produzem schemas parciais

Limites explícitos:
    - Não resolve valores
    - Não valida parâmetros informados pelo usuário
"""

from .errors import (
    DuplicateFieldTypeError,
    RegistryError,
    SchemaError,
    SchemaFileNotFoundError,
    SchemaParseError,
    SchemaPathMissingError,
    SchemaValidationError,
    UnknownFieldTypeError,
    UnsupportedSchemaFormatError,
)
from .loader import load_field_schema, load_schema_document, register_field_schemas
from .registry import FieldTypeDescription, FieldTypeRegistry
from .types import (
    CONTAINER_KINDS,
    PRESENCE_KINDS,
    ROOT_MARKER,
    FieldDescriptor,
    FieldKind,
    NamedGroup,
    VisibilityRule,
    is_root_key,
    strip_root_marker,
)
from .validation import build_field_schema, build_type_schema

__all__ = [
    "CONTAINER_KINDS",
    "PRESENCE_KINDS",
    "ROOT_MARKER",
    "DuplicateFieldTypeError",
    "FieldDescriptor",
    "FieldKind",
    "FieldTypeDescription",
    "FieldTypeRegistry",
    "NamedGroup",
    "RegistryError",
    "SchemaError",
    "SchemaFileNotFoundError",
    "SchemaParseError",
    "SchemaPathMissingError",
    "SchemaValidationError",
    "UnknownFieldTypeError",
    "UnsupportedSchemaFormatError",
    "VisibilityRule",
    "build_field_schema",
    "build_type_schema",
    "is_root_key",
    "load_field_schema",
    "load_schema_document",
    "register_field_schemas",
    "strip_root_marker",
]
