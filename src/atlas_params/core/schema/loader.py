"""
Loader de schemas de tipo declarados em arquivo (YAML/JSON).

Um arquivo descreve exatamente um tipo: `{name, displayName?, fields: [...]}`.
O loader lê o arquivo, valida o documento com `build_type_schema` e entrega
uma `FieldTypeDescription` pronta para o `FieldTypeRegistry`.

Notas:
- O formato é inferido pela extensão (`.yaml`, `.yml`, `.json`) antes
  de qualquer leitura do arquivo.
- Erros de parse e de validação carregam o caminho do arquivo na
  mensagem, para que um registry montado a partir de vários arquivos
  aponte o arquivo culpado.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

import yaml

from .errors import (
    DuplicateFieldTypeError,
    SchemaFileNotFoundError,
    SchemaParseError,
    SchemaPathMissingError,
    SchemaValidationError,
    UnsupportedSchemaFormatError,
)
from .registry import FieldTypeDescription, FieldTypeRegistry
from .validation import build_type_schema

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_PARSERS: Dict[str, Callable[[str], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.loads,
}


def _schema_path(path: Optional[PathLike]) -> Path:
    if path is None or not str(path).strip():
        raise SchemaPathMissingError("schema path is required")

    p = Path(path)
    if p.suffix.lower() not in _PARSERS:
        raise UnsupportedSchemaFormatError(
            f"unsupported schema format '{p.suffix}' for {p} (expected one of {sorted(_PARSERS)})"
        )
    if not p.is_file():
        raise SchemaFileNotFoundError(f"schema file not found: {p}")
    return p


def load_schema_document(*, path: Optional[PathLike]) -> Dict[str, Any]:
    """Lê o documento bruto de um schema de tipo.

    Raises:
        SchemaPathMissingError: se path estiver ausente.
        UnsupportedSchemaFormatError: se a extensão não for suportada.
        SchemaFileNotFoundError: se o arquivo não existir.
        SchemaParseError: se o parse falhar, o arquivo estiver vazio ou a
            raiz não for um mapping.
    """
    p = _schema_path(path)
    parse = _PARSERS[p.suffix.lower()]

    try:
        data = parse(p.read_text(encoding="utf-8"))
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise SchemaParseError(f"{p}: {e}") from e

    if data is None:
        raise SchemaParseError(f"{p}: schema file is empty")
    if not isinstance(data, dict):
        raise SchemaParseError(f"{p}: schema root must be a mapping, got {type(data).__name__}")

    return data


def load_field_schema(*, path: Optional[PathLike]) -> FieldTypeDescription:
    """Carrega e valida o schema de um tipo.

    Raises:
        SchemaError: qualquer falha de carregamento; falhas de validação
            são relançadas como `SchemaValidationError` prefixadas pelo
            caminho do arquivo.
    """
    data = load_schema_document(path=path)
    try:
        schema = build_type_schema(data)
    except SchemaValidationError as e:
        raise SchemaValidationError(f"{path}: {e}") from e

    logger.debug("Loaded field type %r from %s (%d fields)", schema["name"], path, len(schema["fields"]))
    return FieldTypeDescription(
        name=schema["name"],
        display_name=schema["display_name"],
        fields=schema["fields"],
    )


def register_field_schemas(
    registry: FieldTypeRegistry,
    paths: Iterable[PathLike],
) -> List[FieldTypeDescription]:
    """Carrega cada arquivo em ordem e registra o tipo no `registry`.

    Todos os arquivos são carregados antes do primeiro registro: um arquivo
    inválido não deixa o registry parcialmente populado.

    Raises:
        SchemaError: falha de carregamento de qualquer arquivo.
        DuplicateFieldTypeError: tipo já registrado (ou repetido entre arquivos).
    """
    descriptions = [load_field_schema(path=p) for p in paths]

    seen = set()
    for d in descriptions:
        if registry.has(d.name) or d.name in seen:
            raise DuplicateFieldTypeError(f"Duplicate field type: {d.name}")
        seen.add(d.name)

    for d in descriptions:
        registry.add(d)
    return descriptions
