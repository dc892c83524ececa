"""
Registry de tipos de campo.

Mapeia o nome de um tipo (ex.: o tipo de um node) para o seu schema de
campos. É um colaborador externo do motor de resolução: um lookup fino,
sem lógica algorítmica.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .errors import DuplicateFieldTypeError, UnknownFieldTypeError
from .types import FieldDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldTypeDescription:
    """Descrição imutável de um tipo: nome, rótulo e schema de campos."""

    name: str
    fields: Tuple[FieldDescriptor, ...]
    display_name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))
        if not self.display_name:
            object.__setattr__(self, "display_name", self.name)


@dataclass
class FieldTypeRegistry:
    """
    Registro canônico de tipos de campo.

    Decisões arquiteturais:
        - Nomes de tipo são únicos no registry
        - A ordem de registro é preservada separadamente
        - Duplicidade é tratada como erro fatal de configuração

    Limites explícitos:
        - Não resolve valores nem valida parâmetros
        - Não carrega arquivos (ver `schema.loader`)
    """

    _types: Dict[str, FieldTypeDescription] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, description: FieldTypeDescription) -> None:
        name = getattr(description, "name", None)
        if not isinstance(name, str) or not name.strip():
            raise ValueError("field type name must be a non-empty string")

        if name in self._types:
            raise DuplicateFieldTypeError(f"Duplicate field type: {name}")

        self._types[name] = description
        self._order.append(name)
        logger.debug("Registered field type %r with %d fields", name, len(description.fields))

    def has(self, name: str) -> bool:
        return name in self._types

    def get(self, name: str) -> FieldTypeDescription:
        if name not in self._types:
            raise UnknownFieldTypeError(f"Unknown field type: {name}")
        return self._types[name]

    def list(self) -> List[FieldTypeDescription]:
        return [self._types[n] for n in self._order]
