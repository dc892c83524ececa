# src/atlas_params/core/node.py
"""
Node: instância configurada de um tipo de campos.

Um node associa um nome único a um tipo registrado e aos valores de
parâmetros informados pelo usuário. É a unidade sobre a qual a fachada
resolve parâmetros, o validador reporta issues e o store de contexto
mantém buckets por node.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Node:
    """
    Campos canônicos:
    - name: identificador do node dentro do workflow
    - type: nome do tipo registrado no `FieldTypeRegistry`
    - parameters: valores informados (árvore esparsa)
    - disabled: nodes desabilitados não geram issues
    - credentials: referências de credenciais (não interpretadas pelo core)
    """

    name: str
    type: str
    parameters: Dict[str, Any] = field(default_factory=dict)
    disabled: bool = False
    credentials: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("node.name must be a non-empty string")
