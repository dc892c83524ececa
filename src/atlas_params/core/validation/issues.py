# src/atlas_params/core/validation/issues.py
"""
IssueTree: relatório estruturado de issues de validação.

Este módulo define o formato canônico de issues exposto a qualquer
consumidor que renderize mensagens de validação (ex.: um editor), o merge
estrutural de relatórios e a linearização em linhas de texto.

Categorias:
    - parameters  → nome do campo → mensagens
    - credentials → nome da credencial → mensagens
    - execution   → flag de erro de execução
    - type_unknown → flag de tipo não registrado

Invariantes:
    - O merge é associativo e comutativo quanto à união das listas de
      mensagens e ao OR lógico das flags
    - Merge e renderização nunca mutam as árvores de entrada
    - Um relatório vazio representa ausência de issues
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from atlas_params.core.node import Node

# Categorias com mensagens por chave, na ordem canônica de renderização.
MESSAGE_CATEGORIES = ("parameters", "credentials")


def _copy_messages(messages: Mapping[str, List[str]]) -> Dict[str, List[str]]:
    return {key: list(items) for key, items in messages.items()}


@dataclass
class IssueTree:
    """Relatório de issues de um node ou de um campo."""

    parameters: Dict[str, List[str]] = field(default_factory=dict)
    credentials: Dict[str, List[str]] = field(default_factory=dict)
    execution: bool = False
    type_unknown: bool = False

    def add_parameter_issue(self, name: str, message: str) -> None:
        self.parameters.setdefault(name, []).append(message)

    def add_credential_issue(self, name: str, message: str) -> None:
        self.credentials.setdefault(name, []).append(message)

    def is_empty(self) -> bool:
        return not (self.parameters or self.credentials or self.execution or self.type_unknown)

    def merge(self, other: Optional["IssueTree"]) -> "IssueTree":
        """Retorna uma nova árvore com as issues de `self` seguidas das de `other`."""
        merged = IssueTree(
            parameters=_copy_messages(self.parameters),
            credentials=_copy_messages(self.credentials),
            execution=self.execution,
            type_unknown=self.type_unknown,
        )
        if other is None:
            return merged

        for category in MESSAGE_CATEGORIES:
            target: Dict[str, List[str]] = getattr(merged, category)
            for key, messages in getattr(other, category).items():
                target.setdefault(key, []).extend(messages)

        merged.execution = merged.execution or other.execution
        merged.type_unknown = merged.type_unknown or other.type_unknown
        return merged

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.execution:
            out["execution"] = True
        for category in MESSAGE_CATEGORIES:
            messages = getattr(self, category)
            if messages:
                out[category] = _copy_messages(messages)
        if self.type_unknown:
            out["typeUnknown"] = True
        return out

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "IssueTree":
        data = data or {}
        return cls(
            parameters=_copy_messages(data.get("parameters") or {}),
            credentials=_copy_messages(data.get("credentials") or {}),
            execution=bool(data.get("execution", False)),
            type_unknown=bool(data.get("typeUnknown", data.get("type_unknown", False))),
        )


def merge_issues(*trees: Optional[IssueTree]) -> IssueTree:
    """Combina relatórios na ordem dada; `None` é ignorado."""
    merged = IssueTree()
    for tree in trees:
        if tree is not None:
            merged = merged.merge(tree)
    return merged


def issues_to_strings(issues: Optional[IssueTree], node: Optional[Node] = None) -> List[str]:
    """
    Lineariza um relatório em mensagens legíveis.

    Ordem fixa:
        1. "Execution Error." quando `execution`
        2. mensagens de `parameters` e depois de `credentials`
        3. tipo desconhecido, com o tipo do node quando informado
    """
    if issues is None:
        return []

    lines: List[str] = []
    if issues.execution:
        lines.append("Execution Error.")

    for category in MESSAGE_CATEGORIES:
        for messages in getattr(issues, category).values():
            lines.extend(messages)

    if issues.type_unknown:
        if node is not None:
            lines.append(f'Node Type "{node.type}" is not known.')
        else:
            lines.append("Node Type is not known.")

    return lines
