"""
Exceções canônicas da camada de resolução de parâmetros.

Erros desta camada indicam que o próprio schema é inválido para resolução
(ciclo de visibilidade, referência a campo inexistente, grupo nomeado
desconhecido). São tratados como falhas fatais: nenhuma árvore parcial é
retornada.
"""

from __future__ import annotations

from typing import Dict, List, Optional


class ParameterResolutionError(Exception):
    """Exceção base para erros estruturais durante a resolução de parâmetros."""


class UnresolvableDependencyError(ParameterResolutionError, ValueError):
    """
    Exceção levantada quando não existe ordem de resolução satisfatória.

    Indica um ciclo entre regras de visibilidade ou uma dependência de um
    campo que nunca será resolvido (ex.: chave digitada incorretamente).

    Atributos:
        pending: dependências não resolvidas por campo pendente.
    """

    def __init__(self, message: str, pending: Optional[Dict[str, List[str]]] = None):
        super().__init__(message)
        self.pending: Dict[str, List[str]] = dict(pending or {})


class UnknownGroupError(ParameterResolutionError, KeyError):
    """Valor de `named_group_set` referencia um grupo não declarado no schema."""

    def __init__(self, field_name: str, group_name: str):
        super().__init__(f'Could not find group "{group_name}" for "{field_name}"')
        self.field_name = field_name
        self.group_name = group_name

    def __str__(self) -> str:
        return str(self.args[0])
