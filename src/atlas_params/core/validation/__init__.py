# src/atlas_params/core/validation/__init__.py
"""
Camada de validação do Atlas Params.

Este pacote contém o validador de valores obrigatórios, o formato
canônico de relatório (`IssueTree`), o merge estrutural de relatórios e
a linearização em mensagens legíveis.

Limites explícitos:
    - Não resolve valores efetivos
    - Não levanta exceções para valores inválidos: issues são dados
"""

from .issues import MESSAGE_CATEGORIES, IssueTree, issues_to_strings, merge_issues
from .validator import (
    add_issue_if_missing,
    get_node_parameters_issues,
    get_parameter_issues,
    is_value_missing,
    validate_parameters,
)

__all__ = [
    "MESSAGE_CATEGORIES",
    "IssueTree",
    "add_issue_if_missing",
    "get_node_parameters_issues",
    "get_parameter_issues",
    "is_value_missing",
    "issues_to_strings",
    "merge_issues",
    "validate_parameters",
]
