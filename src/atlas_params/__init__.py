# src/atlas_params/__init__.py
"""
Atlas Params: motor declarativo de resolução de parâmetros.

Este pacote raiz define o namespace público do Atlas Params, um motor
projetado para resolver, de forma determinística e sem efeitos colaterais,
conjuntos de parâmetros tipados, condicionalmente visíveis e aninhados.

Dado um schema de campos e um conjunto esparso de valores informados pelo
usuário, o motor calcula:
    - a árvore de valores efetiva sob diferentes políticas de resolução
    - a ordem segura de avaliação de campos interdependentes
    - um relatório estruturado de valores obrigatórios ausentes

Arquitetura em alto nível:
    - core.values     → caminhos explícitos e clonagem estrutural de valores
    - core.schema     → modelo de campos, loader, validação e registry de tipos
    - core.resolution → visibilidade, dependências, ordem e resolução da árvore
    - core.validation → issues de valores obrigatórios, merge e renderização
    - core.context    → store de contexto por execução (colaborador externo)
    - core.config     → carregamento e merge da política de resolução
    - core.engine     → fachada de resolução e validação por node

Limites explícitos:
    - Não executa workflows
    - Não registra webhooks nem endpoints de callback
    - Não renderiza UI e não persiste dados

Este módulo existe para estabelecer o contrato conceitual e o namespace
do Atlas Params.
"""

from .core.engine import ParameterEngine
from .core.resolution import (
    build_dependencies,
    is_visible,
    is_visible_at_path,
    resolve_order,
    resolve_parameters,
)
from .core.validation import (
    IssueTree,
    get_node_parameters_issues,
    get_parameter_issues,
    issues_to_strings,
    merge_issues,
    validate_parameters,
)

__all__ = [
    "ParameterEngine",
    "build_dependencies",
    "is_visible",
    "is_visible_at_path",
    "resolve_order",
    "resolve_parameters",
    "IssueTree",
    "get_node_parameters_issues",
    "get_parameter_issues",
    "issues_to_strings",
    "merge_issues",
    "validate_parameters",
]
