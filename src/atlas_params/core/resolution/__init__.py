# src/atlas_params/core/resolution/__init__.py
"""
Camada de resolução de parâmetros do Atlas Params.

Este pacote reúne os componentes que transformam um schema de campos e
valores esparsos em uma árvore de valores efetiva:

    - visibility   → avaliador de visibilidade (show / hide, chaves raiz)
    - dependencies → grafo de dependências de visibilidade
    - order        → solver determinístico da ordem de resolução
    - resolver     → resolvedor recursivo da árvore de parâmetros

Princípios fundamentais:
    - Resolução determinística e sem efeitos colaterais
    - Erros estruturais do schema são fatais
    - A mesma semântica de visibilidade é usada pelo validador
"""

from .dependencies import DependencyMap, build_dependencies
from .errors import ParameterResolutionError, UnknownGroupError, UnresolvableDependencyError
from .order import resolve_order
from .resolver import ValueTree, resolve_parameters
from .visibility import PARAMETERS_CONTAINER, is_visible, is_visible_at_path

__all__ = [
    "DependencyMap",
    "PARAMETERS_CONTAINER",
    "ParameterResolutionError",
    "UnknownGroupError",
    "UnresolvableDependencyError",
    "ValueTree",
    "build_dependencies",
    "is_visible",
    "is_visible_at_path",
    "resolve_order",
    "resolve_parameters",
]
