# src/atlas_params/core/values/__init__.py
"""
Valores de parâmetros: caminhos explícitos e clonagem estrutural.

Árvores de valores são dicionários puros cujos valores são escalares,
listas de árvores (instâncias repetidas) ou árvores aninhadas. Este
pacote oferece a navegação tipada e a cópia profunda canônica sobre
esse formato.
"""

from .clone import clone_value
from .paths import (
    MISSING,
    PathSegment,
    ValuePath,
    format_path,
    get_by_path,
    has_path,
    join_path,
    parse_path,
)

__all__ = [
    "MISSING",
    "PathSegment",
    "ValuePath",
    "clone_value",
    "format_path",
    "get_by_path",
    "has_path",
    "join_path",
    "parse_path",
]
