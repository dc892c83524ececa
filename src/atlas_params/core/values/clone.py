# src/atlas_params/core/values/clone.py
"""
Clonagem estrutural de valores de parâmetros.

Valores de parâmetros são árvores compostas apenas por mapeamentos,
sequências e escalares. Este módulo define a cópia profunda canônica
sobre esse formato, usada para materializar defaults e repassar valores
informados sem compartilhar referências com o schema ou com o chamador.

Política de clonagem (v1):
    - dict  → novo dict com valores clonados recursivamente
    - list / tuple → nova lista com itens clonados recursivamente
    - escalar → retornado como está (imutável por contrato)

Limites explícitos:
    - Não valida tipos de valores
    - Não serializa nem converte escalares
"""

from __future__ import annotations

from typing import Any, Mapping


def clone_value(value: Any) -> Any:
    """Retorna uma cópia estrutural profunda de `value`."""
    if isinstance(value, Mapping):
        return {key: clone_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [clone_value(item) for item in value]
    return value
