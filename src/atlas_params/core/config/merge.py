# src/atlas_params/core/config/merge.py
"""
Deep-merge de configuração do Atlas Params.

Combina a configuração base (defaults do motor ou de arquivo) com
overrides locais explícitos, produzindo a configuração efetiva usada para
derivar a política de resolução.

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total (sem merge elemento a elemento)
    - escalar → sobrescrita direta
    - None no override → mantém o valor da base
    - conflito de tipos → erro estrutural explícito

Invariantes:
    - Nenhum input é mutado; o resultado é sempre um novo dicionário
    - A mesma entrada sempre produz a mesma saída
"""

from __future__ import annotations

from typing import Any, Dict

from atlas_params.core.values.clone import clone_value

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any], *, _where: str = "") -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois dicionários de configuração.

    Args:
        base (Dict[str, Any]): Configuração base.
        override (Dict[str, Any]): Overrides explícitos.

    Returns:
        Dict[str, Any]: Nova configuração resultante.

    Raises:
        ConfigTypeConflictError: Se uma chave possuir tipos incompatíveis
            entre base e override (a mensagem inclui o caminho da chave).
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requires dicts at '{_where or '<root>'}', got: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = clone_value(base)

    for key, override_value in override.items():
        where = f"{_where}.{key}" if _where else str(key)

        if key not in result or result[key] is None:
            result[key] = clone_value(override_value)
            continue

        if override_value is None:
            continue

        base_value = result[key]

        if isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(base_value, override_value, _where=where)
            continue

        if isinstance(override_value, list):
            result[key] = clone_value(override_value)
            continue

        if type(base_value) is not type(override_value):
            raise ConfigTypeConflictError(
                f"Type conflict at '{where}': "
                f"{type(base_value).__name__} vs {type(override_value).__name__}"
            )

        result[key] = override_value

    return result
