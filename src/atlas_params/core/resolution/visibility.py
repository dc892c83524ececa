# src/atlas_params/core/resolution/visibility.py
"""
Avaliador de visibilidade de campos.

Este módulo decide se um campo está atualmente relevante, dados os valores
dos seus irmãos (escopo corrente) e da raiz do documento. É compartilhado
pelo resolvedor e pelo validador para que "campo visível" tenha exatamente
a mesma semântica em resolução e validação.

Semântica (v1):
    - Sem regra → sempre visível
    - show → TODAS as chaves devem conter um valor permitido
    - hide → QUALQUER chave contendo um valor supressor oculta o campo
    - Chaves com `ROOT_MARKER` são lidas do escopo raiz

Invariantes:
    - A função é pura e nunca levanta exceção por valores ausentes
    - Escopos que não são mapeamentos tornam todas as leituras ausentes

Limites explícitos:
    - Não resolve defaults
    - Não navega dependências transitivas
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from atlas_params.core.schema.types import FieldDescriptor, is_root_key, strip_root_marker
from atlas_params.core.values.paths import MISSING, PathSegment, get_by_path, parse_path

# Nome convencional do container de campos em um documento de node.
PARAMETERS_CONTAINER = "parameters"


def _lookup(scope: Any, key: str) -> Any:
    if not isinstance(scope, Mapping):
        return MISSING
    return scope.get(key, MISSING)


def _read(key: str, current_scope: Any, root_scope: Any) -> Any:
    if is_root_key(key):
        return _lookup(root_scope, strip_root_marker(key))
    return _lookup(current_scope, key)


def _same(value: Any, candidate: Any) -> bool:
    # bool é subclasse de int: True não casa com 1, nem False com 0.
    if isinstance(value, bool) != isinstance(candidate, bool):
        return False
    return value == candidate


def _matches(value: Any, allowed: Tuple[Any, ...]) -> bool:
    # Comparação por igualdade, então valores não-hasheáveis também funcionam.
    return any(_same(value, candidate) for candidate in allowed)


def is_visible(
    current_scope: Any,
    field: FieldDescriptor,
    root_scope: Optional[Any] = None,
) -> bool:
    """
    Retorna se o campo deve ser considerado visível.

    Args:
        current_scope: Valores do nível corrente (irmãos do campo).
        field: Descritor do campo avaliado.
        root_scope: Valores da raiz do documento. Quando omitido, o escopo
            corrente é usado como raiz (no nível superior ambos coincidem).

    Returns:
        bool: True se o campo está visível.
    """
    rule = field.visibility
    if rule is None:
        return True

    if root_scope is None:
        root_scope = current_scope

    if rule.show is not None:
        for key, allowed in rule.show.items():
            value = _read(key, current_scope, root_scope)
            if value is MISSING or not _matches(value, allowed):
                return False
        return True

    for key, suppressing in rule.hide.items():  # type: ignore[union-attr]
        value = _read(key, current_scope, root_scope)
        if value is not MISSING and _matches(value, suppressing):
            return False
    return True


def is_visible_at_path(
    values: Any,
    field: FieldDescriptor,
    path: Union[str, Iterable[PathSegment], None],
) -> bool:
    """
    Variante de `is_visible` orientada a caminho.

    O escopo corrente é obtido navegando `path` dentro de `values`. O escopo
    raiz é o container `parameters` quando o primeiro segmento do caminho é
    esse container; caso contrário, a árvore inteira.
    """
    segments = parse_path(path)
    current = get_by_path(values, segments) if segments else values

    root = values
    if segments and segments[0] == PARAMETERS_CONTAINER:
        root = get_by_path(values, (PARAMETERS_CONTAINER,))

    return is_visible(current, field, root)
