# src/atlas_params/core/resolution/order.py
"""
Solver da ordem de resolução de campos.

Este módulo produz a ordem em que os campos de um nível do schema podem
ser avaliados com segurança: um campo só é emitido depois de todos os
campos dos quais sua visibilidade depende.

O solver opera exclusivamente em nível estrutural, analisando:
    - nomes de campos (possivelmente repetidos)
    - dependências de visibilidade
    - dependências impossíveis de satisfazer

Decisões arquiteturais:
    - Fila com reenfileiramento: a cabeça é emitida quando todas as suas
      dependências já foram resolvidas, senão volta para o fim da fila
    - Dependências com `ROOT_MARKER` são consideradas resolvidas
      externamente e nunca bloqueiam
    - Um nome é resolvido quando qualquer ocorrência dele é emitida
    - Ausência de progresso por uma volta completa da fila é erro fatal

Invariantes:
    - O resultado é uma permutação dos índices de entrada
    - Nenhum campo aparece antes de suas dependências locais
    - A mesma entrada sempre produz a mesma ordem
    - O número de iterações é limitado por n² (n = número de campos)

Limites explícitos:
    - Não avalia visibilidade
    - Não resolve valores
    - Não tenta quebrar ciclos automaticamente
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, List, Optional, Sequence

from atlas_params.core.schema.types import FieldDescriptor, is_root_key

from .dependencies import DependencyMap, build_dependencies
from .errors import UnresolvableDependencyError

logger = logging.getLogger(__name__)


def _waiting_on(name: str, dependencies: DependencyMap, resolved: set) -> List[str]:
    return [d for d in dependencies.get(name, []) if not is_root_key(d) and d not in resolved]


def resolve_order(
    fields: Sequence[FieldDescriptor],
    dependencies: Optional[DependencyMap] = None,
) -> List[int]:
    """
    Retorna a ordem (por índice) em que os campos devem ser resolvidos.

    A ordenação é determinística: a fila começa com todos os índices na
    ordem original e cada campo cujas dependências ainda não foram
    resolvidas é reenfileirado no fim.

    Args:
        fields (Sequence[FieldDescriptor]): Campos de um nível do schema.
        dependencies (Optional[DependencyMap]): Mapa de dependências; é
            construído a partir de `fields` quando omitido.

    Returns:
        List[int]: Permutação dos índices de `fields`.

    Raises:
        UnresolvableDependencyError: Se houver ciclo entre regras de
            visibilidade ou dependência de um campo inexistente.
    """
    if dependencies is None:
        dependencies = build_dependencies(fields)

    total = len(fields)
    queue: Deque[int] = deque(range(total))
    resolved: set = set()
    order: List[int] = []

    iterations = 0
    last_progress = 0

    while queue:
        iterations += 1
        index = queue.popleft()
        name = fields[index].name

        if not _waiting_on(name, dependencies, resolved):
            order.append(index)
            resolved.add(name)
            last_progress = iterations
            continue

        queue.append(index)

        # Uma volta completa sem progresso: o conjunto resolvido não muda mais.
        if iterations - last_progress >= total:
            pending: Dict[str, List[str]] = {}
            for i in queue:
                pending.setdefault(fields[i].name, _waiting_on(fields[i].name, dependencies, resolved))
            logger.debug("Unresolvable field dependencies after %d iterations: %s", iterations, pending)
            detail = ", ".join(f"{n} -> {deps}" for n, deps in pending.items())
            raise UnresolvableDependencyError(
                f"Could not resolve parameter dependencies: {detail}",
                pending=pending,
            )

    return order
