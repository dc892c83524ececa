"""
Construtor do grafo de dependências entre campos.

Um campo depende de todas as chaves referenciadas pela sua regra de
visibilidade (modo `show` ou `hide`). O mapa resultante é consumido pelo
solver de ordem de resolução.

Invariantes:
    - Todo campo do schema possui uma entrada (lista vazia sem regra)
    - Nomes repetidos compartilham uma única lista de dependências
    - Chaves são deduplicadas preservando a ordem da primeira ocorrência
    - O prefixo `ROOT_MARKER` é preservado literalmente
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from atlas_params.core.schema.types import FieldDescriptor

DependencyMap = Dict[str, List[str]]


def build_dependencies(fields: Sequence[FieldDescriptor]) -> DependencyMap:
    """Retorna o mapa `nome do campo → chaves referenciadas pela visibilidade`."""
    dependencies: DependencyMap = {}

    for f in fields:
        deps = dependencies.setdefault(f.name, [])
        if f.visibility is None:
            continue
        for key in f.visibility.referenced_keys():
            if key not in deps:
                deps.append(key)

    return dependencies
