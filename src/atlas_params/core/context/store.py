# src/atlas_params/core/context/store.py
"""
ExecutionContextStore: store de contexto chaveado por execução.

Este módulo define o store de buckets mutáveis usado para bookkeeping
durante uma execução: um bucket para o fluxo inteiro (`"flow"`) e um
bucket por node (`"node:<nome>"`). É um colaborador externo do motor de
resolução; o core nunca lê nem escreve nesses buckets.

Princípios fundamentais:
- Isolamento por execução (cada run possui seu próprio store)
- Buckets são criados preguiçosamente no primeiro acesso por chave
- Buckets vivem durante uma execução e nunca são removidos pelo core
- Criações são registradas como eventos estruturados do run
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

FLOW_CONTEXT = "flow"
NODE_CONTEXT = "node"


class ContextTypeError(ValueError):
    """Tipo de contexto desconhecido ou node ausente para contexto `node`."""


def context_key(kind: str, node: Optional[str] = None) -> str:
    """Retorna a chave interna do bucket (`flow` ou `node:<nome>`)."""
    if kind == FLOW_CONTEXT:
        return FLOW_CONTEXT
    if kind == NODE_CONTEXT:
        if node is None or not str(node).strip():
            raise ContextTypeError('Context type "node" requires the node name to be set')
        return f"{NODE_CONTEXT}:{node}"
    raise ContextTypeError(f'The context type "{kind}" is not known. Only "flow" and "node" are supported')


@dataclass
class ExecutionContextStore:
    """
    Store de contexto de uma execução.

    Campos canônicos:
    - run_id: identificador único da execução
    - created_at: timestamp UTC de criação do store
    - events: log estruturado de eventos
    - _buckets: buckets mutáveis por chave (ordem de criação preservada)
    """

    run_id: str
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    events: List[Dict[str, Any]] = field(default_factory=list)

    _buckets: Dict[str, Dict[str, Any]] = field(default_factory=dict, repr=False)

    # -----------------------------
    # Buckets
    # -----------------------------
    def get(self, kind: str, node: Optional[str] = None) -> Dict[str, Any]:
        """Retorna (criando se necessário) o bucket mutável do contexto pedido.

        Importante:
        - O bucket retornado é a própria referência armazenada, não uma cópia.
        """
        key = context_key(kind, node)
        if key not in self._buckets:
            self._buckets[key] = {}
            self.log(scope=key, level="DEBUG", message="context bucket created")
        return self._buckets[key]

    def has(self, kind: str, node: Optional[str] = None) -> bool:
        return context_key(kind, node) in self._buckets

    def keys(self) -> List[str]:
        return list(self._buckets)

    # -----------------------------
    # Logging
    # -----------------------------
    def log(self, *, scope: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "scope": scope,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)
