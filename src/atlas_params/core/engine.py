# src/atlas_params/core/engine.py
"""
ParameterEngine: fachada de resolução e validação por node.

Integra o registry de tipos, a política de resolução e as funções puras
do core para responder, por node:
    - quais são os parâmetros efetivos (`resolve_node`)
    - quais issues de validação existem (`node_issues`)
    - em que ordem os campos de um tipo são resolvidos (`resolution_order`)

A fachada não mantém estado mutável além das referências recebidas na
construção; múltiplas chamadas podem ocorrer em threads independentes.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from atlas_params.core.config.policy import ResolutionPolicy
from atlas_params.core.node import Node
from atlas_params.core.resolution.order import resolve_order
from atlas_params.core.resolution.resolver import resolve_parameters
from atlas_params.core.schema.registry import FieldTypeRegistry
from atlas_params.core.validation.issues import IssueTree
from atlas_params.core.validation.validator import validate_parameters

logger = logging.getLogger(__name__)


class ParameterEngine:
    """Fachada canônica do Atlas Params (registry + política + core)."""

    def __init__(self, *, registry: FieldTypeRegistry, policy: Optional[ResolutionPolicy] = None):
        self.registry: FieldTypeRegistry = registry
        self.policy: ResolutionPolicy = policy or ResolutionPolicy()

    def resolve_node(
        self,
        node: Node,
        *,
        inject_defaults: Optional[bool] = None,
        include_hidden: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Resolve os parâmetros do node; flags omitidas usam a política.

        Raises:
            UnknownFieldTypeError: Se o tipo do node não estiver registrado.
            ParameterResolutionError: Se o schema do tipo for inválido para resolução.
        """
        description = self.registry.get(node.type)
        inject = self.policy.inject_defaults if inject_defaults is None else inject_defaults
        hidden = self.policy.include_hidden if include_hidden is None else include_hidden

        logger.debug(
            "Resolving node %r (type=%r, inject_defaults=%s, include_hidden=%s)",
            node.name, node.type, inject, hidden,
        )
        return resolve_parameters(description.fields, node.parameters, inject, hidden)

    def node_issues(self, node: Node) -> Optional[IssueTree]:
        """Issues do node; `None` quando não há issues (ou node desabilitado ignorado)."""
        if node.disabled and self.policy.skip_disabled_nodes:
            return None

        if not self.registry.has(node.type):
            logger.debug("Node %r has unknown type %r", node.name, node.type)
            return IssueTree(type_unknown=True)

        issues = validate_parameters(self.registry.get(node.type).fields, node.parameters)
        return None if issues.is_empty() else issues

    def resolution_order(self, type_name: str) -> List[str]:
        """Nomes dos campos de nível superior do tipo, na ordem de resolução."""
        fields = self.registry.get(type_name).fields
        return [fields[i].name for i in resolve_order(fields)]
