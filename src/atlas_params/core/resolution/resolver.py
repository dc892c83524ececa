# src/atlas_params/core/resolution/resolver.py
"""
Resolvedor da árvore de parâmetros.

Este módulo é o centro do motor: dado um schema de campos e os valores
esparsos informados pelo usuário, produz a árvore de valores efetiva
segundo a política de resolução pedida pelo chamador.

Políticas controladas pelo chamador:
    - inject_defaults → campos ausentes recebem o default declarado
    - include_hidden  → campos invisíveis também são resolvidos
    - flatten_only    → apenas escalares (usado para o escopo sombra)

Regras aplicadas por campo, na ordem produzida por `resolve_order`:
    1. Nomes repetidos: somente a ocorrência visível contribui valor
    2. Presença: valor ausente é ignorado sem `inject_defaults` ou
       dentro de um `group` (defaults nunca são sintetizados por item)
    3. Visibilidade: sem `include_hidden`, campos invisíveis são ignorados;
       a visibilidade é avaliada contra o escopo sombra
    4. Escalares: valor informado ou default (boolean/number por presença
       explícita, demais por truthiness); sem defaults, apenas valores
       diferentes do default ou presentes dentro de um `group`
    5. `flatten_only` encerra aqui
    6. group: repetido repassa a lista; único resolve recursivamente
    7. named_group_set: cada grupo escolhido é resolvido contra seu sub-schema

Escopo sombra:
    Quando a passada corrente filtra defaults ou campos ocultos, uma
    passada interna com `inject_defaults=True, include_hidden=True,
    flatten_only=True` produz um escopo totalmente preenchido, usado apenas
    para decidir visibilidade. Assim a visibilidade nunca depende de um
    irmão ainda não atribuído na passada filtrada.

Invariantes:
    - Schemas e valores de entrada nunca são mutados
    - Cada chamada retorna estruturas novas (valores repassados são clonados)
    - Com `inject_defaults=True, include_hidden=True` a resolução é idempotente

Limites explícitos:
    - Não valida obrigatoriedade (ver `validation.validator`)
    - Não executa expressões nem acessa recursos externos
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Set

from atlas_params.core.schema.types import PRESENCE_KINDS, FieldDescriptor, FieldKind
from atlas_params.core.values.clone import clone_value
from atlas_params.core.values.paths import MISSING

from .dependencies import DependencyMap, build_dependencies
from .errors import UnknownGroupError
from .order import resolve_order
from .visibility import is_visible

logger = logging.getLogger(__name__)

ValueTree = Dict[str, Any]


def _duplicate_names(fields: Sequence[FieldDescriptor]) -> Set[str]:
    seen: Set[str] = set()
    duplicates: Set[str] = set()
    for f in fields:
        if f.name in seen:
            duplicates.add(f.name)
        seen.add(f.name)
    return duplicates


def _as_tree(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _scalar_value(f: FieldDescriptor, raw: Any, present: bool) -> Any:
    if f.kind in PRESENCE_KINDS:
        # false e 0 são valores válidos e não podem cair no default
        return raw if present else f.default
    return raw if present and raw else f.default


def _resolve_named_group_set(
    f: FieldDescriptor,
    raw: Any,
    *,
    inject_defaults: bool,
    include_hidden: bool,
    root: Mapping[str, Any],
) -> ValueTree:
    collection: ValueTree = {}

    for group_name, group_value in _as_tree(raw).items():
        group = f.find_group(group_name)
        if group is None:
            raise UnknownGroupError(f.name, group_name)

        if f.repeated:
            items = group_value if isinstance(group_value, (list, tuple)) else []
            collection[group_name] = [
                resolve_parameters(
                    group.fields,
                    _as_tree(item),
                    inject_defaults,
                    include_hidden,
                    root_values=root,
                    parent_kind=FieldKind.NAMED_GROUP_SET,
                )
                for item in items
            ]
            continue

        resolved = resolve_parameters(
            group.fields,
            _as_tree(group_value),
            inject_defaults,
            include_hidden,
            root_values=root,
            parent_kind=FieldKind.NAMED_GROUP_SET,
        )
        if resolved or inject_defaults:
            collection[group_name] = resolved

    return collection


def resolve_parameters(
    fields: Sequence[FieldDescriptor],
    values: Optional[Mapping[str, Any]],
    inject_defaults: bool,
    include_hidden: bool,
    flatten_only: bool = False,
    already_resolved: bool = False,
    root_values: Optional[Mapping[str, Any]] = None,
    parent_kind: Optional[FieldKind] = None,
    dependencies: Optional[DependencyMap] = None,
) -> ValueTree:
    """
    Resolve os valores efetivos de um nível do schema (e, recursivamente,
    de seus containers).

    Args:
        fields (Sequence[FieldDescriptor]): Campos do nível corrente, em ordem
            declarada (nomes podem se repetir).
        values (Optional[Mapping[str, Any]]): Valores informados para o nível.
        inject_defaults (bool): Se campos ausentes recebem o default.
        include_hidden (bool): Se campos invisíveis também são retornados.
        flatten_only (bool): Se apenas escalares são resolvidos.
        already_resolved (bool): Se `values` já está totalmente resolvido
            (dispensa a passada do escopo sombra).
        root_values (Optional[Mapping[str, Any]]): Escopo raiz para chaves
            com `ROOT_MARKER`; no nível superior é o próprio escopo sombra.
        parent_kind (Optional[FieldKind]): Tipo do container pai.
        dependencies (Optional[DependencyMap]): Mapa de dependências do nível,
            reaproveitado entre a passada sombra e a passada efetiva.

    Returns:
        Dict[str, Any]: Nova árvore de valores resolvida.

    Raises:
        UnresolvableDependencyError: Se as regras de visibilidade do nível
            não admitem ordem de resolução.
        UnknownGroupError: Se um `named_group_set` referencia grupo inexistente.
    """
    fields = tuple(fields)
    values = _as_tree(values)
    if dependencies is None:
        dependencies = build_dependencies(fields)

    duplicates = _duplicate_names(fields)
    resolved: ValueTree = {}

    display_scope: Mapping[str, Any] = resolved
    if not already_resolved and not (inject_defaults and include_hidden):
        logger.debug("Computing shadow scope for %d fields", len(fields))
        display_scope = resolve_parameters(
            fields,
            values,
            True,
            True,
            True,
            True,
            root_values,
            parent_kind,
            dependencies,
        )

    root = root_values if root_values is not None else display_scope

    for index in resolve_order(fields, dependencies):
        f = fields[index]
        raw = values.get(f.name, MISSING)
        present = raw is not MISSING

        if not present and (not inject_defaults or parent_kind is FieldKind.GROUP):
            continue

        if not include_hidden and not is_visible(display_scope, f, root):
            continue

        if f.name in duplicates and not is_visible(display_scope, f, root):
            continue

        if not f.is_container:
            if inject_defaults:
                resolved[f.name] = clone_value(_scalar_value(f, raw, present))
            elif present and (raw != f.default or parent_kind is FieldKind.GROUP):
                resolved[f.name] = clone_value(raw)
            continue

        if flatten_only:
            continue

        if f.kind is FieldKind.GROUP:
            if f.repeated:
                if present:
                    resolved[f.name] = clone_value(raw)
                elif inject_defaults:
                    resolved[f.name] = []
            elif present:
                resolved[f.name] = resolve_parameters(
                    f.children,
                    _as_tree(raw),
                    inject_defaults,
                    include_hidden,
                    root_values=root,
                    parent_kind=FieldKind.GROUP,
                )
            elif inject_defaults:
                resolved[f.name] = clone_value(f.default if f.default is not None else {})
            continue

        group_values = raw if present else clone_value(f.default)
        collection = _resolve_named_group_set(
            f,
            group_values,
            inject_defaults=inject_defaults,
            include_hidden=include_hidden,
            root=root,
        )
        if inject_defaults:
            resolved[f.name] = collection
        elif collection and collection != f.default:
            resolved[f.name] = collection

    return resolved
