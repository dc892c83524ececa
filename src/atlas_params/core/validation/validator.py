# src/atlas_params/core/validation/validator.py
"""
Validador de issues de valores obrigatórios.

Este módulo percorre o schema na ordem declarada e reporta campos
obrigatórios e visíveis cujo valor está ausente segundo um predicado
estrito por tipo. A validação de um nível não depende da resolução dos
irmãos, apenas da visibilidade, por isso a ordem de dependências não é
necessária aqui.

Predicado de ausência (v1):
    - text         → string vazia ou valor ausente
    - multi_select → sequência vazia
    - date         → valor ausente
    - demais tipos → nunca reportados como ausentes

Decisões arquiteturais:
    - A obrigatoriedade vale apenas para o nível em que é declarada:
      filhos de um container só são verificados quando o container
      possui valor explícito no caminho corrente
    - Instâncias repetidas são verificadas com caminho qualificado por índice
    - A visibilidade usa o mesmo avaliador do resolvedor

Invariantes:
    - O validador nunca levanta exceção
    - Ausência de issues é sinalizada por relatório vazio (ou `None` no nível de node)
    - Os valores de entrada nunca são mutados

Limites explícitos:
    - Não resolve defaults
    - Não valida credenciais nem tipos de valores
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from atlas_params.core.node import Node
from atlas_params.core.resolution.visibility import is_visible_at_path
from atlas_params.core.schema.types import FieldDescriptor, FieldKind
from atlas_params.core.values.paths import MISSING, PathSegment, ValuePath, get_by_path, parse_path

from .issues import IssueTree


def is_value_missing(field: FieldDescriptor, value: Any) -> bool:
    """Predicado estrito de ausência por tipo de campo."""
    if field.kind is FieldKind.TEXT:
        return value is MISSING or value is None or value == ""
    if field.kind is FieldKind.MULTI_SELECT:
        return isinstance(value, (list, tuple)) and len(value) == 0
    if field.kind is FieldKind.DATE:
        return value is MISSING or value is None
    return False


def add_issue_if_missing(issues: IssueTree, field: FieldDescriptor, value: Any) -> None:
    if is_value_missing(field, value):
        issues.add_parameter_issue(field.name, f'Parameter "{field.display_name}" is required.')


def _child_checks(field: FieldDescriptor, values: Any, path: ValuePath) -> List[Tuple[ValuePath, FieldDescriptor]]:
    base = path + (field.name,)
    container = get_by_path(values, base)
    if container is MISSING:
        return []

    checks: List[Tuple[ValuePath, FieldDescriptor]] = []

    if field.kind is FieldKind.GROUP:
        if field.repeated:
            if isinstance(container, list):
                for i in range(len(container)):
                    checks.extend((base + (i,), child) for child in field.children)
        else:
            checks.extend((base, child) for child in field.children)
        return checks

    for group in field.groups:
        group_value = get_by_path(values, base + (group.name,))
        if group_value is MISSING:
            continue
        if field.repeated:
            if isinstance(group_value, list):
                for i in range(len(group_value)):
                    checks.extend((base + (group.name, i), child) for child in group.fields)
        else:
            checks.extend((base + (group.name,), child) for child in group.fields)
    return checks


def get_parameter_issues(
    field: FieldDescriptor,
    values: Any,
    path: Union[str, Iterable[PathSegment], None] = (),
) -> IssueTree:
    """
    Retorna as issues de um campo (e de seus filhos) para os valores dados.

    Args:
        field: Campo a validar.
        values: Árvore de valores completa (a mesma em toda a recursão).
        path: Caminho do nível que contém o campo.

    Returns:
        IssueTree: Relatório (possivelmente vazio) de issues.
    """
    path = parse_path(path)
    issues = IssueTree()

    if field.required and is_visible_at_path(values, field, path):
        value = get_by_path(values, path + (field.name,))
        if field.repeated:
            if isinstance(value, list):
                for single in value:
                    add_issue_if_missing(issues, field, single)
        else:
            add_issue_if_missing(issues, field, value)

    if not field.is_container:
        return issues

    for child_path, child in _child_checks(field, values, path):
        issues = issues.merge(get_parameter_issues(child, values, child_path))

    return issues


def validate_parameters(
    fields: Sequence[FieldDescriptor],
    values: Optional[Mapping[str, Any]],
    path: Union[str, Iterable[PathSegment], None] = (),
) -> IssueTree:
    """Valida todos os campos de um nível e retorna o relatório combinado."""
    values = values if values is not None else {}
    issues = IssueTree()
    for f in fields:
        issues = issues.merge(get_parameter_issues(f, values, path))
    return issues


def get_node_parameters_issues(fields: Sequence[FieldDescriptor], node: Node) -> Optional[IssueTree]:
    """Issues de parâmetros de um node; `None` para nodes desabilitados ou sem issues."""
    if node.disabled:
        return None

    issues = validate_parameters(fields, node.parameters)
    if issues.is_empty():
        return None
    return issues
