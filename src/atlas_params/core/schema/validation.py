"""
Validação e materialização de schemas de campos declarados como documentos.

Autores de tipos podem declarar schemas em YAML/JSON (ou mapeamentos
Python). Este módulo valida a estrutura desses documentos e os converte
nas estruturas imutáveis de `schema.types`.

Formato de um campo:
    name: str (obrigatório)
    kind: str (um dos valores de FieldKind; default "text")
    displayName: str
    default: Any
    required: bool
    repeated: bool
    options: list
    visibility: {show: {chave: [valores]}} | {hide: {chave: [valores]}}
    children: [campo, ...]               (kind: group)
    groups: [{name, displayName, fields: [campo, ...]}]   (kind: named_group_set)

Esta implementação evita dependências externas (ex.: Pydantic) para manter
o core leve.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

from .errors import SchemaValidationError
from .types import FieldDescriptor, FieldKind, NamedGroup, VisibilityRule

_ALLOWED_KINDS = {k.value for k in FieldKind}
_ALLOWED_FIELD_KEYS = {
    "name",
    "kind",
    "displayName",
    "default",
    "required",
    "repeated",
    "options",
    "visibility",
    "children",
    "groups",
}


def _is_non_empty_str(x: Any) -> bool:
    return isinstance(x, str) and bool(x.strip())


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise SchemaValidationError(msg)


def _build_visibility(data: Any, where: str) -> VisibilityRule:
    _expect(isinstance(data, dict), f"{where}.visibility must be a mapping")
    modes = [m for m in ("show", "hide") if m in data]
    _expect(len(modes) == 1, f"{where}.visibility must declare exactly one of 'show' or 'hide'")
    _expect(set(data) == set(modes), f"{where}.visibility has unknown keys: {sorted(set(data) - set(modes))}")

    mode = modes[0]
    conditions = data[mode]
    _expect(isinstance(conditions, dict) and conditions, f"{where}.visibility.{mode} must be a non-empty mapping")

    normalized: Dict[str, Tuple[Any, ...]] = {}
    for key, values in conditions.items():
        _expect(_is_non_empty_str(key), f"{where}.visibility.{mode} keys must be non-empty strings")
        _expect(isinstance(values, list), f"{where}.visibility.{mode}.{key} must be a list")
        normalized[key] = tuple(values)

    return VisibilityRule(**{mode: normalized})


def _build_field(data: Any, where: str) -> FieldDescriptor:
    _expect(isinstance(data, dict), f"{where} must be a mapping")
    unknown = set(data) - _ALLOWED_FIELD_KEYS
    _expect(not unknown, f"{where} has unknown keys: {sorted(unknown)}")

    name = data.get("name")
    _expect(_is_non_empty_str(name), f"{where}.name is required")
    where = f"{where}({name})"

    kind = data.get("kind", FieldKind.TEXT.value)
    _expect(kind in _ALLOWED_KINDS, f"{where}.kind must be one of {sorted(_ALLOWED_KINDS)}")
    kind = FieldKind(kind)

    required = data.get("required", False)
    repeated = data.get("repeated", False)
    _expect(isinstance(required, bool), f"{where}.required must be boolean")
    _expect(isinstance(repeated, bool), f"{where}.repeated must be boolean")

    display_name = data.get("displayName", "")
    _expect(isinstance(display_name, str), f"{where}.displayName must be a string")

    options = data.get("options", [])
    _expect(isinstance(options, list), f"{where}.options must be a list")

    visibility = None
    if data.get("visibility") is not None:
        visibility = _build_visibility(data["visibility"], where)

    children: Tuple[FieldDescriptor, ...] = ()
    groups: Tuple[NamedGroup, ...] = ()

    if kind is FieldKind.GROUP:
        _expect("groups" not in data, f"{where}: 'groups' is only valid for named_group_set")
        children = build_field_schema(data.get("children", []), where=f"{where}.children")
    elif kind is FieldKind.NAMED_GROUP_SET:
        _expect("children" not in data, f"{where}: 'children' is only valid for group")
        groups = _build_groups(data.get("groups"), where)
    else:
        _expect(
            "children" not in data and "groups" not in data,
            f"{where}: scalar kind '{kind.value}' cannot declare children or groups",
        )

    default = data.get("default")
    if kind is FieldKind.GROUP and repeated and default is None:
        default = []
    elif kind is FieldKind.GROUP and default is None:
        default = {}
    elif kind is FieldKind.NAMED_GROUP_SET:
        if default is None:
            default = {}
        _expect(isinstance(default, dict), f"{where}.default must be a mapping for named_group_set")

    return FieldDescriptor(
        name=name,
        kind=kind,
        default=default,
        required=required,
        visibility=visibility,
        repeated=repeated,
        children=children,
        groups=groups,
        display_name=display_name,
        options=tuple(options),
    )


def _build_groups(data: Any, where: str) -> Tuple[NamedGroup, ...]:
    _expect(isinstance(data, list) and data, f"{where}.groups must be a non-empty list")

    seen = set()
    groups: List[NamedGroup] = []
    for i, g in enumerate(data):
        _expect(isinstance(g, dict), f"{where}.groups[{i}] must be a mapping")
        gname = g.get("name")
        _expect(_is_non_empty_str(gname), f"{where}.groups[{i}].name is required")
        _expect(gname not in seen, f"{where}: duplicate group name: {gname}")
        seen.add(gname)

        display_name = g.get("displayName", "")
        _expect(isinstance(display_name, str), f"{where}.groups[{i}].displayName must be a string")

        fields = build_field_schema(g.get("fields", []), where=f"{where}.groups[{i}]({gname}).fields")
        groups.append(NamedGroup(name=gname, fields=fields, display_name=display_name))
    return tuple(groups)


def build_field_schema(data: Any, *, where: str = "fields") -> Tuple[FieldDescriptor, ...]:
    """
    Valida e materializa uma sequência ordenada de campos.

    Nomes repetidos no mesmo nível são aceitos: cada ocorrência é
    preservada na ordem declarada.

    Raises:
        SchemaValidationError: Se qualquer campo violar o formato canônico.
    """
    _expect(isinstance(data, list), f"{where} must be a list")
    return tuple(_build_field(f, f"{where}[{i}]") for i, f in enumerate(data))


def build_type_schema(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Valida o documento de um tipo: `{name, displayName?, fields: [...]}`.

    Returns:
        Dict com `name`, `display_name` e `fields` materializados.
    """
    _expect(isinstance(data, dict), "type schema must be a mapping/dict")
    name = data.get("name")
    _expect(_is_non_empty_str(name), "type schema name is required")
    display_name = data.get("displayName", name)
    _expect(isinstance(display_name, str), "type schema displayName must be a string")
    return {
        "name": name,
        "display_name": display_name,
        "fields": build_field_schema(data.get("fields"), where=f"{name}.fields"),
    }
