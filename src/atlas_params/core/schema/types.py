# src/atlas_params/core/schema/types.py
"""
Tipos canônicos do schema de campos do Atlas Params.

Este módulo define as estruturas imutáveis que descrevem um conjunto de
parâmetros configuráveis: tipo de cada campo, valor default, obrigatoriedade,
regras de visibilidade, multiplicidade e sub-schemas aninhados.

Componentes principais:
    - FieldKind       → enum de tipos de campo (escalares e containers)
    - VisibilityRule  → condição `show` / `hide` sobre valores de outros campos
    - FieldDescriptor → nó do schema que declara um valor configurável
    - NamedGroup      → sub-schema nomeado de um `named_group_set`

Princípios fundamentais:
    - Schemas são imutáveis e nunca são alterados pelo motor
    - Nomes de campos podem se repetir no mesmo nível (cada ocorrência
      é avaliada de forma independente)
    - O tipo do campo é a única informação usada para ramificar a resolução

Invariantes:
    - `group` declara `children`; `named_group_set` declara `groups`
    - Uma VisibilityRule possui exatamente um modo (`show` ou `hide`)
    - Chaves com prefixo `ROOT_MARKER` referenciam a raiz do documento

Limites explícitos:
    - Não resolve valores
    - Não valida documentos externos (ver `schema.validation`)
    - Não codifica semântica de negócio de tipos individuais
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Mapping, Optional, Tuple

# Prefixo de chaves de visibilidade resolvidas contra a raiz do documento.
ROOT_MARKER = "/"


class FieldKind(str, Enum):
    """
    Tipos de campo reconhecidos pelo motor.

    Os valores são strings para facilitar declaração em YAML/JSON e
    inspeção em relatórios.

    Escalares:
        - TEXT, NUMBER, BOOLEAN, DATE, OPTIONS, MULTI_SELECT, JSON,
          COLOR, HIDDEN, NOTICE

    Containers:
        - GROUP: sub-schema anônimo, único ou repetido
        - NAMED_GROUP_SET: sub-schemas selecionados por nome de grupo

    Decisões arquiteturais:
        - Apenas a distinção escalar/container e os tipos TEXT,
          NUMBER, BOOLEAN, DATE e MULTI_SELECT alteram o comportamento
          do motor; os demais são preservados por fidelidade ao schema
    """

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    OPTIONS = "options"
    MULTI_SELECT = "multi_select"
    JSON = "json"
    COLOR = "color"
    HIDDEN = "hidden"
    NOTICE = "notice"
    GROUP = "group"
    NAMED_GROUP_SET = "named_group_set"

    @property
    def is_container(self) -> bool:
        return self in CONTAINER_KINDS


CONTAINER_KINDS = frozenset({FieldKind.GROUP, FieldKind.NAMED_GROUP_SET})

# Tipos cuja presença explícita (e não truthiness) decide o override do default.
PRESENCE_KINDS = frozenset({FieldKind.BOOLEAN, FieldKind.NUMBER})


def is_root_key(key: str) -> bool:
    return key.startswith(ROOT_MARKER)


def strip_root_marker(key: str) -> str:
    return key[len(ROOT_MARKER):] if is_root_key(key) else key


@dataclass(frozen=True)
class VisibilityRule:
    """
    Regra de visibilidade de um campo.

    Exatamente um dos modos deve estar presente:
        - show: todas as chaves devem conter um valor permitido
        - hide: qualquer chave contendo um valor supressor oculta o campo

    Cada modo é um mapeamento `chave → tupla de valores`. Chaves com
    prefixo `ROOT_MARKER` são lidas da raiz do documento.
    """

    show: Optional[Mapping[str, Tuple[Any, ...]]] = None
    hide: Optional[Mapping[str, Tuple[Any, ...]]] = None

    def __post_init__(self) -> None:
        if (self.show is None) == (self.hide is None):
            raise ValueError("VisibilityRule requires exactly one of 'show' or 'hide'")
        conditions = self.show if self.show is not None else self.hide
        frozen = {str(key): tuple(values) for key, values in conditions.items()}
        object.__setattr__(self, "show" if self.show is not None else "hide", frozen)

    @property
    def mode(self) -> str:
        return "show" if self.show is not None else "hide"

    @property
    def conditions(self) -> Mapping[str, Tuple[Any, ...]]:
        return self.show if self.show is not None else self.hide  # type: ignore[return-value]

    def referenced_keys(self) -> Iterator[str]:
        yield from self.conditions.keys()


@dataclass(frozen=True)
class FieldDescriptor:
    """
    Nó do schema que declara um valor configurável.

    Campos:
    - name: nome do campo (pode se repetir entre irmãos)
    - kind: tipo do campo (FieldKind)
    - default: valor default compatível com o tipo
    - required: obrigatoriedade (verificada pelo validador)
    - visibility: regra de visibilidade opcional
    - repeated: multiplicidade (False = instância única, True = lista)
    - children: sub-schema de um `group`
    - groups: sub-schemas nomeados de um `named_group_set`
    - display_name: rótulo humano usado em mensagens de issue
    - options: escolhas permitidas (informativo)
    """

    name: str
    kind: FieldKind = FieldKind.TEXT
    default: Any = None
    required: bool = False
    visibility: Optional[VisibilityRule] = None
    repeated: bool = False
    children: Tuple["FieldDescriptor", ...] = ()
    groups: Tuple["NamedGroup", ...] = ()
    display_name: str = ""
    options: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", FieldKind(self.kind))
        object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(self, "groups", tuple(self.groups))
        object.__setattr__(self, "options", tuple(self.options))
        if not self.display_name:
            object.__setattr__(self, "display_name", self.name)

    @property
    def is_container(self) -> bool:
        return self.kind.is_container

    def find_group(self, group_name: str) -> Optional["NamedGroup"]:
        for group in self.groups:
            if group.name == group_name:
                return group
        return None


@dataclass(frozen=True)
class NamedGroup:
    """Sub-schema nomeado de um campo `named_group_set`."""

    name: str
    fields: Tuple[FieldDescriptor, ...] = field(default_factory=tuple)
    display_name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))
        if not self.display_name:
            object.__setattr__(self, "display_name", self.name)
