# src/atlas_params/core/values/paths.py
"""
Caminhos explícitos para navegação em árvores de valores.

Este módulo define o `ValuePath`, a representação canônica de um caminho
dentro de uma árvore de valores de parâmetros: uma sequência ordenada de
segmentos, onde cada segmento é uma chave (`str`) de mapeamento ou um
índice (`int`) de sequência.

Responsabilidades do módulo:
    - Converter caminhos textuais (`"a.b[0].c"`) em caminhos tipados
    - Formatar caminhos tipados de volta para texto
    - Navegar árvores de valores retornando o valor ou `MISSING`

Decisões arquiteturais:
    - Caminhos são tuplas imutáveis (`Tuple[Union[str, int], ...]`)
    - A ausência de valor é sinalizada pelo sentinela `MISSING`,
      distinto de `None` (que é um valor legítimo)
    - A navegação nunca levanta exceção

Invariantes:
    - `parse_path(format_path(p)) == p` para caminhos com chaves simples
    - O caminho vazio referencia a própria árvore

Limites explícitos:
    - Não cria nem altera nós da árvore
    - Não interpreta semântica de campos
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping, Tuple, Union

PathSegment = Union[str, int]
ValuePath = Tuple[PathSegment, ...]

_INDEX_RE = re.compile(r"\[(\d+)\]")


class _Missing:
    """Sentinela de valor ausente (distinto de `None`)."""

    _instance = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def parse_path(path: Union[str, Iterable[PathSegment], None]) -> ValuePath:
    """
    Converte um caminho textual ou iterável em `ValuePath`.

    Formatos aceitos:
        - ""                → ()
        - "a.b.c"           → ("a", "b", "c")
        - "filters[0].value" → ("filters", 0, "value")
        - ("a", 0)          → ("a", 0) (já tipado)

    Raises:
        ValueError: Se o texto contiver segmentos vazios ou índices malformados.
    """
    if path is None:
        return ()
    if not isinstance(path, str):
        return tuple(path)
    if path == "":
        return ()

    segments = []
    for raw in path.split("."):
        head, _, tail = raw.partition("[")
        if not head and not tail:
            raise ValueError(f"Empty path segment in {path!r}")
        if head:
            segments.append(head)
        if tail:
            brackets = "[" + tail
            indexes = _INDEX_RE.findall(brackets)
            if "".join(f"[{i}]" for i in indexes) != brackets:
                raise ValueError(f"Malformed index in path segment {raw!r}")
            segments.extend(int(i) for i in indexes)
    return tuple(segments)


def format_path(path: ValuePath) -> str:
    """Formata um `ValuePath` no formato textual `a.b[0].c`."""
    out = ""
    for segment in path:
        if isinstance(segment, int):
            out += f"[{segment}]"
        elif out:
            out += "." + segment
        else:
            out = segment
    return out


def join_path(path: ValuePath, *segments: PathSegment) -> ValuePath:
    return tuple(path) + tuple(segments)


def get_by_path(tree: Any, path: Union[str, Iterable[PathSegment], None], default: Any = MISSING) -> Any:
    """
    Navega a árvore de valores e retorna o valor no caminho informado.

    Segmentos `str` exigem um mapeamento contendo a chave; segmentos `int`
    exigem uma lista/tupla com o índice válido. Qualquer outro caso
    interrompe a navegação e retorna `default`.

    Args:
        tree: Árvore de valores (mapeamento, sequência ou escalar).
        path: Caminho tipado ou textual.
        default: Valor retornado quando o caminho não existe.

    Returns:
        O valor encontrado ou `default` (por padrão `MISSING`).
    """
    current = tree
    for segment in parse_path(path):
        if isinstance(segment, int):
            if not isinstance(current, (list, tuple)) or not -len(current) <= segment < len(current):
                return default
            current = current[segment]
        else:
            if not isinstance(current, Mapping) or segment not in current:
                return default
            current = current[segment]
    return current


def has_path(tree: Any, path: Union[str, Iterable[PathSegment], None]) -> bool:
    return get_by_path(tree, path) is not MISSING
