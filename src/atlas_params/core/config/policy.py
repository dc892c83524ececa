# src/atlas_params/core/config/policy.py
"""
Política de resolução derivada da configuração.

Seções reconhecidas:

    resolution:
      inject_defaults: true   # campos ausentes recebem o default
      include_hidden: false   # campos invisíveis são omitidos
    validation:
      skip_disabled_nodes: true

Chaves ausentes usam `DEFAULT_CONFIG`. Valores precisam ser booleanos;
chaves desconhecidas nessas seções são rejeitadas para evitar erros de
digitação silenciosos.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidPolicyError
from .merge import deep_merge

DEFAULT_CONFIG: Dict[str, Any] = {
    "resolution": {
        "inject_defaults": True,
        "include_hidden": False,
    },
    "validation": {
        "skip_disabled_nodes": True,
    },
}


def _section(config: Mapping[str, Any], name: str) -> Dict[str, bool]:
    section = config.get(name)
    if not isinstance(section, dict):
        raise InvalidPolicyError(f"'{name}' must be a mapping")

    allowed = set(DEFAULT_CONFIG[name])
    unknown = set(section) - allowed
    if unknown:
        raise InvalidPolicyError(f"Unknown keys in '{name}': {sorted(unknown)}")

    for key, value in section.items():
        if not isinstance(value, bool):
            raise InvalidPolicyError(f"'{name}.{key}' must be boolean, got: {type(value).__name__}")
    return section


@dataclass(frozen=True)
class ResolutionPolicy:
    """Política efetiva usada pela fachada quando o chamador omite flags."""

    inject_defaults: bool = True
    include_hidden: bool = False
    skip_disabled_nodes: bool = True

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, Any]] = None) -> "ResolutionPolicy":
        effective = deep_merge(DEFAULT_CONFIG, dict(config or {}))
        resolution = _section(effective, "resolution")
        validation = _section(effective, "validation")
        return cls(
            inject_defaults=resolution["inject_defaults"],
            include_hidden=resolution["include_hidden"],
            skip_disabled_nodes=validation["skip_disabled_nodes"],
        )

    def to_config(self) -> Dict[str, Any]:
        return {
            "resolution": {
                "inject_defaults": self.inject_defaults,
                "include_hidden": self.include_hidden,
            },
            "validation": {
                "skip_disabled_nodes": self.skip_disabled_nodes,
            },
        }
