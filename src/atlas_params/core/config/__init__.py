# src/atlas_params/core/config/__init__.py

"""
Camada de configuração do Atlas Params.

Este pacote carrega, mescla e interpreta a configuração que define a
política padrão de resolução e validação da fachada `ParameterEngine`.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Deep-merge determinístico
    - Conversão da configuração em `ResolutionPolicy`

Limites explícitos:
    - Não resolve parâmetros
    - Não carrega schemas de campos
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidPolicyError,
    UnsupportedConfigFormatError,
)
from .loader import load_config
from .merge import deep_merge
from .policy import DEFAULT_CONFIG, ResolutionPolicy

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidPolicyError",
    "ResolutionPolicy",
    "UnsupportedConfigFormatError",
    "deep_merge",
    "load_config",
]
