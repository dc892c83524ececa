# src/atlas_params/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Atlas Params.

A configuração define a política padrão de resolução e validação usada
pela fachada `ParameterEngine`. As exceções aqui definidas representam
violações estruturais explícitas da configuração, nunca erros de schema
ou de resolução.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende da camada de resolução
"""


class ConfigError(Exception):
    """
    Exceção base para erros de configuração do Atlas Params.

    Permite captura genérica de falhas de carregamento, merge e
    interpretação da política de resolução.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de defaults não existe.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório quando informado ao loader
        - Nenhum default é inferido a partir de um arquivo ausente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando a extensão do arquivo não é suportada.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """Conteúdo raiz da configuração não é um dicionário."""


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando o deep-merge encontra tipos incompatíveis.

    Exemplo de conflito:
        - base:     {"resolution": {"inject_defaults": true}}
        - override: {"resolution": "all"}
    """


class InvalidPolicyError(ConfigError):
    """Seções `resolution` / `validation` contêm valores não booleanos ou chaves desconhecidas."""
