"""Erros canônicos do domínio de Schema de campos (Atlas Params).

O schema de campos é a superfície declarativa usada por autores de tipos.
Falhas de carregamento/validação devem produzir erros explícitos e estáveis.
"""


class SchemaError(Exception):
    """Erro base do domínio de schema."""


class SchemaPathMissingError(SchemaError):
    """Caminho do arquivo de schema não informado."""


class SchemaFileNotFoundError(SchemaError):
    """Arquivo de schema não existe no caminho informado."""


class UnsupportedSchemaFormatError(SchemaError):
    """Formato de schema não suportado (v1: YAML/JSON)."""


class SchemaParseError(SchemaError):
    """Falha ao parsear YAML/JSON."""


class SchemaValidationError(SchemaError):
    """Schema não é estruturalmente válido segundo o modelo canônico de campos."""


class RegistryError(Exception):
    """Erro base do registry de tipos de campo."""


class DuplicateFieldTypeError(RegistryError, ValueError):
    """Tipo registrado duas vezes com o mesmo nome."""


class UnknownFieldTypeError(RegistryError, KeyError):
    """Nome de tipo não registrado."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "unknown field type"
