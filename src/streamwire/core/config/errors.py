# src/streamwire/core/config/errors.py
"""
Exceções canônicas da camada de configuração do streamwire.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção aqui representa falha de fiação da topologia

Limites explícitos:
    - Não realiza fallback ou recovery
"""


class ConfigError(Exception):
    """
    Exceção base para erros de configuração.

    Permite captura genérica de falhas de carregamento, merge e resolução
    de política, separadas das falhas de validação de topologia.
    """


class DefaultsNotFoundError(ConfigError):
    """
    O arquivo de configuração base (defaults) não foi encontrado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório quando informado
        - Não se cria defaults automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    A extensão do arquivo de configuração não é suportada.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz da configuração não é um dicionário."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos na mesma chave durante o deep-merge.

    Exemplo:
        - base:     {"validation": {"reject_skeleton": false}}
        - override: {"validation": "strict"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidPolicyValueError(ConfigError):
    """Uma chave da política de validação recebeu valor de tipo inválido."""
