# src/streamwire/core/config/__init__.py

"""
Camada de configuração do streamwire.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Resolução da política de validação usada na submissão

Invariantes:
    - A configuração final é um dicionário puro (dict)
    - Conflitos estruturais são tratados como erro

Limites explícitos:
    - Não valida topologias
    - Não é consultada pelo validador puro
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidPolicyValueError,
    UnsupportedConfigFormatError,
)
from .loader import load_config  # noqa: F401
from .merge import deep_merge  # noqa: F401
from .policy import (  # noqa: F401
    DEFAULT_VALIDATION_CONFIG,
    ValidationPolicy,
    resolve_validation_policy,
)
