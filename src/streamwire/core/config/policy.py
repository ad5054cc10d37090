# src/streamwire/core/config/policy.py
"""
Política de validação aplicada na submissão de topologias.

A política decide o que o gate de submissão faz com um ValidationResult:
rejeitar, avisar ou ignorar. O validador em si nunca consulta a política.

Seção de configuração (v1):

    validation:
      reject_invalid_inputs: true
      warn_unconsumed_outputs: true
      reject_skeleton: false

Decisões arquiteturais:
    - Chaves ausentes assumem os defaults de `DEFAULT_VALIDATION_CONFIG`
    - Chaves desconhecidas são ignoradas
    - Valores não booleanos são erro explícito (sem coerção)
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidPolicyValueError
from .merge import deep_merge

DEFAULT_VALIDATION_CONFIG: Dict[str, bool] = {
    "reject_invalid_inputs": True,
    "warn_unconsumed_outputs": True,
    "reject_skeleton": False,
}


@dataclass(frozen=True)
class ValidationPolicy:
    """
    Política efetiva de submissão.

    Campos:
        - reject_invalid_inputs: entradas sem produtor bloqueiam a submissão
        - warn_unconsumed_outputs: saídas sem consumidor geram warnings
        - reject_skeleton: topologias esqueleto bloqueiam a submissão
    """
    reject_invalid_inputs: bool = True
    warn_unconsumed_outputs: bool = True
    reject_skeleton: bool = False

    def to_dict(self) -> Dict[str, bool]:
        return asdict(self)


def resolve_validation_policy(config: Optional[Mapping[str, Any]] = None) -> ValidationPolicy:
    """
    Resolve a `ValidationPolicy` a partir da configuração efetiva.

    Args:
        config: Configuração resolvida (pode ser None ou não conter `validation`).

    Returns:
        ValidationPolicy: Política imutável.

    Raises:
        InvalidPolicyValueError: Se `validation` não for um mapa ou se alguma
            chave conhecida tiver valor não booleano.
        ConfigTypeConflictError: Propagado do deep-merge.
    """
    section = (config or {}).get("validation") or {}
    if not isinstance(section, dict):
        raise InvalidPolicyValueError(
            f"validation deve ser dict, recebido: {type(section).__name__}"
        )

    known = {k: v for k, v in section.items() if k in DEFAULT_VALIDATION_CONFIG}
    for key, value in known.items():
        if not isinstance(value, bool):
            raise InvalidPolicyValueError(
                f"validation.{key} deve ser bool, recebido: {type(value).__name__}"
            )

    effective = deep_merge(DEFAULT_VALIDATION_CONFIG, known)
    return ValidationPolicy(**effective)
