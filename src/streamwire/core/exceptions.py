"""
streamwire - Canonical Exceptions (v1)

Exceções tipadas levantadas pelo gate de submissão quando a política
de validação rejeita uma topologia. O validador puro nunca as levanta.

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Mapeamento para TopologyErrorPayload via `core.errors.exception_to_error`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TopologyException(Exception):
    """Base class para exceções de submissão de topologia.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    decision_required: bool = False

    def __str__(self) -> str:  # pragma: no cover
        return self.message


@dataclass(frozen=True)
class InvalidTopologyError(TopologyException):
    """Há entradas declaradas sem stream de saída correspondente."""


@dataclass(frozen=True)
class SkeletonTopologyError(TopologyException):
    """Topologia sem lógica executável submetida com reject_skeleton ativo."""
