"""
streamwire - Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do streamwire: um payload
serializável, um catálogo de códigos estáveis e helpers de fábrica.

Erros devem ser:
- explícitos
- serializáveis
- acionáveis (com `hint` indicando onde corrigir)
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from streamwire.core.config.errors import ConfigError
from streamwire.core.exceptions import TopologyException
from streamwire.core.topology.errors import TopologyDescriptionError
from streamwire.core.topology.graph import ComponentNotFoundError


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TopologyErrorPayload:
    """
    Payload canônico de erro do streamwire.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida a quem monta a topologia
    - decision_required: a submissão está bloqueada aguardando decisão humana
    """
    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    decision_required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Fiação
TOPOLOGY_INVALID_INPUTS = "TOPOLOGY_INVALID_INPUTS"
TOPOLOGY_SKELETON_SUBMISSION = "TOPOLOGY_SKELETON_SUBMISSION"

# Estrutura / descrição
TOPOLOGY_COMPONENT_NOT_FOUND = "TOPOLOGY_COMPONENT_NOT_FOUND"
TOPOLOGY_DESCRIPTION_INVALID = "TOPOLOGY_DESCRIPTION_INVALID"

# Submissão
SUBMISSION_CONFIGURATION_ERROR = "SUBMISSION_CONFIGURATION_ERROR"
SUBMISSION_UNEXPECTED_ERROR = "SUBMISSION_UNEXPECTED_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def invalid_topology_inputs(
    *,
    invalid_inputs: List[Dict[str, str]],
    topology_hash: Optional[str] = None,
    hint: str = "Declare a stream de saída no componente upstream ou corrija a entrada do consumidor.",
) -> TopologyErrorPayload:
    return TopologyErrorPayload(
        type=TOPOLOGY_INVALID_INPUTS,
        message="Entradas declaradas sem stream de saída correspondente",
        details={
            "invalid_inputs": invalid_inputs,
            "topology_hash": topology_hash,
        },
        hint=hint,
        decision_required=False,
    )


def skeleton_submission(
    *,
    skeleton_components: List[str],
    topology_hash: Optional[str] = None,
    hint: str = "Anexe a lógica executável aos componentes ou desabilite validation.reject_skeleton.",
) -> TopologyErrorPayload:
    return TopologyErrorPayload(
        type=TOPOLOGY_SKELETON_SUBMISSION,
        message="Topologia esqueleto não pode ser submetida",
        details={
            "skeleton_components": skeleton_components,
            "topology_hash": topology_hash,
        },
        hint=hint,
        decision_required=False,
    )


def component_not_found(
    *,
    component_id: str,
    hint: str = "Verifique o id do componente consultado na descrição da topologia.",
) -> TopologyErrorPayload:
    return TopologyErrorPayload(
        type=TOPOLOGY_COMPONENT_NOT_FOUND,
        message="Componente não encontrado na topologia",
        details={"component_id": component_id},
        hint=hint,
        decision_required=False,
    )


def exception_to_error(exc: Exception) -> TopologyErrorPayload:
    """Converte exceções em TopologyErrorPayload (serializável, acionável).

    Regras:
    - TopologyException: já vem com message/details/hint/decision_required;
      o nome da classe é usado como código estável.
    - ComponentNotFoundError / TopologyDescriptionError: códigos do catálogo.
    - ConfigError e demais: encapsulados sem expor stack trace.
    """
    if isinstance(exc, TopologyException):
        return TopologyErrorPayload(
            type=exc.__class__.__name__,
            message=str(exc) or "Topologia inválida",
            details=dict(exc.details or {}),
            hint=exc.hint,
            decision_required=bool(exc.decision_required),
        )

    if isinstance(exc, ComponentNotFoundError):
        return component_not_found(component_id=exc.component_id)

    if isinstance(exc, TopologyDescriptionError):
        return TopologyErrorPayload(
            type=TOPOLOGY_DESCRIPTION_INVALID,
            message=str(exc) or "Descrição de topologia inválida",
            details={"exception_class": exc.__class__.__name__},
            hint="Revise o arquivo de descrição da topologia.",
        )

    if isinstance(exc, ConfigError):
        return TopologyErrorPayload(
            type=SUBMISSION_CONFIGURATION_ERROR,
            message=str(exc) or "Configuração inválida",
            details={"exception_class": exc.__class__.__name__},
            hint="Revise a seção validation da configuração.",
        )

    return TopologyErrorPayload(
        type=SUBMISSION_UNEXPECTED_ERROR,
        message=str(exc) or "Erro inesperado durante a validação",
        details={"exception_class": exc.__class__.__name__},
        hint="Verifique os eventos da submissão para diagnosticar a falha.",
    )
