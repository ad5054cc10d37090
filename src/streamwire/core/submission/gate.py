# src/streamwire/core/submission/gate.py
"""
Gate de submissão de topologias.

O validador apenas descreve a fiação; quem decide rejeitar ou avisar é o
chamador. Este módulo implementa essa decisão para pipelines de
submissão, aplicando uma `ValidationPolicy` ao `ValidationResult` e
registrando eventos estruturados no `SubmissionContext`.

Fluxo:
    1. resolve a política (argumento explícito ou `ctx.config`)
    2. registra `validation.started` com o fingerprint da topologia
    3. rejeita topologias esqueleto quando `reject_skeleton`
    4. valida a topologia
    5. converte saídas não consumidas em warnings (`warn_unconsumed_outputs`)
    6. rejeita entradas inválidas (`reject_invalid_inputs`)
    7. registra `validation.finished` e retorna o `SubmissionReport`

Decisões arquiteturais:
    - Toda rejeição é registrada como evento ERROR antes da exceção
    - Exceções carregam apenas dados serializáveis
    - O relatório é imutável

Limites explícitos:
    - Não envia a topologia ao coordenador do cluster
    - Não executa componentes
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from streamwire.core.config.policy import ValidationPolicy, resolve_validation_policy
from streamwire.core.errors import invalid_topology_inputs, skeleton_submission
from streamwire.core.exceptions import InvalidTopologyError, SkeletonTopologyError
from streamwire.core.topology.graph import TopologyGraph
from streamwire.core.topology.hashing import compute_topology_hash
from streamwire.core.validation.formatting import format_validation_result
from streamwire.core.validation.result import ValidationResult
from streamwire.core.validation.validator import is_skeleton_topology, validate_topology

from .context import TOPOLOGY_SCOPE, SubmissionContext


@dataclass(frozen=True)
class SubmissionReport:
    """Resultado aceito de uma submissão (topologia sem bloqueios pela política)."""
    topology_hash: str
    skeleton: bool
    result: ValidationResult
    policy: ValidationPolicy

    def to_dict(self) -> Dict[str, Any]:
        return {
            "topology_hash": self.topology_hash,
            "skeleton": self.skeleton,
            "result": self.result.to_dict(),
            "policy": self.policy.to_dict(),
        }


def check_submission(
    topology: TopologyGraph,
    *,
    ctx: SubmissionContext,
    policy: Optional[ValidationPolicy] = None,
) -> SubmissionReport:
    """
    Aplica a política de validação a uma topologia prestes a ser submetida.

    Args:
        topology (TopologyGraph): Topologia a submeter.
        ctx (SubmissionContext): Contexto que recebe eventos e warnings.
        policy (Optional[ValidationPolicy]): Política explícita; quando
            ausente, é resolvida a partir de `ctx.config`.

    Returns:
        SubmissionReport: Fingerprint, marcação de esqueleto, resultado e política.

    Raises:
        SkeletonTopologyError: Topologia esqueleto com `reject_skeleton`.
        InvalidTopologyError: Entradas inválidas com `reject_invalid_inputs`.
        InvalidPolicyValueError: Se a seção `validation` for inválida.
    """
    if policy is None:
        policy = resolve_validation_policy(ctx.config)

    topology_hash = compute_topology_hash(topology)
    ctx.log(
        component_id=TOPOLOGY_SCOPE,
        level="INFO",
        message="validation.started",
        topology_hash=topology_hash,
        component_count=len(topology),
        policy=policy.to_dict(),
    )

    skeleton = is_skeleton_topology(topology)
    if skeleton and policy.reject_skeleton:
        payload = skeleton_submission(
            skeleton_components=sorted(c.id for c in topology.components if c.is_skeleton),
            topology_hash=topology_hash,
        )
        ctx.log(component_id=TOPOLOGY_SCOPE, level="ERROR", message="validation.rejected", error=payload.to_dict())
        raise SkeletonTopologyError(
            message=payload.message,
            details=payload.details,
            hint=payload.hint,
        )

    result = validate_topology(topology)

    if policy.warn_unconsumed_outputs:
        for ref in sorted(result.unconsumed_outputs):
            message = f"Output stream '{ref.stream_id}' is not consumed by any component"
            ctx.add_warning(component_id=ref.component_id, message=message)
            ctx.log(
                component_id=ref.component_id,
                level="WARNING",
                message=message,
                stream_id=ref.stream_id,
            )

    if result.invalid_inputs and policy.reject_invalid_inputs:
        payload = invalid_topology_inputs(
            invalid_inputs=result.to_dict()["invalid_inputs"],
            topology_hash=topology_hash,
        )
        ctx.log(
            component_id=TOPOLOGY_SCOPE,
            level="ERROR",
            message="validation.rejected",
            error=payload.to_dict(),
            summary=format_validation_result(result),
        )
        raise InvalidTopologyError(
            message=payload.message,
            details=payload.details,
            hint=payload.hint,
        )

    ctx.log(
        component_id=TOPOLOGY_SCOPE,
        level="INFO",
        message="validation.finished",
        topology_hash=topology_hash,
        skeleton=skeleton,
        valid=result.is_valid,
    )

    return SubmissionReport(
        topology_hash=topology_hash,
        skeleton=skeleton,
        result=result,
        policy=policy,
    )
