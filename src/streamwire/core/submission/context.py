# src/streamwire/core/submission/context.py
"""
Contexto de uma submissão de topologia.

Este módulo define o `SubmissionContext`, a estrutura que acompanha uma
única tentativa de submissão e coleta, de forma explícita:

    - a configuração efetiva usada na decisão
    - logs estruturados (eventos)
    - warnings não fatais agrupados por componente

Princípios fundamentais:
    - Isolamento por submissão (um contexto por tentativa)
    - Logs são eventos estruturados, não texto livre
    - Nenhum estado global

Invariantes:
    - Todo evento inclui `submission_id`, `component_id`, `level`,
      `message` e `timestamp` (UTC, ISO 8601)
    - Warnings preservam a ordem de inserção por componente

Limites explícitos:
    - Não valida topologias
    - Não persiste eventos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

# component_id usado para eventos que se referem à topologia inteira
TOPOLOGY_SCOPE = "topology"


@dataclass
class SubmissionContext:
    """
    Contexto mutável de uma submissão.

    Campos canônicos:
    - submission_id: identificador único da submissão
    - created_at: timestamp UTC de criação
    - config: configuração efetiva (defaults + local deep-merge)
    - meta: metadados livres (ex.: origem da descrição)
    - events: log estruturado de eventos
    - warnings: warnings por component_id
    """
    submission_id: str
    created_at: datetime
    config: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, component_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "submission_id": self.submission_id,
            "component_id": component_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, component_id: str, message: str) -> None:
        self.warnings.setdefault(component_id, []).append(message)

    def events_for(self, level: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["level"] == level]
