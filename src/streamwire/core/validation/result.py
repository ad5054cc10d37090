# src/streamwire/core/validation/result.py
"""
Resultado imutável da validação de fiação de uma topologia.

Componentes principais:
    - ValidationResult → entradas sem produtor e saídas sem consumidor

Invariantes:
    - Os dois conjuntos são copiados na construção (cópia defensiva)
    - Uma instância nunca é alterada após criada
    - Referências corretamente casadas não são preservadas
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable

from streamwire.core.topology.types import StreamReference


@dataclass(frozen=True)
class ValidationResult:
    """
    Resultado da validação de uma topologia.

    Campos:
        - invalid_inputs: entradas declaradas sem componente/stream produtor
          correspondente. São fatais para a submissão da topologia.
        - unconsumed_outputs: saídas declaradas que nenhum componente
          consome. São apenas informativas.

    Decisões arquiteturais:
        - Qualquer iterável é aceito e copiado para `frozenset` no momento
          da construção, nunca no acesso
        - O resultado é um diagnóstico, não um grafo: não é possível
          reconstruir o conjunto completo de entradas ou saídas a partir dele

    Invariantes:
        - Os conjuntos expostos são imutáveis
        - Mutações posteriores nos conjuntos do chamador não afetam o resultado

    Limites explícitos:
        - Não decide rejeição ou aviso (responsabilidade do chamador)
        - Não levanta exceções de validação
    """
    invalid_inputs: FrozenSet[StreamReference] = frozenset()
    unconsumed_outputs: FrozenSet[StreamReference] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "invalid_inputs", frozenset(self.invalid_inputs))
        object.__setattr__(self, "unconsumed_outputs", frozenset(self.unconsumed_outputs))

    @property
    def is_valid(self) -> bool:
        """True quando nenhuma entrada declarada está sem produtor."""
        return not self.invalid_inputs

    @property
    def has_unconsumed_outputs(self) -> bool:
        return bool(self.unconsumed_outputs)

    def to_dict(self) -> Dict[str, Any]:
        """Representação serializável e determinística (referências ordenadas)."""
        return {
            "invalid_inputs": _refs_to_list(self.invalid_inputs),
            "unconsumed_outputs": _refs_to_list(self.unconsumed_outputs),
        }


def _refs_to_list(refs: Iterable[StreamReference]) -> list:
    return [
        {"component_id": ref.component_id, "stream_id": ref.stream_id}
        for ref in sorted(refs)
    ]
