# src/streamwire/core/validation/formatting.py
"""
Formatação textual de diagnósticos de fiação.

Utilitários de depuração: não participam de nenhuma decisão de validação.
"""

from __future__ import annotations

from typing import Iterable

from streamwire.core.topology.graph import TopologyGraph, get_component_declaration
from streamwire.core.topology.types import StreamReference

from .result import ValidationResult

INPUT_HEADER = "input (component, stream):  "
OUTPUT_HEADER = "output (component, stream):  "


def _pairs(refs: Iterable[StreamReference]) -> str:
    return "".join(f"({ref.component_id}, {ref.stream_id}) " for ref in sorted(refs))


def component_streams_to_string(topology: TopologyGraph, component_id: str) -> str:
    """
    Lista as streams de entrada e de saída declaradas por um componente.

    Formato (duas linhas, cada par seguido de um espaço):

        input (component, stream):  (A, s1) (A, s2)
        output (component, stream):  (B, out)

    As saídas usam sempre o id do componente consultado. Os pares são
    ordenados para saída determinística.

    Raises:
        ComponentNotFoundError: Se o id não existir na topologia.
    """
    declaration = get_component_declaration(topology, component_id)
    outputs = (StreamReference(component_id, s) for s in declaration.output_stream_names)
    return (
        INPUT_HEADER + _pairs(declaration.input_streams)
        + "\n" + OUTPUT_HEADER + _pairs(outputs)
    )


def format_validation_result(result: ValidationResult) -> str:
    """Resumo de duas linhas de um ValidationResult, usado em mensagens e logs."""
    invalid = ", ".join(str(ref) for ref in sorted(result.invalid_inputs)) or "-"
    unconsumed = ", ".join(str(ref) for ref in sorted(result.unconsumed_outputs)) or "-"
    return f"invalid inputs: {invalid}\nunconsumed outputs: {unconsumed}"
