# src/streamwire/core/validation/validator.py
"""
Validação estrutural da fiação de uma topologia.

Este módulo verifica, antes da submissão, se toda entrada declarada por
um componente (referência a uma stream de saída de um componente
upstream) corresponde a uma saída efetivamente declarada na topologia.

Operações:
    - is_skeleton_topology       → topologia montada só para validação?
    - get_all_component_inputs   → união das entradas declaradas
    - get_all_component_outputs  → união das saídas declaradas
    - validate_topology          → diferenças entre os dois conjuntos

Decisões arquiteturais:
    - Apenas identidade de referências é comparada (sem alcançabilidade)
    - Pertinência via conjuntos com hash, custo O(I + O)
    - Entradas que apontam para componentes inexistentes caem em
      `invalid_inputs`, como qualquer referência sem produtor

Invariantes:
    - Todas as operações são funções puras do argumento `topology`
    - A topologia nunca é alterada
    - A ordem de iteração dos componentes não afeta os conjuntos

Limites explícitos:
    - Não detecta ciclos
    - Não verifica compatibilidade de campos entre produtor e consumidor
    - Não levanta exceções para topologias inválidas (resultado é dado)
    - Não registra eventos (ver `core.submission`)
"""

from __future__ import annotations

from typing import Set

from streamwire.core.topology.graph import (
    TopologyGraph,
    get_component_declaration,
    list_component_ids,
)
from streamwire.core.topology.types import StreamReference

from .result import ValidationResult


def is_skeleton_topology(topology: TopologyGraph) -> bool:
    """
    Determina se a topologia foi montada apenas para validação estrutural.

    Uma topologia esqueleto possui pelo menos um componente, de qualquer
    família de papel, sem payload executável anexado.

    Invariantes:
        - Topologia vazia retorna False
        - Retorna False somente se todo componente possuir payload

    Args:
        topology (TopologyGraph): Topologia a inspecionar.

    Returns:
        bool: True se algum componente tiver payload nulo.
    """
    for component_id in list_component_ids(topology):
        if topology.get(component_id).is_skeleton:
            return True
    return False


def get_all_component_inputs(topology: TopologyGraph) -> Set[StreamReference]:
    """
    Retorna todas as streams assinadas por algum componente da topologia.

    A união é feita sobre todos os ids (todas as famílias de papel); uma
    mesma referência consumida por vários componentes aparece uma vez.

    Args:
        topology (TopologyGraph): Topologia cujas entradas serão coletadas.

    Returns:
        Set[StreamReference]: Conjunto novo, local à chamada.
    """
    all_inputs: Set[StreamReference] = set()
    for component_id in list_component_ids(topology):
        declaration = get_component_declaration(topology, component_id)
        all_inputs.update(declaration.input_streams)
    return all_inputs


def get_all_component_outputs(topology: TopologyGraph) -> Set[StreamReference]:
    """
    Retorna todas as streams de saída declaradas pelos componentes.

    Cada saída é identificada pelo id do próprio componente que a declara;
    um componente nunca produz referências sob outro id.

    Args:
        topology (TopologyGraph): Topologia cujas saídas serão coletadas.

    Returns:
        Set[StreamReference]: Conjunto novo, local à chamada.
    """
    all_outputs: Set[StreamReference] = set()
    for component_id in list_component_ids(topology):
        declaration = get_component_declaration(topology, component_id)
        for stream_id in declaration.output_stream_names:
            all_outputs.add(StreamReference(component_id, stream_id))
    return all_outputs


def validate_topology(topology: TopologyGraph) -> ValidationResult:
    """
    Identifica entradas sem saída correspondente e saídas sem consumidor.

    Entradas sem produtor impedem a submissão da topologia ao coordenador
    do cluster. Saídas sem consumidor não causam erro, mas são úteis para
    quem monta a topologia.

    Aceita tanto topologias completas quanto topologias esqueleto.

    Invariantes:
        - invalid_inputs == entradas - saídas
        - unconsumed_outputs == saídas - entradas
        - Chamadas repetidas produzem resultados iguais

    Args:
        topology (TopologyGraph): Topologia a validar.

    Returns:
        ValidationResult: Conjuntos de entradas inválidas e saídas não consumidas.

    Raises:
        TypeError: Se `topology` não for um `TopologyGraph`.
    """
    inputs = get_all_component_inputs(topology)
    outputs = get_all_component_outputs(topology)

    return ValidationResult(
        invalid_inputs=inputs - outputs,
        unconsumed_outputs=outputs - inputs,
    )
