# tests/core/validation/test_validate_topology.py
"""
Testes da validação de fiação (validate_topology).

Este módulo valida que o validador identifica exatamente as entradas sem
produtor e as saídas sem consumidor de uma topologia.

Os testes asseguram que:
- os resultados são as diferenças exatas entre entradas e saídas
- a ordem de declaração dos componentes não altera os conjuntos
- chamadas repetidas produzem resultados iguais
- referências a componentes inexistentes caem em `invalid_inputs`
- a topologia de entrada nunca é alterada

Invariantes:
    - invalid_inputs == entradas - saídas
    - unconsumed_outputs == saídas - entradas
    - Nenhuma referência aparece nos dois conjuntos

Limites explícitos:
    - Não valida política de submissão (ver tests/core/submission)
"""

import itertools

import pytest

from streamwire.core.topology.graph import TopologyGraph
from streamwire.core.topology.types import StreamReference
from streamwire.core.validation.result import ValidationResult
from streamwire.core.validation.validator import (
    get_all_component_inputs,
    get_all_component_outputs,
    validate_topology,
)


def test_scenario_a_fully_wired(scenario_a):
    """A emite s1 consumido por B: nada inválido, nada sobrando."""
    result = validate_topology(scenario_a)
    assert result.invalid_inputs == frozenset()
    assert result.unconsumed_outputs == frozenset()
    assert result.is_valid is True


def test_scenario_b_stream_name_mismatch(scenario_b):
    """
    Verifica o cenário em que o consumidor assina uma stream não declarada.

    Invariantes:
        - (A, s2) é entrada inválida
        - (A, s1) é saída não consumida
    """
    result = validate_topology(scenario_b)
    assert result.invalid_inputs == {StreamReference("A", "s2")}
    assert result.unconsumed_outputs == {StreamReference("A", "s1")}
    assert result.is_valid is False


def test_scenario_c_unconsumed_output_only(scenario_c):
    result = validate_topology(scenario_c)
    assert result.invalid_inputs == frozenset()
    assert result.unconsumed_outputs == {StreamReference("A", "s1")}
    assert result.is_valid is True


def test_scenario_d_empty_topology(empty_topology):
    result = validate_topology(empty_topology)
    assert result == ValidationResult()
    assert get_all_component_inputs(empty_topology) == set()
    assert get_all_component_outputs(empty_topology) == set()


def test_results_match_independent_set_difference(word_count_topology):
    """
    Verifica os resultados contra uma computação independente.

    Decisões arquiteturais:
        - A referência é calculada diretamente a partir dos componentes,
          sem passar pelos coletores do validador
    """
    inputs = set()
    outputs = set()
    for component in word_count_topology.components:
        inputs |= set(component.declaration.inputs)
        outputs |= {StreamReference(component.id, s) for s in component.declaration.streams}

    result = validate_topology(word_count_topology)
    assert result.invalid_inputs == inputs - outputs
    assert result.unconsumed_outputs == outputs - inputs
    assert result.invalid_inputs.isdisjoint(result.unconsumed_outputs)

    assert result.invalid_inputs == {StreamReference("ghost", "default")}
    assert result.unconsumed_outputs == {StreamReference("count", "metrics")}


def test_dangling_component_reference_is_invalid_input(make_component):
    """Entrada apontando para componente inexistente cai em invalid_inputs, sem exceção."""
    topology = TopologyGraph([make_component("B", inputs=[("missing", "default")])])
    result = validate_topology(topology)
    assert result.invalid_inputs == {StreamReference("missing", "default")}


def test_shared_input_collapses_in_union(make_component):
    topology = TopologyGraph([
        make_component("A", outputs=["s1"]),
        make_component("B", inputs=[("A", "s1")]),
        make_component("C", inputs=[("A", "s1")]),
    ])
    assert get_all_component_inputs(topology) == {StreamReference("A", "s1")}


def test_outputs_use_declaring_component_id(make_component):
    topology = TopologyGraph([
        make_component("A", outputs=["s1", "s2"]),
        make_component("B", outputs=["s1"]),
    ])
    assert get_all_component_outputs(topology) == {
        StreamReference("A", "s1"),
        StreamReference("A", "s2"),
        StreamReference("B", "s1"),
    }


def test_order_independence(word_count_topology):
    """Todas as permutações da ordem de declaração produzem os mesmos conjuntos."""
    expected = validate_topology(word_count_topology)
    for perm in itertools.permutations(word_count_topology.components):
        topology = TopologyGraph(perm)
        assert get_all_component_inputs(topology) == get_all_component_inputs(word_count_topology)
        assert get_all_component_outputs(topology) == get_all_component_outputs(word_count_topology)
        assert validate_topology(topology) == expected


def test_idempotence(scenario_b):
    assert validate_topology(scenario_b) == validate_topology(scenario_b)


def test_skeleton_topology_is_validated_like_any_other(make_component):
    topology = TopologyGraph([
        make_component("A", outputs=["s1"], payload=None),
        make_component("B", inputs=[("A", "s1")], payload=None),
    ])
    assert validate_topology(topology).is_valid


def test_collectors_return_fresh_sets(scenario_a):
    first = get_all_component_inputs(scenario_a)
    first.add(StreamReference("X", "y"))
    assert get_all_component_inputs(scenario_a) == {StreamReference("A", "s1")}


def test_validate_rejects_non_graph():
    with pytest.raises(TypeError):
        validate_topology(None)
