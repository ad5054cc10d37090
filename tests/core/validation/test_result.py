# tests/core/validation/test_result.py
"""
Testes do ValidationResult.

Os testes asseguram que:
- os conjuntos são copiados na construção (cópia defensiva)
- o resultado é imutável
- a serialização é determinística
"""

import dataclasses

import pytest

from streamwire.core.topology.types import StreamReference
from streamwire.core.validation.result import ValidationResult


def test_defensive_copy_on_construction():
    """
    Verifica que mutações nos sets do chamador não afetam o resultado.

    Decisões arquiteturais:
        - A cópia ocorre na construção, não no acesso
    """
    invalid = {StreamReference("A", "s2")}
    unconsumed = {StreamReference("A", "s1")}
    result = ValidationResult(invalid, unconsumed)

    invalid.add(StreamReference("Z", "z"))
    unconsumed.clear()

    assert result.invalid_inputs == {StreamReference("A", "s2")}
    assert result.unconsumed_outputs == {StreamReference("A", "s1")}
    assert isinstance(result.invalid_inputs, frozenset)
    assert isinstance(result.unconsumed_outputs, frozenset)


def test_result_is_immutable():
    result = ValidationResult()
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.invalid_inputs = frozenset({StreamReference("A", "s1")})
    with pytest.raises(AttributeError):
        result.invalid_inputs.add(StreamReference("A", "s1"))


def test_value_equality_and_hash():
    a = ValidationResult([StreamReference("A", "s2")], [])
    b = ValidationResult({StreamReference("A", "s2")}, set())
    assert a == b
    assert hash(a) == hash(b)


def test_to_dict_is_sorted():
    result = ValidationResult(
        invalid_inputs={StreamReference("b", "x"), StreamReference("a", "y")},
        unconsumed_outputs={StreamReference("c", "default")},
    )
    assert result.to_dict() == {
        "invalid_inputs": [
            {"component_id": "a", "stream_id": "y"},
            {"component_id": "b", "stream_id": "x"},
        ],
        "unconsumed_outputs": [{"component_id": "c", "stream_id": "default"}],
    }
    assert result.has_unconsumed_outputs is True
