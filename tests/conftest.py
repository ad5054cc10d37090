# tests/conftest.py
"""
Fixtures compartilhados para testes do streamwire.

Este módulo define fixtures reutilizáveis que fornecem:
- uma fábrica de componentes com entradas e saídas declaradas
- as topologias de cenário usadas pelos testes de validação
- configurações mínimas em YAML (defaults + local)
- um SubmissionContext determinístico

Decisões arquiteturais:
    - Fixtures são simples e explícitas
    - Imports do core são feitos de forma lazy para melhorar a clareza
      de erros durante falhas de import

Invariantes:
    - Nenhuma fixture realiza I/O
    - Todas as topologias retornadas são novas a cada teste

Limites explícitos:
    - Não substituir testes de integração
    - Não conter lógica condicional complexa
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Topology fixtures
# =====================================================

@pytest.fixture
def make_component():
    """
    Fixture factory que monta um `Component` a partir de tuplas simples.

    Uso:
        make_component("B", inputs=[("A", "s1")], outputs=["out"])

    Decisões arquiteturais:
        - Entradas são pares (component_id, stream_id) com grouping "shuffle"
        - Saídas são nomes de stream sem esquema de campos
        - O payload padrão é um objeto não nulo (componente executável);
          use `payload=None` para declarar um componente esqueleto

    Returns:
        Callable[..., Component]: Fábrica de componentes.
    """
    from streamwire.core.topology.types import (
        Component,
        ComponentDeclaration,
        ComponentRole,
        StreamDeclaration,
        StreamReference,
    )

    executable = object()

    def _make(
        component_id,
        *,
        role=ComponentRole.PROCESSOR,
        inputs=(),
        outputs=(),
        payload=executable,
    ):
        return Component(
            id=component_id,
            role=role,
            declaration=ComponentDeclaration(
                inputs={StreamReference(c, s): "shuffle" for c, s in inputs},
                streams={name: StreamDeclaration() for name in outputs},
            ),
            payload=payload,
        )

    return _make


@pytest.fixture
def scenario_a(make_component):
    """A emite "s1"; B consome (A, "s1"). Fiação completa, nada sobra."""
    from streamwire.core.topology.graph import TopologyGraph
    from streamwire.core.topology.types import ComponentRole

    return TopologyGraph([
        make_component("A", role=ComponentRole.SOURCE, outputs=["s1"]),
        make_component("B", inputs=[("A", "s1")]),
    ])


@pytest.fixture
def scenario_b(make_component):
    """B consome (A, "s2"), mas A só declara "s1"."""
    from streamwire.core.topology.graph import TopologyGraph
    from streamwire.core.topology.types import ComponentRole

    return TopologyGraph([
        make_component("A", role=ComponentRole.SOURCE, outputs=["s1"]),
        make_component("B", inputs=[("A", "s2")]),
    ])


@pytest.fixture
def scenario_c(make_component):
    """A declara "s1" e ninguém consome."""
    from streamwire.core.topology.graph import TopologyGraph
    from streamwire.core.topology.types import ComponentRole

    return TopologyGraph([
        make_component("A", role=ComponentRole.SOURCE, outputs=["s1"]),
    ])


@pytest.fixture
def empty_topology():
    from streamwire.core.topology.graph import TopologyGraph

    return TopologyGraph()


@pytest.fixture
def word_count_topology(make_component):
    """
    Topologia realista com as três famílias de papel e fan-in/fan-out.

    Fiação:
        sentences (source)          → "default", "control"
        offsets (stateful_source)   → "default"
        split (processor)           ← (sentences, default), (offsets, default)
                                    → "default"
        count (processor)           ← (split, default), (sentences, control)
                                    → "default", "metrics"
        report (processor)          ← (count, default), (ghost, default)

    Resultado esperado:
        - invalid_inputs: (ghost, default)
        - unconsumed_outputs: (count, metrics)
    """
    from streamwire.core.topology.graph import TopologyGraph
    from streamwire.core.topology.types import ComponentRole

    return TopologyGraph.from_families(
        sources=[
            make_component("sentences", role=ComponentRole.SOURCE, outputs=["default", "control"]),
        ],
        stateful_sources=[
            make_component("offsets", role=ComponentRole.STATEFUL_SOURCE, outputs=["default"]),
        ],
        processors=[
            make_component(
                "split",
                inputs=[("sentences", "default"), ("offsets", "default")],
                outputs=["default"],
            ),
            make_component(
                "count",
                inputs=[("split", "default"), ("sentences", "control")],
                outputs=["default", "metrics"],
            ),
            make_component("report", inputs=[("count", "default"), ("ghost", "default")]),
        ],
    )


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def validation_config_defaults_yaml() -> str:
    """
    YAML de configuração padrão (defaults) semelhante ao uso real.

    Returns:
        str: Conteúdo YAML com a seção `validation` completa.
    """
    return """\
validation:
  reject_invalid_inputs: true
  warn_unconsumed_outputs: true
  reject_skeleton: false
submission:
  cluster: local
  tags: [nightly]
"""


@pytest.fixture
def validation_config_local_yaml() -> str:
    """YAML de override local: passa a rejeitar topologias esqueleto."""
    return """\
validation:
  reject_skeleton: true
submission:
  tags: [adhoc, debug]
"""


# =====================================================
# Submission fixtures
# =====================================================

@pytest.fixture
def dummy_config() -> dict:
    return {
        "validation": {
            "reject_invalid_inputs": True,
            "warn_unconsumed_outputs": True,
            "reject_skeleton": False,
        },
    }


@pytest.fixture
def dummy_ctx(dummy_config):
    """
    SubmissionContext determinístico para testes.

    Decisões arquiteturais:
        - `submission_id` e `created_at` são fixos
        - A configuração é injetada explicitamente via fixture

    Returns:
        SubmissionContext: Contexto isolado, sem eventos prévios.
    """
    from streamwire.core.submission.context import SubmissionContext

    return SubmissionContext(
        submission_id="sub-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config=dummy_config,
        meta={"source": "pytest"},
    )
