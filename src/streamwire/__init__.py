# src/streamwire/__init__.py
"""
streamwire - verificação estrutural da fiação de topologias de streams.

Uma topologia é um grafo de componentes (produtores e consumidores)
ligados por streams nomeadas. Antes da submissão ao cluster, toda entrada
declarada precisa corresponder a uma saída declarada por algum componente.

Arquitetura em alto nível:
    - core.topology   → modelo imutável, acesso a componentes, descrições YAML/JSON
    - core.validation → validador puro (esqueleto, entradas, saídas, diferenças)
    - core.config     → carregamento, merge e política de validação
    - core.submission → gate de submissão com eventos estruturados

Limites explícitos:
    - Não executa componentes
    - Não detecta ciclos
    - Não envia topologias ao coordenador do cluster
"""

from .core.topology import (
    Component,
    ComponentDeclaration,
    ComponentRole,
    StreamDeclaration,
    StreamReference,
    TopologyGraph,
    load_topology,
)
from .core.validation import (
    ValidationResult,
    component_streams_to_string,
    get_all_component_inputs,
    get_all_component_outputs,
    is_skeleton_topology,
    validate_topology,
)

__all__ = [
    "Component",
    "ComponentDeclaration",
    "ComponentRole",
    "StreamDeclaration",
    "StreamReference",
    "TopologyGraph",
    "load_topology",
    "ValidationResult",
    "component_streams_to_string",
    "get_all_component_inputs",
    "get_all_component_outputs",
    "is_skeleton_topology",
    "validate_topology",
]
