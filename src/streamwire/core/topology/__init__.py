"""streamwire - Topology (core).

Modelo canônico de topologia consumido pela validação de fiação:
 - tipos imutáveis (StreamReference, ComponentDeclaration, Component)
 - grafo e acesso estrutural (TopologyGraph, list_component_ids, get_component_declaration)
 - leitura de descrições (YAML/JSON)
 - fingerprint canônico (rastreabilidade)
"""

from .errors import (  # noqa: F401
    TopologyDescriptionError,
    TopologyFileNotFoundError,
    UnsupportedTopologyFormatError,
    InvalidTopologyDescriptionError,
)
from .graph import (  # noqa: F401
    ComponentNotFoundError,
    DuplicateComponentIdError,
    TopologyGraph,
    get_component_declaration,
    list_component_ids,
)
from .hashing import compute_topology_hash  # noqa: F401
from .loader import load_topology, topology_from_dict  # noqa: F401
from .types import (  # noqa: F401
    DEFAULT_GROUPING,
    DEFAULT_STREAM_ID,
    Component,
    ComponentDeclaration,
    ComponentRole,
    StreamDeclaration,
    StreamReference,
)
