# src/streamwire/core/topology/hashing.py
"""
Fingerprint canônico da fiação de uma topologia.

O hash gerado representa a identidade estrutural da topologia declarada e
é usado para associar eventos e relatórios de submissão a uma topologia
específica.

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Componentes, entradas e saídas ordenados antes da serialização
    - Payloads não participam do hash; apenas a marcação de esqueleto
    - SHA-256 sobre UTF-8

Invariantes:
    - A ordem de declaração dos componentes não altera o hash
    - O valor é sempre uma string hexadecimal de 64 caracteres
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Dict, List

from .graph import TopologyGraph
from .types import Component


def _component_canonical(component: Component) -> Dict[str, Any]:
    decl = component.declaration
    return {
        "id": component.id,
        "role": component.role.value,
        "skeleton": component.is_skeleton,
        "inputs": [
            [ref.component_id, ref.stream_id, decl.inputs[ref]]
            for ref in sorted(decl.inputs)
        ],
        "outputs": [
            [name, list(decl.streams[name].fields), decl.streams[name].direct]
            for name in sorted(decl.streams)
        ],
    }


def topology_canonical(topology: TopologyGraph) -> List[Dict[str, Any]]:
    """Representação canônica (ordenada e serializável) da fiação declarada."""
    return [
        _component_canonical(c)
        for c in sorted(topology.components, key=lambda c: c.id)
    ]


def compute_topology_hash(topology: TopologyGraph) -> str:
    """
    Gera o SHA-256 hexadecimal da representação canônica da topologia.

    Raises:
        TypeError: Se `topology` não for um `TopologyGraph`.
    """
    if not isinstance(topology, TopologyGraph):
        raise TypeError(
            f"Topology para hashing deve ser TopologyGraph, recebido: {type(topology).__name__}"
        )

    canonical_json = json.dumps(
        topology_canonical(topology),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
