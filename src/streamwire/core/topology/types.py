# src/streamwire/core/topology/types.py
"""
Tipos canônicos do modelo de topologia do streamwire.

Este módulo define as estruturas que descrevem o contrato declarado de
cada componente de uma topologia de processamento de streams:

    - StreamReference      → par (componente, stream) que identifica uma saída
    - StreamDeclaration    → esquema declarado de uma stream de saída
    - ComponentRole        → família de papel do componente
    - ComponentDeclaration → entradas e saídas declaradas por um componente
    - Component            → componente identificado com payload opcional

Princípios fundamentais:
    - Tipos são imutáveis após a construção
    - Igualdade e hash são estruturais
    - Nenhuma lógica de validação vive neste módulo

Invariantes:
    - StreamReference é hashable e ordenável
    - Coleções internas de ComponentDeclaration são cópias somente leitura
    - Um Component sem payload (`None`) é um componente esqueleto

Limites explícitos:
    - Não constrói topologias
    - Não valida a fiação entre componentes
    - Não executa componentes
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Optional, Tuple


DEFAULT_STREAM_ID = "default"
DEFAULT_GROUPING = "shuffle"


@dataclass(frozen=True, order=True)
class StreamReference:
    """
    Referência a uma stream de saída nomeada de um componente.

    Identifica exatamente uma stream declarada: o componente produtor
    (`component_id`) e o nome da stream (`stream_id`). É usada tanto do
    lado consumidor (entradas declaradas) quanto do lado produtor
    (saídas declaradas).

    Decisões arquiteturais:
        - Igualdade e hash são estruturais (ambos os campos)
        - A ordenação existe apenas para exibição determinística

    Invariantes:
        - Uma instância nunca é alterada após criada
    """
    component_id: str
    stream_id: str = DEFAULT_STREAM_ID

    def __str__(self) -> str:
        return f"({self.component_id}, {self.stream_id})"


@dataclass(frozen=True)
class StreamDeclaration:
    """Esquema declarado de uma stream de saída (campos e modo direto)."""
    fields: Tuple[str, ...] = ()
    direct: bool = False


class ComponentRole(str, Enum):
    """
    Famílias de papel de um componente na topologia.

    Os valores são strings para facilitar a leitura de descrições em
    YAML/JSON e a serialização em fingerprints.

    Papéis definidos:
        - PROCESSOR: consome streams e pode emitir novas streams
        - SOURCE: origem de dados sem estado
        - STATEFUL_SOURCE: origem de dados com estado

    Limites explícitos:
        - O papel não altera a semântica de validação da fiação
    """
    PROCESSOR = "processor"
    SOURCE = "source"
    STATEFUL_SOURCE = "stateful_source"


@dataclass(frozen=True)
class ComponentDeclaration:
    """
    Contrato declarado de um componente: o que consome e o que emite.

    Campos:
        - inputs: streams upstream assinadas → nome do agrupamento
        - streams: nome da stream de saída → StreamDeclaration

    O valor de cada entrada (estratégia de agrupamento) é irrelevante para
    a validação de fiação; apenas as chaves são consideradas.

    Decisões arquiteturais:
        - Os mapas recebidos são copiados para views somente leitura na
          construção, de modo que mutações posteriores do chamador não
          alteram a declaração

    Invariantes:
        - `input_streams` e `output_stream_names` são frozensets
    """
    inputs: Mapping[StreamReference, str] = field(default_factory=dict)
    streams: Mapping[str, StreamDeclaration] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", MappingProxyType(dict(self.inputs)))
        object.__setattr__(self, "streams", MappingProxyType(dict(self.streams)))

    @property
    def input_streams(self) -> FrozenSet[StreamReference]:
        return frozenset(self.inputs)

    @property
    def output_stream_names(self) -> FrozenSet[str]:
        return frozenset(self.streams)


@dataclass(frozen=True)
class Component:
    """
    Componente identificado de uma topologia.

    `payload` carrega a lógica executável anexada ao componente (objeto,
    referência serializada, etc.). Quando `None`, o componente foi
    declarado apenas para validação estrutural.
    """
    id: str
    role: ComponentRole
    declaration: ComponentDeclaration = field(default_factory=ComponentDeclaration)
    payload: Optional[Any] = None

    @property
    def is_skeleton(self) -> bool:
        return self.payload is None
