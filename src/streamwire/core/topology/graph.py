# src/streamwire/core/topology/graph.py
"""
Grafo de topologia e acesso estrutural aos componentes.

Este módulo define o `TopologyGraph`, a descrição já montada de uma
topologia, e as duas operações de acesso usadas pela validação:

    - list_component_ids        → todos os ids, de todas as famílias de papel
    - get_component_declaration → contrato declarado de um componente

O grafo é uma coleção uniforme de componentes, cada um marcado com seu
`ComponentRole`. As três famílias de papel (processor, source,
stateful_source) são apenas partições dessa coleção.

Decisões arquiteturais:
    - Ids de componente são únicos em todas as famílias
    - A ordem de declaração é preservada para exibição
    - Id desconhecido é erro explícito (`ComponentNotFoundError`),
      nunca um skip silencioso

Invariantes:
    - O grafo nunca é alterado após construído
    - Todo id listado resolve para exatamente um componente

Limites explícitos:
    - Não valida a fiação entre componentes
    - Não detecta ciclos
    - Não executa componentes
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List

from .types import Component, ComponentDeclaration, ComponentRole


class DuplicateComponentIdError(ValueError):
    """
    Exceção levantada quando dois componentes compartilham o mesmo id.

    Decisões arquiteturais:
        - Ids são únicos entre todas as famílias de papel
        - A duplicidade é detectada na construção do grafo

    Limites explícitos:
        - Não tenta renomear componentes automaticamente
    """


class ComponentNotFoundError(KeyError):
    """
    Exceção levantada quando um id de componente não existe na topologia.

    Invariantes:
        - Nenhuma declaração vazia é inventada para ids ausentes
    """

    def __init__(self, component_id: str):
        super().__init__(component_id)
        self.component_id = component_id

    def __str__(self) -> str:
        return f"Component not found in topology: {self.component_id}"


class TopologyGraph:
    """
    Descrição imutável de uma topologia: componentes indexados por id.

    Esta classe é o insumo de todas as operações de validação. Ela apenas
    organiza os componentes declarados; não interpreta a fiação.

    Decisões arquiteturais:
        - Uma única coleção de componentes, particionada por `role`
        - A ordem de declaração é mantida separadamente do índice

    Invariantes:
        - Cada `component.id` é uma string não vazia e única
        - Nenhum componente é adicionado ou removido após a construção

    Limites explícitos:
        - Não valida entradas e saídas
        - Não carrega descrições de arquivo (ver `loader`)
    """

    def __init__(self, components: Iterable[Component] = ()):
        self._components: Dict[str, Component] = {}
        self._order: List[str] = []
        for component in components:
            cid = getattr(component, "id", None)
            if not isinstance(cid, str) or not cid.strip():
                raise ValueError("component.id must be a non-empty string")
            if cid in self._components:
                raise DuplicateComponentIdError(f"Duplicate component id: {cid}")
            self._components[cid] = component
            self._order.append(cid)

    @classmethod
    def from_families(
        cls,
        *,
        processors: Iterable[Component] = (),
        sources: Iterable[Component] = (),
        stateful_sources: Iterable[Component] = (),
    ) -> "TopologyGraph":
        """Monta o grafo a partir das três famílias de papel separadas."""
        return cls([*sources, *stateful_sources, *processors])

    @property
    def components(self) -> List[Component]:
        return [self._components[cid] for cid in self._order]

    def by_role(self, role: ComponentRole) -> List[Component]:
        return [c for c in self.components if c.role == role]

    def get(self, component_id: str) -> Component:
        if component_id not in self._components:
            raise ComponentNotFoundError(component_id)
        return self._components[component_id]

    def __contains__(self, component_id: object) -> bool:
        return component_id in self._components

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self._components)

    def __repr__(self) -> str:
        return f"TopologyGraph(components={self._order!r})"


def _require_graph(topology: object) -> TopologyGraph:
    if not isinstance(topology, TopologyGraph):
        raise TypeError(
            f"topology must be a TopologyGraph, received: {type(topology).__name__}"
        )
    return topology


def list_component_ids(topology: TopologyGraph) -> List[str]:
    """
    Lista os ids de todos os componentes da topologia, de todas as famílias.

    A ordem retornada é a ordem de declaração, mas nenhum consumidor deve
    depender dela: os conjuntos calculados pela validação são
    independentes da ordem.

    Raises:
        TypeError: Se `topology` não for um `TopologyGraph`.
    """
    graph = _require_graph(topology)
    return [c.id for c in graph.components]


def get_component_declaration(topology: TopologyGraph, component_id: str) -> ComponentDeclaration:
    """
    Retorna o contrato declarado (entradas e saídas) de um componente.

    Raises:
        TypeError: Se `topology` não for um `TopologyGraph`.
        ComponentNotFoundError: Se o id não existir na topologia.
    """
    graph = _require_graph(topology)
    return graph.get(component_id).declaration
