# src/streamwire/core/topology/loader.py
"""
Loader de descrições declarativas de topologia.

Este módulo converte uma descrição em YAML ou JSON em um `TopologyGraph`
pronto para validação. Ele existe para que pipelines de submissão possam
verificar a fiação de uma topologia descrita em arquivo, sem montar os
componentes em código.

Formato (v1):

    components:
      - id: words
        role: source
        payload: "pkg.module:WordSource"
        outputs:
          default: {fields: [word]}
      - id: counter
        role: processor
        inputs:
          - {component: words, stream: default, grouping: shuffle}
        outputs: [counts]

Regras de interpretação:
    - `role` ausente → processor
    - `payload` ausente ou nulo → componente esqueleto
    - `stream` ausente em uma entrada → "default"
    - `grouping` ausente em uma entrada → "shuffle"
    - `outputs` pode ser lista de nomes ou mapa nome → {fields, direct}
    - nomes de stream são convertidos com `str` dos dois lados (0 → "0")
    - o mesmo par (component, stream) não pode aparecer duas vezes em `inputs`

Decisões arquiteturais:
    - O payload é mantido como valor opaco (não é importado nem executado)
    - Erros estruturais são tratados como falhas fatais
    - Ids duplicados são rejeitados pelo próprio `TopologyGraph`

Limites explícitos:
    - Não valida a fiação (ver `core.validation`)
    - Não resolve ou importa payloads
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml  # PyYAML

from .errors import (
    InvalidTopologyDescriptionError,
    TopologyFileNotFoundError,
    UnsupportedTopologyFormatError,
)
from .graph import TopologyGraph
from .types import (
    DEFAULT_GROUPING,
    DEFAULT_STREAM_ID,
    Component,
    ComponentDeclaration,
    ComponentRole,
    StreamDeclaration,
    StreamReference,
)


def _read_file(path: Path) -> Any:
    if not path.exists():
        raise TopologyFileNotFoundError(f"Arquivo de topologia não encontrado: {path}")

    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise InvalidTopologyDescriptionError(f"YAML inválido em {path}: {exc}") from exc
    if suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as exc:
                raise InvalidTopologyDescriptionError(f"JSON inválido em {path}: {exc}") from exc
    raise UnsupportedTopologyFormatError(f"Formato não suportado: {path.suffix}")


def _parse_role(raw: Any, component_id: str) -> ComponentRole:
    if raw is None:
        return ComponentRole.PROCESSOR
    try:
        return ComponentRole(raw)
    except ValueError:
        allowed = ", ".join(r.value for r in ComponentRole)
        raise InvalidTopologyDescriptionError(
            f"Componente '{component_id}' com role inválido: {raw!r} (esperado: {allowed})"
        ) from None


def _parse_inputs(raw: Any, component_id: str) -> Dict[StreamReference, str]:
    if raw is None:
        return {}
    if not isinstance(raw, list):
        raise InvalidTopologyDescriptionError(
            f"Componente '{component_id}': inputs deve ser lista, recebido: {type(raw).__name__}"
        )

    inputs: Dict[StreamReference, str] = {}
    for entry in raw:
        if not isinstance(entry, dict) or entry.get("component") is None:
            raise InvalidTopologyDescriptionError(
                f"Componente '{component_id}': cada input exige a chave 'component'"
            )
        stream = entry.get("stream")
        grouping = entry.get("grouping")
        ref = StreamReference(
            component_id=str(entry["component"]),
            stream_id=DEFAULT_STREAM_ID if stream is None else str(stream),
        )
        if ref in inputs:
            raise InvalidTopologyDescriptionError(
                f"Componente '{component_id}': input duplicado {ref}"
            )
        inputs[ref] = DEFAULT_GROUPING if grouping is None else str(grouping)
    return inputs


def _parse_outputs(raw: Any, component_id: str) -> Dict[str, StreamDeclaration]:
    if raw is None:
        return {}
    if isinstance(raw, list):
        return {str(name): StreamDeclaration() for name in raw}
    if not isinstance(raw, dict):
        raise InvalidTopologyDescriptionError(
            f"Componente '{component_id}': outputs deve ser lista ou mapa, "
            f"recebido: {type(raw).__name__}"
        )

    streams: Dict[str, StreamDeclaration] = {}
    for name, spec in raw.items():
        spec = spec or {}
        if not isinstance(spec, dict):
            raise InvalidTopologyDescriptionError(
                f"Componente '{component_id}': stream '{name}' deve ser um mapa"
            )
        fields = spec.get("fields")
        if fields is None:
            fields = []
        if not isinstance(fields, list):
            raise InvalidTopologyDescriptionError(
                f"Componente '{component_id}': fields da stream '{name}' deve ser lista"
            )
        direct = spec.get("direct", False)
        if not isinstance(direct, bool):
            raise InvalidTopologyDescriptionError(
                f"Componente '{component_id}': direct da stream '{name}' deve ser booleano"
            )
        streams[str(name)] = StreamDeclaration(
            fields=tuple(str(f) for f in fields),
            direct=direct,
        )
    return streams


def _parse_component(raw: Any) -> Component:
    if not isinstance(raw, dict):
        raise InvalidTopologyDescriptionError(
            f"Cada componente deve ser um mapa, recebido: {type(raw).__name__}"
        )
    cid = raw.get("id")
    if not isinstance(cid, str) or not cid.strip():
        raise InvalidTopologyDescriptionError("Componente sem 'id' válido")

    return Component(
        id=cid,
        role=_parse_role(raw.get("role"), cid),
        declaration=ComponentDeclaration(
            inputs=_parse_inputs(raw.get("inputs"), cid),
            streams=_parse_outputs(raw.get("outputs"), cid),
        ),
        payload=raw.get("payload"),
    )


def topology_from_dict(data: Mapping[str, Any]) -> TopologyGraph:
    """
    Constrói um `TopologyGraph` a partir de uma descrição já desserializada.

    Args:
        data: Mapa com a chave `components` (lista de componentes).

    Returns:
        TopologyGraph: Grafo pronto para validação.

    Raises:
        InvalidTopologyDescriptionError: Se a estrutura não for válida.
        DuplicateComponentIdError: Se dois componentes compartilharem o id.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidTopologyDescriptionError(
            f"Topology root deve ser dict, recebido: {type(data).__name__}"
        )

    raw_components = data.get("components") or []
    if not isinstance(raw_components, list):
        raise InvalidTopologyDescriptionError(
            f"components deve ser lista, recebido: {type(raw_components).__name__}"
        )

    components: List[Component] = [_parse_component(c) for c in raw_components]
    return TopologyGraph(components)


def load_topology(path: str) -> TopologyGraph:
    """
    Carrega uma descrição de topologia em YAML ou JSON.

    Decisões arquiteturais:
        - O formato é determinado pela extensão do arquivo
        - Arquivos vazios produzem uma topologia vazia

    Args:
        path (str): Caminho do arquivo de descrição.

    Returns:
        TopologyGraph: Grafo descrito no arquivo.

    Raises:
        TopologyFileNotFoundError: Se o arquivo não existir.
        UnsupportedTopologyFormatError: Se a extensão não for suportada.
        InvalidTopologyDescriptionError: Se a estrutura não for válida.
    """
    return topology_from_dict(_read_file(Path(path)))
