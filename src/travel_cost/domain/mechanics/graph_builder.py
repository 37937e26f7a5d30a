# travel_cost/domain/mechanics/graph_builder.py
from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from pydantic import ValidationError

from travel_cost.config.models import (
    MAX_RATE,
    MIN_RATE,
    InterRegionRoadModel,
    NetworkModel,
    RegionModel,
)
from travel_cost.domain.entities.geography import Edge, EdgeKey, Neighbor, Node, Point, Region
from travel_cost.domain.errors import ConfigurationError, UnknownNode
from travel_cost.engine.hooks import NoopHooks, RouteHooks


class RoadGraph:
    """
    Immutable undirected road graph.
    Every edge appears in the adjacency of both endpoints; all lookup tables are
    read-only views owned by the instance, so one graph can serve concurrent queries.
    """

    def __init__(
        self,
        nodes: Mapping[str, Node],
        regions: Mapping[str, Region],
        edges: Iterable[Edge],
    ):
        self.edges: tuple[Edge, ...] = tuple(edges)
        adjacency: dict[str, list[Neighbor]] = {nid: [] for nid in nodes}
        by_key: dict[EdgeKey, Edge] = {}
        for e in self.edges:
            adjacency[e.a].append(Neighbor(e.b, e.distance_km, e))
            adjacency[e.b].append(Neighbor(e.a, e.distance_km, e))
            by_key[e.key] = e

        self.nodes: Mapping[str, Node] = MappingProxyType(dict(nodes))
        self.regions: Mapping[str, Region] = MappingProxyType(dict(regions))
        self.adjacency: Mapping[str, tuple[Neighbor, ...]] = MappingProxyType(
            {nid: tuple(nbs) for nid, nbs in adjacency.items()}
        )
        self._by_key: Mapping[EdgeKey, Edge] = MappingProxyType(by_key)

    def require(self, node_id: str) -> Node:
        try:
            return self.nodes[node_id]
        except KeyError:
            raise UnknownNode(node_id) from None

    def neighbors(self, node_id: str) -> tuple[Neighbor, ...]:
        return self.adjacency[node_id]

    def edge_between(self, a: str, b: str) -> Edge | None:
        return self._by_key.get((a, b) if a <= b else (b, a))

    def region_of(self, node_id: str) -> Region:
        return self.regions[self.require(node_id).region]

    def label(self, node_id: str) -> str:
        return self.require(node_id).label


# ---------------------------- building ----------------------------


def _as_models(items: Iterable, model: type) -> list:
    try:
        return [x if isinstance(x, model) else model.model_validate(x) for x in items]
    except ValidationError as e:
        raise ConfigurationError(f"invalid {model.__name__}: {e}") from e


def _check_distance(km: float, where: str) -> float:
    if not math.isfinite(km) or km < 0:
        raise ConfigurationError(f"{where}: distance must be a finite value >= 0, got {km}")
    return float(km)


def build_graph(
    regions: Iterable[RegionModel | Mapping],
    inter_region_edges: Iterable[InterRegionRoadModel | Mapping] = (),
    *,
    hooks: RouteHooks | None = None,
) -> RoadGraph:
    """
    Assemble the unified graph from region definitions plus hub-to-hub roads.

    Raises ConfigurationError on dangling node references, a hub outside its own
    region, negative distances, duplicate node ids, duplicate or self-loop roads,
    and rate ranges outside [1, 10]. Bad input is never dropped or repaired.
    """
    region_models: list[RegionModel] = _as_models(regions, RegionModel)
    inter_models: list[InterRegionRoadModel] = _as_models(inter_region_edges, InterRegionRoadModel)

    nodes: dict[str, Node] = {}
    built: dict[str, Region] = {}
    edges: list[Edge] = []
    seen: dict[EdgeKey, str] = {}

    def _add(edge: Edge, where: str) -> None:
        if edge.a == edge.b:
            raise ConfigurationError(f"{where}: road {edge.a}-{edge.b} loops back on itself")
        if edge.key in seen:
            raise ConfigurationError(
                f"{where}: road {edge.a}-{edge.b} already declared in {seen[edge.key]}"
            )
        seen[edge.key] = where
        edges.append(edge)

    for rm in region_models:
        if rm.name in built:
            raise ConfigurationError(f"region {rm.name!r} declared twice")
        lo, hi = rm.congestion_range
        if not MIN_RATE <= lo <= hi <= MAX_RATE:
            raise ConfigurationError(
                f"region {rm.name!r}: congestion range {rm.congestion_range} "
                f"must satisfy {MIN_RATE} <= min <= max <= {MAX_RATE}"
            )

        members: list[str] = []
        for nm in rm.nodes:
            if nm.id in nodes:
                raise ConfigurationError(
                    f"node {nm.id!r} declared in {rm.name!r} and {nodes[nm.id].region!r}"
                )
            nodes[nm.id] = Node(nm.id, nm.label or nm.id, Point(nm.x, nm.y), rm.name)
            members.append(nm.id)

        if rm.hub not in members:
            raise ConfigurationError(f"region {rm.name!r}: hub {rm.hub!r} is not one of its nodes")

        own: list[Edge] = []
        for road in rm.edges:
            for end in (road.from_node, road.to_node):
                if end not in nodes:
                    raise ConfigurationError(
                        f"region {rm.name!r}: road references unknown node {end!r}"
                    )
                if nodes[end].region != rm.name:
                    raise ConfigurationError(
                        f"region {rm.name!r}: road endpoint {end!r} "
                        f"belongs to {nodes[end].region!r}"
                    )
            km = _check_distance(road.distance_km, f"region {rm.name!r}")
            edge = Edge(road.from_node, road.to_node, km, region=rm.name)
            _add(edge, f"region {rm.name!r}")
            own.append(edge)

        built[rm.name] = Region(
            name=rm.name,
            rate_range=(lo, hi),
            heavy_traffic=rm.heavy_traffic,
            hub=rm.hub,
            nodes=tuple(members),
            edges=tuple(own),
        )

    hubs = {r.hub for r in built.values()}
    for road in inter_models:
        for end in (road.from_hub, road.to_hub):
            if end not in nodes:
                raise ConfigurationError(f"inter-region road references unknown node {end!r}")
            if end not in hubs:
                raise ConfigurationError(f"inter-region road endpoint {end!r} is not a region hub")
        km = _check_distance(road.distance_km, "inter-region road")
        _add(Edge(road.from_hub, road.to_hub, km, region=None), "inter-region roads")

    graph = RoadGraph(nodes, built, edges)
    (hooks or NoopHooks()).graph_built(
        nodes=len(graph.nodes), edges=len(graph.edges), regions=len(graph.regions)
    )
    return graph


def build_graph_from_network(
    network: NetworkModel | Mapping, *, hooks: RouteHooks | None = None
) -> RoadGraph:
    if not isinstance(network, NetworkModel):
        try:
            network = NetworkModel.model_validate(network)
        except ValidationError as e:
            raise ConfigurationError(f"invalid network definition: {e}") from e
    return build_graph(network.regions, network.inter_region_edges, hooks=hooks)
