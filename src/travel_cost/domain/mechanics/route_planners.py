import heapq
import math
from abc import ABC, abstractmethod

from travel_cost.app.protocols import RoutePlanner
from travel_cost.domain.entities.route import RouteResult
from travel_cost.domain.errors import NoRouteFound
from travel_cost.domain.mechanics.congestion import CongestionSnapshot
from travel_cost.domain.mechanics.graph_builder import RoadGraph

# Midpoint of the observed [2, 10] rate span. Used, never re-sampled, when a
# snapshot has no entry for an edge.
DEFAULT_FALLBACK_RATE = 6


def _walk_back(prev: dict[str, str], source: str, destination: str) -> tuple[str, ...]:
    path = [destination]
    while path[-1] != source:
        path.append(prev[path[-1]])
    path.reverse()
    return tuple(path)


class _LabelingPlanner(RoutePlanner, ABC):
    """
    Shared contract for cost-minimizing label-setting search.
    Edge weight = distance_km * rate. Among equal tentative costs the lowest node id
    settles first; relaxations use strict '<' so the first predecessor found is kept.
    """

    def __init__(self, fallback_rate: int = DEFAULT_FALLBACK_RATE):
        self.fallback_rate = fallback_rate

    def plan(
        self, graph: RoadGraph, source: str, destination: str, snapshot: CongestionSnapshot
    ) -> RouteResult:
        graph.require(source)
        graph.require(destination)
        if source == destination:
            return RouteResult((source,), 0.0)
        best, prev = self._search(graph, source, destination, snapshot)
        if destination not in best:
            raise NoRouteFound(source, destination)
        return RouteResult(_walk_back(prev, source, destination), best[destination])

    def weight(self, snapshot: CongestionSnapshot, u: str, v: str, distance_km: float) -> float:
        return distance_km * snapshot.rate(u, v, self.fallback_rate)

    @abstractmethod
    def _search(self, graph, source, destination, snapshot):
        """Return (best cost per reached node, predecessor map)."""


class DijkstraRoutePlanner(_LabelingPlanner):
    """Binary-heap Dijkstra, O((V + E) log V)."""

    def _search(self, graph, source, destination, snapshot):
        best: dict[str, float] = {source: 0.0}
        prev: dict[str, str] = {}
        settled: set[str] = set()
        heap: list[tuple[float, str]] = [(0.0, source)]
        while heap:
            cost, u = heapq.heappop(heap)
            if u in settled:
                continue  # stale entry
            if u == destination:
                break
            settled.add(u)
            for nb in graph.neighbors(u):
                v = nb.node
                if v in settled:
                    continue
                c = cost + self.weight(snapshot, u, v, nb.distance_km)
                if c < best.get(v, math.inf):
                    best[v], prev[v] = c, u
                    heapq.heappush(heap, (c, v))
        return best, prev


class LinearScanRoutePlanner(_LabelingPlanner):
    """O(V^2) Dijkstra with a linear scan for the next node; same results as the heap."""

    def _search(self, graph, source, destination, snapshot):
        best: dict[str, float] = {source: 0.0}
        prev: dict[str, str] = {}
        settled: set[str] = set()
        while True:
            frontier = [(c, n) for n, c in best.items() if n not in settled]
            if not frontier:
                break
            cost, u = min(frontier)
            if u == destination:
                break
            settled.add(u)
            for nb in graph.neighbors(u):
                v = nb.node
                if v in settled:
                    continue
                c = cost + self.weight(snapshot, u, v, nb.distance_km)
                if c < best.get(v, math.inf):
                    best[v], prev[v] = c, u
        return best, prev
