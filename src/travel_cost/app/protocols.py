from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from travel_cost.domain.entities.route import QueryOutcome, RouteMetrics, RouteQuery, RouteResult


# ------------- Mechanics --------------------
@runtime_checkable
class RandomSource(Protocol):
    """
    Injectable randomness; the numpy Generator API subset the samplers use.
    integers(low, high) draws from [low, high) like numpy.random.Generator.
    """

    def integers(self, low: int, high: int) -> int: ...


@runtime_checkable
class CongestionSampler(Protocol):
    """
    Responsibilities:
      • Assign one integer congestion rate to every edge of the graph.
      • Draw from `rng` when given, otherwise from the sampler's own source.
    """

    def snapshot(self, rng: RandomSource | None = None): ...


@runtime_checkable
class RoutePlanner(Protocol):
    """
    Responsibilities:
      • Minimize sum(distance * rate) between two nodes under one snapshot.
      • Raise UnknownNode / NoRouteFound for bad ids or unreachable targets.
    """

    fallback_rate: int

    def plan(self, graph, source: str, destination: str, snapshot) -> RouteResult: ...


@runtime_checkable
class SpeedModel(Protocol):
    """Speed in km/h for an edge at the given congestion rate. Must be > 0."""

    def speed_kmh(self, rate: int) -> float: ...


@runtime_checkable
class Mechanics(Protocol):
    """
    Convenience façade bundling the core routing components.
    One call runs sample -> plan -> measure for a single query.
    """

    sampler: CongestionSampler
    planner: RoutePlanner
    speed: SpeedModel

    def query(self, source: str, destination: str) -> QueryOutcome: ...
    def query_many(
        self, queries: Sequence[RouteQuery], *, max_workers: int | None = None
    ) -> list[QueryOutcome]: ...
    def measure(self, path: Sequence[str], snapshot) -> RouteMetrics: ...
