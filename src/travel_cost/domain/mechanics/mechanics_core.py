# travel_cost/domain/mechanics/mechanics_core.py
import itertools
import math
import threading
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from travel_cost.app import protocols
from travel_cost.app.protocols import CongestionSampler, RoutePlanner, SpeedModel
from travel_cost.domain.entities.route import (
    QueryOutcome,
    RouteFound,
    RouteMetrics,
    RouteQuery,
    RouteRejected,
)
from travel_cost.domain.errors import RoutingError
from travel_cost.domain.mechanics.congestion import CongestionSnapshot
from travel_cost.domain.mechanics.graph_builder import RoadGraph
from travel_cost.domain.mechanics.route_metrics import measure_route
from travel_cost.engine.hooks import NoopHooks, RouteHooks
from travel_cost.engine.rng import RNGRegistry


@dataclass
class Mechanics(protocols.Mechanics):
    """
    Per-query pipeline: congestion snapshot -> cheapest path -> metrics.

    The graph is shared read-only; each query gets its own generator
    (rng_registry.fresh("congestion", query_id)), snapshot and result, so query()
    may be called from several threads at once.
    """

    graph: RoadGraph
    sampler: CongestionSampler
    planner: RoutePlanner
    speed: SpeedModel
    rng_registry: RNGRegistry | None = None
    hooks: RouteHooks = field(default_factory=NoopHooks)
    _ids: itertools.count = field(default_factory=itertools.count, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def _next_ids(self, n: int = 1) -> list[int]:
        with self._lock:
            return [next(self._ids) for _ in range(n)]

    def snapshot(self, query_id: int) -> CongestionSnapshot:
        rng = self.rng_registry.fresh("congestion", query_id) if self.rng_registry else None
        return self.sampler.snapshot(rng)

    def measure(self, path: Sequence[str], snapshot: CongestionSnapshot) -> RouteMetrics:
        return measure_route(
            self.graph, path, snapshot, speed=self.speed, fallback_rate=self.planner.fallback_rate
        )

    def query(self, source: str, destination: str) -> QueryOutcome:
        (qid,) = self._next_ids()
        return self._run(RouteQuery(source, destination), qid)

    def query_many(
        self, queries: Sequence[RouteQuery], *, max_workers: int | None = None
    ) -> list[QueryOutcome]:
        """Run independent queries on a thread pool; outcomes come back in input order."""
        qids = self._next_ids(len(queries))  # fixed up front so seeded runs stay reproducible
        with ThreadPoolExecutor(max_workers=max_workers) as ex:
            return list(ex.map(self._run, queries, qids))

    def _run(self, q: RouteQuery, qid: int) -> QueryOutcome:
        t0 = time.perf_counter()
        self.hooks.query_start(query_id=qid, source=q.source, destination=q.destination)
        snapshot = self.snapshot(qid)
        try:
            route = self.planner.plan(self.graph, q.source, q.destination, snapshot)
        except RoutingError as e:
            rejected = RouteRejected(q, e)
            self.hooks.route_rejected(
                query_id=qid, outcome=rejected, wall_ms=(time.perf_counter() - t0) * 1000
            )
            return rejected

        metrics = self.measure(route.path, snapshot)
        if not math.isclose(metrics.total_cost, route.cost, rel_tol=1e-9, abs_tol=1e-9):
            self.hooks.error(
                query_id=qid,
                reason="cost_mismatch",
                planner_cost=route.cost,
                metrics_cost=metrics.total_cost,
            )
            raise RuntimeError(
                f"planner cost {route.cost} != recomputed path cost {metrics.total_cost}"
            )

        found = RouteFound(
            q,
            route,
            metrics,
            labels=tuple(self.graph.label(n) for n in route.path),
            snapshot=snapshot,
        )
        self.hooks.route_found(
            query_id=qid, outcome=found, wall_ms=(time.perf_counter() - t0) * 1000
        )
        return found
