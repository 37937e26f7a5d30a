import math
from collections.abc import Sequence

from travel_cost.app.protocols import SpeedModel
from travel_cost.domain.entities.route import RouteLeg, RouteMetrics
from travel_cost.domain.mechanics.congestion import CongestionSnapshot
from travel_cost.domain.mechanics.graph_builder import RoadGraph
from travel_cost.domain.mechanics.route_planners import DEFAULT_FALLBACK_RATE


class LinearCongestionSpeed(SpeedModel):
    """speed = max(base - rate * per_rate, floor); floor keeps speed > 0."""

    def __init__(self, base_kmh: float = 40.0, per_rate_kmh: float = 3.0, floor_kmh: float = 25.0):
        if floor_kmh <= 0:
            raise ValueError("floor_kmh must be > 0")
        self.base, self.per_rate, self.floor = base_kmh, per_rate_kmh, floor_kmh

    def speed_kmh(self, rate: int) -> float:
        return max(self.base - rate * self.per_rate, self.floor)


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def measure_route(
    graph: RoadGraph,
    path: Sequence[str],
    snapshot: CongestionSnapshot,
    *,
    speed: SpeedModel | None = None,
    fallback_rate: int = DEFAULT_FALLBACK_RATE,
) -> RouteMetrics:
    """
    Totals along `path` under the snapshot that produced it.

    total_cost is recomputed edge by edge, so it doubles as a check on the planner's
    reported cost. Time is rounded half-up to whole minutes, average congestion to
    one decimal. A single-node path measures as all zeros.
    """
    if len(path) <= 1:
        return RouteMetrics.empty()
    speed = speed or LinearCongestionSpeed()

    legs: list[RouteLeg] = []
    for a, b in zip(path, path[1:]):
        edge = graph.edge_between(a, b)
        if edge is None:
            raise ValueError(f"path steps between {a!r} and {b!r}, which share no road")
        rate = snapshot.rate(a, b, fallback_rate)
        d = edge.distance_km
        legs.append(RouteLeg(a, b, d, rate, d * rate, d / speed.speed_kmh(rate) * 60.0))

    return RouteMetrics(
        total_distance_km=sum(leg.distance_km for leg in legs),
        total_cost=sum(leg.cost for leg in legs),
        estimated_time_min=round_half_up(sum(leg.minutes for leg in legs)),
        average_congestion=round(sum(leg.rate for leg in legs) / len(legs), 1),
        legs=tuple(legs),
    )
