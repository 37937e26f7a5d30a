from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal

from travel_cost.domain.errors import RoutingError


@dataclass(frozen=True)
class RouteQuery:
    source: str
    destination: str

    @classmethod
    def from_dict(cls, d: Mapping) -> RouteQuery:
        # boundary shape is {sourceNodeId, destinationNodeId}
        return cls(source=d["sourceNodeId"], destination=d["destinationNodeId"])


@dataclass(frozen=True)
class RouteResult:
    path: tuple[str, ...]  # source first, destination last
    cost: float


@dataclass(frozen=True)
class RouteLeg:
    source: str
    target: str
    distance_km: float
    rate: int
    cost: float
    minutes: float


@dataclass(frozen=True)
class RouteMetrics:
    total_distance_km: float
    total_cost: float
    estimated_time_min: int
    average_congestion: float
    legs: tuple[RouteLeg, ...] = ()

    @classmethod
    def empty(cls) -> RouteMetrics:
        return cls(0.0, 0.0, 0, 0.0)


@dataclass(frozen=True)
class RouteFound:
    query: RouteQuery
    route: RouteResult
    metrics: RouteMetrics
    labels: tuple[str, ...] = ()
    snapshot: Mapping | None = field(default=None, repr=False, compare=False)  # edge -> rate
    ok: Literal[True] = field(default=True, init=False)

    def to_dict(self) -> dict:
        m = self.metrics
        return {
            "path": list(self.route.path),
            "labels": list(self.labels),
            "totalCost": round(self.route.cost, 2),
            "totalDistanceKm": round(m.total_distance_km, 2),
            "estimatedTimeMin": m.estimated_time_min,
            "averageCongestion": m.average_congestion,
            "legs": [
                {
                    "from": leg.source,
                    "to": leg.target,
                    "distanceKm": leg.distance_km,
                    "rate": leg.rate,
                    "cost": round(leg.cost, 2),
                }
                for leg in m.legs
            ],
        }


@dataclass(frozen=True)
class RouteRejected:
    query: RouteQuery
    error: RoutingError
    ok: Literal[False] = field(default=False, init=False)

    @property
    def reason(self) -> str:
        return self.error.reason

    def to_dict(self) -> dict:
        return {
            "sourceNodeId": self.query.source,
            "destinationNodeId": self.query.destination,
            "error": self.reason,
            "message": str(self.error),
        }


QueryOutcome = RouteFound | RouteRejected
