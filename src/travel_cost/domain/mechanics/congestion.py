# travel_cost/domain/mechanics/congestion.py
from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from travel_cost.app.protocols import CongestionSampler, RandomSource
from travel_cost.domain.entities.geography import Edge, EdgeKey, edge_key
from travel_cost.domain.errors import ConfigurationError
from travel_cost.domain.mechanics.graph_builder import RoadGraph


class CongestionSnapshot(Mapping[EdgeKey, int]):
    """Read-only edge -> rate assignment for one query. Keys are unordered pairs."""

    def __init__(self, rates: Mapping[EdgeKey, int]):
        self._rates = MappingProxyType({edge_key(a, b): int(r) for (a, b), r in rates.items()})

    def __getitem__(self, key: EdgeKey) -> int:
        return self._rates[edge_key(*key)]

    def __iter__(self) -> Iterator[EdgeKey]:
        return iter(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    def __repr__(self) -> str:
        return f"CongestionSnapshot({dict(self._rates)!r})"

    def rate(self, a: str, b: str, default: int | None = None) -> int | None:
        return self._rates.get(edge_key(a, b), default)

    def with_rate(self, a: str, b: str, rate: int) -> CongestionSnapshot:
        """Copy with one edge re-rated; the original is left untouched."""
        return CongestionSnapshot({**self._rates, edge_key(a, b): rate})


def parse_rate_key(key: str | tuple[str, str]) -> EdgeKey:
    if isinstance(key, str):
        a, _, b = key.partition("|")
        return edge_key(a, b)
    return edge_key(*key)


class RegionalCongestionSampler(CongestionSampler):
    """
    Intra-region roads draw from their region's range; inter-region roads draw from
    `default_range`, with the upper bound widened to `heavy_max_rate` when either
    endpoint sits in a heavy-traffic region. Draws are independent per edge and call.
    """

    def __init__(
        self,
        graph: RoadGraph,
        *,
        rng: RandomSource | None = None,
        default_range: tuple[int, int] = (2, 7),
        heavy_max_rate: int = 9,
    ):
        self.G, self.rng = graph, rng
        self.default_range = default_range
        self.heavy_max_rate = heavy_max_rate

    def bounds(self, edge: Edge) -> tuple[int, int]:
        if not edge.is_inter_region:
            return self.G.regions[edge.region].rate_range
        lo, hi = self.default_range
        if self.G.region_of(edge.a).heavy_traffic or self.G.region_of(edge.b).heavy_traffic:
            hi = max(hi, self.heavy_max_rate)
        return lo, hi

    def snapshot(self, rng: RandomSource | None = None) -> CongestionSnapshot:
        g = rng if rng is not None else self.rng
        if g is None:
            raise ValueError("RegionalCongestionSampler needs an rng")
        rates = {}
        for e in self.G.edges:
            lo, hi = self.bounds(e)
            rates[e.key] = int(g.integers(lo, hi + 1))
        return CongestionSnapshot(rates)


class FixedCongestionSampler(CongestionSampler):
    """Pinned rates; edges without an entry get `default_rate`. Ignores randomness."""

    def __init__(
        self,
        graph: RoadGraph,
        rates: Mapping[str | tuple[str, str], int] | None = None,
        *,
        default_rate: int = 6,
    ):
        self.G = graph
        pinned = {parse_rate_key(k): int(v) for k, v in (rates or {}).items()}
        for a, b in pinned:
            if graph.edge_between(a, b) is None:
                raise ConfigurationError(f"pinned rate for unknown road {a}|{b}")
        self._snapshot = CongestionSnapshot(
            {e.key: pinned.get(e.key, default_rate) for e in graph.edges}
        )

    def snapshot(self, rng: RandomSource | None = None) -> CongestionSnapshot:
        return self._snapshot
