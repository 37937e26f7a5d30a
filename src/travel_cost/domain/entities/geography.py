from dataclasses import dataclass

EdgeKey = tuple[str, str]


def edge_key(a: str, b: str) -> EdgeKey:
    """Unordered pair, normalized so (a, b) and (b, a) share one key."""
    return (a, b) if a <= b else (b, a)


# Core graph types used by mechanics
@dataclass(frozen=True)
class Point:
    x: float  # display units, passed through to renderers
    y: float


@dataclass(frozen=True)
class Node:
    id: str
    label: str
    point: Point
    region: str


@dataclass(frozen=True)
class Edge:
    a: str
    b: str
    distance_km: float
    region: str | None = None  # None => inter-region (hub to hub)

    @property
    def key(self) -> EdgeKey:
        return edge_key(self.a, self.b)

    @property
    def is_inter_region(self) -> bool:
        return self.region is None


@dataclass(frozen=True)
class Region:
    name: str
    rate_range: tuple[int, int]
    heavy_traffic: bool
    hub: str
    nodes: tuple[str, ...]
    edges: tuple[Edge, ...]


@dataclass(frozen=True)
class Neighbor:
    node: str
    distance_km: float
    edge: Edge
