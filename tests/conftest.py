import pytest

from travel_cost.data.india_metros import INDIA_METROS
from travel_cost.domain.mechanics.graph_builder import build_graph, build_graph_from_network


def region(name, nodes, edges, hub=None, rate_range=(1, 10), heavy=False):
    """Compact region definition; nodes are bare ids."""
    return {
        "name": name,
        "congestionRange": list(rate_range),
        "heavyTraffic": heavy,
        "nodes": [{"id": n, "label": n.upper(), "x": 0, "y": 0} for n in nodes],
        "edges": [list(e) for e in edges],
        "hub": hub or nodes[0],
    }


@pytest.fixture
def india_graph():
    return build_graph_from_network(INDIA_METROS)


@pytest.fixture
def square_graph():
    # a-b-d and a-c-d tie at equal cost under uniform rates
    return build_graph(
        [region("Square", ["a", "b", "c", "d"], [("a", "b", 1.0), ("a", "c", 1.0), ("b", "d", 1.0), ("c", "d", 1.0)])]
    )


@pytest.fixture
def split_graph():
    # two regions with no road between them
    return build_graph(
        [
            region("West", ["w1", "w2"], [("w1", "w2", 3.0)]),
            region("East", ["e1", "e2"], [("e1", "e2", 4.0)]),
        ]
    )
