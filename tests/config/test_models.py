import pytest
from pydantic import ValidationError

from travel_cost.config.models import (
    DijkstraPlannerModel,
    FixedCongestionModel,
    LinearScanPlannerModel,
    NetworkByName,
    NetworkByPath,
    NetworkModel,
    RegionalCongestionModel,
    RegionModel,
    RoadModel,
    ScenarioModel,
)


def test_scenario_defaults():
    m = ScenarioModel()
    assert m.seed is None
    assert isinstance(m.network, NetworkByName) and m.network.name == "india_metros"
    assert isinstance(m.mechanics.congestion, RegionalCongestionModel)
    assert m.mechanics.congestion.default_range == (2, 7)
    assert m.mechanics.congestion.heavy_max_rate == 9
    assert isinstance(m.mechanics.planner, DijkstraPlannerModel)
    assert m.mechanics.planner.fallback_rate == 6
    assert m.mechanics.speed.base_kmh == 40 and m.mechanics.speed.floor_kmh == 25


def test_region_accepts_camel_case_boundary_shape():
    r = RegionModel.model_validate(
        {
            "name": "Chennai",
            "congestionRange": [3, 8],
            "heavyTraffic": False,
            "nodes": [{"id": "che_tnag", "label": "T. Nagar", "x": 980, "y": 220}],
            "edges": [{"from": "che_tnag", "to": "che_guindy", "distanceKm": 6.0}],
            "hub": "che_tnag",
        }
    )
    assert r.congestion_range == (3, 8)
    assert r.edges[0].from_node == "che_tnag" and r.edges[0].distance_km == 6.0


def test_edges_accept_triples():
    assert RoadModel.model_validate(["a", "b", 2.5]).to_node == "b"
    n = NetworkModel.model_validate({"regions": [], "interRegionEdges": [["h1", "h2", 700]]})
    assert n.inter_region_edges[0].from_hub == "h1" and n.inter_region_edges[0].distance_km == 700


def test_discriminated_unions():
    m = ScenarioModel.model_validate(
        {
            "network": {"by": "path", "file": "~/net.yaml"},
            "mechanics": {
                "congestion": {"kind": "fixed", "rates": {"a|b": 3}},
                "planner": {"kind": "linear_scan", "fallback_rate": 5},
            },
        }
    )
    assert isinstance(m.network, NetworkByPath) and not m.network.file.startswith("~")
    assert isinstance(m.mechanics.congestion, FixedCongestionModel)
    assert isinstance(m.mechanics.planner, LinearScanPlannerModel)


@pytest.mark.parametrize(
    "mechanics",
    [
        {"planner": {"kind": "dijkstra", "fallback_rate": 0}},
        {"planner": {"kind": "bellman_ford"}},
        {"congestion": {"kind": "regional", "default_range": [7, 2]}},
        {"congestion": {"kind": "regional", "heavy_max_rate": 11}},
        {"congestion": {"kind": "fixed", "rates": {"ab": 3}}},
        {"congestion": {"kind": "fixed", "rates": {"a|b": 12}}},
        {"speed": {"kind": "linear", "floor_kmh": 0}},
    ],
)
def test_invalid_mechanics_are_rejected(mechanics):
    with pytest.raises(ValidationError):
        ScenarioModel.model_validate({"mechanics": mechanics})


def test_unknown_keys_are_rejected():
    with pytest.raises(ValidationError):
        ScenarioModel.model_validate({"sede": 3})
