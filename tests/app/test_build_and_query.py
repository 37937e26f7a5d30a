import json

import pytest
import yaml

from conftest import region
from travel_cost.app.build import build
from travel_cost.config.models import ScenarioModel
from travel_cost.domain.errors import ConfigurationError
from travel_cost.io.recorder import MemorySink, Recorder
from travel_cost.runtime.registries import register_network


def _inline(regions, inter=()):
    return {"by": "inline", "network": {"regions": regions, "interRegionEdges": [list(e) for e in inter]}}


def test_build_default_scenario_uses_builtin_network():
    app = build(ScenarioModel(seed=1), use_logging=False)
    assert len(app.graph.nodes) == 25
    out = app.mechanics.query("hyd_dilsukhnagar", "del_dwarka")
    assert out.ok
    assert out.route.path[0] == "hyd_dilsukhnagar" and out.route.path[-1] == "del_dwarka"
    # Hyderabad -> Delhi has to pass through both hubs
    assert "hyd_paradise" in out.route.path and "del_cp" in out.route.path


def test_build_from_mapping_with_pinned_congestion():
    cfg = {
        "name": "pinned",
        "seed": 3,
        "network": _inline(
            [region("R1", ["a", "b"], [("a", "b", 2.0)]), region("R2", ["c"], [])],
            inter=[("a", "c", 100.0)],
        ),
        "mechanics": {"congestion": {"kind": "fixed", "rates": {"a|c": 4}, "default_rate": 2}},
    }
    sink = MemorySink()
    app = build(cfg, recorder=Recorder(sink))
    out = app.mechanics.query("b", "c")
    assert out.route.path == ("b", "a", "c")
    assert out.route.cost == 404.0
    assert sink.records == [out.to_dict()]


def test_rejections_reach_the_recorder():
    sink = MemorySink()
    app = build(ScenarioModel(seed=1), recorder=Recorder(sink))
    out = app.mechanics.query("hyd_lbnagar", "nope")
    assert not out.ok
    assert sink.records[-1]["error"] == "unknown_node"


def test_invalid_network_aborts_build():
    cfg = {"network": _inline([region("R", ["a"], [("a", "ghost", 1.0)])])}
    with pytest.raises(ConfigurationError):
        build(cfg, use_logging=False)


def test_invalid_scenario_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        build({"mechanics": {"planner": {"kind": "nope"}}}, use_logging=False)


def test_unknown_builtin_network():
    with pytest.raises(ConfigurationError, match="no builtin network"):
        build({"network": {"by": "name", "name": "atlantis"}}, use_logging=False)


def test_registered_network_by_name():
    register_network("tiny", {"regions": [region("T", ["x", "y"], [("x", "y", 1.0)])]})
    app = build({"seed": 0, "network": {"by": "name", "name": "tiny"}}, use_logging=False)
    assert set(app.graph.nodes) == {"x", "y"}


@pytest.mark.parametrize("suffix", [".json", ".yaml"])
def test_network_loaded_from_file(tmp_path, suffix):
    net = {"regions": [region("F", ["p", "q"], [("p", "q", 5.0)])]}
    path = tmp_path / f"net{suffix}"
    path.write_text(json.dumps(net) if suffix == ".json" else yaml.safe_dump(net))
    app = build({"seed": 0, "network": {"by": "path", "file": str(path)}}, use_logging=False)
    assert app.mechanics.query("p", "q").metrics.total_distance_km == 5.0


def test_missing_network_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        build({"network": {"by": "path", "file": str(tmp_path / "gone.json")}}, use_logging=False)
