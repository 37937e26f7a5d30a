import pytest

from conftest import region
from travel_cost.domain.errors import ConfigurationError, UnknownNode
from travel_cost.domain.mechanics.graph_builder import build_graph, build_graph_from_network


def test_builtin_network_shape(india_graph):
    g = india_graph
    assert len(g.nodes) == 25
    assert len(g.edges) == 33
    assert set(g.regions) == {"Hyderabad", "Mumbai", "Chennai", "Delhi", "Bangalore"}
    assert sum(1 for e in g.edges if e.is_inter_region) == 10
    assert g.regions["Mumbai"].heavy_traffic and not g.regions["Hyderabad"].heavy_traffic


def test_every_edge_endpoint_exists_and_adjacency_is_symmetric(india_graph):
    g = india_graph
    for e in g.edges:
        assert e.a in g.nodes and e.b in g.nodes
        assert any(nb.node == e.b and nb.edge is e for nb in g.neighbors(e.a))
        assert any(nb.node == e.a and nb.edge is e for nb in g.neighbors(e.b))
    assert sum(len(nbs) for nbs in g.adjacency.values()) == 2 * len(g.edges)


def test_nodes_keep_label_position_and_region(india_graph):
    n = india_graph.require("hyd_lbnagar")
    assert n.label == "L.B. Nagar"
    assert (n.point.x, n.point.y) == (940, 540)
    assert india_graph.region_of("hyd_lbnagar").name == "Hyderabad"


def test_edge_lookup_is_order_insensitive(india_graph):
    e1 = india_graph.edge_between("hyd_kothapet", "hyd_lbnagar")
    e2 = india_graph.edge_between("hyd_lbnagar", "hyd_kothapet")
    assert e1 is e2 and e1.distance_km == 4.0
    assert india_graph.edge_between("hyd_lbnagar", "che_marina") is None


def test_graph_tables_are_read_only(india_graph):
    with pytest.raises(TypeError):
        india_graph.adjacency["x"] = ()
    with pytest.raises(TypeError):
        india_graph.nodes["x"] = None


def test_require_unknown_node(india_graph):
    with pytest.raises(UnknownNode) as ei:
        india_graph.require("nowhere")
    assert ei.value.node_id == "nowhere"


def test_hub_must_belong_to_region():
    with pytest.raises(ConfigurationError, match="hub"):
        build_graph([region("R", ["a", "b"], [("a", "b", 1.0)], hub="zz")])


def test_edge_to_unknown_node_is_fatal():
    with pytest.raises(ConfigurationError, match="unknown node 'ghost'"):
        build_graph([region("R", ["a", "b"], [("a", "ghost", 1.0)])])


def test_inter_region_edge_to_unknown_node_is_fatal():
    with pytest.raises(ConfigurationError, match="unknown node"):
        build_graph([region("R", ["a"], [])], [("a", "ghost", 10.0)])


def test_negative_distance_is_fatal():
    with pytest.raises(ConfigurationError, match="distance"):
        build_graph([region("R", ["a", "b"], [("a", "b", -0.5)])])


def test_zero_distance_is_allowed():
    g = build_graph([region("R", ["a", "b"], [("a", "b", 0.0)])])
    assert g.edge_between("a", "b").distance_km == 0.0


def test_node_declared_in_two_regions_is_fatal():
    with pytest.raises(ConfigurationError, match="declared in"):
        build_graph([region("R1", ["a"], []), region("R2", ["a"], [])])


def test_intra_region_edge_cannot_cross_regions():
    with pytest.raises(ConfigurationError, match="belongs to"):
        build_graph([region("R1", ["a"], []), region("R2", ["b"], [("b", "a", 2.0)])])


def test_inter_region_edge_must_join_hubs():
    regions = [region("R1", ["a", "a2"], [("a", "a2", 1.0)]), region("R2", ["b"], [])]
    with pytest.raises(ConfigurationError, match="not a region hub"):
        build_graph(regions, [("a2", "b", 50.0)])


def test_duplicate_road_is_fatal():
    with pytest.raises(ConfigurationError, match="already declared"):
        build_graph([region("R", ["a", "b"], [("a", "b", 1.0), ("b", "a", 2.0)])])


def test_self_loop_road_is_fatal():
    with pytest.raises(ConfigurationError, match="loops back on itself"):
        build_graph([region("R", ["a", "b"], [("a", "b", 1.0), ("a", "a", 1.0)])])


def test_hub_to_itself_is_fatal():
    regions = [region("A", ["a"], []), region("B", ["b"], [])]
    with pytest.raises(ConfigurationError, match="loops back on itself"):
        build_graph(regions, [("a", "a", 5.0)])


@pytest.mark.parametrize("rate_range", [(0, 5), (6, 3), (2, 11)])
def test_rate_range_outside_bounds_is_fatal(rate_range):
    with pytest.raises(ConfigurationError, match="congestion range"):
        build_graph([region("R", ["a"], [], rate_range=rate_range)])


def test_malformed_definition_becomes_configuration_error():
    with pytest.raises(ConfigurationError):
        build_graph([{"name": "R", "nodes": []}])
    with pytest.raises(ConfigurationError):
        build_graph_from_network({"regions": "nope"})


def test_graph_built_hook_reports_counts():
    seen = {}

    class _Hooks:
        def graph_built(self, **kw):
            seen.update(kw)

    build_graph([region("R", ["a", "b"], [("a", "b", 1.0)])], hooks=_Hooks())
    assert seen == {"nodes": 2, "edges": 1, "regions": 1}
