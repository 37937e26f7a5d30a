# travel_cost/domain/mechanics/mechanics_factory.py

from travel_cost.config.models import MechanicsModel
from travel_cost.domain.mechanics.graph_builder import RoadGraph
from travel_cost.domain.mechanics.mechanics_core import Mechanics
from travel_cost.engine.hooks import NoopHooks, RouteHooks
from travel_cost.engine.rng import RNGRegistry
from travel_cost.runtime.registries import make_congestion, make_planner, make_speed


def build_mechanics(
    cfg: MechanicsModel,
    graph: RoadGraph,
    rng_registry: RNGRegistry,
    *,
    hooks: RouteHooks | None = None,
) -> Mechanics:
    sampler = make_congestion(
        cfg.congestion, deps={"graph": graph, "rng": rng_registry.stream("congestion")}
    )
    planner = make_planner(cfg.planner)
    speed = make_speed(cfg.speed)

    return Mechanics(
        graph=graph,
        sampler=sampler,
        planner=planner,
        speed=speed,
        rng_registry=rng_registry,
        hooks=hooks or NoopHooks(),
    )
