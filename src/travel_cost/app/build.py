# travel_cost/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import ValidationError

from travel_cost.config.models import ScenarioModel
from travel_cost.domain.errors import ConfigurationError
from travel_cost.domain.mechanics.graph_builder import RoadGraph, build_graph_from_network
from travel_cost.domain.mechanics.mechanics_core import Mechanics
from travel_cost.domain.mechanics.mechanics_factory import build_mechanics
from travel_cost.engine.hooks import NoopHooks
from travel_cost.engine.rng import RNGRegistry
from travel_cost.io.recorder import Recorder
from travel_cost.io.route_logging import RouteLogging  # JSON logs
from travel_cost.runtime.registries import resolve_network


@dataclass
class App:
    graph: RoadGraph
    rng: RNGRegistry
    mechanics: Mechanics
    recorder: Recorder | None


def build(
    cfg: ScenarioModel | Mapping,
    *,
    worker: int = 0,
    use_logging: bool = True,
    recorder: Recorder | None = None,
) -> App:
    # 0) Validate config
    try:
        model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)
    except ValidationError as e:
        raise ConfigurationError(f"invalid scenario: {e}") from e

    # 1) RNG
    rng_registry = RNGRegistry(model.seed, scenario=model.name, worker=worker)

    # 2) Hooks
    hooks = (
        RouteLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
        )
        if use_logging
        else NoopHooks()
    )

    # 3) Graph (fatal on bad definitions)
    graph = build_graph_from_network(resolve_network(model.network), hooks=hooks)

    # 4) Mechanics
    mechanics = build_mechanics(model.mechanics, graph, rng_registry, hooks=hooks)

    return App(graph, rng_registry, mechanics, recorder)
