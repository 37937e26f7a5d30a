# runtime/registries.py
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from travel_cost.app.protocols import CongestionSampler, RoutePlanner, SpeedModel
from travel_cost.config.models import (
    CongestionUnion,
    DijkstraPlannerModel,
    FixedCongestionModel,
    LinearCongestionSpeedModel,
    LinearScanPlannerModel,
    NetworkByName,
    NetworkByPath,
    NetworkInline,
    NetworkModel,
    NetworkRef,
    PlannerUnion,
    RegionalCongestionModel,
    SpeedUnion,
)
from travel_cost.data.india_metros import INDIA_METROS
from travel_cost.domain.errors import ConfigurationError
from travel_cost.domain.mechanics.congestion import (
    FixedCongestionSampler,
    RegionalCongestionSampler,
)
from travel_cost.domain.mechanics.route_metrics import LinearCongestionSpeed
from travel_cost.domain.mechanics.route_planners import DijkstraRoutePlanner, LinearScanRoutePlanner
from travel_cost.runtime.resources import load_network_from_path

CongestionFactory = Callable[[CongestionUnion, dict], CongestionSampler]
PlannerFactory = Callable[[PlannerUnion, dict], RoutePlanner]
SpeedFactory = Callable[[SpeedUnion, dict], SpeedModel]

_congestion_registry: dict[str, CongestionFactory] = {}
_planner_registry: dict[str, PlannerFactory] = {}
_speed_registry: dict[str, SpeedFactory] = {}
_network_registry: dict[str, Mapping[str, Any]] = {"india_metros": INDIA_METROS}


def _lookup(registry: dict, kind: str, what: str):
    try:
        return registry[kind]
    except KeyError:
        raise ValueError(f"Unknown {what} kind {kind!r}") from None


# ------------------- Networks ---------------------------


def register_network(name: str, network: Mapping[str, Any]) -> None:
    _network_registry[name] = network


def resolve_network(ref: NetworkRef) -> NetworkModel:
    if isinstance(ref, NetworkInline):
        return ref.network
    if isinstance(ref, NetworkByPath):
        return load_network_from_path(ref.file, ref.fmt)
    if isinstance(ref, NetworkByName):
        try:
            raw = _network_registry[ref.name]
        except KeyError:
            raise ConfigurationError(f"no builtin network named {ref.name!r}") from None
        try:
            return NetworkModel.model_validate(raw)
        except ValidationError as e:
            raise ConfigurationError(f"invalid network {ref.name!r}: {e}") from e
    raise TypeError(ref)


# ------------------- Congestion samplers ---------------------------


def register_congestion(kind: str):
    def deco(fn: CongestionFactory):
        _congestion_registry[kind] = fn
        return fn

    return deco


def make_congestion(cfg: CongestionUnion, *, deps: dict) -> CongestionSampler:
    """deps: 'graph' (required), 'rng' (default random source, optional)."""
    return _lookup(_congestion_registry, cfg.kind, "congestion")(cfg, deps)


@register_congestion("regional")
def _make_regional(cfg: RegionalCongestionModel, deps):
    return RegionalCongestionSampler(
        deps["graph"],
        rng=deps.get("rng"),
        default_range=cfg.default_range,
        heavy_max_rate=cfg.heavy_max_rate,
    )


@register_congestion("fixed")
def _make_fixed(cfg: FixedCongestionModel, deps):
    return FixedCongestionSampler(deps["graph"], cfg.rates, default_rate=cfg.default_rate)


# --------------------- Route planners  ---------------------


def register_planner(kind: str):
    def deco(fn: PlannerFactory):
        _planner_registry[kind] = fn
        return fn

    return deco


def make_planner(cfg: PlannerUnion, *, deps: dict | None = None) -> RoutePlanner:
    return _lookup(_planner_registry, cfg.kind, "planner")(cfg, deps or {})


@register_planner("dijkstra")
def _make_dijkstra(cfg: DijkstraPlannerModel, deps):
    return DijkstraRoutePlanner(fallback_rate=cfg.fallback_rate)


@register_planner("linear_scan")
def _make_linear_scan(cfg: LinearScanPlannerModel, deps):
    return LinearScanRoutePlanner(fallback_rate=cfg.fallback_rate)


# ---------------------- Speed models ----------------------------


def register_speed(kind: str):
    def deco(fn: SpeedFactory):
        _speed_registry[kind] = fn
        return fn

    return deco


def make_speed(cfg: SpeedUnion, *, deps: dict | None = None) -> SpeedModel:
    return _lookup(_speed_registry, cfg.kind, "speed")(cfg, deps or {})


@register_speed("linear")
def _make_linear(cfg: LinearCongestionSpeedModel, deps):
    return LinearCongestionSpeed(cfg.base_kmh, cfg.per_rate_kmh, cfg.floor_kmh)
