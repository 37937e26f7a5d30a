import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

MIN_RATE = 1
MAX_RATE = 10


def _check_rate(v: int, info: ValidationInfo) -> int:
    if not MIN_RATE <= v <= MAX_RATE:
        raise ValueError(f"{info.field_name} must be within [{MIN_RATE}, {MAX_RATE}], got {v}")
    return v


def _triple_to_dict(v, keys: tuple[str, str, str]):
    # (a, b, km) triples are accepted wherever an edge object is
    if isinstance(v, (list, tuple)) and len(v) == 3:
        return dict(zip(keys, v))
    return v


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


# ----------------- NETWORK DEFINITION ---------------------


class NodeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: str
    label: str = ""
    x: float = 0.0
    y: float = 0.0


class RoadModel(BaseModel):
    """Intra-region road: {from, to, distanceKm} or an (a, b, km) triple."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    from_node: str = Field(alias="from")
    to_node: str = Field(alias="to")
    distance_km: float = Field(alias="distanceKm")

    @model_validator(mode="before")
    @classmethod
    def _from_triple(cls, v):
        return _triple_to_dict(v, ("from", "to", "distanceKm"))


class InterRegionRoadModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    from_hub: str = Field(alias="fromHub")
    to_hub: str = Field(alias="toHub")
    distance_km: float = Field(alias="distanceKm")

    @model_validator(mode="before")
    @classmethod
    def _from_triple(cls, v):
        return _triple_to_dict(v, ("fromHub", "toHub", "distanceKm"))


class RegionModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    name: str
    congestion_range: tuple[int, int] = Field(alias="congestionRange")
    heavy_traffic: bool = Field(default=False, alias="heavyTraffic")
    nodes: list[NodeModel]
    edges: list[RoadModel] = Field(default_factory=list)
    hub: str


class NetworkModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    regions: list[RegionModel]
    inter_region_edges: list[InterRegionRoadModel] = Field(
        default_factory=list, alias="interRegionEdges"
    )


class NetworkInline(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["inline"] = "inline"
    network: NetworkModel


class NetworkByPath(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["path"] = "path"
    file: str
    fmt: Literal["json", "yaml"] | None = None  # None => from file suffix

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


class NetworkByName(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["name"] = "name"
    name: str = "india_metros"


NetworkRef = Annotated[NetworkInline | NetworkByPath | NetworkByName, Field(discriminator="by")]

# ----------------- CONGESTION SAMPLERS ---------------------


class RegionalCongestionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["regional"] = "regional"
    default_range: tuple[int, int] = (2, 7)  # inter-region roads
    heavy_max_rate: int = 9  # upper bound when a heavy-traffic region is touched

    @field_validator("default_range")
    @classmethod
    def _ordered(cls, v: tuple[int, int]) -> tuple[int, int]:
        lo, hi = v
        if not MIN_RATE <= lo <= hi <= MAX_RATE:
            raise ValueError(f"default_range must satisfy {MIN_RATE} <= min <= max <= {MAX_RATE}")
        return v

    @field_validator("heavy_max_rate")
    @classmethod
    def _heavy(cls, v: int, info: ValidationInfo) -> int:
        return _check_rate(v, info)


class FixedCongestionModel(BaseModel):
    """Pinned rates keyed "a|b" (order-insensitive); for reproducible scenarios."""

    model_config = ConfigDict(extra="forbid")
    kind: Literal["fixed"] = "fixed"
    rates: dict[str, int] = Field(default_factory=dict)
    default_rate: int = 6

    @field_validator("default_rate")
    @classmethod
    def _default(cls, v: int, info: ValidationInfo) -> int:
        return _check_rate(v, info)

    @field_validator("rates")
    @classmethod
    def _keys(cls, v: dict[str, int]) -> dict[str, int]:
        for k, rate in v.items():
            if k.count("|") != 1:
                raise ValueError(f"rate key {k!r} must look like 'a|b'")
            if not MIN_RATE <= rate <= MAX_RATE:
                raise ValueError(f"rate for {k!r} must be within [{MIN_RATE}, {MAX_RATE}]")
        return v


CongestionUnion = Annotated[
    RegionalCongestionModel | FixedCongestionModel, Field(discriminator="kind")
]

# ----------------- ROUTE PLANNERS ---------------------


class DijkstraPlannerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dijkstra"] = "dijkstra"
    fallback_rate: int = 6  # used when a snapshot lacks an edge

    @field_validator("fallback_rate")
    @classmethod
    def _fallback(cls, v: int, info: ValidationInfo) -> int:
        return _check_rate(v, info)


class LinearScanPlannerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["linear_scan"] = "linear_scan"
    fallback_rate: int = 6

    @field_validator("fallback_rate")
    @classmethod
    def _fallback(cls, v: int, info: ValidationInfo) -> int:
        return _check_rate(v, info)


PlannerUnion = Annotated[
    DijkstraPlannerModel | LinearScanPlannerModel, Field(discriminator="kind")
]

# ----------------- SPEED MODELS ---------------------


class LinearCongestionSpeedModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["linear"] = "linear"
    base_kmh: float = 40.0
    per_rate_kmh: float = 3.0
    floor_kmh: float = 25.0

    @field_validator("floor_kmh")
    @classmethod
    def _positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("floor_kmh must be > 0")
        return v


SpeedUnion = Annotated[LinearCongestionSpeedModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class MechanicsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    congestion: CongestionUnion = Field(default_factory=RegionalCongestionModel)
    planner: PlannerUnion = Field(default_factory=DijkstraPlannerModel)
    speed: SpeedUnion = Field(default_factory=LinearCongestionSpeedModel)


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "default"
    run_id: str = "local"
    seed: int | None = None  # None => fresh entropy, congestion differs per run
    log: LogModel = LogModel()
    network: NetworkRef = Field(default_factory=NetworkByName)
    mechanics: MechanicsModel = Field(default_factory=MechanicsModel)
