# travel_cost/runtime/resources.py
import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from travel_cost.config.models import NetworkModel, ScenarioModel
from travel_cost.domain.errors import ConfigurationError


def _read(file: str, fmt: str | None) -> dict:
    p = Path(file)
    fmt = fmt or ("yaml" if p.suffix.lower() in (".yaml", ".yml") else "json")
    try:
        with p.open("r", encoding="utf-8") as f:
            if fmt == "json":
                return json.load(f)
            if fmt == "yaml":
                return yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise ConfigurationError(f"file not found: {file}") from e
    except OSError as e:
        raise ConfigurationError(f"cannot read {file}: {e.strerror or e}") from e
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"cannot parse {file}: {e}") from e
    raise ValueError(f"Unsupported fmt {fmt!r}")


def load_network_from_path(file: str, fmt: str | None = None) -> NetworkModel:
    raw = _read(file, fmt)
    try:
        return NetworkModel.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"invalid network in {file}: {e}") from e


def load_scenario(file: str, fmt: str | None = None) -> ScenarioModel:
    raw = _read(file, fmt)
    try:
        return ScenarioModel.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"invalid scenario in {file}: {e}") from e
