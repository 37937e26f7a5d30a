# travel_cost/app/cli.py
import argparse
import json
import logging
import sys

from travel_cost.app.build import build
from travel_cost.config.models import NetworkByPath, ScenarioModel
from travel_cost.domain.entities.route import RouteQuery
from travel_cost.domain.errors import ConfigurationError
from travel_cost.io.recorder import JsonlSink, Recorder
from travel_cost.runtime.resources import load_scenario

log = logging.getLogger("travel_cost.cli")


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="travel-cost",
        description="Cheapest route under sampled congestion (cost = km x traffic rate).",
    )
    p.add_argument("--scenario", help="scenario file (JSON or YAML)")
    p.add_argument("--network", help="network file (JSON or YAML); overrides the scenario's")
    p.add_argument("--source", help="source node id")
    p.add_argument("--destination", help="destination node id")
    p.add_argument(
        "--repeat", type=int, default=1, help="run the query N times (fresh congestion each)"
    )
    p.add_argument("--seed", type=int, default=None, help="master seed for reproducible congestion")
    p.add_argument(
        "--list-nodes", action="store_true", help="print node ids grouped by region and exit"
    )
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default=None)
    return p


def _scenario(args) -> ScenarioModel:
    model = load_scenario(args.scenario) if args.scenario else ScenarioModel()
    updates = {}
    if args.network:
        updates["network"] = NetworkByPath(file=args.network)
    if args.seed is not None:
        updates["seed"] = args.seed
    if args.log_level:
        updates["log"] = model.log.model_copy(update={"level": args.log_level})
    return model.model_copy(update=updates) if updates else model


def main(argv: list[str] | None = None, *, out=None) -> int:
    args = _parser().parse_args(argv)
    out = out or sys.stdout
    try:
        app = build(_scenario(args), recorder=Recorder(JsonlSink(out)))
    except ConfigurationError as e:
        log.error("configuration error: %s", e)
        return 1

    if args.list_nodes:
        listing = {name: list(r.nodes) for name, r in app.graph.regions.items()}
        out.write(json.dumps(listing, indent=2) + "\n")
        return 0

    if not (args.source and args.destination):
        _parser().error("--source and --destination are required unless --list-nodes is given")

    queries = [RouteQuery(args.source, args.destination)] * max(1, args.repeat)
    outcomes = [app.mechanics.query(q.source, q.destination) for q in queries]
    return 0 if all(o.ok for o in outcomes) else 2
