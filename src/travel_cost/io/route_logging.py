# io/route_logging.py
import json
import logging
import sys

from travel_cost.engine.hooks import NoopHooks
from travel_cost.io.recorder import Recorder


def _default_json_logger(name="travel_cost", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stderr)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class RouteLogging(NoopHooks):
    """
    One place to shape and emit structured logs for graph builds and queries.
    Found/rejected outcomes are also forwarded to the recorder when one is set.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.recorder = recorder
        self.log = logger or _default_json_logger(level="DEBUG" if debug else level)

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # --------------------------------------------------------

    def graph_built(self, *, nodes: int, edges: int, regions: int):
        self._emit("INFO", "graph_built", nodes=nodes, edges=edges, regions=regions)

    def query_start(self, *, query_id: int, source: str, destination: str):
        if self.debug:
            self._emit(
                "DEBUG", "query_start", query_id=query_id, source=source, destination=destination
            )

    def route_found(self, *, query_id: int, outcome, wall_ms: float):
        m = outcome.metrics
        self._emit(
            "INFO",
            "route_found",
            query_id=query_id,
            source=outcome.query.source,
            destination=outcome.query.destination,
            hops=len(outcome.route.path) - 1,
            cost=round(outcome.route.cost, 2),
            time_min=m.estimated_time_min,
            wall_ms=round(wall_ms, 3),
        )
        if self.recorder:
            self.recorder.emit(outcome.to_dict())

    def route_rejected(self, *, query_id: int, outcome, wall_ms: float):
        self._emit(
            "WARNING",
            "route_rejected",
            query_id=query_id,
            source=outcome.query.source,
            destination=outcome.query.destination,
            reason=outcome.reason,
            error=str(outcome.error),
            wall_ms=round(wall_ms, 3),
        )
        if self.recorder:
            self.recorder.emit(outcome.to_dict())

    def error(self, *, query_id: int, reason: str, **extra):
        self._emit("ERROR", "route_error", query_id=query_id, reason=reason, **extra)
