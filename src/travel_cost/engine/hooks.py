# engine/hooks.py
from typing import Protocol


class RouteHooks(Protocol):
    def graph_built(self, *, nodes, edges, regions): ...
    def query_start(self, *, query_id, source, destination): ...
    def route_found(self, *, query_id, outcome, wall_ms): ...
    def route_rejected(self, *, query_id, outcome, wall_ms): ...
    def error(self, *, query_id, reason: str, **kw): ...


class NoopHooks:
    def graph_built(self, **_):
        pass

    def query_start(self, **_):
        pass

    def route_found(self, **_):
        pass

    def route_rejected(self, **_):
        pass

    def error(self, **_):
        pass
