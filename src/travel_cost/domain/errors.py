# travel_cost/domain/errors.py


class TravelCostError(Exception):
    """Base class for all travel_cost failures."""


class ConfigurationError(TravelCostError):
    """Malformed network definition. Raised at build time; never repaired."""


class RoutingError(TravelCostError):
    """Query-time failure the caller is expected to handle."""

    reason = "routing_error"


class UnknownNode(RoutingError):
    reason = "unknown_node"

    def __init__(self, node_id: str):
        super().__init__(f"unknown node {node_id!r}")
        self.node_id = node_id


class NoRouteFound(RoutingError):
    reason = "no_route"

    def __init__(self, source: str, destination: str):
        super().__init__(f"no route from {source!r} to {destination!r}")
        self.source = source
        self.destination = destination
