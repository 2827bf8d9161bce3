"""
Exception types raised while loading a graph or answering a shortest-path query.
"""


class ShortestRouteError(Exception):
    """Base class for every failure raised by shortest_route."""


class GraphFrozenError(ShortestRouteError):
    """The graph was mutated after loading finished."""


# ---------------------------------------------------------------------
# load-time errors: loading aborts on the first one, no partial graph
# ---------------------------------------------------------------------

class GraphLoadError(ShortestRouteError):
    pass


class DocumentParseError(GraphLoadError):
    pass


class MissingGraphSection(GraphLoadError):
    pass


class InsufficientNodes(GraphLoadError):
    def __init__(self, count):
        self.count = count
        super().__init__(f"There must be at least two nodes in the graph, got {count}.")


class MalformedNode(GraphLoadError):
    pass


class DuplicateNode(GraphLoadError, ValueError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Node '{name}' is declared more than once.")


class MissingEdges(GraphLoadError):
    pass


class MalformedEdge(GraphLoadError):
    pass


class MissingWeightData(GraphLoadError):
    pass


class InvalidWeight(GraphLoadError):
    def __init__(self, payload):
        self.payload = payload
        super().__init__(f"The edge weight {payload!r} is not a positive finite number.")


class UnknownEdgeEndpoint(GraphLoadError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"The edge endpoint '{name}' is not a declared node.")


# ---------------------------------------------------------------------
# query-time errors
# ---------------------------------------------------------------------

class QueryError(ShortestRouteError):
    pass


class UnknownNode(QueryError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"The graph does not contain the node '{name}'.")


class EmptyFrontier(QueryError):
    """No unvisited node could be selected although some remain (internal inconsistency)."""


class TargetUnreachable(QueryError):
    def __init__(self, start, target):
        self.start = start
        self.target = target
        super().__init__(f"There is no path from '{start}' to '{target}'.")
