"""
Exceptions raised by roadnet.

Each class covers one category of failure: malformed input documents, misuse of
the graph or hierarchy, invalid configuration and lookups of unknown nodes.
"""


class ValidationError(Exception):
    """
    Raised when input data is rejected.

    Graph documents that do not match the expected schema, or files that are
    not JSON at all, end up here.

    Examples:
        * A node without coordinates
        * An edge with a negative weight
        * A truncated JSON file
    """

    def __str__(self) -> str:
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when an operation on the road network cannot be carried out.

    Examples:
        * Hierarchy state accessed before preprocessing
        * A shortcut that cannot be unpacked
    """

    def __str__(self) -> str:
        return f"Graph Operation Error: {super().__str__()}"


class ContractionError(GraphOperationError):
    """
    Raised when a contraction hierarchy invariant is violated.

    Contraction is a deterministic in-memory computation, so any of these
    indicates a programming defect and is never recovered from.

    Examples:
        * A node contracted twice
        * A hierarchy preprocessed twice over the same graph
    """


class ConfigurationError(Exception):
    """
    Raised for unusable configuration values.

    Examples:
        * Unknown configuration keys
        * Negative worker counts
        * Non-numeric memory limits
    """


class ResourceNotFoundError(Exception):
    """Raised when a lookup refers to something that does not exist."""


class NodeNotFoundError(ResourceNotFoundError, KeyError):
    """
    Raised when a node ID is not part of the graph.

    Examples:
        * Location lookup by non-existent ID
        * Neighbor lookup for a missing node
    """

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return Exception.__str__(self)
