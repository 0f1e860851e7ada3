class GraphError(Exception):
    """Base class for all graph_store errors."""


class SizeMismatchError(GraphError, ValueError):
    """Raised when a node weight sequence does not match the node count."""

    def __init__(self, node_count: int, weight_count: int) -> None:
        self.node_count = node_count
        self.weight_count = weight_count
        super().__init__(
            f"Expected {node_count} node weights, got {weight_count}."
        )


class ArcNotFoundError(GraphError, KeyError):
    """Raised when an arc is queried, updated or removed but does not exist."""

    def __init__(self, src: int, dst: int) -> None:
        self.src = src
        self.dst = dst
        super().__init__(src, dst)

    def __str__(self) -> str:
        return f"Arc ({self.src}, {self.dst}) does not exist."


class ArcAlreadyExistsError(GraphError, ValueError):
    """Raised when inserting an arc that is already present."""

    def __init__(self, src: int, dst: int) -> None:
        self.src = src
        self.dst = dst
        super().__init__(f"Arc ({src}, {dst}) already exists.")


class SerializationError(GraphError, ValueError):
    """Raised when a serialized graph document is malformed."""
