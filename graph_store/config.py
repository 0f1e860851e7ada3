import os
from enum import Enum

# Environment variables read at call time, so tests and callers can change
# them without reloading the module.
BACKEND_ENV_VAR = "GRAPH_STORE_BACKEND"
DOT_PREFIX_ENV_VAR = "GRAPH_STORE_DOT_PREFIX"

DEFAULT_DOT_PREFIX = "n"


class BackendKind(Enum):
    LIST = "list"     # Sparse adjacency lists
    MATRIX = "matrix" # Dense adjacency matrix


DEFAULT_BACKEND = BackendKind.LIST


def parse_backend(value) -> BackendKind:
    """
    Converts a backend name (or BackendKind) to a BackendKind.

    Raises:
        ValueError: If the name is not a known backend.
    """
    if isinstance(value, BackendKind):
        return value
    try:
        return BackendKind(str(value).strip().lower())
    except ValueError:
        known = ", ".join(kind.value for kind in BackendKind)
        raise ValueError(f"Unknown backend {value!r}; expected one of: {known}.") from None


def default_backend() -> BackendKind:
    """Returns the backend selected by GRAPH_STORE_BACKEND, or the list backend."""
    value = os.environ.get(BACKEND_ENV_VAR)
    if not value:
        return DEFAULT_BACKEND
    return parse_backend(value)


def dot_node_prefix() -> str:
    """Returns the prefix used for node names in DOT output."""
    prefix = os.environ.get(DOT_PREFIX_ENV_VAR, DEFAULT_DOT_PREFIX)
    if not prefix or not (prefix[0].isalpha() or prefix[0] == "_"):
        raise ValueError(f"Invalid DOT node prefix {prefix!r}.")
    return prefix
