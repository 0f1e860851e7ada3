from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Weight(Protocol):
    """
    Numeric contract every node and arc weight is expected to honour.

    A weight must be closed under addition and multiplication and its type
    must be constructible from ``0`` and ``1`` (the additive and
    multiplicative identities). ``int``, ``float``, ``Fraction``, ``Decimal``
    and numpy scalars all qualify.

    Storage never does arithmetic on weights and never checks them: the
    caller is responsible for passing sound values.
    """

    def __add__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...


def is_weight(value: Any) -> bool:
    """Returns True if value structurally satisfies the Weight contract."""
    if isinstance(value, (bool, Sequence)):
        return False
    return isinstance(value, Weight)


def zero_of(value: Any) -> Any:
    """Returns the additive identity of value's type."""
    return type(value)(0)


def one_of(value: Any) -> Any:
    """Returns the multiplicative identity of value's type."""
    return type(value)(1)
