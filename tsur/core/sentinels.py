"""
Sentinel utilities.

Process-wide marker values and the identity comparison shared by the
container types.
"""

import math
from typing import Any


class Sentinel:
    """
    A named marker that is only ever equal to itself.

    Markers are falsy and keep their identity through copy, deepcopy
    and pickle, so they can sit in a payload slot without colliding
    with any value a caller could pass in.
    """

    __slots__ = ('_name',)

    def __init__(self, name: str):
        object.__setattr__(self, '_name', name)

    def __setattr__(self, key, value):
        raise AttributeError(f"{self._name} sentinel is read-only")

    def __repr__(self) -> str:
        return f"<{self._name}>"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        # Pickled by reference to the module attribute of the same name
        return self._name


EMPTY = Sentinel('EMPTY')
"""Payload of the shared empty option."""

_PRIMITIVES = (bool, int, float, complex, str, bytes, type(None))


def same_value(a: Any, b: Any) -> bool:
    """
    Identity comparison with value semantics for primitive scalars.

    Objects are the same only when they are the same reference. Two
    scalars of the same type are the same when they are equal, except
    that NaN is the same as NaN and 0.0 is not the same as -0.0.

    Args:
        a: First value
        b: Second value

    Returns:
        True if both values are the same
    """
    if a is b:
        return True
    if type(a) is not type(b) or not isinstance(a, _PRIMITIVES):
        return False
    if isinstance(a, float):
        if math.isnan(a) and math.isnan(b):
            return True
        if a == 0.0 and b == 0.0:
            return math.copysign(1.0, a) == math.copysign(1.0, b)
    return a == b


def positive_number(index: int) -> bool:
    return index >= 0


def true_predicate(*args: Any) -> bool:
    return True
