from typing import Any, Iterator, Tuple, TypeVar

import msgspec

from ._utils import is_number
from .errors import (
    ExpectedArrayValue,
    ExpectedF64Value,
    InvalidPosition,
    PositionTooShort,
)

__all__ = ("Position", "from_json", "to_json", "nested_from_json", "nested_to_json")


def __dir__():
    return __all__


P = TypeVar("P")

#: The default position representation: two or more floats.
Position = Tuple[float, ...]


def from_json(value: Any, position: Any = None) -> Any:
    """Convert a JSON coordinate array into a position.

    Parameters
    ----------
    value : Any
        The JSON value to convert.
    position : type, optional
        The type to convert the position into. May be any type ``msgspec``
        can convert an array of numbers into (e.g. ``Tuple[float, float]``,
        a ``NamedTuple``, or an ``array_like`` Struct). Defaults to a
        ``tuple`` of ``float``.

    Returns
    -------
    position : Any
        The converted position.
    """
    if not isinstance(value, list):
        raise ExpectedArrayValue(value)
    for item in value:
        if not is_number(item):
            raise ExpectedF64Value(item)
    if len(value) < 2:
        raise PositionTooShort(len(value))

    if position is None:
        return tuple(float(item) for item in value)
    try:
        return msgspec.convert(value, position)
    except msgspec.ValidationError as exc:
        raise InvalidPosition(value, str(exc)) from None


def to_json(position: Any) -> list:
    """Convert a position back into a JSON array."""
    # `to_builtins` leaves tuples (and NamedTuples) as tuples
    return list(msgspec.to_builtins(position))


def nested_from_json(value: Any, depth: int, position: Any = None) -> Any:
    """Convert ``depth`` levels of nested arrays of positions."""
    if depth == 0:
        return from_json(value, position)
    if not isinstance(value, list):
        raise ExpectedArrayValue(value)
    return [nested_from_json(item, depth - 1, position) for item in value]


def nested_to_json(value: Any, depth: int) -> list:
    if depth == 0:
        return to_json(value)
    return [nested_to_json(item, depth - 1) for item in value]


def iter_nested(value: Any, depth: int) -> Iterator[Any]:
    if depth == 0:
        yield value
    else:
        for item in value:
            yield from iter_nested(item, depth - 1)
