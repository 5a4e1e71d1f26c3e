from typing import Any

import msgspec

from ._utils import json_type_name

__all__ = (
    "GeoJsonError",
    "GeometryUnknownType",
    "EmptyType",
    "GeoJsonExpectedObject",
    "ExpectedObjectValue",
    "MalformedJson",
    "ExpectedType",
    "NotAFeature",
    "ExpectedProperty",
    "ExpectedStringValue",
    "ExpectedArrayValue",
    "ExpectedF64Value",
    "PositionTooShort",
    "InvalidPosition",
    "BboxExpectedArray",
    "BboxExpectedNumericValues",
    "PropertiesExpectedObjectOrNull",
    "FeatureInvalidGeometryValue",
    "FeatureInvalidIdentifierType",
)


def __dir__():
    return __all__


class GeoJsonError(msgspec.MsgspecError):
    """The base class for all errors raised while converting GeoJSON.

    Every error is raised as soon as it's detected; no partial results are
    ever returned alongside one.
    """


class _ValueError(GeoJsonError):
    """An error carrying back the offending JSON value."""

    _template = "got `{kind}`"

    def __init__(self, value: Any):
        self.value = value
        super().__init__(self._template.format(kind=json_type_name(value)))


class GeometryUnknownType(GeoJsonError):
    """An object had no usable type discriminator.

    Raised when an object lacks a string ``"type"`` member (``type_name`` is
    then the expected key, ``"type"``), or when a geometry object declares a
    type that isn't one of the seven geometry types (``type_name`` is then
    the declared type).
    """

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Unknown GeoJSON type for `{type_name}`")


class EmptyType(GeoJsonError):
    """The ``"type"`` member is a string, but not a recognized GeoJSON type.

    This fires for any unrecognized tag, the empty string included.
    """

    def __init__(self):
        super().__init__(
            "Expected a Geometry, Feature, or FeatureCollection type, "
            "got an unrecognized type"
        )


class GeoJsonExpectedObject(_ValueError):
    """A top-level JSON value wasn't an object."""

    _template = "Expected `object` for GeoJSON, got `{kind}`"


class ExpectedObjectValue(_ValueError):
    """A JSON object was required, but another kind of value was found."""

    _template = "Expected `object`, got `{kind}`"


class MalformedJson(GeoJsonError):
    """The input text isn't valid JSON.

    The underlying ``msgspec.DecodeError`` is available as ``error``.
    """

    def __init__(self, error: msgspec.DecodeError):
        self.error = error
        super().__init__(f"Malformed JSON: {error}")


class ExpectedType(GeoJsonError):
    """A GeoJSON value wasn't the variant the caller asked for."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected GeoJSON type `{expected}`, got `{actual}`")


class NotAFeature(GeoJsonError):
    """An object of another type was converted as a ``Feature``."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Expected GeoJSON type `Feature`, got `{type_name}`")


class ExpectedProperty(GeoJsonError):
    """A required member is missing."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Object missing required member `{name}`")


class ExpectedStringValue(_ValueError):
    _template = "Expected `str`, got `{kind}`"


class ExpectedArrayValue(_ValueError):
    _template = "Expected `array`, got `{kind}`"


class ExpectedF64Value(_ValueError):
    _template = "Expected `float`, got `{kind}`"


class PositionTooShort(GeoJsonError):
    """A position had fewer than two elements."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"A position must contain two or more elements, got {length}"
        )


class InvalidPosition(GeoJsonError):
    """A coordinate array couldn't be converted to the requested position type."""

    def __init__(self, value: Any, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid position: {reason}")


class BboxExpectedArray(_ValueError):
    _template = "Expected `array` for `bbox`, got `{kind}`"


class BboxExpectedNumericValues(_ValueError):
    _template = "Expected `float` values in `bbox`, got `{kind}`"


class PropertiesExpectedObjectOrNull(_ValueError):
    _template = "Expected `object | null` for `properties`, got `{kind}`"


class FeatureInvalidGeometryValue(_ValueError):
    _template = "Expected `object | null` for `geometry`, got `{kind}`"


class FeatureInvalidIdentifierType(_ValueError):
    _template = "Expected `str | float` for `id`, got `{kind}`"
