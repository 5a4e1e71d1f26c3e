import enum
import logging
from typing import Any, Dict, Iterator, Mapping, Union

import msgspec

from . import position as _position
from .errors import (
    EmptyType,
    ExpectedType,
    GeoJsonExpectedObject,
    GeometryUnknownType,
)
from .feature import Feature, FeatureCollection
from .geometry import Geometry, GeometryCollection
from .position import P

__all__ = (
    "GeoJson",
    "Type",
    "resolve_type",
    "from_json_object",
    "from_json_value",
    "from_geo_interface",
    "to_json_object",
    "to_json_value",
    "as_geometry",
    "as_feature",
    "as_feature_collection",
    "coords",
)


def __dir__():
    return __all__


_logger = logging.getLogger(__name__)

#: Any GeoJSON object.
GeoJson = Union[Geometry[P], Feature[P], FeatureCollection[P]]

_VARIANTS = (Geometry, Feature, FeatureCollection)


class Type(enum.Enum):
    """The nine values of a GeoJSON ``"type"`` member."""

    Point = "Point"
    MultiPoint = "MultiPoint"
    LineString = "LineString"
    MultiLineString = "MultiLineString"
    Polygon = "Polygon"
    MultiPolygon = "MultiPolygon"
    GeometryCollection = "GeometryCollection"
    Feature = "Feature"
    FeatureCollection = "FeatureCollection"

    @property
    def is_geometry(self) -> bool:
        """Whether this is one of the seven geometry types."""
        return self not in (Type.Feature, Type.FeatureCollection)


def resolve_type(obj: Dict[str, Any]) -> Type:
    """Determine the GeoJSON type of a JSON object.

    Parameters
    ----------
    obj : dict
        The JSON object to inspect.

    Returns
    -------
    type : Type

    Raises
    ------
    GeometryUnknownType
        If ``"type"`` is missing or not a string.
    EmptyType
        If ``"type"`` is a string that isn't one of the nine GeoJSON types.
        Matching is exact and case-sensitive.
    """
    type_name = obj.get("type")
    if not isinstance(type_name, str):
        _logger.debug("Rejected object without a string `type` member")
        raise GeometryUnknownType("type")
    try:
        return Type(type_name)
    except ValueError:
        _logger.debug("Rejected object with unrecognized type %r", type_name)
        raise EmptyType() from None


def from_json_object(obj: Dict[str, Any], *, position: Any = None) -> GeoJson:
    """Convert a JSON object into a GeoJSON object.

    Parameters
    ----------
    obj : dict
        The JSON object to convert. It isn't mutated.
    position : type, optional
        The position type to convert coordinates into. May be any type
        ``msgspec`` can convert an array of numbers into. Defaults to a
        ``tuple`` of ``float``.

    Returns
    -------
    obj : Geometry, Feature, or FeatureCollection
        The variant always matches the object's ``"type"`` member.

    See Also
    --------
    from_json_value
    to_json_object
    """
    tag = resolve_type(obj)
    if tag is Type.Feature:
        return Feature.from_json_object(obj, position=position)
    elif tag is Type.FeatureCollection:
        return FeatureCollection.from_json_object(obj, position=position)
    return Geometry.from_json_object(obj, position=position)


def from_json_value(value: Any, *, position: Any = None) -> GeoJson:
    """Convert any JSON value into a GeoJSON object.

    Parameters
    ----------
    value : Any
        A JSON value, as returned by ``msgspec.json.decode``.
    position : type, optional
        The position type to convert coordinates into.

    Returns
    -------
    obj : Geometry, Feature, or FeatureCollection

    Raises
    ------
    GeoJsonExpectedObject
        If ``value`` isn't a JSON object.
    """
    if not isinstance(value, dict):
        _logger.debug("Rejected non-object JSON value of type %s", type(value))
        raise GeoJsonExpectedObject(value)
    return from_json_object(value, position=position)


def from_geo_interface(obj: Any, *, position: Any = None) -> GeoJson:
    """Convert an object implementing ``__geo_interface__`` into GeoJSON.

    Plain mappings are accepted too. Tuples anywhere in the interface (as
    produced by e.g. ``shapely``) are treated as arrays.
    """
    geo = getattr(obj, "__geo_interface__", obj)
    if isinstance(geo, Mapping):
        # Normalize to the plain JSON value tree (tuples become lists)
        geo = msgspec.json.decode(msgspec.json.encode(dict(geo)))
    return from_json_value(geo, position=position)


def _variant_name(obj: Any) -> str:
    for cls in _VARIANTS:
        if isinstance(obj, cls):
            return cls.__name__
    raise TypeError(
        "Expected a Geometry, Feature, or FeatureCollection, "
        f"got `{type(obj).__name__}`"
    )


def to_json_object(obj: GeoJson) -> Dict[str, Any]:
    """Convert a GeoJSON object into a JSON object.

    This can't fail for any GeoJSON object; a ``TypeError`` is raised if
    ``obj`` isn't one.
    """
    _variant_name(obj)
    return obj.to_json_object()


def to_json_value(obj: GeoJson) -> Any:
    """Convert a GeoJSON object into a JSON value (always an object)."""
    return to_json_object(obj)


def _narrow(obj, cls):
    actual = _variant_name(obj)
    if isinstance(obj, cls):
        return obj
    raise ExpectedType(cls.__name__, actual)


def as_geometry(obj: GeoJson) -> Geometry:
    """Return ``obj`` if it's a ``Geometry``, else raise ``ExpectedType``."""
    return _narrow(obj, Geometry)


def as_feature(obj: GeoJson) -> Feature:
    """Return ``obj`` if it's a ``Feature``, else raise ``ExpectedType``."""
    return _narrow(obj, Feature)


def as_feature_collection(obj: GeoJson) -> FeatureCollection:
    """Return ``obj`` if it's a ``FeatureCollection``, else raise ``ExpectedType``."""
    return _narrow(obj, FeatureCollection)


def coords(obj: GeoJson) -> Iterator[Any]:
    """Iterate over every position in a GeoJSON object, in document order.

    Examples
    --------
    >>> geom = Geometry(LineString([(0.0, 0.0), (1.0, 1.0)]))
    >>> list(coords(geom))
    [(0.0, 0.0), (1.0, 1.0)]
    """
    if isinstance(obj, FeatureCollection):
        for feature in obj.features:
            yield from coords(feature)
    elif isinstance(obj, Feature):
        if obj.geometry is not None:
            yield from coords(obj.geometry)
    elif isinstance(obj, Geometry):
        value = obj.value
        if isinstance(value, GeometryCollection):
            for geometry in value.geometries:
                yield from coords(geometry)
        else:
            yield from _position.iter_nested(value.coordinates, value.depth)
    else:
        _variant_name(obj)
