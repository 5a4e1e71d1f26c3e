from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Union

import msgspec

from . import position as _position
from ._members import expect_member, expect_type, get_bbox, get_foreign_members
from ._members import set_optional_members
from ._utils import GeoJsonStruct
from .errors import ExpectedArrayValue, ExpectedObjectValue, GeometryUnknownType
from .position import P

__all__ = (
    "Geometry",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "GeometryValue",
)


def __dir__():
    return __all__


class _Coordinates(msgspec.Struct, frozen=True):
    # The member holding this shape's payload, and how many levels of arrays
    # wrap each position within it.
    member = "coordinates"
    depth = 0

    @classmethod
    def _from_members(cls, obj, position):
        coordinates = expect_member(obj, "coordinates")
        return cls(_position.nested_from_json(coordinates, cls.depth, position))

    def _to_members(self):
        return {"coordinates": _position.nested_to_json(self.coordinates, self.depth)}


# The 7 standard Geometry shapes. Each struct holds only the shape's payload;
# `bbox` and foreign members live on the enclosing `Geometry`.
class Point(_Coordinates, Generic[P]):
    """A single position."""

    coordinates: P


class MultiPoint(_Coordinates, Generic[P]):
    """An array of positions."""

    coordinates: List[P]
    depth = 1


class LineString(_Coordinates, Generic[P]):
    """An array of two or more positions."""

    coordinates: List[P]
    depth = 1


class MultiLineString(_Coordinates, Generic[P]):
    """An array of LineString coordinate arrays."""

    coordinates: List[List[P]]
    depth = 2


class Polygon(_Coordinates, Generic[P]):
    """An array of linear rings, exterior ring first."""

    coordinates: List[List[P]]
    depth = 2


class MultiPolygon(_Coordinates, Generic[P]):
    """An array of Polygon coordinate arrays."""

    coordinates: List[List[List[P]]]
    depth = 3


class GeometryCollection(msgspec.Struct, Generic[P], frozen=True):
    """A heterogeneous collection of geometries."""

    geometries: List[Geometry[P]]

    member = "geometries"

    @classmethod
    def _from_members(cls, obj, position):
        items = expect_member(obj, "geometries")
        if not isinstance(items, list):
            raise ExpectedArrayValue(items)
        geometries = []
        for item in items:
            if not isinstance(item, dict):
                raise ExpectedObjectValue(item)
            geometries.append(Geometry.from_json_object(item, position=position))
        return cls(geometries)

    def _to_members(self):
        return {"geometries": [g.to_json_object() for g in self.geometries]}


GeometryValue = Union[
    Point[P],
    MultiPoint[P],
    LineString[P],
    MultiLineString[P],
    Polygon[P],
    MultiPolygon[P],
    GeometryCollection[P],
]

_SHAPES = {
    cls.__name__: cls
    for cls in (
        Point,
        MultiPoint,
        LineString,
        MultiLineString,
        Polygon,
        MultiPolygon,
        GeometryCollection,
    )
}


class Geometry(GeoJsonStruct, Generic[P]):
    """A GeoJSON Geometry object.

    Parameters
    ----------
    value : GeometryValue
        The geometry shape, one of `Point`, `MultiPoint`, `LineString`,
        `MultiLineString`, `Polygon`, `MultiPolygon`, or
        `GeometryCollection`.
    bbox : list of float, optional
        The bounding box of the geometry, if any.
    foreign_members : dict, optional
        Any members of the JSON object not defined for a geometry. These are
        preserved verbatim when converting back to JSON.

    Examples
    --------
    >>> geom = Geometry(Point((102.0, 0.5)))
    >>> geom.to_json_object()
    {'type': 'Point', 'coordinates': [102.0, 0.5]}
    """

    value: GeometryValue[P]
    bbox: Optional[List[float]] = None
    foreign_members: Optional[Dict[str, Any]] = None

    @property
    def type_name(self) -> str:
        """The GeoJSON type of the wrapped shape (e.g. ``"Point"``)."""
        return type(self.value).__name__

    @classmethod
    def from_json_object(
        cls, obj: Dict[str, Any], *, position: Any = None
    ) -> Geometry[P]:
        """Create a ``Geometry`` from a JSON object.

        Parameters
        ----------
        obj : dict
            The JSON object. It isn't mutated.
        position : type, optional
            The position type to convert coordinates into. See
            `geostruct.position.from_json`.

        Returns
        -------
        geometry : Geometry
        """
        type_name = expect_type(obj)
        try:
            shape = _SHAPES[type_name]
        except KeyError:
            raise GeometryUnknownType(type_name) from None
        bbox = get_bbox(obj)
        value = shape._from_members(obj, position)
        foreign_members = get_foreign_members(obj, ("type", "bbox", shape.member))
        return cls(value, bbox=bbox, foreign_members=foreign_members)

    def to_json_object(self) -> Dict[str, Any]:
        """Convert to a JSON object, including ``bbox`` and foreign members."""
        out = {"type": self.type_name}
        out.update(self.value._to_members())
        return set_optional_members(out, self.bbox, self.foreign_members)
