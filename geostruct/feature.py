from __future__ import annotations

from typing import Any, Dict, Generic, Iterator, List, Optional, Union

from ._members import expect_member, expect_type, get_bbox, get_foreign_members
from ._members import set_optional_members
from ._utils import GeoJsonStruct, is_number
from .errors import (
    ExpectedArrayValue,
    ExpectedObjectValue,
    ExpectedType,
    FeatureInvalidGeometryValue,
    FeatureInvalidIdentifierType,
    NotAFeature,
    PropertiesExpectedObjectOrNull,
)
from .geometry import Geometry
from .position import P

__all__ = ("Feature", "FeatureCollection", "Id")


def __dir__():
    return __all__


Id = Union[str, int, float]

_FEATURE_MEMBERS = ("type", "geometry", "properties", "id", "bbox")
_COLLECTION_MEMBERS = ("type", "features", "bbox")


def _get_geometry(obj, position):
    value = obj.get("geometry")
    if value is None:
        return None
    if not isinstance(value, dict):
        raise FeatureInvalidGeometryValue(value)
    return Geometry.from_json_object(value, position=position)


def _get_properties(obj):
    value = obj.get("properties")
    if value is None:
        return None
    if not isinstance(value, dict):
        raise PropertiesExpectedObjectOrNull(value)
    return dict(value)


def _get_id(obj):
    value = obj.get("id")
    if value is None:
        return None
    if not (isinstance(value, str) or is_number(value)):
        raise FeatureInvalidIdentifierType(value)
    return value


class Feature(GeoJsonStruct, Generic[P]):
    """A GeoJSON Feature object.

    Parameters
    ----------
    geometry : Geometry, optional
        The feature's geometry. ``None`` for an unlocated feature.
    properties : dict, optional
        Free-form properties. ``None`` is rendered as ``null``.
    id : str, int, or float, optional
        A common identifier for the feature.
    bbox : list of float, optional
        The bounding box of the feature, if any.
    foreign_members : dict, optional
        Any members of the JSON object not defined for a feature. These are
        preserved verbatim when converting back to JSON.
    """

    geometry: Optional[Geometry[P]] = None
    properties: Optional[Dict[str, Any]] = None
    id: Optional[Id] = None
    bbox: Optional[List[float]] = None
    foreign_members: Optional[Dict[str, Any]] = None

    @classmethod
    def from_geometry(cls, geometry: Geometry[P]) -> Feature[P]:
        """Create a feature with no properties from a geometry."""
        return cls(geometry=geometry)

    @classmethod
    def from_json_object(
        cls, obj: Dict[str, Any], *, position: Any = None
    ) -> Feature[P]:
        """Create a ``Feature`` from a JSON object.

        Parameters
        ----------
        obj : dict
            The JSON object. It isn't mutated.
        position : type, optional
            The position type to convert coordinates into. See
            `geostruct.position.from_json`.

        Returns
        -------
        feature : Feature
        """
        type_name = expect_type(obj)
        if type_name != "Feature":
            raise NotAFeature(type_name)
        return cls(
            geometry=_get_geometry(obj, position),
            properties=_get_properties(obj),
            id=_get_id(obj),
            bbox=get_bbox(obj),
            foreign_members=get_foreign_members(obj, _FEATURE_MEMBERS),
        )

    def to_json_object(self) -> Dict[str, Any]:
        """Convert to a JSON object.

        ``geometry`` and ``properties`` are always present (``null`` when
        unset); ``id`` and ``bbox`` only when set.
        """
        out = {
            "type": "Feature",
            "geometry": (
                None if self.geometry is None else self.geometry.to_json_object()
            ),
            "properties": (
                None if self.properties is None else dict(self.properties)
            ),
        }
        if self.id is not None:
            out["id"] = self.id
        return set_optional_members(out, self.bbox, self.foreign_members)

    def get_property(self, key: str, default: Any = None) -> Any:
        """Get a property by key, or ``default`` if it isn't present."""
        if self.properties is None:
            return default
        return self.properties.get(key, default)

    def contains_property(self, key: str) -> bool:
        return self.properties is not None and key in self.properties

    def len_properties(self) -> int:
        return 0 if self.properties is None else len(self.properties)


class FeatureCollection(GeoJsonStruct, Generic[P]):
    """A GeoJSON FeatureCollection object.

    Parameters
    ----------
    features : list of Feature
        The features, in document order.
    bbox : list of float, optional
        The bounding box of the collection, if any.
    foreign_members : dict, optional
        Any members of the JSON object not defined for a feature collection.
        These are preserved verbatim when converting back to JSON.
    """

    features: List[Feature[P]]
    bbox: Optional[List[float]] = None
    foreign_members: Optional[Dict[str, Any]] = None

    def __iter__(self) -> Iterator[Feature[P]]:
        return iter(self.features)

    @classmethod
    def from_json_object(
        cls, obj: Dict[str, Any], *, position: Any = None
    ) -> FeatureCollection[P]:
        """Create a ``FeatureCollection`` from a JSON object.

        Parameters
        ----------
        obj : dict
            The JSON object. It isn't mutated.
        position : type, optional
            The position type to convert coordinates into. See
            `geostruct.position.from_json`.

        Returns
        -------
        collection : FeatureCollection
        """
        type_name = expect_type(obj)
        if type_name != "FeatureCollection":
            raise ExpectedType("FeatureCollection", type_name)
        items = expect_member(obj, "features")
        if not isinstance(items, list):
            raise ExpectedArrayValue(items)
        features = []
        for item in items:
            if not isinstance(item, dict):
                raise ExpectedObjectValue(item)
            features.append(Feature.from_json_object(item, position=position))
        return cls(
            features,
            bbox=get_bbox(obj),
            foreign_members=get_foreign_members(obj, _COLLECTION_MEMBERS),
        )

    def to_json_object(self) -> Dict[str, Any]:
        """Convert to a JSON object, including ``bbox`` and foreign members."""
        out = {
            "type": "FeatureCollection",
            "features": [f.to_json_object() for f in self.features],
        }
        return set_optional_members(out, self.bbox, self.foreign_members)
