import logging

from .errors import (
    BboxExpectedArray,
    BboxExpectedNumericValues,
    EmptyType,
    ExpectedArrayValue,
    ExpectedF64Value,
    ExpectedObjectValue,
    ExpectedProperty,
    ExpectedStringValue,
    ExpectedType,
    FeatureInvalidGeometryValue,
    FeatureInvalidIdentifierType,
    GeoJsonError,
    GeoJsonExpectedObject,
    GeometryUnknownType,
    InvalidPosition,
    MalformedJson,
    NotAFeature,
    PositionTooShort,
    PropertiesExpectedObjectOrNull,
)
from .geometry import (
    Geometry,
    GeometryCollection,
    GeometryValue,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from .feature import Feature, FeatureCollection, Id
from .position import Position
from .geojson import (
    GeoJson,
    Type,
    as_feature,
    as_feature_collection,
    as_geometry,
    coords,
    from_geo_interface,
    from_json_object,
    from_json_value,
    resolve_type,
    to_json_object,
    to_json_value,
)

from . import json
from ._version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())
