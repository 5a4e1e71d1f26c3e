"""Helpers for reading and writing the members shared by GeoJSON objects."""
import logging
from typing import Any, Collection, Dict, List, Optional

from ._utils import is_number
from .errors import (
    BboxExpectedArray,
    BboxExpectedNumericValues,
    ExpectedProperty,
    ExpectedStringValue,
)

_logger = logging.getLogger(__name__)


def expect_type(obj: Dict[str, Any]) -> str:
    try:
        type_name = obj["type"]
    except KeyError:
        raise ExpectedProperty("type") from None
    if not isinstance(type_name, str):
        raise ExpectedStringValue(type_name)
    return type_name


def expect_member(obj: Dict[str, Any], name: str) -> Any:
    try:
        return obj[name]
    except KeyError:
        raise ExpectedProperty(name) from None


def get_bbox(obj: Dict[str, Any]) -> Optional[List[float]]:
    if "bbox" not in obj:
        return None
    bbox = obj["bbox"]
    if not isinstance(bbox, list):
        raise BboxExpectedArray(bbox)
    for item in bbox:
        if not is_number(item):
            raise BboxExpectedNumericValues(item)
    return [float(item) for item in bbox]


def get_foreign_members(
    obj: Dict[str, Any], reserved: Collection[str]
) -> Optional[Dict[str, Any]]:
    out = {k: v for k, v in obj.items() if k not in reserved}
    if out:
        _logger.debug("Keeping %d foreign member(s): %s", len(out), list(out))
        return out
    return None


def set_optional_members(
    out: Dict[str, Any],
    bbox: Optional[List[float]],
    foreign_members: Optional[Dict[str, Any]],
) -> Dict[str, Any]:
    if bbox is not None:
        out["bbox"] = list(bbox)
    if foreign_members:
        # Foreign members never shadow the members defined for the object
        for key, value in foreign_members.items():
            out.setdefault(key, value)
    return out
