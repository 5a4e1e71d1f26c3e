from typing import Any, Dict

import msgspec


def json_type_name(value: Any) -> str:
    """The name of a JSON value's kind, as used in error messages."""
    if value is None:
        return "null"
    # bool before int, since bool is an int subclass
    elif isinstance(value, bool):
        return "bool"
    elif isinstance(value, int):
        return "int"
    elif isinstance(value, float):
        return "float"
    elif isinstance(value, str):
        return "str"
    elif isinstance(value, (list, tuple)):
        return "array"
    elif isinstance(value, dict):
        return "object"
    return type(value).__name__


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class GeoJsonStruct(msgspec.Struct, frozen=True):
    """Shared behavior for the three GeoJSON object variants."""

    def to_json_object(self) -> Dict[str, Any]:
        raise NotImplementedError

    @property
    def __geo_interface__(self) -> Dict[str, Any]:
        return self.to_json_object()

    def __str__(self) -> str:
        return msgspec.json.encode(self.to_json_object()).decode("utf-8")
