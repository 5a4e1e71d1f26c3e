import logging
from typing import IO, Any, Dict, Literal, Optional, Union

import msgspec

from .errors import ExpectedObjectValue, GeoJsonError, MalformedJson
from .geojson import GeoJson, from_json_object, to_json_object

__all__ = ("Encoder", "Decoder", "encode", "decode", "dump", "load")


def __dir__():
    return __all__


_logger = logging.getLogger(__name__)


class Decoder:
    """A GeoJSON decoder.

    Parameters
    ----------
    position : type, optional
        The position type to convert coordinates into. May be any type
        ``msgspec`` can convert an array of numbers into (e.g.
        ``Tuple[float, float]``). Defaults to a ``tuple`` of ``float``.
    """

    def __init__(self, *, position: Any = None):
        self.position = position
        self._decoder = msgspec.json.Decoder()
        self._object_decoder = msgspec.json.Decoder(Dict[str, Any])

    def __repr__(self):
        return f"Decoder(position={self.position!r})"

    def decode(self, buf: Union[bytes, str]) -> GeoJson:
        """Deserialize a GeoJSON object from JSON text.

        Parameters
        ----------
        buf : bytes-like or str
            The message to decode.

        Returns
        -------
        obj : Geometry, Feature, or FeatureCollection

        Raises
        ------
        MalformedJson
            If ``buf`` isn't valid JSON.
        ExpectedObjectValue
            If the top-level JSON value isn't an object.
        """
        try:
            value = self._decoder.decode(buf)
        except msgspec.DecodeError as exc:
            _logger.debug("Rejected malformed JSON: %s", exc)
            raise MalformedJson(exc) from None
        if not isinstance(value, dict):
            raise ExpectedObjectValue(value)
        return from_json_object(value, position=self.position)

    def load(self, fp: IO) -> GeoJson:
        """Deserialize a GeoJSON object from a readable file-like object.

        Unlike `decode`, errors are reported as the JSON layer's own error
        types: ``msgspec.DecodeError`` for malformed JSON, and
        ``msgspec.ValidationError`` for anything that isn't a valid GeoJSON
        object. The original `GeoJsonError` is chained as the cause.
        """
        value = self._object_decoder.decode(fp.read())
        try:
            return from_json_object(value, position=self.position)
        except GeoJsonError as exc:
            raise msgspec.ValidationError(str(exc)) from exc


class Encoder:
    """A GeoJSON encoder.

    Parameters
    ----------
    order : {None, 'deterministic', 'sorted'}, optional
        The ordering to use when encoding object members. Passed through to
        ``msgspec.json.Encoder``.
    indent : int, optional
        If set, the output is pretty-printed with this many spaces per
        indentation level. Defaults to compact output.
    """

    def __init__(
        self,
        *,
        order: Literal[None, "deterministic", "sorted"] = None,
        indent: Optional[int] = None,
    ):
        self.order = order
        self.indent = indent
        self._encoder = msgspec.json.Encoder(order=order)

    def __repr__(self):
        return f"Encoder(order={self.order!r}, indent={self.indent!r})"

    def encode(self, obj: GeoJson) -> bytes:
        """Serialize a GeoJSON object as JSON.

        Foreign members and bounding boxes are always written, so decoding
        the output yields an object equal to ``obj``.
        """
        buf = self._encoder.encode(to_json_object(obj))
        if self.indent is not None:
            buf = msgspec.json.format(buf, indent=self.indent)
        return buf

    def dump(self, obj: GeoJson, fp: IO[bytes]) -> None:
        """Serialize a GeoJSON object to a writable binary file-like object."""
        fp.write(self.encode(obj))


_decoder = Decoder()
_encoder = Encoder()


def decode(buf: Union[bytes, str], *, position: Any = None) -> GeoJson:
    """Deserialize a GeoJSON object from JSON text.

    Parameters
    ----------
    buf : bytes-like or str
        The message to decode.
    position : type, optional
        The position type to convert coordinates into.

    Returns
    -------
    obj : Geometry, Feature, or FeatureCollection

    See Also
    --------
    Decoder.decode
    """
    decoder = _decoder if position is None else Decoder(position=position)
    return decoder.decode(buf)


def load(fp: IO, *, position: Any = None) -> GeoJson:
    """Deserialize a GeoJSON object from a readable file-like object.

    See Also
    --------
    Decoder.load
    """
    decoder = _decoder if position is None else Decoder(position=position)
    return decoder.load(fp)


def encode(obj: GeoJson) -> bytes:
    """Serialize a GeoJSON object as compact JSON.

    See Also
    --------
    Encoder.encode
    """
    return _encoder.encode(obj)


def dump(obj: GeoJson, fp: IO[bytes]) -> None:
    _encoder.dump(obj, fp)
