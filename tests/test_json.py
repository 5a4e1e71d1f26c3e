import io
from typing import Tuple

import msgspec
import pytest

import geostruct
from geostruct import Feature, FeatureCollection, Geometry, Point


FEATURE_TEXT = """{
    "type": "Feature",
    "geometry": {
        "type": "Point",
        "coordinates": [102.0, 0.5]
    },
    "properties": null
}"""

COLLECTION_TEXT = """{
  "type": "FeatureCollection",
  "features": [
    {
      "type": "Feature",
      "properties": {},
      "geometry": {
        "type": "Point",
        "coordinates": [-0.13583511114120483, 51.5218870403801]
      }
    }
  ]
}"""

MALFORMED_TEXT = """{
   "type": "FeatureCollection",
   "features": [
     !INTENTIONAL_TYPO! {
       "type": "Feature",
       "properties": {},
       "geometry": {
         "type": "Point",
         "coordinates": [-0.13583511114120483, 51.5218870403801]
       }
     }
   ]
}"""


def test_module_dir():
    assert set(dir(geostruct.json)) == {
        "Encoder",
        "Decoder",
        "encode",
        "decode",
        "dump",
        "load",
    }


class TestDecode:
    @pytest.mark.parametrize("buf", [FEATURE_TEXT, FEATURE_TEXT.encode()])
    def test_decode_str_or_bytes(self, buf):
        res = geostruct.json.decode(buf)
        assert res == Feature(geometry=Geometry(Point((102.0, 0.5))))

    def test_decode_feature_collection(self):
        res = geostruct.json.decode(COLLECTION_TEXT)
        assert isinstance(res, FeatureCollection)
        assert len(res.features) == 1
        assert res.features[0].geometry.value.coordinates == (
            -0.13583511114120483,
            51.5218870403801,
        )

    def test_malformed_json(self):
        with pytest.raises(geostruct.MalformedJson) as rec:
            geostruct.json.decode(MALFORMED_TEXT)
        assert isinstance(rec.value.error, msgspec.DecodeError)

    @pytest.mark.parametrize("buf", ["", "{", '{"type": "Point",}', "nul"])
    def test_malformed_json_variants(self, buf):
        with pytest.raises(geostruct.MalformedJson):
            geostruct.json.decode(buf)

    @pytest.mark.parametrize("buf", ["[]", "1", '"Point"', "null", "true"])
    def test_non_object(self, buf):
        with pytest.raises(geostruct.ExpectedObjectValue) as rec:
            geostruct.json.decode(buf)
        assert rec.value.value == msgspec.json.decode(buf)

    def test_unrecognized_tag(self):
        with pytest.raises(geostruct.EmptyType):
            geostruct.json.decode('{"type": "Circle"}')

    def test_position_type(self):
        res = geostruct.json.decode(
            '{"type": "Point", "coordinates": [1, 2]}', position=Tuple[float, float]
        )
        assert res.value.coordinates == (1.0, 2.0)

    def test_decoder(self):
        dec = geostruct.json.Decoder(position=Tuple[float, float])
        assert repr(dec) == f"Decoder(position={Tuple[float, float]!r})"
        with pytest.raises(geostruct.InvalidPosition):
            dec.decode('{"type": "Point", "coordinates": [1, 2, 3]}')


class TestLoad:
    def test_load(self):
        res = geostruct.json.load(io.BytesIO(FEATURE_TEXT.encode()))
        assert res == geostruct.json.decode(FEATURE_TEXT)

    def test_load_text_stream(self):
        res = geostruct.json.load(io.StringIO(COLLECTION_TEXT))
        assert isinstance(res, FeatureCollection)

    def test_load_malformed(self):
        with pytest.raises(msgspec.DecodeError) as rec:
            geostruct.json.load(io.StringIO(MALFORMED_TEXT))
        assert not isinstance(rec.value, geostruct.GeoJsonError)

    def test_load_non_object(self):
        with pytest.raises(msgspec.ValidationError, match="Expected `object`"):
            geostruct.json.load(io.BytesIO(b"[1, 2]"))

    def test_load_invalid_geojson(self):
        with pytest.raises(msgspec.ValidationError, match="unrecognized") as rec:
            geostruct.json.load(io.BytesIO(b'{"type": "Circle"}'))
        assert isinstance(rec.value.__cause__, geostruct.EmptyType)

    def test_load_position_type(self):
        res = geostruct.json.load(
            io.BytesIO(b'{"type": "Point", "coordinates": [1, 2]}'),
            position=Tuple[int, int],
        )
        assert res.value.coordinates == (1, 2)


class TestEncode:
    def test_encode(self):
        obj = geostruct.json.decode(FEATURE_TEXT)
        assert geostruct.json.encode(obj) == (
            b'{"type":"Feature","geometry":{"type":"Point",'
            b'"coordinates":[102.0,0.5]},"properties":null}'
        )

    def test_str_matches_encode(self):
        obj = geostruct.json.decode(COLLECTION_TEXT)
        assert str(obj) == geostruct.json.encode(obj).decode()

    def test_encode_not_geojson(self):
        with pytest.raises(TypeError):
            geostruct.json.encode({"type": "Point", "coordinates": [1.0, 2.0]})

    def test_encoder_sorted(self):
        enc = geostruct.json.Encoder(order="sorted")
        obj = Geometry(Point((1.0, 2.0)), foreign_members={"a": 1})
        assert enc.encode(obj) == b'{"a":1,"coordinates":[1.0,2.0],"type":"Point"}'

    def test_encoder_indent(self):
        enc = geostruct.json.Encoder(indent=2)
        res = enc.encode(Geometry(Point((1.0, 2.0))))
        assert res.startswith(b'{\n  "type": "Point"')
        assert msgspec.json.decode(res) == {"type": "Point", "coordinates": [1.0, 2.0]}

    def test_encoder_repr(self):
        enc = geostruct.json.Encoder(order="sorted", indent=4)
        assert repr(enc) == "Encoder(order='sorted', indent=4)"

    def test_dump(self):
        buf = io.BytesIO()
        obj = geostruct.json.decode(COLLECTION_TEXT)
        geostruct.json.dump(obj, buf)
        assert buf.getvalue() == geostruct.json.encode(obj)


@pytest.mark.parametrize(
    "obj",
    [
        Geometry(Point((102.0, 0.5)), bbox=[102.0, 0.5, 102.0, 0.5]),
        Feature(
            geometry=Geometry(Point((1.0, 2.0)), foreign_members={"crs": None}),
            properties={"nested": {"list": [1, "two", None]}},
            id="f1",
            bbox=[1.0, 2.0, 1.0, 2.0],
            foreign_members={"title": "Example", "when": {"start": "2020"}},
        ),
        FeatureCollection(
            [Feature(id=1), Feature(id=2.5, properties={})],
            foreign_members={"name": "collection"},
        ),
    ],
)
def test_roundtrip(obj):
    buf = geostruct.json.encode(obj)
    value = msgspec.json.decode(buf)
    assert geostruct.from_json_value(value) == obj
    assert geostruct.json.decode(buf) == obj
