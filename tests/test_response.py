import json

from gqlkit.errors import Location, QueryError
from gqlkit.response import Response


def test_empty_response():
    assert Response().to_dict() == {}
    assert Response().to_json() == "{}"


def test_data_only():
    response = Response(data='{"hello": "Hello world!"}')
    assert response.to_dict() == {"data": {"hello": "Hello world!"}}
    assert response.to_json() == '{"data":{"hello":"Hello world!"}}'


def test_null_data_is_kept():
    assert Response(data="null").to_dict() == {"data": None}


def test_errors_serialised_first():
    response = Response(
        errors=[QueryError("x", path=["b"])],
        data='{"a": null}',
        extensions={"trace": 1},
    )
    decoded = json.loads(response.to_json())
    assert list(decoded) == ["errors", "data", "extensions"]
    assert decoded["errors"] == [{"message": "x", "path": ["b"]}]


def test_error_locations_in_json():
    response = Response(errors=[QueryError("bad", locations=[Location(2, 26)])])
    assert response.to_dict() == {
        "errors": [{"message": "bad", "locations": [{"line": 2, "column": 26}]}]
    }