import json

import pytest

from gqlkit.scalars import ID, MapScalar, Unmarshaler


def test_id_implements_only_id():
    assert ID.implements_graphql_type("ID") is True
    assert ID.implements_graphql_type("String") is False


def test_id_from_string():
    value = ID.unmarshal_graphql("1234")
    assert value == "1234"
    assert isinstance(value, ID)


def test_id_from_int():
    assert ID.unmarshal_graphql(1234) == "1234"


@pytest.mark.parametrize("bad", [1.5, True, None, ["1"]])
def test_id_rejects_other_types(bad):
    with pytest.raises(TypeError, match="wrong type for ID"):
        ID.unmarshal_graphql(bad)


def test_id_to_json_round_trip():
    assert ID("2001").to_json() == '"2001"'
    tricky = ID('a"b\\c')
    assert json.loads(tricky.to_json()) == 'a"b\\c'


def test_map_scalar_implements_only_map():
    assert MapScalar.implements_graphql_type("Map") is True
    assert MapScalar.implements_graphql_type("ID") is False


def test_map_scalar_from_dict():
    data = {"name": "x", "nested": {"n": 1}}
    value = MapScalar.unmarshal_graphql(data)
    assert value == data
    assert isinstance(value, MapScalar)


@pytest.mark.parametrize("bad", [[("a", 1)], "text", {1: "a"}])
def test_map_scalar_rejects_other_types(bad):
    with pytest.raises(TypeError, match="wrong type"):
        MapScalar.unmarshal_graphql(bad)


def test_unmarshaler_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Unmarshaler()