import pytest

from gqlkit.customerrors import DROIDS, DroidNotFoundError, Resolver


def test_known_droids_round_trip():
    root = Resolver()
    for droid in DROIDS:
        found = root.droid(droid.id)
        assert found.id() == droid.id
        assert found.name() == droid.name


def test_droid_name():
    assert Resolver().droid("2000").name() == "C-3PO"


def test_unknown_droid_raises_with_extensions():
    with pytest.raises(DroidNotFoundError) as info:
        Resolver().droid("9999")
    err = info.value
    assert err.code == "NotFound"
    assert err.extensions() == {"code": err.code, "message": err.message}
    assert err.message == "This is not the droid you are looking for"


def test_error_text_includes_code_and_message():
    err = DroidNotFoundError(code="Gone", message="missing")
    assert str(err) == "error [Gone]: missing"