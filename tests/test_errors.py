import pytest

from gqlkit.errors import (
    DefaultPanicHandler,
    Location,
    PanicHandler,
    QueryError,
    errorf,
)


def test_errorf_wraps_error():
    cause = EOFError("EOF")
    err = errorf("boom: %v", cause)
    assert err.__cause__ is cause
    assert err.message == "boom: EOF"


def test_error_without_cause():
    err = QueryError("boom")
    assert err.__cause__ is None


def test_errorf_no_arguments():
    err = errorf("boom")
    assert err.__cause__ is None
    assert err.message == "boom"


def test_errorf_non_error_argument():
    err = errorf("boom: %v", "shaka")
    assert err.__cause__ is None
    assert err.message == "boom: shaka"


def test_errorf_quoted_verb():
    err = errorf("no operation with name %q", "Foo")
    assert err.message == 'no operation with name "Foo"'


def test_default_panic_handler():
    handler = DefaultPanicHandler()
    q_err = handler.make_panic_error("foo")
    assert str(q_err) == "graphql: panic occurred: foo"
    assert q_err.message == "panic occurred: foo"


def test_panic_handler_is_abstract():
    with pytest.raises(TypeError):
        PanicHandler()


def test_str_includes_locations():
    err = QueryError("bad", locations=[Location(3, 20), Location(7, 1)])
    assert str(err) == "graphql: bad (line 3, column 20) (line 7, column 1)"


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Location(1, 5), Location(2, 1), True),
        (Location(2, 1), Location(2, 3), True),
        (Location(2, 3), Location(2, 3), False),
        (Location(3, 1), Location(2, 9), False),
    ],
)
def test_location_before(a, b, expected):
    assert a.before(b) is expected


def test_to_dict_omits_empty_members():
    assert QueryError("x").to_dict() == {"message": "x"}
    full = QueryError(
        "x",
        locations=[Location(1, 2)],
        path=["a", 0],
        extensions={"code": "NotFound"},
    )
    assert full.to_dict() == {
        "message": "x",
        "locations": [{"line": 1, "column": 2}],
        "path": ["a", 0],
        "extensions": {"code": "NotFound"},
    }


def test_equality_ignores_cause_but_not_resolver_error():
    a = QueryError("x", path=["b"], resolver_error=ValueError("x"), cause=KeyError("k"))
    b = QueryError("x", path=["b"], resolver_error=ValueError("x"))
    assert a == b
    assert a != QueryError("x", path=["b"], resolver_error=ValueError("y"))