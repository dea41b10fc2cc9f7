from datetime import timedelta

import pytest

from gqlkit.cache import (
    CachingResolver,
    Hint,
    HintCollector,
    Scope,
    add_hint,
    hintable,
)


def test_hint_header_value():
    assert str(Hint(timedelta(hours=1), Scope.PUBLIC)) == "public, max-age=3600"


def test_hint_without_max_age_cannot_render():
    with pytest.raises(ValueError):
        str(Hint(None, Scope.PUBLIC))


def test_empty_collector_resolves_to_no_cache():
    assert HintCollector().resolve() == Hint(timedelta(0), Scope.PUBLIC)


def test_collector_takes_shortest_age_and_private_scope():
    collector = HintCollector()
    collector.add(Hint(timedelta(hours=1), Scope.PUBLIC))
    collector.add(Hint(timedelta(minutes=1), Scope.PRIVATE))
    collector.add(Hint(None, Scope.PUBLIC))
    assert collector.resolve() == Hint(timedelta(minutes=1), Scope.PRIVATE)


def test_hints_without_age_are_ignored():
    collector = HintCollector()
    collector.add(Hint(None, Scope.PUBLIC))
    collector.add(Hint(timedelta(seconds=30), Scope.PUBLIC))
    assert collector.resolve().max_age == timedelta(seconds=30)


def test_add_hint_outside_hintable_is_ignored():
    with hintable() as collector:
        pass
    add_hint(Hint(timedelta(seconds=5), Scope.PRIVATE))
    assert collector.resolve() == Hint(timedelta(0), Scope.PUBLIC)


def test_resolver_adds_hints():
    resolver = CachingResolver()
    with hintable() as collector:
        assert resolver.hello("World") == "Hello World!"
        assert resolver.me().name == "World"
    hint = collector.resolve()
    assert hint == Hint(timedelta(minutes=1), Scope.PRIVATE)
    assert str(hint) == "private, max-age=60"


def test_nested_hintable_restores_outer():
    with hintable() as outer:
        with hintable() as inner:
            add_hint(Hint(timedelta(seconds=10), Scope.PRIVATE))
        add_hint(Hint(timedelta(seconds=20), Scope.PUBLIC))
    assert inner.resolve() == Hint(timedelta(seconds=10), Scope.PRIVATE)
    assert outer.resolve() == Hint(timedelta(seconds=20), Scope.PUBLIC)