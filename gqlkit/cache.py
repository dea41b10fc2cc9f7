"""Cache hints that resolvers add while a request runs."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from datetime import timedelta
from enum import IntEnum
from typing import Iterator

SCHEMA = """
	schema {
		query: Query
	}

	type Query {
		hello(name: String!): String!
		me: UserProfile!
	}

	type UserProfile {
		name: String!
	}
"""


class Scope(IntEnum):
    """Who may cache a response."""

    PUBLIC = 0
    PRIVATE = 1


@dataclass(frozen=True)
class Hint:
    """How long something may be cached, and by whom."""

    max_age: timedelta | None = None
    scope: Scope = Scope.PUBLIC

    def __str__(self) -> str:
        """The HTTP Cache-Control value of the hint."""
        if self.max_age is None:
            raise ValueError("hint has no max age")
        name = "public" if self.scope is Scope.PUBLIC else "private"
        return f"{name}, max-age={int(self.max_age.total_seconds())}"


class HintCollector:
    """Gathers the hints of one request and merges them into one."""

    def __init__(self) -> None:
        self._hints: list[Hint] = []
        self._lock = threading.Lock()

    def add(self, hint: Hint) -> None:
        with self._lock:
            self._hints.append(hint)

    def resolve(self) -> Hint:
        """The shortest max age among the hints; private if any hint is private."""
        with self._lock:
            hints = list(self._hints)
        scope = Scope.PRIVATE if any(h.scope is Scope.PRIVATE for h in hints) else Scope.PUBLIC
        ages = [h.max_age for h in hints if h.max_age is not None]
        return Hint(max_age=min(ages) if ages else timedelta(0), scope=scope)


_current: ContextVar[HintCollector | None] = ContextVar("cache_hints", default=None)


def add_hint(hint: Hint) -> None:
    """Record a hint for the current request, if hints are being collected."""
    collector = _current.get()
    if collector is not None:
        collector.add(hint)


@contextmanager
def hintable() -> Iterator[HintCollector]:
    """Collect the hints added while the block runs."""
    collector = HintCollector()
    token = _current.set(collector)
    try:
        yield collector
    finally:
        _current.reset(token)


@dataclass
class UserProfile:
    name: str


class CachingResolver:
    """Root resolver that adds cache hints to its results."""

    def hello(self, name: str) -> str:
        add_hint(Hint(max_age=timedelta(hours=1), scope=Scope.PUBLIC))
        return f"Hello {name}!"

    def me(self) -> UserProfile:
        add_hint(Hint(max_age=timedelta(minutes=1), scope=Scope.PRIVATE))
        return UserProfile(name="World")