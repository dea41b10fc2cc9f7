"""Custom scalar types that can decode themselves from GraphQL input."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any


class Unmarshaler(ABC):
    """A Python type mapped to a custom GraphQL scalar."""

    @classmethod
    @abstractmethod
    def implements_graphql_type(cls, name: str) -> bool:
        """Return True if this type represents the scalar called ``name``."""

    @classmethod
    @abstractmethod
    def unmarshal_graphql(cls, value: Any) -> Unmarshaler:
        """Build an instance from an input value, raising TypeError if unusable."""


class ID(str, Unmarshaler):
    """The GraphQL ``ID`` scalar."""

    __slots__ = ()

    @classmethod
    def implements_graphql_type(cls, name: str) -> bool:
        return name == "ID"

    @classmethod
    def unmarshal_graphql(cls, value: Any) -> ID:
        if isinstance(value, str):
            return cls(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(str(value))
        raise TypeError(f"wrong type for ID: {type(value).__name__}")

    def to_json(self) -> str:
        """The ID as a JSON string literal."""
        return json.dumps(str(self), ensure_ascii=False)


class MapScalar(dict, Unmarshaler):
    """A ``Map`` scalar holding an arbitrary string-keyed object."""

    @classmethod
    def implements_graphql_type(cls, name: str) -> bool:
        return name == "Map"

    @classmethod
    def unmarshal_graphql(cls, value: Any) -> MapScalar:
        if not isinstance(value, dict) or not all(isinstance(k, str) for k in value):
            raise TypeError("wrong type")
        return cls(value)