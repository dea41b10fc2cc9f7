"""An example resolver whose errors carry extensions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gqlkit.scalars import ID

SCHEMA = """
	schema {
		query: Query
	}
	type Query {
		droid(id: ID!): Droid!
	}
	# An autonomous mechanical character in the Star Wars universe
	type Droid {
		# The ID of the droid
		id: ID!
		# What others call this droid
		name: String!
	}
"""


@dataclass(frozen=True)
class _Droid:
    id: ID
    name: str


DROIDS: tuple[_Droid, ...] = (
    _Droid(ID("2000"), "C-3PO"),
    _Droid(ID("2001"), "R2-D2"),
)

DROID_DATA = {d.id: d for d in DROIDS}


class DroidNotFoundError(Exception):
    """Raised for an unknown droid; carries a code for the response extensions."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"error [{self.code}]: {self.message}"

    def extensions(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


class DroidResolver:
    def __init__(self, droid: _Droid) -> None:
        self._droid = droid

    def id(self) -> ID:
        return self._droid.id

    def name(self) -> str:
        return self._droid.name


class Resolver:
    """Root query resolver."""

    def droid(self, id: str) -> DroidResolver:
        found = DROID_DATA.get(ID(id))
        if found is None:
            raise DroidNotFoundError(
                code="NotFound", message="This is not the droid you are looking for"
            )
        return DroidResolver(found)