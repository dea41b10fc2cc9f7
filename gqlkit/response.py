"""The response produced by executing a GraphQL operation."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from gqlkit.errors import QueryError


@dataclass
class Response:
    """Errors, data as raw JSON text, and optional extensions.

    Errors come first when serialised.
    """

    errors: list[QueryError] = field(default_factory=list)
    data: str | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """The response as plain JSON-compatible values, leaving out empty members."""
        result: dict[str, Any] = {}
        if self.errors:
            result["errors"] = [err.to_dict() for err in self.errors]
        if self.data:
            result["data"] = json.loads(self.data)
        if self.extensions:
            result["extensions"] = dict(self.extensions)
        return result

    def to_json(self) -> str:
        """The response encoded as compact JSON."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)