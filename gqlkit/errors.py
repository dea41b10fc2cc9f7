"""Query errors reported to clients and the handler that turns panics into them."""

from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

_VERB = re.compile(r"%([-+# 0]*)(\d*)(?:\.(\d+))?([a-zA-Z%])")


@dataclass(frozen=True)
class Location:
    """A line and column inside a query document."""

    line: int
    column: int

    def before(self, other: Location) -> bool:
        """Return True if this location comes before ``other``."""
        return (self.line, self.column) < (other.line, other.column)

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}


def _same_error(a: BaseException | None, b: BaseException | None) -> bool:
    if a is b:
        return True
    if a is None or b is None:
        return False
    return (
        type(a) is type(b)
        and a.args == b.args
        and getattr(a, "__dict__", {}) == getattr(b, "__dict__", {})
    )


class QueryError(Exception):
    """An error that is reported in the ``errors`` list of a response."""

    def __init__(
        self,
        message: str,
        *,
        locations: list[Location] | None = None,
        path: list[Any] | None = None,
        rule: str = "",
        resolver_error: BaseException | None = None,
        extensions: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.locations = list(locations or [])
        self.path = list(path or [])
        self.rule = rule
        self.resolver_error = resolver_error
        self.extensions = dict(extensions or {})
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        text = f"graphql: {self.message}"
        return text + "".join(
            f" (line {loc.line}, column {loc.column})" for loc in self.locations
        )

    def __repr__(self) -> str:
        return (
            f"QueryError(message={self.message!r}, locations={self.locations!r}, "
            f"path={self.path!r}, rule={self.rule!r}, "
            f"resolver_error={self.resolver_error!r}, extensions={self.extensions!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryError):
            return NotImplemented
        return (
            self.message == other.message
            and self.locations == other.locations
            and self.path == other.path
            and self.rule == other.rule
            and self.extensions == other.extensions
            and _same_error(self.resolver_error, other.resolver_error)
        )

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> dict[str, Any]:
        """The JSON form of the error, leaving out empty members."""
        result: dict[str, Any] = {"message": self.message}
        if self.locations:
            result["locations"] = [loc.to_dict() for loc in self.locations]
        if self.path:
            result["path"] = list(self.path)
        if self.extensions:
            result["extensions"] = dict(self.extensions)
        return result


def _render_value(value: Any, verb: str) -> str:
    if verb in "vs":
        if value is None:
            return "<nil>"
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
    if verb == "q":
        return json.dumps(str(value), ensure_ascii=False)
    if verb == "T":
        return type(value).__name__
    if verb == "t":
        return "true" if value else "false"
    raise TypeError(verb)


def _go_format(fmt: str, args: tuple[Any, ...]) -> str:
    remaining = iter(args)

    def render(match: re.Match[str]) -> str:
        flags, width, precision, verb = match.groups()
        if verb == "%":
            return "%"
        try:
            value = next(remaining)
        except StopIteration:
            return f"%!{verb}(MISSING)"
        try:
            text = _render_value(value, verb)
        except TypeError:
            spec = "%" + flags + width + (f".{precision}" if precision else "") + verb
            try:
                return spec % value
            except (TypeError, ValueError):
                return f"%!{verb}({type(value).__name__}={value})"
        if width:
            size = int(width)
            text = text.ljust(size) if "-" in flags else text.rjust(size)
        return text

    out = _VERB.sub(render, fmt)
    extra = list(remaining)
    if extra:
        listed = ", ".join(f"{type(v).__name__}={v}" for v in extra)
        out += f"%!(EXTRA {listed})"
    return out


def errorf(fmt: str, *args: Any) -> QueryError:
    """Build a QueryError from a format string, wrapping a trailing exception."""
    cause = args[-1] if args and isinstance(args[-1], BaseException) else None
    return QueryError(_go_format(fmt, args), cause=cause)


class PanicHandler(ABC):
    """Turns an unexpected failure during execution into a QueryError."""

    @abstractmethod
    def make_panic_error(self, value: Any) -> QueryError:
        """Return the error to report for ``value``."""


class DefaultPanicHandler(PanicHandler):
    """Reports the failure value in a generic message."""

    def make_panic_error(self, value: Any) -> QueryError:
        return errorf("panic occurred: %v", value)