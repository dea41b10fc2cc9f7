# gqlkit

A small set of GraphQL building blocks written in plain Python, with no
dependencies outside the standard library.

## What is inside

- `gqlkit.errors`: `QueryError`, the error reported in a response's `errors`
  list, with its `Location` values and a `to_dict()` JSON form; `errorf`, which
  builds a `QueryError` from a format string and keeps a trailing exception
  argument as the error's `__cause__`; and `PanicHandler` /
  `DefaultPanicHandler`, which turn an unexpected failure value into a
  `QueryError` reading `panic occurred: <value>`.
- `gqlkit.scalars`: the `Unmarshaler` base for custom scalars
  (`implements_graphql_type`, `unmarshal_graphql`), the `ID` scalar (accepts
  strings and integers, `to_json()` gives a JSON string literal), and
  `MapScalar`, which accepts an object with string keys.
- `gqlkit.response`: `Response`, holding errors, data as raw JSON text and
  extensions; `to_dict()` and `to_json()` leave out empty members and put the
  errors first.
- `gqlkit.cache`: cache-control hints. `Hint` (max age and `Scope`) renders as a
  `Cache-Control` value; `hintable()` is a context manager that collects the
  hints passed to `add_hint()` inside it into a `HintCollector`, whose
  `resolve()` gives the shortest max age, private if any hint was private.
  `CachingResolver` is an example resolver that adds such hints.
- `gqlkit.starwars`, `gqlkit.social`, `gqlkit.customerrors`: example schemas
  (each module's `SCHEMA` text) with resolver classes and their own data sets.

## Installation

```
pip install gqlkit
```

To run the test suite as well:

```
pip install "gqlkit[test]"
pytest
```

## Examples

Errors:

```python
from gqlkit.errors import Location, QueryError, errorf

err = errorf("boom: %s", OSError("disk"))
print(err)             # graphql: boom: disk
print(err.__cause__)   # disk

located = QueryError("bad field", locations=[Location(3, 20)])
print(located)         # graphql: bad field (line 3, column 20)
```

Cache hints:

```python
from datetime import timedelta
from gqlkit.cache import Hint, Scope, add_hint, hintable

with hintable() as collector:
    add_hint(Hint(max_age=timedelta(hours=1), scope=Scope.PUBLIC))
    add_hint(Hint(max_age=timedelta(minutes=1), scope=Scope.PRIVATE))

print(collector.resolve())   # private, max-age=60
```

Example resolvers:

```python
from gqlkit.starwars import Resolver

hero = Resolver().hero("EMPIRE")
print(hero.name())   # Luke Skywalker
```

```python
from gqlkit.customerrors import DroidNotFoundError, Resolver

try:
    Resolver().droid("9999")
except DroidNotFoundError as exc:
    print(exc)               # error [NotFound]: This is not the droid you are looking for
    print(exc.extensions())  # {'code': 'NotFound', 'message': 'This is not the droid you are looking for'}
```

## What this package does not do

gqlkit has no schema parser, no query validator and no executor. The `SCHEMA`
strings in the example modules are plain text, and the resolver classes are
ordinary Python objects that you call directly; nothing here runs a GraphQL
query against them or produces a `Response` for you. There is no HTTP server
and no subscription support, and there are no helpers for testing a schema's
answers to queries.