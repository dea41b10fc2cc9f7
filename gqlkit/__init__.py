"""GraphQL building blocks: query errors, custom scalars, responses, cache hints and example resolvers."""

__version__ = "0.1.0"
__all__ = [
    "errors",
    "scalars",
    "response",
    "cache",
    "starwars",
    "social",
    "customerrors",
]