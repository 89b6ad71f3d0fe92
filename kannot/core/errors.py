"""
Errors — Failure taxonomy for graph construction and analysis.

Every failure here is synchronous and unrecoverable for the object
being built. Nothing is retried and no partial graph is returned.
"""

from typing import Any, Iterable


class KannotError(Exception):
    """Base class for all kannot errors."""


class TypeConstraintViolation(KannotError, TypeError):
    """A constructor received a value outside its accepted types."""

    def __init__(self, expected: Iterable[str], actual: str, field: str = None):
        self.expected = tuple(expected)
        self.actual = actual
        self.field = field
        where = f" for '{field}'" if field else ""
        super().__init__(
            f"Expected one of [{', '.join(self.expected)}]{where}, got {actual}"
        )


class WriteOnceViolation(KannotError, TypeError):
    """A write-once field or append-once collection was set twice."""

    def __init__(self, field: str, old: Any, new: Any):
        self.field = field
        self.old = old
        self.new = new
        super().__init__(
            f"'{field}' cannot be changed once initialized "
            f"(current value {old!s}, new value {new!s})"
        )


class MissingFieldError(KannotError, ValueError):
    """A mandatory field was absent at construction."""

    def __init__(self, field: str, owner: str):
        self.field = field
        self.owner = owner
        super().__init__(f"{owner} requires '{field}'")


class UnresolvedReferenceError(KannotError, LookupError):
    """A reconstruction lookup did not match anything in the sentence."""


class UnknownTagError(KannotError, KeyError):
    """A tag catalog lookup used a name outside the catalog."""

    def __init__(self, catalog: str, name: str):
        self.catalog = catalog
        self.name = name
        super().__init__(f"'{name}' is not a {catalog} tag")

    def __str__(self) -> str:
        return self.args[0]


class BackendError(KannotError, RuntimeError):
    """The analyzer backend failed or could not answer."""
