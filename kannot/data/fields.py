"""
Fields — Guarded attributes for late-bound back-references.

Back-references are established by a sibling, parent or edge object
after the owner already exists. These descriptors allow that single
assignment and reject any later change.
"""

from typing import Any, Iterable

from kannot.core.errors import WriteOnceViolation


class WriteOnce:
    """
    A scalar attribute settable once, from its default to a concrete value.

    Re-assigning the value already held is a no-op.
    """

    def __init__(self, default: Any = None):
        self.default = default
        self.name = None
        self.attr = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.attr = f"_wo_{name}"

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        value = instance.__dict__.get(self.attr)
        return self.default if value is None else value

    def accepts(self, current, value) -> bool:
        return current is None or current is value or current == value

    def __set__(self, instance, value) -> None:
        current = instance.__dict__.get(self.attr)
        if not self.accepts(current, value):
            raise WriteOnceViolation(self.name, current, value)
        instance.__dict__[self.attr] = value


class AppendOnce:
    """
    A collection attribute that can be populated once while still empty.

    The stored collection is frozen into a tuple.
    """

    def __init__(self):
        self.name = None
        self.attr = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.attr = f"_ao_{name}"

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance.__dict__.get(self.attr, ())

    def __set__(self, instance, value) -> None:
        current = instance.__dict__.get(self.attr, ())
        if current is value:
            return
        if len(current) > 0:
            raise WriteOnceViolation(self.name, list(current), list(value))
        instance.__dict__[self.attr] = tuple(value)


def bind_all(bindings: Iterable[tuple[WriteOnce, Any, Any]]) -> None:
    """
    Apply `(field, instance, value)` write-once assignments as one unit.

    Every assignment is checked first, including repeats of the same
    instance within `bindings`. If any is rejected, nothing is written.
    """
    bindings = list(bindings)
    staged = {}
    for field, instance, value in bindings:
        key = (id(instance), field.attr)
        current = staged[key] if key in staged else instance.__dict__.get(field.attr)
        if not field.accepts(current, value):
            raise WriteOnceViolation(field.name, current, value)
        staged[key] = value
    for field, instance, value in bindings:
        field.__set__(instance, value)
