"""
Immutable Ordered Container — fixed-length, read-only sequences.

Every annotation that groups other annotations (Word, Entity, Tree,
CoreferenceGroup, Sentence) is one of these. Membership and order are
fixed at construction.
"""

from functools import reduce as _reduce
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from kannot.core.errors import TypeConstraintViolation

T = TypeVar("T")


def _type_label(t) -> str:
    return "None" if t is None else t.__name__


def type_check(values: Iterable[Any], *types, field: str = None) -> None:
    """
    Check that every value is an instance of one of `types`.

    `None` among `types` allows absent values.

    Raises:
        TypeConstraintViolation: on the first value outside `types`
    """
    allow_none = None in types
    classes = tuple(t for t in types if t is not None)
    for value in values:
        if value is None and allow_none:
            continue
        if classes and isinstance(value, classes):
            continue
        raise TypeConstraintViolation(
            [_type_label(t) for t in types],
            type(value).__name__,
            field=field,
        )


class ImmutableSequence(Generic[T]):
    """
    A read-only sequence with value-equality semantics.

    Python's `==` keeps identity semantics so that graph objects stay
    hashable; value comparison goes through `equals`.
    """

    def __init__(self, items: Iterable[T], *types: type):
        items = tuple(items)
        type_check(items, *types, field=type(self).__name__)
        self._items: tuple = items

    # -- sequence protocol ---------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    @property
    def length(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        raise TypeError(f"{type(self).__name__} does not support item assignment")

    def __delitem__(self, index) -> None:
        raise TypeError(f"{type(self).__name__} does not support item deletion")

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __contains__(self, value: Any) -> bool:
        return self.includes(value)

    # -- search ----------------------------------------------------------------

    def index_of(self, value: Any) -> int:
        """First index holding this exact object, or -1."""
        for i, item in enumerate(self._items):
            if item is value:
                return i
        return -1

    def last_index_of(self, value: Any) -> int:
        """Last index holding this exact object, or -1."""
        for i in range(len(self._items) - 1, -1, -1):
            if self._items[i] is value:
                return i
        return -1

    def index_of_value(self, value: T) -> int:
        """First index whose item `equals` the value, or -1."""
        return self.find_index(lambda x: x.equals(value))

    def last_index_of_value(self, value: T) -> int:
        """Last index whose item `equals` the value, or -1."""
        return self.find_last_index(lambda x: x.equals(value))

    def includes(self, value: Any) -> bool:
        return self.index_of(value) != -1

    def includes_value(self, value: T) -> bool:
        return self.index_of_value(value) != -1

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for item in self._items:
            if predicate(item):
                return item
        return None

    def find_index(self, predicate: Callable[[T], bool]) -> int:
        for i, item in enumerate(self._items):
            if predicate(item):
                return i
        return -1

    def find_last_index(self, predicate: Callable[[T], bool]) -> int:
        for i in range(len(self._items) - 1, -1, -1):
            if predicate(self._items[i]):
                return i
        return -1

    # -- functional transforms ---------------------------------------------

    def map(self, fn: Callable[[T], Any]) -> list:
        return [fn(item) for item in self._items]

    def filter(self, predicate: Callable[[T], bool]) -> list:
        return [item for item in self._items if predicate(item)]

    def reduce(self, fn: Callable[[Any, T], Any], initial: Any) -> Any:
        return _reduce(fn, self._items, initial)

    def reduce_right(self, fn: Callable[[Any, T], Any], initial: Any) -> Any:
        return _reduce(fn, reversed(self._items), initial)

    def every(self, predicate: Callable[[T], bool]) -> bool:
        return all(predicate(item) for item in self._items)

    def some(self, predicate: Callable[[T], bool]) -> bool:
        return any(predicate(item) for item in self._items)

    def for_each(self, fn: Callable[[T], Any]) -> None:
        for item in self._items:
            fn(item)

    def slice(self, start: Optional[int] = None, end: Optional[int] = None) -> tuple:
        return self._items[start:end]

    def entries(self) -> Iterator[tuple]:
        return enumerate(self._items)

    def values(self) -> Iterator[T]:
        return iter(self._items)

    def to_list(self) -> list:
        return list(self._items)

    # -- equality ----------------------------------------------------------

    def equals(self, other: Any) -> bool:
        """Same concrete type, same length, and pairwise `equals` in order."""
        if type(other) is not type(self) or len(other) != len(self):
            return False
        return all(a.equals(b) for a, b in zip(self._items, other))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"
