"""
Edges — labeled, directed relations between Words.

Two independent DAGs share the same Words:
- DepEdge: governor → dependent (dependency structure)
- RoleEdge: predicate → argument (semantic roles)

Building an edge registers it on both endpoint Words.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Union

from kannot.core.errors import MissingFieldError
from kannot.data.container import type_check
from kannot.data.morpheme import Word
from kannot.tags import DependencyTag, PhraseTag, RoleType, tag_name


class DAGEdge(ABC):
    """
    Edge `src → dest`. `dest` is mandatory; an absent `src` stands for ROOT.
    """

    def __init__(self, src: Optional[Word], dest: Word, label: Optional[str]):
        type_check([src], None, Word, field="src")
        if dest is None:
            raise MissingFieldError("dest", type(self).__name__)
        type_check([dest], Word, field="dest")
        type_check([label], None, str, field="label")

        self._src = src
        self._dest = dest
        self._label = label

    @property
    def src(self) -> Optional[Word]:
        return self._src

    @property
    def dest(self) -> Word:
        return self._dest

    @property
    @abstractmethod
    def label(self):
        ...

    def get_src(self) -> Optional[Word]:
        return self._src

    def get_dest(self) -> Word:
        return self._dest

    def get_label(self):
        return self.label

    def equals(self, other) -> bool:
        """
        Same edge type, same relation label, and value-equal endpoints.

        Two ROOT sources are equal; ROOT never equals a Word.
        """
        if type(other) is not type(self) or self._label != other._label:
            return False
        if self._src is None or other.src is None:
            if self._src is not other.src:
                return False
        elif not self._src.equals(other.src):
            return False
        return self._dest.equals(other.dest)

    def __str__(self) -> str:
        src = "ROOT" if self._src is None else str(self._src)
        return f"{self._label or ''}('{src}' → '{self._dest}')"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class DepEdge(DAGEdge):
    """
    A dependency relation.

    `type` is the phrase tag of the dependent; `dep_type` is the optional
    dependency function (e.g. SBJ, OBJ).
    """

    def __init__(
        self,
        governor: Optional[Word],
        dependent: Word,
        type: Union[str, PhraseTag],
        dep_type: Union[str, DependencyTag, None] = None,
        original_label: Optional[str] = None,
    ):
        if type is None:
            raise MissingFieldError("type", "DepEdge")
        type_check([type], str, field="type")
        type_check([dep_type], None, str, field="dep_type")
        type_check([original_label], None, str, field="original_label")

        dep_type = None if dep_type is None else tag_name(dep_type, DependencyTag)
        super().__init__(governor, dependent, dep_type)

        self._type = tag_name(type, PhraseTag)
        self._original_label = original_label

        self._dest.governor_edge = self
        if self._src is not None:
            self._src._add_dependent_edge(self)

    @property
    def governor(self) -> Optional[Word]:
        return self._src

    @property
    def dependent(self) -> Word:
        return self._dest

    @property
    def label(self) -> Optional[DependencyTag]:
        return None if self._label is None else DependencyTag.with_name(self._label)

    @property
    def dep_type(self) -> Optional[DependencyTag]:
        return self.label

    @property
    def type(self) -> PhraseTag:
        return PhraseTag.with_name(self._type)

    @property
    def original_label(self) -> Optional[str]:
        return self._original_label

    def get_governor(self) -> Optional[Word]:
        return self._src

    def get_dependent(self) -> Word:
        return self._dest

    def get_dep_type(self) -> Optional[DependencyTag]:
        return self.dep_type

    def get_type(self) -> PhraseTag:
        return self.type

    def get_original_label(self) -> Optional[str]:
        return self._original_label

    def equals(self, other) -> bool:
        return isinstance(other, DepEdge) and self._type == other._type and super().equals(other)

    def __str__(self) -> str:
        return f"{self._type}{super().__str__()}"


class RoleEdge(DAGEdge):
    """
    A semantic-role relation from a predicate to one of its arguments.

    The argument is mandatory. The predicate may be absent.
    """

    def __init__(
        self,
        predicate: Optional[Word],
        argument: Word,
        label: Union[str, RoleType],
        modifiers: Optional[Iterable[Word]] = None,
        original_label: Optional[str] = None,
    ):
        if argument is None:
            raise MissingFieldError("argument", "RoleEdge")
        if label is None:
            raise MissingFieldError("label", "RoleEdge")
        type_check([label], str, field="label")
        type_check([original_label], None, str, field="original_label")
        modifiers = tuple(modifiers or ())
        type_check(modifiers, Word, field="modifiers")

        super().__init__(predicate, argument, tag_name(label, RoleType))

        self._modifiers = modifiers
        self._original_label = original_label

        self._dest._add_predicate_role(self)
        if self._src is not None:
            self._src._add_argument_role(self)

    @property
    def predicate(self) -> Optional[Word]:
        return self._src

    @property
    def argument(self) -> Word:
        return self._dest

    @property
    def label(self) -> RoleType:
        return RoleType.with_name(self._label)

    @property
    def modifiers(self) -> tuple:
        return self._modifiers

    @property
    def original_label(self) -> Optional[str]:
        return self._original_label

    def get_predicate(self) -> Optional[Word]:
        return self._src

    def get_argument(self) -> Word:
        return self._dest

    def get_modifiers(self) -> tuple:
        return self._modifiers

    def get_original_label(self) -> Optional[str]:
        return self._original_label

    def __str__(self) -> str:
        src = "ROOT" if self._src is None else self._src.surface
        modifiers = " ".join(w.surface for w in self._modifiers)
        return f"{self._label}('{src}' → '{self._dest.surface}/{modifiers}')"
