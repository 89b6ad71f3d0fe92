"""
Morpheme and Word — the token layer of the annotation graph.

A Word owns its Morphemes. Building a Word finalizes each morpheme's
position (`id`) and owner (`word`); nothing else may change them.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from kannot.core.errors import MissingFieldError
from kannot.data.container import ImmutableSequence, type_check
from kannot.data.fields import WriteOnce, bind_all
from kannot.tags import POS, tag_name


class Morpheme:
    """
    The smallest tagged unit: surface text plus a Sejong POS tag.

    Back-references (`id`, `word`, `word_sense`) are write-once and are
    filled in by the owning Word and by the reconstruction pass.
    """

    id = WriteOnce(default=-1)
    word = WriteOnce()
    word_sense = WriteOnce()

    def __init__(
        self,
        surface: str,
        tag: Union[str, POS],
        original_tag: Optional[str] = None,
    ):
        type_check([surface], str, field="surface")
        type_check([tag], str, field="tag")
        type_check([original_tag], None, str, field="original_tag")
        if not surface:
            raise MissingFieldError("surface", "Morpheme")

        self._surface = surface
        self._tag = tag_name(tag, POS)
        self._original_tag = original_tag
        self._entities: list = []

    @property
    def surface(self) -> str:
        return self._surface

    @property
    def tag(self) -> POS:
        return POS.with_name(self._tag)

    @property
    def original_tag(self) -> Optional[str]:
        return self._original_tag

    @property
    def entities(self) -> tuple:
        """Entities whose span includes this morpheme, in registration order."""
        return tuple(self._entities)

    def _add_entity(self, entity) -> None:
        self._entities.append(entity)

    def get_surface(self) -> str:
        return self.surface

    def get_tag(self) -> POS:
        return self.tag

    def get_original_tag(self) -> Optional[str]:
        return self.original_tag

    def get_id(self) -> int:
        return self.id

    def get_word(self) -> Optional["Word"]:
        return self.word

    def get_word_sense(self) -> Optional[int]:
        return self.word_sense

    def get_entities(self) -> tuple:
        return self.entities

    # -- tag queries ---------------------------------------------------------

    def is_noun(self) -> bool:
        return self.tag.is_noun()

    def is_predicate(self) -> bool:
        return self.tag.is_predicate()

    def is_modifier(self) -> bool:
        return self.tag.is_modifier()

    def is_josa(self) -> bool:
        return self.tag.is_postposition()

    def has_tag(self, partial_tag: str) -> bool:
        """
        Check whether the tag belongs to the group `partial_tag`.

        "N" checks for nouns, "NP" for pronouns. Unanalyzable tags
        (NA, NV, NF) are not part of "N".
        """
        return self.tag.starts_with(partial_tag)

    def has_tag_one_of(self, *tags: str) -> bool:
        return any(self.has_tag(t) for t in tags)

    def has_original_tag(self, partial_tag: str) -> bool:
        """Case-insensitive prefix check on the analyzer's own tag."""
        if self._original_tag is None:
            return False
        return self._original_tag.upper().startswith(partial_tag.upper())

    # -- equality ------------------------------------------------------------

    def equals_without_tag(self, other: "Morpheme") -> bool:
        return self._surface == other.surface

    def equals(self, other) -> bool:
        """Same surface and same tag. Original tag and back-references are ignored."""
        return (
            isinstance(other, Morpheme)
            and self._surface == other._surface
            and self._tag == other._tag
        )

    def __str__(self) -> str:
        if self._original_tag is not None:
            return f"{self._surface}/{self._tag}({self._original_tag})"
        return f"{self._surface}/{self._tag}"

    def __repr__(self) -> str:
        return f"Morpheme({str(self)!r})"


class Word(ImmutableSequence[Morpheme]):
    """
    A whitespace-delimited token: an ordered, non-empty run of Morphemes.

    Holds the back-references the analyzers attach to a token:
    its smallest enclosing phrase, its governor edge, the edges it
    governs, and the role edges it takes part in.
    """

    id = WriteOnce(default=-1)
    phrase = WriteOnce()
    governor_edge = WriteOnce()

    def __init__(self, surface: str, morphemes: Iterable[Morpheme]):
        super().__init__(morphemes, Morpheme)
        type_check([surface], str, field="surface")
        if len(self) == 0:
            raise MissingFieldError("morphemes", "Word")

        self._surface = surface
        self._dependent_edges: list = []
        self._argument_roles: list = []
        self._predicate_roles: list = []

        bind_all(
            binding
            for i, morph in self.entries()
            for binding in ((Morpheme.word, morph, self), (Morpheme.id, morph, i))
        )

    @property
    def surface(self) -> str:
        return self._surface

    @property
    def dependent_edges(self) -> tuple:
        """Dependency edges this word governs."""
        return tuple(self._dependent_edges)

    @property
    def argument_roles(self) -> tuple:
        """Role edges where this word is the predicate."""
        return tuple(self._argument_roles)

    @property
    def predicate_roles(self) -> tuple:
        """Role edges where this word is the argument."""
        return tuple(self._predicate_roles)

    @property
    def entities(self) -> list:
        """Entities touching any morpheme of this word, first-seen order, no duplicates."""
        result = []
        for morph in self:
            for entity in morph.entities:
                if not any(entity is seen for seen in result):
                    result.append(entity)
        return result

    def _add_dependent_edge(self, edge) -> None:
        self._dependent_edges.append(edge)

    def _add_argument_role(self, edge) -> None:
        self._argument_roles.append(edge)

    def _add_predicate_role(self, edge) -> None:
        self._predicate_roles.append(edge)

    def get_surface(self) -> str:
        return self.surface

    def get_id(self) -> int:
        return self.id

    def get_entities(self) -> list:
        return self.entities

    def get_phrase(self):
        return self.phrase

    def get_governor_edge(self):
        return self.governor_edge

    def get_dependent_edges(self) -> tuple:
        return self.dependent_edges

    def get_argument_roles(self) -> tuple:
        return self.argument_roles

    def get_predicate_roles(self) -> tuple:
        return self.predicate_roles

    def single_line_string(self) -> str:
        return "+".join(f"{m.surface}/{m.tag.value}" for m in self)

    def equals_without_tag(self, other: "Word") -> bool:
        return self._surface == other.surface

    def equals(self, other) -> bool:
        return super().equals(other) and self._surface == other.surface

    def __str__(self) -> str:
        return f"{self._surface} = {self.single_line_string()}"
