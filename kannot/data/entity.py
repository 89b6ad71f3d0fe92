"""
Entity and CoreferenceGroup — named-entity spans and their referents.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from kannot.core.errors import MissingFieldError
from kannot.data.container import ImmutableSequence, type_check
from kannot.data.fields import WriteOnce, bind_all
from kannot.data.morpheme import Morpheme
from kannot.tags import CoarseEntityType, tag_name


class Entity(ImmutableSequence[Morpheme]):
    """
    A named-entity span over Morphemes, possibly crossing Word boundaries.

    `label` is the coarse category; `fine_label` refines it
    (e.g. PS / PS_NAME). Each member morpheme lists this entity.
    """

    coref_group = WriteOnce()

    def __init__(
        self,
        surface: str,
        label: Union[str, CoarseEntityType],
        fine_label: str,
        morphemes: Iterable[Morpheme],
        original_label: Optional[str] = None,
    ):
        super().__init__(morphemes, Morpheme)
        type_check([surface, fine_label], str, field="surface/fine_label")
        type_check([label], str, field="label")
        type_check([original_label], None, str, field="original_label")
        if len(self) == 0:
            raise MissingFieldError("morphemes", "Entity")

        self._surface = surface
        self._label = tag_name(label, CoarseEntityType)
        self._fine_label = fine_label
        self._original_label = original_label

        for morph in self:
            morph._add_entity(self)

    @property
    def surface(self) -> str:
        return self._surface

    @property
    def label(self) -> CoarseEntityType:
        return CoarseEntityType.with_name(self._label)

    @property
    def fine_label(self) -> str:
        return self._fine_label

    @property
    def original_label(self) -> Optional[str]:
        return self._original_label

    def get_surface(self) -> str:
        return self._surface

    def get_label(self) -> CoarseEntityType:
        return self.label

    def get_fine_label(self) -> str:
        return self._fine_label

    def get_original_label(self) -> Optional[str]:
        return self._original_label

    def get_coref_group(self) -> Optional["CoreferenceGroup"]:
        return self.coref_group

    def equals(self, other) -> bool:
        return (
            isinstance(other, Entity)
            and self._label == other._label
            and self._fine_label == other.fine_label
            and super().equals(other)
        )

    def __str__(self) -> str:
        return f"{self._label}({self._fine_label}; '{self._surface}')"


class CoreferenceGroup(ImmutableSequence[Entity]):
    """Entities that refer to the same discourse referent."""

    def __init__(self, entities: Iterable[Entity]):
        super().__init__(entities, Entity)
        if len(self) == 0:
            raise MissingFieldError("entities", "CoreferenceGroup")

        bind_all((Entity.coref_group, entity, self) for entity in self)

    def __str__(self) -> str:
        return "[" + ", ".join(str(e) for e in self) + "]"
