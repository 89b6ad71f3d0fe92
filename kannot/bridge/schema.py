"""
Native Schema — Pydantic models for analyzer output.

This is the serialization contract between an analyzer backend and the
annotation graph. Words are referenced by their position in the sentence
and morphemes by (word position, morpheme position); no object identity
crosses the bridge.
"""

from __future__ import annotations

import copy
from typing import Iterable, Optional

from pydantic import BaseModel, Field, field_validator

from kannot.tags import POS, CoarseEntityType, DependencyTag, PhraseTag, RoleType


def _check_tag(value: Optional[str], catalog: type) -> Optional[str]:
    if value is None:
        return value
    if value not in catalog.__members__:
        raise ValueError(f"'{value}' is not a {catalog.__name__} tag")
    return value


class NativeMorpheme(BaseModel):
    """A tagged morpheme as produced by the tagger."""

    surface: str = Field(..., min_length=1, description="Surface form")
    tag: str = Field(..., description="POS tag name")
    original_tag: Optional[str] = Field(None, description="Tagger's own tag")
    word_sense: Optional[int] = Field(None, description="Word-sense id, if disambiguated")

    @field_validator("tag")
    @classmethod
    def _valid_tag(cls, v: str) -> str:
        return _check_tag(v, POS)


class NativeWord(BaseModel):
    """A whitespace-delimited token."""

    surface: str = Field(..., description="Surface form")
    morphemes: list[NativeMorpheme] = Field(..., min_length=1)


class NativeTree(BaseModel):
    """A phrase-structure node."""

    label: str = Field(..., description="PhraseTag name")
    terminal: Optional[int] = Field(None, description="Position of the terminal word")
    children: list[NativeTree] = Field(default_factory=list)
    original_label: Optional[str] = None

    @field_validator("label")
    @classmethod
    def _valid_label(cls, v: str) -> str:
        return _check_tag(v, PhraseTag)


class NativeDepEdge(BaseModel):
    """A dependency edge. A missing governor marks the root."""

    governor: Optional[int] = Field(None, description="Position of the governor word")
    dependent: int = Field(..., description="Position of the dependent word")
    type: str = Field(..., description="PhraseTag name")
    dep_type: Optional[str] = Field(None, description="DependencyTag name")
    original_label: Optional[str] = None

    @field_validator("type")
    @classmethod
    def _valid_type(cls, v: str) -> str:
        return _check_tag(v, PhraseTag)

    @field_validator("dep_type")
    @classmethod
    def _valid_dep_type(cls, v: Optional[str]) -> Optional[str]:
        return _check_tag(v, DependencyTag)


class NativeRoleEdge(BaseModel):
    """A semantic-role edge."""

    predicate: Optional[int] = Field(None, description="Position of the predicate word")
    argument: int = Field(..., description="Position of the argument word")
    label: str = Field(..., description="RoleType name")
    modifiers: list[int] = Field(default_factory=list, description="Positions of modifier words")
    original_label: Optional[str] = None

    @field_validator("label")
    @classmethod
    def _valid_label(cls, v: str) -> str:
        return _check_tag(v, RoleType)


class NativeMorphemeRef(BaseModel):
    """Position of a morpheme inside a sentence."""

    word: int
    morpheme: int


class NativeEntity(BaseModel):
    """A named-entity span."""

    surface: str
    label: str = Field(..., description="CoarseEntityType name")
    fine_label: str
    morphemes: list[NativeMorphemeRef] = Field(..., min_length=1)
    original_label: Optional[str] = None

    @field_validator("label")
    @classmethod
    def _valid_label(cls, v: str) -> str:
        return _check_tag(v, CoarseEntityType)


class NativeCorefGroup(BaseModel):
    """Entities sharing a referent, matched to the sentence's entities by value."""

    entities: list[NativeEntity] = Field(..., min_length=1)


class NativeSentence(BaseModel):
    """One analyzed sentence. Every annotation stage is optional."""

    words: list[NativeWord] = Field(default_factory=list)
    syntax_tree: Optional[NativeTree] = None
    dependencies: list[NativeDepEdge] = Field(default_factory=list)
    roles: list[NativeRoleEdge] = Field(default_factory=list)
    entities: list[NativeEntity] = Field(default_factory=list)
    coref_groups: list[NativeCorefGroup] = Field(default_factory=list)

    @property
    def surface(self) -> str:
        return " ".join(w.surface for w in self.words)

    def words_only(self) -> "NativeSentence":
        """A copy carrying only the tagged words."""
        return NativeSentence(words=[w.model_copy(deep=True) for w in self.words])

    def with_annotations(self, source: "NativeSentence", fields: Iterable[str]) -> "NativeSentence":
        """A copy of this sentence with the annotation `fields` taken from `source`."""
        update = {field: copy.deepcopy(getattr(source, field)) for field in fields}
        return self.model_copy(deep=True, update=update)


class NativeDicEntry(BaseModel):
    """A dictionary entry: a surface form and its POS tag."""

    surface: str = Field(..., min_length=1, description="Surface form")
    tag: str = Field("NNP", description="POS tag name")

    @field_validator("tag")
    @classmethod
    def _valid_tag(cls, v: str) -> str:
        return _check_tag(v, POS)


NativeTree.model_rebuild()
