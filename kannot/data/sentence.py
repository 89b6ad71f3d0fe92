"""
Sentence — the top-level annotation graph and its reconstruction.

A Sentence is built either directly from Words, or from a NativeSentence
returned by an analyzer. Reconstruction walks the native sentence once,
in dependency order, so that every write-once back-reference is set by
exactly one object:

1. Words (and their Morphemes), ids assigned by position
2. Phrase tree, terminals resolved by word position
3. Dependency edges, role edges, entities, resolved by position
4. Coreference groups, matched by value against the entities of step 3

Positions are the join key between the native output and the freshly
built objects. A position that does not resolve aborts the whole
Sentence.
"""

from __future__ import annotations

from typing import Iterable, Optional

from kannot.bridge.schema import (
    NativeCorefGroup,
    NativeDepEdge,
    NativeEntity,
    NativeMorpheme,
    NativeMorphemeRef,
    NativeRoleEdge,
    NativeSentence,
    NativeTree,
    NativeWord,
)
from kannot.core.errors import UnresolvedReferenceError
from kannot.core.logging import LogChannel, get_logger
from kannot.data.container import ImmutableSequence
from kannot.data.edges import DepEdge, RoleEdge
from kannot.data.entity import CoreferenceGroup, Entity
from kannot.data.fields import AppendOnce, WriteOnce, bind_all
from kannot.data.morpheme import Morpheme, Word
from kannot.data.tree import SyntaxTree
from kannot.tags import POS

log = get_logger(LogChannel.DATA)


class Sentence(ImmutableSequence[Word]):
    """
    An ordered sequence of Words plus its annotation collections.

    `syntax_tree` is write-once. `dependencies`, `roles`, `entities` and
    `coref_groups` can be populated once while empty; any of them may stay
    empty when the matching analysis stage was not run.
    """

    syntax_tree = WriteOnce()
    dependencies = AppendOnce()
    roles = AppendOnce()
    entities = AppendOnce()
    coref_groups = AppendOnce()

    def __init__(self, words: Iterable[Word]):
        super().__init__(words, Word)
        bind_all((Word.id, word, i) for i, word in self.entries())

    # =========================================================================
    # Reconstruction
    # =========================================================================

    @classmethod
    def from_native(cls, native: NativeSentence) -> "Sentence":
        """Rebuild the full annotation graph from analyzer output."""
        sentence = cls(_build_word(w) for w in native.words)
        for word, native_word in zip(sentence, native.words):
            for morph, native_morph in zip(word, native_word.morphemes):
                if native_morph.word_sense is not None:
                    morph.word_sense = native_morph.word_sense

        if native.syntax_tree is not None:
            sentence.syntax_tree = sentence._recon_tree(native.syntax_tree)
        sentence.dependencies = [sentence._recon_dep_edge(e) for e in native.dependencies]
        sentence.roles = [sentence._recon_role_edge(e) for e in native.roles]
        sentence.entities = [sentence._recon_entity(e) for e in native.entities]
        sentence.coref_groups = [sentence._recon_coref_group(g) for g in native.coref_groups]

        log.debug(
            "sentence_reconstructed",
            words=len(sentence),
            has_tree=sentence.syntax_tree is not None,
            dependencies=len(sentence.dependencies),
            roles=len(sentence.roles),
            entities=len(sentence.entities),
            coref_groups=len(sentence.coref_groups),
        )
        return sentence

    def _word_at(self, position: Optional[int]) -> Optional[Word]:
        if position is None:
            return None
        if not 0 <= position < len(self):
            raise UnresolvedReferenceError(
                f"Word position {position} is outside the sentence ({len(self)} words)"
            )
        return self[position]

    def _morpheme_at(self, ref: NativeMorphemeRef) -> Morpheme:
        word = self._word_at(ref.word)
        if not 0 <= ref.morpheme < len(word):
            raise UnresolvedReferenceError(
                f"Morpheme position {ref.morpheme} is outside word {ref.word} "
                f"'{word.surface}' ({len(word)} morphemes)"
            )
        return word[ref.morpheme]

    def _recon_tree(self, node: NativeTree) -> SyntaxTree:
        # Children first: a node wires its children's parent on construction
        children = [self._recon_tree(child) for child in node.children]
        return SyntaxTree(
            label=node.label,
            terminal=self._word_at(node.terminal),
            children=children,
            original_label=node.original_label,
        )

    def _recon_dep_edge(self, edge: NativeDepEdge) -> DepEdge:
        return DepEdge(
            governor=self._word_at(edge.governor),
            dependent=self._word_at(edge.dependent),
            type=edge.type,
            dep_type=edge.dep_type,
            original_label=edge.original_label,
        )

    def _recon_role_edge(self, edge: NativeRoleEdge) -> RoleEdge:
        return RoleEdge(
            predicate=self._word_at(edge.predicate),
            argument=self._word_at(edge.argument),
            label=edge.label,
            modifiers=[self._word_at(m) for m in edge.modifiers],
            original_label=edge.original_label,
        )

    def _recon_entity(self, entity: NativeEntity) -> Entity:
        return Entity(
            surface=entity.surface,
            label=entity.label,
            fine_label=entity.fine_label,
            morphemes=[self._morpheme_at(ref) for ref in entity.morphemes],
            original_label=entity.original_label,
        )

    def _match_entity(self, entity: NativeEntity) -> Entity:
        # Resolve without building a throwaway Entity: construction would
        # register it on the morphemes.
        morphemes = [self._morpheme_at(ref) for ref in entity.morphemes]
        for candidate in self.entities:
            if (
                candidate.surface == entity.surface
                and candidate.label.value == entity.label
                and candidate.fine_label == entity.fine_label
                and len(candidate) == len(morphemes)
                and all(a.equals(b) for a, b in zip(candidate, morphemes))
            ):
                return candidate
        raise UnresolvedReferenceError(
            f"Coreference entry {entity.label}({entity.fine_label}; '{entity.surface}') "
            f"matches no entity of the sentence"
        )

    def _recon_coref_group(self, group: NativeCorefGroup) -> CoreferenceGroup:
        return CoreferenceGroup([self._match_entity(e) for e in group.entities])

    # =========================================================================
    # Export
    # =========================================================================

    def to_native(self) -> NativeSentence:
        """Export this graph to the native schema, positions as references."""
        return NativeSentence(
            words=[export_word(word) for word in self],
            syntax_tree=None if self.syntax_tree is None else _export_tree(self.syntax_tree),
            dependencies=[
                NativeDepEdge(
                    governor=None if e.governor is None else e.governor.id,
                    dependent=e.dependent.id,
                    type=e.type.value,
                    dep_type=None if e.dep_type is None else e.dep_type.value,
                    original_label=e.original_label,
                )
                for e in self.dependencies
            ],
            roles=[
                NativeRoleEdge(
                    predicate=None if e.predicate is None else e.predicate.id,
                    argument=e.argument.id,
                    label=e.label.value,
                    modifiers=[w.id for w in e.modifiers],
                    original_label=e.original_label,
                )
                for e in self.roles
            ],
            entities=[_export_entity(e) for e in self.entities],
            coref_groups=[
                NativeCorefGroup(entities=[_export_entity(e) for e in group])
                for group in self.coref_groups
            ],
        )

    # =========================================================================
    # Accessors
    # =========================================================================

    def get_syntax_tree(self) -> Optional[SyntaxTree]:
        return self.syntax_tree

    def get_dependencies(self) -> tuple:
        return self.dependencies

    def get_roles(self) -> tuple:
        return self.roles

    def get_entities(self) -> tuple:
        return self.entities

    def get_coref_groups(self) -> tuple:
        return self.coref_groups

    # =========================================================================
    # Word classes
    # =========================================================================
    # A word belongs to a class when its first class-forming morpheme comes
    # after its last class-changing suffix or ending: the rightmost affix wins.

    @staticmethod
    def _select(words, include, exclude) -> list[Word]:
        result = []
        for word in words:
            inclusion = word.find_index(include)
            exclusion = word.find_last_index(exclude)
            if inclusion != -1 and inclusion > exclusion:
                result.append(word)
        return result

    @property
    def nouns(self) -> list[Word]:
        return self._select(
            self,
            lambda m: m.is_noun() or m.has_tag_one_of("ETN", "XSN"),
            lambda m: m.has_tag_one_of("XSV", "XSA", "XSM"),
        )

    @property
    def verbs(self) -> list[Word]:
        return self._select(
            self,
            lambda m: m.is_predicate() or m.tag is POS.XSV,
            lambda m: m.has_tag_one_of("ETN", "ETM", "XSN", "XSA", "XSM"),
        )

    @property
    def modifiers(self) -> list[Word]:
        # TODO: is_predicate() here makes every plain verb a modifier; confirm
        # against the tagger's intent before narrowing it to ETM/XSA/XSM.
        return self._select(
            self,
            lambda m: m.is_predicate() or m.has_tag_one_of("ETM", "XSA", "XSM"),
            lambda m: m.has_tag_one_of("ETN", "XSN", "XSV"),
        )

    def get_nouns(self) -> list[Word]:
        return self.nouns

    def get_verbs(self) -> list[Word]:
        return self.verbs

    def get_modifiers(self) -> list[Word]:
        return self.modifiers

    # =========================================================================
    # Rendering
    # =========================================================================

    def surface_string(self, delimiter: str = " ") -> str:
        return delimiter.join(w.surface for w in self)

    def single_line_string(self) -> str:
        return " ".join(w.single_line_string() for w in self)

    def __str__(self) -> str:
        return self.surface_string()


def _build_word(native: NativeWord) -> Word:
    return Word(
        surface=native.surface,
        morphemes=[
            Morpheme(surface=m.surface, tag=m.tag, original_tag=m.original_tag)
            for m in native.morphemes
        ],
    )


def export_word(word: Word) -> NativeWord:
    """A Word and its morphemes in the native schema, without back-references."""
    return NativeWord(
        surface=word.surface,
        morphemes=[
            NativeMorpheme(
                surface=m.surface,
                tag=m.tag.value,
                original_tag=m.original_tag,
                word_sense=m.word_sense,
            )
            for m in word
        ],
    )


def _export_tree(tree: SyntaxTree) -> NativeTree:
    return NativeTree(
        label=tree.label.value,
        terminal=None if tree.terminal is None else tree.terminal.id,
        children=[_export_tree(child) for child in tree],
        original_label=tree.original_label,
    )


def _export_entity(entity: Entity) -> NativeEntity:
    return NativeEntity(
        surface=entity.surface,
        label=entity.label.value,
        fine_label=entity.fine_label,
        morphemes=[NativeMorphemeRef(word=m.word.id, morpheme=m.id) for m in entity],
        original_label=entity.original_label,
    )
