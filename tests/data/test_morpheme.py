"""
Tests for Morpheme and Word.
"""

import pytest

from kannot.core.errors import (
    MissingFieldError,
    TypeConstraintViolation,
    UnknownTagError,
    WriteOnceViolation,
)
from kannot.data import Morpheme, Word
from kannot.tags import POS


class TestMorpheme:
    """Construction, tag queries and equality of morphemes."""

    def test_tag_given_as_name_or_enum(self):
        """Tags are normalized to the same catalog value."""
        assert Morpheme("밥", "NNG").tag is POS.NNG
        assert Morpheme("밥", POS.NNG).tag is POS.NNG

    def test_empty_surface_rejected(self):
        with pytest.raises(MissingFieldError):
            Morpheme("", "NNG")

    def test_unknown_tag_rejected(self):
        with pytest.raises(UnknownTagError) as exc:
            Morpheme("밥", "NOUN")
        assert isinstance(exc.value, KeyError)
        assert "NOUN" in str(exc.value)

    def test_non_string_tag_rejected(self):
        with pytest.raises(TypeConstraintViolation):
            Morpheme("밥", 1)

    def test_defaults_before_attachment(self):
        morph = Morpheme("밥", "NNG")
        assert morph.id == -1
        assert morph.word is None
        assert morph.word_sense is None
        assert morph.entities == ()

    def test_string_form(self):
        assert str(Morpheme("나", "NP")) == "나/NP"
        assert str(Morpheme("나", "NP", "npp")) == "나/NP(npp)"

    def test_equals_ignores_original_tag(self):
        """Equality depends only on surface and tag."""
        a = Morpheme("나", "NP", "npp")
        b = Morpheme("나", "NP")
        assert a.equals(a)
        assert a.equals(b)
        assert not a.equals(Morpheme("나", "NNG"))
        assert not a.equals(Morpheme("너", "NP"))
        assert a.equals_without_tag(Morpheme("나", "NNG"))

    def test_equals_ignores_back_references(self):
        attached = Word("나는", [Morpheme("나", "NP"), Morpheme("는", "JX")])[0]
        attached.word_sense = 3
        assert attached.equals(Morpheme("나", "NP"))

    def test_category_queries(self):
        assert Morpheme("밥", "NNG").is_noun()
        assert Morpheme("먹", "VV").is_predicate()
        assert Morpheme("매우", "MAG").is_modifier()
        assert Morpheme("을", "JKO").is_josa()
        assert not Morpheme("을", "JKO").is_noun()

    def test_has_tag_prefix(self):
        """Prefix match on the canonical tag name."""
        morph = Morpheme("나", "NP")
        assert morph.has_tag("N")
        assert morph.has_tag("NP")
        assert not morph.has_tag("NNG")

    def test_has_tag_is_case_sensitive(self):
        assert not Morpheme("나", "NP").has_tag("np")

    def test_unknown_tags_are_not_nouns(self):
        """NA, NV and NF do not belong to the bare N group."""
        for tag in ("NA", "NV", "NF"):
            morph = Morpheme("ㅋ", tag)
            assert not morph.has_tag("N")
            assert morph.has_tag(tag)

    def test_has_tag_one_of(self):
        morph = Morpheme("기", "ETN")
        assert morph.has_tag_one_of("XSN", "ETN")
        assert not morph.has_tag_one_of("XSN", "ETM")

    def test_has_original_tag(self):
        morph = Morpheme("나", "NP", "npp")
        assert morph.has_original_tag("NP")
        assert morph.has_original_tag("n")
        assert not morph.has_original_tag("jx")
        assert not Morpheme("나", "NP").has_original_tag("N")

    def test_word_sense_is_write_once(self):
        morph = Morpheme("밥", "NNG")
        morph.word_sense = 1
        morph.word_sense = 1
        with pytest.raises(WriteOnceViolation):
            morph.word_sense = 2


class TestWord:
    """Word construction finalizes its morphemes."""

    def test_assigns_positions_and_owner(self, make_word):
        word = make_word("먹었다", ("먹", "VV"), ("었", "EP"), ("다", "EF"))
        for i, morph in enumerate(word):
            assert morph.id == i
            assert morph.word is word

    def test_requires_morphemes(self):
        with pytest.raises(MissingFieldError):
            Word("밥을", [])

    def test_morpheme_cannot_join_two_words(self):
        morph = Morpheme("밥", "NNG")
        Word("밥", [morph])
        with pytest.raises(WriteOnceViolation):
            Word("밥을", [morph, Morpheme("을", "JKO")])

    def test_rejected_word_leaves_morphemes_unbound(self):
        """A failed Word does not claim the morphemes it was given."""
        fresh = Morpheme("밥", "NNG")
        used = Morpheme("을", "JKO")
        Word("을", [used])
        with pytest.raises(WriteOnceViolation):
            Word("밥을", [fresh, used])
        assert fresh.word is None
        assert fresh.id == -1
        word = Word("밥", [fresh])
        assert fresh.word is word

    def test_type_error_leaves_morphemes_unbound(self):
        fresh = Morpheme("밥", "NNG")
        with pytest.raises(TypeConstraintViolation):
            Word("밥을", [fresh, "을"])
        assert fresh.word is None

    def test_repeated_morpheme_rejected_without_binding(self):
        morph = Morpheme("밥", "NNG")
        with pytest.raises(WriteOnceViolation):
            Word("밥밥", [morph, morph])
        assert morph.word is None
        assert morph.id == -1

    def test_defaults_before_sentence(self, make_word):
        word = make_word("밥", ("밥", "NNG"))
        assert word.id == -1
        assert word.phrase is None
        assert word.governor_edge is None
        assert word.dependent_edges == ()
        assert word.argument_roles == ()
        assert word.predicate_roles == ()
        assert word.entities == []

    def test_single_line_string(self, make_word):
        word = make_word("밥을", ("밥", "NNG"), ("을", "JKO"))
        assert word.single_line_string() == "밥/NNG+을/JKO"
        assert str(word) == "밥을 = 밥/NNG+을/JKO"

    def test_equals_needs_surface_and_morphemes(self, make_word):
        a = make_word("밥을", ("밥", "NNG"), ("을", "JKO"))
        assert a.equals(make_word("밥을", ("밥", "NNG"), ("을", "JKO")))
        assert not a.equals(make_word("밥를", ("밥", "NNG"), ("을", "JKO")))
        assert not a.equals(make_word("밥을", ("밥", "NNG"), ("을", "JX")))
        assert a.equals_without_tag(make_word("밥을", ("밥", "NA")))

    def test_getters_match_properties(self, make_word):
        word = make_word("밥", ("밥", "NNG"))
        assert word.get_surface() == "밥"
        assert word.get_id() == word.id
        assert word[0].get_word() is word
        assert word[0].get_tag() is POS.NNG


class TestWriteOnce:
    """Back-references can be set once; repeating the same value is a no-op."""

    def test_phrase_same_value_is_noop(self, make_word):
        word = make_word("밥", ("밥", "NNG"))
        marker = object()
        word.phrase = marker
        word.phrase = marker
        assert word.phrase is marker

    def test_phrase_second_value_rejected(self, make_word):
        word = make_word("밥", ("밥", "NNG"))
        first, second = object(), object()
        word.phrase = first
        with pytest.raises(WriteOnceViolation) as exc:
            word.phrase = second

        assert exc.value.field == "phrase"
        assert exc.value.old is first
        assert exc.value.new is second
        assert word.phrase is first

    def test_id_reassignment_to_other_position_rejected(self, make_word):
        word = make_word("밥", ("밥", "NNG"))
        word.id = 0
        word.id = 0
        with pytest.raises(WriteOnceViolation):
            word.id = 1
