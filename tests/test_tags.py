"""
Tests for the tag catalogs.
"""

import pytest

from kannot.core.errors import TypeConstraintViolation, UnknownTagError
from kannot.tags import POS, CoarseEntityType, DependencyTag, PhraseTag, RoleType, contains


class TestLookup:
    """Names resolve to singleton tag values."""

    def test_with_name_returns_singleton(self):
        assert POS.with_name("NNG") is POS.NNG
        assert POS.with_name(POS.NNG) is POS.NNG
        assert PhraseTag.with_name("VP") is PhraseTag.VP
        assert RoleType.with_name("ARGM_LOC") is RoleType.ARGM_LOC

    def test_unknown_name(self):
        with pytest.raises(UnknownTagError) as exc:
            DependencyTag.with_name("SUBJ")
        assert isinstance(exc.value, KeyError)
        assert str(exc.value) == "'SUBJ' is not a DependencyTag tag"

    def test_tag_of_another_catalog_is_rejected(self):
        with pytest.raises(TypeConstraintViolation):
            POS.with_name(PhraseTag.NP)
        assert POS.with_name("NP") is POS.NP

    def test_value_is_name(self):
        assert POS.NNG.value == "NNG"
        assert POS.NNG.tagname == "NNG"
        assert str(CoarseEntityType.PS) == "PS"

    def test_values_in_declaration_order(self):
        assert PhraseTag.values()[:4] == [PhraseTag.S, PhraseTag.Q, PhraseTag.NP, PhraseTag.VP]
        assert CoarseEntityType.values()[-1] is CoarseEntityType.X

    def test_catalog_sizes(self):
        assert len(PhraseTag.values()) == 12
        assert len(DependencyTag.values()) == 9
        assert len(RoleType.values()) == 18
        assert len(CoarseEntityType.values()) == 16


class TestPOSCategories:
    """Category predicates on part-of-speech tags."""

    @pytest.mark.parametrize("tag", ["NNG", "NNP", "NNB", "NNM", "NR", "NP"])
    def test_nouns(self, tag):
        assert POS[tag].is_noun()
        assert POS[tag].starts_with("N")

    @pytest.mark.parametrize("tag", ["VV", "VA", "VX", "VCP", "VCN"])
    def test_predicates(self, tag):
        assert POS[tag].is_predicate()
        assert not POS[tag].is_noun()

    def test_other_groups(self):
        assert POS.MAG.is_modifier()
        assert POS.JKO.is_postposition()
        assert POS.ETM.is_ending()
        assert POS.XSV.is_suffix() and POS.XSV.is_affix()
        assert POS.XPN.is_affix() and not POS.XPN.is_suffix()
        assert POS.SF.is_symbol()

    @pytest.mark.parametrize("tag", ["NF", "NV", "NA"])
    def test_unknown_tags_outside_noun_group(self, tag):
        assert POS[tag].is_unknown()
        assert not POS[tag].is_noun()
        assert not POS[tag].starts_with("N")
        assert POS[tag].starts_with(tag)

    def test_starts_with_case_sensitive(self):
        assert POS.JKS.starts_with("JK")
        assert not POS.JKS.starts_with("jk")


class TestContains:
    """Membership by name or value."""

    def test_contains_names_and_values(self):
        assert contains(["NNG", "VV"], POS.VV)
        assert contains([POS.NNG], POS.NNG)
        assert not contains(["NNG"], POS.NNP)
        assert not contains([], POS.NNG)
