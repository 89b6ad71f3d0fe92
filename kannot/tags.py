"""
Tags — Closed tag catalogs consumed by the annotation graph.

Each catalog resolves a canonical name to a singleton tag value.
The catalogs mirror the analyzers' own tag sets; no tag is invented here.
"""

from enum import Enum
from typing import Iterable, Union

from kannot.core.errors import TypeConstraintViolation, UnknownTagError


class _TagCatalog(str, Enum):
    """Base for all tag catalogs. The value of every tag is its name."""

    @classmethod
    def with_name(cls, name: Union[str, "_TagCatalog"]):
        """
        Look up a tag by its canonical name.

        Raises:
            UnknownTagError: if the name is not in this catalog
            TypeConstraintViolation: if given a tag of another catalog
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, _TagCatalog):
            raise TypeConstraintViolation([cls.__name__, "str"], type(name).__name__, field="tag")
        try:
            return cls[name]
        except KeyError:
            raise UnknownTagError(cls.__name__, str(name)) from None

    @classmethod
    def values(cls) -> list:
        """All tags of this catalog, in declaration order."""
        return list(cls)

    @property
    def tagname(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


# ============================================================================
# Part of speech (Sejong tag set)
# ============================================================================

class POS(_TagCatalog):
    """
    Sejong part-of-speech tags.

    Categories:
    - N*: nouns, numerals, pronouns (체언)
    - V*: predicates (용언)
    - M*: modifiers (수식언)
    - J*: postpositions (관계언)
    - E*: endings, X*: affixes, S*: symbols
    - NF/NV/NA: unanalyzable (not part of the noun category)
    """

    # Nouns
    NNG = "NNG"    # general noun
    NNP = "NNP"    # proper noun
    NNB = "NNB"    # bound noun
    NNM = "NNM"    # unit noun
    NR = "NR"      # numeral
    NP = "NP"      # pronoun

    # Predicates
    VV = "VV"      # verb
    VA = "VA"      # adjective
    VX = "VX"      # auxiliary predicate
    VCP = "VCP"    # positive copula
    VCN = "VCN"    # negative copula

    # Modifiers
    MM = "MM"      # determiner
    MAG = "MAG"    # general adverb
    MAJ = "MAJ"    # conjunctive adverb

    # Interjection
    IC = "IC"

    # Postpositions
    JKS = "JKS"
    JKC = "JKC"
    JKG = "JKG"
    JKO = "JKO"
    JKB = "JKB"
    JKV = "JKV"
    JKQ = "JKQ"
    JC = "JC"
    JX = "JX"

    # Endings
    EP = "EP"      # pre-final
    EF = "EF"      # final
    EC = "EC"      # connective
    ETN = "ETN"    # nominalizing
    ETM = "ETM"    # adnominalizing

    # Affixes
    XPN = "XPN"
    XPV = "XPV"
    XSN = "XSN"    # nominal suffix
    XSV = "XSV"    # verbal suffix
    XSA = "XSA"    # adjectival suffix
    XSM = "XSM"    # adverbial suffix
    XSO = "XSO"
    XR = "XR"      # root

    # Symbols
    SF = "SF"
    SP = "SP"
    SS = "SS"
    SE = "SE"
    SO = "SO"
    SW = "SW"

    # Unanalyzable
    NF = "NF"
    NV = "NV"
    NA = "NA"

    # Foreign, Hanja, numbers
    SL = "SL"
    SH = "SH"
    SN = "SN"

    def is_noun(self) -> bool:
        return self in _NOUNS

    def is_predicate(self) -> bool:
        return self in _PREDICATES

    def is_modifier(self) -> bool:
        return self in _MODIFIERS

    def is_postposition(self) -> bool:
        return self in _POSTPOSITIONS

    def is_ending(self) -> bool:
        return self in _ENDINGS

    def is_affix(self) -> bool:
        return self in _AFFIXES

    def is_suffix(self) -> bool:
        return self in _SUFFIXES

    def is_symbol(self) -> bool:
        return self in _SYMBOLS

    def is_unknown(self) -> bool:
        return self in _UNKNOWNS

    def starts_with(self, prefix: str) -> bool:
        """
        Check whether this tag belongs to the group named by `prefix`.

        The match is a case-sensitive prefix match on the tag name,
        except that unanalyzable tags (NF, NV, NA) never belong to "N".
        """
        if prefix == "N" and self.is_unknown():
            return False
        return self.value.startswith(prefix)


_NOUNS = frozenset({POS.NNG, POS.NNP, POS.NNB, POS.NNM, POS.NR, POS.NP})
_PREDICATES = frozenset({POS.VV, POS.VA, POS.VX, POS.VCP, POS.VCN})
_MODIFIERS = frozenset({POS.MM, POS.MAG, POS.MAJ})
_POSTPOSITIONS = frozenset({
    POS.JKS, POS.JKC, POS.JKG, POS.JKO, POS.JKB, POS.JKV, POS.JKQ, POS.JC, POS.JX,
})
_ENDINGS = frozenset({POS.EP, POS.EF, POS.EC, POS.ETN, POS.ETM})
_SUFFIXES = frozenset({POS.XSN, POS.XSV, POS.XSA, POS.XSM, POS.XSO})
_AFFIXES = frozenset({POS.XPN, POS.XPV}) | _SUFFIXES
_SYMBOLS = frozenset({POS.SF, POS.SP, POS.SS, POS.SE, POS.SO, POS.SW})
_UNKNOWNS = frozenset({POS.NF, POS.NV, POS.NA})


# ============================================================================
# Phrase structure
# ============================================================================

class PhraseTag(_TagCatalog):
    """Phrase (constituent) labels, shared by syntax trees and dependency edges."""

    S = "S"        # sentence
    Q = "Q"        # quotation
    NP = "NP"      # noun phrase
    VP = "VP"      # verb phrase
    VNP = "VNP"    # copula phrase
    AP = "AP"      # adverbial phrase
    DP = "DP"      # determiner phrase
    IP = "IP"      # interjection phrase
    X = "X"        # pseudo phrase
    L = "L"        # left parenthesis
    R = "R"        # right parenthesis
    PRN = "PRN"    # parenthetical


class DependencyTag(_TagCatalog):
    """Dependency function labels."""

    SBJ = "SBJ"    # subject
    OBJ = "OBJ"    # object
    MOD = "MOD"    # modifier
    AJT = "AJT"    # adjunct
    CMP = "CMP"    # complement
    CNJ = "CNJ"    # conjunction
    INT = "INT"    # interjection
    PRN = "PRN"    # parenthetical
    UNDEF = "UNDEF"


class RoleType(_TagCatalog):
    """Semantic role labels."""

    ARG0 = "ARG0"
    ARG1 = "ARG1"
    ARG2 = "ARG2"
    ARG3 = "ARG3"
    ARGM_COM = "ARGM_COM"
    ARGM_LOC = "ARGM_LOC"
    ARGM_DIR = "ARGM_DIR"
    ARGM_GOL = "ARGM_GOL"
    ARGM_MNR = "ARGM_MNR"
    ARGM_TMP = "ARGM_TMP"
    ARGM_EXT = "ARGM_EXT"
    ARGM_PRP = "ARGM_PRP"
    ARGM_CAU = "ARGM_CAU"
    ARGM_DIS = "ARGM_DIS"
    ARGM_ADV = "ARGM_ADV"
    ARGM_NEG = "ARGM_NEG"
    ARGM_INS = "ARGM_INS"
    UNDEF = "UNDEF"


class CoarseEntityType(_TagCatalog):
    """Coarse named-entity categories."""

    PS = "PS"      # person
    LC = "LC"      # location
    OG = "OG"      # organization
    AF = "AF"      # artifact
    DT = "DT"      # date
    TI = "TI"      # time
    CV = "CV"      # civilization
    AM = "AM"      # animal
    PT = "PT"      # plant
    QT = "QT"      # quantity
    FD = "FD"      # field of study
    TR = "TR"      # theory
    EV = "EV"      # event
    MT = "MT"      # material
    TM = "TM"      # term
    X = "X"        # unclassified


def contains(tags: Iterable[Union[str, _TagCatalog]], tag: _TagCatalog) -> bool:
    """Check whether `tag` is among `tags`, given as names or tag values."""
    return any(str(t) == tag.value for t in tags)


def tag_name(value: Union[str, _TagCatalog], catalog: type) -> str:
    """Normalize a tag value or name to its canonical name, validating it."""
    return catalog.with_name(value).value
