"""
Analyzer Interfaces — Abstract contract for analyzer backends.

A backend is the external NLP toolkit seen through the native schema.
It is a black box: kannot never inspects how tags, trees or edges were
produced, only rebuilds the graph from what comes back.
"""

from abc import ABC, abstractmethod
from enum import Enum

from kannot.bridge.schema import NativeDicEntry, NativeSentence


class AnalysisStage(str, Enum):
    """Analysis a backend is asked to run. Each includes tagging."""

    TAG = "tag"          # morphological analysis only
    PARSE = "parse"      # phrase structure + dependencies
    ROLE = "role"        # semantic roles
    ENTITY = "entity"    # named entities
    COREF = "coref"      # entities + coreference groups


# Annotation lists of NativeSentence each stage fills in
STAGE_ANNOTATIONS = {
    AnalysisStage.TAG: (),
    AnalysisStage.PARSE: ("syntax_tree", "dependencies"),
    AnalysisStage.ROLE: ("roles",),
    AnalysisStage.ENTITY: ("entities",),
    AnalysisStage.COREF: ("entities", "coref_groups"),
}


class AnalyzerBackend(ABC):
    """
    Abstract interface for an analyzer backend.

    Implementations must:
    - Return native sentences only (no graph objects)
    - Reference words and morphemes by position
    - Leave annotation lists empty for stages they did not run
    - Keep the annotations of a sentence passed back in for another stage
    - Raise BackendError for input they cannot answer
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend name for tracing."""
        ...

    @abstractmethod
    def split(self, text: str) -> list[str]:
        """
        Split a paragraph into sentences.

        Args:
            text: Input paragraph

        Returns:
            Sentence strings, in order
        """
        ...

    @abstractmethod
    def tag(self, text: str) -> list[NativeSentence]:
        """Split and tag a paragraph. Only `words` is filled."""
        ...

    @abstractmethod
    def tag_sentence(self, text: str) -> NativeSentence:
        """Tag `text` as exactly one sentence."""
        ...

    @abstractmethod
    def analyze(self, stage: AnalysisStage, text: str) -> list[NativeSentence]:
        """
        Run an analysis stage over a paragraph.

        Args:
            stage: Stage to run
            text: Input paragraph

        Returns:
            One native sentence per sentence of the paragraph
        """
        ...

    @abstractmethod
    def analyze_sentence(self, stage: AnalysisStage, sentence: NativeSentence) -> NativeSentence:
        """
        Run an analysis stage over an already tagged sentence.

        Annotations already present on `sentence` are carried over; the
        stage's own annotation lists are replaced by its output.
        """
        ...

    # -- dictionary ----------------------------------------------------------

    @abstractmethod
    def add_user_dictionary(self, entries: list[NativeDicEntry]) -> None:
        """Register entries in the user dictionary."""
        ...

    @abstractmethod
    def dictionary_contains(self, surface: str, tags: set[str]) -> bool:
        """Whether `surface` is listed under any of `tags`, in either dictionary."""
        ...

    @abstractmethod
    def user_dictionary_items(self) -> list[NativeDicEntry]:
        """All user dictionary entries, in registration order."""
        ...

    @abstractmethod
    def base_entries(self, tags: set[str]) -> list[NativeDicEntry]:
        """System dictionary entries whose tag is in `tags`."""
        ...

    @abstractmethod
    def missing_entries(
        self, entries: list[NativeDicEntry], only_system: bool = False
    ) -> list[NativeDicEntry]:
        """
        The entries not listed in the dictionary.

        Args:
            entries: Entries to look up
            only_system: Ignore the user dictionary
        """
        ...
