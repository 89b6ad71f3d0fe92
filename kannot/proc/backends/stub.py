"""
Stub Backend — Tokenizer-only implementation for testing.

Used to exercise the analyzer layer without a real NLP toolkit.
"""

import re
from typing import Iterable

from kannot.bridge.schema import NativeDicEntry, NativeMorpheme, NativeSentence, NativeWord
from kannot.proc.backends.dictionary import InMemoryDictionaryMixin
from kannot.proc.interfaces import AnalysisStage, AnalyzerBackend

# A sentence ends at final punctuation followed by whitespace or end of text
_SENTENCE_END = re.compile(r"(?<=[.!?])\s+")


class StubBackend(InMemoryDictionaryMixin, AnalyzerBackend):
    """
    Stub backend that tags every word as one unanalyzable morpheme.

    No annotation stage is run: trees, edges and entities stay empty.
    The system dictionary is empty unless `lexicon` is given.
    """

    def __init__(self, lexicon: Iterable[NativeDicEntry] = ()):
        self._init_dictionary(lexicon)

    @property
    def name(self) -> str:
        return "stub"

    def split(self, text: str) -> list[str]:
        """Split on sentence-final punctuation."""
        return [s.strip() for s in _SENTENCE_END.split(text) if s.strip()]

    def tag(self, text: str) -> list[NativeSentence]:
        return [self.tag_sentence(s) for s in self.split(text)]

    def tag_sentence(self, text: str) -> NativeSentence:
        """Return one NA-tagged morpheme per whitespace token."""
        return NativeSentence(
            words=[
                NativeWord(surface=token, morphemes=[NativeMorpheme(surface=token, tag="NA")])
                for token in text.split()
            ]
        )

    def analyze(self, stage: AnalysisStage, text: str) -> list[NativeSentence]:
        return self.tag(text)

    def analyze_sentence(self, stage: AnalysisStage, sentence: NativeSentence) -> NativeSentence:
        """Return the sentence unchanged: the stub adds no annotations."""
        return sentence.model_copy(deep=True)
