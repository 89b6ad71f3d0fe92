"""
Recorded Backend — Replays analyzer output captured ahead of time.

Recordings are native sentences keyed by the input text that produced
them (see `load_fixtures`). A recording holds the full analysis; each
stage returns the part of it that stage would have computed.

The system dictionary lists every (surface, tag) pair seen in the
recordings.
"""

from pathlib import Path
from typing import Optional, Union

from kannot.bridge.schema import NativeDicEntry, NativeSentence
from kannot.bridge.serialization import load_fixtures
from kannot.core.errors import BackendError
from kannot.core.logging import LogChannel, get_logger
from kannot.proc.backends.dictionary import InMemoryDictionaryMixin
from kannot.proc.interfaces import STAGE_ANNOTATIONS, AnalysisStage, AnalyzerBackend

log = get_logger(LogChannel.PROC)


def _restrict(
    recording: NativeSentence,
    stage: AnalysisStage,
    base: Optional[NativeSentence] = None,
) -> NativeSentence:
    # Stage output goes on top of `base`, or on the bare recorded words
    if base is None:
        base = recording.words_only()
    return base.with_annotations(recording, STAGE_ANNOTATIONS[stage])


class RecordedBackend(InMemoryDictionaryMixin, AnalyzerBackend):
    """
    Backend answering from recorded native sentences.

    Lookups go by paragraph text first, then by the surface of a single
    recorded sentence. Unknown text raises BackendError.
    """

    def __init__(self, fixtures: dict[str, list[NativeSentence]]):
        self._paragraphs = dict(fixtures)
        self._sentences: dict[str, NativeSentence] = {}
        for sentences in self._paragraphs.values():
            for sentence in sentences:
                self._sentences.setdefault(sentence.surface, sentence)
        self._init_dictionary(
            NativeDicEntry(surface=m.surface, tag=m.tag)
            for sentence in self._sentences.values()
            for word in sentence.words
            for m in word.morphemes
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "RecordedBackend":
        """Load recordings from a YAML fixture file."""
        return cls(load_fixtures(path))

    @property
    def name(self) -> str:
        return "recorded"

    def _lookup(self, text: str) -> list[NativeSentence]:
        key = text.strip()
        if key in self._paragraphs:
            return self._paragraphs[key]
        if key in self._sentences:
            return [self._sentences[key]]
        log.warning("recording_missing", text=key)
        raise BackendError(f"No recorded analysis for '{key}'")

    def split(self, text: str) -> list[str]:
        return [s.surface for s in self._lookup(text)]

    def tag(self, text: str) -> list[NativeSentence]:
        return [_restrict(s, AnalysisStage.TAG) for s in self._lookup(text)]

    def _lookup_one(self, text: str) -> NativeSentence:
        sentences = self._lookup(text)
        if len(sentences) != 1:
            raise BackendError(
                f"'{text.strip()}' was recorded as {len(sentences)} sentences, not one"
            )
        return sentences[0]

    def tag_sentence(self, text: str) -> NativeSentence:
        return _restrict(self._lookup_one(text), AnalysisStage.TAG)

    def analyze(self, stage: AnalysisStage, text: str) -> list[NativeSentence]:
        return [_restrict(s, stage) for s in self._lookup(text)]

    def analyze_sentence(self, stage: AnalysisStage, sentence: NativeSentence) -> NativeSentence:
        return _restrict(self._lookup_one(sentence.surface), stage, base=sentence)
