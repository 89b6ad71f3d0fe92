"""
Analyzers — Turn text into annotation graphs through a backend.

Every analyzer offers a blocking call and an awaitable twin. The
awaitable runs the blocking call in a worker thread, so both build the
same graph for the same input.

Inputs may be strings, Sentences, or (nested) lists of either. Strings
that are empty or only whitespace produce no Sentence.

`Dictionary` reads and extends the tagger's dictionaries.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Union

from kannot.bridge.schema import NativeDicEntry, NativeSentence
from kannot.core.errors import KannotError
from kannot.core.logging import LogChannel, get_logger, log_context
from kannot.data.morpheme import Word
from kannot.data.sentence import Sentence, export_word
from kannot.proc.interfaces import AnalysisStage, AnalyzerBackend
from kannot.tags import POS

log = get_logger(LogChannel.PROC)

AnalyzerInput = Union[str, Sentence, Iterable]


def _flatten(inputs) -> list:
    items = []
    for item in inputs:
        if isinstance(item, (str, Sentence)):
            items.append(item)
        elif isinstance(item, (list, tuple)):
            items.extend(_flatten(item))
        else:
            raise TypeError(f"Cannot analyze {type(item).__name__}; expected str or Sentence")
    return items


def _texts(inputs) -> list[str]:
    texts = []
    for item in _flatten(inputs):
        if not isinstance(item, str):
            raise TypeError(f"Expected text, got {type(item).__name__}")
        if item.strip():
            texts.append(item)
    return texts


class _Analyzer:
    """Shared plumbing: backend handle and call logging."""

    def __init__(self, backend: AnalyzerBackend):
        self.backend = backend

    def _call(self, fn, items: list) -> list:
        start = time.perf_counter()
        with log_context(analyzer=type(self).__name__, backend=self.backend.name):
            log.verbose("analysis_started", inputs=len(items))
            try:
                result = fn(items)
            except KannotError as e:
                log.error("analysis_failed", error=str(e))
                raise
            log.info(
                "analysis_finished",
                outputs=len(result),
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
        return result


class SentenceSplitter(_Analyzer):
    """Splits paragraphs into sentence strings."""

    def sentences(self, *texts: AnalyzerInput) -> list[str]:
        return self._call(
            lambda items: [s for text in items for s in self.backend.split(text)],
            _texts(texts),
        )

    async def sentences_async(self, *texts: AnalyzerInput) -> list[str]:
        return await asyncio.to_thread(self.sentences, *texts)

    @staticmethod
    def split_words(paragraph: Iterable[Word]) -> list[Sentence]:
        """
        Split already tagged Words into Sentences, without a backend.

        A sentence ends after a word holding a final mark (SF) followed by
        nothing but closing quotes or brackets (SS). The new Sentences are
        built over copies of the Words; the input keeps its own graph.
        """
        groups, current = [], []
        for word in paragraph:
            if not isinstance(word, Word):
                raise TypeError(f"Cannot split {type(word).__name__}; expected Word")
            current.append(word)
            if _ends_sentence(word):
                groups.append(current)
                current = []
        if current:
            groups.append(current)
        return [
            Sentence.from_native(NativeSentence(words=[export_word(w) for w in words]))
            for words in groups
        ]

    @staticmethod
    async def split_words_async(paragraph: Iterable[Word]) -> list[Sentence]:
        return await asyncio.to_thread(SentenceSplitter.split_words, list(paragraph))


def _ends_sentence(word: Word) -> bool:
    last = word.find_last_index(lambda m: m.tag is POS.SF)
    return last != -1 and all(m.tag is POS.SS for m in word[last + 1:])


class Tagger(_Analyzer):
    """Morphological analysis. Produces Sentences with words only."""

    def tag(self, *texts: AnalyzerInput) -> list[Sentence]:
        """Split each paragraph into sentences and tag them."""
        return self._call(
            lambda items: [
                Sentence.from_native(native)
                for text in items
                for native in self.backend.tag(text)
            ],
            _texts(texts),
        )

    async def tag_async(self, *texts: AnalyzerInput) -> list[Sentence]:
        return await asyncio.to_thread(self.tag, *texts)

    def tag_sentence(self, *texts: AnalyzerInput) -> list[Sentence]:
        """Tag each input as exactly one sentence, without splitting."""
        return self._call(
            lambda items: [
                Sentence.from_native(self.backend.tag_sentence(text)) for text in items
            ],
            _texts(texts),
        )

    async def tag_sentence_async(self, *texts: AnalyzerInput) -> list[Sentence]:
        return await asyncio.to_thread(self.tag_sentence, *texts)


class _StageAnalyzer(_Analyzer):
    """An analyzer that runs one annotation stage over text or Sentences."""

    stage: AnalysisStage = None

    def _analyze_one(self, item: Union[str, Sentence]) -> list[Sentence]:
        if isinstance(item, Sentence):
            native = self.backend.analyze_sentence(self.stage, item.to_native())
            return [Sentence.from_native(native)]
        return [Sentence.from_native(native) for native in self.backend.analyze(self.stage, item)]

    def analyze(self, *inputs: AnalyzerInput) -> list[Sentence]:
        """
        Run this analyzer's stage.

        A string is split into sentences by the backend. A Sentence is
        re-analyzed as one sentence and yields a new graph.
        """
        items = [
            item for item in _flatten(inputs)
            if isinstance(item, Sentence) or item.strip()
        ]
        return self._call(
            lambda items: [s for item in items for s in self._analyze_one(item)],
            items,
        )

    async def analyze_async(self, *inputs: AnalyzerInput) -> list[Sentence]:
        return await asyncio.to_thread(self.analyze, *inputs)


class Parser(_StageAnalyzer):
    """Phrase-structure and dependency parsing."""

    stage = AnalysisStage.PARSE


class RoleLabeler(_StageAnalyzer):
    """Semantic role labeling."""

    stage = AnalysisStage.ROLE


class EntityRecognizer(_StageAnalyzer):
    """Named-entity recognition."""

    stage = AnalysisStage.ENTITY


class CorefResolver(_StageAnalyzer):
    """Coreference resolution."""

    stage = AnalysisStage.COREF


ANALYZERS = {
    AnalysisStage.PARSE: Parser,
    AnalysisStage.ROLE: RoleLabeler,
    AnalysisStage.ENTITY: EntityRecognizer,
    AnalysisStage.COREF: CorefResolver,
}


# =============================================================================
# Dictionary
# =============================================================================

@dataclass(frozen=True)
class DicEntry:
    """A dictionary entry: surface form and POS tag."""
    surface: str
    tag: POS = POS.NNP


# A POS predicate, or the tags themselves (names or POS values)
TagFilter = Union[Callable[[POS], bool], Iterable[Union[str, POS]]]

DicEntryInput = Union[DicEntry, tuple, str]


def _is_noun(tag: POS) -> bool:
    return tag.is_noun()


def _tag_names(tag_filter: TagFilter) -> set[str]:
    if callable(tag_filter):
        return {tag.value for tag in POS.values() if tag_filter(tag)}
    return {POS.with_name(tag).value for tag in tag_filter}


def _to_native_entry(entry: DicEntryInput) -> NativeDicEntry:
    if isinstance(entry, DicEntry):
        return NativeDicEntry(surface=entry.surface, tag=entry.tag.value)
    if isinstance(entry, str):
        return NativeDicEntry(surface=entry)
    if isinstance(entry, tuple) and len(entry) == 2:
        surface, tag = entry
        return NativeDicEntry(surface=surface, tag=POS.with_name(tag).value)
    raise TypeError(f"Cannot read a dictionary entry from {entry!r}")


def _from_native_entry(entry: NativeDicEntry) -> DicEntry:
    return DicEntry(surface=entry.surface, tag=POS.with_name(entry.tag))


class Dictionary(_Analyzer):
    """
    The system and user dictionaries of a backend's tagger.

    Entries are (surface, POS) pairs. An entry given as a bare surface
    string is a proper noun (NNP).
    """

    def add_user_dictionary(self, *entries: DicEntryInput) -> None:
        """Register entries in the user dictionary."""
        native = [_to_native_entry(e) for e in entries]
        with log_context(analyzer="Dictionary", backend=self.backend.name):
            self.backend.add_user_dictionary(native)
            log.info("user_dictionary_extended", entries=len(native))

    def contains(self, word: str, *tags: Union[str, POS]) -> bool:
        """
        Check whether `word` is listed under any of `tags`.

        Tags default to NNP and NNG.
        """
        names = {POS.with_name(tag).value for tag in (tags or (POS.NNP, POS.NNG))}
        return self.backend.dictionary_contains(word, names)

    def import_from(
        self,
        other: "Dictionary",
        fast_append: bool = False,
        tag_filter: TagFilter = _is_noun,
    ) -> None:
        """
        Copy system entries of `other` into this user dictionary.

        Args:
            other: Dictionary to read base entries from
            fast_append: Add every entry without checking this dictionary first
            tag_filter: Tags to import (default: nouns)
        """
        with log_context(analyzer="Dictionary", backend=self.backend.name):
            entries = other.backend.base_entries(_tag_names(tag_filter))
            if not fast_append:
                entries = self.backend.missing_entries(entries)
            self.backend.add_user_dictionary(entries)
            log.info("user_dictionary_imported", source=other.backend.name, entries=len(entries))

    async def import_from_async(
        self,
        other: "Dictionary",
        fast_append: bool = False,
        tag_filter: TagFilter = _is_noun,
    ) -> None:
        await asyncio.to_thread(self.import_from, other, fast_append, tag_filter)

    def get_base_entries(self, tag_filter: TagFilter = _is_noun) -> Iterator[DicEntry]:
        """System dictionary entries with the filtered tags."""
        entries = self.backend.base_entries(_tag_names(tag_filter))
        return iter([_from_native_entry(e) for e in entries])

    async def get_base_entries_async(self, tag_filter: TagFilter = _is_noun) -> Iterator[DicEntry]:
        return await asyncio.to_thread(self.get_base_entries, tag_filter)

    def get_items(self) -> list[DicEntry]:
        """All user dictionary entries, in registration order."""
        return [_from_native_entry(e) for e in self.backend.user_dictionary_items()]

    async def get_items_async(self) -> list[DicEntry]:
        return await asyncio.to_thread(self.get_items)

    def get_not_exists(self, only_system_dic: bool, *entries: DicEntryInput) -> list[DicEntry]:
        """The given entries that the dictionary does not list."""
        native = [_to_native_entry(e) for e in entries]
        return [
            _from_native_entry(e)
            for e in self.backend.missing_entries(native, only_system=only_system_dic)
        ]

    async def get_not_exists_async(
        self, only_system_dic: bool, *entries: DicEntryInput
    ) -> list[DicEntry]:
        return await asyncio.to_thread(self.get_not_exists, only_system_dic, *entries)
