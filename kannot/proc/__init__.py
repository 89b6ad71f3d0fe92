"""Proc — Analyzer layer over external NLP backends."""

from kannot.proc.analyzers import (
    CorefResolver,
    DicEntry,
    Dictionary,
    EntityRecognizer,
    Parser,
    RoleLabeler,
    SentenceSplitter,
    Tagger,
)
from kannot.proc.backends import RecordedBackend, StubBackend
from kannot.proc.interfaces import AnalysisStage, AnalyzerBackend

__all__ = [
    # Interfaces
    "AnalysisStage",
    "AnalyzerBackend",
    # Analyzers
    "SentenceSplitter",
    "Tagger",
    "Parser",
    "RoleLabeler",
    "EntityRecognizer",
    "CorefResolver",
    "Dictionary",
    "DicEntry",
    # Backends
    "StubBackend",
    "RecordedBackend",
]
