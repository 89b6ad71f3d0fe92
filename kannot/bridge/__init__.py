"""
Bridge — Serialization contract between analyzer backends and the annotation graph.
"""

from kannot.bridge.schema import (
    NativeCorefGroup,
    NativeDepEdge,
    NativeDicEntry,
    NativeEntity,
    NativeMorpheme,
    NativeMorphemeRef,
    NativeRoleEdge,
    NativeSentence,
    NativeTree,
    NativeWord,
)
from kannot.bridge.serialization import from_json, load, load_fixtures, save, to_json

__all__ = [
    # Schema
    "NativeMorpheme",
    "NativeWord",
    "NativeTree",
    "NativeDepEdge",
    "NativeRoleEdge",
    "NativeMorphemeRef",
    "NativeEntity",
    "NativeCorefGroup",
    "NativeSentence",
    "NativeDicEntry",
    # Serialization
    "to_json",
    "from_json",
    "save",
    "load",
    "load_fixtures",
]
