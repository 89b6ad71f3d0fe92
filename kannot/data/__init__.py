"""
Data — The immutable linguistic annotation graph.

Objects are wired together once, at construction. Back-references are
write-once; nothing exposes a mutation API afterwards.
"""

from kannot.data.container import ImmutableSequence, type_check
from kannot.data.edges import DAGEdge, DepEdge, RoleEdge
from kannot.data.entity import CoreferenceGroup, Entity
from kannot.data.fields import AppendOnce, WriteOnce
from kannot.data.morpheme import Morpheme, Word
from kannot.data.sentence import Sentence
from kannot.data.tree import SyntaxTree, Tree

__all__ = [
    # Building blocks
    "ImmutableSequence",
    "type_check",
    "WriteOnce",
    "AppendOnce",
    # Graph
    "Morpheme",
    "Word",
    "Tree",
    "SyntaxTree",
    "DAGEdge",
    "DepEdge",
    "RoleEdge",
    "Entity",
    "CoreferenceGroup",
    "Sentence",
]
