"""
Tree and SyntaxTree — phrase structure over Words.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Union

from kannot.data.container import ImmutableSequence, type_check
from kannot.data.fields import WriteOnce, bind_all
from kannot.data.morpheme import Word
from kannot.tags import PhraseTag, tag_name


class Tree(ImmutableSequence["Tree"], ABC):
    """
    A labeled node owning its child nodes and at most one terminal Word.

    A leaf carries a terminal and no children; an inner node has children
    and no terminal. A node with neither is allowed but vacuous.
    """

    parent = WriteOnce()

    def __init__(
        self,
        label: str,
        children: Optional[Iterable["Tree"]] = None,
        terminal: Optional[Word] = None,
    ):
        super().__init__(children or (), Tree)
        type_check([label], str, field="label")
        type_check([terminal], None, Word, field="terminal")

        self._label = label
        self._terminal = terminal

        bind_all(self._bindings())

    def _bindings(self) -> list:
        """Back-references this node sets on construction."""
        return [(Tree.parent, child, self) for child in self]

    @property
    @abstractmethod
    def label(self):
        ...

    @property
    def terminal(self) -> Optional[Word]:
        return self._terminal

    def get_label(self):
        return self.label

    def get_terminal(self) -> Optional[Word]:
        return self._terminal

    def get_parent(self) -> Optional["Tree"]:
        return self.parent

    def get_non_terminals(self) -> tuple:
        return self.slice()

    def is_root(self) -> bool:
        return self.parent is None

    def has_non_terminals(self) -> bool:
        return len(self) > 0

    def get_terminals(self) -> list[Word]:
        """All Words reachable from this node, in sentence order."""
        leaves = []
        for child in self:
            leaves.extend(child.get_terminals())
        if self._terminal is not None:
            leaves.append(self._terminal)
        return sorted(leaves, key=lambda w: w.id)

    def get_tree_string(self, depth: int = 0, buffer: str = "") -> str:
        """Indented rendering of this subtree, one node per line."""
        buffer += "| " * depth
        buffer += str(self)
        for child in self:
            buffer += "\n"
            buffer = child.get_tree_string(depth + 1, buffer)
        return buffer

    def equals(self, other) -> bool:
        if not isinstance(other, Tree) or self._label != other._label:
            return False
        if self._terminal is None:
            if other.terminal is not None:
                return False
        elif other.terminal is None or not self._terminal.equals(other.terminal):
            return False
        return super().equals(other)

    def __str__(self) -> str:
        terminal = "" if self._terminal is None else str(self._terminal)
        return f"{self._label}-Node({terminal})"


class SyntaxTree(Tree):
    """
    A constituent of the phrase-structure parse.

    The terminal Word (if any) gets this node as its `phrase`.
    """

    def __init__(
        self,
        label: Union[str, PhraseTag],
        terminal: Optional[Word] = None,
        children: Optional[Iterable[Tree]] = None,
        original_label: Optional[str] = None,
    ):
        type_check([label], str, field="label")
        type_check([original_label], None, str, field="original_label")
        super().__init__(tag_name(label, PhraseTag), children, terminal)

        self._original_label = original_label

    def _bindings(self) -> list:
        bindings = super()._bindings()
        if self._terminal is not None:
            bindings.append((Word.phrase, self._terminal, self))
        return bindings

    @property
    def label(self) -> PhraseTag:
        return PhraseTag.with_name(self._label)

    @property
    def original_label(self) -> Optional[str]:
        return self._original_label

    def get_original_label(self) -> Optional[str]:
        return self._original_label
