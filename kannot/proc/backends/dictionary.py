"""
In-memory Dictionary — System and user dictionaries of (surface, tag) pairs.

Backends without a real lexicon keep their dictionaries here. The system
dictionary is fixed at construction; the user dictionary grows through
`add_user_dictionary` and keeps registration order.
"""

from typing import Iterable

from kannot.bridge.schema import NativeDicEntry


class InMemoryDictionaryMixin:
    """Dictionary operations of AnalyzerBackend over two in-memory lists."""

    def _init_dictionary(self, system: Iterable[NativeDicEntry] = ()) -> None:
        self._system_entries: dict[tuple[str, str], NativeDicEntry] = {}
        for entry in system:
            self._system_entries.setdefault((entry.surface, entry.tag), entry)
        self._user_entries: dict[tuple[str, str], NativeDicEntry] = {}

    def _listed(self, key: tuple[str, str], only_system: bool = False) -> bool:
        return key in self._system_entries or (not only_system and key in self._user_entries)

    def add_user_dictionary(self, entries: list[NativeDicEntry]) -> None:
        for entry in entries:
            self._user_entries.setdefault((entry.surface, entry.tag), entry.model_copy())

    def dictionary_contains(self, surface: str, tags: set[str]) -> bool:
        return any(self._listed((surface, tag)) for tag in tags)

    def user_dictionary_items(self) -> list[NativeDicEntry]:
        return [entry.model_copy() for entry in self._user_entries.values()]

    def base_entries(self, tags: set[str]) -> list[NativeDicEntry]:
        return [
            entry.model_copy()
            for entry in self._system_entries.values()
            if entry.tag in tags
        ]

    def missing_entries(
        self, entries: list[NativeDicEntry], only_system: bool = False
    ) -> list[NativeDicEntry]:
        return [
            entry for entry in entries
            if not self._listed((entry.surface, entry.tag), only_system)
        ]
