"""
Shared fixtures: recorded analyzer output and small graph builders.
"""

from pathlib import Path

import pytest

from kannot.bridge.serialization import load_fixtures
from kannot.data import Morpheme, Sentence, Word
from kannot.proc.backends import RecordedBackend

FIXTURES_FILE = Path(__file__).parent / "fixtures" / "recorded.yaml"

EAT = "나는 밥을 먹었다"
ANNOUNCE = "삼성 그룹이 발표했다"
PARAGRAPH = "나는 밥을 먹었다. 삼성 그룹이 발표했다."


@pytest.fixture(scope="session")
def fixtures_path() -> Path:
    return FIXTURES_FILE


@pytest.fixture(scope="session")
def recorded_fixtures():
    return load_fixtures(FIXTURES_FILE)


@pytest.fixture
def recorded_backend(recorded_fixtures):
    return RecordedBackend(recorded_fixtures)


@pytest.fixture
def eat_native(recorded_fixtures):
    """Native output for '나는 밥을 먹었다' (tree, deps, roles, entity, coref)."""
    return recorded_fixtures[EAT][0]


@pytest.fixture
def announce_native(recorded_fixtures):
    """Native output for '삼성 그룹이 발표했다' (entity across two words, no tree)."""
    return recorded_fixtures[ANNOUNCE][0]


@pytest.fixture
def eat_sentence(eat_native):
    return Sentence.from_native(eat_native)


@pytest.fixture
def announce_sentence(announce_native):
    return Sentence.from_native(announce_native)


@pytest.fixture
def make_word():
    """Build a Word from (surface, tag) pairs: make_word("밥을", ("밥", "NNG"), ("을", "JKO"))."""

    def _make(surface, *pairs):
        return Word(surface, [Morpheme(s, t) for s, t in pairs])

    return _make


@pytest.fixture
def eat_words(make_word):
    """Fresh, unattached words of '나는 밥을 먹었다'."""
    return [
        make_word("나는", ("나", "NP"), ("는", "JX")),
        make_word("밥을", ("밥", "NNG"), ("을", "JKO")),
        make_word("먹었다", ("먹", "VV"), ("었", "EP"), ("다", "EF")),
    ]
