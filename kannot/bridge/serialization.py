"""
Native Serialization — JSON and YAML import/export of analyzer output.
"""

from pathlib import Path
from typing import Union

import yaml
from pydantic import ValidationError

from kannot.bridge.schema import NativeSentence
from kannot.core.logging import LogChannel, get_logger

log = get_logger(LogChannel.BRIDGE)


def to_json(sentence: NativeSentence, indent: int = 2) -> str:
    """Serialize a NativeSentence to JSON string."""
    return sentence.model_dump_json(indent=indent, exclude_none=True)


def from_json(json_str: str) -> NativeSentence:
    """Deserialize a NativeSentence from JSON string."""
    return NativeSentence.model_validate_json(json_str)


def save(sentence: NativeSentence, path: Union[str, Path]) -> None:
    """Save a NativeSentence to a JSON file."""
    path = Path(path)
    path.write_text(to_json(sentence), encoding="utf-8")


def load(path: Union[str, Path]) -> NativeSentence:
    """Load a NativeSentence from a JSON file."""
    path = Path(path)
    return from_json(path.read_text(encoding="utf-8"))


def load_fixtures(path: Union[str, Path]) -> dict[str, list[NativeSentence]]:
    """
    Load recorded analyzer output from a YAML file.

    The file maps each input text to the list of sentences the analyzer
    produced for it:

        나는 밥을 먹었다:
          - words: [...]
            dependencies: [...]

    Args:
        path: YAML (or JSON) file

    Returns:
        Mapping of input text to its native sentences

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not a mapping or a sentence is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Fixtures not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Fixtures must map input text to sentences: {path}")

    fixtures = {}
    for text, sentences in data.items():
        try:
            fixtures[str(text)] = [NativeSentence.model_validate(s) for s in sentences or []]
        except ValidationError as e:
            raise ValueError(f"Invalid fixture for '{text}': {e}") from e

    log.verbose("fixtures_loaded", path=str(path), texts=len(fixtures))
    return fixtures
