"""
Tests for the native schema and its serialization.
"""

import pytest
from pydantic import ValidationError

from kannot.bridge.schema import NativeMorpheme, NativeSentence, NativeTree, NativeWord
from kannot.bridge.serialization import from_json, load, load_fixtures, save, to_json


class TestSchemaValidation:
    """Tag fields are checked against the catalogs at parse time."""

    def test_valid_morpheme(self):
        morph = NativeMorpheme(surface="밥", tag="NNG")
        assert morph.original_tag is None
        assert morph.word_sense is None

    def test_unknown_pos_tag(self):
        with pytest.raises(ValidationError):
            NativeMorpheme(surface="밥", tag="NOUN")

    def test_unknown_phrase_label(self):
        with pytest.raises(ValidationError):
            NativeTree(label="SENT")

    def test_unknown_dependency_tag(self):
        with pytest.raises(ValidationError):
            NativeSentence.model_validate(
                {"dependencies": [{"dependent": 0, "type": "NP", "dep_type": "SUBJ"}]}
            )

    def test_unknown_role_and_entity_labels(self):
        with pytest.raises(ValidationError):
            NativeSentence.model_validate({"roles": [{"argument": 0, "label": "AGENT"}]})
        with pytest.raises(ValidationError):
            NativeSentence.model_validate({
                "entities": [{
                    "surface": "삼성",
                    "label": "ORG",
                    "fine_label": "OGG",
                    "morphemes": [{"word": 0, "morpheme": 0}],
                }]
            })

    def test_word_needs_morphemes(self):
        with pytest.raises(ValidationError):
            NativeWord(surface="밥", morphemes=[])

    def test_nested_tree(self):
        tree = NativeTree.model_validate(
            {"label": "S", "children": [{"label": "NP", "terminal": 0}, {"label": "VP", "terminal": 1}]}
        )
        assert [c.terminal for c in tree.children] == [0, 1]

    def test_sentence_defaults_and_surface(self):
        sentence = NativeSentence(
            words=[
                NativeWord(surface="밥을", morphemes=[NativeMorpheme(surface="밥", tag="NNG")]),
                NativeWord(surface="먹다", morphemes=[NativeMorpheme(surface="먹", tag="VV")]),
            ]
        )
        assert sentence.surface == "밥을 먹다"
        assert sentence.syntax_tree is None
        assert sentence.dependencies == []
        assert sentence.coref_groups == []

    def test_words_only_drops_annotations(self, eat_native):
        stripped = eat_native.words_only()
        assert len(stripped.words) == 3
        assert stripped.syntax_tree is None
        assert stripped.dependencies == []
        assert stripped.entities == []
        assert eat_native.dependencies


class TestSerialization:
    """JSON and YAML round trips."""

    def test_json_round_trip(self, eat_native):
        json_str = to_json(eat_native)
        assert "먹었다" in json_str

        loaded = from_json(json_str)
        assert loaded.model_dump() == eat_native.model_dump()

    def test_save_and_load(self, eat_native, tmp_path):
        path = tmp_path / "sentence.json"
        save(eat_native, path)
        assert load(path).model_dump() == eat_native.model_dump()

    def test_load_fixtures(self, fixtures_path):
        fixtures = load_fixtures(fixtures_path)
        assert set(fixtures) == {
            "나는 밥을 먹었다",
            "삼성 그룹이 발표했다",
            "나는 밥을 먹었다. 삼성 그룹이 발표했다.",
        }
        paragraph = fixtures["나는 밥을 먹었다. 삼성 그룹이 발표했다."]
        assert [s.surface for s in paragraph] == ["나는 밥을 먹었다", "삼성 그룹이 발표했다"]

    def test_load_fixtures_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_fixtures(tmp_path / "missing.yaml")

    def test_load_fixtures_rejects_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 나는 밥을 먹었다\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_fixtures(path)

    def test_load_fixtures_rejects_bad_tag(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(
            "밥:\n  - words:\n      - surface: 밥\n        morphemes: [{surface: 밥, tag: NOUN}]\n",
            encoding="utf-8",
        )
        with pytest.raises(ValueError, match="밥"):
            load_fixtures(path)
