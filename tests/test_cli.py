"""
Tests for the kannot command-line interface.
"""

import pytest

from kannot.bridge.serialization import from_json
from kannot.cli.main import main

EAT = "나는 밥을 먹었다"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("KANNOT_BACKEND", "KANNOT_FIXTURES", "KANNOT_LOG_LEVEL", "KANNOT_LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)


def _recorded(fixtures_path, *args):
    return ["--backend", "recorded", "--fixtures", str(fixtures_path), "--log-level", "silent", *args]


class TestOutputFormats:
    """Each format prints one block per sentence."""

    def test_text_format(self, fixtures_path, capsys):
        code = main(_recorded(fixtures_path, EAT))
        out = capsys.readouterr().out
        assert code == 0
        assert out.strip() == "나/NP+는/JX 밥/NNG+을/JKO 먹/VV+었/EP+다/EF"

    def test_tree_format(self, fixtures_path, capsys):
        code = main(_recorded(fixtures_path, "--stage", "parse", "--format", "tree", EAT))
        out = capsys.readouterr().out
        assert code == 0
        assert out.splitlines()[0] == "S-Node()"
        assert "| | VP-Node(먹었다 = 먹/VV+었/EP+다/EF)" in out

    def test_tree_format_without_tree(self, capsys):
        code = main(["--log-level", "silent", "--format", "tree", "밥을 먹었다"])
        out = capsys.readouterr().out
        assert code == 0
        assert "(no syntax tree)" in out

    def test_json_format(self, fixtures_path, capsys):
        code = main(_recorded(fixtures_path, "--stage", "coref", "--format", "json", EAT))
        out = capsys.readouterr().out
        assert code == 0
        native = from_json(out)
        assert native.surface == EAT
        assert len(native.coref_groups) == 1

    def test_stub_backend_by_default(self, capsys):
        code = main(["--log-level", "silent", "밥을 먹었다. 물을 마셨다."])
        out = capsys.readouterr().out
        assert code == 0
        assert out.splitlines() == ["밥을/NA 먹었다./NA", "물을/NA 마셨다./NA"]


class TestFailures:
    """Errors exit with code 1 and a message on stderr."""

    def test_unknown_text(self, fixtures_path, capsys):
        code = main(_recorded(fixtures_path, "모르는 문장"))
        assert code == 1
        assert "error:" in capsys.readouterr().err

    def test_recorded_without_fixtures(self, capsys):
        code = main(["--backend", "recorded", "--log-level", "silent", EAT])
        assert code == 1
        assert "fixtures" in capsys.readouterr().err

    def test_missing_config(self, tmp_path, capsys):
        code = main(["--config", str(tmp_path / "none.yaml"), EAT])
        assert code == 1
