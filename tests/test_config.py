from pathlib import Path

import pytest
from pydantic import ValidationError

from avro_phonetic.config import GRAMMAR_PATH_ENV, AppConfig, default_config_path, load_config


@pytest.fixture(autouse=True)
def _clear_grammar_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(GRAMMAR_PATH_ENV, raising=False)


def test_load_config_missing_file_uses_defaults(tmp_path: Path) -> None:
    cfg_path = tmp_path / "missing.toml"

    loaded = load_config(cfg_path)

    assert isinstance(loaded, AppConfig)
    assert loaded.grammar.path is None
    assert loaded.runtime.log_level == "INFO"
    assert not cfg_path.exists()


def test_load_config_reads_grammar_and_runtime(tmp_path: Path) -> None:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text(
        """
[grammar]
path = "grammars/custom.json"

[runtime]
log_level = "DEBUG"
""".strip(),
        encoding="utf-8",
    )

    loaded = load_config(cfg_path)

    assert loaded.grammar.path == "grammars/custom.json"
    assert loaded.runtime.log_level == "DEBUG"


def test_environment_overrides_grammar_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text('[grammar]\npath = "from-file.json"\n', encoding="utf-8")
    monkeypatch.setenv(GRAMMAR_PATH_ENV, "/srv/avro/grammar.json")

    assert load_config(cfg_path).grammar.path == "/srv/avro/grammar.json"
    assert load_config(tmp_path / "missing.toml").grammar.path == "/srv/avro/grammar.json"


def test_blank_environment_value_is_ignored(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(GRAMMAR_PATH_ENV, "  ")

    assert load_config(tmp_path / "missing.toml").grammar.path is None


def test_load_config_rejects_wrong_types(tmp_path: Path) -> None:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text("[grammar]\npath = 3\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_config(cfg_path)


def test_default_config_path_is_under_user_config() -> None:
    path = default_config_path()

    assert path.name == "config.toml"
    assert path.parent.name == "avro-phonetic"
