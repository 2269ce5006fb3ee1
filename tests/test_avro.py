from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from avro_phonetic import Avro, ConfigurationError, MalformedSourceError, SourceUnavailableError
from avro_phonetic.config import GRAMMAR_PATH_ENV, AppConfig, GrammarConfig

_MINI_GRAMMAR = {
    "vowel": "aeiou",
    "consonant": "bcdfghjklmnpqrstvwxyz",
    "number": "0123456789",
    "casesensitive": "",
    "patterns": [{"find": "k", "replace": "ক"}, {"find": "k", "replace": "খ"}],
}


@pytest.fixture(autouse=True)
def _clear_grammar_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(GRAMMAR_PATH_ENV, raising=False)


def test_create_default_uses_bundled_grammar(tmp_path: Path) -> None:
    avro = Avro.create_default(config_path=tmp_path / "missing.toml")

    assert avro.parse("ami") == "আমি"
    assert avro.convert("ami") == "আমি"


def test_create_default_instances_are_independent(tmp_path: Path) -> None:
    first = Avro.create_default(config_path=tmp_path / "missing.toml")
    second = Avro.create_default(config_path=tmp_path / "missing.toml")

    assert first is not second
    assert first.parser is not second.parser


def test_create_default_follows_configured_grammar(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    (tmp_path / "mini.json").write_text(json.dumps(_MINI_GRAMMAR, ensure_ascii=False), encoding="utf-8")
    config = AppConfig(grammar=GrammarConfig(path="mini.json"))

    with caplog.at_level(logging.WARNING, logger="avro_phonetic.avro"):
        avro = Avro.create_default(config, config_path=tmp_path / "config.toml")

    assert avro.parse("ka") == "খa"
    assert "defined more than once" in caplog.text


def test_create_default_honours_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    grammar_path = tmp_path / "mini.json"
    grammar_path.write_text(json.dumps(_MINI_GRAMMAR, ensure_ascii=False), encoding="utf-8")
    monkeypatch.setenv(GRAMMAR_PATH_ENV, str(grammar_path))

    avro = Avro.create_default(config_path=tmp_path / "missing.toml")

    assert avro.parse("k") == "খ"


def test_with_grammar_validates_eagerly() -> None:
    assert Avro.with_grammar(_MINI_GRAMMAR).parse("k") == "খ"

    with pytest.raises(ConfigurationError):
        Avro.with_grammar({"patterns": []})


def test_from_grammar_file_surfaces_loader_errors(tmp_path: Path) -> None:
    with pytest.raises(SourceUnavailableError):
        Avro.from_grammar_file(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(MalformedSourceError):
        Avro.from_grammar_file(broken)


def test_from_grammar_file_builds_converter(tmp_path: Path) -> None:
    path = tmp_path / "mini.json"
    path.write_text(json.dumps(_MINI_GRAMMAR, ensure_ascii=False), encoding="utf-8")

    assert Avro.from_grammar_file(str(path)).parse("kk") == "খখ"


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_create_default_applies_configured_log_level_on_request(
    tmp_path: Path,
    restore_root_logger: logging.Logger,
) -> None:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text('[runtime]\nlog_level = "DEBUG"\n', encoding="utf-8")

    Avro.create_default(config_path=cfg_path, configure_logs=True)

    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    assert restore_root_logger.handlers[0].level == logging.DEBUG


def test_create_default_leaves_logging_alone_by_default(
    tmp_path: Path,
    restore_root_logger: logging.Logger,
) -> None:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text('[runtime]\nlog_level = "DEBUG"\n', encoding="utf-8")
    before_level = restore_root_logger.level
    before_handlers = list(restore_root_logger.handlers)

    Avro.create_default(config_path=cfg_path)

    assert restore_root_logger.level == before_level
    assert restore_root_logger.handlers == before_handlers
