"""Facade over the phonetic parser."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from avro_phonetic.config import AppConfig, load_config
from avro_phonetic.logging_setup import configure_logging
from avro_phonetic.phonetic.models import Grammar
from avro_phonetic.phonetic.parser import PhoneticParser, build_parser
from avro_phonetic.phonetic.repository import GrammarLoadResult
from avro_phonetic.phonetic.service import GrammarService

LOGGER = logging.getLogger(__name__)


def _log_load_warnings(result: GrammarLoadResult) -> None:
    for warning in result.warnings:
        LOGGER.warning("%s", warning.message)


class Avro:
    """Bengali phonetic converter built from an explicit grammar."""

    def __init__(self, parser: PhoneticParser) -> None:
        self._parser = parser

    @property
    def parser(self) -> PhoneticParser:
        return self._parser

    @classmethod
    def with_grammar(cls, grammar: Grammar | Mapping[str, object]) -> "Avro":
        return cls(build_parser(grammar))

    @classmethod
    def from_grammar_file(
        cls,
        path: str | Path,
        *,
        service: GrammarService | None = None,
    ) -> "Avro":
        result = (service or GrammarService.create_default()).load_file(path)
        _log_load_warnings(result)
        return cls(build_parser(result.grammar))

    @classmethod
    def create_default(
        cls,
        config: AppConfig | None = None,
        *,
        config_path: Path | None = None,
        service: GrammarService | None = None,
        configure_logs: bool = False,
    ) -> "Avro":
        """Build a converter from configuration, or the bundled grammar.

        With ``configure_logs`` the root logger is set up from
        ``runtime.log_level`` before the grammar is loaded.
        """
        app_config = config if config is not None else load_config(config_path)
        if configure_logs:
            configure_logging(app_config.runtime.log_level)
        result = (service or GrammarService.create_default()).load_for_config(
            config=app_config,
            config_path=config_path,
        )
        _log_load_warnings(result)
        LOGGER.info("Using %s grammar from %s", "bundled" if result.bundled else "custom", result.path)
        return cls(build_parser(result.grammar))

    def parse(self, text: str) -> str:
        return self._parser.parse(text)

    def convert(self, text: str) -> str:
        """Alias of :meth:`parse`."""
        return self.parse(text)
