"""Grammar file repository."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from avro_phonetic.phonetic.errors import (
    ConfigurationError,
    MalformedSourceError,
    SourceUnavailableError,
)
from avro_phonetic.phonetic.models import Grammar, parse_grammar

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class GrammarLoadWarning:
    """Non-fatal warning emitted while loading a grammar."""

    message: str


@dataclass(slots=True)
class GrammarLoadResult:
    path: Path
    grammar: Grammar
    warnings: list[GrammarLoadWarning]
    bundled: bool


class JsonGrammarRepository:
    """Load and validate phonetic grammars from JSON."""

    @staticmethod
    def bundled_grammar_path() -> Path:
        return Path(__file__).resolve().parent.parent / "resources" / "grammar.json"

    @classmethod
    def resolve_grammar_path(
        cls,
        grammar_path: str | None,
        *,
        config_path: Path | None = None,
    ) -> tuple[Path, bool]:
        """Return the grammar path and whether it was explicitly configured."""
        if grammar_path and grammar_path.strip():
            raw = Path(grammar_path.strip()).expanduser()
            if raw.is_absolute() or config_path is None:
                return raw, True
            return (config_path.parent / raw).resolve(), True
        return cls.bundled_grammar_path(), False

    def load(self, path: Path, *, bundled: bool = False) -> GrammarLoadResult:
        payload = self._load_json(path)
        try:
            grammar = parse_grammar(payload)
        except ConfigurationError as exc:
            raise ConfigurationError(f"{path}: {exc}") from exc

        warnings = [
            GrammarLoadWarning(
                message=f"Pattern {find!r} is defined more than once in {path}; the last definition wins"
            )
            for find in grammar.duplicate_finds()
        ]
        LOGGER.debug("Loaded grammar with %d patterns from %s", len(grammar.patterns), path)
        return GrammarLoadResult(
            path=path,
            grammar=grammar,
            warnings=warnings,
            bundled=bundled,
        )

    @staticmethod
    def _load_json(path: Path) -> object:
        if not path.is_file():
            raise SourceUnavailableError(f"Grammar file not found: {path}")
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SourceUnavailableError(f"{path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise MalformedSourceError(f"{path}: grammar is not valid UTF-8 ({exc.reason})") from exc

        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise MalformedSourceError(
                f"{path}: line {exc.lineno}, column {exc.colno}: {exc.msg}"
            ) from exc
