"""Application service for grammar loading."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from avro_phonetic.phonetic.repository import GrammarLoadResult, JsonGrammarRepository


@dataclass(slots=True)
class GrammarService:
    """Resolve the configured grammar path and load it."""

    repository: JsonGrammarRepository

    @classmethod
    def create_default(cls) -> "GrammarService":
        return cls(repository=JsonGrammarRepository())

    def load_for_config(
        self,
        *,
        config: object,
        config_path: Path | None = None,
    ) -> GrammarLoadResult:
        path_value = self._grammar_path_from_config(config)
        grammar_path, explicit = self.repository.resolve_grammar_path(
            path_value,
            config_path=config_path,
        )
        return self.repository.load(grammar_path, bundled=not explicit)

    def load_file(self, path: str | Path) -> GrammarLoadResult:
        return self.repository.load(Path(path).expanduser())

    @staticmethod
    def _grammar_path_from_config(config: object) -> str | None:
        grammar_cfg = getattr(config, "grammar", None)
        path_value = getattr(grammar_cfg, "path", None)
        if not isinstance(path_value, str):
            return None
        stripped = path_value.strip()
        return stripped or None
