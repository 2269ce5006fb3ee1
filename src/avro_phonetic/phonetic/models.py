"""Immutable in-memory grammar model."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from avro_phonetic.phonetic.errors import ConfigurationError

NEGATION_MARKER = "!"


class MatchType(StrEnum):
    """Side of the matched span a context condition inspects."""

    PREFIX = "prefix"
    SUFFIX = "suffix"


class Scope(StrEnum):
    """Character class a context condition tests against."""

    PUNCTUATION = "punctuation"
    VOWEL = "vowel"
    CONSONANT = "consonant"
    EXACT = "exact"


class Match(BaseModel):
    """One context condition on the text before or after a match."""

    model_config = ConfigDict(frozen=True)

    type: MatchType
    scope: Scope
    negated: bool = False
    value: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _split_negation(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        scope = data.get("scope")
        if isinstance(scope, str) and scope.startswith(NEGATION_MARKER):
            return {**data, "scope": scope[len(NEGATION_MARKER) :], "negated": True}
        return data

    @property
    def exact_value(self) -> str:
        return self.value or ""


class Rule(BaseModel):
    """Replacement that applies when all of its matches hold."""

    model_config = ConfigDict(frozen=True)

    matches: tuple[Match, ...]
    replace: str


class Pattern(BaseModel):
    """Literal source text with a default replacement and optional rules."""

    model_config = ConfigDict(frozen=True)

    find: str = Field(min_length=1)
    replace: str
    rules: tuple[Rule, ...] = ()

    @field_validator("rules", mode="before")
    @classmethod
    def _missing_rules_mean_unconditional(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def is_conditional(self) -> bool:
        return bool(self.rules)


class Grammar(BaseModel):
    """Character classes plus the pattern table of a phonetic grammar."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    vowel: str
    consonant: str
    number: str
    case_sensitive: str = Field(alias="casesensitive")
    patterns: tuple[Pattern, ...]

    @property
    def vowels(self) -> frozenset[str]:
        """The grammar's declared vowels.

        Vowel-scope rule checks ignore this set and use the builtin
        ``aeiou`` alphabet in :mod:`avro_phonetic.phonetic.rules`.
        """
        return frozenset(self.vowel)

    @property
    def consonants(self) -> frozenset[str]:
        return frozenset(self.consonant)

    @property
    def digits(self) -> frozenset[str]:
        return frozenset(self.number)

    @property
    def case_sensitive_chars(self) -> frozenset[str]:
        return frozenset(self.case_sensitive)

    def unconditional_patterns(self) -> list[Pattern]:
        return [pattern for pattern in self.patterns if not pattern.is_conditional]

    def conditional_patterns(self) -> list[Pattern]:
        return [pattern for pattern in self.patterns if pattern.is_conditional]

    def duplicate_finds(self) -> list[str]:
        """Return find strings defined more than once within the same index."""
        counts = Counter((pattern.is_conditional, pattern.find) for pattern in self.patterns)
        return sorted({find for (_conditional, find), count in counts.items() if count > 1})


def _describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "<grammar>"
        problems.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "invalid grammar: " + "; ".join(problems)


def parse_grammar(raw: object) -> Grammar:
    """Validate a decoded grammar document and return the immutable model."""
    if isinstance(raw, Grammar):
        return raw
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"grammar must be a mapping, got {type(raw).__name__}")
    try:
        return Grammar.model_validate(dict(raw))
    except ValidationError as exc:
        raise ConfigurationError(_describe_validation_error(exc)) from exc
