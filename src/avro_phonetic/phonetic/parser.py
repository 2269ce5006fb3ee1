"""Single-pass phonetic rewrite engine."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from avro_phonetic.phonetic.models import Grammar, Pattern, parse_grammar
from avro_phonetic.phonetic.normalizer import fix_string_case
from avro_phonetic.phonetic.rules import CharClassifier, RuleEvaluator
from avro_phonetic.phonetic.trie import Trie

LOGGER = logging.getLogger(__name__)


def _build_index(patterns: Iterable[Pattern], *, label: str) -> Trie[Pattern]:
    index: Trie[Pattern] = Trie()
    for pattern in patterns:
        replaced = index.insert(pattern.find, pattern)
        if replaced is not None:
            LOGGER.debug("Redefined %s pattern %r; the later definition wins", label, pattern.find)
    return index


class PhoneticParser:
    """Convert romanized text into the grammar's target script.

    Both pattern indices are built once here and only read afterwards, so a
    parser can be shared between threads.
    """

    def __init__(self, grammar: Grammar | Mapping[str, object]) -> None:
        self._grammar = parse_grammar(grammar)
        self._case_sensitive = self._grammar.case_sensitive_chars
        self._plain_index = _build_index(self._grammar.unconditional_patterns(), label="unconditional")
        self._rule_index = _build_index(self._grammar.conditional_patterns(), label="conditional")
        self._evaluator = RuleEvaluator(
            CharClassifier.from_sets(
                consonants=self._grammar.consonants,
                digits=self._grammar.digits,
            )
        )
        LOGGER.debug(
            "Built phonetic parser (unconditional=%d, conditional=%d)",
            len(self._plain_index),
            len(self._rule_index),
        )

    @property
    def grammar(self) -> Grammar:
        return self._grammar

    @property
    def index_sizes(self) -> tuple[int, int]:
        """Distinct patterns in the unconditional and conditional indices."""
        return len(self._plain_index), len(self._rule_index)

    def pattern_for(self, find: str) -> Pattern | None:
        """Return the pattern indexed under find, unconditional first.

        The indices themselves stay private; patterns are frozen models.
        """
        pattern = self._plain_index.get(find)
        return pattern if pattern is not None else self._rule_index.get(find)

    def fix_string_case(self, text: str) -> str:
        return fix_string_case(text, self._case_sensitive)

    def parse(self, text: str) -> str:
        fixed = self.fix_string_case(text)
        output: list[str] = []
        cur_end = 0

        for cur, char in enumerate(fixed):
            if cur < cur_end:
                continue

            # Unconditional patterns always win over conditional ones at a position.
            pattern = self._plain_index.search_longest(fixed, cur)
            if pattern is not None:
                output.append(pattern.replace)
                cur_end = cur + len(pattern.find)
                continue

            pattern = self._rule_index.search_longest(fixed, cur)
            if pattern is not None:
                cur_end = cur + len(pattern.find)
                replaced = self._evaluator.evaluate(pattern.rules, fixed, cur, cur_end)
                output.append(pattern.replace if replaced is None else replaced)
                continue

            output.append(char)
            cur_end = cur + 1

        return "".join(output)

    def convert(self, text: str) -> str:
        """Alias of :meth:`parse`."""
        return self.parse(text)


def build_parser(grammar: Grammar | Mapping[str, object]) -> PhoneticParser:
    """Validate grammar and build a parser, raising ConfigurationError eagerly."""
    return PhoneticParser(grammar)
