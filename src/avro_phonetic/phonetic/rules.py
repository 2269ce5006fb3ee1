"""Context rule evaluation for conditional patterns."""

from __future__ import annotations

from collections.abc import Collection, Sequence
from dataclasses import dataclass

from avro_phonetic.phonetic.models import Match, MatchType, Rule, Scope

# Vowel-scope checks use this fixed alphabet rather than the grammar's vowel set.
BUILTIN_VOWELS = frozenset("aeiou")


@dataclass(frozen=True, slots=True)
class CharClassifier:
    """Classify single characters as vowel, consonant or punctuation."""

    consonants: frozenset[str]
    digits: frozenset[str]
    vowels: frozenset[str] = BUILTIN_VOWELS

    @classmethod
    def from_sets(cls, *, consonants: Collection[str], digits: Collection[str]) -> "CharClassifier":
        return cls(consonants=frozenset(consonants), digits=frozenset(digits))

    def is_vowel(self, char: str) -> bool:
        return char.lower() in self.vowels

    def is_consonant(self, char: str) -> bool:
        return char.lower() in self.consonants

    def is_punctuation(self, char: str) -> bool:
        """Anything that is not a vowel, consonant or digit."""
        return not self.is_vowel(char) and not self.is_consonant(char) and char not in self.digits


class RuleEvaluator:
    """Pick the replacement of the first rule whose matches all hold."""

    def __init__(self, classifier: CharClassifier) -> None:
        self._classifier = classifier

    @property
    def classifier(self) -> CharClassifier:
        return self._classifier

    def evaluate(self, rules: Sequence[Rule], text: str, cur: int, cur_end: int) -> str | None:
        """Return the winning replacement, or None when no rule fires.

        ``cur`` is the first index of the matched span and ``cur_end`` the
        index just past it.
        """
        for rule in rules:
            # A rule without matches never fires.
            if rule.matches and all(
                self.match_holds(match, text, cur, cur_end) for match in rule.matches
            ):
                return rule.replace
        return None

    def match_holds(self, match: Match, text: str, cur: int, cur_end: int) -> bool:
        if match.scope is Scope.EXACT:
            return self._exact_holds(match, text, cur, cur_end)

        chk = cur - 1 if match.type is MatchType.PREFIX else cur_end
        in_bounds = 0 <= chk < len(text)

        if match.scope is Scope.PUNCTUATION:
            if in_bounds:
                condition = self._classifier.is_punctuation(text[chk])
            else:
                # The edge of the text on the inspected side counts as punctuation.
                condition = chk < 0 if match.type is MatchType.PREFIX else chk >= len(text)
        elif match.scope is Scope.VOWEL:
            condition = in_bounds and self._classifier.is_vowel(text[chk])
        else:
            condition = in_bounds and self._classifier.is_consonant(text[chk])

        return condition != match.negated

    @staticmethod
    def _exact_holds(match: Match, text: str, cur: int, cur_end: int) -> bool:
        value = match.exact_value
        if match.type is MatchType.PREFIX:
            start, end = cur - len(value), cur
        else:
            start, end = cur_end, cur_end + len(value)

        if start < 0 or end > len(text):
            # A neighbour that cannot exist satisfies only the negated form.
            return match.negated

        return (text[start:end] == value) != match.negated
