"""Tests for the single-word resolution cascade."""

from __future__ import annotations

import pytest

from enochian.config import Settings
from enochian.engine.matcher import MatchMethod, WordMatcher
from enochian.engine.options import TranslationOptions


@pytest.fixture
def matcher(mock_index, mock_root_table):
    return WordMatcher(mock_index, mock_root_table)


@pytest.fixture
def full_matcher(lexicon, root_table):
    from enochian.lexicon.index import LexiconIndex

    return WordMatcher(LexiconIndex(lexicon), root_table)


NO_FUZZY = TranslationOptions(fuzzy_matching=False)


class TestDirectAndPlural:
    """Exact lookups, with and without a plural 's'."""

    def test_direct(self, matcher):
        res = matcher.resolve("with")
        assert res.target == "in"
        assert res.method is MatchMethod.DIRECT
        assert res.strategy == "direct"
        assert "Direct lexicon match" in res.explanation

    def test_case_and_punctuation(self, matcher):
        res = matcher.resolve("(Truth!)")
        assert res.original == "Truth"
        assert res.target == "cafafam"
        assert res.leading == "("
        assert res.trailing == "!)"
        assert res.text == "(cafafam!)"

    def test_plural(self, matcher):
        res = matcher.resolve("covenants")
        assert res.target == "erm"
        assert res.method is MatchMethod.DIRECT
        assert res.strategy == "plural"

    def test_double_s_not_plural(self, matcher):
        res = matcher.resolve("brightness", TranslationOptions(fuzzy_matching=False))
        assert res.target == "luciftias"
        assert res.strategy == "direct"

    def test_plural_disabled_falls_to_fuzzy(self, matcher):
        res = matcher.resolve("arks", TranslationOptions(plural_handling=False))
        assert res.target == "erm"
        assert res.method is MatchMethod.PARTIAL
        assert res.strategy == "substring"


class TestSingleLetter:
    """Single letters resolve to their Enochian letter names."""

    def test_letter_name(self, matcher):
        res = matcher.resolve("I")
        assert res.target == "Gon"
        assert res.method is MatchMethod.DIRECT
        assert res.strategy == "letter-name"

    def test_letter_name_with_punctuation(self, matcher):
        assert matcher.resolve("a,").text == "Un,"

    def test_lexicon_fallback_without_root(self, mock_root_table):
        from enochian.lexicon.index import LexiconEntry, LexiconIndex

        index = LexiconIndex([LexiconEntry("OL", "o")])
        res = WordMatcher(index, mock_root_table).resolve("o")
        assert res.target == "OL"
        assert res.strategy == "direct"

    def test_unknown_letter_missing(self, matcher):
        res = matcher.resolve("x", NO_FUZZY)
        assert res.is_missing
        assert res.target == "[x]"


class TestNegation:
    """Negation prefixes build a compound on the negated base."""

    def test_immortal(self, matcher):
        res = matcher.resolve("immortal")
        assert res.target == "G-AGIOD"
        assert res.method is MatchMethod.PARTIAL
        assert res.strategy == "negation"
        assert "Negation prefix" in res.explanation
        assert '"im-"' in res.explanation

    def test_base_is_not_negated(self, matcher):
        assert matcher.resolve("mortal").target == "AGIOD"

    def test_stemmed_base(self, matcher):
        res = matcher.resolve("unpreparing")
        assert res.target == "G-gal"

    def test_short_base_ignored(self, mock_root_table):
        from enochian.lexicon.index import LexiconEntry, LexiconIndex

        index = LexiconIndex([LexiconEntry("OX", "ox")])
        assert WordMatcher(index, mock_root_table).resolve("unox").is_missing

        relaxed = WordMatcher(index, mock_root_table, Settings(min_negation_base=2))
        assert relaxed.resolve("unox").target == "G-OX"

    def test_disabled_with_fuzzy(self, matcher):
        res = matcher.resolve("immortal", NO_FUZZY)
        assert res.is_missing
        assert res.target == "[immortal]"

    def test_marker_from_root_name(self, full_matcher):
        assert full_matcher.negation_marker() == "G"
        assert full_matcher.resolve("immortal").target == "G-AGIOD"

    def test_marker_configurable(self, lexicon, root_table):
        from enochian.lexicon.index import LexiconIndex

        matcher = WordMatcher(
            LexiconIndex(lexicon), root_table, Settings(negation_letter="z")
        )
        assert matcher.negation_marker() == "C"
        assert matcher.resolve("immortal").target == "C-AGIOD"

    def test_marker_without_root(self, matcher):
        assert matcher.negation_marker() == "G"

    def test_custom_prefixes(self, mock_index, mock_root_table):
        matcher = WordMatcher(
            mock_index, mock_root_table, Settings(negation_prefixes=("non",))
        )
        assert matcher.resolve("nonmortal").target == "G-AGIOD"
        assert matcher.resolve("immortal").strategy != "negation"


class TestStemAndSubstring:
    """Fuzzy stem and containment matching."""

    def test_stem(self, matcher):
        res = matcher.resolve("preparing")
        assert res.target == "gal"
        assert res.method is MatchMethod.PARTIAL
        assert res.strategy == "stem"

    def test_substring(self, matcher):
        res = matcher.resolve("truthful")
        assert res.target == "cafafam"
        assert res.strategy == "substring"
        assert "similarity 0.62" in res.explanation

    def test_substring_below_threshold(self, matcher):
        res = matcher.resolve("truthfulness", TranslationOptions(root_construction=False))
        assert res.is_missing

    def test_negated_form_never_matches_base_by_containment(
        self, mock_index, mock_root_table
    ):
        # Negation itself is disabled by the base length, leaving only containment
        matcher = WordMatcher(
            mock_index, mock_root_table, Settings(min_negation_base=10)
        )
        res = matcher.resolve("immortal", TranslationOptions(root_construction=False))
        assert res.is_missing


class TestConstruction:
    """Whole-word second chance and letter-root construction."""

    def test_whole_word_second_chance(self, matcher):
        res = matcher.resolve("creatures", NO_FUZZY)
        assert res.target == "tol"
        assert res.method is MatchMethod.DIRECT
        assert res.strategy == "whole-word"
        assert '"all creatures"' in res.explanation

    def test_verbatim_construction(self, matcher):
        res = matcher.resolve("cabin")
        assert res.target == "Cabin"
        assert res.method is MatchMethod.CONSTRUCTED
        assert res.strategy == "construction"
        assert [lr.root.name for lr in res.roots] == ["Veh", "Un", "Pe", "Gon", "Drun"]
        assert "C (Conjunction)" in res.explanation

    def test_initials_construction(self, mock_index, mock_root_table):
        matcher = WordMatcher(
            mock_index, mock_root_table, Settings(construction_strategy="initials")
        )
        res = matcher.resolve("cabin")
        assert res.target == "VUPGD"
        assert res.method is MatchMethod.CONSTRUCTED
        assert res.roots is None

    def test_letter_without_root_is_missing(self, matcher):
        res = matcher.resolve("hello")
        assert res.is_missing
        assert res.target == "[hello]"
        assert res.explanation == 'No lexicon match or root construction for "hello"'

    def test_disabled(self, matcher):
        res = matcher.resolve("cabin", TranslationOptions(root_construction=False))
        assert res.is_missing

    def test_non_letters_block_construction(self, full_matcher):
        assert full_matcher.resolve("r2d2").is_missing


class TestPassthroughAndMissing:
    """Punctuation and unresolvable words."""

    def test_punctuation_only(self, matcher):
        res = matcher.resolve("?!")
        assert res.target == "?!"
        assert res.is_passthrough
        assert res.method is MatchMethod.DIRECT

    def test_missing_lowercases_core(self, matcher):
        res = matcher.resolve("Hello,")
        assert res.target == "[hello]"
        assert res.original == "Hello"
        assert res.text == "[hello],"
