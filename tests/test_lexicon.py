"""Tests for the lexicon index and root table."""

from __future__ import annotations

from enochian.lexicon.index import (
    LexiconEntry,
    LexiconIndex,
    clean_meaning,
    split_meanings,
)
from enochian.lexicon.roots import RootEntry, RootTable


class TestMeaningCleanup:
    """Tests for clean_meaning() and split_meanings()."""

    def test_leading_dash_and_parentheticals(self):
        assert clean_meaning("- Truth, true (adj.)") == "truth, true"
        assert clean_meaning("Ark (of the covenant) ") == "ark"

    def test_only_one_leading_dash(self):
        assert clean_meaning("--mortal") == "-mortal"

    def test_split_on_commas_and_semicolons(self):
        assert split_meanings("Justice; righteousness, right") == [
            "justice",
            "righteousness",
            "right",
        ]

    def test_empty_parts_dropped(self):
        assert split_meanings("(A)") == []
        assert split_meanings("light,, ;") == ["light"]


class TestLexiconIndex:
    """Tests for LexiconIndex construction and lookups."""

    def test_lookup_every_meaning(self, mock_index):
        assert mock_index.lookup("with") == "in"
        assert mock_index.lookup("truth") == "cafafam"
        assert mock_index.lookup("true") == "cafafam"
        assert mock_index.lookup("all creatures") == "tol"
        assert mock_index.lookup("nothing") is None

    def test_annotation_only_meaning_indexes_nothing(self, mock_index):
        assert mock_index.meanings_for("Un") == []

    def test_word_to_meanings_in_order(self, mock_index):
        assert mock_index.meanings_for("tol") == ["all", "all creatures"]
        assert mock_index.meanings_for("erm") == ["ark", "covenant"]

    def test_stems_indexed_only_when_different(self, mock_index):
        assert mock_index.words_for_stem("hand") == ["ziem"]
        assert mock_index.words_for_stem("prepar") == ["gal"]
        assert mock_index.words_for_stem("number") == ["cormp"]
        assert mock_index.words_for_stem("truth") == []

    def test_multi_word_sub_words_indexed(self, mock_index):
        assert mock_index.words_for_stem("creature") == ["tol"]
        assert mock_index.words_for_stem("all") == ["tol"]

    def test_multi_word_phrases(self, mock_index):
        assert mock_index.multi_word_phrases() == [("all creatures", "tol")]

    def test_last_write_wins_keeping_position(self):
        index = LexiconIndex(
            [
                LexiconEntry("OLPIRT", "light"),
                LexiconEntry("in", "with"),
                LexiconEntry("LUCAL", "light"),
            ]
        )
        assert index.lookup("light") == "LUCAL"
        assert list(index.meaning_to_word) == ["light", "with"]

    def test_empty_records_skipped(self):
        index = LexiconIndex([LexiconEntry("", "light"), LexiconEntry("in", "")])
        assert len(index) == 0

    def test_empty_lexicon(self):
        index = LexiconIndex([])
        assert len(index) == 0
        assert index.lookup("with") is None
        assert index.multi_word_phrases() == []


class TestLexiconSearch:
    """Tests for LexiconIndex.search()."""

    def test_exact_first_then_containment(self, mock_index):
        results = mock_index.search("all")
        assert results[0] == ("tol", "all")
        assert ("tol", "all creatures") in results

    def test_case_insensitive(self, mock_index):
        assert mock_index.search("TRUTH") == [("cafafam", "truth")]

    def test_limit(self, mock_index):
        assert len(mock_index.search("a", limit=2)) == 2

    def test_blank_term(self, mock_index):
        assert mock_index.search("  ") == []


class TestRootTable:
    """Tests for RootTable lookups."""

    def test_letter_lookup_case_insensitive(self, mock_root_table):
        assert mock_root_table.find_root_for_letter("I").name == "Gon"
        assert mock_root_table.find_root_for_letter("i").name == "Gon"
        assert mock_root_table.find_root_for_letter("z") is None

    def test_name_lookup_exact(self, mock_root_table):
        assert mock_root_table.find_root_by_name("Drun").letter == "n"
        assert mock_root_table.find_root_by_name("drun") is None

    def test_letter_map(self, mock_root_table):
        glyph = mock_root_table.glyph_for("N")
        assert glyph.name == "Drun"
        assert glyph.symbol == "⟨И⟩"
        assert set(mock_root_table.letter_map) == {"a", "b", "c", "i", "n"}

    def test_analyze_roots_drops_non_letters(self, mock_root_table):
        analysis = mock_root_table.analyze_roots("In-2!")
        assert [lr.letter for lr in analysis] == ["i", "n"]
        assert [lr.root.name for lr in analysis] == ["Gon", "Drun"]

    def test_analyze_roots_missing_letters(self, mock_root_table):
        analysis = mock_root_table.analyze_roots("ox")
        assert [lr.letter for lr in analysis] == ["o", "x"]
        assert all(lr.root is None for lr in analysis)

    def test_first_entry_wins(self):
        table = RootTable(
            [
                RootEntry("a", "Un", 6, "Root of Time", "⟨∀⟩"),
                RootEntry("A", "Other", 1, "", "?"),
            ]
        )
        assert table.find_root_for_letter("a").name == "Un"
        assert table.glyph_for("a").name == "Un"
        assert len(table) == 2

    def test_empty_letter_skipped(self):
        table = RootTable([RootEntry("", "Nil", 0, "", "")])
        assert table.letter_map == {}

    def test_letter_root_to_dict(self, mock_root_table):
        data = mock_root_table.analyze_roots("cx")
        assert data[0].to_dict()["root"]["name"] == "Veh"
        assert data[1].to_dict() == {"letter": "x", "root": None}
