"""Tests for Settings validation and defaults."""

from __future__ import annotations

from pathlib import Path

import pytest

from enochian.config import NEGATION_PREFIXES, Settings


class TestSettings:
    """Tests for the Settings dataclass."""

    def test_defaults(self):
        settings = Settings()
        assert settings.phrase_threshold == 0.7
        assert settings.fuzzy_threshold == 0.5
        assert settings.max_phrase_window == 4
        assert settings.min_negation_base == 3
        assert settings.negation_letter == "g"
        assert settings.negation_prefixes == NEGATION_PREFIXES
        assert settings.construction_strategy == "verbatim"

    def test_data_dir_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ENOCHIAN_DATA_DIR", str(tmp_path))
        monkeypatch.delenv("ENOCHIAN_LEXICON", raising=False)
        monkeypatch.delenv("ENOCHIAN_ROOTS", raising=False)
        settings = Settings()
        assert settings.data_dir == tmp_path
        assert settings.lexicon_path == tmp_path / "enochian_lexicon.json"
        assert settings.roots_path == tmp_path / "enochian_root_table.json"

    def test_file_paths_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ENOCHIAN_DATA_DIR", str(tmp_path / "data"))
        monkeypatch.setenv("ENOCHIAN_LEXICON", str(tmp_path / "lex.json"))
        monkeypatch.setenv("ENOCHIAN_ROOTS", str(tmp_path / "roots.json"))
        settings = Settings()
        assert settings.lexicon_path == tmp_path / "lex.json"
        assert settings.roots_path == tmp_path / "roots.json"

    def test_data_dir_default(self, monkeypatch):
        monkeypatch.delenv("ENOCHIAN_DATA_DIR", raising=False)
        assert Settings().data_dir == Path.home() / ".enochian"

    def test_unknown_construction_strategy(self):
        with pytest.raises(ValueError, match="construction_strategy"):
            Settings(construction_strategy="syllables")

    @pytest.mark.parametrize("name", ["phrase_threshold", "fuzzy_threshold"])
    def test_threshold_out_of_range(self, name):
        with pytest.raises(ValueError, match=name):
            Settings(**{name: 1.5})

    def test_window_too_small(self):
        with pytest.raises(ValueError, match="max_phrase_window"):
            Settings(max_phrase_window=1)

    def test_negation_letter_normalized(self):
        settings = Settings(negation_letter="Z", negation_prefixes=("UN", "Non"))
        assert settings.negation_letter == "z"
        assert settings.negation_prefixes == ("un", "non")

    def test_negation_letter_must_be_single(self):
        with pytest.raises(ValueError, match="negation_letter"):
            Settings(negation_letter="ged")
