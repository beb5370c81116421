"""Shared fixtures.

Two data sets are used:

- ``mock_*``: a small lexicon and a five-letter root table. Most letters
  have no root, so unknown words fall through to missing.
- ``lexicon`` / ``roots``: the JSON fixture files, covering the full
  alphabet, loaded through the real loader.
"""

from pathlib import Path

import pytest

from enochian.config import Settings
from enochian.ingest.loader import load_lexicon, load_roots
from enochian.lexicon.index import LexiconEntry, LexiconIndex
from enochian.lexicon.roots import RootEntry, RootTable
from enochian.pipeline.enhanced import EnhancedTranslator

FIXTURES_DIR = Path(__file__).parent / "fixtures"
LEXICON_FILE = FIXTURES_DIR / "enochian_lexicon.json"
ROOTS_FILE = FIXTURES_DIR / "enochian_root_table.json"

MOCK_LEXICON = [
    LexiconEntry("Un", "(A)"),
    LexiconEntry("in", "with"),
    LexiconEntry("gal", "prepare, prepared"),
    LexiconEntry("luciftias", "brightness"),
    LexiconEntry("cafafam", "truth, true"),
    LexiconEntry("tol", "all, all creatures"),
    LexiconEntry("erm", "ark, covenant"),
    LexiconEntry("ziem", "hand, hands"),
    LexiconEntry("ollog", "man, humanity"),
    LexiconEntry("cormp", "number, numbered"),
    LexiconEntry("AGIOD", "mortal"),
]

MOCK_ROOTS = [
    RootEntry(
        "a",
        "Un",
        6,
        "Root of Time: begin, beginning; new, anew; again, then, when",
        "⟨∀⟩",
    ),
    RootEntry(
        "b",
        "Pe",
        1,
        "Root of Choice: duality, multiplicity, choose (between)",
        "⟨б⟩",
    ),
    RootEntry("c", "Veh", 2, "Conjunction", "⟨ↄ⟩"),
    RootEntry("i", "Gon", 9, "Root of Energy/Enablement", "⟨I⟩"),
    RootEntry("n", "Drun", 50, "Root of Desire", "⟨И⟩"),
]


@pytest.fixture
def mock_lexicon():
    return list(MOCK_LEXICON)


@pytest.fixture
def mock_roots():
    return list(MOCK_ROOTS)


@pytest.fixture
def mock_index(mock_lexicon):
    return LexiconIndex(mock_lexicon)


@pytest.fixture
def mock_root_table(mock_roots):
    return RootTable(mock_roots)


@pytest.fixture
def mock_translator(mock_lexicon, mock_roots):
    return EnhancedTranslator(mock_lexicon, mock_roots, Settings())


@pytest.fixture
def lexicon():
    entries, _ = load_lexicon(LEXICON_FILE)
    return entries


@pytest.fixture
def roots():
    entries, _ = load_roots(ROOTS_FILE)
    return entries


@pytest.fixture
def root_table(roots):
    return RootTable(roots)


@pytest.fixture
def translator(lexicon, roots):
    """Translator over the full-alphabet fixture data."""
    return EnhancedTranslator(lexicon, roots, Settings())
