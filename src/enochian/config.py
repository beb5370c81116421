"""Configuration settings for the Enochian translator."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Characters stripped from either end of a token before lookup
PUNCTUATION = ".,;:!?'\"()-"

# Leading morphemes treated as English negation. "a" collides with many
# unrelated words; it stays in the table so coverage can be tuned here.
NEGATION_PREFIXES: tuple[str, ...] = (
    "im",
    "in",
    "ir",
    "il",
    "un",
    "non",
    "dis",
    "a",
    "anti",
)

# verbatim: keep the English word, retain its letter roots for rendering
# initials: synthesize a word from the first letter of each root name
CONSTRUCTION_STRATEGIES = ("verbatim", "initials")

# Environment variables read by Settings
DATA_DIR_ENV = "ENOCHIAN_DATA_DIR"
LEXICON_ENV = "ENOCHIAN_LEXICON"
ROOTS_ENV = "ENOCHIAN_ROOTS"


def _default_data_dir() -> Path:
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(env).expanduser()
    return Path.home() / ".enochian"


def _env_path(name: str) -> Optional[Path]:
    env = os.environ.get(name)
    return Path(env).expanduser() if env else None


@dataclass
class Settings:
    """Application settings."""

    # Data files
    data_dir: Path = field(default_factory=_default_data_dir)
    lexicon_file: str = "enochian_lexicon.json"
    roots_file: str = "enochian_root_table.json"
    # Explicit file paths; take precedence over data_dir
    lexicon_override: Optional[Path] = field(default_factory=lambda: _env_path(LEXICON_ENV))
    roots_override: Optional[Path] = field(default_factory=lambda: _env_path(ROOTS_ENV))

    # Phrase matching
    phrase_threshold: float = 0.7
    max_phrase_window: int = 4

    # Word matching
    fuzzy_threshold: float = 0.5
    min_negation_base: int = 3
    negation_letter: str = "g"
    negation_prefixes: tuple[str, ...] = NEGATION_PREFIXES
    construction_strategy: str = "verbatim"

    def __post_init__(self) -> None:
        if self.construction_strategy not in CONSTRUCTION_STRATEGIES:
            raise ValueError(
                f"Unknown construction_strategy: {self.construction_strategy!r}. "
                f"Expected one of: {', '.join(CONSTRUCTION_STRATEGIES)}"
            )
        for name in ("phrase_threshold", "fuzzy_threshold"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0 and 1, got {value}")
        if self.max_phrase_window < 2:
            raise ValueError(
                f"max_phrase_window must be at least 2, got {self.max_phrase_window}"
            )
        if len(self.negation_letter) != 1:
            raise ValueError(
                f"negation_letter must be a single letter, got {self.negation_letter!r}"
            )
        self.negation_letter = self.negation_letter.lower()
        self.negation_prefixes = tuple(p.lower() for p in self.negation_prefixes)

    @property
    def lexicon_path(self) -> Path:
        return self.lexicon_override or self.data_dir / self.lexicon_file

    @property
    def roots_path(self) -> Path:
        return self.roots_override or self.data_dir / self.roots_file
