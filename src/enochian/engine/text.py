"""Token-level text helpers."""

from __future__ import annotations

from enochian.config import PUNCTUATION


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace to single spaces and trim."""
    return " ".join(text.split())


def tokenize(text: str) -> list[str]:
    """Split text on runs of whitespace, dropping empty tokens."""
    return text.split()


def split_punctuation(token: str) -> tuple[str, str, str]:
    """Split a token into (leading punctuation, core, trailing punctuation).

    Examples:
        >>> split_punctuation('"truth."')
        ('"', 'truth', '."')
        >>> split_punctuation("don't")
        ('', "don't", '')
        >>> split_punctuation("?!")
        ('?!', '', '')
    """
    core = token.lstrip(PUNCTUATION)
    leading = token[: len(token) - len(core)]
    stripped = core.rstrip(PUNCTUATION)
    trailing = core[len(stripped) :]
    return leading, stripped, trailing


def is_punctuation(token: str) -> bool:
    return bool(token) and not token.strip(PUNCTUATION)
