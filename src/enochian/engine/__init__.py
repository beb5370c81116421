"""Matching and rendering components used by the translator."""

from enochian.engine.matcher import MatchMethod, WordMatcher, WordResolution
from enochian.engine.options import TranslationOptions
from enochian.engine.phrases import PhraseMatch, PhraseMatcher, PhraseToken, PlainToken
from enochian.engine.renderer import Renderer

__all__ = [
    "MatchMethod",
    "WordMatcher",
    "WordResolution",
    "TranslationOptions",
    "PhraseMatch",
    "PhraseMatcher",
    "PhraseToken",
    "PlainToken",
    "Renderer",
]
