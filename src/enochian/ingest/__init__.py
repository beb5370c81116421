"""Data ingestion module.

Public API:
    load_lexicon(path) -> (list[LexiconEntry], LoadReport)
    load_roots(path) -> (list[RootEntry], LoadReport)
    load_translator(settings) -> EnhancedTranslator
"""

from enochian.ingest.loader import (
    LoadReport,
    LoaderError,
    MalformedSourceError,
    MissingSourceError,
    compute_sha256,
    load_lexicon,
    load_roots,
    load_translator,
)

__all__ = [
    "LoadReport",
    "LoaderError",
    "MalformedSourceError",
    "MissingSourceError",
    "compute_sha256",
    "load_lexicon",
    "load_roots",
    "load_translator",
]
