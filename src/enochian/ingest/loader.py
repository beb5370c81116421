"""Loader for the lexicon and root table JSON files.

Both sources are JSON arrays of objects. The loader is the only I/O
boundary of the package:

1. Verify the file exists
2. Compute its SHA256 for the load receipt
3. Parse the array and build typed entries
4. Skip (and report) records without the required fields

Fail fast if:
- The file is missing
- The file is not valid JSON or not a JSON array
"""

from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

from enochian.config import Settings
from enochian.lexicon.index import LexiconEntry
from enochian.lexicon.roots import RootEntry

logger = logging.getLogger(__name__)

T = TypeVar("T")

LEXICON_KEY = "lexicon"
ROOTS_KEY = "roots"

# Published root table field names -> entry field names
_ROOT_FIELD_ALIASES = {
    "english_letter": "letter",
    "enochian_name": "name",
}


@dataclass
class LoadReport:
    """Receipt for a data load: what was read, from where, and how much."""

    source_key: str
    path: Path
    sha256: str
    loaded: int = 0
    skipped: int = 0
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "source_key": self.source_key,
            "path": str(self.path),
            "sha256": self.sha256,
            "loaded": self.loaded,
            "skipped": self.skipped,
            "warnings": list(self.warnings),
        }


class LoaderError(Exception):
    """Raised when a data source cannot be loaded."""

    pass


class MissingSourceError(LoaderError):
    """Raised when a data file is not available locally."""

    def __init__(self, source_key: str, path: Path):
        self.source_key = source_key
        self.path = path
        super().__init__(f"{source_key} data not found at {path}")


class MalformedSourceError(LoaderError):
    """Raised when a data file is not a JSON array."""

    def __init__(self, source_key: str, path: Path, reason: str):
        self.source_key = source_key
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed {source_key} data at {path}: {reason}")


class _SkipRecord(Exception):
    pass


def compute_sha256(path: Path) -> str:
    """Compute the SHA256 hash of a file, read in chunks."""
    sha256 = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            sha256.update(chunk)
    return sha256.hexdigest()


def _read_array(source_key: str, path: Path) -> tuple[list[Any], str]:
    if not path.is_file():
        raise MissingSourceError(source_key, path)

    sha256 = compute_sha256(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise MalformedSourceError(source_key, path, f"invalid JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise MalformedSourceError(source_key, path, "not UTF-8 text") from e

    if not isinstance(data, list):
        raise MalformedSourceError(
            source_key, path, f"expected a JSON array, got {type(data).__name__}"
        )
    return data, sha256


def _load(
    source_key: str, path: Path, build: Callable[[Any], T]
) -> tuple[list[T], LoadReport]:
    path = Path(path)
    records, sha256 = _read_array(source_key, path)
    report = LoadReport(source_key=source_key, path=path, sha256=sha256)

    entries: list[T] = []
    for position, record in enumerate(records):
        try:
            entries.append(build(record))
        except _SkipRecord as e:
            message = f"record {position}: {e}"
            logger.warning(f"Skipping {source_key} {message}")
            report.warnings.append(message)
            report.skipped += 1

    report.loaded = len(entries)
    logger.info(
        f"Loaded {report.loaded} {source_key} records from {path} "
        f"({report.skipped} skipped, sha256 {sha256[:12]})"
    )
    return entries, report


def _require_str(record: dict, key: str) -> str:
    value = record.get(key)
    if not isinstance(value, str) or not value.strip():
        raise _SkipRecord(f"missing or empty field {key!r}")
    return value


def _lexicon_entry(record: Any) -> LexiconEntry:
    if not isinstance(record, dict):
        raise _SkipRecord("not an object")
    return LexiconEntry(
        word=_require_str(record, "word").strip(),
        meaning=_require_str(record, "meaning"),
    )


def _root_entry(record: Any) -> RootEntry:
    if not isinstance(record, dict):
        raise _SkipRecord("not an object")
    record = {_ROOT_FIELD_ALIASES.get(k, k): v for k, v in record.items()}

    letter = _require_str(record, "letter").strip().lower()
    if len(letter) != 1:
        raise _SkipRecord(f"letter must be a single character, got {letter!r}")

    numeric = record.get("numeric_value", 0)
    try:
        numeric_value = int(numeric) if numeric is not None else 0
    except (TypeError, ValueError):
        raise _SkipRecord(f"numeric_value is not a number: {numeric!r}")

    meaning = record.get("meaning") or ""
    symbol = record.get("symbol") or ""
    if not isinstance(meaning, str) or not isinstance(symbol, str):
        raise _SkipRecord("meaning and symbol must be strings")

    return RootEntry(
        letter=letter,
        name=_require_str(record, "name").strip(),
        numeric_value=numeric_value,
        meaning=meaning,
        symbol=symbol,
    )


def load_lexicon(path: Path) -> tuple[list[LexiconEntry], LoadReport]:
    """Load lexicon entries (``{"word", "meaning"}`` objects).

    Raises:
        MissingSourceError: If the file does not exist
        MalformedSourceError: If the file is not a JSON array
    """
    return _load(LEXICON_KEY, path, _lexicon_entry)


def load_roots(path: Path) -> tuple[list[RootEntry], LoadReport]:
    """Load root table entries.

    Accepts both ``letter``/``name`` and the published table's
    ``english_letter``/``enochian_name`` field names.

    Raises:
        MissingSourceError: If the file does not exist
        MalformedSourceError: If the file is not a JSON array
    """
    return _load(ROOTS_KEY, path, _root_entry)


def load_translator(
    settings: Optional[Settings] = None,
    lexicon_path: Optional[Path] = None,
    roots_path: Optional[Path] = None,
    enhanced: bool = True,
):
    """Build a translator from the configured data files.

    Explicit paths override the ones derived from ``settings``. The
    returned translator is an ``EnhancedTranslator`` unless ``enhanced``
    is False.
    """
    # Imported here to keep the ingest layer importable without the pipeline
    from enochian.pipeline.enhanced import EnhancedTranslator
    from enochian.pipeline.translator import EnochianTranslator

    settings = settings or Settings()
    lexicon, _ = load_lexicon(Path(lexicon_path or settings.lexicon_path))
    roots, _ = load_roots(Path(roots_path or settings.roots_path))

    cls = EnhancedTranslator if enhanced else EnochianTranslator
    return cls(lexicon, roots, settings)
