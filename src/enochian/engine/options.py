"""Per-call translation options."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True)
class TranslationOptions:
    """Independently togglable translation strategies."""

    fuzzy_matching: bool = True
    """Negation prefixes, stem lookup and substring scoring."""

    plural_handling: bool = True
    """Retry a direct lookup with one trailing "s" removed."""

    root_construction: bool = True
    """Fall back to building a word from letter roots."""

    check_phrases: bool = True
    """Whole-input and multi-word phrase detection."""

    context_aware: bool = True
    """Reserved; currently has no effect."""

    @classmethod
    def from_value(
        cls, value: "TranslationOptions | Mapping[str, Any] | None"
    ) -> "TranslationOptions":
        """Coerce ``None``, a mapping or an instance into options.

        Raises:
            ValueError: If a mapping holds an unknown option name
        """
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(value) - known)
        if unknown:
            raise ValueError(
                f"Unknown translation options: {unknown}. "
                f"Known options: {', '.join(sorted(known))}"
            )
        return cls(**{k: bool(v) for k, v in value.items()})

    def to_dict(self) -> dict:
        return asdict(self)
