"""Translation pipeline.

Public API:
    EnochianTranslator(lexicon, roots).translate(text, options) -> TranslationResult
    EnhancedTranslator(lexicon, roots).translate_enhanced(text) -> EnhancedTranslationResult
"""

from enochian.pipeline.enhanced import (
    EnhancedTranslationResult,
    EnhancedTranslator,
    MeaningAnalysis,
    primary_root_meaning,
)
from enochian.pipeline.schemas import (
    ConstructionDetail,
    MatchMethod,
    TranslationOptions,
    TranslationResult,
    TranslationStats,
)
from enochian.pipeline.translator import EnochianTranslator

__all__ = [
    "EnochianTranslator",
    "EnhancedTranslator",
    "EnhancedTranslationResult",
    "MeaningAnalysis",
    "primary_root_meaning",
    "ConstructionDetail",
    "MatchMethod",
    "TranslationOptions",
    "TranslationResult",
    "TranslationStats",
]
