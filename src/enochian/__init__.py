"""English to Enochian translation engine."""

__version__ = "0.1.0"

from enochian.config import Settings
from enochian.pipeline.enhanced import EnhancedTranslator
from enochian.pipeline.schemas import TranslationOptions, TranslationResult
from enochian.pipeline.translator import EnochianTranslator

__all__ = [
    "__version__",
    "EnhancedTranslator",
    "EnochianTranslator",
    "Settings",
    "TranslationOptions",
    "TranslationResult",
]
