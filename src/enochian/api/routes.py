"""API route definitions."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from enochian import __version__
from enochian.api.models import (
    AnalyzeResponse,
    EnhancedTranslateResponse,
    HealthModel,
    LookupResponse,
    LookupResultModel,
    RootModel,
    TranslateRequest,
    TranslateResponse,
)
from enochian.config import Settings
from enochian.ingest.loader import LoaderError, load_translator
from enochian.pipeline.enhanced import EnhancedTranslator

# Keep typing imports in namespace for Pydantic annotation evaluation
__typing_imports__ = (List, Optional)

logger = logging.getLogger(__name__)

router = APIRouter()


@lru_cache(maxsize=1)
def _load_default_translator() -> EnhancedTranslator:
    return load_translator(Settings())


def get_translator(request: Request) -> EnhancedTranslator:
    """Translator for the app: the one given to ``create_app`` or the data dir's.

    Raises:
        HTTPException: 503 if the data files cannot be loaded
    """
    translator = getattr(request.app.state, "translator", None)
    if translator is not None:
        return translator
    try:
        return _load_default_translator()
    except LoaderError as e:
        logger.error(f"Translator unavailable: {e}")
        raise HTTPException(status_code=503, detail=str(e))


Translator = Annotated[EnhancedTranslator, Depends(get_translator)]


def _options(request: TranslateRequest) -> Optional[dict]:
    return request.options.model_dump() if request.options is not None else None


@router.get("/health", response_model=HealthModel)
async def health_check(request: Request):
    """Health check endpoint."""
    try:
        translator = get_translator(request)
    except HTTPException as e:
        return HealthModel(status="degraded", version=__version__, error=e.detail)

    return HealthModel(
        status="ok",
        version=__version__,
        lexicon_entries=len(translator.index.entries),
        root_entries=len(translator.root_table),
    )


@router.post("/translate", response_model=TranslateResponse)
async def translate(body: TranslateRequest, translator: Translator):
    """Translate English text to Enochian."""
    result = translator.translate(body.text, _options(body))
    return result.to_dict()


@router.post("/translate/enhanced", response_model=EnhancedTranslateResponse)
async def translate_enhanced(body: TranslateRequest, translator: Translator):
    """Translate, reading unresolved words through their letter roots."""
    result = translator.translate_enhanced(body.text, _options(body))
    return result.to_dict()


@router.get("/analyze/{word}", response_model=AnalyzeResponse)
async def analyze(word: str, translator: Translator):
    """Root of each letter of a word."""
    letters = translator.analyze_roots(word)
    return AnalyzeResponse(
        word=word,
        letters=[lr.to_dict() for lr in letters],
        root_reading=translator.analyze_word_by_roots(word) or None,
    )


@router.get("/alphabet", response_model=List[RootModel])
async def alphabet(translator: Translator):
    """The Enochian alphabet with root meanings."""
    return [root.to_dict() for root in translator.root_table.roots]


@router.get("/lookup", response_model=LookupResponse)
async def lookup(
    translator: Translator,
    q: Annotated[str, Query(min_length=1, description="English term to search for")],
    limit: Annotated[int, Query(ge=1, le=500, description="Maximum results")] = 50,
):
    """Search lexicon meanings containing a term."""
    matches = translator.index.search(q, limit=limit)
    return LookupResponse(
        query=q,
        results=[LookupResultModel(word=w, meaning=m) for w, m in matches],
    )
