"""
Porter Lab - FastAPI application for stemming-as-a-service

Endpoints:
- POST /v1/stem: stem a list of words
- POST /v1/stem/text: stem every word of a text, keep everything else
- POST /v1/index: stem frequency index over a list of texts

The stemmer is a pure function, so requests share nothing and need no locks.
"""

import logging
import os
import re
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .config import get_settings, load_environment
from .logging_config import setup_logging
from .stemmer import build_stem_index, stem, stem_text, tokenize

logger = logging.getLogger(__name__)

# Version tracking
APP_VERSION = "0.1.0"
APP_START_TIME = datetime.utcnow().isoformat() + "Z"

WORD_PATTERN = re.compile(r'[A-Za-z]*')


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load configuration and logging on startup"""
    load_environment()
    settings = get_settings()
    setup_logging(
        log_file=settings.log_file,
        console_level=getattr(logging, settings.log_level, logging.INFO),
        file_level=logging.DEBUG  # Always DEBUG in file for troubleshooting
    )
    logger.info(f"Porter Lab {APP_VERSION} started (verb_pass={settings.verb_pass})")

    yield

    logger.info("Shutting down...")


# FastAPI app
app = FastAPI(
    title="Porter Lab API",
    description="English word stemming with the Porter algorithm",
    version=APP_VERSION,
    lifespan=lifespan,
)


# Request/Response models
class HealthResponse(BaseModel):
    status: str
    version: str
    started_at: str
    uptime_seconds: float


class StemRequest(BaseModel):
    words: List[str] = Field(..., description="Words to stem (ASCII letters, any case)", min_length=1, max_length=10000)
    verb_pass: Optional[bool] = Field(
        default=None,
        description="Run the residual verb-suffix step. Default: STEMMER_VERB_PASS (true)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "words": ["caresses", "ponies", "generalizations"],
                "verb_pass": True,
            }
        }


class StemResponse(BaseModel):
    stems: List[str]
    verb_pass: bool


class StemTextRequest(BaseModel):
    text: str = Field(..., description="Free text; words are runs of ASCII letters")
    verb_pass: Optional[bool] = None


class StemTextResponse(BaseModel):
    text: str
    tokens: List[str]
    verb_pass: bool


class IndexRequest(BaseModel):
    texts: List[str] = Field(..., description="Texts to index", min_length=1)
    verb_pass: Optional[bool] = None


class IndexResponse(BaseModel):
    term_frequencies: Dict[str, int]
    documents: int
    tokens: int


def _resolve_verb_pass(requested: Optional[bool]) -> bool:
    if requested is not None:
        return requested
    return get_settings().verb_pass


# Routes
@app.get("/", response_model=dict)
async def root():
    """Root endpoint"""
    return {
        "service": "Porter Lab API",
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint"""
    start_time = datetime.fromisoformat(APP_START_TIME.rstrip('Z'))
    uptime = (datetime.utcnow() - start_time).total_seconds()

    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        started_at=APP_START_TIME,
        uptime_seconds=round(uptime, 2),
    )


@app.post("/v1/stem", response_model=StemResponse)
async def stem_words(request: StemRequest):
    """
    Stem a list of words

    Example:
        POST /v1/stem
        {
            "words": ["Caresses", "ponies"]
        }
        -> {"stems": ["cares", "poni"], "verb_pass": true}
    """
    invalid = [word for word in request.words if not WORD_PATTERN.fullmatch(word)]
    if invalid:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Words must contain only ASCII letters. Invalid: {', '.join(repr(w) for w in invalid[:10])}",
        )

    verb_pass = _resolve_verb_pass(request.verb_pass)
    stems = [stem(word.lower(), verb_pass=verb_pass) for word in request.words]
    logger.debug(f"Stemmed {len(stems)} words (verb_pass={verb_pass})")

    return StemResponse(stems=stems, verb_pass=verb_pass)


@app.post("/v1/stem/text", response_model=StemTextResponse)
async def stem_free_text(request: StemTextRequest):
    """Stem every word of a text, copying punctuation and whitespace verbatim"""
    settings = get_settings()
    verb_pass = _resolve_verb_pass(request.verb_pass)

    return StemTextResponse(
        text=stem_text(request.text, verb_pass=verb_pass, max_word_length=settings.max_word_length),
        tokens=tokenize(request.text, verb_pass=verb_pass, max_word_length=settings.max_word_length),
        verb_pass=verb_pass,
    )


@app.post("/v1/index", response_model=IndexResponse)
async def index_texts(request: IndexRequest):
    """Build a stem frequency index over a list of texts"""
    settings = get_settings()
    index = build_stem_index(
        request.texts,
        verb_pass=_resolve_verb_pass(request.verb_pass),
        max_word_length=settings.max_word_length,
    )
    return IndexResponse(**index)


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc),
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8080")),
        reload=True,  # Development only
    )
