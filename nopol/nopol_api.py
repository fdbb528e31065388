"""
Nopol FastAPI Server

HTTP access to the plate normalizer and the voice search flow.
"""

import logging
from typing import List, Optional
from pydantic import BaseModel, Field

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from nopol import __version__
from nopol.config import get_config
from nopol.plates import (
    clean_plate,
    parse_plate,
    is_valid_prefix,
    list_valid_prefixes,
    format_plate_display,
    select_best_candidate,
    region_for_prefix,
)
from nopol.plates.prefixes import REGION_PREFIXES
from nopol.schemas import RecognitionResult
from nopol.speech import RecognitionSettings, error_kind, error_message
from nopol.voice_search import handle_recognition


logger = logging.getLogger(__name__)

# FastAPI app
app = FastAPI(
    title="Nopol API",
    description="Voice input normalization for Indonesian license plates",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class CleanRequest(BaseModel):
    """Raw recognized text to clean"""
    text: str


class CleanResponse(BaseModel):
    """Cleaned plate with display details"""
    raw_text: str
    cleaned_plate: str
    found: bool
    display: Optional[str] = None
    prefix: Optional[str] = None
    region: Optional[str] = None


class HypothesisModel(BaseModel):
    """One speech hypothesis"""
    text: str
    confidence: float = 0.0


class BestCandidateRequest(BaseModel):
    """Alternative hypotheses for one utterance"""
    hypotheses: List[HypothesisModel] = Field(default_factory=list)


class BestCandidateResponse(BaseModel):
    raw_text: str
    cleaned_plate: str


class PrefixInfo(BaseModel):
    prefix: str
    valid: bool
    region: Optional[str] = None


class VoiceSearchRequest(BaseModel):
    """Full outcome of one recognition request"""
    texts: List[str] = Field(default_factory=list)
    confidence_scores: Optional[List[float]] = None
    error_code: Optional[int] = None
    cancelled: bool = False


@app.get("/")
async def root():
    """Service info"""
    return {
        "service": "nopol",
        "version": __version__,
        "prefix_count": len(list_valid_prefixes()),
    }


@app.post("/plates/clean", response_model=CleanResponse, tags=["Plates"])
async def clean(request: CleanRequest):
    """Clean raw recognized speech into a canonical plate"""
    cleaned = clean_plate(request.text)
    candidate = parse_plate(cleaned) if cleaned else None

    return CleanResponse(
        raw_text=request.text,
        cleaned_plate=cleaned,
        found=bool(cleaned),
        display=format_plate_display(cleaned) if cleaned else None,
        prefix=candidate.prefix if candidate else None,
        region=region_for_prefix(candidate.prefix) if candidate else None,
    )


@app.post("/plates/best-candidate", response_model=BestCandidateResponse, tags=["Plates"])
async def best_candidate(request: BestCandidateRequest):
    """Pick the best plate among speech hypotheses"""
    best = select_best_candidate(
        RecognitionResult(text=h.text, confidence=h.confidence)
        for h in request.hypotheses
    )
    if best is None:
        raise HTTPException(status_code=404, detail="No valid plate in hypotheses")

    return BestCandidateResponse(**best.to_dict())


@app.get("/plates/prefixes", tags=["Plates"])
async def prefixes():
    """List every valid regional prefix"""
    return {
        "prefixes": sorted(list_valid_prefixes()),
        "regions": {region: list(codes) for region, codes in REGION_PREFIXES.items()},
    }


@app.get("/plates/prefixes/{prefix}", response_model=PrefixInfo, tags=["Plates"])
async def prefix_info(prefix: str):
    """Check a single prefix"""
    return PrefixInfo(
        prefix=prefix.upper(),
        valid=is_valid_prefix(prefix),
        region=region_for_prefix(prefix),
    )


@app.get("/speech/errors/{code}", tags=["Speech"])
async def speech_error(code: int):
    """Message for a recognizer error code"""
    kind = error_kind(code)
    return {
        "code": code,
        "kind": kind.name.lower() if kind else "unknown",
        "message": error_message(code),
    }


@app.get("/speech/settings", tags=["Speech"])
async def speech_settings():
    """Recognizer request parameters"""
    return RecognitionSettings.from_config().to_extras()


@app.post("/voice-search", tags=["Voice Search"])
async def voice_search(request: VoiceSearchRequest):
    """Turn a recognition result into a plate search query"""
    outcome = handle_recognition(
        texts=request.texts,
        confidence_scores=request.confidence_scores,
        error_code=request.error_code,
        cancelled=request.cancelled,
    )
    return outcome.to_dict()


def main():
    """Run API server"""
    import uvicorn

    from nopol.logging_config import configure_logger

    config = get_config()
    configure_logger(config=config)

    logger.info("Starting Nopol API server on %s:%s", config.api_host, config.api_port)
    logger.info("Docs: http://localhost:%s/docs", config.api_port)

    uvicorn.run(
        "nopol.nopol_api:app",
        host=config.api_host,
        port=config.api_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
