"""
Transcription API for OCR detection results.

Provides endpoints for:
- Block ranking with vertical scores
- Transcript generation
"""
import logging

from fastapi import FastAPI, HTTPException

from api.dependencies import get_transcription_service
from api.schemas import (
    DetectionRequest,
    RankResponse,
    RankedBlockResponse,
    TranscriptionResponse,
)
from config.settings import settings
from spatial.ranking import normalize_strategy, rank_scored_blocks
from utils.detection_utils import DetectionParseError, parse_detection

logger = logging.getLogger(__name__)


# Create FastAPI app
transcription_app = FastAPI(
    title="Scanscribe API",
    description="Reading-order reconstruction and transcription for OCR detections",
    version="1.0.0"
)


def _check_strategy(strategy: str) -> str:
    try:
        return normalize_strategy(strategy)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


def _parse(request: DetectionRequest):
    try:
        return parse_detection(request.to_payload())
    except DetectionParseError as e:
        logger.warning("Rejected detection payload: %s", e)
        raise HTTPException(status_code=422, detail=str(e))


@transcription_app.post("/rank", response_model=RankResponse)
def rank(request: DetectionRequest):
    """
    Rank detection blocks top-to-bottom.

    Args:
        request: Detection payload and optional strategy

    Returns:
        Blocks in ranked order with their vertical scores
    """
    strategy = _check_strategy(request.strategy or settings.ranking_strategy)
    detection = _parse(request)
    ranked = rank_scored_blocks(detection.blocks, strategy)

    return RankResponse(
        strategy=strategy,
        input_blocks=len(detection.blocks),
        blocks=[
            RankedBlockResponse(
                score=r.score,
                text=r.block.text,
                line_count=len(r.block.lines)
            )
            for r in ranked
        ]
    )


@transcription_app.post("/transcribe", response_model=TranscriptionResponse)
def transcribe_detection(request: DetectionRequest):
    """
    Rank and transcribe a detection payload.

    Args:
        request: Detection payload and optional strategy

    Returns:
        Transcript, or status 'no_text' when the payload holds no blocks
    """
    strategy = _check_strategy(request.strategy or settings.ranking_strategy)
    detection = _parse(request)

    service = get_transcription_service(strategy)
    outcome = service.handle_success(detection)

    return TranscriptionResponse(**outcome.to_dict())


@transcription_app.get("/")
def root():
    """API root endpoint."""
    return {
        "name": "Scanscribe API",
        "version": "1.0.0",
        "ranking_strategy": settings.ranking_strategy,
        "endpoints": {
            "rank": "POST /rank",
            "transcribe": "POST /transcribe"
        }
    }


# Export app for uvicorn
app = transcription_app
