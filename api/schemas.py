"""
Pydantic schemas for API request/response validation.
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class DetectionRequest(BaseModel):
    """Request body carrying one OCR detection payload."""
    blocks: List[Dict[str, Any]] = Field(default_factory=list)
    coordinate_space: str = "pixel"
    image_width: Optional[int] = None
    image_height: Optional[int] = None
    # Overrides the configured ranking strategy for this request
    strategy: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Payload dict as understood by parse_detection."""
        return self.model_dump(exclude={'strategy'}, exclude_none=True)


class RankedBlockResponse(BaseModel):
    """Response for a ranked block."""
    score: int
    text: str
    line_count: int


class RankResponse(BaseModel):
    """Response for block ranking."""
    strategy: str
    input_blocks: int
    blocks: List[RankedBlockResponse]


class TranscriptionResponse(BaseModel):
    """Response for transcription."""
    status: str
    text: Optional[str] = None
    block_count: int = 0
    dropped_blocks: int = 0
    message: Optional[str] = None
