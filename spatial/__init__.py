"""Spatial analysis package - Reading order and transcription of OCR blocks."""

from .ranking import (
    line_vertical_score,
    block_vertical_score,
    score_blocks,
    rank_scored_blocks,
    rank_blocks,
    rank_detection,
    normalize_strategy,
)

from .transcription import (
    transcribe_line,
    transcribe_block,
    transcribe,
)

__all__ = [
    # Ranking
    'line_vertical_score',
    'block_vertical_score',
    'score_blocks',
    'rank_scored_blocks',
    'rank_blocks',
    'rank_detection',
    'normalize_strategy',

    # Transcription
    'transcribe_line',
    'transcribe_block',
    'transcribe',
]
