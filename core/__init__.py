"""Core package - Domain models and constants."""

from .models import Point, Element, Line, Block, DetectionResult, RankedBlock
from .constants import (
    DEFAULT_VERTICAL_SCORE,
    LINE_SEPARATOR,
    ELEMENT_TERMINATOR,
    RANKING_UNIQUE_SCORE,
    RANKING_STABLE,
    RANKING_STRATEGIES,
    PRESENTER_MESSAGES,
)

__all__ = [
    'Point',
    'Element',
    'Line',
    'Block',
    'DetectionResult',
    'RankedBlock',
    'DEFAULT_VERTICAL_SCORE',
    'LINE_SEPARATOR',
    'ELEMENT_TERMINATOR',
    'RANKING_UNIQUE_SCORE',
    'RANKING_STABLE',
    'RANKING_STRATEGIES',
    'PRESENTER_MESSAGES',
]
