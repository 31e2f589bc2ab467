"""
Core domain models for OCR detection results.

These are immutable snapshots of what the text-recognition engine returned.
Nothing in the workflow mutates them; ranking and transcription build new
sequences instead.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .constants import CORNER_POINT_COUNT, DEFAULT_VERTICAL_SCORE


@dataclass(frozen=True)
class Point:
    """A corner point in image pixel coordinates."""
    x: int
    y: int

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {'x': self.x, 'y': self.y}


@dataclass(frozen=True)
class Element:
    """Smallest recognized text unit with optional bounding geometry."""
    text: str
    corner_points: Tuple[Point, ...] = ()

    def __post_init__(self):
        points = tuple(self.corner_points)
        if points and len(points) != CORNER_POINT_COUNT:
            raise ValueError(
                f"Element needs {CORNER_POINT_COUNT} corner points or none, "
                f"got {len(points)}"
            )
        object.__setattr__(self, 'corner_points', points)

    @property
    def has_geometry(self) -> bool:
        """Whether the engine supplied corner points."""
        return bool(self.corner_points)

    @property
    def top_y(self) -> int:
        """Y of the first corner point; ungeometried elements sit at the default score."""
        if not self.corner_points:
            return DEFAULT_VERTICAL_SCORE
        return self.corner_points[0].y

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'text': self.text,
            'corner_points': [p.to_dict() for p in self.corner_points],
        }


@dataclass(frozen=True)
class Line:
    """Elements in the engine's left-to-right order."""
    elements: Tuple[Element, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'elements', tuple(self.elements))

    @property
    def first(self) -> Optional[Element]:
        return self.elements[0] if self.elements else None

    @property
    def last(self) -> Optional[Element]:
        return self.elements[-1] if self.elements else None

    @property
    def text(self) -> str:
        """Element texts joined by single spaces."""
        return ' '.join(e.text for e in self.elements)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {'elements': [e.to_dict() for e in self.elements]}


@dataclass(frozen=True)
class Block:
    """Paragraph-like grouping of lines as segmented by the engine."""
    lines: Tuple[Line, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'lines', tuple(self.lines))

    @property
    def text(self) -> str:
        """Line texts joined by newlines."""
        return '\n'.join(line.text for line in self.lines)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {'lines': [line.to_dict() for line in self.lines]}


@dataclass(frozen=True)
class DetectionResult:
    """Top-level OCR output. Block order is not reading order."""
    blocks: Tuple[Block, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'blocks', tuple(self.blocks))

    @property
    def is_empty(self) -> bool:
        return not self.blocks

    @property
    def text(self) -> str:
        return '\n'.join(block.text for block in self.blocks)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {'blocks': [b.to_dict() for b in self.blocks]}


@dataclass(frozen=True)
class RankedBlock:
    """A block paired with its vertical score."""
    score: int
    block: Block = field(compare=False)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {'score': self.score, 'block': self.block.to_dict()}
