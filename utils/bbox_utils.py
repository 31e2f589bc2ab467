"""
Bounding box utilities for OCR detections.

Converts between axis-aligned boxes and corner-point quadrilaterals, and
between pixel and normalized (0-999) coordinates.
"""
from typing import Dict, List, Sequence

from core.constants import NORMALIZED_MAX
from core.models import Point


def bbox_to_corner_points(x1: float, y1: float, x2: float, y2: float) -> List[Point]:
    """
    Expand an axis-aligned box into corner points.

    Args:
        x1, y1: Top-left corner
        x2, y2: Bottom-right corner

    Returns:
        Points in TL, TR, BR, BL order, truncated to int pixels
    """
    left, top, right, bottom = int(x1), int(y1), int(x2), int(y2)
    return [
        Point(left, top),
        Point(right, top),
        Point(right, bottom),
        Point(left, bottom),
    ]


def corner_points_to_bbox(points: Sequence[Point]) -> Dict:
    """
    Smallest axis-aligned box enclosing the given points.

    Args:
        points: Corner points (any order)

    Returns:
        Dict with x1, y1, x2, y2 or an empty dict when there are no points
    """
    if not points:
        return {}

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return {
        'x1': min(xs),
        'y1': min(ys),
        'x2': max(xs),
        'y2': max(ys)
    }


def normalize_bbox(bbox: Dict, img_width: int, img_height: int) -> Dict:
    """
    Normalize bounding box coordinates to 0-999 range.

    Args:
        bbox: Dict with x1, y1, x2, y2 in pixels
        img_width: Image width
        img_height: Image height

    Returns:
        Dict with normalized coordinates
    """
    return {
        'x1': int(bbox['x1'] / img_width * NORMALIZED_MAX),
        'y1': int(bbox['y1'] / img_height * NORMALIZED_MAX),
        'x2': int(bbox['x2'] / img_width * NORMALIZED_MAX),
        'y2': int(bbox['y2'] / img_height * NORMALIZED_MAX)
    }


def denormalize_bbox(bbox: Dict, img_width: int, img_height: int) -> Dict:
    """
    Convert normalized (0-999) bounding box to pixel coordinates.

    Args:
        bbox: Dict with normalized x1, y1, x2, y2
        img_width: Image width
        img_height: Image height

    Returns:
        Dict with pixel coordinates
    """
    return {
        'x1': int(bbox['x1'] / NORMALIZED_MAX * img_width),
        'y1': int(bbox['y1'] / NORMALIZED_MAX * img_height),
        'x2': int(bbox['x2'] / NORMALIZED_MAX * img_width),
        'y2': int(bbox['y2'] / NORMALIZED_MAX * img_height)
    }


def denormalize_point(x: float, y: float, img_width: int, img_height: int) -> Point:
    """Convert a single normalized (0-999) point to pixel coordinates."""
    return Point(
        int(x / NORMALIZED_MAX * img_width),
        int(y / NORMALIZED_MAX * img_height)
    )
