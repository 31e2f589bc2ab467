"""
Detection payload utilities.

Builds DetectionResult snapshots from the JSON-like payloads an OCR engine
hands back, and serializes them again.

Accepted element geometry:
- cornerPoints / corner_points: list of {"x": .., "y": ..} or [x, y]
- boundingBox / bbox: {left, top, right, bottom}, {x1, y1, x2, y2}
  or [x1, y1, x2, y2]; expanded to TL, TR, BR, BL corners
- neither: element without geometry

Coordinates are pixels unless the payload declares
"coordinate_space": "normalized" together with image_width / image_height,
in which case they are scaled from the 0-999 space.
"""
import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from core.constants import (
    COORDINATE_SPACE_NORMALIZED,
    COORDINATE_SPACE_PIXEL,
    CORNER_POINT_COUNT,
)
from core.models import Block, DetectionResult, Element, Line, Point
from .bbox_utils import bbox_to_corner_points, denormalize_bbox, denormalize_point

logger = logging.getLogger(__name__)


class DetectionParseError(ValueError):
    """Raised when a detection payload cannot be turned into a DetectionResult."""

    pass


def _pick(data: Dict, *keys: str) -> Any:
    """First present key wins."""
    for key in keys:
        if key in data:
            return data[key]
    return None


def _as_list(value: Any, where: str) -> List:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise DetectionParseError(f"{where}: expected a list, got {type(value).__name__}")
    return list(value)


def _coerce_number(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DetectionParseError(f"{where}: expected a number, got {value!r}")
    if not math.isfinite(value):
        raise DetectionParseError(f"{where}: coordinate must be finite, got {value!r}")
    return value


def _parse_point(raw: Any, where: str) -> Tuple[float, float]:
    if isinstance(raw, dict):
        if 'x' not in raw or 'y' not in raw:
            raise DetectionParseError(f"{where}: point needs 'x' and 'y'")
        x, y = raw['x'], raw['y']
    elif isinstance(raw, (list, tuple)) and len(raw) == 2:
        x, y = raw
    else:
        raise DetectionParseError(f"{where}: unsupported point {raw!r}")
    return _coerce_number(x, where), _coerce_number(y, where)


def _parse_bbox(raw: Any, where: str) -> Dict[str, float]:
    if isinstance(raw, dict):
        if all(k in raw for k in ('left', 'top', 'right', 'bottom')):
            values = (raw['left'], raw['top'], raw['right'], raw['bottom'])
        elif all(k in raw for k in ('x1', 'y1', 'x2', 'y2')):
            values = (raw['x1'], raw['y1'], raw['x2'], raw['y2'])
        else:
            raise DetectionParseError(
                f"{where}: bbox needs left/top/right/bottom or x1/y1/x2/y2"
            )
    elif isinstance(raw, (list, tuple)) and len(raw) == 4:
        values = tuple(raw)
    else:
        raise DetectionParseError(f"{where}: unsupported bbox {raw!r}")

    x1, y1, x2, y2 = (_coerce_number(v, where) for v in values)
    return {'x1': x1, 'y1': y1, 'x2': x2, 'y2': y2}


class _Space:
    """Coordinate space of a payload."""

    def __init__(self, name: str, width: Optional[int], height: Optional[int]):
        self.name = name
        self.width = width
        self.height = height

    @property
    def normalized(self) -> bool:
        return self.name == COORDINATE_SPACE_NORMALIZED

    def point(self, x: float, y: float) -> Point:
        if self.normalized:
            return denormalize_point(x, y, self.width, self.height)
        return Point(int(x), int(y))

    def bbox(self, bbox: Dict[str, float]) -> Dict[str, float]:
        if self.normalized:
            return denormalize_bbox(bbox, self.width, self.height)
        return bbox


def _read_space(payload: Dict) -> _Space:
    name = payload.get('coordinate_space', COORDINATE_SPACE_PIXEL)
    if name not in (COORDINATE_SPACE_PIXEL, COORDINATE_SPACE_NORMALIZED):
        raise DetectionParseError(f"Unknown coordinate_space '{name}'")

    width = payload.get('image_width')
    height = payload.get('image_height')
    if name == COORDINATE_SPACE_NORMALIZED:
        if not width or not height:
            raise DetectionParseError(
                "Normalized coordinates need image_width and image_height"
            )
        width = int(_coerce_number(width, 'image_width'))
        height = int(_coerce_number(height, 'image_height'))
    return _Space(name, width, height)


def parse_element(raw: Any, where: str = "element", space: Optional[_Space] = None) -> Element:
    """
    Parse a single element dict.

    Args:
        raw: Element payload
        where: Location used in error messages
        space: Coordinate space (pixels when omitted)

    Returns:
        Element snapshot

    Raises:
        DetectionParseError: If the payload is malformed
    """
    if space is None:
        space = _Space(COORDINATE_SPACE_PIXEL, None, None)

    if not isinstance(raw, dict):
        raise DetectionParseError(f"{where}: expected an object, got {type(raw).__name__}")

    text = raw.get('text', '')
    if not isinstance(text, str):
        raise DetectionParseError(f"{where}: 'text' must be a string")

    corners = _pick(raw, 'cornerPoints', 'corner_points')
    if corners:
        corners = _as_list(corners, f"{where}.cornerPoints")
        if len(corners) != CORNER_POINT_COUNT:
            raise DetectionParseError(
                f"{where}: expected {CORNER_POINT_COUNT} corner points, got {len(corners)}"
            )
        points = [
            space.point(*_parse_point(p, f"{where}.cornerPoints[{i}]"))
            for i, p in enumerate(corners)
        ]
        return Element(text=text, corner_points=tuple(points))

    bbox = _pick(raw, 'boundingBox', 'bbox')
    if bbox:
        box = space.bbox(_parse_bbox(bbox, f"{where}.boundingBox"))
        points = bbox_to_corner_points(box['x1'], box['y1'], box['x2'], box['y2'])
        return Element(text=text, corner_points=tuple(points))

    return Element(text=text)


def parse_line(raw: Any, where: str = "line", space: Optional[_Space] = None) -> Line:
    """Parse a line dict ({"elements": [...]})."""
    if not isinstance(raw, dict):
        raise DetectionParseError(f"{where}: expected an object, got {type(raw).__name__}")
    elements = _as_list(raw.get('elements'), f"{where}.elements")
    return Line(elements=tuple(
        parse_element(e, f"{where}.elements[{i}]", space)
        for i, e in enumerate(elements)
    ))


def parse_block(raw: Any, where: str = "block", space: Optional[_Space] = None) -> Block:
    """Parse a block dict ({"lines": [...]})."""
    if not isinstance(raw, dict):
        raise DetectionParseError(f"{where}: expected an object, got {type(raw).__name__}")
    lines = _as_list(raw.get('lines'), f"{where}.lines")
    return Block(lines=tuple(
        parse_line(line, f"{where}.lines[{i}]", space)
        for i, line in enumerate(lines)
    ))


def parse_detection(payload: Union[Dict, List]) -> DetectionResult:
    """
    Build a DetectionResult from an OCR payload.

    Main entry point for payload parsing. A bare list is treated as the
    list of blocks.

    Args:
        payload: Dict with a "blocks" list, or the blocks list itself

    Returns:
        DetectionResult with blocks in payload order

    Raises:
        DetectionParseError: If the payload is malformed
    """
    if isinstance(payload, list):
        payload = {'blocks': payload}
    if not isinstance(payload, dict):
        raise DetectionParseError(
            f"Detection payload must be an object or a list, got {type(payload).__name__}"
        )

    space = _read_space(payload)
    blocks = _as_list(payload.get('blocks'), "blocks")

    result = DetectionResult(blocks=tuple(
        parse_block(b, f"blocks[{i}]", space)
        for i, b in enumerate(blocks)
    ))
    logger.debug("Parsed detection with %d block(s)", len(result.blocks))
    return result


def load_detection_file(file_path: Union[str, Path]) -> DetectionResult:
    """
    Load a detection payload from a JSON file.

    Raises:
        DetectionParseError: If the file is missing or unreadable, or holds a malformed payload
    """
    path = Path(file_path)
    if not path.is_file():
        raise DetectionParseError(f"File not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        raise DetectionParseError(f"Invalid JSON in {path.name}: {e}") from e
    except UnicodeDecodeError as e:
        raise DetectionParseError(f"{path.name} is not UTF-8 text: {e}") from e
    except OSError as e:
        raise DetectionParseError(f"Cannot read {path}: {e}") from e

    return parse_detection(payload)


def detection_to_dict(result: DetectionResult) -> Dict:
    """Serialize a DetectionResult to the corner-point payload shape."""
    return {
        'coordinate_space': COORDINATE_SPACE_PIXEL,
        'blocks': [
            {
                'lines': [
                    {
                        'elements': [
                            {
                                'text': e.text,
                                'cornerPoints': [p.to_dict() for p in e.corner_points],
                            }
                            for e in line.elements
                        ]
                    }
                    for line in block.lines
                ]
            }
            for block in result.blocks
        ]
    }
