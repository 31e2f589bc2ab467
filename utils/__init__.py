"""Utilities package - Helper functions for bounding boxes and detection payloads."""

from .bbox_utils import (
    bbox_to_corner_points,
    corner_points_to_bbox,
    normalize_bbox,
    denormalize_bbox,
    denormalize_point,
)

from .detection_utils import (
    DetectionParseError,
    parse_element,
    parse_line,
    parse_block,
    parse_detection,
    load_detection_file,
    detection_to_dict,
)

__all__ = [
    # BBox utils
    'bbox_to_corner_points',
    'corner_points_to_bbox',
    'normalize_bbox',
    'denormalize_bbox',
    'denormalize_point',

    # Detection payloads
    'DetectionParseError',
    'parse_element',
    'parse_line',
    'parse_block',
    'parse_detection',
    'load_detection_file',
    'detection_to_dict',
]
