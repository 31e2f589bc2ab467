"""
Unit tests for utils.bbox_utils module.
"""
from core.models import Point
from utils.bbox_utils import (
    bbox_to_corner_points,
    corner_points_to_bbox,
    denormalize_bbox,
    denormalize_point,
    normalize_bbox,
)


class TestBboxToCornerPoints:
    """Tests for bbox_to_corner_points function."""

    def test_corner_order(self):
        """Test corners come out TL, TR, BR, BL."""
        points = bbox_to_corner_points(10, 20, 110, 60)

        assert points == [Point(10, 20), Point(110, 20), Point(110, 60), Point(10, 60)]

    def test_floats_truncated(self):
        """Test float coordinates are truncated to pixels."""
        points = bbox_to_corner_points(1.9, 2.2, 3.7, 4.5)

        assert points[0] == Point(1, 2)
        assert points[2] == Point(3, 4)


class TestCornerPointsToBbox:
    """Tests for corner_points_to_bbox function."""

    def test_rotated_quad(self):
        """Test enclosing box of a rotated quadrilateral."""
        points = [Point(5, 0), Point(10, 5), Point(5, 10), Point(0, 5)]

        assert corner_points_to_bbox(points) == {'x1': 0, 'y1': 0, 'x2': 10, 'y2': 10}

    def test_empty(self):
        """Test no points gives empty dict."""
        assert corner_points_to_bbox([]) == {}


class TestNormalizeBbox:
    """Tests for normalize_bbox and denormalize_bbox functions."""

    def test_normalize_full_image(self):
        """Test full-image box maps to 0-999."""
        bbox = {'x1': 0, 'y1': 0, 'x2': 1000, 'y2': 800}

        normalized = normalize_bbox(bbox, 1000, 800)

        assert normalized == {'x1': 0, 'y1': 0, 'x2': 999, 'y2': 999}

    def test_denormalize_midpoint(self):
        """Test denormalization scales to pixels."""
        bbox = {'x1': 500, 'y1': 500, 'x2': 999, 'y2': 999}

        pixels = denormalize_bbox(bbox, 2000, 2000)

        # 500/999 * 2000 ≈ 1001
        assert 990 < pixels['x1'] < 1010
        assert pixels['x2'] == 2000
        assert pixels['y2'] == 2000

    def test_denormalize_point(self):
        """Test single point denormalization."""
        point = denormalize_point(999, 0, 640, 480)

        assert point == Point(640, 0)
