"""
Unit tests for core.models module.
"""
import dataclasses

import pytest
from core.models import Block, DetectionResult, Element, Line, Point, RankedBlock
from utils.bbox_utils import bbox_to_corner_points


class TestPoint:
    """Tests for Point dataclass."""

    def test_initialization(self):
        """Test creating a Point."""
        point = Point(x=3, y=7)

        assert point.x == 3
        assert point.y == 7

    def test_to_dict(self):
        """Test conversion to dictionary."""
        assert Point(1, 2).to_dict() == {'x': 1, 'y': 2}

    def test_immutable(self):
        """Test points cannot be modified."""
        point = Point(1, 2)

        with pytest.raises(dataclasses.FrozenInstanceError):
            point.x = 5


class TestElement:
    """Tests for Element dataclass."""

    def test_corner_points_from_box(self):
        """Test corner lists are stored as tuples in the given order."""
        element = Element("word", bbox_to_corner_points(10, 20, 50, 40))

        assert element.corner_points == (
            Point(10, 20),
            Point(50, 20),
            Point(50, 40),
            Point(10, 40),
        )

    def test_top_y_uses_first_corner(self):
        """Test top_y reads the first corner point."""
        element = Element(
            text="skewed",
            corner_points=(Point(0, 15), Point(10, 5), Point(10, 25), Point(0, 35))
        )

        assert element.top_y == 15

    def test_without_geometry(self):
        """Test element without corner points."""
        element = Element(text="floating")

        assert element.has_geometry is False
        assert element.corner_points == ()
        assert element.top_y == 0

    def test_list_corner_points_become_tuple(self):
        """Test corner points given as a list are stored as a tuple."""
        element = Element(
            text="x",
            corner_points=[Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
        )

        assert isinstance(element.corner_points, tuple)
        assert element.has_geometry is True

    def test_wrong_corner_count_rejected(self):
        """Test geometry must have exactly four corners."""
        with pytest.raises(ValueError):
            Element(text="bad", corner_points=(Point(0, 0), Point(1, 1)))

    def test_to_dict(self):
        """Test conversion to dictionary."""
        element = Element("hi", bbox_to_corner_points(0, 0, 2, 2))
        data = element.to_dict()

        assert data['text'] == "hi"
        assert len(data['corner_points']) == 4
        assert data['corner_points'][0] == {'x': 0, 'y': 0}


class TestLine:
    """Tests for Line dataclass."""

    def test_first_and_last(self):
        """Test first/last element access."""
        a = Element(text="a")
        b = Element(text="b")
        c = Element(text="c")
        line = Line(elements=(a, b, c))

        assert line.first is a
        assert line.last is c

    def test_empty_line(self):
        """Test empty line has no first/last element."""
        line = Line()

        assert line.first is None
        assert line.last is None
        assert line.text == ""

    def test_text_joins_with_spaces(self):
        """Test line text."""
        line = Line(elements=(Element(text="Hello"), Element(text="there")))

        assert line.text == "Hello there"


class TestBlockAndDetection:
    """Tests for Block and DetectionResult dataclasses."""

    def test_block_text(self):
        """Test block text joins lines with newlines."""
        block = Block(lines=(
            Line(elements=(Element(text="Foo"),)),
            Line(elements=(Element(text="Bar"),)),
        ))

        assert block.text == "Foo\nBar"

    def test_detection_is_empty(self):
        """Test empty detection result."""
        assert DetectionResult().is_empty is True
        assert DetectionResult(blocks=[Block()]).is_empty is False

    def test_detection_to_dict(self):
        """Test nested conversion to dictionary."""
        result = DetectionResult(blocks=[
            Block(lines=[Line(elements=[Element(text="x")])])
        ])

        assert result.to_dict() == {
            'blocks': [{'lines': [{'elements': [{'text': 'x', 'corner_points': []}]}]}]
        }


class TestRankedBlock:
    """Tests for RankedBlock dataclass."""

    def test_pairing(self):
        """Test score/block pairing."""
        block = Block()
        ranked = RankedBlock(score=12, block=block)

        assert ranked.score == 12
        assert ranked.block is block
        assert ranked.to_dict() == {'score': 12, 'block': {'lines': []}}
