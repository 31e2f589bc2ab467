"""
Pytest configuration and global fixtures.
"""
import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.models import Block, Element, Line, Point


def make_element(text: str, top_y: int, x: int = 0, height: int = 10, width: int = 40) -> Element:
    """Element whose first corner point sits at (x, top_y)."""
    return Element(
        text=text,
        corner_points=(
            Point(x, top_y),
            Point(x + width, top_y),
            Point(x + width, top_y + height),
            Point(x, top_y + height),
        )
    )


def make_line(*words, top_y: int = 0) -> Line:
    """Line of words laid out left to right at the same height."""
    return Line(elements=tuple(
        make_element(word, top_y, x=i * 50) for i, word in enumerate(words)
    ))


def make_block(*lines) -> Block:
    """Block from (words, top_y) pairs."""
    return Block(lines=tuple(make_line(*words, top_y=top_y) for words, top_y in lines))


@pytest.fixture
def temp_dir(tmp_path):
    """Provide temporary directory for test files."""
    return tmp_path


@pytest.fixture
def hello_world_blocks():
    """Block A ("Hello", score 20) listed before block B ("World", score 10)."""
    block_a = Block(lines=(Line(elements=(make_element("Hello", 10),)),))
    block_b = Block(lines=(Line(elements=(make_element("World", 5),)),))
    return [block_a, block_b]


@pytest.fixture
def sample_payload():
    """Detection payload in corner-point form, blocks out of reading order."""
    return {
        'blocks': [
            {
                'lines': [
                    {
                        'elements': [
                            {
                                'text': 'Total',
                                'cornerPoints': [
                                    {'x': 10, 'y': 300}, {'x': 60, 'y': 300},
                                    {'x': 60, 'y': 320}, {'x': 10, 'y': 320}
                                ]
                            },
                            {
                                'text': '42.00',
                                'cornerPoints': [
                                    {'x': 200, 'y': 302}, {'x': 260, 'y': 302},
                                    {'x': 260, 'y': 322}, {'x': 200, 'y': 322}
                                ]
                            }
                        ]
                    }
                ]
            },
            {
                'lines': [
                    {
                        'elements': [
                            {
                                'text': 'ACME',
                                'cornerPoints': [[10, 20], [80, 20], [80, 40], [10, 40]]
                            },
                            {
                                'text': 'Store',
                                'cornerPoints': [[90, 22], [150, 22], [150, 42], [90, 42]]
                            }
                        ]
                    },
                    {
                        'elements': [
                            {
                                'text': 'Receipt',
                                'boundingBox': {'left': 10, 'top': 50, 'right': 90, 'bottom': 70}
                            }
                        ]
                    }
                ]
            }
        ]
    }


@pytest.fixture
def sample_payload_file(temp_dir, sample_payload):
    """Write the sample payload to a JSON file."""
    path = temp_dir / "detection.json"
    path.write_text(json.dumps(sample_payload), encoding='utf-8')
    return str(path)
