"""
Transcription Module

Flattens ranked blocks into one transcript string.

Layout rules:
- every element's text is followed by the element terminator (one space),
  including the very last element
- a line separator goes before every line except the first line of a block
- nothing is inserted between blocks
"""
from typing import Optional, Sequence

from core.constants import ELEMENT_TERMINATOR, LINE_SEPARATOR
from core.models import Block, Line


def transcribe_line(line: Line, element_terminator: str = ELEMENT_TERMINATOR) -> str:
    """Element texts, each followed by the terminator."""
    return ''.join(element.text + element_terminator for element in line.elements)


def transcribe_block(
    block: Block,
    line_separator: str = LINE_SEPARATOR,
    element_terminator: str = ELEMENT_TERMINATOR
) -> str:
    """
    Transcribe a single block.

    Args:
        block: Block to transcribe
        line_separator: Inserted before every line but the first
        element_terminator: Appended after every element

    Returns:
        Block transcript (possibly empty for a block without lines)
    """
    return line_separator.join(
        transcribe_line(line, element_terminator) for line in block.lines
    )


def transcribe(
    blocks: Sequence[Block],
    line_separator: str = LINE_SEPARATOR,
    element_terminator: str = ELEMENT_TERMINATOR
) -> Optional[str]:
    """
    Build the transcript for blocks already in reading order.

    Args:
        blocks: Ordered blocks, usually the output of rank_blocks
        line_separator: Inserted between consecutive lines of a block
        element_terminator: Appended after every element

    Returns:
        Transcript string, or None when there are no blocks at all
        ("no text found"). A non-empty block list always yields a string,
        even if it is only whitespace.
    """
    if not blocks:
        return None

    return ''.join(
        transcribe_block(block, line_separator, element_terminator)
        for block in blocks
    )
