"""
Block Ranking Module

Orders OCR text blocks top-to-bottom using a scalar vertical score.

The score of a block is taken from its lines: for every line that holds at
least one element, score = top_y(first element) + top_y(last element).
Each line overwrites the previous value, so a block ends up with the score
of its last non-empty line. Blocks without any non-empty line keep the
default score of 0 and sort to the top.

Two strategies decide what happens to blocks with equal scores:
- unique_score: blocks are keyed by score; a later block replaces an
  earlier one with the same score, which drops the earlier block.
- stable: stable sort over (score, original index), every block kept.
"""
import logging
from typing import Dict, List, Optional, Sequence

from core.constants import (
    DEFAULT_VERTICAL_SCORE,
    RANKING_STABLE,
    RANKING_STRATEGIES,
    RANKING_UNIQUE_SCORE,
)
from core.models import Block, DetectionResult, Line, RankedBlock

logger = logging.getLogger(__name__)


def line_vertical_score(line: Line) -> Optional[int]:
    """
    Vertical score contributed by a single line.

    Only the first and last elements are read; anything in between has no
    effect on the score.

    Returns:
        top_y(first) + top_y(last), or None for a line without elements
    """
    if not line.elements:
        return None
    return line.first.top_y + line.last.top_y


def block_vertical_score(block: Block) -> int:
    """
    Compute the vertical score of a block.

    NOTE: the value comes from the last non-empty line only, not from the
    topmost one. Multi-line blocks therefore rank by where they end.

    Args:
        block: Block to score

    Returns:
        Integer ordering key (lower = higher on the page)
    """
    score = DEFAULT_VERTICAL_SCORE
    for line in block.lines:
        line_score = line_vertical_score(line)
        if line_score is not None:
            score = line_score
    return score


def score_blocks(blocks: Sequence[Block]) -> List[RankedBlock]:
    """Pair every block with its vertical score, in input order."""
    return [RankedBlock(score=block_vertical_score(b), block=b) for b in blocks]


def normalize_strategy(strategy: str) -> str:
    """
    Canonical form of a ranking strategy name.

    Surrounding whitespace and case are ignored, so "Stable" and " stable "
    both resolve to 'stable'.

    Raises:
        ValueError: If the name is not a known strategy
    """
    value = strategy.strip().lower() if isinstance(strategy, str) else strategy
    if value not in RANKING_STRATEGIES:
        raise ValueError(
            f"Unknown ranking strategy '{strategy}'. Allowed: {list(RANKING_STRATEGIES)}"
        )
    return value


def _rank_unique_score(scored: List[RankedBlock]) -> List[RankedBlock]:
    by_score: Dict[int, RankedBlock] = {}
    for ranked in scored:
        if ranked.score in by_score:
            logger.debug(
                "Score collision at %d: replacing earlier block %r",
                ranked.score,
                by_score[ranked.score].block.text[:40],
            )
        by_score[ranked.score] = ranked
    return [by_score[score] for score in sorted(by_score)]


def _rank_stable(scored: List[RankedBlock]) -> List[RankedBlock]:
    # sorted() is stable, so input order breaks ties
    return sorted(scored, key=lambda ranked: ranked.score)


def rank_scored_blocks(
    blocks: Sequence[Block],
    strategy: str = RANKING_UNIQUE_SCORE
) -> List[RankedBlock]:
    """
    Rank blocks and keep their scores.

    Args:
        blocks: Blocks in engine order
        strategy: 'unique_score' or 'stable'

    Returns:
        RankedBlock list in ascending score order
    """
    strategy = normalize_strategy(strategy)
    scored = score_blocks(blocks)

    if strategy == RANKING_STABLE:
        ranked = _rank_stable(scored)
    else:
        ranked = _rank_unique_score(scored)

    dropped = len(scored) - len(ranked)
    if dropped:
        logger.debug("Dropped %d block(s) on score collisions", dropped)

    return ranked


def rank_blocks(
    blocks: Sequence[Block],
    strategy: str = RANKING_UNIQUE_SCORE
) -> List[Block]:
    """
    Sort blocks by vertical position.

    Main entry point for block ordering. With the default 'unique_score'
    strategy the output can be shorter than the input: blocks that share a
    score with a later block are dropped.

    Args:
        blocks: Blocks in engine order
        strategy: 'unique_score' or 'stable'

    Returns:
        Blocks in ascending vertical-score order
    """
    return [ranked.block for ranked in rank_scored_blocks(blocks, strategy)]


def rank_detection(
    result: DetectionResult,
    strategy: str = RANKING_UNIQUE_SCORE
) -> List[Block]:
    """Rank the blocks of a whole detection result."""
    return rank_blocks(result.blocks, strategy)
