"""
Transcription Service - Turns OCR results into presented transcripts.

The OCR engine delivers its result asynchronously on a success or a failure
channel. This service is the continuation for both: on success it ranks the
blocks, transcribes them and hands the text to a presenter; on failure it
logs the error and notifies the presenter without touching the core.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from core.constants import (
    ELEMENT_TERMINATOR,
    LINE_SEPARATOR,
    OUTCOME_FAILED,
    OUTCOME_NO_TEXT,
    OUTCOME_TEXT,
    PRESENTER_MESSAGES,
    RANKING_UNIQUE_SCORE,
)
from core.models import DetectionResult
from spatial.ranking import normalize_strategy, rank_scored_blocks
from spatial.transcription import transcribe
from .presenters import BasePresenter

logger = logging.getLogger(__name__)


@dataclass
class TranscriptionOutcome:
    """What happened to one OCR result."""
    status: str
    text: Optional[str] = None
    block_count: int = 0
    dropped_blocks: int = 0
    message: Optional[str] = None

    @property
    def found_text(self) -> bool:
        return self.status == OUTCOME_TEXT

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'status': self.status,
            'text': self.text,
            'block_count': self.block_count,
            'dropped_blocks': self.dropped_blocks,
            'message': self.message
        }


class TranscriptionService:
    """Service wiring ranking and transcription to a presenter."""

    def __init__(
        self,
        presenter: BasePresenter,
        strategy: str = RANKING_UNIQUE_SCORE,
        line_separator: str = LINE_SEPARATOR,
        element_terminator: str = ELEMENT_TERMINATOR,
        messages: Optional[Dict[str, str]] = None
    ):
        """
        Initialize transcription service.

        Args:
            presenter: Receives transcripts and notifications
            strategy: Ranking strategy ('unique_score' or 'stable', any case)
            line_separator: Inserted between lines of a block
            element_terminator: Appended after every element
            messages: Overrides for notification texts

        Raises:
            ValueError: If the strategy is unknown
        """
        self.presenter = presenter
        self.strategy = normalize_strategy(strategy)
        self.line_separator = line_separator
        self.element_terminator = element_terminator
        self.messages = dict(PRESENTER_MESSAGES)
        if messages:
            self.messages.update(messages)

    def handle_success(self, result: DetectionResult) -> TranscriptionOutcome:
        """
        Process a detection result delivered on the success channel.

        Args:
            result: OCR detection result

        Returns:
            TranscriptionOutcome with status 'text' or 'no_text'
        """
        ranked = rank_scored_blocks(result.blocks, self.strategy)
        dropped = len(result.blocks) - len(ranked)

        text = transcribe(
            [r.block for r in ranked],
            line_separator=self.line_separator,
            element_terminator=self.element_terminator
        )

        if text is None:
            message = self.messages['no_text']
            logger.info("No text blocks in detection result")
            self.presenter.notify(message)
            return TranscriptionOutcome(status=OUTCOME_NO_TEXT, message=message)

        logger.info(
            "Transcribed %d block(s) (%d dropped), %d characters",
            len(ranked),
            dropped,
            len(text)
        )
        self.presenter.show_text(text)
        return TranscriptionOutcome(
            status=OUTCOME_TEXT,
            text=text,
            block_count=len(ranked),
            dropped_blocks=dropped
        )

    def handle_failure(self, error: BaseException) -> TranscriptionOutcome:
        """
        Process an error delivered on the failure channel.

        The error is logged and reported; it is not re-raised.
        """
        logger.error("Text recognition failed: %s", error, exc_info=error)
        message = self.messages['recognition_failed']
        self.presenter.notify(message)
        return TranscriptionOutcome(status=OUTCOME_FAILED, message=message)

    def handle_capture_failure(self) -> TranscriptionOutcome:
        """Report that no picture was taken; recognition never runs."""
        logger.warning("Picture not taken, skipping text recognition")
        message = self.messages['capture_failed']
        self.presenter.notify(message)
        return TranscriptionOutcome(status=OUTCOME_FAILED, message=message)


def build_service_from_settings(presenter: BasePresenter, strategy: Optional[str] = None) -> TranscriptionService:
    """Create a TranscriptionService configured from the global settings."""
    from config.settings import settings

    return TranscriptionService(
        presenter=presenter,
        strategy=strategy or settings.ranking_strategy,
        messages=settings.get_presenter_messages(),
        **settings.get_transcription_config()
    )
