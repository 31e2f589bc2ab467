"""
API Dependencies - Dependency injection for FastAPI.

Provides reusable dependencies for presenters and the transcription service.
"""
from typing import Optional

from services.presenters import RecordingPresenter
from services.transcription_service import TranscriptionService, build_service_from_settings


def get_presenter() -> RecordingPresenter:
    """
    Dependency for a per-request presenter.

    Returns:
        RecordingPresenter collecting what the service shows
    """
    return RecordingPresenter()


def get_transcription_service(strategy: Optional[str] = None) -> TranscriptionService:
    """
    Dependency for transcription service.

    Args:
        strategy: Ranking strategy override (optional, falls back to settings)

    Returns:
        TranscriptionService instance with its own RecordingPresenter
    """
    return build_service_from_settings(get_presenter(), strategy)
