"""
Configuration management using Pydantic Settings.

Environment variables (prefix SCANSCRIBE_):
- SCANSCRIBE_RANKING_STRATEGY: 'unique_score' (default) or 'stable'
- SCANSCRIBE_LINE_SEPARATOR: Separator inserted between lines of a block
- SCANSCRIBE_ELEMENT_TERMINATOR: Text appended after every element
- SCANSCRIBE_NO_TEXT_MESSAGE: Notification shown when nothing was detected
- SCANSCRIBE_CAPTURE_FAILED_MESSAGE: Notification shown when capture failed
- SCANSCRIBE_LOG_LEVEL: Logging level for the CLI and API
"""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.constants import (
    ELEMENT_TERMINATOR,
    LINE_SEPARATOR,
    PRESENTER_MESSAGES,
    RANKING_UNIQUE_SCORE,
)
from spatial.ranking import normalize_strategy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SCANSCRIBE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Ranking
    ranking_strategy: str = Field(default=RANKING_UNIQUE_SCORE)

    # Transcript layout
    line_separator: str = Field(default=LINE_SEPARATOR)
    element_terminator: str = Field(default=ELEMENT_TERMINATOR)

    # Presenter notifications
    no_text_message: str = Field(default=PRESENTER_MESSAGES['no_text'])
    capture_failed_message: str = Field(default=PRESENTER_MESSAGES['capture_failed'])
    recognition_failed_message: str = Field(default=PRESENTER_MESSAGES['recognition_failed'])

    # Logging
    log_level: str = Field(default="INFO")

    # API Configuration
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8002)

    @field_validator("ranking_strategy")
    @classmethod
    def _check_strategy(cls, value: str) -> str:
        return normalize_strategy(value)

    def get_transcription_config(self) -> dict:
        """Get transcript layout settings as dictionary."""
        return {
            'line_separator': self.line_separator,
            'element_terminator': self.element_terminator,
        }

    def get_presenter_messages(self) -> dict:
        """Get presenter notification texts as dictionary."""
        return {
            'no_text': self.no_text_message,
            'capture_failed': self.capture_failed_message,
            'recognition_failed': self.recognition_failed_message,
        }


# Global settings instance
settings = Settings()
