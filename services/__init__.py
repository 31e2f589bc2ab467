"""Services package - Transcription service and presenters."""
