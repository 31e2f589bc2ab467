"""Serving package - HTTP surface for transcription."""
