"""Attune backend: biometric emotion analysis, speech and session summaries."""
