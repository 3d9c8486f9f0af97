"""Data models for debate-sentiment."""

from __future__ import annotations

from debate_sentiment.models.speakers import OTHER, SpeakerConfig
from debate_sentiment.models.transcript import (
    AttributedLine,
    AttributionResult,
    AttributionWarning,
    RawLine,
    Utterance,
)

__all__ = [
    "OTHER",
    "AttributedLine",
    "AttributionResult",
    "AttributionWarning",
    "RawLine",
    "SpeakerConfig",
    "Utterance",
]
