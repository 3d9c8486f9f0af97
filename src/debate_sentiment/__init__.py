"""debate-sentiment: lexicon sentiment scoring of debate transcripts.

Attributes the lines of a speaker-labelled transcript to debaters,
scores each turn with the VADER and NRC emotion lexicons, and summarises and charts the
results per speaker.
"""

from __future__ import annotations

from debate_sentiment.attributor import (
    attribute,
    attribute_lines,
    attribute_transcript,
    group_turns,
    split_lines,
)
from debate_sentiment.exceptions import FetchError, LexiconUnavailableError, TranscriptDecodeError
from debate_sentiment.models.speakers import OTHER, SpeakerConfig
from debate_sentiment.models.transcript import (
    AttributedLine,
    AttributionResult,
    AttributionWarning,
    RawLine,
    Utterance,
)

__version__ = "0.1.0"

__all__ = [
    "OTHER",
    "AttributedLine",
    "AttributionResult",
    "AttributionWarning",
    "FetchError",
    "LexiconUnavailableError",
    "RawLine",
    "SpeakerConfig",
    "TranscriptDecodeError",
    "Utterance",
    "attribute",
    "attribute_lines",
    "attribute_transcript",
    "group_turns",
    "split_lines",
]
