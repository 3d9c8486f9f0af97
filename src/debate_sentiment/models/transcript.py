"""Transcript data models for attributed debate transcripts.

These dataclasses represent the input and output of the transcript
attributor.  They are plain frozen stdlib dataclasses; only the speaker
configuration (which is loaded from user-supplied JSON) is Pydantic.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawLine:
    """A single line of extracted document text.

    Attributes:
        line_index: 1-based position of the line in the source document.
        text: The line text exactly as extracted (untrimmed).
    """

    line_index: int
    text: str


@dataclass(frozen=True)
class AttributedLine:
    """A non-noise line after the forward pass.

    Attributes:
        text: Trimmed line text.
        speaker: Canonical speaker name, the ``"Other"`` sentinel, or
            ``None`` when the line precedes the first label line.
        is_label: ``True`` if the line is itself a speaker label.
        turn_id: Raw turn counter value, or ``None`` before the first
            label line.
        line_index: 1-based position in the source document.
    """

    text: str
    speaker: str | None
    is_label: bool
    turn_id: int | None
    line_index: int = 0


@dataclass(frozen=True, order=True)
class Utterance:
    """One speaker turn: the unit of sentiment analysis.

    Attributes:
        turn_id: Dense 1-based position of the turn in debate order.
        speaker: Canonical speaker name (never ``"Other"``).
        text: Space-joined content of every line in the turn.
    """

    turn_id: int
    speaker: str
    text: str


@dataclass(frozen=True)
class AttributionWarning:
    """A non-fatal diagnostic produced during attribution.

    Attributes:
        line_index: 1-based line number of the suspicious line.
        message: Human-readable description of the issue.
        raw_line: The original line text.
    """

    line_index: int
    message: str
    raw_line: str


@dataclass(frozen=True)
class AttributionResult:
    """Top-level return type of :func:`~debate_sentiment.attributor.attribute_transcript`.

    Attributes:
        utterances: Attributed turns, ordered by ``turn_id``.
        speakers: Unique speaker names, ordered by first appearance.
        warnings: Near-miss label diagnostics.
        source: Origin of the transcript, or ``"<string>"``.
        noise_lines: Count of blank and page-number lines removed.
        label_lines: Count of speaker-label lines (including ``"Other"``).
        other_lines: Count of content lines attributed to ``"Other"``.
        preamble_lines: Count of content lines before the first label.
    """

    utterances: list[Utterance] = field(default_factory=list)
    speakers: list[str] = field(default_factory=list)
    warnings: list[AttributionWarning] = field(default_factory=list)
    source: str = "<string>"
    noise_lines: int = 0
    label_lines: int = 0
    other_lines: int = 0
    preamble_lines: int = 0
