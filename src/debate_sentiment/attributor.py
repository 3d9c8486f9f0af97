"""Speaker attribution for debate transcripts.

Turns the flat lines of an extracted transcript into speaker turns.  A
transcript marks each turn with a line holding only the speaker's label
(``"DAVID CAMERON:"``); the content lines that follow belong to that
speaker until the next label line.  Attribution is a single forward pass
carrying the current speaker and turn counter, followed by a grouping
step that joins each turn's lines into one :class:`Utterance`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from debate_sentiment.models.speakers import OTHER, SpeakerConfig
from debate_sentiment.models.transcript import (
    AttributedLine,
    AttributionResult,
    AttributionWarning,
    RawLine,
    Utterance,
)

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[RawLine]:
    """Split a raw text blob into 1-based :class:`RawLine` records.

    ``\\r\\n`` line endings are accepted.  An empty string yields no lines.
    """
    if not text:
        return []
    return [
        RawLine(line_index=idx, text=line.rstrip("\r"))
        for idx, line in enumerate(text.split("\n"), start=1)
    ]


def attribute_lines(
    raw_lines: Iterable[RawLine],
    config: SpeakerConfig,
) -> list[AttributedLine]:
    """Run the forward pass over *raw_lines*.

    Noise lines (blank, or matching ``config.noise_pattern``) are dropped
    before label detection, so they never start a turn.  Every label line
    increments the turn counter and becomes the current speaker; every
    other line inherits the current speaker and turn.  Lines before the
    first label keep ``speaker=None`` and ``turn_id=None``.

    Args:
        raw_lines: Transcript lines in document order.
        config: Label mapping and noise pattern.

    Returns:
        One :class:`AttributedLine` per non-noise input line, in order.
    """
    attributed: list[AttributedLine] = []

    current_speaker: str | None = None
    turn_id: int | None = None

    for raw in raw_lines:
        if config.is_noise(raw.text):
            continue

        text = raw.text.strip()
        speaker = config.resolve(text)

        if speaker is not None:
            current_speaker = speaker
            turn_id = (turn_id or 0) + 1
            attributed.append(
                AttributedLine(
                    text=text,
                    speaker=speaker,
                    is_label=True,
                    turn_id=turn_id,
                    line_index=raw.line_index,
                )
            )
            continue

        attributed.append(
            AttributedLine(
                text=text,
                speaker=current_speaker,
                is_label=False,
                turn_id=turn_id,
                line_index=raw.line_index,
            )
        )

    return attributed


def group_turns(lines: Iterable[AttributedLine]) -> list[Utterance]:
    """Collapse attributed lines into one :class:`Utterance` per turn.

    Label lines, lines spoken by :data:`~debate_sentiment.models.speakers.OTHER`
    and unattributed preamble lines are dropped.  The rest are grouped by
    ``(turn_id, speaker)`` and joined with single spaces in document order.
    Groups with no text are discarded and the survivors renumbered
    ``1..K``.

    Grouping already-merged utterances (one line per turn) returns them
    unchanged.
    """
    groups: dict[tuple[int, str], list[str]] = {}

    for line in lines:
        if line.is_label or line.speaker is None or line.turn_id is None:
            continue
        if line.speaker == OTHER:
            continue
        groups.setdefault((line.turn_id, line.speaker), []).append(line.text)

    utterances: list[Utterance] = []
    for (_, speaker), parts in sorted(groups.items(), key=lambda item: item[0][0]):
        text = " ".join(part for part in parts if part)
        if not text:
            continue
        utterances.append(
            Utterance(turn_id=len(utterances) + 1, speaker=speaker, text=text)
        )

    return utterances


def attribute(raw_lines: Sequence[RawLine], config: SpeakerConfig) -> list[Utterance]:
    """Attribute *raw_lines* to speakers and return the resulting turns."""
    return group_turns(attribute_lines(raw_lines, config))


def attribute_transcript(
    text: str,
    config: SpeakerConfig,
    source: str = "<string>",
) -> AttributionResult:
    """Attribute a whole transcript and collect diagnostics.

    Wraps :func:`attribute` with line counts and near-miss warnings:
    content lines closely resembling a configured label (a likely typo in
    the transcript) are reported, but still treated as content.

    Args:
        text: The extracted transcript text, newline-delimited.
        config: Label mapping and noise pattern.
        source: Label for the transcript origin (URL or file path).

    Returns:
        An :class:`AttributionResult`.  Input with no label lines yields
        zero utterances rather than an error.
    """
    raw_lines = split_lines(text)
    attributed = attribute_lines(raw_lines, config)
    utterances = group_turns(attributed)

    warnings: list[AttributionWarning] = []
    label_lines = other_lines = preamble_lines = 0

    for line in attributed:
        if line.is_label:
            label_lines += 1
            continue
        if line.speaker is None:
            preamble_lines += 1
        elif line.speaker == OTHER:
            other_lines += 1

        near_miss = config.closest_label(line.text)
        if near_miss is not None:
            warning = AttributionWarning(
                line_index=line.line_index,
                message=f"Line resembles label {near_miss!r} but does not match it exactly",
                raw_line=line.text,
            )
            warnings.append(warning)
            logger.warning("Line %d: %s", warning.line_index, warning.message)

    noise_lines = len(raw_lines) - len(attributed)
    logger.debug(
        "Attributed %d line(s): %d noise, %d label, %d other, %d preamble",
        len(raw_lines),
        noise_lines,
        label_lines,
        other_lines,
        preamble_lines,
    )

    return AttributionResult(
        utterances=utterances,
        speakers=list(dict.fromkeys(u.speaker for u in utterances)),
        warnings=warnings,
        source=source,
        noise_lines=noise_lines,
        label_lines=label_lines,
        other_lines=other_lines,
        preamble_lines=preamble_lines,
    )
