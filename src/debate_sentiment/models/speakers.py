"""Pydantic model for speaker-label configuration.

A :class:`SpeakerConfig` maps every label string that may appear on its
own line in a transcript (``"DAVID CAMERON:"``, ``"DC:"``) to a canonical
speaker name.  Labels for non-debaters (moderator, audience, audio
description) resolve to the :data:`OTHER` sentinel so their lines can be
dropped after attribution.

All validation runs at construction time: an ambiguous label raises a
:class:`pydantic.ValidationError` before any transcript is processed.
The model is frozen and its label collections are read-only, so a
validated config stays valid.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from functools import cached_property
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from rapidfuzz import fuzz, process

OTHER = "Other"

# Lines much longer than the longest label cannot be a mistyped label.
_NEAR_MISS_SLACK = 3


class SpeakerConfig(BaseModel):
    """Label-to-speaker mapping plus the noise-line pattern.

    Attributes:
        speakers: Canonical speaker name -> label strings for that speaker.
        other_labels: Label strings that resolve to :data:`OTHER`.
        noise_pattern: Regular expression matched (``fullmatch``) against
            each trimmed line; matching lines are discarded.
        case_sensitive: Whether label matching respects case.
        near_miss_threshold: ``rapidfuzz`` similarity (0-100) above which
            a non-matching line is reported as a likely mistyped label.
            ``None`` disables the check.
    """

    model_config = ConfigDict(frozen=True)

    speakers: Mapping[str, tuple[str, ...]]
    other_labels: tuple[str, ...] = ()
    noise_pattern: str = r"Page\s+\d+"
    case_sensitive: bool = True
    near_miss_threshold: float | None = 85.0

    @field_validator("speakers")
    @classmethod
    def freeze_speakers(cls, value: Mapping[str, tuple[str, ...]]) -> Mapping[str, tuple[str, ...]]:
        return MappingProxyType(dict(value))

    @field_validator("noise_pattern")
    @classmethod
    def validate_noise_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"Invalid noise pattern {value!r}: {exc}") from exc
        return value

    @field_validator("near_miss_threshold")
    @classmethod
    def validate_threshold(cls, value: float | None) -> float | None:
        if value is not None and not 0 <= value <= 100:
            raise ValueError(f"near_miss_threshold must be between 0 and 100, got {value}")
        return value

    @model_validator(mode="after")
    def validate_labels(self) -> SpeakerConfig:
        self._index_labels()
        return self

    @cached_property
    def label_map(self) -> dict[str, str]:
        """Normalized label -> canonical speaker name (or :data:`OTHER`)."""
        return self._index_labels()

    def _index_labels(self) -> dict[str, str]:
        """Index every label and reject ambiguous or empty entries."""
        label_map: dict[str, str] = {}

        entries: list[tuple[str, str]] = []
        for name, labels in self.speakers.items():
            if not name.strip():
                raise ValueError("Canonical speaker names must not be empty")
            if name.strip() == OTHER:
                raise ValueError(
                    f"{OTHER!r} is reserved; list those labels under other_labels"
                )
            entries.extend((label, name) for label in labels)
        entries.extend((label, OTHER) for label in self.other_labels)

        for label, name in entries:
            key = self._normalize(label)
            if not key:
                raise ValueError(f"Empty label configured for {name!r}")
            existing = label_map.get(key)
            if existing is not None and existing != name:
                raise ValueError(
                    f"Label {label.strip()!r} is ambiguous: "
                    f"mapped to both {existing!r} and {name!r}"
                )
            label_map[key] = name

        return label_map

    def _normalize(self, text: str) -> str:
        text = text.strip()
        return text if self.case_sensitive else text.casefold()

    @property
    def labels(self) -> list[str]:
        """All configured label strings, trimmed, in configuration order."""
        result = [label.strip() for labels in self.speakers.values() for label in labels]
        result.extend(label.strip() for label in self.other_labels)
        return list(dict.fromkeys(result))

    def resolve(self, text: str) -> str | None:
        """Return the speaker a label line maps to.

        Args:
            text: A transcript line; surrounding whitespace is ignored.

        Returns:
            The canonical speaker name, :data:`OTHER`, or ``None`` when
            *text* is not exactly a configured label.
        """
        return self.label_map.get(self._normalize(text))

    def is_noise(self, text: str) -> bool:
        """Return ``True`` for blank lines and lines matching the noise pattern."""
        stripped = text.strip()
        if not stripped:
            return True
        return re.fullmatch(self.noise_pattern, stripped) is not None

    def closest_label(self, text: str) -> str | None:
        """Return the configured label *text* most resembles, if any.

        Exact matches are not near misses and return ``None``, as does
        any line noticeably longer than the longest label.
        """
        if self.near_miss_threshold is None or self.resolve(text) is not None:
            return None

        labels = self.labels
        if not labels:
            return None

        candidate = self._normalize(text)
        if len(candidate) > max(len(label) for label in labels) + _NEAR_MISS_SLACK:
            return None

        match = process.extractOne(
            candidate,
            labels,
            scorer=fuzz.ratio,
            processor=None if self.case_sensitive else str.casefold,
            score_cutoff=self.near_miss_threshold,
        )
        return match[0] if match is not None else None
