"""Tests for the speaker-label configuration model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from debate_sentiment.models.speakers import OTHER, SpeakerConfig


class TestResolve:
    """Label strings resolve to canonical speakers."""

    def test_full_and_abbreviated_labels(self, debate_config: SpeakerConfig) -> None:
        assert debate_config.resolve("DAVID DIMBLEBY:") == "David Dimbleby"
        assert debate_config.resolve("DD:") == "David Dimbleby"
        assert debate_config.resolve("EM:") == "Ed Milliband"

    def test_other_labels_resolve_to_sentinel(self, debate_config: SpeakerConfig) -> None:
        assert debate_config.resolve("AUDIENCE MEMBER:") == OTHER

    def test_surrounding_whitespace_ignored(self, debate_config: SpeakerConfig) -> None:
        assert debate_config.resolve("  DD:\t") == "David Dimbleby"

    def test_unknown_text_is_none(self, debate_config: SpeakerConfig) -> None:
        assert debate_config.resolve("Hello") is None
        assert debate_config.resolve("dd:") is None

    def test_labels_property_lists_all(self, debate_config: SpeakerConfig) -> None:
        assert debate_config.labels == [
            "DAVID DIMBLEBY:",
            "DD:",
            "ED MILLIBAND:",
            "EM:",
            "AUDIENCE MEMBER:",
            "AUDIO DESCRIPTION:",
        ]


class TestNoise:
    """Blank and page-number lines are noise."""

    @pytest.mark.parametrize("text", ["", "   ", "Page 3", "  Page 12  ", "Page\t4"])
    def test_noise(self, debate_config: SpeakerConfig, text: str) -> None:
        assert debate_config.is_noise(text) is True

    @pytest.mark.parametrize("text", ["Page three", "See page 3", "Page 3 of the manifesto"])
    def test_not_noise(self, debate_config: SpeakerConfig, text: str) -> None:
        assert debate_config.is_noise(text) is False

    def test_custom_pattern(self) -> None:
        config = SpeakerConfig(speakers={"A": ["A:"]}, noise_pattern=r"-\s*\d+\s*-")

        assert config.is_noise("- 4 -") is True
        assert config.is_noise("Page 4") is False


class TestValidation:
    """Invalid configuration fails at construction time."""

    def test_label_mapped_to_two_speakers(self) -> None:
        with pytest.raises(ValidationError, match="ambiguous"):
            SpeakerConfig(speakers={"David Cameron": ["DC:"], "Dan Carden": ["DC:"]})

    def test_label_mapped_to_speaker_and_other(self) -> None:
        with pytest.raises(ValidationError, match="ambiguous"):
            SpeakerConfig(speakers={"David Dimbleby": ["DD:"]}, other_labels=["DD:"])

    def test_ambiguity_respects_case_insensitivity(self) -> None:
        with pytest.raises(ValidationError, match="ambiguous"):
            SpeakerConfig(
                speakers={"Nick Clegg": ["NC:"], "Nadine Cole": ["nc:"]},
                case_sensitive=False,
            )

    def test_case_variants_allowed_when_case_sensitive(self) -> None:
        config = SpeakerConfig(speakers={"Nick Clegg": ["NC:"], "Nadine Cole": ["nc:"]})

        assert config.resolve("nc:") == "Nadine Cole"

    def test_duplicate_label_for_same_speaker_allowed(self) -> None:
        config = SpeakerConfig(speakers={"Nick Clegg": ["NC:", "NC:"]})

        assert config.resolve("NC:") == "Nick Clegg"

    def test_empty_label_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Empty label"):
            SpeakerConfig(speakers={"Nick Clegg": ["  "]})

    def test_empty_speaker_name_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not be empty"):
            SpeakerConfig(speakers={"": ["NC:"]})

    def test_other_is_reserved(self) -> None:
        with pytest.raises(ValidationError, match="reserved"):
            SpeakerConfig(speakers={OTHER: ["DD:"]})

    def test_invalid_noise_pattern(self) -> None:
        with pytest.raises(ValidationError, match="Invalid noise pattern"):
            SpeakerConfig(speakers={"A": ["A:"]}, noise_pattern="Page (")

    def test_threshold_out_of_range(self) -> None:
        with pytest.raises(ValidationError, match="near_miss_threshold"):
            SpeakerConfig(speakers={"A": ["A:"]}, near_miss_threshold=150)


class TestImmutability:
    """A validated config cannot be mutated into an ambiguous one."""

    def test_field_assignment_rejected(self, debate_config: SpeakerConfig) -> None:
        with pytest.raises(ValidationError, match="frozen"):
            debate_config.speakers = {"A": ["DD:"]}

    def test_speaker_labels_are_tuples(self, debate_config: SpeakerConfig) -> None:
        with pytest.raises(AttributeError):
            debate_config.speakers["Ed Milliband"].append("DD:")  # type: ignore[attr-defined]

        assert debate_config.speakers["Ed Milliband"] == ("ED MILLIBAND:", "EM:")

    def test_speaker_mapping_is_read_only(self, debate_config: SpeakerConfig) -> None:
        with pytest.raises(TypeError):
            debate_config.speakers["Someone Else"] = ("DD:",)  # type: ignore[index]

    def test_other_labels_are_tuples(self, debate_config: SpeakerConfig) -> None:
        with pytest.raises(AttributeError):
            debate_config.other_labels.append("DD:")  # type: ignore[attr-defined]

    def test_resolution_unchanged_after_attempted_mutation(
        self, debate_config: SpeakerConfig
    ) -> None:
        with pytest.raises(AttributeError):
            debate_config.speakers["Ed Milliband"].append("DD:")  # type: ignore[attr-defined]

        assert debate_config.resolve("DD:") == "David Dimbleby"
        assert "Someone Else" not in debate_config.speakers

    def test_json_lists_accepted(self) -> None:
        config = SpeakerConfig.model_validate(
            {"speakers": {"A": ["A:", "AA:"]}, "other_labels": ["X:"]}
        )

        assert config.speakers["A"] == ("A:", "AA:")
        assert config.other_labels == ("X:",)


class TestClosestLabel:
    """Near-miss detection for mistyped labels."""

    def test_typo_detected(self, debate_config: SpeakerConfig) -> None:
        assert debate_config.closest_label("ED MILIBAND:") == "ED MILLIBAND:"

    def test_exact_label_is_not_near_miss(self, debate_config: SpeakerConfig) -> None:
        assert debate_config.closest_label("ED MILLIBAND:") is None

    def test_ordinary_content_not_flagged(self, debate_config: SpeakerConfig) -> None:
        assert debate_config.closest_label("Thank you.") is None

    def test_long_line_skipped(self, debate_config: SpeakerConfig) -> None:
        assert debate_config.closest_label("ED MILLIBAND: and then he said a great deal") is None

    def test_case_insensitive_near_miss(self) -> None:
        config = SpeakerConfig(speakers={"Nick Clegg": ["NICK CLEGG:"]}, case_sensitive=False)

        assert config.closest_label("nick clegs:") == "NICK CLEGG:"
