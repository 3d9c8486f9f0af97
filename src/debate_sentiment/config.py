"""Configuration loading for debate-sentiment.

Runtime settings come from environment variables (a ``.env`` file is
honoured via python-dotenv).  Speaker-label mappings come from JSON files
validated against :class:`~debate_sentiment.models.speakers.SpeakerConfig`;
a mapping for the 2015 Question Time leaders' special ships with the
package.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from debate_sentiment.models.speakers import SpeakerConfig

DEFAULT_SPEAKER_CONFIG = "question_time_2015.json"
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; debate-sentiment/0.1)"


class ConfigError(Exception):
    """Raised when configuration is missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        log_level: Logging level (default ``"INFO"``).
        output_dir: Directory for the CSV export and charts
            (default ``reports``).
        request_timeout: Seconds to wait for a transcript download.
        user_agent: ``User-Agent`` header sent when fetching transcripts.
        speaker_config: Path to a speaker-label JSON file, or ``None`` for
            the packaged default.
    """

    log_level: str = "INFO"
    output_dir: Path = Path("reports")
    request_timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    speaker_config: Path | None = None


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Every variable is optional: ``LOG_LEVEL``, ``OUTPUT_DIR``,
    ``REQUEST_TIMEOUT``, ``USER_AGENT``, ``SPEAKER_CONFIG``.  Blank values
    fall back to the defaults on :class:`Settings`.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If ``REQUEST_TIMEOUT`` is not a positive number.
    """
    load_dotenv()

    values: dict[str, object] = {}

    log_level = os.environ.get("LOG_LEVEL", "").strip()
    if log_level:
        values["log_level"] = log_level

    output_dir = os.environ.get("OUTPUT_DIR", "").strip()
    if output_dir:
        values["output_dir"] = Path(output_dir)

    raw_timeout = os.environ.get("REQUEST_TIMEOUT", "").strip()
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(
                f"REQUEST_TIMEOUT must be a number, got {raw_timeout!r}"
            ) from None
        if timeout <= 0:
            raise ConfigError(f"REQUEST_TIMEOUT must be positive, got {raw_timeout!r}")
        values["request_timeout"] = timeout

    user_agent = os.environ.get("USER_AGENT", "").strip()
    if user_agent:
        values["user_agent"] = user_agent

    speaker_config = os.environ.get("SPEAKER_CONFIG", "").strip()
    if speaker_config:
        values["speaker_config"] = Path(speaker_config)

    return Settings(**values)


def load_speaker_config(path: str | Path | None = None) -> SpeakerConfig:
    """Load a speaker-label mapping from JSON.

    Args:
        path: JSON file to read.  ``None`` loads the packaged
            ``question_time_2015.json``.

    Returns:
        A validated :class:`SpeakerConfig`.

    Raises:
        ConfigError: If the file is missing, is not valid JSON, or fails
            validation (for example a label mapped to two speakers).
    """
    if path is None:
        source = f"<package>/{DEFAULT_SPEAKER_CONFIG}"
        raw = (
            resources.files("debate_sentiment.data")
            .joinpath(DEFAULT_SPEAKER_CONFIG)
            .read_text(encoding="utf-8")
        )
    else:
        config_path = Path(path)
        source = str(config_path)
        if not config_path.is_file():
            raise ConfigError(f"Speaker config not found: {config_path}")
        raw = config_path.read_text(encoding="utf-8")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in speaker config {source}: {exc}") from exc

    try:
        return SpeakerConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid speaker config {source}: {exc}") from exc
