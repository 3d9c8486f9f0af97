"""Tests for debate-sentiment package structure and imports."""

from __future__ import annotations

import re
import subprocess
import sys


def test_package_is_importable() -> None:
    import debate_sentiment  # noqa: F401


def test_package_version_is_semver() -> None:
    import debate_sentiment

    assert re.match(r"^\d+\.\d+\.\d+$", debate_sentiment.__version__)


def test_public_api_exports() -> None:
    import debate_sentiment

    for name in debate_sentiment.__all__:
        assert hasattr(debate_sentiment, name)


def test_main_module_help() -> None:
    """``python -m debate_sentiment --help`` must list both subcommands."""
    result = subprocess.run(
        [sys.executable, "-m", "debate_sentiment", "--help"],
        capture_output=True,
        text=True,
        timeout=30,
    )
    assert result.returncode == 0
    assert "run" in result.stdout
    assert "attribute" in result.stdout
    assert "Traceback" not in result.stderr
