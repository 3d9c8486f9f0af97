"""Transcript retrieval and text extraction.

Transcripts are published as HTML pages (often a cached rendering of a
PDF, with one text fragment per element).  :func:`load_transcript_lines`
accepts a URL, a saved HTML file, or a plain-text file and returns the
document's text lines ready for attribution.
"""

from __future__ import annotations

import logging
from pathlib import Path

import requests
from bs4 import BeautifulSoup

from debate_sentiment.config import DEFAULT_USER_AGENT
from debate_sentiment.exceptions import FetchError, TranscriptDecodeError

logger = logging.getLogger(__name__)

_HTML_SUFFIXES = {".html", ".htm"}
_STRIP_TAGS = ["script", "style", "noscript"]


def is_url(source: str) -> bool:
    """Return ``True`` if *source* is an ``http://`` or ``https://`` URL."""
    return source.lower().startswith(("http://", "https://"))


def fetch_html(
    url: str,
    timeout: float = 30.0,
    user_agent: str = DEFAULT_USER_AGENT,
) -> str:
    """Download *url* and return the response body as text.

    Raises:
        FetchError: On connection errors, timeouts, or non-2xx responses.
    """
    logger.info("Fetching transcript from %s", url)
    try:
        response = requests.get(url, headers={"User-Agent": user_agent}, timeout=timeout)
        response.raise_for_status()
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else None
        raise FetchError(f"HTTP {status} fetching {url}", url=url, status_code=status) from exc
    except requests.RequestException as exc:
        raise FetchError(f"Failed to fetch {url}: {exc}", url=url) from exc

    logger.debug("Fetched %d characters from %s", len(response.text), url)
    return response.text


def extract_lines(html: str | bytes) -> list[str]:
    """Extract the visible text of an HTML document, one entry per line.

    *html* may be raw bytes, in which case BeautifulSoup picks the
    encoding from the document's ``<meta charset>`` or by sniffing.
    Script and style content is discarded.  Element boundaries become
    line breaks and each line is stripped; blank lines are kept so that
    line positions stay meaningful for diagnostics.
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(_STRIP_TAGS):
        tag.decompose()
    text = soup.get_text("\n")
    return [line.strip() for line in text.splitlines()]


def load_transcript_lines(
    source: str | Path,
    timeout: float = 30.0,
    user_agent: str = DEFAULT_USER_AGENT,
) -> list[str]:
    """Return the text lines of a transcript from a URL or file.

    Args:
        source: An ``http(s)`` URL, a ``.html``/``.htm`` file (any
            encoding BeautifulSoup can detect), or any other file (read
            as UTF-8 plain text).
        timeout: Request timeout in seconds for URLs.
        user_agent: ``User-Agent`` header for URLs.

    Raises:
        FileNotFoundError: If a file *source* does not exist.
        FetchError: If a URL *source* cannot be downloaded.
        TranscriptDecodeError: If a plain-text file is not valid UTF-8.
    """
    if isinstance(source, str) and is_url(source):
        return extract_lines(fetch_html(source, timeout=timeout, user_agent=user_agent))

    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(f"Transcript file not found: {path}")

    if path.suffix.lower() in _HTML_SUFFIXES:
        return extract_lines(path.read_bytes())

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise TranscriptDecodeError(
            f"Transcript file is not valid UTF-8: {path} ({exc.reason} at byte {exc.start})",
            path=str(path),
        ) from exc
    return text.splitlines()
