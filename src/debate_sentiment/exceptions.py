"""Custom exceptions for the debate-sentiment pipeline.

Configuration problems raise :class:`~debate_sentiment.config.ConfigError`;
this module holds the errors raised while obtaining a transcript.
"""

from __future__ import annotations


class FetchError(Exception):
    """Raised when a transcript URL cannot be downloaded.

    Covers connection failures, timeouts, and non-2xx HTTP responses.
    The underlying :mod:`requests` exception, if any, is chained.

    Attributes:
        url: The URL that failed.
        status_code: HTTP status code, or ``None`` when no response was
            received.
    """

    def __init__(self, message: str, url: str = "", status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class TranscriptDecodeError(Exception):
    """Raised when a plain-text transcript file is not valid UTF-8.

    HTML files never raise this: their bytes go to BeautifulSoup, which
    detects the declared or most likely encoding.  The underlying
    :class:`UnicodeDecodeError` is chained.

    Attributes:
        path: The file that could not be decoded.
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class LexiconUnavailableError(Exception):
    """Raised when the NRC emotion lexicon cannot be loaded.

    NRCLex tokenises with TextBlob, which needs its NLTK corpora on disk.
    The message carries the download command.
    """
