"""
Summary fetcher for the Wikipedia Agent.

Flow
────
1. provider.resolve_page(topic)   → page in the configured language
2. page.summary                   → lead-section extract

Provider and transport exceptions are translated into the ``core.errors``
family so callers handle exactly one error type. There is no retry and no
cache: every call goes to the provider.
"""

from __future__ import annotations

import logging

import requests
from wikipedia import exceptions as wiki_exc

from core.errors import PageNotFound, SummaryUnavailable, TransportFailure, WikiLookupError
from core.provider import EncyclopediaProvider

logger = logging.getLogger(__name__)

#: Topics are unbounded; log lines carry at most this many characters of one
#: (or of an error message that echoes it).
_LOG_TOPIC_CHARS = 200


def _clip(text: str) -> str:
    if len(text) <= _LOG_TOPIC_CHARS:
        return text
    return f"{text[:_LOG_TOPIC_CHARS]}...(+{len(text) - _LOG_TOPIC_CHARS} chars)"


def _translate(exc: Exception) -> WikiLookupError:
    """Map a provider-side exception onto the lookup error family."""
    if isinstance(exc, (wiki_exc.PageError, wiki_exc.RedirectError)):
        return PageNotFound(str(exc))
    if isinstance(exc, wiki_exc.DisambiguationError):
        return SummaryUnavailable(str(exc))
    if isinstance(exc, (wiki_exc.HTTPTimeoutError, requests.RequestException)):
        return TransportFailure(str(exc))
    if isinstance(exc, wiki_exc.WikipediaException):
        return WikiLookupError(str(exc))
    # KeyError, ValueError, TypeError, AttributeError: an API payload the
    # library could not parse
    return TransportFailure(f"malformed provider response: {exc!r}")


class SummaryFetcher:
    """Fetches the lead summary for a topic from an ``EncyclopediaProvider``."""

    def __init__(self, provider: EncyclopediaProvider) -> None:
        self.provider = provider

    def fetch(self, topic: str) -> str:
        """Return the introductory summary of the page matching *topic*.

        The topic is passed through untouched; the provider decides whether
        an empty or odd-looking title resolves.

        Args:
            topic: Page title to look up.

        Returns:
            The page's lead extract.

        Raises:
            PageNotFound: No page matches *topic*.
            SummaryUnavailable: The page has no usable extract.
            TransportFailure: The provider could not be reached or answered badly.
            WikiLookupError: Any other provider failure.
        """
        logger.info("Lookup topic=%r lang=%s", _clip(topic), self.provider.lang)
        try:
            page = self.provider.resolve_page(topic)
            summary = page.summary
        except WikiLookupError as exc:
            logger.warning("Lookup failed for topic=%r: %s: %s", _clip(topic), type(exc).__name__, _clip(str(exc)))
            raise
        except (
            wiki_exc.WikipediaException,
            requests.RequestException,
            KeyError, ValueError, TypeError, AttributeError,
        ) as exc:
            err = _translate(exc)
            logger.warning("Lookup failed for topic=%r: %s: %s", _clip(topic), type(err).__name__, _clip(str(err)))
            raise err from exc

        if not summary:
            err = SummaryUnavailable(f"no summary available for page {page.title!r}")
            logger.warning("Lookup failed for topic=%r: %s", _clip(topic), err)
            raise err

        logger.info("Lookup complete: topic=%r page=%r (%d chars)", _clip(topic), page.title, len(summary))
        return summary
