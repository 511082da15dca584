"""Lookup errors raised by the summary fetcher.

Every provider failure is mapped onto one of these before it leaves
``core.fetcher``; the web layer only ever sees ``WikiLookupError``.
"""

from __future__ import annotations


class WikiLookupError(Exception):
    """Base class for any failure while talking to the encyclopedia provider."""


class PageNotFound(WikiLookupError):
    """No page matches the requested topic."""


class SummaryUnavailable(WikiLookupError):
    """The page exists but has no usable lead extract (e.g. a disambiguation page)."""


class TransportFailure(WikiLookupError):
    """The provider could not be reached or returned a malformed response."""
