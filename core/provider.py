"""Encyclopedia provider backed by the ``wikipedia`` library.

The fetcher only depends on the small ``EncyclopediaProvider`` protocol, so
tests can hand it a fake that returns fixture pages instead of going to the
network.
"""

from __future__ import annotations

import logging
from typing import Protocol

import wikipedia

from core.errors import PageNotFound

logger = logging.getLogger(__name__)


class Page(Protocol):
    """A resolved encyclopedia page."""

    title: str

    @property
    def summary(self) -> str: ...


class EncyclopediaProvider(Protocol):
    """Resolves a title to a page in a fixed content language."""

    lang: str

    def resolve_page(self, title: str) -> Page: ...


class WikipediaProvider:
    """``EncyclopediaProvider`` over the MediaWiki API.

    The ``wikipedia`` library keeps its API endpoint in module state, so the
    language and user agent are applied once here rather than per call.
    """

    def __init__(
        self,
        lang: str = "en",
        auto_suggest: bool = False,
        user_agent: str | None = None,
    ) -> None:
        """Initialise the provider.

        Args:
            lang: Wikipedia language prefix (``"en"``, ``"de"``, ...).
            auto_suggest: Let Wikipedia search rewrite the title before
                loading the page. Off by default so the topic is used as given.
            user_agent: ``User-Agent`` header sent with every API request.
        """
        self.lang = lang
        self.auto_suggest = auto_suggest
        wikipedia.set_lang(lang)
        if user_agent:
            wikipedia.set_user_agent(user_agent)
        logger.info("Wikipedia provider ready (lang=%s, auto_suggest=%s)", lang, auto_suggest)

    def resolve_page(self, title: str) -> Page:
        """Load the page for *title*, following redirects.

        Raises:
            PageNotFound: If *title* is empty (the API has nothing to resolve).
            wikipedia.exceptions.WikipediaException: On provider-side failures.
            requests.RequestException: On network failures.
        """
        if not title:
            raise PageNotFound("empty title does not match any page")
        return wikipedia.page(title, auto_suggest=self.auto_suggest, redirect=True)
