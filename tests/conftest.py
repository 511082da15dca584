"""Shared fakes for the test suite: an in-memory encyclopedia provider."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from wikipedia import exceptions as wiki_exc

GR_SUMMARY = (
    "General relativity, also known as the general theory of relativity, is the "
    "geometric theory of gravitation published by Albert Einstein in 1915."
)


@dataclass
class FakePage:
    title: str
    summary: str


class FakeProvider:
    """Resolves titles from a dict and records every call."""

    lang = "en"

    def __init__(self, pages: dict[str, str] | None = None) -> None:
        self.pages = pages or {}
        self.calls: list[str] = []

    def resolve_page(self, title: str) -> FakePage:
        self.calls.append(title)
        if title not in self.pages:
            raise wiki_exc.PageError(title or None, title)
        return FakePage(title=title, summary=self.pages[title])


@pytest.fixture
def make_provider():
    """Factory fixture: ``make_provider({"Title": "summary", ...})``."""
    return FakeProvider


@pytest.fixture
def gr_summary() -> str:
    return GR_SUMMARY


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider({"General relativity": GR_SUMMARY, "Python": "A language."})
