"""
Shared pytest fixtures: in-memory stand-ins for browser sessions and pages.

FakePage implements the subset of Playwright's Page used by the extractors
(goto, wait_for_selector, evaluate, close). FakeSession subclasses the real
BrowserSession so the async context manager behaviour under test is the
production one.
"""

import pytest

from linkpreview.config import Settings
from linkpreview.core.browser import BrowserSession


class FakePage:
    def __init__(
        self,
        evaluate_results: list | None = None,
        goto_error: Exception | None = None,
        selector_error: Exception | None = None,
        evaluate_error: Exception | None = None,
    ):
        self.evaluate_results = list(evaluate_results or [])
        self.goto_error = goto_error
        self.selector_error = selector_error
        self.evaluate_error = evaluate_error
        self.goto_calls: list[tuple[str, float | None, str | None]] = []
        self.selectors: list[str] = []
        self.scripts: list[str] = []
        self.closed = False

    async def goto(self, url, timeout=None, wait_until=None):
        self.goto_calls.append((url, timeout, wait_until))
        if self.goto_error:
            raise self.goto_error

    async def wait_for_selector(self, selector, timeout=None):
        self.selectors.append(selector)
        if self.selector_error:
            raise self.selector_error

    async def evaluate(self, script):
        self.scripts.append(script)
        if self.evaluate_error:
            raise self.evaluate_error
        return self.evaluate_results.pop(0) if self.evaluate_results else None

    async def close(self):
        self.closed = True


class FakeSession(BrowserSession):
    def __init__(self, pages: list[FakePage] | None = None):
        self.pages = list(pages or [])
        self.opened: list[FakePage] = []
        self.page_options: list[dict] = []
        self.close_calls = 0

    async def new_page(self, user_agent=None, extra_headers=None):
        self.page_options.append({"user_agent": user_agent, "extra_headers": extra_headers})
        page = self.pages.pop(0) if self.pages else FakePage()
        self.opened.append(page)
        return page

    async def close(self):
        self.close_calls += 1


class FakeLauncher:
    """Callable handed to PreviewScraper; records every session it launches."""

    def __init__(self, pages: list[FakePage] | None = None, error: Exception | None = None):
        self.pages = pages
        self.error = error
        self.sessions: list[FakeSession] = []
        self.calls = 0

    async def __call__(self) -> FakeSession:
        self.calls += 1
        if self.error:
            raise self.error
        session = FakeSession(self.pages)
        self.sessions.append(session)
        return session


@pytest.fixture()
def settings():
    """Settings with short timeouts for tests."""
    return Settings(
        navigation_timeout=1.0,
        selector_timeout=0.1,
        evaluate_timeout=0.5,
        preview_cache_ttl=3600,
    )


@pytest.fixture()
def fake_page():
    return FakePage


@pytest.fixture()
def fake_session():
    return FakeSession


@pytest.fixture()
def fake_launcher():
    return FakeLauncher
