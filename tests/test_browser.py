"""Tests for the browser session context manager."""

import asyncio

import pytest

from linkpreview.core.browser import BrowserSession


class BrokenCloseSession(BrowserSession):
    def __init__(self):
        self.close_calls = 0

    async def new_page(self, user_agent=None, extra_headers=None):
        raise RuntimeError("no pages")

    async def close(self):
        self.close_calls += 1
        raise RuntimeError("Browser has been closed")


class TestBrowserSession:
    def test_is_abstract(self):
        with pytest.raises(TypeError):
            BrowserSession()

    def test_close_failure_does_not_escape(self):
        session = BrokenCloseSession()

        async def run():
            async with session:
                return "done"

        assert asyncio.run(run()) == "done"
        assert session.close_calls == 1

    def test_body_error_still_propagates(self):
        session = BrokenCloseSession()

        async def run():
            async with session:
                raise ValueError("extraction blew up")

        with pytest.raises(ValueError):
            asyncio.run(run())
        assert session.close_calls == 1
