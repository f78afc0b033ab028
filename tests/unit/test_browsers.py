"""
Tests for the Playwright browser adapter.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock


HTML = '<html><head></head><body><div id="a">x</div></body></html>'


@pytest.fixture
def mock_page():
    """Create a mock Playwright page."""
    page = MagicMock()
    page.url = "https://example.com"
    page.goto = AsyncMock()
    page.close = AsyncMock()
    page.evaluate = AsyncMock(return_value={"html": HTML, "viewportHeight": 720, "layouts": []})
    return page


@pytest.fixture
def browser(mock_page):
    """Create a PlaywrightBrowser with a mocked context."""
    from browser_auto.browsers import PlaywrightBrowser
    from browser_auto.config import BrowserSettings

    browser = PlaywrightBrowser(BrowserSettings(timeout_ms=5000, wait_until="domcontentloaded"))
    browser._context = MagicMock()
    browser._context.new_page = AsyncMock(return_value=mock_page)
    browser._context.close = AsyncMock()
    return browser


class TestPlaywrightBrowser:
    """Test the PlaywrightBrowser class."""

    def test_not_connected_initially(self):
        """Test a fresh browser is not connected."""
        from browser_auto.browsers import PlaywrightBrowser
        assert PlaywrightBrowser().is_connected is False

    @pytest.mark.asyncio
    async def test_open_requires_launch(self):
        """Test opening a page before launch fails."""
        from browser_auto.browsers import PlaywrightBrowser
        from browser_auto.exceptions import BrowserLaunchError

        with pytest.raises(BrowserLaunchError):
            await PlaywrightBrowser().open("https://example.com")

    @pytest.mark.asyncio
    async def test_open_uses_settings(self, browser, mock_page):
        """Test navigation uses the configured wait state and timeout."""
        page = await browser.open("https://example.com")

        assert page is mock_page
        mock_page.goto.assert_called_once_with(
            "https://example.com",
            wait_until="domcontentloaded",
            timeout=5000,
        )

    @pytest.mark.asyncio
    async def test_capture_closes_page(self, browser, mock_page):
        """Test capture returns a document and closes the page."""
        document = await browser.capture("https://example.com")

        assert document.select_one("#a") is not None
        mock_page.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_navigation_failure(self, browser, mock_page):
        """Test navigation errors become CaptureError."""
        from browser_auto.exceptions import CaptureError
        mock_page.goto.side_effect = RuntimeError("net::ERR_NAME_NOT_RESOLVED")

        with pytest.raises(CaptureError) as exc_info:
            await browser.capture("https://nowhere.invalid")

        assert exc_info.value.url == "https://nowhere.invalid"
        mock_page.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close(self, browser):
        """Test close releases the context."""
        context = browser._context

        await browser.close()

        context.close.assert_awaited_once()
        assert browser._context is None
