"""
Playwright Browser - Launch a browser and capture pages into documents.
"""

from typing import Any, Optional
import logging

from browser_auto.config.settings import BrowserSettings
from browser_auto.dom.capture import capture_document
from browser_auto.dom.document import HTMLDocument
from browser_auto.exceptions import BrowserLaunchError, CaptureError

logger = logging.getLogger(__name__)


class PlaywrightBrowser:
    """
    Thin Playwright wrapper for live capture.
    
    Example:
        >>> async with PlaywrightBrowser() as browser:
        ...     document = await browser.capture("https://example.com")
    """
    
    def __init__(self, settings: Optional[BrowserSettings] = None):
        """Initialize the browser (not launched yet)."""
        self.settings = settings or BrowserSettings()
        self._playwright: Any = None
        self._browser: Any = None
        self._context: Any = None
    
    @property
    def is_connected(self) -> bool:
        """Check if browser is connected."""
        return self._browser is not None and self._browser.is_connected()
    
    async def launch(self, **options: Any) -> None:
        """
        Launch the browser.
        
        Args:
            **options: Additional Playwright launch options
        """
        try:
            from playwright.async_api import async_playwright
            
            self._playwright = await async_playwright().start()
            
            launchers = {
                "chromium": self._playwright.chromium,
                "firefox": self._playwright.firefox,
                "webkit": self._playwright.webkit,
            }
            launcher = launchers.get(self.settings.browser_type, self._playwright.chromium)
            
            self._browser = await launcher.launch(headless=self.settings.headless, **options)
            self._context = await self._browser.new_context(
                viewport={
                    "width": self.settings.viewport_width,
                    "height": self.settings.viewport_height,
                },
            )
            
            logger.info(
                f"Launched {self.settings.browser_type} browser (headless={self.settings.headless})"
            )
            
        except Exception as e:
            await self.close()
            raise BrowserLaunchError(f"Failed to launch browser: {e}") from e
    
    async def open(self, url: str) -> Any:
        """
        Open a URL in a new page.
        
        Returns:
            Playwright page
        """
        if self._context is None:
            raise BrowserLaunchError("Browser not launched. Call launch() first.")
        
        page = await self._context.new_page()
        try:
            await page.goto(
                url,
                wait_until=self.settings.wait_until,
                timeout=self.settings.timeout_ms,
            )
        except Exception as e:
            await page.close()
            raise CaptureError(f"Navigation failed: {e}", url=url) from e
        return page
    
    async def capture(self, url: str) -> HTMLDocument:
        """
        Navigate to a URL and capture it.
        
        Args:
            url: Page URL
            
        Returns:
            Captured document with layout
        """
        page = await self.open(url)
        try:
            return await capture_document(page)
        finally:
            await page.close()
    
    async def close(self) -> None:
        """Close the browser and cleanup."""
        if self._context:
            await self._context.close()
            self._context = None
        
        if self._browser:
            await self._browser.close()
            self._browser = None
        
        if self._playwright:
            await self._playwright.stop()
            self._playwright = None
        
        logger.debug("Browser closed")
    
    async def __aenter__(self) -> "PlaywrightBrowser":
        await self.launch()
        return self
    
    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
