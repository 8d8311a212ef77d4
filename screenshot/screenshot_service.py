"""
Screenshot capture service using Playwright
Each capture owns its own browser and never raises on capture failure
"""

import logging
from typing import Any, Callable, Dict, Optional

from playwright.async_api import async_playwright

from models.page_pair import (
    Captured,
    CaptureOutcome,
    CaptureResult,
    DEFAULT_HTTP_STATUS,
    Failed,
)
from .config import ScreenshotConfig
from .placeholder import create_placeholder_image

SCROLL_TO_BOTTOM_SCRIPT = "window.scrollTo(0, document.body.scrollHeight)"


class NavigationStatus:
    """
    Records the HTTP status of the top-level navigation response of one page

    The first navigation response in the main frame is the response for the
    requested URL, before any redirect. Responses are matched by request kind
    and frame, never by URL text.
    """

    def __init__(self, main_frame=None):
        self.main_frame = main_frame
        self.observed: Optional[int] = None

    def observe(self, response) -> None:
        if self.observed is not None:
            return
        if not response.request.is_navigation_request():
            return
        if self.main_frame is not None and response.frame != self.main_frame:
            return
        self.observed = response.status

    def observe_goto(self, response) -> None:
        # goto returns None for same-document navigations
        if self.observed is None and response is not None:
            self.observed = response.status

    @property
    def status(self) -> int:
        return self.observed if self.observed is not None else DEFAULT_HTTP_STATUS


class ScreenshotService:
    def __init__(self, browser_config: Optional[Dict[str, Any]] = None,
                 playwright_factory: Optional[Callable] = None):
        """
        Initialize screenshot service

        Args:
            browser_config: Overrides for ScreenshotConfig.get_browser_config()
            playwright_factory: Callable returning an async Playwright context
                manager, defaults to playwright's async_playwright
        """
        self.logger = logging.getLogger(__name__)
        self.config = ScreenshotConfig.get_browser_config()
        if browser_config:
            self.config.update(browser_config)
        self.playwright_factory = playwright_factory or async_playwright

    async def take_screenshot(self, url: str) -> CaptureResult:
        """
        Capture a full-page screenshot of a URL

        Waits for network idle, scrolls to the bottom to trigger lazy
        loading, then waits the settle delay before capturing.

        Args:
            url (str): Absolute URL to capture

        Returns:
            CaptureResult: Captured(image, status) or Failed(status, reason)
        """
        navigation = NavigationStatus()
        try:
            async with self.playwright_factory() as p:
                browser = await p.chromium.launch(
                    headless=self.config['headless'],
                    args=self.config['browser_args']
                )

                try:
                    page = await browser.new_page(viewport={
                        'width': self.config['viewport_width'],
                        'height': self.config['viewport_height']
                    })
                    navigation.main_frame = page.main_frame
                    page.on('response', navigation.observe)

                    self.logger.info(f"Navigating to: {url}")
                    response = await page.goto(url, timeout=self.config['timeout'], wait_until="networkidle")
                    navigation.observe_goto(response)

                    await page.evaluate(SCROLL_TO_BOTTOM_SCRIPT)
                    await page.wait_for_timeout(self.config['settle_delay'])

                    image = await page.screenshot(full_page=True)
                    self.logger.info(f"Captured {url} (HTTP {navigation.status})")
                    return Captured(image=image, status=navigation.status)

                finally:
                    await browser.close()

        except Exception as e:
            self.logger.error(f"Error capturing screenshot for {url}: {str(e)}")
            return Failed(status=navigation.status, reason=str(e))

    async def capture(self, url: str) -> CaptureOutcome:
        """
        Capture a URL, substituting a placeholder panel when the capture fails

        Args:
            url (str): Absolute URL to capture

        Returns:
            CaptureOutcome: Always carries an image
        """
        result = await self.take_screenshot(url)

        if isinstance(result, Captured):
            return CaptureOutcome(image=result.image, http_status=result.status, succeeded=True)

        self.logger.warning(f"Using placeholder for {url} (HTTP {result.status})")
        return CaptureOutcome(
            image=create_placeholder_image(result.status, result.reason),
            http_status=result.status,
            succeeded=False,
            reason=result.reason
        )
