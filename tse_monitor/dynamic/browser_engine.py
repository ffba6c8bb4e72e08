"""Browser session lifecycle for the results portal (Playwright)."""

from typing import Any, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from ..core.config import MonitorConfig
from ..core.errors import NotInitializedError


class BrowserSession:
    """
    One browser, one context, one page.

    Handles launch, page access and cleanup. The page handle is owned
    exclusively by whoever drives the current workflow step.
    """

    def __init__(self, config: MonitorConfig = None):
        self.config = config or MonitorConfig()
        self.playwright = None
        self.browser = None
        self.context = None
        self.page = None

    async def open(self) -> Any:
        """
        Launch a headless browser with download permission and a neutral
        geolocation grant. Any session already open is closed first.

        Returns:
            The new active page
        """
        if self.browser or self.playwright:
            await self.close()

        try:
            self.playwright = await async_playwright().start()
            launcher = getattr(self.playwright, self.config.browser_type)
            self.browser = await launcher.launch(headless=self.config.headless)

            self.context = await self.browser.new_context(
                permissions=['geolocation'],
                geolocation={'latitude': 0, 'longitude': 0},
                accept_downloads=True
            )

            self.page = await self.context.new_page()
            self.page.set_default_timeout(self.config.timeout)
        except Exception:
            await self.close()
            raise

        print(f"✓ Browser initialized ({self.config.browser_type})")
        return self.page

    async def close(self):
        """Close page, context and browser. Safe to call more than once."""
        try:
            for name, resource in (('page', self.page), ('context', self.context), ('browser', self.browser)):
                if resource:
                    try:
                        await resource.close()
                    except PlaywrightError as e:
                        print(f"⚠ Cleanup warning ({name}): {e}")
            if self.playwright:
                try:
                    await self.playwright.stop()
                    print("✓ Browser cleanup complete")
                except PlaywrightError as e:
                    print(f"⚠ Cleanup warning (driver): {e}")
        finally:
            self.page = None
            self.context = None
            self.browser = None
            self.playwright = None

    def current_page(self) -> Any:
        """Return the active page or fail if open() was never called."""
        if self.page is None:
            raise NotInitializedError()
        return self.page

    async def pause(self, milliseconds: int):
        """Suspend for a fixed duration on the active page."""
        if self.page is None:
            raise NotInitializedError()
        await self.page.wait_for_timeout(milliseconds)

    @property
    def is_open(self) -> bool:
        return self.page is not None

    async def __aenter__(self) -> "BrowserSession":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> Optional[bool]:
        await self.close()
        return None
