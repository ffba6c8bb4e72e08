"""Read-only DOM queries used by the results workflow.

The workflow reads the page only through the PageQuery interface, so a
markup change touches selector strings, never the extraction logic.
"""

from typing import Any, List, Optional, Protocol

from playwright.async_api import Error as PlaywrightError


class PageQuery(Protocol):
    """Capability interface for querying rendered elements."""

    async def find_all(self, selector: str) -> List[Any]:
        ...

    async def find_one(self, container: Any, selector: str) -> Optional[Any]:
        ...

    async def text(self, element: Any) -> Optional[str]:
        ...


class PlaywrightPageQuery:
    """PageQuery backed by a Playwright page."""

    def __init__(self, page: Any):
        self.page = page

    async def find_all(self, selector: str) -> List[Any]:
        return await self.page.query_selector_all(selector)

    async def find_one(self, container: Any, selector: str) -> Optional[Any]:
        return await container.query_selector(selector)

    async def text(self, element: Any) -> Optional[str]:
        return await element.text_content()


async def read_field(query: PageQuery, element: Any, selector: str, sentinel: str) -> str:
    """
    Read the trimmed text of a sub-element.

    Args:
        query: PageQuery used for the lookup
        element: Container element (a result card)
        selector: Sub-element selector inside the container
        sentinel: Value returned when the sub-element is missing,
            empty, or detached mid-read

    Returns:
        Trimmed text or the sentinel
    """
    try:
        child = await query.find_one(element, selector)
        if child is None:
            return sentinel
        text = await query.text(child)
    except PlaywrightError:
        return sentinel

    if not text or not text.strip():
        return sentinel
    return text.strip()
