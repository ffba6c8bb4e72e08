"""Browser-driven access to the results portal.

Components:
    - browser_engine: Playwright browser session lifecycle
    - page_query: Read-only DOM query interface and field reader
    - interaction_workflow: One UI step per call, portal selectors
"""

from .browser_engine import BrowserSession
from .page_query import PageQuery, PlaywrightPageQuery, read_field
from .interaction_workflow import InteractionWorkflow, PortalSelectors, CandidateResult

__all__ = [
    'BrowserSession',
    'PageQuery',
    'PlaywrightPageQuery',
    'read_field',
    'InteractionWorkflow',
    'PortalSelectors',
    'CandidateResult'
]
