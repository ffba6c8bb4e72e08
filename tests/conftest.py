"""
Pytest fixtures and fakes for the results monitor test suite.
"""

from typing import Dict, List, Optional

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from tse_monitor.core.config import MonitorConfig
from tse_monitor.core.errors import NavigationError, SelectionError
from tse_monitor.dynamic.browser_engine import BrowserSession
from tse_monitor.dynamic.interaction_workflow import CandidateResult, PortalSelectors


SELECTORS = PortalSelectors()


class FakeElement:
    """Stands in for a Playwright ElementHandle."""

    def __init__(self, text: Optional[str] = None, children: Dict[str, "FakeElement"] = None,
                 detached: bool = False):
        self._text = text
        self.children = children or {}
        self.detached = detached

    async def query_selector(self, selector: str):
        if self.detached:
            raise PlaywrightError("Element is not attached to the DOM")
        return self.children.get(selector)

    async def text_content(self):
        if self.detached:
            raise PlaywrightError("Element is not attached to the DOM")
        return self._text


class FakePage:
    """Records actions and serves canned elements keyed by selector."""

    def __init__(self):
        self.actions: List[tuple] = []
        self.elements: Dict[str, List[FakeElement]] = {}
        self.rendered: set = set()
        self.broken_clicks: set = set()
        self.option_labels: List[str] = []
        self.picked: List[str] = []
        self.goto_failures = 0
        self.closed = False

    async def goto(self, url: str):
        self.actions.append(('goto', url))
        if self.goto_failures:
            self.goto_failures -= 1
            raise PlaywrightError("net::ERR_CONNECTION_RESET")

    async def wait_for_load_state(self, state: str):
        self.actions.append(('load_state', state))

    async def wait_for_timeout(self, milliseconds: int):
        self.actions.append(('pause', milliseconds))

    async def click(self, selector: str):
        self.actions.append(('click', selector))
        if selector in self.broken_clicks:
            raise PlaywrightTimeoutError(f"Timeout 30000ms exceeded waiting for {selector}")
        if self.option_labels and selector.startswith('mat-option:'):
            label = self._first_option(selector)
            if label is None:
                raise PlaywrightTimeoutError(f"Timeout 30000ms exceeded waiting for {selector}")
            self.picked.append(label)

    def _first_option(self, selector: str) -> Optional[str]:
        """First rendered option the selector hits, in DOM order."""
        text = selector.split('("', 1)[1].rsplit('")', 1)[0].replace('\\"', '"')
        exact = ':text-is(' in selector
        for label in self.option_labels:
            matched = (label == text) if exact else (text.lower() in label.lower())
            if matched:
                return label
        return None

    async def fill(self, selector: str, value: str):
        self.actions.append(('fill', selector, value))

    async def wait_for_selector(self, selector: str):
        self.actions.append(('wait', selector))
        if selector not in self.rendered:
            raise PlaywrightTimeoutError(f"Timeout 30000ms exceeded waiting for {selector}")

    async def query_selector_all(self, selector: str):
        if self.closed:
            raise PlaywrightError("Target page, context or browser has been closed")
        return list(self.elements.get(selector, []))

    async def reload(self):
        self.actions.append(('reload',))
        if self.closed:
            raise PlaywrightError("Target page, context or browser has been closed")

    async def close(self):
        self.closed = True


def make_card(name=None, percentage=None, votes=None, party=None) -> FakeElement:
    children = {}
    if name is not None:
        children[SELECTORS.card_name] = FakeElement(name)
    if percentage is not None:
        children[SELECTORS.card_percentage] = FakeElement(percentage)
    if votes is not None:
        children[SELECTORS.card_total_votes] = FakeElement(votes)
    if party is not None:
        children[SELECTORS.card_party] = FakeElement(party)
    return FakeElement(children=children)


class FakeSession:
    """BrowserSession stand-in that never launches a browser."""

    def __init__(self, config: MonitorConfig):
        self.config = config
        self.opened = 0
        self.closed = 0
        self.pauses: List[int] = []

    async def open(self):
        self.opened += 1

    async def close(self):
        self.closed += 1

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    def current_page(self):
        return None

    async def pause(self, milliseconds: int):
        self.pauses.append(milliseconds)


class ScriptedConsole:
    """ConsoleIO stand-in fed from a list of answers."""

    def __init__(self, answers: List[str]):
        self.answers = list(answers)
        self.prompts: List[str] = []
        self.lines: List[str] = []
        self.errors: List[str] = []
        self.clears = 0

    async def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {prompt}")
        return self.answers.pop(0).strip()

    def show(self, line: str = ""):
        self.lines.append(line)

    def error(self, line: str):
        self.errors.append(line)

    def clear(self):
        self.clears += 1

    @property
    def output(self) -> str:
        return "\n".join(self.lines + self.errors)


class FakeWorkflow:
    """Scripted InteractionWorkflow for orchestrator tests."""

    def __init__(self, session: FakeSession, localities: List[str] = None,
                 extractions: List = None, navigate_failures: int = 0):
        self.session = session
        self.config = session.config
        self.navigate_failures = navigate_failures
        self.navigate_calls = 0
        self.localities_by_call = [list(localities or [])]
        self.discover_calls = 0
        self.selected_regions: List[str] = []
        self.selected_localities: List[str] = []
        self.rejected_regions: set = set()
        self.rejected_localities: set = set()
        self.extractions = list(extractions or [])
        self.extract_calls = 0
        self.reloads = 0

    async def navigate(self):
        self.navigate_calls += 1
        if self.navigate_calls <= self.navigate_failures:
            raise NavigationError(f"attempt {self.navigate_calls} failed")

    async def select_region(self, code: str):
        if code in self.rejected_regions:
            self.rejected_regions.discard(code)
            raise SelectionError('region', code, "no option rendered")
        self.selected_regions.append(code)

    async def discover_localities(self) -> List[str]:
        index = min(self.discover_calls, len(self.localities_by_call) - 1)
        self.discover_calls += 1
        return list(self.localities_by_call[index])

    async def select_locality(self, name: str):
        if name in self.rejected_localities:
            self.rejected_localities.discard(name)
            raise SelectionError('locality', name, "no option rendered")
        self.selected_localities.append(name)

    async def reload(self):
        self.reloads += 1

    async def extract_results(self) -> List[CandidateResult]:
        self.extract_calls += 1
        outcome = self.extractions.pop(0) if self.extractions else []
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TSE_BASE_URL", "TSE_BROWSER", "TSE_HEADLESS", "TSE_TIMEOUT_MS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> MonitorConfig:
    return MonitorConfig(
        base_url="https://resultados.example.test",
        browser_type="firefox",
        settle_ms=10,
        discovery_pause_ms=5,
        clear_console=True,
        color=False
    )


@pytest.fixture
def page() -> FakePage:
    return FakePage()


@pytest.fixture
def session(config, page) -> BrowserSession:
    """A real BrowserSession wired to a fake page instead of a browser."""
    browser_session = BrowserSession(config)
    browser_session.page = page
    return browser_session


@pytest.fixture
def fake_session(config) -> FakeSession:
    return FakeSession(config)


@pytest.fixture
def candidates() -> List[CandidateResult]:
    return [
        CandidateResult("Maria Souza", "52,10%", "1.234.567 votos", "PXX"),
        CandidateResult("João Lima", "47,90%", "1.135.022 votos", "PYY"),
    ]


