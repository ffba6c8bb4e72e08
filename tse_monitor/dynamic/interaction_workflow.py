"""Step-by-step interaction with the TSE results portal.

Each public method performs exactly one UI step on the current page:

    navigate → select_region → discover_localities → select_locality → extract_results

Steps are safe to repeat at the UI level but are not transactional. A
failure half-way through a step leaves the page in an intermediate state
that only a fresh navigate() is guaranteed to repair.

Every selector the portal markup depends on lives in PortalSelectors.
"""

from dataclasses import dataclass
from typing import Callable, List

from playwright.async_api import Error as PlaywrightError

from ..core.config import MonitorConfig
from ..core.errors import ExtractionError, NavigationError, SelectionError
from .browser_engine import BrowserSession
from .page_query import PageQuery, PlaywrightPageQuery, read_field


NAME_NOT_FOUND = "Name not found"
PERCENTAGE_NOT_FOUND = "0,00%"
VOTES_NOT_FOUND = "0 votos"
PARTY_NOT_FOUND = "Party not found"


def _escape(text: str) -> str:
    return text.replace('"', '\\"')


@dataclass(frozen=True)
class PortalSelectors:
    """Selectors for the results portal markup."""
    nationwide_option: str = 'text=Brasil'
    region_input: str = 'input[formcontrolname="uf"]'
    region_options: str = '#mat-autocomplete-0 mat-option'
    locality_input: str = 'input[formcontrolname="municipio"]'
    locality_options: str = '#mat-autocomplete-1 mat-option'
    locality_option_label: str = '#mat-autocomplete-1 mat-option .mdc-list-item__primary-text'
    option_by_text: str = 'mat-option:has-text("{text}")'
    option_by_label: str = 'mat-option:has(.mdc-list-item__primary-text:text-is("{text}"))'
    confirm_button: str = 'text=Confirmar'
    result_card: str = 'app-cartao-candidato'
    card_name: str = 'div.font-bold.text-2xl.tracking-tight:not(.text-ion-tertiary)'
    card_percentage: str = 'div.font-bold.mb-1.text-2xl.text-ion-tertiary.tracking-tight'
    card_total_votes: str = '.text-gray-600.text-xs'
    card_party: str = '.text-gray-550.text-xs'

    def option(self, text: str) -> str:
        """Option whose label contains text (case-insensitive)."""
        return self.option_by_text.format(text=_escape(text))

    def option_exact(self, label: str) -> str:
        """Option whose label is exactly label."""
        return self.option_by_label.format(text=_escape(label))


@dataclass(frozen=True)
class CandidateResult:
    """One candidate's aggregated figures as rendered on a result card."""
    name: str
    vote_percentage: str
    total_votes: str
    party: str


class InteractionWorkflow:
    """
    Drives the portal UI one step at a time.

    The workflow keeps no progress flags: how far the session got is only
    visible through which steps have completed on the live page.
    """

    def __init__(
        self,
        session: BrowserSession,
        config: MonitorConfig = None,
        selectors: PortalSelectors = None,
        query_factory: Callable[..., PageQuery] = PlaywrightPageQuery
    ):
        self.session = session
        self.config = config or session.config
        self.selectors = selectors or PortalSelectors()
        self.query_factory = query_factory

    async def navigate(self):
        """Load the results portal and open the nationwide view."""
        page = self.session.current_page()

        try:
            await self.session.pause(self.config.settle_ms)
            await page.goto(self.config.base_url)
            await page.wait_for_load_state('domcontentloaded')
            await page.click(self.selectors.nationwide_option)
        except PlaywrightError as e:
            raise NavigationError(f"Failed to load {self.config.base_url}: {e}") from e

    async def select_region(self, code: str):
        """Type a region code and pick the matching autocomplete option."""
        await self._fill_and_pick(
            field='region',
            value=code,
            input_selector=self.selectors.region_input,
            options_selector=self.selectors.region_options,
            option_selector=self.selectors.option(code)
        )

    async def discover_localities(self) -> List[str]:
        """
        Snapshot the locality options rendered after region selection.

        Returns:
            Option labels in DOM order; empty if the panel has not rendered
        """
        page = self.session.current_page()

        try:
            await page.wait_for_selector(self.selectors.locality_options)
        except PlaywrightError:
            return []

        query = self.query_factory(page)
        labels = []
        try:
            for element in await query.find_all(self.selectors.locality_option_label):
                text = await query.text(element)
                if text and text.strip():
                    labels.append(text.strip())
        except PlaywrightError:
            return []

        return labels

    async def select_locality(self, name: str):
        """Pick a locality and confirm it, which loads the results view."""
        await self._fill_and_pick(
            field='locality',
            value=name,
            input_selector=self.selectors.locality_input,
            options_selector=self.selectors.locality_options,
            option_selector=self.selectors.option_exact(name)
        )

        page = self.session.current_page()
        try:
            await page.click(self.selectors.confirm_button)
        except PlaywrightError as e:
            raise SelectionError('locality', name, f"confirmation failed: {e}") from e

    async def extract_results(self) -> List[CandidateResult]:
        """
        Read every result card on the current page.

        Missing sub-fields fall back to their sentinel instead of failing
        the card. Order follows the DOM and is not a ranking.
        """
        page = self._live_page()
        query = self.query_factory(page)

        try:
            cards = await query.find_all(self.selectors.result_card)
        except PlaywrightError as e:
            raise ExtractionError(f"Results page unreachable: {e}") from e

        results = []
        for card in cards:
            results.append(CandidateResult(
                name=await read_field(query, card, self.selectors.card_name, NAME_NOT_FOUND),
                vote_percentage=await read_field(
                    query, card, self.selectors.card_percentage, PERCENTAGE_NOT_FOUND
                ),
                total_votes=await read_field(
                    query, card, self.selectors.card_total_votes, VOTES_NOT_FOUND
                ),
                party=await read_field(query, card, self.selectors.card_party, PARTY_NOT_FOUND),
            ))

        return results

    async def reload(self):
        """Reload the results view in place."""
        page = self._live_page()
        try:
            await page.reload()
            await page.wait_for_load_state('domcontentloaded')
        except PlaywrightError as e:
            raise ExtractionError(f"Reload failed: {e}") from e

    def _live_page(self):
        if not self.session.is_open:
            raise ExtractionError("Results page unreachable: browser session is closed")
        return self.session.current_page()

    async def _fill_and_pick(self, field: str, value: str, input_selector: str, options_selector: str,
                             option_selector: str):
        page = self.session.current_page()

        try:
            await page.click(input_selector)
            await page.fill(input_selector, value)
            await page.wait_for_selector(options_selector)
            await page.click(option_selector)
        except PlaywrightError as e:
            raise SelectionError(field, value, str(e)) from e
