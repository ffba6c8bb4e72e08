"""End-to-end session flow for the results monitor.

Flow:
    1. Navigate to the portal (bounded retry, the only automatic retry)
    2. Prompt for a state until one matches the catalog and selects
    3. Discover the cities rendered for that state
    4. Prompt for a city until one matches the discovered set and selects
    5. Prompt for the refresh interval
    6. Extract and report once, then refresh on the interval until stopped

Prompt loops never give up on bad input. Refresh ticks never take the
session down: a failing tick is reported and the next one still runs.
"""

from typing import Dict, List, Optional

from ..catalog.regions import LocationCatalog, Region
from ..dynamic.interaction_workflow import CandidateResult, InteractionWorkflow
from ..utils.console import ConsoleIO, format_candidate, numbered
from ..utils.retry import RetryPolicy, retry_async
from .config import MonitorConfig
from .errors import NavigationError, NavigationExhaustedError, SelectionError
from .scheduler import RecurringTask


LIST_COMMANDS = ('1', 'list')

REGION_PROMPT = "Enter the state (e.g. SP) or 1 to list the states: "
LOCALITY_PROMPT = "Enter the city (e.g. São Paulo) or 1 to list the cities: "
INTERVAL_PROMPT = "How often should the results refresh? (in seconds) "


def is_list_command(answer: str) -> bool:
    return answer.strip().lower() in LIST_COMMANDS


class SessionOrchestrator:
    """
    Drives an InteractionWorkflow from launch to the refresh loop.

    Args:
        workflow: Workflow bound to the browser session it drives
        catalog: Valid regions
        console: Prompt/report boundary
        config: Retry bounds and console options
        answers: Optional pre-seeded answers keyed by 'region',
            'locality' and 'interval'; each is used once as the first
            reply to its prompt
        max_ticks: Stop the refresh loop after this many ticks
    """

    def __init__(
        self,
        workflow: InteractionWorkflow,
        catalog: LocationCatalog = None,
        console: ConsoleIO = None,
        config: MonitorConfig = None,
        answers: Optional[Dict[str, str]] = None,
        max_ticks: Optional[int] = None
    ):
        self.workflow = workflow
        self.session = workflow.session
        self.catalog = catalog or LocationCatalog()
        self.config = config or workflow.config
        self.console = console or ConsoleIO(color=self.config.color)
        self.answers = {k: v for k, v in (answers or {}).items() if v is not None}
        self.max_ticks = max_ticks
        self.refresh_task: Optional[RecurringTask] = None

    async def run(self):
        """Run the whole session. Always releases the browser."""
        self.console.show("Starting capture...")

        async with self.session:
            await self.navigate()
            region = await self.choose_region()
            localities = await self.discover_localities(region)
            await self.choose_locality(localities)
            interval = await self.ask_interval()

            self.report(await self.workflow.extract_results())

            self.refresh_task = RecurringTask(
                self.refresh,
                interval=interval,
                on_error=self._report_refresh_error,
                max_ticks=self.max_ticks
            )
            await self.refresh_task.run()

    def stop(self):
        """Cancel the refresh loop after the tick in progress."""
        if self.refresh_task:
            self.refresh_task.cancel()

    async def navigate(self):
        policy = RetryPolicy(
            max_attempts=self.config.max_navigation_attempts,
            retry_on=(NavigationError,)
        )

        def on_failure(attempt: int, error: Exception):
            self.console.error(f"Error loading the page (attempt {attempt}/{policy.max_attempts}): {error}")
            if attempt < policy.max_attempts:
                self.console.show("  Trying again...")

        try:
            await retry_async(self.workflow.navigate, policy, on_failure)
        except NavigationError as e:
            raise NavigationExhaustedError(policy.max_attempts, e) from e

        self.console.show("✓ Results portal loaded")

    async def choose_region(self) -> Region:
        while True:
            answer = await self._ask('region', REGION_PROMPT)

            if is_list_command(answer):
                self.show_regions()
                continue

            region = self.catalog.find(answer)
            if region is None:
                self.console.error("Invalid state. Please try again.\n")
                continue

            try:
                await self.workflow.select_region(region.code)
            except SelectionError as e:
                self.console.error(f"{e}. Please try again.\n")
                continue

            self.console.show(f"✓ State: {region.display_name} ({region.code})")
            return region

    async def discover_localities(self, region: Region) -> List[str]:
        attempts = self.config.discovery_attempts
        for attempt in range(1, attempts + 1):
            localities = await self.workflow.discover_localities()
            if localities:
                self.console.show(f"✓ {len(localities)} cities available")
                return localities

            if attempt < attempts:
                self.console.show(f"⚠ City list not rendered yet (attempt {attempt}/{attempts})")
                await self.session.pause(self.config.discovery_pause_ms)

        raise SelectionError('locality', region.code, "no cities were listed for this state")

    async def choose_locality(self, localities: List[str]) -> str:
        by_key = {name.lower(): name for name in localities}

        while True:
            answer = await self._ask('locality', LOCALITY_PROMPT)

            if is_list_command(answer):
                self.show_localities(localities)
                continue

            locality = by_key.get(answer.lower())
            if locality is None:
                self.console.error("Invalid city. Please try again.\n")
                continue

            try:
                await self.workflow.select_locality(locality)
            except SelectionError as e:
                self.console.error(f"{e}. Please try again.\n")
                continue

            self.console.show(f"✓ City: {locality}")
            return locality

    async def ask_interval(self) -> int:
        """Return the refresh interval in seconds."""
        while True:
            answer = await self._ask('interval', INTERVAL_PROMPT)
            # isdecimal, not isdigit: int() rejects superscripts like '²'
            seconds = int(answer) if answer.isdecimal() else 0
            if seconds > 0:
                self.console.show(f"✓ Refreshing every {seconds}s ({seconds * 1000} ms)")
                return seconds
            self.console.error("Interval must be a positive whole number of seconds.\n")

    async def refresh(self):
        """One tick: reload, extract, report."""
        if self.config.clear_console:
            self.console.clear()
        self.console.show("Refreshing results...")
        await self.workflow.reload()
        self.report(await self.workflow.extract_results())

    def report(self, results: List[CandidateResult]):
        self.console.show(f"Candidates found: {len(results)}")
        for candidate in results:
            self.console.show(format_candidate(candidate, color=self.config.color))

    def show_regions(self):
        self.console.show("\nBrazilian states:")
        for line in numbered(f"{r.display_name} – {r.code}" for r in self.catalog):
            self.console.show(line)
        self.console.show("")

    def show_localities(self, localities: List[str]):
        self.console.show("\nCities:")
        for line in numbered(localities):
            self.console.show(line)
        self.console.show("")

    async def _ask(self, key: str, prompt: str) -> str:
        preset = self.answers.pop(key, None)
        if preset is not None:
            self.console.show(f"{prompt}{preset}")
            return preset.strip()
        return await self.console.ask(prompt)

    def _report_refresh_error(self, tick: int, error: Exception):
        self.console.error(f"Error during refresh #{tick}: {error}")
