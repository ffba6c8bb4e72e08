"""Main entry point for the results monitor."""

import argparse
import asyncio
import sys

from playwright.async_api import Error as PlaywrightError

from tse_monitor.core.config import MonitorConfig, SUPPORTED_BROWSERS
from tse_monitor.core.errors import MonitorError
from tse_monitor.core.orchestrator import SessionOrchestrator
from tse_monitor.dynamic.browser_engine import BrowserSession
from tse_monitor.dynamic.interaction_workflow import InteractionWorkflow
from tse_monitor.utils.console import ConsoleIO


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Follow live TSE election results for one city',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tse-monitor                                   # Interactive prompts
  tse-monitor --region SP --locality Campinas   # Skip the location prompts
  tse-monitor --region SP --locality Campinas --interval 30
  tse-monitor --headed --browser chromium       # Watch the browser work
        """
    )

    parser.add_argument('--region', type=str, default=None, help='State code or name (e.g. SP)')
    parser.add_argument('--locality', type=str, default=None, help='City name (e.g. Campinas)')
    parser.add_argument('--interval', type=str, default=None, help='Refresh interval in seconds')
    parser.add_argument('--ticks', type=int, default=None, help='Stop after this many refreshes (default: run forever)')
    parser.add_argument('--url', type=str, default=None, help='Results portal URL')
    parser.add_argument('--browser', type=str, default=None, choices=SUPPORTED_BROWSERS, help='Browser engine (default: firefox)')
    parser.add_argument('--headed', action='store_true', help='Show the browser window')
    parser.add_argument('--no-clear', action='store_true', help='Do not clear the console between refreshes')
    parser.add_argument('--no-color', action='store_true', help='Disable coloured output')

    return parser


def build_config(args: argparse.Namespace) -> MonitorConfig:
    config = MonitorConfig()
    if args.url:
        config.base_url = args.url
    if args.browser:
        config.browser_type = args.browser
    if args.headed:
        config.headless = False
    if args.no_clear:
        config.clear_console = False
    if args.no_color:
        config.color = False
    return config


def main(argv=None) -> int:
    """Main function to run the monitor."""
    args = build_parser().parse_args(argv)
    config = build_config(args)

    if not config.validate():
        print("✗ Invalid configuration. Exiting.")
        return 1

    session = BrowserSession(config)
    orchestrator = SessionOrchestrator(
        InteractionWorkflow(session, config),
        console=ConsoleIO(color=config.color),
        config=config,
        answers={'region': args.region, 'locality': args.locality, 'interval': args.interval},
        max_ticks=args.ticks
    )

    try:
        asyncio.run(orchestrator.run())
    except KeyboardInterrupt:
        print("\n✓ Stopped.")
    except MonitorError as e:
        print(f"\n✗ Scraping failed: {e}")
        return 1
    except PlaywrightError as e:
        print(f"\n✗ Browser failed: {e}")
        print(f"  If the browser is missing, run: playwright install {config.browser_type}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
