"""Entry point for the results monitor - run with: python run.py"""

import sys
import os
import asyncio

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


if __name__ == "__main__":
    print("🗳️  TSE Live Results Monitor\n")

    # Fix for Windows: Set event loop policy for subprocess support (Playwright)
    if sys.platform == 'win32':
        asyncio.set_event_loop_policy(asyncio.WindowsProactorEventLoopPolicy())

    from tse_monitor.main import main
    sys.exit(main())
