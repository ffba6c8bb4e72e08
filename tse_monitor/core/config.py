"""Configuration management for the results monitor."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


SUPPORTED_BROWSERS = ('firefox', 'chromium', 'webkit')


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class MonitorConfig:
    """Configuration for the results monitor."""

    # Target portal
    base_url: str = "https://resultados.tse.jus.br"

    # Browser settings
    browser_type: str = "firefox"
    headless: bool = True
    timeout: int = 30000  # ms, default for every page action
    settle_ms: int = 3000  # pause before the first page load

    # Workflow policy
    max_navigation_attempts: int = 3
    discovery_attempts: int = 3
    discovery_pause_ms: int = 1000

    # Console output
    clear_console: bool = True
    color: bool = True

    def __post_init__(self):
        """Override defaults from environment variables."""
        self.base_url = os.getenv("TSE_BASE_URL", self.base_url)
        self.browser_type = os.getenv("TSE_BROWSER", self.browser_type).strip().lower()
        self.headless = _env_flag("TSE_HEADLESS", self.headless)

        timeout = os.getenv("TSE_TIMEOUT_MS")
        if timeout and timeout.strip().isdecimal():
            self.timeout = int(timeout)

    def validate(self) -> bool:
        """Validate configuration."""
        if self.browser_type not in SUPPORTED_BROWSERS:
            print(f"⚠ Warning: unsupported browser '{self.browser_type}' "
                  f"(expected one of {', '.join(SUPPORTED_BROWSERS)})")
            return False
        if self.max_navigation_attempts < 1:
            print("⚠ Warning: max_navigation_attempts must be at least 1")
            return False
        if self.timeout <= 0:
            print("⚠ Warning: timeout must be positive")
            return False
        return True
