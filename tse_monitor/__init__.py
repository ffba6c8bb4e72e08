"""Live election results monitor for the TSE results portal."""

__version__ = "1.0.0"
