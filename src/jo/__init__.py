"""jo: a small personal task tracker driven by free-text commands."""

__version__ = "0.3.0"
