"""allbranding - resolve the latest matching asset from GitHub releases."""

__version__ = "0.1.0"
