"""CLI commands for allbranding."""
