"""Core release selection logic."""
