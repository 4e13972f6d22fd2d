"""Data models for allbranding."""

from allbranding.models.release import Release, Asset
from allbranding.models.result import SelectionResult

__all__ = ["Release", "Asset", "SelectionResult"]
