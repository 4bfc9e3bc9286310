"""Scheduling models and configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SchedulerConfig:
    """Configuration for scheduler behavior.

    Passed to scheduler at construction.
    """

    fail_fast: bool = False
    """Re-raise a system's exception instead of logging it and moving on."""
