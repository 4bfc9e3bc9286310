"""System scheduling and execution."""

from itemgen.scheduling.models import SchedulerConfig
from itemgen.scheduling.scheduler import SimpleScheduler

__all__ = [
    "SimpleScheduler",
    "SchedulerConfig",
]
