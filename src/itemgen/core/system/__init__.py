"""System functionality: decorator, descriptors and execution protocol."""

from itemgen.core.system.core import system
from itemgen.core.system.models import PHASES, ExecutionStrategy, SystemDescriptor

__all__ = [
    "system",
    "SystemDescriptor",
    "ExecutionStrategy",
    "PHASES",
]
