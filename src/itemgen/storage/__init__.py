"""World store backends."""

from itemgen.storage.local import LocalStorage
from itemgen.storage.protocol import AIR, InvalidEntityError, WorldStore

__all__ = [
    "AIR",
    "InvalidEntityError",
    "WorldStore",
    "LocalStorage",
]
