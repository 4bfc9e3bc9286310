"""Entity identity functionality: lightweight IDs."""

from itemgen.core.identity.models import EntityId

__all__ = [
    "EntityId",
]
