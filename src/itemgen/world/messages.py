"""Player-facing chat messages (section-sign color codes)."""

INVALID_INPUT = "§4Invalid generator settings: {reason}"
FORM_FAILED = "§4Failed to show the generator settings form: {error}"
GENERATOR_PLACED = "§aGenerator set: {count} x {item_id} every {interval} ticks"

ANCHOR_MISSING = "§gGenerator removed because its block no longer exists."
INVALID_GENERATOR = "§4An invalid generator was removed."
INVALID_ITEM = "§4Generator removed after trying to spawn an invalid item."
INVALID_CONFIG = "§4Generator removed because its configuration could not be read."

BREAK_DENIED = "§gGenerators can only be broken in §acreative mode§g."
