"""Generator functionality: tag codec, decoded configs and request validation."""

from itemgen.core.generator.codec import (
    TAG_PREFIX,
    TagFormatError,
    decode,
    encode,
    is_generator_tag,
    normalize_countdown,
    parse_countdown,
)
from itemgen.core.generator.models import (
    GeneratorConfig,
    GeneratorPhase,
    GeneratorRequest,
    InvalidRequestError,
)

__all__ = [
    # Codec
    "TAG_PREFIX",
    "TagFormatError",
    "encode",
    "decode",
    "is_generator_tag",
    "parse_countdown",
    "normalize_countdown",
    # Models
    "GeneratorConfig",
    "GeneratorPhase",
    "GeneratorRequest",
    "InvalidRequestError",
]
