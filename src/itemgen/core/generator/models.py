"""Generator models: decoded configuration, validated requests and phases.

Usage:
    request = GeneratorRequest.from_form_values(["200", "minecraft:diamond", "1"])
    request.interval_ticks  # 200

    GeneratorRequest.from_form_values(["soon", "diamond", "1"])  # raises InvalidRequestError
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from itemgen.core.types import BlockPos

DEFAULT_NAMESPACE = "minecraft:"


class InvalidRequestError(ValueError):
    """Raised when raw operator input cannot become a generator configuration."""

    pass


class GeneratorPhase(Enum):
    """Countdown state of one generator."""

    UNINITIALIZED = auto()  # Discovered, countdown not yet set in this run
    COUNTING = auto()  # remaining in [1, interval]
    EMITTING = auto()  # Transient: countdown hit zero within the current tick
    DESTROYED = auto()  # Terminal, marker and anchor removed


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Configuration decoded from a marker tag.

    Integer fields that failed to parse are None. Such a config is invalid and
    must never be emitted from.
    """

    interval_ticks: int | None
    item_id: str
    item_count: int | None
    anchor: BlockPos | None = None

    @property
    def is_valid(self) -> bool:
        return (
            self.interval_ticks is not None
            and self.interval_ticks > 0
            and self.item_count is not None
            and ":" in self.item_id
        )


class GeneratorRequest(BaseModel):
    """Validated configuration request coming from the settings form."""

    model_config = ConfigDict(frozen=True)

    interval_ticks: int = Field(gt=0)
    item_id: str = Field(min_length=1)
    item_count: int = Field(gt=0)

    @field_validator("interval_ticks", "item_count", mode="before")
    @classmethod
    def _strip_numbers(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("item_id")
    @classmethod
    def _check_namespace(cls, value: str, info: ValidationInfo) -> str:
        namespace = (info.context or {}).get("namespace", DEFAULT_NAMESPACE)
        if not value.startswith(namespace):
            raise ValueError(f"must start with {namespace!r}")
        if len(value) == len(namespace):
            raise ValueError("item name is missing")
        if "," in value:
            raise ValueError("must not contain ','")
        return value

    @classmethod
    def from_form_values(
        cls,
        values: Sequence[Any],
        namespace: str = DEFAULT_NAMESPACE,
    ) -> GeneratorRequest:
        """Validate the three raw form fields (interval, item id, item count).

        Args:
            values: Raw form values in field order.
            namespace: Required item identifier prefix.

        Returns:
            Validated request.

        Raises:
            InvalidRequestError: If any field is missing or invalid.
        """
        if len(values) < 3:
            raise InvalidRequestError(f"expected 3 form values, got {len(values)}")
        data = {
            "interval_ticks": values[0],
            "item_id": values[1],
            "item_count": values[2],
        }
        try:
            return cls.model_validate(data, context={"namespace": namespace})
        except ValidationError as e:
            reasons = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise InvalidRequestError(reasons) from e
