from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from boundgen.core import DEFAULT_MAX_ARRAY_LENGTH, DEFAULT_MAX_STRING_LENGTH


@dataclass
class GenerationConfig:
    # Strings with `maxLength` at or above this get no max-length witnesses
    max_string_length: int
    # `maxItems` at or above this gets no oversized array witness
    max_array_length: int
    # Fail instead of recursing past this nesting level. `None` means unbounded
    max_depth: int | None

    __slots__ = ("max_string_length", "max_array_length", "max_depth")

    def __init__(
        self,
        *,
        max_string_length: int = DEFAULT_MAX_STRING_LENGTH,
        max_array_length: int = DEFAULT_MAX_ARRAY_LENGTH,
        max_depth: int | None = None,
    ) -> None:
        self.max_string_length = max_string_length
        self.max_array_length = max_array_length
        self.max_depth = max_depth

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GenerationConfig:
        return cls(
            max_string_length=data.get("max-string-length", DEFAULT_MAX_STRING_LENGTH),
            max_array_length=data.get("max-array-length", DEFAULT_MAX_ARRAY_LENGTH),
            max_depth=data.get("max-depth"),
        )

    def update(self, *, max_depth: int | None = None) -> None:
        """Apply command-line overrides. `None` keeps the configured value."""
        if max_depth is not None:
            self.max_depth = max_depth
