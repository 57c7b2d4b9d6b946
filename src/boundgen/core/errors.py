"""Base error handling shared by the generators, the loaders and the CLI."""

from __future__ import annotations

import enum
import traceback
from collections.abc import Sequence


class BoundgenError(Exception):
    """Base exception class for all boundgen errors."""


def format_path(path: Sequence[str | int]) -> str:
    """Render a JSON path to a schema node, e.g. `properties.items.0`."""
    if not path:
        return "<root>"
    return ".".join(str(segment) for segment in path)


class UnknownType(BoundgenError):
    """Schema's `type` tag has no registered generator."""

    def __init__(self, type: object, path: Sequence[str | int] = ()) -> None:
        self.type = type
        self.path = list(path)

    def __str__(self) -> str:
        return f"Unknown type: `{self.type}` at {format_path(self.path)}"


class MalformedArraySchema(BoundgenError):
    """Array schema declares neither `items` nor `prefixItems`."""

    def __init__(self, path: Sequence[str | int] = ()) -> None:
        self.path = list(path)

    def __str__(self) -> str:
        return f"Array schema at {format_path(self.path)} must define `items` or a non-empty `prefixItems`"


class SchemaTooDeep(BoundgenError):
    """Schema nesting exceeds the configured `max-depth`."""

    def __init__(self, max_depth: int, path: Sequence[str | int] = ()) -> None:
        self.max_depth = max_depth
        self.path = list(path)

    def __str__(self) -> str:
        return (
            f"Schema nesting exceeds the maximum depth of {self.max_depth} at {format_path(self.path)}. "
            "Self-referential schemas are not supported"
        )


class LoaderErrorKind(str, enum.Enum):
    FILE_NOT_FOUND = "file_not_found"
    SYNTAX_ERROR = "syntax_error"
    UNSUPPORTED_FORMAT = "unsupported_format"
    INVALID_SCHEMA = "invalid_schema"


class LoaderError(BoundgenError):
    """Failed to load a schema document."""

    def __init__(
        self,
        kind: LoaderErrorKind,
        message: str,
        path: str | None = None,
        extras: list[str] | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.path = path
        self.extras = extras or []

    def __str__(self) -> str:
        return self.message


def format_exception(error: BaseException, *, with_traceback: bool = False) -> str:
    """Format exception as text."""
    if with_traceback:
        return "".join(traceback.format_exception(type(error), error, error.__traceback__))
    return "".join(traceback.format_exception_only(type(error), error)).strip()
