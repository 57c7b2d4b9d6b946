from __future__ import annotations

import difflib
from collections.abc import Callable
from typing import TYPE_CHECKING

from boundgen.core.errors import BoundgenError

if TYPE_CHECKING:
    from jsonschema import ValidationError


class ConfigError(BoundgenError):
    """Invalid configuration."""

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> ConfigError:
        formatter = _FORMATTERS.get(str(error.validator))
        if formatter is None:
            return cls(error.message)
        return cls(formatter(error))


def path_to_section_name(path: list[str | int]) -> str:
    if not path:
        return "root"
    return ".".join(str(part) for part in path)


def _split(error: ValidationError) -> tuple[str, str | int]:
    """Section name and the offending key of a keyword-level error."""
    path = list(error.path)
    return path_to_section_name(path[:-1]), path[-1]


def _too_low(error: ValidationError) -> str:
    section, name = _split(error)
    return (
        f"Error in {section} section:\n  Value too low:\n\n"
        f"  - '{name}' -> Must be at least {error.validator_value}, but got {error.instance}."
    )


def _wrong_type(error: ValidationError) -> str:
    section, name = _split(error)
    return (
        f"Error in {section} section:\n  Type error:\n\n"
        f"  - '{name}' -> Expected {error.validator_value}, "
        f"but got {type(error.instance).__name__}: {error.instance!r}"
    )


def _unknown_properties(error: ValidationError) -> str:
    section = path_to_section_name(list(error.path))
    known = sorted(error.schema.get("properties", {}))
    lines = []
    for name in sorted(set(error.instance) - set(known)):
        line = f"  Unknown property '{name}'."
        matches = difflib.get_close_matches(name, known, n=1)
        if matches:
            line += f" Did you mean '{matches[0]}'?"
        lines.append(line)
    details = "\n".join(lines)
    return f"Error in {section} section:\n{details}\n\n  Supported properties: {', '.join(known)}"


_FORMATTERS: dict[str, Callable[[ValidationError], str]] = {
    "minimum": _too_low,
    "type": _wrong_type,
    "additionalProperties": _unknown_properties,
}
