from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from boundgen.core import json
from boundgen.core.transforms import jsonify


@dataclass
class GeneratedData:
    """Valid and invalid witnesses for a single schema.

    The order of both lists is stable across runs. `valid[0]` is the canonical
    representative of the schema, the value used for it inside a parent object or array.
    """

    valid: list[Any]
    invalid: list[Any]

    __slots__ = ("valid", "invalid")

    @property
    def canonical(self) -> Any:
        return self.valid[0]

    @property
    def alternatives(self) -> list[Any]:
        """Valid values other than the canonical one."""
        return self.valid[1:]

    def to_dict(self) -> dict[str, list[Any]]:
        """JSON-compatible form, see `jsonify`."""
        return {"valid": jsonify(self.valid), "invalid": jsonify(self.invalid)}

    def to_json(self, *, indent: bool = True) -> str:
        return json.dumps(self.to_dict(), indent=indent)


def _dedup_key(value: Any) -> tuple[Any, Any]:
    # `True == 1` in Python, while `5 == 5.0` is the numeric equality boundaries rely on
    if isinstance(value, bool):
        return (bool, value)
    if isinstance(value, (int, float)):
        return (float, value)
    return (type(value), value)


def _contains(values: list[Any], value: Any) -> bool:
    key = _dedup_key(value)
    return any(_dedup_key(item) == key for item in values)


class DataBuilder:
    """Call-local accumulator for one generator invocation."""

    __slots__ = ("valid", "invalid")

    def __init__(self) -> None:
        self.valid: list[Any] = []
        self.invalid: list[Any] = []

    def add_valid(self, value: Any, *, unique: bool = False) -> None:
        if not unique or not _contains(self.valid, value):
            self.valid.append(value)

    def add_invalid(self, value: Any, *, unique: bool = False) -> None:
        if not unique or not _contains(self.invalid, value):
            self.invalid.append(value)

    def add(self, value: Any, *, is_valid: bool, unique: bool = False) -> None:
        if is_valid:
            self.add_valid(value, unique=unique)
        else:
            self.add_invalid(value, unique=unique)

    def extend_invalid(self, values: list[Any]) -> None:
        self.invalid.extend(values)

    def build(self) -> GeneratedData:
        return GeneratedData(valid=self.valid, invalid=self.invalid)
