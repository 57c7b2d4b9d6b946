"""Typed schema model.

Each supported JSON Schema `type` maps to one frozen dataclass. Nested schemas (object
properties, array items) can be either dataclasses or raw mappings; raw mappings are
resolved only when generation reaches them.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import ClassVar, Union

from boundgen.core.errors import UnknownType
from boundgen.core.jsonschema.types import JsonSchemaObject, get_type, to_json_type_name


@dataclass(frozen=True)
class NumberSchema:
    minimum: float | None = None
    maximum: float | None = None

    type: ClassVar[str] = "number"

    @classmethod
    def from_dict(cls, data: JsonSchemaObject) -> NumberSchema:
        return cls(minimum=data.get("minimum"), maximum=data.get("maximum"))


@dataclass(frozen=True)
class StringSchema:
    min_length: int | None = None
    max_length: int | None = None

    type: ClassVar[str] = "string"

    @classmethod
    def from_dict(cls, data: JsonSchemaObject) -> StringSchema:
        return cls(min_length=data.get("minLength"), max_length=data.get("maxLength"))


@dataclass(frozen=True)
class BooleanSchema:
    type: ClassVar[str] = "boolean"

    @classmethod
    def from_dict(cls, data: JsonSchemaObject) -> BooleanSchema:
        return cls()


@dataclass(frozen=True)
class ObjectSchema:
    properties: Mapping[str, SchemaLike] = field(default_factory=dict)
    required: Sequence[str] = ()

    type: ClassVar[str] = "object"

    @classmethod
    def from_dict(cls, data: JsonSchemaObject) -> ObjectSchema:
        return cls(properties=data.get("properties") or {}, required=tuple(data.get("required") or ()))


@dataclass(frozen=True)
class ArraySchema:
    items: SchemaLike | None = None
    prefix_items: Sequence[SchemaLike] | None = None
    min_items: int | None = None
    max_items: int | None = None

    type: ClassVar[str] = "array"

    @classmethod
    def from_dict(cls, data: JsonSchemaObject) -> ArraySchema:
        prefix_items = data.get("prefixItems")
        return cls(
            items=data.get("items"),
            prefix_items=tuple(prefix_items) if prefix_items is not None else None,
            min_items=data.get("minItems"),
            max_items=data.get("maxItems"),
        )


Schema = Union[NumberSchema, StringSchema, BooleanSchema, ObjectSchema, ArraySchema]
SchemaLike = Union[Schema, JsonSchemaObject]

SCHEMA_CLASSES: dict[str, type[Schema]] = {
    cls.type: cls for cls in (NumberSchema, StringSchema, BooleanSchema, ObjectSchema, ArraySchema)
}
SCHEMA_TYPES = tuple(SCHEMA_CLASSES.values())


def parse_schema(data: SchemaLike, path: Sequence[str | int] = ()) -> Schema:
    """Convert a raw mapping into its typed schema by the `type` tag.

    Only the top level is converted; nested schemas are left as they are.
    """
    if isinstance(data, SCHEMA_TYPES):
        return data
    if not isinstance(data, Mapping):
        raise UnknownType(to_json_type_name(data), path)
    raw = dict(data)
    ty = get_type(raw)
    try:
        cls = SCHEMA_CLASSES[ty]
    except (KeyError, TypeError):
        raise UnknownType(ty, path) from None
    return cls.from_dict(raw)
