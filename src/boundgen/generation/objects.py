"""Combination of per-property witnesses into whole-object witnesses.

Every property is varied on its own, with all other properties held at a baseline, so the
number of witnesses grows linearly with the number of properties.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from boundgen.core import ABSENT
from boundgen.core.transforms import deepclone
from boundgen.generation.context import GENERATORS, GenerationContext, resolve
from boundgen.generation.data import DataBuilder, GeneratedData
from boundgen.schemas import ObjectSchema


@dataclass
class Field:
    name: str
    data: GeneratedData
    is_required: bool

    __slots__ = ("name", "data", "is_required")


def non_objects() -> list[Any]:
    # No empty object here, it might be a valid object
    return [ABSENT, None, 42, "a", True]


def with_value(template: dict[str, Any], name: str, value: Any) -> dict[str, Any]:
    """Copy of `template` with a single property replaced."""
    new = deepclone(template)
    new[name] = deepclone(value)
    return new


@GENERATORS.register("object")
def generate_object(ctx: GenerationContext, schema: ObjectSchema) -> GeneratedData:
    # Required names without a schema in `properties` get no values, so objects built here
    # can miss them. Such schemas have valid witnesses that fail validation.
    required = set(schema.required)
    fields = []
    for name, sub_schema in schema.properties.items():
        with ctx.at("properties", name):
            data = resolve(ctx, sub_schema)
        fields.append(Field(name=name, data=data, is_required=name in required))
    return combine_fields(fields)


def combine_fields(fields: list[Field]) -> GeneratedData:
    builder = DataBuilder()

    minimal = {field.name: deepclone(field.data.canonical) for field in fields if field.is_required}
    canonical = {field.name: deepclone(field.data.canonical) for field in fields}

    builder.add_valid(deepclone(minimal))
    if minimal:
        # Missing all required properties
        builder.add_invalid({})

    for field in fields:
        if field.is_required:
            for value in field.data.alternatives:
                builder.add_valid(with_value(minimal, field.name, value))

    builder.add_valid(deepclone(canonical))

    for field in fields:
        for value in field.data.alternatives:
            builder.add_valid(with_value(canonical, field.name, value))

    for field in fields:
        for value in field.data.invalid:
            if value is ABSENT and not field.is_required:
                # Optional properties may be missing
                continue
            builder.add_invalid(with_value(canonical, field.name, value))

    # TODO: no witness has one required property present and another one absent
    builder.extend_invalid(non_objects())
    return builder.build()
