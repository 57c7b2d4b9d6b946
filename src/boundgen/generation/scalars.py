"""Boundary values for numbers, strings and booleans."""

from __future__ import annotations

import math
import sys
from typing import Any

from boundgen.core import ABSENT
from boundgen.generation.context import GENERATORS, GenerationContext
from boundgen.generation.data import DataBuilder, GeneratedData
from boundgen.schemas import BooleanSchema, NumberSchema, StringSchema

MAX_NUMBER = sys.float_info.max
NUMBER_PROBES = (-100, -10, -1, 0, 1, 10, 100)
STRING_FILLER = "a"


def non_numbers() -> list[Any]:
    return [ABSENT, None, math.nan, -math.inf, math.inf, "a", True, {}]


def non_strings() -> list[Any]:
    return [ABSENT, None, 42, True, {}]


def non_booleans() -> list[Any]:
    return [ABSENT, None, 42, "a", {}]


@GENERATORS.register("number")
def generate_number(ctx: GenerationContext, schema: NumberSchema) -> GeneratedData:
    minimum = schema.minimum if schema.minimum is not None else -MAX_NUMBER
    maximum = schema.maximum if schema.maximum is not None else MAX_NUMBER
    builder = DataBuilder()

    def add(value: float) -> None:
        builder.add(value, is_valid=minimum <= value <= maximum, unique=True)

    # Just outside of a finite range
    if minimum > -MAX_NUMBER:
        add(minimum - 1)
    if maximum < MAX_NUMBER:
        add(maximum + 1)

    add(minimum)
    for probe in NUMBER_PROBES:
        add(probe)
    add(maximum)

    builder.extend_invalid(non_numbers())
    return builder.build()


@GENERATORS.register("string")
def generate_string(ctx: GenerationContext, schema: StringSchema) -> GeneratedData:
    min_length = schema.min_length or 0
    max_length = schema.max_length
    limit = ctx.config.max_string_length
    builder = DataBuilder()

    builder.add_valid(STRING_FILLER * min_length, unique=True)
    if min_length > 0:
        builder.add_invalid("", unique=True)
    if min_length > 1:
        builder.add_invalid(STRING_FILLER, unique=True)
    if 2 < min_length < limit:
        builder.add_invalid(STRING_FILLER * (min_length - 1), unique=True)
    if min_length == 0 and (max_length is None or max_length > 1):
        builder.add_valid(STRING_FILLER, unique=True)
    if max_length is not None and max_length < limit:
        builder.add_valid(STRING_FILLER * max_length, unique=True)
        builder.add_invalid(STRING_FILLER * (max_length + 1), unique=True)

    builder.extend_invalid(non_strings())
    return builder.build()


@GENERATORS.register("boolean")
def generate_boolean(ctx: GenerationContext, schema: BooleanSchema) -> GeneratedData:
    return GeneratedData(valid=[True, False], invalid=non_booleans())
