"""Combination of item witnesses into whole-array witnesses.

Arrays are generated at a handful of boundary sizes. For each size one index at a time is
varied while the others hold their canonical values.
"""

from __future__ import annotations

from typing import Any

from boundgen.core import ABSENT
from boundgen.core.errors import MalformedArraySchema
from boundgen.core.transforms import deepclone
from boundgen.generation.context import GENERATORS, GenerationContext, resolve
from boundgen.generation.data import DataBuilder, GeneratedData
from boundgen.schemas import ArraySchema


def non_arrays() -> list[Any]:
    return [ABSENT, None, 42, "a", True, {}]


class ItemsData:
    """Generated data for every index of an array: positional first, then the fallback."""

    __slots__ = ("prefix", "rest")

    def __init__(self, prefix: list[GeneratedData], rest: GeneratedData | None) -> None:
        self.prefix = prefix
        self.rest = rest

    def at(self, index: int) -> GeneratedData | None:
        if index < len(self.prefix):
            return self.prefix[index]
        return self.rest

    def canonical_array(self, size: int) -> list[Any]:
        """Each index at its canonical value.

        Indices without a schema repeat the last canonical value before them.
        """
        array = []
        last = None
        for index in range(size):
            data = self.at(index)
            if data is not None:
                last = data.canonical
            array.append(deepclone(last))
        return array


def resolve_items(ctx: GenerationContext, schema: ArraySchema) -> ItemsData:
    if schema.items is None and not schema.prefix_items:
        raise MalformedArraySchema(ctx.path)
    prefix = []
    for index, sub_schema in enumerate(schema.prefix_items or ()):
        with ctx.at("prefixItems", index):
            prefix.append(resolve(ctx, sub_schema))
    rest = None
    if schema.items is not None:
        with ctx.at("items"):
            rest = resolve(ctx, schema.items)
    return ItemsData(prefix, rest)


def valid_sizes(min_items: int, max_items: int | None) -> list[int]:
    smallest = max(min_items, 1)
    sizes = {smallest}
    if min_items <= 0 and (max_items is None or max_items > 1):
        sizes.add(1)
    if min_items <= 1 and (max_items is None or max_items > 2):
        sizes.add(2)
    if max_items is not None:
        sizes.add(max_items)
    if max_items is None or max_items > smallest + 1:
        sizes.add(smallest + 1)
    return sorted(size for size in sizes if smallest <= size and (max_items is None or size <= max_items))


def invalid_sizes(min_items: int, max_items: int | None, limit: int) -> list[int]:
    smallest = max(min_items, 1)
    sizes = []
    if smallest > 1:
        sizes.append(smallest - 1)
    if max_items is not None and max_items < limit:
        sizes.append(max_items + 1)
    return sizes


def with_item(template: list[Any], index: int, value: Any) -> list[Any]:
    """Copy of `template` with a single item replaced."""
    new = deepclone(template)
    new[index] = deepclone(value)
    return new


@GENERATORS.register("array")
def generate_array(ctx: GenerationContext, schema: ArraySchema) -> GeneratedData:
    items = resolve_items(ctx, schema)
    min_items = schema.min_items or 0
    max_items = schema.max_items
    builder = DataBuilder()

    if min_items == 0:
        builder.add_valid([])
    else:
        builder.add_invalid([])

    for size in valid_sizes(min_items, max_items):
        canonical = items.canonical_array(size)
        builder.add_valid(canonical)
        for index in range(size):
            data = items.at(index)
            if data is not None:
                for value in data.alternatives:
                    builder.add_valid(with_item(canonical, index, value))
        for index in range(size):
            data = items.at(index)
            if data is not None:
                for value in data.invalid:
                    builder.add_invalid(with_item(canonical, index, value))

    for size in invalid_sizes(min_items, max_items, ctx.config.max_array_length):
        builder.add_invalid(items.canonical_array(size))

    builder.extend_invalid(non_arrays())
    return builder.build()
