from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from contextlib import contextmanager

from boundgen.config import GenerationConfig
from boundgen.core.errors import SchemaTooDeep, UnknownType, format_path
from boundgen.core.registries import Registry
from boundgen.generation.data import GeneratedData
from boundgen.schemas import Schema, SchemaLike, parse_schema

logger = logging.getLogger(__name__)


class GenerationContext:
    """State shared by the recursive generators during one `generate_data` call."""

    __slots__ = ("config", "path", "depth")

    def __init__(self, *, config: GenerationConfig | None = None, path: list[str | int] | None = None) -> None:
        self.config = config or GenerationConfig()
        self.path: list[str | int] = path or []
        self.depth = 0

    @contextmanager
    def at(self, *keys: str | int) -> Generator[None, None, None]:
        """Descend into a nested schema located under `keys`."""
        self.path.extend(keys)
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1
            del self.path[len(self.path) - len(keys) :]

    @property
    def current_path(self) -> str:
        return format_path(self.path)


GeneratorFunction = Callable[[GenerationContext, Schema], GeneratedData]

GENERATORS: Registry[GeneratorFunction] = Registry()


def resolve(ctx: GenerationContext, schema: SchemaLike) -> GeneratedData:
    """Generate data for `schema` with the generator registered for its type."""
    max_depth = ctx.config.max_depth
    if max_depth is not None and ctx.depth > max_depth:
        raise SchemaTooDeep(max_depth, ctx.path)
    schema = parse_schema(schema, ctx.path)
    generator = GENERATORS.get(schema.type)
    if generator is None:
        raise UnknownType(schema.type, ctx.path)
    data = generator(ctx, schema)
    logger.debug(
        "Generated %d valid and %d invalid %s values at %s",
        len(data.valid),
        len(data.invalid),
        schema.type,
        ctx.current_path,
    )
    return data
