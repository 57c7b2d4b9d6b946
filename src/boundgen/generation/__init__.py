from __future__ import annotations

from boundgen.config import GenerationConfig
from boundgen.generation import arrays, objects, scalars  # noqa: F401  # Register generators
from boundgen.generation.context import GENERATORS, GenerationContext, resolve
from boundgen.generation.data import GeneratedData
from boundgen.schemas import SchemaLike

__all__ = [
    "GENERATORS",
    "GeneratedData",
    "GenerationContext",
    "generate_data",
]


def generate_data(schema: SchemaLike, config: GenerationConfig | None = None) -> GeneratedData:
    """Generate valid and invalid example values for a schema.

    The result is deterministic: the same schema always gives the same values in the same order.

    Raises:
        UnknownType: A schema (possibly a nested one) has an unsupported `type`.
        MalformedArraySchema: An array schema defines neither `items` nor `prefixItems`.
        SchemaTooDeep: Nesting goes deeper than `config.max_depth`.

    """
    return resolve(GenerationContext(config=config), schema)
