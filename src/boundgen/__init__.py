from __future__ import annotations

from boundgen.config import BoundgenConfig, ConfigError, GenerationConfig
from boundgen.core import ABSENT
from boundgen.core.errors import (
    BoundgenError,
    LoaderError,
    LoaderErrorKind,
    MalformedArraySchema,
    SchemaTooDeep,
    UnknownType,
)
from boundgen.core.loaders import load_schema
from boundgen.core.transforms import is_representable, jsonify
from boundgen.core.version import BOUNDGEN_VERSION
from boundgen.generation import GeneratedData, generate_data
from boundgen.schemas import ArraySchema, BooleanSchema, NumberSchema, ObjectSchema, StringSchema, parse_schema

__version__ = BOUNDGEN_VERSION

__all__ = [
    "ABSENT",
    "ArraySchema",
    "BooleanSchema",
    "BoundgenConfig",
    "BoundgenError",
    "ConfigError",
    "GeneratedData",
    "GenerationConfig",
    "LoaderError",
    "LoaderErrorKind",
    "MalformedArraySchema",
    "NumberSchema",
    "ObjectSchema",
    "SchemaTooDeep",
    "StringSchema",
    "UnknownType",
    "__version__",
    "generate_data",
    "is_representable",
    "jsonify",
    "load_schema",
    "parse_schema",
]
