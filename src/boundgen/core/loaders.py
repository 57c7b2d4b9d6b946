"""Loading schema documents from JSON or YAML sources."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from boundgen.core.errors import LoaderError, LoaderErrorKind
from boundgen.core.jsonschema.types import JsonSchemaObject

logger = logging.getLogger(__name__)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


def detect_format(path: str | os.PathLike) -> str:
    suffix = Path(path).suffix.lower()
    if suffix in JSON_SUFFIXES:
        return "json"
    if suffix in YAML_SUFFIXES:
        return "yaml"
    raise LoaderError(
        kind=LoaderErrorKind.UNSUPPORTED_FORMAT,
        message=f"Tried to load {path}, but schema must be a JSON or YAML file",
        path=str(path),
    )


def load_schema(path: str | os.PathLike) -> JsonSchemaObject:
    """Load a schema document from a `.json`, `.yaml` or `.yml` file."""
    fmt = detect_format(path)
    try:
        with open(path, encoding="utf-8") as fd:
            content = fd.read()
    except FileNotFoundError:
        raise LoaderError(
            kind=LoaderErrorKind.FILE_NOT_FOUND,
            message=f"Schema file does not exist: {path}",
            path=str(path),
        ) from None
    logger.debug("Loaded %d characters from %s", len(content), path)
    return load_schema_from_str(content, fmt, path=str(path))


def load_schema_from_str(content: str, fmt: str, *, path: str | None = None) -> JsonSchemaObject:
    """Parse a schema document held in memory."""
    data = _parse(content, fmt, path)
    if not isinstance(data, dict):
        raise LoaderError(
            kind=LoaderErrorKind.INVALID_SCHEMA,
            message=f"Schema must be a mapping, got {type(data).__name__}",
            path=path,
        )
    return data


def _parse(content: str, fmt: str, path: str | None) -> Any:
    if fmt == "json":
        from boundgen.core import json

        try:
            return json.loads(content)
        except json.JSONDecodeError as exc:
            raise LoaderError(
                kind=LoaderErrorKind.SYNTAX_ERROR,
                message="Schema is not valid JSON",
                path=path,
                extras=[str(exc)],
            ) from exc
    if fmt == "yaml":
        import yaml

        from boundgen.core.deserialization import deserialize_yaml

        try:
            return deserialize_yaml(content)
        except yaml.YAMLError as exc:
            raise LoaderError(
                kind=LoaderErrorKind.SYNTAX_ERROR,
                message="Schema is not valid YAML",
                path=path,
                extras=[str(exc)],
            ) from exc
    raise LoaderError(
        kind=LoaderErrorKind.UNSUPPORTED_FORMAT,
        message=f"Unsupported schema format: `{fmt}`. Expected `json` or `yaml`",
        path=path,
    )
