from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any

from boundgen.config._error import ConfigError
from boundgen.config._generation import GenerationConfig

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

__all__ = [
    "BoundgenConfig",
    "ConfigError",
    "GenerationConfig",
    "CONFIG_FILE_NAME",
    "find_config_file",
]

CONFIG_FILE_NAME = "boundgen.toml"

logger = logging.getLogger(__name__)


def find_config_file(start: Path) -> Path | None:
    """Closest `boundgen.toml` in `start` or its parents, not looking above a git repository root."""
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        if (directory / ".git").is_dir():
            return None
    return None


@dataclass
class BoundgenConfig:
    generation: GenerationConfig
    _config_path: str | None

    __slots__ = ("generation", "_config_path")

    def __init__(self, *, generation: GenerationConfig | None = None, config_path: str | None = None) -> None:
        self.generation = generation or GenerationConfig()
        self._config_path = config_path

    @property
    def config_path(self) -> str | None:
        """Resolved path of the file this configuration came from, `None` for defaults."""
        return self._config_path

    @classmethod
    def discover(cls) -> BoundgenConfig:
        """Load the closest `boundgen.toml`, or use defaults if there is none."""
        path = find_config_file(Path.cwd())
        if path is None:
            return cls()
        logger.debug("Using configuration from %s", path)
        return cls.from_path(path)

    @classmethod
    def from_path(cls, path: PathLike | str) -> BoundgenConfig:
        path = Path(path)
        config = cls.from_str(path.read_text(encoding="utf-8"))
        config._config_path = str(path.resolve())
        return config

    @classmethod
    def from_str(cls, data: str) -> BoundgenConfig:
        return cls.from_dict(tomllib.loads(data))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BoundgenConfig:
        """Validate a parsed configuration and build it."""
        from jsonschema.exceptions import ValidationError

        from boundgen.config._validator import CONFIG_VALIDATOR

        try:
            CONFIG_VALIDATOR.validate(data)
        except ValidationError as exc:
            raise ConfigError.from_validation_error(exc) from None
        return cls(generation=GenerationConfig.from_dict(data.get("generation", {})))
