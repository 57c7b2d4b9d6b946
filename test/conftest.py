from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jsonschema
import pytest
import tomli_w
from click.testing import CliRunner
from hypothesis import settings

import boundgen.cli
from boundgen import is_representable, jsonify

# Register Hypothesis profile. Could be used as
# `pytest test -m hypothesis --hypothesis-profile <profile-name>`
settings.register_profile("CI", max_examples=2000)

logging.getLogger("boundgen").setLevel(logging.DEBUG)


class Oracle:
    """Independent JSON Schema validator to cross-check generated values.

    Values without a faithful JSON form (NaN, infinities, misplaced absence markers) are skipped.
    """

    def __init__(self, validator_cls: type[jsonschema.protocols.Validator] = jsonschema.Draft202012Validator):
        self.validator_cls = validator_cls

    def is_valid(self, value: Any, schema: dict[str, Any]) -> bool:
        return self.validator_cls(schema).is_valid(jsonify(value))

    def assert_conform(self, values: list, schema: dict[str, Any]) -> None:
        for value in values:
            if is_representable(value):
                assert self.is_valid(value, schema), f"Value {value!r} does not conform to {schema}"

    def assert_not_conform(self, values: list, schema: dict[str, Any]) -> None:
        for value in values:
            if is_representable(value):
                assert not self.is_valid(value, schema), f"Value {value!r} conforms to {schema}"

    def check(self, data: Any, schema: dict[str, Any]) -> None:
        self.assert_conform(data.valid, schema)
        self.assert_not_conform(data.invalid, schema)


@pytest.fixture(scope="session")
def oracle():
    return Oracle()


@pytest.fixture
def schema_file(tmp_path):
    def _write(content: str, name: str = "schema.json") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cli(tmp_path, monkeypatch):
    """CLI runner helper.

    Provides in-process execution via `click.CliRunner`.
    """
    # Keep configuration discovery inside the temporary directory
    (tmp_path / ".git").mkdir()
    monkeypatch.chdir(tmp_path)
    cli_runner = CliRunner()

    class Runner:
        @staticmethod
        def generate(*args, **kwargs):
            return Runner.main("generate", *args, **kwargs)

        @staticmethod
        def main(*args, config=None, **kwargs):
            if config is not None:
                path = tmp_path / "config.toml"
                path.write_text(tomli_w.dumps(config), encoding="utf-8")
                args = ["--config-file", str(path), *args]
            result = cli_runner.invoke(boundgen.cli.boundgen, args, **kwargs)
            if result.exception and not isinstance(result.exception, SystemExit):
                raise result.exception
            return result

    return Runner()
