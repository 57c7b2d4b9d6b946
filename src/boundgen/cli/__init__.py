from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Any, NoReturn

import click

from boundgen.config import BoundgenConfig, ConfigError
from boundgen.core.errors import BoundgenError, LoaderError, format_exception
from boundgen.core.version import BOUNDGEN_VERSION

if sys.version_info < (3, 11):
    from tomli import TOMLDecodeError
else:
    from tomllib import TOMLDecodeError

__all__ = ["boundgen", "generate"]

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@dataclass
class Data:
    config: BoundgenConfig

    __slots__ = ("config",)


def _fail(ctx: click.Context, title: str, detail: str | None = None) -> NoReturn:
    click.secho(f"❌  {title}", fg="red", bold=True, err=True)
    if detail:
        click.echo(f"\n{detail}", err=True)
    ctx.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)  # type: ignore[untyped-decorator]
@click.option(  # type: ignore[untyped-decorator]
    "--config-file",
    "config_file",
    help="The path to `boundgen.toml` file to use for configuration",
    metavar="PATH",
    type=str,
)
@click.version_option(BOUNDGEN_VERSION, prog_name="boundgen")  # type: ignore[untyped-decorator]
@click.pass_context  # type: ignore[untyped-decorator]
def boundgen(ctx: click.Context, config_file: str | None) -> None:
    """Boundary-value test data from JSON Schema definitions."""
    try:
        if config_file is not None:
            config = BoundgenConfig.from_path(config_file)
        else:
            config = BoundgenConfig.discover()
    except FileNotFoundError:
        _fail(ctx, f"Failed to load configuration file from {config_file}", "The configuration file does not exist")
    except PermissionError:
        _fail(ctx, f"Failed to load configuration file from {config_file}", "Permission denied")
    except (TOMLDecodeError, ConfigError) as exc:
        if isinstance(exc, TOMLDecodeError):
            detail = "The configuration file content is not valid TOML"
        else:
            detail = "The loaded configuration is incorrect"
        _fail(
            ctx,
            f"Failed to load configuration file{f' from {config_file}' if config_file else ''}",
            f"{detail}\n\n{exc}",
        )
    ctx.obj = Data(config=config)


@boundgen.command(short_help="Generate valid and invalid values for a schema")  # type: ignore[untyped-decorator]
@click.argument("schema", type=click.Path(dir_okay=False))  # type: ignore[untyped-decorator]
@click.option(  # type: ignore[untyped-decorator]
    "--output",
    "-o",
    "output",
    help="Write the generated values to this file instead of stdout",
    type=click.File("w", encoding="utf-8"),
    default="-",
    metavar="PATH",
)
@click.option(  # type: ignore[untyped-decorator]
    "--only",
    help="Output only one of the sets",
    type=click.Choice(["valid", "invalid"]),
    default=None,
)
@click.option(  # type: ignore[untyped-decorator]
    "--max-depth",
    help="Fail on schemas nested deeper than this",
    type=click.IntRange(min=1),
    default=None,
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log generation details to stderr")  # type: ignore[untyped-decorator]
@click.pass_context  # type: ignore[untyped-decorator]
def generate(
    ctx: click.Context, schema: str, output: Any, only: str | None, max_depth: int | None, verbose: bool
) -> None:
    """Generate valid and invalid values for the JSON or YAML schema at SCHEMA.

    The result is printed as a JSON object with `valid` and `invalid` lists.
    """
    from boundgen.core import json
    from boundgen.core.loaders import load_schema
    from boundgen.generation import generate_data

    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")
    config = ctx.obj.config.generation
    config.update(max_depth=max_depth)
    try:
        data = generate_data(load_schema(schema), config=config)
        result = data.to_dict()
        text = json.dumps(result if only is None else result[only], indent=True)
    except LoaderError as exc:
        detail = str(exc)
        if exc.extras:
            detail += "\n\n" + "\n".join(exc.extras)
        _fail(ctx, "Failed to load schema", detail)
    except BoundgenError as exc:
        _fail(ctx, "Failed to generate data", str(exc))
    except RecursionError as exc:
        _fail(
            ctx,
            "Failed to generate data",
            f"{format_exception(exc)}\n\nThe schema is nested too deeply or refers to itself. Use `--max-depth` to fail early",
        )
    except Exception as exc:
        _fail(ctx, "Failed to generate data", format_exception(exc))
    click.echo(text, file=output)
