from __future__ import annotations

import json
from enum import Enum
from typing import Annotated, Any

import typer
import yaml
from pydantic import TypeAdapter
from result import Ok, Result, is_err

from clientstate.config import SECTIONS, ConfigError, MainSettings, PathLayout
from clientstate.config.registry import KEYMAP, MAIN_SETTINGS, SectionSpec, keymap_section
from clientstate.config.store import read_section
from clientstate.settings import settings


class OutputFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"


FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (yaml or json)."),
]

app = typer.Typer(help="Inspect clientstate configuration.")


@app.callback(invoke_without_command=True)
def _config_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("paths")
def paths(format: FormatOption = OutputFormat.YAML) -> None:
    """Print the resolved directory layout."""
    layout = settings.to_path_layout()
    typer.echo(_format_payload(layout.to_dict(), format))


@app.command("show")
def show(
    section: Annotated[str, typer.Argument(help=f"Section to show ({', '.join(SECTIONS)}).")],
    format: FormatOption = OutputFormat.YAML,
) -> None:
    """Print a section as stored on disk, with defaults for missing files."""
    spec = SECTIONS.get(section)
    if spec is None:
        typer.secho(f"Unknown section '{section}'. Choose from: {', '.join(SECTIONS)}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=2)

    layout = settings.to_path_layout()
    result = _resolve_section(spec, layout).and_then(lambda resolved: _load_payload(resolved, layout))
    if is_err(result):
        _handle_error(result.err_value)
        raise typer.Exit(code=1)

    typer.echo(_format_payload(result.ok_value, format))


def _resolve_section(spec: SectionSpec, layout: PathLayout) -> Result[SectionSpec, ConfigError]:
    if spec is not KEYMAP:
        return Ok(spec)
    # The keymap file is named after the keymap selected in the main settings
    return read_section(MAIN_SETTINGS, MAIN_SETTINGS.directory(layout)).map(
        lambda main: keymap_section((main or MainSettings()).keymap)
    )


def _load_payload(spec: SectionSpec, layout: PathLayout) -> Result[Any, ConfigError]:
    adapter = TypeAdapter(spec.target)

    def _dump(value: Any) -> Any:
        if value is None and isinstance(spec.target, type):
            value = spec.target()
        return adapter.dump_python(value, mode="json", by_alias=True)

    return read_section(spec, spec.directory(layout)).map(_dump)


def _format_payload(payload: Any, format: OutputFormat) -> str:
    if format == OutputFormat.JSON:
        return json.dumps(payload, indent=2, sort_keys=True)
    return yaml.safe_dump(payload, sort_keys=True)


def _handle_error(error: ConfigError) -> None:
    message = f"[{error.section}] {error.message}"
    error_path = getattr(error, "path", None)
    if error_path is not None:
        message = f"{message} ({error_path})"

    typer.secho(message, err=True, fg=typer.colors.RED)
