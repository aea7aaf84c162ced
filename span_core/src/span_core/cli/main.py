"""Typer-based command line interface for span-core."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import structlog
import typer

from ..config import AppConfig, dump_default_config, load_config
from ..converter import IndexConverter
from ..errors import SpanError
from ..logging import configure_logging
from ..models import IndexSpace
from ..paths import local_config_path
from ..utils.text import iter_code_points, to_text

app = typer.Typer(help="Convert text spans between BMP, UTF-8 code point and byte offsets")
logger = structlog.get_logger(__name__)


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    configure_logging(ctx.obj.logging.normalized_level())


@app.command()
def convert(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    start: int = typer.Option(..., "--start", help="Span start in the source space"),
    end: int = typer.Option(..., "--end", help="Span end in the source space"),
    source: Optional[IndexSpace] = typer.Option(None, "--from", help="Source index space"),
    target: Optional[IndexSpace] = typer.Option(None, "--to", help="Target index space"),
    alignment: Optional[str] = typer.Option(None, "--alignment", help="strict|floor"),
) -> None:
    config: AppConfig = ctx.obj
    settings = config.converter
    if alignment is not None:
        settings = settings.model_copy(update={"alignment": alignment.lower()})
    source_space = source or settings.default_source
    target_space = target or settings.default_target
    try:
        converter = IndexConverter(settings.to_converter_config())
        result = converter.convert(path.read_bytes(), (start, end), source_space, target_space)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    logger.info(
        "cli.convert",
        path=str(path),
        source=source_space.value,
        target=target_space.value,
        start=result.start,
        end=result.end,
    )
    typer.echo(json.dumps({"start": result.start, "end": result.end, "space": target_space.value}))


@app.command()
def inspect(path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False)) -> None:
    try:
        text = to_text(path.read_bytes())
    except SpanError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    runs = [
        {
            "char": run.char,
            "codepoint": f"U+{run.codepoint:04X}",
            "utf8_width": run.utf8_width,
            "bmp_width": run.bmp_width,
        }
        for run in iter_code_points(text)
    ]
    typer.echo(json.dumps(runs, ensure_ascii=False, indent=2))


@app.command("init-config")
def init_config(
    destination: Optional[Path] = typer.Option(
        None, "--destination", help="Defaults to ./.span-core/config.yaml"
    ),
) -> None:
    destination = destination or local_config_path()
    dump_default_config(destination)
    typer.echo(f"Default configuration written to {destination}")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
