"""Typer-based command line interface for resxml."""
from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import structlog
import typer
from pydantic import ValidationError

from ..config import AppConfig, SubstitutionConfig, load_config
from ..encoders import encode as encode_text
from ..logging import configure_logging
from ..models import EncodingTarget
from ..substitutions import (
    enumerate_non_positional_substitutions_if_required,
    find_substitutions,
)

app = typer.Typer(help="Encode strings for decoded Android resource XML")
logger = structlog.get_logger("resxml.cli")


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    configure_logging(ctx.obj.logging.normalized_level())
    logger.debug("config resolved", explicit=str(config) if config else None)


def _current_config(ctx: typer.Context) -> AppConfig:
    return ctx.obj


def _resolve_limit(config: AppConfig, limit: Optional[int]) -> int:
    if limit is None:
        return config.substitutions.non_positional_limit
    try:
        return SubstitutionConfig(non_positional_limit=limit).non_positional_limit
    except ValidationError as exc:
        raise typer.BadParameter("must be a positive integer or -1", param_hint="--limit") from exc


@app.command()
def encode(
    ctx: typer.Context,
    text: Optional[str] = typer.Argument(None, help="String to encode"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, readable=True, help="Encode file contents"),
    target: Optional[EncodingTarget] = typer.Option(None, "--target", "-t", help="Encoding context"),
) -> None:
    if (text is None) == (file is None):
        raise typer.BadParameter("pass either TEXT or --file")
    config = _current_config(ctx)
    resolved = target or config.encoding.default_target
    data = file.read_bytes() if file is not None else text
    result = encode_text(data, resolved)
    logger.info("encoded", target=resolved.value, source="file" if file else "argument")
    typer.echo(result)


@app.command()
def substitutions(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Format string to scan"),
    limit: Optional[int] = typer.Option(None, "--limit", help="Cap on non-positional matches (-1 for none)"),
) -> None:
    config = _current_config(ctx)
    cap = _resolve_limit(config, limit)
    scan = find_substitutions(text, cap)
    payload = asdict(scan)
    payload["multiple_non_positional"] = scan.has_multiple_non_positional()
    typer.echo(json.dumps(payload, indent=2))


@app.command("enumerate")
def enumerate_command(ctx: typer.Context, text: str = typer.Argument(..., help="Format string to renumber")) -> None:
    config = _current_config(ctx)
    result = enumerate_non_positional_substitutions_if_required(
        text, config.substitutions.non_positional_limit
    )
    if result != text:
        logger.debug("substitutions renumbered", before=text, after=result)
    typer.echo(result)


@app.command()
def config_show(ctx: typer.Context) -> None:
    typer.echo(_current_config(ctx).model_dump_json(indent=2))


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
