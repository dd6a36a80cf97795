"""Typer-based command line interface for shamir-recover."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import structlog
import typer

from ..cases import case_from_path
from ..checker import ConsistencyChecker
from ..config import AppConfig, dump_default_config, load_config
from ..decoder import decode as decode_digits
from ..errors import ShareRecoveryError
from ..logging import configure_logging
from ..models import Consistent, Reconstruction

app = typer.Typer(help="Recover secrets from Shamir shares")
logger = structlog.get_logger(__name__)


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    configure_logging(ctx.obj.logging.normalized_level(), ctx.obj.logging.format)


def _render_text(name: str, result: Reconstruction) -> List[str]:
    if isinstance(result, Consistent):
        line = f"{name} -> Recovered Secret = {result.secret}"
        if not result.secret.is_integer():
            line += " (not an integer)"
        return [line]
    lines = [f"{name} -> Inconsistent shares: {len(result.candidates)} candidates"]
    lines.extend(f"  {candidate}" for candidate in result.candidates)
    return lines


def _render_json(name: str, result: Reconstruction) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"case": name, "combinations": result.combinations}
    if isinstance(result, Consistent):
        payload.update(
            consistent=True,
            secret=str(result.secret),
            integer=result.secret.is_integer(),
        )
    else:
        payload.update(consistent=False, candidates=[str(candidate) for candidate in result.candidates])
    return payload


@app.command()
def recover(
    ctx: typer.Context,
    cases: List[Path] = typer.Argument(..., metavar="CASE...", help="Case documents (JSON or YAML)"),
    as_json: bool = typer.Option(False, "--json", help="Emit one JSON object per case"),
    workers: Optional[int] = typer.Option(None, "--workers", min=1, help="Override worker process count"),
) -> None:
    """Reconstruct the secret of every case and cross-check all share subsets."""
    config: AppConfig = ctx.obj
    settings = config.reconstruction
    if workers is not None:
        settings = settings.model_copy(update={"workers": workers})
    checker = ConsistencyChecker(settings)

    failed = False
    for path in cases:
        name = str(path)
        try:
            case = case_from_path(path)
            result = checker.reconstruct(case.shares, case.threshold)
        except ShareRecoveryError as exc:
            logger.error("recover.failed", case=name, error=type(exc).__name__)
            if as_json:
                typer.echo(json.dumps({"case": name, "error": type(exc).__name__, "detail": str(exc)}))
            else:
                typer.echo(f"Error: {name}: {exc}", err=True)
            failed = True
            continue
        failed = failed or not result.is_consistent
        if as_json:
            typer.echo(json.dumps(_render_json(name, result)))
        else:
            for line in _render_text(name, result):
                typer.echo(line)
    if failed:
        raise typer.Exit(code=1)


@app.command()
def decode(
    digits: str = typer.Argument(..., help="Digits of the share value"),
    base: int = typer.Option(10, "--base", "-b", help="Base between 2 and 36"),
) -> None:
    """Print a base-encoded share value in decimal."""
    try:
        typer.echo(str(decode_digits(digits, base)))
    except ShareRecoveryError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)


@app.command("init-config")
def init_config(target: Path = typer.Argument(Path(".shamir") / "config.yaml")) -> None:
    """Write the default configuration file."""
    dump_default_config(target)
    typer.echo(f"Configuration written to {target}")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(f"shamir-recover {__version__}")


if __name__ == "__main__":  # pragma: no cover
    app()
