"""Command line interface for the authorization server client."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

import httpx
import typer

from authclient.config import load_config
from authclient.exceptions import HttpException
from authclient.service import AuthService

app = typer.Typer(help="CLI for token exchange and introspection")

ConfigOption = typer.Option(
    None, "--config", exists=True, dir_okay=False, help="Path to a YAML config file"
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Enable debug logging")


@app.callback()
def main() -> None:
    """authclient CLI entry point."""
    pass


def _build_service(config_path: Optional[Path], verbose: bool) -> AuthService:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    config = load_config(str(config_path) if config_path else None)
    return AuthService.from_config(config)


def _run(call: Callable[[], Awaitable[Any]]) -> None:
    try:
        result = asyncio.run(call())
    except HttpException as exc:
        typer.secho(f"HTTP {exc.status}: {exc.message}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    except httpx.RequestError as exc:
        typer.secho(f"Request failed: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=2)
    typer.echo(json.dumps(result, indent=2))


@app.command("exchange")
def exchange(
    resource: str,
    subject_token: str,
    config: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """
    Exchange a subject token for an access token scoped to a resource.

    Example:
        authclient exchange https://api.example.com eyJhbGciOi...
    """
    service = _build_service(config, verbose)
    _run(lambda: service.exchange_token(resource, subject_token))


@app.command("introspect")
def introspect(
    token: str,
    config: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """
    Show whether a token is active along with the claims the server reports.

    Example:
        authclient introspect eyJhbGciOi...
    """
    service = _build_service(config, verbose)
    _run(lambda: service.introspect_token(token))
