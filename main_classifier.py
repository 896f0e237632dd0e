"""Mini README: Entry point CLI for SnapClassify.

This script exposes a Typer CLI to serve the FastAPI application, classify
a single image from disk, and inspect the loaded label list. Settings are
drawn from ``SNAPCLASSIFY_`` environment variables when available.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import uvicorn

from snapclassify.configuration import get_settings
from snapclassify.labels import LabelStore
from snapclassify.logging_utils import configure_root_logger
from snapclassify.service import ClassificationService

cli = typer.Typer(help="Classify photos with an on-device image model.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: Optional[bool] = typer.Option(
        None,
        help=(
            "Use production server settings (disable auto-reload)."
            " Defaults to SNAPCLASSIFY_ENVIRONMENT=production."
        ),
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    if production is None:
        production = settings.is_production
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 / :: bind addresses directly.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting SnapClassify on {effective_host}:{effective_port}.\n"
        f"POST images to http://{browser_host}:{effective_port}/classify"
    )
    uvicorn.run(
        "snapclassify.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def classify(
    image: Path = typer.Argument(..., help="Image file to classify."),
) -> None:
    """Print the top categories for IMAGE."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    try:
        data = image.read_bytes()
    except OSError as error:
        typer.echo(f"Error loading image: {error}", err=True)
        raise typer.Exit(code=1)
    service = ClassificationService(settings)
    service.setup()
    typer.echo(service.describe_bytes(data).rstrip("\n"))


@cli.command()
def labels(
    limit: int = typer.Option(10, help="Number of labels to print (0 for all)."),
) -> None:
    """Show how many labels were loaded and the first few of them."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    store = LabelStore.from_file(settings.labels_path)
    typer.echo(f"{len(store)} labels loaded from {settings.labels_path}")
    shown = store.labels if limit <= 0 else store.labels[:limit]
    for index, label in enumerate(shown):
        typer.echo(f"{index}: {label}")


if __name__ == "__main__":
    cli()
