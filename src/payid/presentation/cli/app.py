"""PayID CLI application using Typer.

This module provides command-line utilities for the PayID server:
inspecting how an Accept header is negotiated and running both APIs.
"""

import asyncio

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from payid.domain.payment.exceptions import InvalidMediaTypeError
from payid.domain.payment.services import rank_accept_media_types, split_accept_header
from payid.presentation.api.app import create_private_app, create_public_app
from payid_config.settings import Settings, get_settings

app = typer.Typer(
    name="payid",
    help="PayID - resolve PayIDs to payment addresses",
    no_args_is_help=True,
)
console = Console()


@app.command("negotiate")
def negotiate(
    accept: str = typer.Argument(
        ...,
        help="Accept header value, e.g. 'application/xrpl-mainnet+json, application/btc+json;q=0.5'",  # NOQA: E501
    ),
) -> None:
    """Show how an Accept header is ranked during PayID resolution."""
    tokens = split_accept_header(accept)
    if not tokens:
        console.print("[red]Missing Accept header value[/red]")
        raise typer.Exit(code=1)

    try:
        ranked = rank_accept_media_types(tokens)
    except InvalidMediaTypeError as e:
        console.print(f"[red]Invalid Accept header:[/red] {e.message}")
        raise typer.Exit(code=1) from e

    if not ranked:
        console.print("[red]Missing Accept header value[/red] (every type has q=0)")
        raise typer.Exit(code=1)

    table = Table(title="Ranked payment preferences")
    table.add_column("#", justify="right")
    table.add_column("Network", style="cyan")
    table.add_column("Environment")
    table.add_column("Quality", justify="right")
    table.add_column("Content-Type", style="green")

    for position, accept_type in enumerate(ranked, start=1):
        table.add_row(
            str(position),
            accept_type.payment_network,
            accept_type.environment or "[dim]any[/dim]",
            f"{accept_type.quality:.3f}",
            accept_type.media_type,
        )

    console.print(table)


@app.command("serve")
def serve() -> None:
    """Run the public and the private API."""
    settings = get_settings()
    console.print(
        f"[bold green]{settings.app_name}[/bold green] public API on "
        f"{settings.public_api_host}:{settings.public_api_port}, private API on "
        f"{settings.private_api_host}:{settings.private_api_port}",
    )
    asyncio.run(_serve(settings))


async def _serve(settings: Settings) -> None:
    public = uvicorn.Server(
        uvicorn.Config(
            create_public_app(settings),
            host=settings.public_api_host,
            port=settings.public_api_port,
            log_config=None,
        ),
    )
    private = uvicorn.Server(
        uvicorn.Config(
            create_private_app(settings),
            host=settings.private_api_host,
            port=settings.private_api_port,
            log_config=None,
        ),
    )
    await asyncio.gather(public.serve(), private.serve())


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
