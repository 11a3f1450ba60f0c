"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.randomuser_service import build_default_service
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.errors import RandomUserError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    service = build_default_service(settings)
    try:
        user = await service.fetch_user()
    except RandomUserError as exc:
        return False, exc.message
    return True, f"Fetched profile {user.id}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="ruser Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)
    table.add_row("Batch size", "OK", str(settings.batch_size))
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    ok_api, detail_api = asyncio.run(_check_api(settings))
    table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        _console.print(
            "\n[yellow]Note:[/yellow] Check `RUSER_BASE_URL` or run `ruser doctor setup`."
        )
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    defaults = AppSettings()
    base_url = typer.prompt("API base URL", default=defaults.base_url, show_default=True).strip()
    timeout = typer.prompt(
        "HTTP timeout (seconds)",
        default=defaults.http_timeout_seconds,
        type=float,
        show_default=True,
    )

    if not base_url:
        raise typer.BadParameter("base_url is required")
    if timeout <= 0:
        raise typer.BadParameter("timeout must be positive")

    env_path = write_user_env_vars(
        {
            "RUSER_BASE_URL": base_url,
            "RUSER_HTTP_TIMEOUT_SECONDS": f"{timeout:g}",
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
