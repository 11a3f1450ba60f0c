"""CLI principal (Typer).

La CLI es la "vista": crea un `ProfileViewModel`, dispara `reload()` y pinta
las proyecciones con Rich. No contiene lógica de red ni de decodificación.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import typer
from rich.console import Console

from adapters.json_exporter import export_users_json
from adapters.randomuser_service import build_default_service
from cli import doctor
from cli.ui_components import (
    build_error_panel,
    build_profile_table,
    build_users_table,
    print_banner,
)
from core.config import AppSettings
from core.domain.errors import RandomUserError
from core.logging_config import configure_logging
from core.services.profile_viewmodel import ProfileViewModel, ReloadOutcome, ReloadStatus

app = typer.Typer(no_args_is_help=True, help="RandomUser profile viewer.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Logs de depuración en stderr."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level, json_logs=settings.json_logs)


def _render(view_model: ProfileViewModel, outcome: ReloadOutcome) -> None:
    _console.print(build_profile_table(view_model))
    if outcome.status is ReloadStatus.FAILED and view_model.error_message:
        _console.print(build_error_panel(view_model.error_message))


async def _show(settings: AppSettings, interactive: bool, json_output: Path | None) -> bool:
    view_model = ProfileViewModel(build_default_service(settings))
    try:
        outcome = await view_model.reload()
        _render(view_model, outcome)

        while interactive:
            choice = await asyncio.to_thread(
                typer.prompt, "[r]eload / [q]uit", default="r", show_default=False
            )
            choice = choice.strip().lower()
            if choice in ("q", "quit", "exit"):
                break
            if choice not in ("r", "reload", ""):
                _console.print("[yellow]Unknown option.[/yellow]")
                continue
            outcome = await view_model.reload()
            _render(view_model, outcome)
    finally:
        view_model.close()

    if json_output is not None and view_model.user is not None:
        path = export_users_json(users=[view_model.user], output_path=json_output)
        _console.print(f"[green]Saved JSON to:[/green] {path}")

    return view_model.state.error is None


@app.command()
def show(
    interactive: bool = typer.Option(False, "--interactive", "-i", help="Permite recargar el perfil."),
    json_output: Path | None = typer.Option(None, "--json-output", help="Exporta el perfil a JSON."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Omite el banner."),
) -> None:
    """Carga un perfil aleatorio y lo muestra."""

    settings = AppSettings()
    if not no_banner:
        print_banner(_console)

    ok = asyncio.run(_show(settings, interactive, json_output))
    if not ok:
        raise typer.Exit(code=1)


@app.command(name="list")
def list_users(
    count: int | None = typer.Option(None, "--count", "-n", min=1, help="Cantidad de perfiles (default: batch_size)."),
    json_output: Path | None = typer.Option(None, "--json-output", help="Exporta los perfiles a JSON."),
) -> None:
    """Muestra una tabla con varios perfiles."""

    settings = AppSettings()
    view_model = ProfileViewModel(build_default_service(settings))

    try:
        users = asyncio.run(view_model.load_users(count or settings.batch_size))
    except RandomUserError as exc:
        _console.print(build_error_panel(exc.message))
        raise typer.Exit(code=1) from exc

    _console.print(build_users_table(users))
    if json_output is not None:
        path = export_users_json(users=users, output_path=json_output)
        _console.print(f"[green]Saved JSON to:[/green] {path}")


def run() -> None:
    # Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8).
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app()


if __name__ == "__main__":
    run()
