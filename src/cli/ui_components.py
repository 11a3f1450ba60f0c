"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- La vista solo lee proyecciones del view model; tolera "sin perfil todavía".
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import User
from core.services.profile_viewmodel import ProfileViewModel


def print_banner(console: Console) -> None:
    title = Text("RandomUser", style="bold cyan")
    subtitle = Text("Perfiles aleatorios • randomuser.me", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_profile_table(view_model: ProfileViewModel) -> Table:
    """Una fila por sección: foto, nombre/edad, ubicación, email, teléfono."""

    table = Table(title="Profile", show_header=False, show_lines=True)
    table.add_column("Section", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    if view_model.user is None:
        table.add_row("-", Text("No profile loaded yet.", style="dim"))
        return table

    table.add_row("Picture", Text(view_model.picture_url or "", style="magenta"))
    table.add_row(
        "Name",
        Text.assemble(
            (view_model.display_name or "", "bold"),
            "\n",
            (view_model.age_text or "", "dim"),
        ),
    )
    table.add_row("Location", view_model.location_text or "")
    table.add_row("Email", view_model.formatted_email_info() or "")
    table.add_row("Phone", view_model.formatted_phone_info() or "")
    return table


def build_users_table(users: Sequence[User]) -> Table:
    table = Table(title=f"Users ({len(users)})")
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Age", justify="right")
    table.add_column("Location", style="white")
    table.add_column("Email", style="cyan")
    table.add_column("Nat", style="dim")
    for user in users:
        table.add_row(
            user.name.full_name,
            str(user.dob.age),
            user.location.summary,
            user.email,
            user.nat,
        )
    return table


def build_error_panel(message: str) -> Panel:
    """Equivalente a la alerta "Error / OK" de la app."""

    return Panel(Text(message), title=Text("Error", style="bold red"), border_style="red")
