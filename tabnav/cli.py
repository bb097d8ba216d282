from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .app import SectionNavigation, create_navigation
from .logging import setup_logging
from .router import MemoryRouter
from .sections import classify as classify_path
from .settings import load_settings
from .state import UserSession
from .tui.components import render_histories

app = typer.Typer(
    add_completion=False,
    help="tabnav: per-section navigation history for tabbed clients",
    rich_markup_mode="rich",
)
console = Console()


# ═══════════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

def _start_session(username: str | None) -> tuple[MemoryRouter, SectionNavigation]:
    settings = load_settings()
    setup_logging(settings)
    router = MemoryRouter("/")
    nav = create_navigation(router, UserSession(username), settings)
    return router, nav


def replay_lines(lines: Iterable[str], router: MemoryRouter, nav: SectionNavigation) -> int:
    """Push every path in ``lines`` through ``router``.

    Blank lines and ``#`` comments are skipped. ``@login NAME`` and
    ``@logout`` switch the session user before the following paths.

    Returns:
        Number of paths pushed
    """
    pushed = 0
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("@"):
            directive, _, arg = line[1:].partition(" ")
            if directive == "login" and arg.strip():
                nav.session.login(arg)
            elif directive == "logout":
                nav.session.logout()
            else:
                raise ValueError(f"Unknown directive: {line}")
            continue
        router.push(line)
        pushed += 1
    return pushed


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN CALLBACK
# ═══════════════════════════════════════════════════════════════════════════════

@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    user: Optional[str] = typer.Option(None, "--user", "-u", help="Signed-in username for the menu"),
):
    """
    [bold]tabnav[/bold]: per-section navigation history.

    [dim]Run without arguments to launch the interactive tab-bar shell.[/dim]

    [bold]Examples:[/bold]
      python -m tabnav classify /profile/alice --user bob
      python -m tabnav replay visits.txt --user bob --activate community
    """
    if ctx.invoked_subcommand is None:
        from .tui import Shell

        router, nav = _start_session(user)
        Shell(console, nav, router).run()
        raise typer.Exit(code=0)


# ═══════════════════════════════════════════════════════════════════════════════
# COMMANDS
# ═══════════════════════════════════════════════════════════════════════════════

@app.command("classify", help="Show which section a path belongs to")
def classify(
    path: str = typer.Argument(..., help="Application path, e.g. /profile/alice"),
    user: Optional[str] = typer.Option(None, "--user", "-u", help="Signed-in username"),
):
    console.print(str(classify_path(path, user)))


@app.command("replay", help="Replay a navigation log and show per-section histories")
def replay(
    file: Path = typer.Argument(..., help="File with one path per line"),
    user: Optional[str] = typer.Option(None, "--user", "-u", help="Signed-in username"),
    json_out: bool = typer.Option(False, "--json", help="Print histories as JSON"),
    activate: Optional[str] = typer.Option(
        None,
        "--activate",
        "-a",
        help="Also print where clicking this section's tab would go",
    ),
):
    if not file.is_file():
        console.print(f"[red]✗ Replay file not found:[/red] {escape(str(file))}")
        raise typer.Exit(code=1)

    router, nav = _start_session(user)
    try:
        count = replay_lines(file.read_text(encoding="utf-8").splitlines(), router, nav)
    except ValueError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=2)

    target = None
    if activate is not None:
        target = nav.activator.activate(activate, nav.session.current_username())

    if json_out:
        payload: dict = {
            "paths": count,
            "current_section": str(nav.current_section) if nav.current_section else None,
            "histories": nav.histories(),
        }
        if activate is not None:
            payload["activate"] = {"section": activate, "path": target}
        typer.echo(json.dumps(payload, indent=2))
        return

    render_histories(console, nav)
    if activate is not None:
        console.print(Panel.fit(
            f"[bold]{escape(activate)}[/bold] → [cyan]{escape(str(target))}[/cyan]",
            title="Activate",
        ))


def main():
    app()
