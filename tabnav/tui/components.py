"""Reusable rich/questionary pieces for the shell and CLI."""
from __future__ import annotations

from typing import TYPE_CHECKING

import questionary
from questionary import Choice, Separator
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..sections import Section

if TYPE_CHECKING:
    from rich.console import Console

    from ..app import SectionNavigation
    from ..router import MemoryRouter


BRAND_STYLE = questionary.Style([
    ("qmark", "fg:#00b4d8 bold"),
    ("question", "bold"),
    ("answer", "fg:#90e0ef bold"),
    ("highlighted", "fg:#00b4d8 bold"),
    ("pointer", "fg:#00b4d8 bold"),
    ("selected", "fg:#90e0ef"),
])

TAB_LABELS = {
    Section.FEED: "Feed",
    Section.COMMUNITY: "Community",
    Section.MAP: "Map",
    Section.POLITICIANS: "Politicians",
    Section.PROFILE: "Profile",
    Section.SEARCH: "Search",
    Section.MESSAGES: "Messages",
}


def tab_choices() -> list:
    """One choice per section tab; values are ``tab:<section>``."""
    choices: list = [Separator("── Tabs ──")]
    choices.extend(
        Choice(title=label, value=f"tab:{section.value}")
        for section, label in TAB_LABELS.items()
    )
    return choices


def render_header(console: Console, nav: SectionNavigation, router: MemoryRouter) -> None:
    """Compact context bar: user, active section and current path."""
    user = nav.session.current_username()
    section = nav.current_section
    who = f"[cyan]{escape(user)}[/cyan]" if user else "[dim](signed out)[/dim]"
    content = (
        f"  [bold]User[/bold] {who}  "
        f"[bold]Section[/bold] [cyan]{section if section is not None else '-'}[/cyan]  "
        f"[bold]Path[/bold] [cyan]{escape(router.current_path)}[/cyan]"
    )
    console.print(Panel.fit(content, border_style="dim"))
    console.print()


def render_histories(console: Console, nav: SectionNavigation) -> None:
    """Per-section history table; the active section is highlighted."""
    histories = nav.histories()
    table = Table(title="[bold]Section histories[/bold]")
    table.add_column("Section", style="bold")
    table.add_column("Depth", justify="right")
    table.add_column("Last", style="cyan")
    table.add_column("Stack", style="dim")

    if not histories:
        table.add_row("[dim]none[/dim]", "0", "", "")

    current = nav.current_section
    for section, stack in histories.items():
        name = f"[green]▶ {escape(section)}[/green]" if section == current else escape(section)
        last = escape(stack[-1]) if stack else ""
        table.add_row(name, str(len(stack)), last, escape(" → ".join(stack)))

    console.print(table)
    console.print()


def render_error(console: Console, title: str, cause: str, action: str | None = None) -> None:
    """Render a friendly error panel."""
    content = f"[bold red]✗ {title}[/bold red]\n\n"
    content += f"[yellow]Cause:[/yellow] {cause}\n"
    if action:
        content += f"\n[dim]→ {action}[/dim]"
    console.print(Panel.fit(content, border_style="red", title="Error"))
    console.print()
