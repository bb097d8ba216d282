"""Main loop and screen registry for the interactive shell."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import questionary
from rich.markup import escape
from questionary import Choice, Separator

from ..navigator import NavigationOutcome
from .components import BRAND_STYLE, render_error, render_header, render_histories, tab_choices

if TYPE_CHECKING:
    from rich.console import Console

    from ..app import SectionNavigation
    from ..router import MemoryRouter


class Shell:
    """Screen dispatch loop driving a ``SectionNavigation`` by hand.

    Screens return the id of the next screen, "home" for the tab bar,
    or "exit" to quit.
    """

    def __init__(self, console: Console, nav: SectionNavigation, router: MemoryRouter):
        self.console = console
        self.nav = nav
        self.router = router

    def run(self) -> None:
        screen = "tab_bar"
        while True:
            screen_fn = SCREENS.get(screen)
            if screen_fn is None:
                self.console.print(
                    f"[yellow]Warning:[/yellow] Unknown screen '{escape(screen)}', returning to tab bar"
                )
                screen = "tab_bar"
                continue

            try:
                result = screen_fn(self)
            except KeyboardInterrupt:
                self.console.print("\n[dim]Interrupted. Returning to tab bar...[/]")
                screen = "tab_bar"
                continue

            result = self._normalize_result(result)
            if result == "exit":
                self.console.print("\n[dim]Goodbye![/]")
                break
            screen = "tab_bar" if result in (None, "home") else result

    def report(self, outcome: NavigationOutcome | None) -> None:
        if outcome is None:
            self.console.print("[yellow]Router not ready; nothing happened.[/yellow]")
        elif outcome is NavigationOutcome.REJECTED_UNRESOLVED:
            render_error(
                self.console,
                "Navigation refused",
                "The path still contains a route placeholder like \\[id].",
                "Fill in the placeholder and try again.",
            )

    @staticmethod
    def _normalize_result(result: str | None) -> str | None:
        if result is None:
            return None
        s = str(result).strip().lower()
        if not s:
            return None
        if s in {"home", "tabs", "h"}:
            return "home"
        if s in {"exit", "quit", "q"}:
            return "exit"
        return str(result)


SCREENS: dict[str, Callable[[Shell], str | None]] = {}


def register_screen(screen_id: str):
    """Decorator to register a screen function."""
    def decorator(fn: Callable[[Shell], str | None]):
        SCREENS[screen_id] = fn
        return fn
    return decorator


@register_screen("tab_bar")
def show_tab_bar(shell: Shell) -> str | None:
    render_header(shell.console, shell.nav, shell.router)

    choices = tab_choices() + [
        Separator("── Navigate ──"),
        Choice("Visit a path…", value="visit"),
        Choice("← Back (in app)", value="back"),
        Choice("Browser back", value="browser_back"),
        Choice("Browser forward", value="browser_forward"),
        Separator("── Session ──"),
        Choice("Show histories", value="histories"),
        Choice("Sign in / out", value="session"),
        Separator(""),
        Choice("Exit", value="exit"),
    ]
    choice = questionary.select("Where to?", choices=choices, style=BRAND_STYLE).ask()

    if choice is None or choice == "exit":
        return "exit"
    if choice.startswith("tab:"):
        shell.report(shell.nav.handle_section_click(choice[len("tab:"):]))
        return "home"
    if choice == "back":
        shell.report(shell.nav.go_back())
        return "home"
    if choice == "browser_back":
        if not shell.router.back():
            shell.console.print("[dim]Stayed in section (or nothing to go back to).[/dim]")
        return "home"
    if choice == "browser_forward":
        if not shell.router.forward():
            shell.console.print("[dim]Nothing to go forward to.[/dim]")
        return "home"
    return choice


@register_screen("visit")
def show_visit(shell: Shell) -> str | None:
    path = questionary.text("Path (e.g. /community/42):", style=BRAND_STYLE).ask()
    if not path:
        return "home"
    if not path.startswith("/"):
        path = "/" + path
    shell.report(shell.nav.navigator.safe_navigate(path))
    return "home"


@register_screen("histories")
def show_histories(shell: Shell) -> str | None:
    render_histories(shell.console, shell.nav)
    return "home"


@register_screen("session")
def show_session(shell: Shell) -> str | None:
    session = shell.nav.session
    if session.current_username():
        if questionary.confirm(f"Sign out {session.current_username()}?", style=BRAND_STYLE).ask():
            session.logout()
        return "home"

    name = questionary.text("Username:", style=BRAND_STYLE).ask()
    if name:
        session.login(name)
    return "home"
