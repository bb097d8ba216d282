from __future__ import annotations

from types import SimpleNamespace

import pytest
from questionary import Separator
from rich.console import Console

from tabnav.app import create_navigation
from tabnav.router import MemoryRouter
from tabnav.settings import Settings
from tabnav.state import UserSession
from tabnav.tui import shell as shell_module
from tabnav.tui.components import render_histories, tab_choices
from tabnav.tui.shell import SCREENS, Shell


class _Answers:
    """Stand-in for questionary prompts: each ``ask()`` pops the next answer."""

    def __init__(self, answers):
        self.answers = list(answers)

    def __call__(self, *args, **kwargs):
        return SimpleNamespace(ask=lambda: self.answers.pop(0))


@pytest.fixture
def shell_components():
    console = Console(record=True, width=120)
    router = MemoryRouter("/feed")
    nav = create_navigation(router, UserSession("carol"), Settings(_env_file=None))
    return Shell(console, nav, router), router, nav, console


def test_tab_choices_cover_every_section():
    values = [c.value for c in tab_choices() if not isinstance(c, Separator)]
    assert "tab:feed" in values
    assert "tab:messages" in values
    assert len(values) == 7


def test_shell_registers_screens():
    assert {"tab_bar", "visit", "histories", "session"} <= set(SCREENS)


def test_shell_normalize_result():
    assert Shell._normalize_result(None) is None
    assert Shell._normalize_result("  ") is None
    assert Shell._normalize_result("Q") == "exit"
    assert Shell._normalize_result("tabs") == "home"
    assert Shell._normalize_result("visit") == "visit"


def test_shell_visit_and_tab_switch(shell_components, monkeypatch):
    shell, router, nav, _ = shell_components

    monkeypatch.setattr(
        shell_module.questionary,
        "select",
        _Answers(["visit", "tab:feed", "exit"]),
    )
    monkeypatch.setattr(shell_module.questionary, "text", _Answers(["community/42"]))

    shell.run()

    assert router.pushed == ["/community/42", "/feed"]
    assert nav.histories()["community"] == ["/community/42"]


def test_shell_rejects_placeholder_path(shell_components, monkeypatch):
    shell, router, _, console = shell_components

    monkeypatch.setattr(shell_module.questionary, "select", _Answers(["visit", "exit"]))
    monkeypatch.setattr(shell_module.questionary, "text", _Answers(["/community/[id]"]))

    shell.run()

    assert router.pushed == []
    assert "Navigation refused" in console.export_text()


def test_shell_sign_out(shell_components, monkeypatch):
    shell, _, nav, _ = shell_components

    monkeypatch.setattr(shell_module.questionary, "select", _Answers(["session", "exit"]))
    monkeypatch.setattr(shell_module.questionary, "confirm", _Answers([True]))

    shell.run()

    assert nav.session.current_username() is None


def test_shell_unknown_screen_returns_to_tab_bar(shell_components, monkeypatch):
    shell, _, _, console = shell_components

    monkeypatch.setattr(shell_module.questionary, "select", _Answers(["nowhere", "exit"]))

    shell.run()

    assert "Unknown screen 'nowhere'" in console.export_text()


def test_render_histories_marks_active_section(shell_components):
    _, router, nav, console = shell_components
    router.push("/community/42")

    render_histories(console, nav)

    text = console.export_text()
    assert "▶ community" in text
    assert "/community/42" in text
