from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

import tabnav.cli as cli
from tabnav.router import MemoryRouter
from tabnav.app import create_navigation
from tabnav.settings import Settings
from tabnav.state import UserSession

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "setup_logging", lambda settings: None)


def test_classify_command():
    result = runner.invoke(cli.app, ["classify", "/profile/alice", "--user", "bob"])
    assert result.exit_code == 0
    assert result.output.strip() == "community"

    result = runner.invoke(cli.app, ["classify", "/profile/bob", "-u", "bob"])
    assert result.output.strip() == "profile"


def test_replay_json_output(tmp_path: Path):
    log = tmp_path / "visits.txt"
    log.write_text(
        "\n".join(
            [
                "# morning session",
                "/feed",
                "/feed/post/1",
                "",
                "/community/42",
                "/profile/alice",
                "/map",
            ]
        ),
        encoding="utf-8",
    )

    result = runner.invoke(
        cli.app,
        ["replay", str(log), "--user", "bob", "--json", "--activate", "community"],
    )
    assert result.exit_code == 0, result.output

    payload = json.loads(result.output)
    assert payload["paths"] == 5
    assert payload["current_section"] == "map"
    assert payload["histories"]["feed"] == ["/", "/feed", "/feed/post/1"]
    assert payload["histories"]["community"] == ["/community/42", "/profile/alice"]
    # The last community entry is alice's profile, which bob must not resume.
    assert payload["activate"] == {"section": "community", "path": "/community"}


def test_replay_table_output(tmp_path: Path):
    log = tmp_path / "visits.txt"
    log.write_text("/community/42\n/map\n", encoding="utf-8")

    result = runner.invoke(cli.app, ["replay", str(log), "-a", "community"])
    assert result.exit_code == 0, result.output
    assert "Section histories" in result.output
    assert "/community/42" in result.output


def test_replay_missing_file(tmp_path: Path):
    result = runner.invoke(cli.app, ["replay", str(tmp_path / "nope.txt")])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_replay_unknown_directive(tmp_path: Path):
    log = tmp_path / "visits.txt"
    log.write_text("/feed\n@teleport /map\n", encoding="utf-8")

    result = runner.invoke(cli.app, ["replay", str(log)])
    assert result.exit_code == 2
    assert "Unknown directive" in result.output


def test_replay_lines_login_directives():
    router = MemoryRouter("/")
    nav = create_navigation(router, UserSession(None), Settings(_env_file=None))

    count = cli.replay_lines(
        ["@login alice", "/profile/alice", "@logout", "/profile/alice/posts"],
        router,
        nav,
    )

    assert count == 2
    histories = nav.histories()
    assert histories["profile"] == ["/profile/alice"]
    assert histories["community"] == ["/profile/alice/posts"]
    assert nav.session.current_username() is None
