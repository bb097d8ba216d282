"""Unit tests for MemoryRouter."""
from __future__ import annotations

from tabnav.router import MemoryRouter


def test_router_initial_state():
    router = MemoryRouter("/feed")
    assert router.current_path == "/feed"
    assert router.is_ready is True
    assert router.can_go_back() is False
    assert router.can_go_forward() is False


def test_push_emits_and_truncates_forward_entries():
    router = MemoryRouter("/")
    seen: list[str] = []
    router.on_route_change_complete(seen.append)

    router.push("/feed")
    router.push("/community")
    assert router.back() is True
    router.push("/map")

    assert router.entries == ["/", "/feed", "/map"]
    assert router.current_path == "/map"
    assert seen == ["/feed", "/community", "/feed", "/map"]
    assert router.pushed == ["/feed", "/community", "/map"]


def test_replace_overwrites_current_entry():
    router = MemoryRouter("/")
    router.push("/feed")
    router.replace("/feed/post/1")
    assert router.entries == ["/", "/feed/post/1"]


def test_back_and_forward():
    router = MemoryRouter("/")
    router.push("/feed")
    assert router.back() is True
    assert router.current_path == "/"
    assert router.back() is False
    assert router.forward() is True
    assert router.current_path == "/feed"
    assert router.forward() is False


def test_before_pop_state_can_cancel():
    router = MemoryRouter("/")
    router.push("/feed")
    seen: list[str] = []
    router.on_route_change_complete(seen.append)
    router.set_before_pop_state(lambda destination, delta: False)

    assert router.back() is False
    assert router.current_path == "/feed"
    assert seen == []

    router.set_before_pop_state(None)
    assert router.back() is True


def test_before_pop_state_receives_direction():
    router = MemoryRouter("/")
    router.push("/feed")
    calls: list[tuple[str, int]] = []
    router.set_before_pop_state(lambda destination, delta: calls.append((destination, delta)) or True)

    router.back()
    router.forward()

    assert calls == [("/", -1), ("/feed", 1)]


def test_off_route_change_complete():
    router = MemoryRouter("/")
    seen: list[str] = []
    router.on_route_change_complete(seen.append)
    router.off_route_change_complete(seen.append)
    router.push("/feed")
    assert seen == []


def test_ready_change_notifies_only_on_change():
    router = MemoryRouter("/", ready=False)
    changes: list[bool] = []
    router.on_ready_change(changes.append)

    router.set_ready(False)
    router.set_ready(True)
    router.set_ready(True)
    router.set_ready(False)

    assert changes == [True, False]
