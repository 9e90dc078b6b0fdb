"""Unit tests for vaultref.api.refs.RenameGuard."""

from vaultref.api.config.GuardConfig import GuardConfig
from vaultref.api.refs import RenameGuard


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_repeat_within_window_rejected():
    clock = FakeClock()
    guard = RenameGuard(clock=clock)
    assert guard.admit("a.png", "b.png") is True
    clock.now = 0.5
    assert guard.admit("a.png", "b.png") is False


def test_repeat_after_window_admitted():
    clock = FakeClock()
    guard = RenameGuard(clock=clock)
    assert guard.admit("a.png", "b.png") is True
    clock.now = 0.5
    assert guard.admit("a.png", "b.png") is False
    clock.now = 2.5
    assert guard.admit("a.png", "b.png") is True


def test_different_transitions_independent():
    guard = RenameGuard(clock=FakeClock())
    assert guard.admit("a.png", "b.png") is True
    assert guard.admit("b.png", "a.png") is True
    assert guard.admit("a.png", "c.png") is True


def test_old_entries_pruned():
    clock = FakeClock()
    guard = RenameGuard(clock=clock)
    guard.admit("a.png", "b.png")
    clock.now = 10.0
    guard.admit("c.png", "d.png")
    assert len(guard) == 1


def test_custom_windows():
    clock = FakeClock()
    guard = RenameGuard(GuardConfig(window_seconds=0.1, retention_seconds=0.2), clock=clock)
    guard.admit("a.png", "b.png")
    clock.now = 0.15
    assert guard.admit("a.png", "b.png") is True


def test_guards_do_not_share_state():
    clock = FakeClock()
    first = RenameGuard(clock=clock)
    second = RenameGuard(clock=clock)
    assert first.admit("a.png", "b.png") is True
    assert second.admit("a.png", "b.png") is True
