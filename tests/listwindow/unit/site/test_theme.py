from __future__ import annotations

from listwindow.site.theme import ThemeToggle


class _MemoryStore:
    def __init__(self, value: bool | None = None) -> None:
        self.value = value
        self.writes: list[bool] = []

    def read_dark_mode(self) -> bool | None:
        return self.value

    def write_dark_mode(self, enabled: bool) -> None:
        self.value = enabled
        self.writes.append(enabled)


def test_stored_preference_wins_over_system_default() -> None:
    toggle = ThemeToggle(_MemoryStore(False), system_prefers_dark=True)

    assert not toggle.dark
    assert toggle.theme_class == "light"


def test_system_default_used_when_nothing_stored() -> None:
    assert ThemeToggle(_MemoryStore(None), system_prefers_dark=True).dark


def test_toggle_flips_and_persists() -> None:
    store = _MemoryStore(None)
    toggle = ThemeToggle(store)

    assert toggle.toggle() is True
    assert toggle.toggle() is False
    assert store.writes == [True, False]
