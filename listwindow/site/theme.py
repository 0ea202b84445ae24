"""Dark-mode toggle over a persisted boolean preference."""

from __future__ import annotations

from typing import Protocol


class PreferenceStore(Protocol):
    """Reads and writes the persisted dark-mode preference."""

    def read_dark_mode(self) -> bool | None: ...

    def write_dark_mode(self, enabled: bool) -> None: ...


class ThemeToggle:
    def __init__(self, store: PreferenceStore, *, system_prefers_dark: bool = False) -> None:
        stored = store.read_dark_mode()
        self._store = store
        self._dark = system_prefers_dark if stored is None else bool(stored)

    @property
    def dark(self) -> bool:
        return self._dark

    @property
    def theme_class(self) -> str:
        return "dark" if self._dark else "light"

    def toggle(self) -> bool:
        """Flip dark mode, persist it, and return the new value."""
        self._dark = not self._dark
        self._store.write_dark_mode(self._dark)
        return self._dark
