"""Copy-to-clipboard feedback state for rendered code blocks."""

from __future__ import annotations

import logging
from typing import Protocol

from listwindow.runtime.config import get_list_config
from listwindow.runtime.scheduler import Scheduler

_LOG = logging.getLogger(__name__)


class ClipboardPort(Protocol):
    """Writes plain text to the system clipboard."""

    def write_text(self, text: str) -> None: ...


class CodeBlockCopyButton:
    """Copy button state: shows a check mark until the reset delay elapses.

    Without an explicit `reset_seconds` the delay comes from
    `LISTWINDOW_COPY_RESET_SECONDS`.
    """

    def __init__(
        self,
        clipboard: ClipboardPort,
        scheduler: Scheduler,
        *,
        reset_seconds: float | None = None,
    ) -> None:
        if reset_seconds is None:
            reset_seconds = get_list_config().site.copy_reset_seconds
        if reset_seconds < 0.0:
            raise ValueError("reset_seconds must be >= 0")
        self._clipboard = clipboard
        self._scheduler = scheduler
        self._reset_seconds = reset_seconds
        self._copied = False
        self._reset_task: int | None = None

    @property
    def copied(self) -> bool:
        return self._copied

    @property
    def icon(self) -> str:
        return "check" if self._copied else "copy"

    def copy(self, text: str) -> None:
        """Write `text` to the clipboard and restart the feedback timer.

        Clipboard failures propagate and leave the button unchanged.
        """
        self._clipboard.write_text(text)
        self._copied = True
        if self._reset_task is not None:
            self._scheduler.cancel(self._reset_task)
        self._reset_task = self._scheduler.call_later(self._reset_seconds, self._reset)
        _LOG.debug("code_block_copied chars=%d", len(text))

    def _reset(self) -> None:
        self._copied = False
        self._reset_task = None
