"""Centralized list-window configuration sourced from environment."""

from __future__ import annotations

import math
import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

from listwindow.api.window import LayoutParams


@dataclass(frozen=True, slots=True)
class ListLayoutConfig:
    item_height: float
    buffer_count: int
    viewport_height: float
    wheel_lines: int

    def layout_params(self) -> LayoutParams:
        return LayoutParams(item_height=self.item_height, buffer_count=self.buffer_count)


@dataclass(frozen=True, slots=True)
class ListLoggingConfig:
    level_name: str
    console_format: str
    file_path: str | None


@dataclass(frozen=True, slots=True)
class ListSiteConfig:
    copy_reset_seconds: float


@dataclass(frozen=True, slots=True)
class ListConfig:
    layout: ListLayoutConfig
    logging: ListLoggingConfig
    site: ListSiteConfig


_LIST_CONFIG: ContextVar[ListConfig | None] = ContextVar("listwindow_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if math.isnan(value):
        value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _positive_float(name: str, default: float, *, env: Mapping[str, str] | None = None) -> float:
    value = _float(name, default, env=env)
    return value if 0.0 < value < float("inf") else float(default)


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("LISTWINDOW_LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def _normalize_log_format(raw: str) -> str:
    value = raw.strip().lower()
    return value if value in {"text", "json"} else "text"


def load_list_config(*, env: Mapping[str, str] | None = None) -> ListConfig:
    file_path = _text("LISTWINDOW_LOG_FILE", "", env=env)
    return ListConfig(
        layout=ListLayoutConfig(
            item_height=_positive_float("LISTWINDOW_ITEM_HEIGHT", 32.0, env=env),
            buffer_count=_int("LISTWINDOW_BUFFER_COUNT", 20, minimum=0, env=env),
            viewport_height=_float("LISTWINDOW_VIEWPORT_HEIGHT", 300.0, minimum=0.0, env=env),
            wheel_lines=_int("LISTWINDOW_WHEEL_LINES", 3, minimum=1, env=env),
        ),
        logging=ListLoggingConfig(
            level_name=resolve_log_level_name(env=env),
            console_format=_normalize_log_format(_text("LISTWINDOW_LOG_FORMAT", "text", env=env)),
            file_path=file_path or None,
        ),
        site=ListSiteConfig(
            copy_reset_seconds=_float("LISTWINDOW_COPY_RESET_SECONDS", 2.0, minimum=0.0, env=env),
        ),
    )


def initialize_list_config(*, env: Mapping[str, str] | None = None) -> ListConfig:
    config = load_list_config(env=env)
    _LIST_CONFIG.set(config)
    return config


def set_list_config(config: ListConfig) -> ListConfig:
    _LIST_CONFIG.set(config)
    return config


def get_list_config() -> ListConfig:
    config = _LIST_CONFIG.get()
    if config is not None:
        return config
    return initialize_list_config()


__all__ = [
    "ListConfig",
    "ListLayoutConfig",
    "ListLoggingConfig",
    "ListSiteConfig",
    "get_list_config",
    "initialize_list_config",
    "load_list_config",
    "resolve_log_level_name",
    "set_list_config",
]
