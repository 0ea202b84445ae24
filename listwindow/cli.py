"""Command-line probe printing one window result as JSON."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from listwindow.api.window import InvalidConfiguration
from listwindow.diagnostics.json_codec import dumps_text
from listwindow.runtime.config import get_list_config
from listwindow.runtime.logging import setup_list_logging
from listwindow.ui_runtime.windowing import compute_window

_LOG = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    layout = get_list_config().layout
    parser = argparse.ArgumentParser(
        prog="listwindow-probe",
        description="Compute the materialized range of a virtualized list.",
    )
    parser.add_argument("--items", type=int, required=True, help="Total item count N.")
    parser.add_argument("--item-height", type=float, default=layout.item_height, help="Pixel height per row.")
    parser.add_argument("--buffer", type=int, default=layout.buffer_count, help="Overscan rows per edge.")
    parser.add_argument("--viewport", type=float, default=layout.viewport_height, help="Viewport height in pixels.")
    parser.add_argument("--scroll", type=float, default=0.0, help="Scroll offset in pixels.")
    parser.add_argument("--pretty", action="store_true", help="Indent JSON output.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    setup_list_logging()
    args = build_parser().parse_args(argv)
    try:
        window = compute_window(args.items, args.item_height, args.buffer, args.scroll, args.viewport)
    except InvalidConfiguration as exc:
        _LOG.debug("probe_invalid_configuration", exc_info=True)
        print(f"listwindow-probe: {exc}", file=sys.stderr)
        return 2
    payload = {
        "start_index": window.start_index,
        "end_index": window.end_index,
        "offset_top": window.offset_top,
        "total_height": window.total_height,
    }
    print(dumps_text(payload, pretty=args.pretty))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
