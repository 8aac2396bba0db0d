"""Console logging setup (Rich).

The CLI calls `configure_logging` once at startup. Library modules only do
`logging.getLogger(__name__)` and never attach handlers themselves.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PACKAGES: tuple[str, ...] = ("core", "adapters", "cli")


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from non-project loggers with a short `[name]` prefix."""

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.split(".")[0]
        record.prefix = "" if top in PROJECT_PACKAGES else f"[{top}] "
        return True


def build_console_handler(level: int = logging.INFO, debug: bool = False) -> RichHandler:
    """RichHandler on stderr; debug mode adds timestamps and source paths."""

    if debug:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=debug,
        show_path=debug,
    )
    fmt = "%(prefix)s%(message)s" if not debug else "%(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))
    handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def configure_logging(level: int | str = logging.INFO, *, debug: bool = False) -> RichHandler:
    """Install a single RichHandler on the root logger.

    Calling it again replaces the previously installed handler instead of
    stacking a second one.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)

    handler = build_console_handler(level, debug=debug)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else level)

    # httpx loguea cada request a INFO; solo lo queremos en debug.
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)
    return handler
