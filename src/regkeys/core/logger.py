import logging
import sys
import contextvars
from typing import Optional

# Context variable naming the key set currently being worked on
_SOURCE: contextvars.ContextVar[str] = contextvars.ContextVar("key_source", default="-")


class _SourceFilter(logging.Filter):
    """Logging filter that injects the current key-set source into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.key_source = _SOURCE.get()
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | source=%(key_source)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def configure_root_logger(level: str = "INFO") -> None:
    """
    Configure the root logger and the regkeys logger.

    The root logger stays at WARNING so that library noise is suppressed;
    only the ``regkeys`` namespace follows the requested level.

    Safe to call multiple times; it will not duplicate handlers.
    """
    root = logging.getLogger()
    regkeys_logger = logging.getLogger("regkeys")

    for h in root.handlers:
        if isinstance(h, logging.StreamHandler) and any(isinstance(f, _SourceFilter) for f in h.filters):
            regkeys_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_SourceFilter())
    root.addHandler(handler)
    if root.level == logging.NOTSET or root.level > logging.WARNING:
        root.setLevel(logging.WARNING)

    regkeys_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str = "regkeys") -> logging.Logger:
    """Get a module logger; handlers live on the root and are set up by the CLI."""
    return logging.getLogger(name)


def push_source(source: Optional[str]) -> Optional[contextvars.Token]:
    """Set the current key-set source in context and return a token for later reset."""
    if not source:
        return None
    return _SOURCE.set(source)


def reset_source(token: Optional[contextvars.Token]) -> None:
    """Reset the key-set source using the provided token (if any)."""
    if token is None:
        return
    _SOURCE.reset(token)
