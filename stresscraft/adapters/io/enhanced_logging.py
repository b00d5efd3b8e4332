"""
Logging setup with Rich integration.

Library modules log through ``logging.getLogger(__name__)``; the command line
configures the root logger once with a ``RichHandler`` through
``LoggerManager``.
"""

import logging
import os
import threading
from collections.abc import Iterable

from rich.console import Console
from rich.logging import RichHandler


class LoggerManager:
    """Manager for configuring root logging once per process."""

    _console: Console | None = None
    _handler: RichHandler | None = None
    _setup_complete: bool = False
    _setup_lock: threading.Lock = threading.Lock()

    @classmethod
    def setup_global_logging(
        cls, console: Console | None = None, level: int = logging.INFO
    ) -> None:
        """Set up global logging configuration with thread safety."""
        with cls._setup_lock:
            root_logger = logging.getLogger()
            if cls._setup_complete and cls._handler in root_logger.handlers:
                root_logger.setLevel(level)
                return

            cls._console = console or Console(stderr=True)

            # Replace foreign RichHandlers, keep other handlers
            for handler in list(root_logger.handlers):
                if isinstance(handler, RichHandler):
                    root_logger.removeHandler(handler)

            rich_handler = RichHandler(
                console=cls._console,
                show_time=True,
                show_path=False,
                markup=False,
                rich_tracebacks=True,
            )
            rich_handler.setFormatter(logging.Formatter(fmt="%(message)s"))

            root_logger.addHandler(rich_handler)
            root_logger.setLevel(level)
            cls._handler = rich_handler
            cls._setup_complete = True

    @classmethod
    def resolve_level(cls, configured: str = "INFO") -> int:
        """Return the configured level, or WARNING when STRESSCRAFT_QUIET is set."""
        if os.getenv("STRESSCRAFT_QUIET", "").lower() in {"1", "true", "yes"}:
            return logging.WARNING
        return logging.getLevelName(configured.upper())

    @classmethod
    def suppress_modules(cls, modules: Iterable[str], verbose: bool = False) -> None:
        """Keep noisy third-party loggers at WARNING unless verbose."""
        if verbose:
            return
        for module in modules:
            logging.getLogger(module).setLevel(logging.WARNING)


def setup_enhanced_logging(
    console: Console | None = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """Set up the logging system and return the CLI logger."""
    LoggerManager.setup_global_logging(console, level)
    return logging.getLogger("stresscraft.cli")
