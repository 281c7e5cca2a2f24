"""
Loggers for the ``byzop`` package.

Every logger lives under the ``byzop`` root, which owns two handlers:
a rich console handler writing to stderr and a rotating ``byzop.log`` file.
Clients log contract reads at ``DEBUG`` and sent transactions at ``INFO``.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler

from byzop.config import LOG_LEVELS, config

ROOT_LOGGER = "byzop"
LOG_FILE = "byzop.log"
FILE_HANDLER = "byzop_file"
CONSOLE_HANDLER = "byzop_rich"


def init_logger(
    name: str,
    log_dir: Path | None | Literal[False] = None,
    level: LOG_LEVELS | None = None,
    file_level: LOG_LEVELS | None = None,
    log_file_n: int | None = None,
    log_file_size: int | None = None,
    width: int | None = None,
) -> logging.Logger:
    """
    Get a ``byzop`` logger, attaching the shared handlers on first use.

    Later calls reuse the handlers and only update their levels.
    Arguments left as ``None`` are taken from :class:`.LogConfig`.

    Args:
        name (str): eg. ``clients.NativeOperatorRegistry``, prefixed with ``byzop.``
            unless it already starts with it
        log_dir (:class:`pathlib.Path`): Directory for ``byzop.log``.
            ``False`` disables file logging.
        level (:class:`.LOG_LEVELS`): Console severity
        file_level (:class:`.LOG_LEVELS`): File severity
        log_file_n (int): Rotated log files to keep
        log_file_size (int): Bytes before the log file is rotated
        width (int): Console width
    """
    logs = config.logs
    if log_dir is None:
        log_dir = logs.dir
    if level is None:
        level = logs.level_stdout or logs.level
    if file_level is None:
        file_level = logs.level_file or logs.level
    if log_file_n is None:
        log_file_n = logs.file_n
    if log_file_size is None:
        log_file_size = logs.file_size
    if width is None:
        width = logs.width

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    root = logging.getLogger(ROOT_LOGGER)
    handlers = {h.name: h for h in root.handlers}

    if log_dir is not False and FILE_HANDLER not in handlers:
        root.addHandler(_file_handler(file_level, log_dir, log_file_n, log_file_size))
    elif FILE_HANDLER in handlers:
        handlers[FILE_HANDLER].setLevel(file_level)

    if CONSOLE_HANDLER not in handlers:
        root.addHandler(_console_handler(level, width))
    else:
        handlers[CONSOLE_HANDLER].setLevel(level)

    root.propagate = False

    logger = logging.getLogger(name)
    # the handlers filter by their own level
    logger.setLevel(min(getattr(logging, level), getattr(logging, file_level)))
    return logger


def _file_handler(
    level: LOG_LEVELS, log_dir: Path, backups: int, max_bytes: int
) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        Path(log_dir) / LOG_FILE, mode="a", maxBytes=max_bytes, backupCount=backups
    )
    handler.name = FILE_HANDLER
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter("[%(asctime)s] %(levelname)s [%(name)s]: %(message)s")
    )
    return handler


def _console_handler(level: LOG_LEVELS, width: int | None = None) -> RichHandler:
    # stdout is left to the CLI's json and transaction hashes
    console = Console(stderr=True)
    if width:
        console.width = width

    handler = RichHandler(console=console, rich_tracebacks=True, markup=True)
    handler.name = CONSOLE_HANDLER
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(r"[bold green]\[%(name)s][/bold green] %(message)s"))
    return handler
