from __future__ import annotations

import logging
import warnings
from pathlib import Path
from shutil import move
from typing import List

LOGGER_ID = "vec3py"
LOG_FORMAT = "%(asctime)-24s|%(levelname)-9s|%(name)-30s|%(message)s"
vec3py_logger = logging.getLogger(LOGGER_ID)
module_logger = logging.getLogger(f"{LOGGER_ID}.logging")
vec3py_handlers: List[logging.Handler] = list()


def config_logging(
    handlers: List[logging.Handler],
    replace: bool = True,
    level: int = logging.DEBUG,
    redirect_warnings: bool = True,
) -> None:
    """
    Attaches the given handlers to the root logger so that records of the ``vec3py``
    logger (and of its children such as ``vec3py.vector``) reach them. The library
    itself never calls this; applications do.

    Args:
        handlers: Handlers to attach, already configured with levels and formatters.
        replace: If True, the handlers attached by an earlier call are detached first.
        level: Level of the ``vec3py`` logger. ``logging.DEBUG`` also records every
            vector zeroed by a non-finite scale factor.
        redirect_warnings: Route :mod:`warnings` through the same handlers. This changes
            the global warnings filter to ``"once"``.
    """
    global vec3py_handlers
    root_logger = logging.getLogger()
    if replace and vec3py_handlers:
        for h in vec3py_handlers:
            root_logger.removeHandler(h)
    for h in handlers:
        root_logger.addHandler(h)
    vec3py_handlers = handlers

    vec3py_logger.setLevel(level)

    if redirect_warnings:
        logging.captureWarnings(redirect_warnings)
        warn_log = logging.getLogger("py.warnings")
        warnings.simplefilter("once")
        for h in handlers:
            warn_log.addHandler(h)
    vec3py_logger.info("Started vec3py logging.")
    for h in handlers:
        if isinstance(h, logging.FileHandler):
            module_logger.info(f"Logging to file: {h.baseFilename}.")


def set_up_simple_logging(
    log_file: str | None = None,
    redirect_warnings: bool = True,
    level: int = logging.INFO,
) -> None:
    """
    Logs ``vec3py`` records to ``sys.stderr`` and, if ``log_file`` is given, to that
    file as well, using :data:`LOG_FORMAT`. A file left over from an earlier run
    is kept as ``<log_file>.1``. Use :func:`config_logging` to install custom
    handlers instead.

    Args:
        log_file: Path of the log file. No file is written if omitted.
        redirect_warnings: Route :mod:`warnings` through the same handlers.
        level: Level of both the handlers and the ``vec3py`` logger. Defaults to ``logging.INFO``.
    """
    sh = logging.StreamHandler()
    sh.setLevel(level)
    sh.setFormatter(logging.Formatter(LOG_FORMAT))
    handlers: List[logging.Handler] = [sh]
    moved_log = False
    fh = None
    if log_file:
        if Path(log_file).exists():
            move(log_file, f"{log_file}.1")
            moved_log = True
        fh = logging.FileHandler(log_file, "w", "utf-8")
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        fh.setLevel(level)
        handlers.append(fh)
    config_logging(handlers, level=level, redirect_warnings=redirect_warnings)
    if moved_log and fh is not None:
        module_logger.info(f"Moved old log file to '{fh.baseFilename}.1'.")
