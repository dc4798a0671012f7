"""
Logging Configuration
Sets up the application logger and routes the rendering stack's warnings
through the same handlers.
"""
import logging
import sys
from typing import Optional

APP_LOGGER = "stereotrig"
# pyvista reports VTK warnings (picking, degenerate meshes) on its own logger
RENDER_LOGGERS = ("pyvista",)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _build_handlers(level: int, log_file: Optional[str]) -> list[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the 'stereotrig' logger, and the render loggers at WARNING
    (or DEBUG when the app runs in debug mode).

    Calling it again replaces the handlers instead of stacking them.

    Args:
        level: Logging level of the application (e.g. logging.DEBUG).
        log_file: Optional path; the file is truncated on start.

    Returns:
        The application logger.
    """
    handlers = _build_handlers(level, log_file)
    render_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING

    for name, logger_level in [(APP_LOGGER, level)] + [(name, render_level) for name in RENDER_LOGGERS]:
        target = logging.getLogger(name)
        for old in list(target.handlers):
            target.removeHandler(old)
            old.close()
        target.setLevel(logger_level)
        target.propagate = False
        for handler in handlers:
            target.addHandler(handler)

    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.debug(f"Logging initialized (level={logging.getLevelName(level)}, file={log_file}).")
    return app_logger
