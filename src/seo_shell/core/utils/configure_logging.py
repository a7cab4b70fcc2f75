# src/seo_shell/core/utils/configure_logging.py
import logging
import sys
from typing import Any, Dict, Optional, Union

from tqdm import tqdm

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"

LevelLike = Union[str, int]


class LogWithTqdm(logging.Handler):
    """
    A logging handler that writes through `tqdm.write()`, so log lines printed
    during a batch run do not break the progress bar.
    """
    def emit(self, record):
        try:
            msg = self.format(record)
            # stderr, the same stream tqdm draws its bars on
            tqdm.write(msg, file=sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


def _to_level(level: Optional[LevelLike], fallback: int) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        value = getattr(logging, level.upper(), None)
        if isinstance(value, int):
            return value
    return fallback


def configure_logger(
        general_level: LevelLike = 'INFO',
        module_specific_levels: Optional[Dict[str, LevelLike]] = None,
        silenced_loggers: Optional[Dict[str, LevelLike]] = None
) -> None:
    """
    Configures the root logger with a tqdm-friendly handler.

    Args:
        general_level: Root level, as a name ('DEBUG') or a logging constant.
        module_specific_levels: Per-logger levels, e.g. {'seo_analyzer': 'DEBUG'}.
        silenced_loggers: Noisy loggers to raise (default CRITICAL), e.g. {'werkzeug': 'WARNING'}.
    """
    handler = LogWithTqdm()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(_to_level(general_level, logging.INFO))

    # Replace, don't stack, handlers when called more than once
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name, level in (module_specific_levels or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.INFO))

    for name, level in (silenced_loggers or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.CRITICAL))


def configure_from_settings(debug_settings: Optional[Dict[str, Any]]) -> None:
    """Applies the 'debug' section of settings.json ({level, modules, silenced})."""
    debug_settings = debug_settings or {}
    configure_logger(
        debug_settings.get("level", "WARNING"),
        debug_settings.get("modules"),
        debug_settings.get("silenced"),
    )
