# contentconv/logconfig.py
import logging, sys

from contentconv.settings import LOG_LEVEL

PACKAGE_LOGGER = "contentconv"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"

def setup_logging(level: str | None = None, logger: logging.Logger | None = None) -> logging.Logger:
    """
    Attach a stdout handler to the package logger and set its level.
    Host applications configure the root logger themselves; this only
    touches `contentconv` (or the logger passed in).

    Level falls back to CONTENTCONV_LOG_LEVEL, then INFO for unknown names.
    Calling it again on a logger that already has handlers does nothing.
    """
    logger = logger or logging.getLogger(PACKAGE_LOGGER)
    if logger.handlers:
        return logger
    level = level or LOG_LEVEL
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(h)
    return logger
