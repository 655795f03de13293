import logging

from .settings import get_settings

logger = logging.getLogger("people_mapper")


def configure_logging(level=None):
    """
    Attach a stream handler to the package logger. The level defaults to
    PEOPLE_MAPPER_LOG_LEVEL. Calling it again only changes the level.
    """
    if level is None:
        level = get_settings().log_level

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        logger.addHandler(handler)

    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
