import logging

PACKAGE_LOGGER = "course_recommender"
LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach one stream handler to the package logger; modules log via getLogger(__name__)."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(h)
    logger.setLevel(level.upper())
    return logger
