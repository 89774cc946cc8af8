"""Process-wide logger shared by the server modules."""
import logging
import sys

LOG_FORMAT = "time=%(asctime)s level=%(levelname)s msg=%(message)s"

logger: logging.Logger = logging.getLogger("arithmetic_api")


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a stdout handler to the service logger.

    Safe to call more than once: the previous handler is replaced.

    :param str level: Logging level name (e.g. "INFO")

    :return: The configured service logger
    :rtype: logging.Logger
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)

    # The request dump already gives one line per request
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    return logger
