import logging
import sys


logger = logging.getLogger("xchelper")

# Libraries that log every request or git call at INFO/DEBUG
NOISY_LOGGERS = ("git", "minio", "urllib3")

_handler = logging.StreamHandler(sys.stdout)
_handler.setFormatter(logging.Formatter("%(message)s"))


def configure_logging(debug: bool):
    """
    Send xchelper logs to stdout, at DEBUG level when ``debug`` is set.

    Third-party loggers are kept at WARNING unless debugging.
    """
    log_level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(log_level)

    # sys.stdout may have been replaced since the last call
    _handler.stream = sys.stdout
    if _handler not in logger.handlers:
        logger.addHandler(_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)
