import logging
import functools
import time

# Define Log Levels
DEBUG = logging.DEBUG
INFO = logging.INFO
WARNING = logging.WARNING
ERROR = logging.ERROR


# Singleton logger setup
def get_logger(name="GraphPatterns"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - [%(levelname)s] - %(name)s - [%(filename)s:%(lineno)d] - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


logger = get_logger()


def set_log_level(level):
    logger.setLevel(level)


def log_match(func):
    """Aspect: Log successful matches (DEBUG level).

    Matchers run on every rewrite attempt, so the message is only built
    when DEBUG is enabled.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        result = func(*args, **kwargs)
        if result and logger.isEnabledFor(DEBUG):
            logger.debug(f"{func.__name__} matched: {result!r}")
        return result

    return wrapper


def log_indexing(func):
    """Aspect: Log construction of a graph view."""

    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        start_time = time.time()
        func(self, *args, **kwargs)
        duration = (time.time() - start_time) * 1000
        logger.debug(
            f"Indexed {len(self.nodes)} nodes "
            f"({len(self.graph_inputs)} graph inputs) in {duration:.2f}ms"
        )

    return wrapper
