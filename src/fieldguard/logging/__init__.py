"""
Sets up the logging for the fieldguard package. The validators look up the active logger in a ContextVar each time
they log, so web services validating forms for several requests at once can bind a request specific logger.
"""
import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Callable, Iterator

logger: ContextVar[logging.Logger] = ContextVar("logger", default=logging.getLogger("fieldguard-unbound"))


def initialize_logger(validation_logger: logging.Logger) -> Callable[[], None]:
    """
    Makes `validation_logger` the logger of the validators created and run in the current context. Returns a teardown
    that rebinds whatever logger was active before.
    """
    token = logger.set(validation_logger)

    def restore_previous_logger() -> None:
        logger.reset(token)

    return restore_previous_logger


@contextmanager
def use_logger(validation_logger: logging.Logger) -> Iterator[logging.Logger]:
    """
    Routes the log records of all validators inside the with-block to `validation_logger`, e.g. one logger per form
    submission. Nested blocks restore the outer logger on exit.
    """
    restore_previous_logger = initialize_logger(validation_logger)
    try:
        yield validation_logger
    finally:
        restore_previous_logger()
