import datetime
import logging
import time
from typing import Final


LOG_FORMAT: Final = '%(asctime)s - %(name)s - %(levelname)-5s - %(delta)s: %(message)s'
"""The format of all messages emitted via the package logger."""


class DeltaTimeFormatter(logging.Formatter):
    """Allows to log the time relative to a reference time by adding an
    attribute `delta` to the :class:`.logging.LogRecord`.

    >>> import logging, sys, time
    >>> logger = logging.getLogger('demo')
    >>> stream_handler = logging.StreamHandler(stream=sys.stdout)
    >>> delta_time_formatter = DeltaTimeFormatter('%(delta)s: %(message)s')
    >>> stream_handler.setFormatter(delta_time_formatter)
    >>> logger.addHandler(stream_handler)
    >>> delta_time_formatter.set_reference_time(time.time())
    >>> logger.warning('Hello world!')  # doctest: +SKIP
    0:00:00.012: Hello world!
    """

    def __init__(self, fmt: str = LOG_FORMAT) -> None:
        super().__init__(fmt)
        self._reference_time = time.time()

    def format(self, record: logging.LogRecord) -> str:
        delta = datetime.timedelta(seconds=record.created - self._reference_time)
        record.delta = str(delta)[:-3]
        return super().format(record)

    def get_reference_time(self) -> float:
        """Get the reference time in seconds since the :ref:`epoch <epoch>`.
        This is compatible with the output of :func:`.time.time`.
        """
        return self._reference_time

    def set_reference_time(self, reference_time: float) -> None:
        """Set the reference time to `reference_time` seconds since the
        :ref:`epoch <epoch>`.
        """
        self._reference_time = reference_time


delta_time_formatter = DeltaTimeFormatter()

stream_handler = logging.StreamHandler()
stream_handler.setFormatter(delta_time_formatter)
# Module loggers propagate to this handler, so the filter belongs here.
stream_handler.addFilter(lambda record: str(record.msg).strip() != '')

logger = logging.getLogger('symform')
logger.propagate = False
logger.addHandler(stream_handler)
logger.setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger for the module `name`.

    >>> get_logger('symform.firstorder.atomic').name
    'symform.firstorder.atomic'
    >>> get_logger('symform').parent.name
    'root'
    """
    if name == logger.name:
        return logger
    if name.startswith(logger.name + '.'):
        return logging.getLogger(name)
    return logger.getChild(name)


def set_log_level(level: int) -> int:
    """Set the level of the package logger. Returns the previous level so
    that callers can restore it.

    >>> save_level = set_log_level(logging.DEBUG)
    >>> logger.level == logging.DEBUG
    True
    >>> _ = set_log_level(save_level)
    """
    save_level = logger.level
    logger.setLevel(level)
    return save_level
