import datetime
import logging
import time


class DeltaTimeFormatter(logging.Formatter):
    """Allows to log the time relative to a reference time by adding an
    attribute `delta` to the :class:`.logging.LogRecord`. The reference time
    defaults to the time when :mod:`rationals` was imported.

    >>> import logging, sys, time
    >>> logger = logging.getLogger('demo')
    >>> stream_handler = logging.StreamHandler(stream=sys.stdout)
    >>> delta_time_formatter = DeltaTimeFormatter('%(delta)s: %(message)s')
    >>> stream_handler.setFormatter(delta_time_formatter)
    >>> logger.addHandler(stream_handler)
    >>> delta_time_formatter.set_reference_time(time.time())
    >>> logger.warning('Hello world!')  # doctest: +SKIP
    0:00:00.001: Hello world!
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.set_reference_time(time.time())

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


logger = logging.getLogger('rationals')
logger.setLevel(logging.CRITICAL)

_stream_handler = logging.StreamHandler()
_stream_handler.setFormatter(
    DeltaTimeFormatter('%(levelname)s[%(delta)s] %(name)s: %(message)s'))
logger.addHandler(_stream_handler)


def show_progress(flag: bool = True) -> None:
    """Switch debug output of :mod:`rationals` on or off.

    >>> show_progress()
    >>> logger.getEffectiveLevel() == logging.DEBUG
    True
    >>> show_progress(False)
    >>> logger.getEffectiveLevel() == logging.CRITICAL
    True
    """
    if flag:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.CRITICAL)
