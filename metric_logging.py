"""
Logging setup for the metric modules and command line
"""
import logging
from typing import Union

LOGGER_NAMES = ("metric_parser", "metric_scaler", "metric_cli")

_handler = None


def configure_logging(level: Union[str, int] = logging.WARNING) -> logging.Handler:
    """Send log records from the metric modules to stderr at ``level``.

    Safe to call more than once; the handler is created on the first call and
    only its level changes afterwards.
    """
    global _handler
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(filename)s:%(lineno)d \"%(funcName)s\" %(levelname)s: %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S %z",
            )
        )
    _handler.setLevel(level)
    for name in LOGGER_NAMES:
        lgr = logging.getLogger(name)
        lgr.setLevel(level)
        lgr.propagate = False
        if _handler not in lgr.handlers:
            lgr.addHandler(_handler)
    return _handler
