import logging
import sys

_APP_LOGGER_PREFIX = "task_frontend"


class _ThirdPartyNoiseFilter(logging.Filter):
    """
    Keep application logs at the configured level, but only let third-party
    loggers (httpx logs every request at INFO) through at WARNING+.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == _APP_LOGGER_PREFIX or name.startswith(_APP_LOGGER_PREFIX + "."):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger with a single stderr handler.

    Safe to call more than once: pre-existing root handlers are replaced.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(fmt)
    handler.addFilter(_ThirdPartyNoiseFilter())
    root.addHandler(handler)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
