import logging
from logging import (
    Logger,
    StreamHandler,
)
import os
import sys
from typing import Tuple

from termcolor import colored


def bold_red(text: str) -> str:
    return colored(text, 'red', attrs=['bold'])


def bold_yellow(text: str) -> str:
    return colored(text, 'yellow', attrs=['bold'])


class ExitsLogFormatter(logging.Formatter):

    def __init__(self, fmt: str) -> None:
        super().__init__(fmt)

    def format(self, record: logging.LogRecord) -> str:
        record.shortname = record.name.split('.')[-1]  # type: ignore

        if record.levelno >= logging.ERROR:
            return bold_red(super().format(record))
        elif record.levelno >= logging.WARNING:
            return bold_yellow(super().format(record))
        else:
            return super().format(record)


LOG_FORMATTER = ExitsLogFormatter(
    fmt='%(levelname)8s  %(asctime)s  %(shortname)20s  %(message)s',
)


def setup_stderr_logging(level: int = None) -> Tuple[Logger, StreamHandler]:
    if level is None:
        level = logging.INFO
    logger = logging.getLogger()
    logger.setLevel(level)

    handler_stream = logging.StreamHandler(sys.stderr)
    handler_stream.setLevel(level)

    handler_stream.setFormatter(LOG_FORMATTER)

    logger.addHandler(handler_stream)

    logger.debug('Logging initialized: PID=%s', os.getpid())

    return logger, handler_stream
