import logging
import sys

from logging.handlers import RotatingFileHandler
from pathlib import Path

from app.config import load_settings

formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)-8s - %(message)s')
CRITICAL_FORMATTER = logging.Formatter('[%(levelname)-8s] [%(asctime)s] - %(name)s - %(message)s')


class LessThanFilter(logging.Filter):
    def __init__(self, exclusive_maximum, name=""):
        super(LessThanFilter, self).__init__(name)
        self.max_level = exclusive_maximum

    def filter(self, record):
        # non-zero return means we log this message
        return 1 if record.levelno < self.max_level else 0


def log_to_file(logger: logging.Logger, output_path: str, base_logdir: Path = "logs") -> logging.Logger:
    """
    Attach a rotating file handler to the logger.
    :param logger:
    :param output_path: file name ending in .log
    :param base_logdir: directory the file is created in
    """
    base_logdir = Path(base_logdir)
    base_logdir.mkdir(parents=True, exist_ok=True)
    output_path = Path(output_path)

    if output_path.suffix != ".log":
        raise ValueError(f"Log file must end with .log, got {output_path}")

    log_file_path = base_logdir / output_path
    target = log_file_path.resolve().as_posix()
    for handler in logger.handlers:
        if isinstance(handler, RotatingFileHandler) and handler.baseFilename == target:
            return logger

    file_handler = RotatingFileHandler(
        filename=log_file_path.as_posix(),
        maxBytes=10_000_000,  # 10 MB per log file
        backupCount=5
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger


def get_logger(log_name=__file__, level=None, filename=None):
    """
    Get a logger that writes INFO..WARNING to stdout and ERROR+ to stderr.

    Level and the optional log file default to LOG_LEVEL / LOG_FILE from the
    environment. Handlers are attached once per logger name, so calling this
    repeatedly for the same module is safe.

    :param log_name: usually __name__
    :param level: overrides LOG_LEVEL
    :param filename: overrides LOG_FILE; relative to logs/
    :return:
    """
    settings = load_settings()
    level = level or settings.log_level
    filename = filename or settings.log_file

    logger = logging.getLogger(log_name)
    logger.setLevel(level)

    if len(logger.handlers) == 0:
        stream_handler_info = logging.StreamHandler(stream=sys.stdout)
        stream_handler_info.setLevel(logging.DEBUG)
        stream_handler_info.setFormatter(formatter)
        stream_handler_info.addFilter(LessThanFilter(logging.ERROR))

        stream_handler_error = logging.StreamHandler(stream=sys.stderr)
        stream_handler_error.setLevel(logging.ERROR)
        stream_handler_error.setFormatter(CRITICAL_FORMATTER)

        logger.addHandler(stream_handler_info)
        logger.addHandler(stream_handler_error)
        logger.propagate = False

    if filename:
        logger = log_to_file(logger, filename)

    return logger
