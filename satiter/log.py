import logging
from sys import stderr
from typing import Optional

ROOT_NAME = "satiter"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(ROOT_NAME)


def init_logger(path: Optional[str] = None, verbose: bool = False) -> logging.Logger:
    """Attaches the handlers of the command line tool to the package logger,
    replacing those of a previous call.

    Library code never calls this: sessions only emit records, it is up to
    the application to decide where they go.

    Args:
        path: if given, a log file that receives every record
        verbose: whether DEBUG records are shown on the console
    """
    formatter = logging.Formatter(LOG_FORMAT)
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    sh = logging.StreamHandler(stderr)
    sh.setLevel(logging.DEBUG if verbose else logging.INFO)
    sh.setFormatter(formatter)
    logger.addHandler(sh)

    if path is not None:
        fh = logging.FileHandler(path, "w+")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger


def get_sublogger(name: str) -> logging.Logger:
    return logging.getLogger("{}.{}".format(ROOT_NAME, name))
