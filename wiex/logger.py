import logging
import sys
from pathlib import Path

LOGGER_NAME = "wiex"


def setup_logger(log_dir: str | None = None, name: str = LOGGER_NAME) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    if logger.handlers:
        return logger

    # info goes to stdout, warnings and errors to stderr, bare message on both
    plain = logging.Formatter("%(message)s")

    out = logging.StreamHandler(sys.stdout)
    out.setFormatter(plain)
    out.addFilter(lambda record: record.levelno < logging.WARNING)
    logger.addHandler(out)

    err = logging.StreamHandler(sys.stderr)
    err.setLevel(logging.WARNING)
    err.setFormatter(plain)
    logger.addHandler(err)

    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(Path(log_dir) / "wiex.log", encoding="utf-8")
        fh.setFormatter(logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(message)s"
        ))
        logger.addHandler(fh)

    return logger
