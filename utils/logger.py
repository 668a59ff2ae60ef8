# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOGGER_NAME = "shopping_cart"


def setup_logger(log_dir="data/logs", level=logging.INFO):
    """
    Configure the "shopping_cart" logger: console output plus a log file
    in log_dir that rotates at midnight (7 days kept).
    """

    # Create log directory if not exists
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    # Log file base name
    log_file = log_dir / "shopping_cart.log"

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers if setup_logger() is called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=7,
        encoding="utf-8"
    )
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.info("Logger initialized (daily rotation enabled)")
    return logger


def get_logger(name: str) -> logging.Logger:
    # Child of the "shopping_cart" logger. No handlers are attached here,
    # records propagate to whatever setup_logger() configured.
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
