"""
Logging setup for the visualizer: a timestamped log file plus a console handler.
"""

import logging
import os
from datetime import datetime
from typing import Optional

LOGGER_NAME = 'hanoi_viz'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(log_dir: str = "logs", level: str = "INFO",
                      console_level: str = "WARNING",
                      log_to_file: bool = True) -> Optional[str]:
    """
    Attach file and console handlers to the hanoi_viz logger.

    Handlers from an earlier call are replaced, so calling this twice does not
    duplicate output. Returns the log file path, or None when file logging is off.
    """
    hanoi_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(hanoi_logger.handlers):
        hanoi_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    file_level = logging.getLevelName(level.upper())
    stream_level = logging.getLevelName(console_level.upper())

    # Console goes to stderr so it never mixes into the diagrams on stdout
    console_handler = logging.StreamHandler()
    console_handler.setLevel(stream_level)
    console_handler.setFormatter(formatter)
    hanoi_logger.addHandler(console_handler)

    log_file = None
    if log_to_file:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(log_dir, f"hanoi_viz_{timestamp}.log")

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        hanoi_logger.addHandler(file_handler)

    hanoi_logger.setLevel(min(file_level if log_to_file else stream_level, stream_level))
    hanoi_logger.propagate = False
    return log_file
