# orbitcam/core/logging.py

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional


class Logger:
    """
    Camera controller logging.
    Console output always; file output once a log directory is attached.
    """

    def __init__(self, name: str = "OrbitCam", log_dir: Optional[str] = None):
        self.name = name
        self.log_dir: Optional[Path] = None

        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)

        if not self.logger.handlers:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(logging.INFO)
            console_handler.setFormatter(logging.Formatter(
                '%(levelname)-8s [%(name)s] %(message)s'
            ))
            self.logger.addHandler(console_handler)

        if log_dir:
            self.add_file_handler(log_dir)

    def add_file_handler(self, log_dir: str):
        """Also write DEBUG and above to a timestamped file in log_dir."""
        log_dir = Path(log_dir)
        if self.log_dir == log_dir:
            return

        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"orbitcam_{timestamp}.log"

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(levelname)-8s [%(name)s:%(funcName)s:%(lineno)d] %(message)s'
        ))
        self.logger.addHandler(file_handler)
        self.log_dir = log_dir

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)


# Global logger instance
_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get global camera logger."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger
