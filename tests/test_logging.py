from __future__ import annotations

import logging
from pathlib import Path

from orbitcam.core.logging import Logger, get_logger


def test_global_logger_is_shared() -> None:
    assert get_logger() is get_logger()
    assert get_logger().logger.name == "OrbitCam"


def test_log_dir_adds_file_handler(tmp_path: Path) -> None:
    log = Logger("OrbitCamFileTest", str(tmp_path / "logs"))
    try:
        log.debug("zoom clamped")

        files = list((tmp_path / "logs").glob("orbitcam_*.log"))
        assert len(files) == 1
        for handler in log.logger.handlers:
            handler.flush()
        assert "zoom clamped" in files[0].read_text()
    finally:
        for handler in list(log.logger.handlers):
            handler.close()
            log.logger.removeHandler(handler)


def test_console_only_without_log_dir() -> None:
    log = Logger("OrbitCamConsoleTest")
    try:
        assert [type(h) for h in log.logger.handlers] == [logging.StreamHandler]
    finally:
        for handler in list(log.logger.handlers):
            log.logger.removeHandler(handler)


def test_same_log_dir_is_attached_once(tmp_path: Path) -> None:
    log = Logger("OrbitCamReattachTest")
    try:
        log.add_file_handler(str(tmp_path))
        log.add_file_handler(str(tmp_path))

        file_handlers = [h for h in log.logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert log.log_dir == tmp_path
    finally:
        for handler in list(log.logger.handlers):
            handler.close()
            log.logger.removeHandler(handler)
