import logging

from src.hrms_attendance.hrms_attendance.core import logger as logger_module
from src.hrms_attendance.hrms_attendance.core.logger import setup_logger


def test_setup_logger_adds_handlers_once(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(logger_module, "_configured", False)
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logger("DEBUG")
    first = list(root.handlers)
    setup_logger("WARNING")

    assert len(first) == 1
    assert root.handlers == first
    assert root.level == logging.WARNING
