import logging

from core.logging_config import setup_logging


def test_repeated_setup_keeps_a_single_handler():
    root = logging.getLogger()
    level = root.level
    before = list(root.handlers)
    try:
        setup_logging("DEBUG")
        first = [h for h in root.handlers if h not in before]
        setup_logging("warning")
        second = [h for h in root.handlers if h not in before]

        assert len(first) == 1
        assert len(second) == 1
        assert second[0] is not first[0]
        assert second[0].level == logging.WARNING
        assert root.level == logging.WARNING
    finally:
        for handler in list(root.handlers):
            if handler not in before:
                root.removeHandler(handler)
        root.setLevel(level)
