import logging
from contextlib import contextmanager

from usermgr.core.logging import setup_logging


@contextmanager
def bare_root_logger():
    """Root logger without pytest's capture handlers, restored afterwards."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    root.handlers = []
    try:
        yield root
    finally:
        for h in root.handlers:
            h.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_configures_console_and_file_handlers(tmp_path):
    logfile = tmp_path / "usermgr.log"

    with bare_root_logger() as root:
        setup_logging("info", logfile)

        assert root.level == logging.INFO
        kinds = sorted(type(h).__name__ for h in root.handlers)
        assert kinds == ["FileHandler", "StreamHandler"]

        logging.getLogger("usermgr.test").info("hello")
        for h in root.handlers:
            h.flush()

    assert "[INFO] usermgr.test: hello" in logfile.read_text(encoding="utf-8")


def test_second_call_only_changes_level():
    with bare_root_logger() as root:
        setup_logging("WARNING")
        setup_logging("DEBUG")

        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
