import logging

import pytest

from catalog_toolkit import logging_config
from catalog_toolkit.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo dictConfig side effects so later tests keep propagating to caplog."""
    root = logging.getLogger()
    root_handlers, root_level = list(root.handlers), root.level
    yield
    for name in ("catalog_toolkit", "catalog_toolkit.core.index"):
        lg = logging.getLogger(name)
        for h in list(lg.handlers):
            lg.removeHandler(h)
            h.close()
        lg.setLevel(logging.NOTSET)
        lg.propagate = True
    # pytest's own capture handlers are subclasses; only drop the plain ones we added.
    for h in list(root.handlers):
        if h not in root_handlers and type(h) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(root_level)


def test_setup_logging_uses_packaged_config(tmp_path, monkeypatch):
    log_dir = tmp_path / "logs"
    monkeypatch.setenv("CATALOG_LOG_DIR", str(log_dir))

    setup_logging()

    pkg_logger = logging.getLogger("catalog_toolkit")
    assert pkg_logger.level == logging.INFO
    file_handlers = [h for h in pkg_logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str(log_dir / "app.log")
    assert (log_dir / "app.log").exists()


def test_setup_logging_falls_back_without_config(tmp_path, monkeypatch):
    monkeypatch.setenv("CATALOG_LOG_DIR", str(tmp_path / "logs"))

    class _Empty:
        def get_logging_config(self):
            return {}

    monkeypatch.setattr(logging_config, "ConfigManager", _Empty)
    setup_logging()
    assert logging.getLogger().level == logging.INFO


def test_debug_modules_override(tmp_path, monkeypatch):
    monkeypatch.setenv("CATALOG_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("CATALOG_DEBUG_MODULES", "catalog_toolkit.core.index, ")

    setup_logging()

    assert logging.getLogger("catalog_toolkit.core.index").level == logging.DEBUG
