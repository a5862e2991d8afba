# =============================================================================
# tests/test_core.py - Settings and Logging Tests
# =============================================================================

import logging

import pytest

from integrations_api.app.core.config import Settings
from integrations_api.app.core.logging_config import HANDLER_NAME, SERVER_LOGGERS, setup_logging


class TestSettings:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("warn", "WARNING"),
            ("Warning", "WARNING"),
            (" debug ", "DEBUG"),
            ("fatal", "CRITICAL"),
            ("verbose", "INFO"),
        ],
    )
    def test_log_level_is_normalised(self, raw, expected):
        assert Settings(log_level=raw).log_level == expected

    def test_normalised_level_is_usable_by_uvicorn(self):
        from uvicorn.config import LOG_LEVELS

        assert Settings(log_level="warn").log_level.lower() in LOG_LEVELS


@pytest.fixture
def bare_loggers():
    """Detach root/uvicorn handlers for the test and restore them afterwards."""
    names = ("",) + SERVER_LOGGERS
    saved = {}
    for name in names:
        logger = logging.getLogger(name)
        saved[name] = (list(logger.handlers), logger.level, logger.propagate)
        logger.handlers = []
    yield
    for name, (handlers, level, propagate) in saved.items():
        logger = logging.getLogger(name)
        logger.handlers = handlers
        logger.setLevel(level)
        logger.propagate = propagate


def own_handlers(logger):
    return [h for h in logger.handlers if h.get_name() == HANDLER_NAME]


class TestSetupLogging:
    def test_root_and_uvicorn_share_handlers(self, bare_loggers, tmp_path):
        log_file = tmp_path / "api.log"

        setup_logging(Settings(log_level="debug", log_file=str(log_file)))

        root = logging.getLogger()
        handlers = own_handlers(root)
        assert root.level == logging.DEBUG
        assert len(handlers) == 2
        access = logging.getLogger("uvicorn.access")
        assert access.handlers == handlers
        assert access.propagate is False
        assert logging.getLogger("uvicorn.error").propagate is True

        access.info("GET /integrations/payable 200")
        for handler in handlers:
            handler.flush()
        assert "[INFO] uvicorn.access: GET /integrations/payable 200" in log_file.read_text()

        for handler in handlers:
            handler.close()

    def test_second_call_is_a_no_op(self, bare_loggers):
        setup_logging(Settings(log_level="info"))
        handlers = own_handlers(logging.getLogger())

        setup_logging(Settings(log_level="debug"))

        assert own_handlers(logging.getLogger()) == handlers
        assert len(handlers) == 1
        assert logging.getLogger().level == logging.INFO
