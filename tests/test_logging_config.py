"""
Tests for logging configuration
"""

import logging

import pytest

from httphelper.logging_config import LIBRARY_LOGGER, get_module_logger, setup_logging


@pytest.fixture
def library_logger():
    """The httphelper logger, restored to its previous state afterwards"""
    logger = logging.getLogger(LIBRARY_LOGGER)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)


class TestLogging:
    """Test logger setup helpers"""

    def test_module_logger_is_child_of_library_logger(self):
        """Module loggers should live under the httphelper namespace"""
        logger = get_module_logger("forms")

        assert logger.name == "httphelper.forms"

    def test_null_handler_installed_on_import(self, library_logger):
        """Importing the library should only attach a NullHandler"""
        assert any(isinstance(h, logging.NullHandler) for h in library_logger.handlers)

    def test_setup_logging_writes_debug_to_file(self, library_logger, tmp_path):
        """File handler should receive DEBUG records from module loggers"""
        log_file = tmp_path / "logs" / "httphelper.log"
        logger = setup_logging(log_file=log_file, verbose=False)

        get_module_logger("json_requests").debug("POST https://example.com (2 bytes JSON)")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "httphelper.json_requests - DEBUG - POST https://example.com" in content

    def test_console_only_does_not_force_debug(self, library_logger):
        """Console output alone should lower the level to INFO, not DEBUG"""
        library_logger.setLevel(logging.NOTSET)

        setup_logging(verbose=True)

        assert library_logger.level == logging.INFO

    def test_keeps_stricter_application_level(self, library_logger):
        """An application level that is already lower is left alone"""
        library_logger.setLevel(logging.DEBUG)

        setup_logging(verbose=True)

        assert library_logger.level == logging.DEBUG

    def test_repeated_setup_replaces_only_own_handlers(self, library_logger):
        """Application handlers survive; managed handlers do not stack"""
        app_handler = logging.StreamHandler()
        library_logger.addHandler(app_handler)

        setup_logging(verbose=True)
        setup_logging(verbose=True)

        stdout_handlers = [
            h for h in library_logger.handlers if getattr(h, "_httphelper_managed", False)
        ]
        assert len(stdout_handlers) == 1
        assert stdout_handlers[0].level == logging.INFO
        assert app_handler in library_logger.handlers
