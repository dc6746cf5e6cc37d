import logging

import pytest

from fieldschema.logging_config import setup_logging


def test_setup_logging_configures_console_handler():
    package_logger = setup_logging("warning")

    assert package_logger.name == "fieldschema"
    assert package_logger.level == logging.WARNING
    handler_names = [handler.get_name() for handler in package_logger.handlers]
    assert handler_names.count("fieldschema-console") == 1


def test_setup_logging_does_not_stack_handlers():
    setup_logging(logging.INFO)
    package_logger = setup_logging(logging.DEBUG)

    assert package_logger.level == logging.DEBUG
    assert len([h for h in package_logger.handlers if h.get_name() == "fieldschema-console"]) == 1


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging("chatty")
