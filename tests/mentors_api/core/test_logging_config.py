import logging

import pytest

from mentors_api.core import logging_config
from mentors_api.core.logging_config import LOG_FORMAT, configure_logging


@pytest.fixture
def root_logger(monkeypatch: pytest.MonkeyPatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, 'handlers', [])
    monkeypatch.setattr(root, 'level', root.level)
    monkeypatch.setattr(logging_config, '_console_handler', None)
    return root


def test_configure_logging_installs_single_console_handler(root_logger) -> None:
    configure_logging('DEBUG')
    configure_logging('DEBUG')

    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.DEBUG
    assert root_logger.handlers[0].formatter._fmt == LOG_FORMAT


def test_configure_logging_keeps_handlers_installed_by_host(root_logger) -> None:
    host_handler = logging.NullHandler()
    root_logger.addHandler(host_handler)

    configure_logging('INFO')
    configure_logging('INFO')

    assert host_handler in root_logger.handlers
    assert len(root_logger.handlers) == 2
