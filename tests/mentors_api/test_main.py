import logging

import pytest
from sqlalchemy import create_engine, inspect
from sqlalchemy.exc import OperationalError

from mentors_api import database, main


@pytest.fixture
def startup_engine(monkeypatch: pytest.MonkeyPatch):
    engine = create_engine('sqlite://')
    monkeypatch.setattr(main, 'engine', engine)
    monkeypatch.setattr(main, 'configure_logging', lambda level: None)
    monkeypatch.setattr(database, '_user_schema_checked', False)
    monkeypatch.setattr(database, '_course_schema_checked', False)
    try:
        yield engine
    finally:
        engine.dispose()


def test_initialize_database_creates_tables(startup_engine) -> None:
    main.initialize_database()

    assert {'users', 'courses'} <= set(inspect(startup_engine).get_table_names())


def test_initialize_database_logs_instead_of_crashing(
    startup_engine,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    def failing_schema_check(bind=None):
        raise OperationalError('PRAGMA', {}, Exception('database is locked'))

    monkeypatch.setattr(main, 'ensure_user_schema', failing_schema_check)

    with caplog.at_level(logging.ERROR, logger='mentors_api.main'):
        main.initialize_database()

    assert 'Database initialization failed' in caplog.text
