from threading import Lock

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.orm import declarative_base, sessionmaker

from mentors_api.core import config


def build_connect_args(database_url: str, ssl_mode: str) -> dict:
    if database_url.startswith("sqlite"):
        # Sessions are handed to FastAPI's worker threads.
        return {"check_same_thread": False}
    if database_url.startswith("postgresql") and ssl_mode and ssl_mode != "disable":
        return {"sslmode": ssl_mode}
    return {}


engine = create_engine(
    config.settings.database_url,
    connect_args=build_connect_args(config.settings.database_url, config.settings.db_ssl_mode),
    pool_pre_ping=True,
    echo=config.settings.db_echo,
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()

_schema_lock = Lock()
_user_schema_checked = False
_course_schema_checked = False


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_connection(db):
    """Run a trivial query and return the database's current timestamp."""
    return db.execute(text('SELECT CURRENT_TIMESTAMP')).scalar()


def _add_missing_columns(bind, table_name: str, migration_steps: list[tuple[str, str]]) -> None:
    existing_columns = {column['name'] for column in inspect(bind).get_columns(table_name)}

    with bind.begin() as connection:
        for column_name, statement in migration_steps:
            if column_name not in existing_columns:
                connection.execute(text(statement))


def ensure_user_schema(bind=None) -> None:
    """Bring a ``users`` table created by the first deployment up to date.

    That table only had the registration columns; the activity flags and the
    registration timestamp were added later.
    """
    global _user_schema_checked

    if _user_schema_checked:
        return

    bind = bind or engine
    with _schema_lock:
        if _user_schema_checked:
            return

        if 'users' not in inspect(bind).get_table_names():
            _user_schema_checked = True
            return

        _add_missing_columns(bind, 'users', [
            ('phone', 'ALTER TABLE users ADD COLUMN phone VARCHAR'),
            ('class_level', 'ALTER TABLE users ADD COLUMN class_level VARCHAR'),
            ('is_active', 'ALTER TABLE users ADD COLUMN is_active BOOLEAN NOT NULL DEFAULT TRUE'),
            ('trial_used', 'ALTER TABLE users ADD COLUMN trial_used BOOLEAN NOT NULL DEFAULT FALSE'),
            ('created_at', 'ALTER TABLE users ADD COLUMN created_at TIMESTAMP'),
        ])
        with bind.begin() as connection:
            connection.execute(text('CREATE INDEX IF NOT EXISTS idx_users_email_active ON users(email, is_active)'))
            connection.execute(text('CREATE INDEX IF NOT EXISTS idx_users_created_at ON users(created_at)'))

        _user_schema_checked = True


def ensure_course_schema(bind=None) -> None:
    global _course_schema_checked

    if _course_schema_checked:
        return

    bind = bind or engine
    with _schema_lock:
        if _course_schema_checked:
            return

        if 'courses' not in inspect(bind).get_table_names():
            _course_schema_checked = True
            return

        _add_missing_columns(bind, 'courses', [
            ('title', 'ALTER TABLE courses ADD COLUMN title VARCHAR'),
            ('description', 'ALTER TABLE courses ADD COLUMN description TEXT'),
            ('class_level', 'ALTER TABLE courses ADD COLUMN class_level VARCHAR'),
            ('is_active', 'ALTER TABLE courses ADD COLUMN is_active BOOLEAN NOT NULL DEFAULT TRUE'),
            ('created_at', 'ALTER TABLE courses ADD COLUMN created_at TIMESTAMP'),
        ])
        with bind.begin() as connection:
            connection.execute(text('CREATE INDEX IF NOT EXISTS idx_courses_active_id ON courses(is_active, id)'))

        _course_schema_checked = True
