import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./marine_mentors.db"
INSECURE_JWT_SECRET = "marine_mentors_secret_2025"


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if value is None or not value.strip():
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


def normalize_database_url(url: str) -> str:
    # Hosted Postgres providers still hand out the scheme SQLAlchemy dropped.
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


@dataclass(frozen=True)
class Settings:
    app_env: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000
    database_url: str = DEFAULT_DATABASE_URL
    db_ssl_mode: str = "disable"
    db_echo: bool = False
    jwt_secret: str = INSECURE_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = 60 * 24
    cors_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

    @property
    def uses_insecure_secret(self) -> bool:
        return self.jwt_secret == INSECURE_JWT_SECRET


def load_settings(environ=None) -> Settings:
    env = os.environ if environ is None else environ
    app_env = env.get("APP_ENV", "development")
    default_ssl_mode = "require" if app_env.lower() == "production" else "disable"

    return Settings(
        app_env=app_env,
        host=env.get("HOST", "0.0.0.0"),
        port=int(env.get("PORT", "3000")),
        database_url=normalize_database_url(env.get("DATABASE_URL") or DEFAULT_DATABASE_URL),
        db_ssl_mode=env.get("DB_SSL_MODE", default_ssl_mode),
        db_echo=_get_bool(env.get("DB_ECHO"), default=False),
        jwt_secret=env.get("JWT_SECRET") or INSECURE_JWT_SECRET,
        jwt_algorithm=env.get("JWT_ALGORITHM", "HS256"),
        jwt_expires_minutes=int(env.get("JWT_EXPIRES_MINUTES", str(60 * 24))),
        cors_origins=tuple(_get_list(env.get("CORS_ORIGINS"), ["*"])),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
    )


settings = load_settings()


def validate_runtime_config(current: Settings | None = None) -> None:
    current = current or settings
    if not current.uses_insecure_secret:
        return
    if current.is_production:
        raise RuntimeError("JWT_SECRET must be set in production.")
    logger.warning("JWT_SECRET is not set; using the built-in development secret.")
