import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


def _normalize_database_url(url: str) -> str:
    # Hosted Postgres providers still hand out the legacy scheme.
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


APP_ENV = os.getenv("APP_ENV") or os.getenv("NODE_ENV") or "development"
IS_PRODUCTION = APP_ENV.strip().lower() == "production"

DATABASE_URL = _normalize_database_url(os.getenv("DATABASE_URL", "sqlite:///./skwela_alert.db"))
DATABASE_SSL = _get_bool(os.getenv("DATABASE_SSL"), default=IS_PRODUCTION)

DEFAULT_JWT_SECRET = "skwela-alert-secret-key-2024"
JWT_SECRET = os.getenv("JWT_SECRET") or DEFAULT_JWT_SECRET
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRES_DAYS = int(os.getenv("JWT_EXPIRES_DAYS", "7"))

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

DEFAULT_ADMIN_USERNAME = os.getenv("DEFAULT_ADMIN_USERNAME", "admin")
DEFAULT_ADMIN_PASSWORD = os.getenv("DEFAULT_ADMIN_PASSWORD", "admin123")

ENFORCE_ROLE_GUARDS = _get_bool(os.getenv("ENFORCE_ROLE_GUARDS"), default=True)

CORS_ORIGINS = _get_list(os.getenv("CORS_ORIGINS"), default=["*"])

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def validate_runtime_config() -> None:
    if JWT_SECRET == DEFAULT_JWT_SECRET:
        if IS_PRODUCTION:
            logger.error("JWT_SECRET is not set; tokens are signed with the public fallback secret.")
        else:
            logger.warning("JWT_SECRET is not set; using the development fallback secret.")
