# storerating/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _env_list(name: str, default: str) -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Store Rating API"
    env: str = os.getenv("ENV", "dev")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # CORS origins for frontend (comma separated in CORS_ORIGINS)
    CORS_ORIGINS: list[str] = _env_list(
        "CORS_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000,http://127.0.0.1:3000",
    )

    # Session cookie carrying the signed access token
    session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "accessToken")
    session_cookie_secure: bool = _env_bool("SESSION_COOKIE_SECURE")

    # Default admin created on first startup (only when ADMIN_PASSWORD is set)
    admin_name: str = os.getenv("ADMIN_NAME", "System Administrator")
    admin_email: str = os.getenv("ADMIN_EMAIL", "admin@storerating.com")
    admin_password: str | None = os.getenv("ADMIN_PASSWORD")
    admin_address: str = os.getenv("ADMIN_ADDRESS", "123 Admin Street, System City, SC 12345")

settings = Settings()  # Instantiate configuration
