import os
from typing import List
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Always load .env from root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
load_dotenv(os.path.join(BASE_DIR, ".env"))


class Settings(BaseSettings):
    JWT_SECRET: str = os.getenv("JWT_SECRET", "change-me")
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_EXPIRE_MINUTES: int = int(os.getenv("JWT_EXPIRE_MINUTES", 1440))  # 24 hours default
    JWT_REFRESH_TOKEN_EXPIRE_DAYS: int = int(
        os.getenv("JWT_REFRESH_TOKEN_EXPIRE_DAYS", 7))
    PASSWORD_RESET_EXPIRE_MINUTES: int = int(
        os.getenv("PASSWORD_RESET_EXPIRE_MINUTES", 60))

    DB_USER: str | None = os.getenv("DB_USER")
    DB_PASS: str | None = os.getenv("DB_PASS")
    DB_HOST: str | None = os.getenv("DB_HOST")
    DB_PORT: str | None = os.getenv("DB_PORT")
    DB_SSLMODE: str = os.getenv("DB_SSLMODE", "require")
    AUTH_DB_NAME: str | None = os.getenv("AUTH_DB_NAME")
    WAREHOUSE_DB_NAME: str | None = os.getenv("WAREHOUSE_DB_NAME")

    # Full URLs win over the DB_* parts (sqlite for local runs and tests)
    AUTH_DATABASE_URL: str | None = os.getenv("AUTH_DATABASE_URL")
    WAREHOUSE_DATABASE_URL: str | None = os.getenv("WAREHOUSE_DATABASE_URL")

    # Frontend used to build links in emails
    PORTAL_URL: str = os.getenv("PORTAL_URL", "http://localhost:8080")
    CORS_ORIGINS: List[str] = ["http://localhost:8080", "http://127.0.0.1:8080"]
    CURRENCY: str = os.getenv("CURRENCY", "GBP")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Email Configuration
    SMTP_HOST: str | None = os.getenv("SMTP_HOST")
    SMTP_PORT: int = int(os.getenv("SMTP_PORT", 587))
    SMTP_USERNAME: str | None = os.getenv("SMTP_USERNAME")
    SMTP_PASSWORD: str | None = os.getenv("SMTP_PASSWORD")
    SMTP_USE_SSL: bool = os.getenv("SMTP_USE_SSL", "False").lower() == "true"
    EMAIL_SENDER: str = os.getenv("EMAIL_SENDER", "noreply@warehouse-3pl.com")

    # Bootstrap account created by shared/data/super_admin_insert.py
    SUPER_ADMIN_EMAIL: str = os.getenv("SUPER_ADMIN_EMAIL", "admin@warehouse-3pl.com")
    SUPER_ADMIN_PASSWORD: str | None = os.getenv("SUPER_ADMIN_PASSWORD")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()


def _postgres_url(db_name: str | None) -> str:
    return (
        f"postgresql+psycopg2://{settings.DB_USER}:{settings.DB_PASS}@{settings.DB_HOST}:{settings.DB_PORT}/{db_name}?sslmode={settings.DB_SSLMODE}"
    )


AUTH_DATABASE_URL = settings.AUTH_DATABASE_URL or _postgres_url(
    settings.AUTH_DB_NAME)

WAREHOUSE_DATABASE_URL = settings.WAREHOUSE_DATABASE_URL or _postgres_url(
    settings.WAREHOUSE_DB_NAME)
