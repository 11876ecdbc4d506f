"""Application configuration settings"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in TRUTHY


@dataclass(frozen=True)
class JwtSettings:
    key: str = ""
    issuer: str = "FlowingLinks"
    audience: str = "FlowingLinks"
    expiry_in_minutes: int = 60


@dataclass(frozen=True)
class DatabaseSettings:
    # "sqlite" or "postgresql"
    provider: str = "sqlite"
    # Full SQLAlchemy URL; overrides every other field when set
    url: str = ""
    sqlite_database_path: str = "FlowingLinks.db"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_database: str = "flowinglinks"
    postgres_username: str = "postgres"
    postgres_password: str = ""
    echo: bool = False

    @property
    def is_sqlite(self) -> bool:
        return self.sqlalchemy_url.startswith("sqlite")

    @property
    def sqlalchemy_url(self) -> str:
        if self.url:
            return self.url

        if self.provider.lower() in {"postgresql", "postgres"}:
            return (
                f"postgresql+psycopg://{self.postgres_username}:{self.postgres_password}"
                f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_database}"
            )

        path = Path(self.sqlite_database_path)
        if path.parent != Path("."):
            path.parent.mkdir(parents=True, exist_ok=True)
        return f"sqlite+aiosqlite:///{path}"


@dataclass(frozen=True)
class AccountSettings:
    admin_username: str = "admin"
    admin_name: str = "Administrator"
    admin_password: str = "admin"
    # Initial password given to users created by the admin; they change it via /Profile/Password
    default_user_password: str = "123456"
    bcrypt_rounds: int = 12


@dataclass(frozen=True)
class Config:
    jwt: JwtSettings = field(default_factory=JwtSettings)
    database: DatabaseSettings = field(default_factory=DatabaseSettings)
    accounts: AccountSettings = field(default_factory=AccountSettings)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_PATH: Optional[str] = None
    LOG_FORMAT: str = (
        "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s"
    )

    # HTTP
    CORS_ORIGINS: tuple[str, ...] = ("*",)
    DEBUG: bool = False
    TESTING: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            jwt=JwtSettings(
                key=os.getenv("JWT_KEY", ""),
                issuer=os.getenv("JWT_ISSUER", "FlowingLinks"),
                audience=os.getenv("JWT_AUDIENCE", "FlowingLinks"),
                expiry_in_minutes=int(os.getenv("JWT_EXPIRY_MINUTES", "60")),
            ),
            database=DatabaseSettings(
                provider=os.getenv("DATABASE_PROVIDER", "sqlite"),
                url=os.getenv("DATABASE_URL", ""),
                sqlite_database_path=os.getenv(
                    "SQLITE_DATABASE_PATH", "FlowingLinks.db"
                ),
                postgres_host=os.getenv("POSTGRES_HOST", "localhost"),
                postgres_port=int(os.getenv("POSTGRES_PORT", "5432")),
                postgres_database=os.getenv("POSTGRES_DATABASE", "flowinglinks"),
                postgres_username=os.getenv("POSTGRES_USERNAME", "postgres"),
                postgres_password=os.getenv("POSTGRES_PASSWORD", ""),
                echo=_env_bool("DATABASE_ECHO"),
            ),
            accounts=AccountSettings(
                admin_username=os.getenv("ADMIN_USERNAME", "admin"),
                admin_name=os.getenv("ADMIN_NAME", "Administrator"),
                admin_password=os.getenv("ADMIN_PASSWORD", "admin"),
                default_user_password=os.getenv("DEFAULT_USER_PASSWORD", "123456"),
                bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "12")),
            ),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
            LOG_PATH=os.getenv("LOG_PATH") or None,
            CORS_ORIGINS=tuple(
                origin.strip()
                for origin in os.getenv("CORS_ORIGINS", "*").split(",")
                if origin.strip()
            ),
            DEBUG=_env_bool("DEBUG"),
            TESTING=_env_bool("TESTING"),
        )


class DevelopmentConfig:
    """Development configuration"""

    @staticmethod
    def load() -> Config:
        config = Config.from_env()
        return replace(config, DEBUG=True)


class TestingConfig:
    """Testing configuration"""

    @staticmethod
    def load() -> Config:
        config = Config.from_env()
        return replace(config, TESTING=True)


class ProductionConfig:
    """Production configuration"""

    @staticmethod
    def load() -> Config:
        return Config.from_env()


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None) -> Config:
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"]).load()
