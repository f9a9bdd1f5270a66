"""
Configuration Layer
===================

Centralized, type-safe configuration management for all environment variables.
Settings modules and services read from here instead of calling os.getenv().

Usage:
    from freedomwall.config import config

    # Signing secret for bearer tokens
    secret = config.security.jwt_secret

    # Database settings
    db_url = config.database.url

    # Check if in production
    if config.is_production:
        ...
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List
import logging

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Classes
# =============================================================================

@dataclass(frozen=True)
class DatabaseConfig:
    """Database connection settings."""
    url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///db.sqlite3"))
    name: str = field(default_factory=lambda: os.getenv("DB_NAME", "db.sqlite3"))
    host: str = field(default_factory=lambda: os.getenv("DB_HOST", "localhost"))
    port: int = field(default_factory=lambda: int(os.getenv("DB_PORT", "5432")))
    user: str = field(default_factory=lambda: os.getenv("DB_USER", ""))
    password: str = field(default_factory=lambda: os.getenv("DB_PASSWORD", ""))

    @property
    def is_sqlite(self) -> bool:
        return "sqlite" in self.url.lower()


@dataclass(frozen=True)
class SecurityConfig:
    """Security-related settings."""
    secret_key: str = field(default_factory=lambda: os.getenv("SECRET_KEY", "django-insecure-dev-key-change-in-production"))
    allowed_hosts: List[str] = field(default_factory=lambda: os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(","))
    cors_origins: List[str] = field(default_factory=lambda: os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000"
    ).split(","))
    csrf_trusted_origins: List[str] = field(default_factory=lambda: os.getenv(
        "CSRF_TRUSTED_ORIGINS",
        "http://localhost:3000"
    ).split(","))

    # Bearer token signing
    jwt_secret: str = field(default_factory=lambda: os.getenv("JWT_SECRET", ""))
    jwt_algorithm: str = field(default_factory=lambda: os.getenv("JWT_ALGORITHM", "HS256"))
    jwt_access_token_minutes: int = field(default_factory=lambda: int(os.getenv("JWT_ACCESS_TOKEN_MINUTES", str(60 * 24 * 7))))

    @property
    def is_secure_key(self) -> bool:
        """Check if using a proper secret key."""
        return "insecure" not in self.secret_key.lower() and len(self.secret_key) >= 50

    @property
    def has_jwt_secret(self) -> bool:
        return bool(self.jwt_secret)


@dataclass(frozen=True)
class UploadConfig:
    """Request size limits. Images travel inline as data URIs."""
    max_request_mb: int = field(default_factory=lambda: int(os.getenv("MAX_REQUEST_MB", "20")))

    @property
    def max_request_bytes(self) -> int:
        return self.max_request_mb * 1024 * 1024


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration - aggregates all config sections."""

    # Environment
    environment: str = field(default_factory=lambda: os.getenv("DJANGO_ENV", "development"))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "True").lower() == "true")

    # Sub-configurations
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    uploads: UploadConfig = field(default_factory=UploadConfig)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def validate(self) -> List[str]:
        """
        Validate configuration and return list of warnings/errors.
        Call this on startup to catch misconfigurations early.
        """
        issues = []

        if not self.security.has_jwt_secret:
            issues.append("FATAL: JWT_SECRET is not set; bearer tokens cannot be verified")

        if self.is_production:
            if not self.security.is_secure_key:
                issues.append("CRITICAL: Using insecure SECRET_KEY in production!")
            if self.debug:
                issues.append("WARNING: DEBUG=True in production!")
            if self.database.is_sqlite:
                issues.append("WARNING: SQLite database in production")

        if self.security.has_jwt_secret and len(self.security.jwt_secret) < 32:
            issues.append("INFO: JWT_SECRET is shorter than 32 characters")

        return issues

    def log_status(self) -> None:
        """Log configuration status on startup."""
        logger.info(f"Environment: {self.environment}")
        logger.info(f"Debug: {self.debug}")
        logger.info(f"Database: {'sqlite' if self.database.is_sqlite else 'postgresql'}")

        for issue in self.validate():
            if issue.startswith(("FATAL", "CRITICAL")):
                logger.critical(issue)
            elif issue.startswith("WARNING"):
                logger.warning(issue)
            else:
                logger.info(issue)


# =============================================================================
# Singleton Instance
# =============================================================================

@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Get the singleton configuration instance.
    Uses lru_cache to ensure single instance across the application.
    """
    return AppConfig()


# Convenience alias
config = get_config()


# =============================================================================
# Django Settings Helpers
# =============================================================================

def get_secret_key() -> str:
    """Get Django SECRET_KEY from config."""
    return config.security.secret_key


def get_allowed_hosts() -> List[str]:
    """Get ALLOWED_HOSTS from config."""
    return config.security.allowed_hosts


def get_debug() -> bool:
    """Get DEBUG setting from config."""
    return config.debug


def get_database_config() -> dict:
    """
    Get database configuration in Django format.
    Returns dict suitable for DATABASES["default"].
    """
    if config.database.is_sqlite:
        return {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": config.database.name,
        }

    return {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": config.database.name,
        "HOST": config.database.host,
        "PORT": config.database.port,
        "USER": config.database.user,
        "PASSWORD": config.database.password,
    }
