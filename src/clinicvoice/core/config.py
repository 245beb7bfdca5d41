"""
Configuration management for Clinic Voice.

This module provides centralized configuration using Pydantic Settings
for environment-based configuration management.
"""

import json
import os
from pathlib import Path
from typing import Annotated, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class CORSSettings(BaseSettings):
    """CORS configuration settings."""

    model_config = SettingsConfigDict(env_prefix="CORS_")

    allowed_origins: Annotated[List[str], NoDecode] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )
    allowed_methods: List[str] = Field(
        default=["GET", "POST", "PATCH", "OPTIONS"],
        description="Allowed HTTP methods",
    )
    allowed_headers: List[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def parse_allowed_origins(cls, v):
        """Parse allowed origins from string or list."""
        if isinstance(v, str):
            # Handle JSON-like string format
            if v.startswith("[") and v.endswith("]"):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    return [v.strip()]
            return [s.strip() for s in v.split(",") if s.strip()]
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = Field(default="INFO", description="Logging level")
    format: str = Field(default="json", description="Log format (json or text)")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate logging level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ["json", "text"]:
            raise ValueError("Log format must be 'json' or 'text'")
        return v.lower()


class StoreSettings(BaseSettings):
    """In-memory data store settings."""

    model_config = SettingsConfigDict(env_prefix="STORE_")

    seed_dir: Optional[str] = Field(
        default=None,
        description="Directory with patients/notes/appointments/alerts/followups JSON (defaults to bundled seed data)",
    )
    summary_cache_ttl_seconds: int = Field(
        default=3600,
        description="Max age of a cached patient summary in seconds (0 = never expire)",
    )

    @field_validator("summary_cache_ttl_seconds")
    @classmethod
    def validate_ttl(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Summary cache TTL cannot be negative")
        return v


class ElevenLabsSettings(BaseSettings):
    """ElevenLabs text-to-speech and conversational agent settings."""

    model_config = SettingsConfigDict(env_prefix="ELEVENLABS_")

    api_key: str = Field(default="", description="ElevenLabs API key")
    agent_id: str = Field(default="", description="Conversational agent ID")
    voice_id: str = Field(default="21m00Tcm4TlvDq8ikWAM", description="TTS voice ID (Rachel)")
    model_id: str = Field(default="eleven_multilingual_v2", description="TTS model ID")
    stability: float = Field(default=0.5, description="Voice stability")
    similarity_boost: float = Field(default=0.75, description="Voice similarity boost")
    base_url: str = Field(default="https://api.elevenlabs.io", description="API base URL")
    timeout_seconds: float = Field(default=30.0, description="Total request timeout")

    @field_validator("stability", "similarity_boost")
    @classmethod
    def validate_unit_interval(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("Voice settings must be between 0.0 and 1.0")
        return v

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def agent_configured(self) -> bool:
        # Placeholder left in sample env files
        return bool(self.api_key and self.agent_id and self.agent_id != "your_agent_id_here")


class EmailSettings(BaseSettings):
    """Email delivery API settings (Resend-compatible)."""

    model_config = SettingsConfigDict(env_prefix="EMAIL_")

    api_key: str = Field(default="", description="Email API key")
    from_address: str = Field(default="clinic@example.com", description="Sender address")
    base_url: str = Field(default="https://api.resend.com", description="Email API base URL")
    timeout_seconds: float = Field(default=15.0, description="Total request timeout")
    clinic_name: str = Field(default="Dr.'s Clinic", description="Signature used in message templates")

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application settings
    app_name: str = Field(default="Clinic Voice", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    app_env: str = Field(default="development", description="Application environment")
    debug: bool = Field(default=False, description="Debug mode")
    port: int = Field(default=8000, description="Application port")
    host: str = Field(default="0.0.0.0", description="Application host")

    # Sub-settings
    cors: CORSSettings = Field(default_factory=CORSSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    store: StoreSettings = Field(default_factory=StoreSettings)
    elevenlabs: ElevenLabsSettings = Field(default_factory=ElevenLabsSettings)
    email: EmailSettings = Field(default_factory=EmailSettings)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        # Override sub-settings with environment variables
        self.cors = CORSSettings()
        self.logging = LoggingSettings()
        self.store = StoreSettings()
        self.elevenlabs = ElevenLabsSettings()
        self.email = EmailSettings()

    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        """Validate application environment."""
        valid_envs = ["development", "staging", "production", "testing"]
        if v.lower() not in valid_envs:
            raise ValueError(f"App environment must be one of: {valid_envs}")
        return v.lower()

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate port number."""
        if not 1 <= v <= 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"


# Global settings instance (loaded after attempting to read .env)
_settings: Optional[Settings] = None


def _load_env_file_if_available() -> None:
    """Best-effort load of .env by searching current and parent directories.

    This helps in environments where the working directory isn't the project root
    and pydantic's env_file doesn't get resolved as expected.
    """
    from dotenv import load_dotenv

    cwd = Path(os.getcwd()).resolve()
    for parent in [cwd, *cwd.parents]:
        candidate = parent / ".env"
        if candidate.exists():
            # Do not override already-set environment variables
            load_dotenv(dotenv_path=str(candidate), override=False)
            break


def get_settings() -> Settings:
    """Get application settings instance (lazy-init with .env discovery)."""
    global _settings
    if _settings is None:
        _load_env_file_if_available()
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
