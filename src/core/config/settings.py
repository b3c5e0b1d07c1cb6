"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.config.loader import ConfigLoader

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "default.yaml"


class AndroidSettings(BaseSettings):
    """Android SDK location settings."""

    model_config = SettingsConfigDict(
        env_prefix="AAPTCMD_ANDROID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    sdk_path: Path | None = Field(
        default=None,
        description="Android SDK root (falls back to ANDROID_HOME / ANDROID_SDK_ROOT)",
    )
    build_tools_version: str | None = Field(
        default=None,
        description="Pinned build-tools version (None = newest installed)",
    )

    @field_validator("sdk_path", mode="before")
    @classmethod
    def validate_sdk_path(cls, v: str | None) -> Path | None:
        """Validate and convert sdk_path to Path."""
        if v is None or v == "":
            return None
        return Path(v)

    @field_validator("build_tools_version", mode="before")
    @classmethod
    def validate_build_tools_version(cls, v: str | None) -> str | None:
        """Treat blank versions as unset."""
        if v is None or not str(v).strip():
            return None
        return str(v).strip()


class ExecutorSettings(BaseSettings):
    """aapt process execution settings."""

    model_config = SettingsConfigDict(
        env_prefix="AAPTCMD_EXECUTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    timeout: int = Field(
        default=300,
        ge=1,
        le=3600,
        description="Maximum aapt run time in seconds",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="AAPTCMD_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(
        default="INFO",
        description="Log level",
    )
    format: str = Field(
        default="[%(name)s] %(message)s",
        description="Log format string",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path",
    )
    use_rich: bool = Field(
        default=True,
        description="Use Rich console for output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: str | None) -> Path | None:
        """Validate and convert file to Path."""
        if v is None or v == "":
            return None
        return Path(v)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="AAPTCMD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    android: AndroidSettings = Field(default_factory=AndroidSettings)
    executor: ExecutorSettings = Field(default_factory=ExecutorSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            Settings instance with values from YAML.
        """
        loader = ConfigLoader(path)
        loader.load()

        return cls(
            android=AndroidSettings(**loader.get_section("android")),
            executor=ExecutorSettings(**loader.get_section("executor")),
            logging=LoggingSettings(**loader.get_section("logging")),
        )

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from default locations.

        Keys set in config/default.yaml win over environment variables and .env;
        keys it leaves out fall through to them, then to field defaults.

        Returns:
            Settings instance.
        """
        if DEFAULT_CONFIG_PATH.exists():
            return cls.from_yaml(DEFAULT_CONFIG_PATH)

        # Environment variables and .env are automatically loaded by pydantic-settings
        return cls()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings singleton.
    """
    return Settings.load()
