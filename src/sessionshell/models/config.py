"""Application configuration model."""

from pathlib import Path

import click
from pydantic import BaseModel, Field, field_serializer

from sessionshell.utils.persistence import PydanticPersistence

APP_NAME = "WWDC"


def default_app_support_dir() -> Path:
    """Per-user application support directory for the shell."""
    return Path(click.get_app_dir(APP_NAME))


def default_config_path() -> Path:
    return default_app_support_dir() / "sessionshell.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # Paths
    app_support_dir: Path = Field(
        default_factory=default_app_support_dir,
        description="Directory holding the content store and the legacy store",
    )
    core_store_filename: str = Field(
        default="ConfCore.realm",
        min_length=1,
        description="File name of the primary content store",
    )
    legacy_store_filename: str = Field(
        default="default.realm",
        min_length=1,
        description="File name of the previous version's store (migration source)",
    )

    # Storage
    schema_version: int = Field(default=1, ge=1, description="Content store schema version")

    # Migration
    skip_migration: bool = Field(
        default=False,
        description="Never offer the legacy data migration (same as --skip-migration)",
    )

    @field_serializer("app_support_dir")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    @property
    def core_store_path(self) -> Path:
        return self.app_support_dir / self.core_store_filename

    @property
    def legacy_store_path(self) -> Path:
        return self.app_support_dir / self.legacy_store_filename

    @property
    def log_dir(self) -> Path:
        """Directory of the rotating log file when no --log-file is given."""
        return self.app_support_dir / "logs"

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses the default location
                  inside the application support directory.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = default_config_path()
        return PydanticPersistence.load_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = default_config_path()
        PydanticPersistence.save_json(self, path)
