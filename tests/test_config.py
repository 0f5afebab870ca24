"""Tests for AppConfig loading, saving and error conversion."""

import logging

import pytest

from sessionshell.exceptions import (
    ConfigFileInvalidError,
    ConfigValidationError,
    MigrationFailedError,
    StorageInitializationError,
    format_error_for_display,
    wrap_migration_error,
)
from sessionshell.models import AppConfig


@pytest.mark.unit
class TestAppConfig:

    def test_store_paths(self, temp_dir):
        config = AppConfig(app_support_dir=temp_dir)

        assert config.core_store_path == temp_dir / "ConfCore.realm"
        assert config.legacy_store_path == temp_dir / "default.realm"
        assert config.log_dir == temp_dir / "logs"

    def test_missing_file_gives_defaults(self, temp_dir):
        config = AppConfig.load_or_default(temp_dir / "missing.json")

        assert config.core_store_filename == "ConfCore.realm"
        assert config.schema_version == 1
        assert not config.skip_migration

    def test_save_and_load(self, temp_dir):
        path = temp_dir / "config.json"
        AppConfig(app_support_dir=temp_dir, skip_migration=True, schema_version=3).save(path)

        loaded = AppConfig.load_or_default(path)

        assert loaded.app_support_dir == temp_dir
        assert loaded.skip_migration
        assert loaded.schema_version == 3

    def test_save_keeps_backup(self, temp_dir):
        path = temp_dir / "config.json"
        AppConfig(app_support_dir=temp_dir).save(path)
        AppConfig(app_support_dir=temp_dir, schema_version=2).save(path)

        backup = path.with_suffix(".json.bak")
        assert backup.exists()
        assert AppConfig.load_or_default(backup).schema_version == 1
        assert not path.with_suffix(".json.tmp").exists()

    def test_invalid_json(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text('{"schema_version": 2,}')

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            AppConfig.load_or_default(path)
        assert exc_info.value.recoverable

    def test_empty_file(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text("  \n")

        with pytest.raises(ConfigFileInvalidError, match="empty"):
            AppConfig.load_or_default(path)

    def test_invalid_value(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text('{"schema_version": 0}')

        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(path)
        assert exc_info.value.field == "schema_version"
        assert str(path) in exc_info.value.recovery_hint


@pytest.mark.unit
class TestErrorFormatting:

    def test_migration_error_from_reason(self, temp_dir):
        error = wrap_migration_error("disk full", temp_dir / "default.realm")

        assert isinstance(error, MigrationFailedError)
        assert error.recoverable
        assert error.reason == "disk full"
        assert "default.realm" in error.technical_message
        assert "disk full" in error.get_full_message()

    def test_migration_error_from_exception(self):
        error = wrap_migration_error(OSError("permission denied"))
        assert error.reason == "permission denied"

    def test_migration_error_without_reason(self):
        assert wrap_migration_error(None).reason == "unknown error"

    def test_format_custom_error(self):
        error = MigrationFailedError("disk full")
        message, hint = format_error_for_display(error)
        assert message == error.user_message
        assert hint == error.recovery_hint

    def test_format_standard_error(self):
        message, hint = format_error_for_display(ValueError("bad"))
        assert message == "ValueError: bad"
        assert hint is None


@pytest.mark.unit
class TestErrorLogging:

    def test_storage_error_is_fatal(self, temp_dir):
        error = StorageInitializationError(temp_dir / "ConfCore.realm", "locked")
        assert error.is_fatal

    def test_fatal_error_logged_as_critical(self, temp_dir, caplog):
        error = StorageInitializationError(temp_dir / "ConfCore.realm", "locked")

        with caplog.at_level(logging.DEBUG, logger="sessionshell.tests"):
            error.log(logging.getLogger("sessionshell.tests"))

        record = caplog.records[-1]
        assert record.levelno == logging.CRITICAL
        assert "StorageInitializationError" in record.getMessage()
        assert "locked" in record.getMessage()

    def test_recoverable_error_logged_as_error(self, caplog):
        error = MigrationFailedError("disk full")
        assert not error.is_fatal

        with caplog.at_level(logging.DEBUG, logger="sessionshell.tests"):
            error.log(logging.getLogger("sessionshell.tests"))

        assert caplog.records[-1].levelno == logging.ERROR
        assert error.technical_message in caplog.records[-1].getMessage()
