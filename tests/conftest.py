"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import Mock

import pytest

from sessionshell.models import MigrationChoice, MigrationResult, SessionSelection
from sessionshell.protocols import ActivityPublisher, MigrationPrompt, SyncEngine


class FakeStore:
    """In-memory content store."""

    def __init__(self, location: Path, tracks=None, sections=None):
        self._location = location
        self._tracks = list(tracks or ["WWDC17", "WWDC16"])
        self._sections = list(sections or ["Monday", "Tuesday"])
        self.closed = False

    @property
    def location(self) -> Path:
        return self._location

    def tracks(self):
        return self._tracks

    def schedule_sections(self):
        return self._sections

    def close(self) -> None:
        self.closed = True


class FakeMigrator:
    """Legacy migrator reporting a canned result.

    With `deferred=True` the result is held until `finish()` is called,
    which models a migration completing asynchronously.
    """

    def __init__(self, needs_migration=True, result=None, deferred=False, error=None):
        self.needs_migration = needs_migration
        self.result = result or MigrationResult.success()
        self.deferred = deferred
        self.error = error
        self.calls = 0
        self._pending = None

    def perform_migration(self, on_finished):
        self.calls += 1
        if self.error is not None:
            raise self.error
        if self.deferred:
            self._pending = on_finished
            return
        on_finished(self.result)

    def finish(self):
        on_finished, self._pending = self._pending, None
        on_finished(self.result)


class FakeEnvironment:
    def __init__(self, skip_migration=False):
        self.skip_migration = skip_migration


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def keynote():
    return SessionSelection(session_identifier="wwdc2017-101", view_model={"title": "Keynote"})


@pytest.fixture
def platforms_sotu():
    return SessionSelection(session_identifier="wwdc2017-102", view_model={"title": "Platforms State of the Union"})


@pytest.fixture
def prompt():
    """Prompt answering MIGRATE unless told otherwise."""
    mock = Mock(spec=MigrationPrompt)
    mock.ask_migration_choice.return_value = MigrationChoice.MIGRATE
    return mock


@pytest.fixture
def sync_engine():
    return Mock(spec=SyncEngine)


@pytest.fixture
def activity_publisher():
    return Mock(spec=ActivityPublisher)
