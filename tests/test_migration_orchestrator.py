"""Tests for MigrationOrchestrator - one-shot legacy data migration."""

from pathlib import Path
from unittest.mock import Mock

import click
import pytest

from sessionshell.models import (
    MigrationChoice,
    MigrationOutcomeKind,
    MigrationPhase,
    MigrationResult,
)
from sessionshell.orchestration import MigrationOrchestrator

from .conftest import FakeEnvironment, FakeMigrator, FakeStore

LEGACY = Path("/support/WWDC/default.realm")


class Harness:
    """Orchestrator wired to fakes, recording completions and terminations."""

    def __init__(self, prompt, migrator=None, skip_migration=False):
        self.migrator = migrator or FakeMigrator()
        self.store = FakeStore(Path("/support/WWDC/ConfCore.realm"))
        self.factory = Mock(return_value=self.migrator)
        self.prompt = prompt
        self.terminate = Mock()
        self.completions = 0
        self.orchestrator = MigrationOrchestrator(
            legacy_store_location=LEGACY,
            destination=self.store,
            migrator_factory=self.factory,
            prompt=prompt,
            environment=FakeEnvironment(skip_migration),
            terminate=self.terminate,
        )

    def completion(self):
        self.completions += 1

    def run(self):
        self.orchestrator.run_if_needed(self.completion)

    @property
    def state(self):
        return self.orchestrator.state


@pytest.mark.unit
class TestSkipDirective:

    def test_skip_calls_completion_without_prompting(self, prompt):
        h = Harness(prompt, skip_migration=True)

        h.run()

        assert h.completions == 1
        prompt.ask_migration_choice.assert_not_called()
        h.factory.assert_not_called()

    def test_skip_leaves_state_untouched(self, prompt):
        h = Harness(prompt, skip_migration=True)

        h.run()

        assert h.state is None
        assert h.orchestrator.phase is MigrationPhase.IDLE


@pytest.mark.unit
class TestChecking:

    def test_no_legacy_data_completes_without_prompt(self, prompt):
        h = Harness(prompt, migrator=FakeMigrator(needs_migration=False))

        h.run()

        assert h.completions == 1
        prompt.ask_migration_choice.assert_not_called()
        assert h.state.phase is MigrationPhase.DONE
        assert h.state.outcome is None
        assert not h.state.needs_migration
        assert not h.state.is_in_progress

    def test_migrator_bound_to_legacy_location_and_store(self, prompt):
        h = Harness(prompt)
        h.run()
        h.factory.assert_called_once_with(LEGACY, h.store)
        assert h.state.legacy_store_location == LEGACY

    def test_already_prompted_is_never_prompted_again(self, prompt):
        prompt.ask_migration_choice.return_value = MigrationChoice.START_FRESH
        h = Harness(prompt)
        h.run()

        h.run()

        assert prompt.ask_migration_choice.call_count == 1
        assert h.completions == 2
        assert h.state.needs_migration
        assert h.state.outcome.kind is MigrationOutcomeKind.DEFERRED

    def test_failing_migrator_factory_releases_latch(self, prompt):
        h = Harness(prompt)
        h.factory.side_effect = OSError("legacy store unreadable")

        with pytest.raises(OSError):
            h.run()

        assert not h.state.is_in_progress
        assert h.completions == 0

        h.factory.side_effect = None
        h.run()

        assert h.completions == 1
        prompt.ask_migration_choice.assert_called_once()


@pytest.mark.unit
class TestChoices:

    def test_migrate_success(self, prompt):
        h = Harness(prompt)

        h.run()

        assert h.migrator.calls == 1
        assert h.completions == 1
        assert h.state.outcome.kind is MigrationOutcomeKind.SUCCESS
        assert h.state.phase is MigrationPhase.DONE
        prompt.show_error.assert_not_called()

    def test_start_fresh(self, prompt):
        prompt.ask_migration_choice.return_value = MigrationChoice.START_FRESH
        h = Harness(prompt)

        h.run()

        assert h.migrator.calls == 0
        assert h.completions == 1
        assert h.state.outcome.kind is MigrationOutcomeKind.SKIPPED

    def test_quit_terminates_without_completion(self, prompt):
        prompt.ask_migration_choice.return_value = MigrationChoice.QUIT
        h = Harness(prompt)

        h.run()

        h.terminate.assert_called_once_with()
        assert h.completions == 0
        assert h.migrator.calls == 0
        assert h.state.phase is MigrationPhase.TERMINATED

    def test_prompt_latch_set_before_user_answers(self, prompt):
        h = Harness(prompt)
        seen = []
        prompt.ask_migration_choice.side_effect = lambda: (
            seen.append((h.state.has_prompted_user, h.state.phase)) or MigrationChoice.START_FRESH
        )

        h.run()

        assert seen == [(True, MigrationPhase.PROMPTING_USER)]

    def test_abandoned_prompt_is_not_shown_again(self, prompt):
        prompt.ask_migration_choice.side_effect = KeyboardInterrupt
        h = Harness(prompt)

        with pytest.raises(KeyboardInterrupt):
            h.run()

        assert h.state.has_prompted_user
        assert not h.state.is_in_progress
        assert h.completions == 0

        prompt.ask_migration_choice.side_effect = None
        h.run()

        assert h.completions == 1
        assert h.state.outcome.kind is MigrationOutcomeKind.DEFERRED
        assert not h.state.is_in_progress
        prompt.ask_migration_choice.assert_called_once()

    def test_aborted_prompt_releases_latch(self, prompt):
        prompt.ask_migration_choice.side_effect = click.Abort()
        h = Harness(prompt)

        with pytest.raises(click.Abort):
            h.run()

        assert not h.state.is_in_progress
        assert h.orchestrator.phase is MigrationPhase.IDLE


@pytest.mark.unit
class TestMigrationFailure:

    def test_failure_is_reported_then_completes(self, prompt):
        order = []
        prompt.show_error.side_effect = lambda message: order.append(("notice", message))
        h = Harness(prompt, migrator=FakeMigrator(result=MigrationResult.failure("disk full")))
        h.completion = lambda: order.append(("completion", None))

        h.run()

        assert [kind for kind, _ in order] == ["notice", "completion"]
        assert "disk full" in order[0][1]
        assert h.state.outcome.kind is MigrationOutcomeKind.FAILURE
        assert h.state.outcome.reason == "disk full"
        assert not h.state.is_in_progress

    def test_migrator_raising_is_treated_as_failure(self, prompt):
        h = Harness(prompt, migrator=FakeMigrator(error=OSError("permission denied")))

        h.run()

        assert h.completions == 1
        prompt.show_error.assert_called_once()
        assert "permission denied" in prompt.show_error.call_args.args[0]
        assert h.state.outcome.kind is MigrationOutcomeKind.FAILURE

    def test_failing_error_notice_releases_latch(self, prompt):
        prompt.show_error.side_effect = click.Abort()
        h = Harness(prompt, migrator=FakeMigrator(result=MigrationResult.failure("disk full")))

        with pytest.raises(click.Abort):
            h.run()

        assert not h.state.is_in_progress
        assert h.completions == 0

        prompt.show_error.side_effect = None
        h.run()

        assert h.completions == 1
        assert h.state.outcome.kind is MigrationOutcomeKind.DEFERRED

    def test_failed_migration_is_not_offered_again(self, prompt):
        h = Harness(prompt, migrator=FakeMigrator(result=MigrationResult.failure("corrupt")))
        h.run()

        h.run()

        assert prompt.ask_migration_choice.call_count == 1
        assert h.completions == 2

    def test_completion_errors_propagate(self, prompt):
        h = Harness(prompt)

        def completion():
            raise ValueError("list loading failed")

        with pytest.raises(ValueError, match="list loading failed"):
            h.orchestrator.run_if_needed(completion)
        prompt.show_error.assert_not_called()


@pytest.mark.unit
class TestReentrancy:

    def test_second_run_while_migrating_is_dropped(self, prompt):
        h = Harness(prompt, migrator=FakeMigrator(deferred=True))

        h.run()
        assert h.state.phase is MigrationPhase.MIGRATING
        assert h.state.is_in_progress

        h.run()
        assert h.factory.call_count == 1
        assert prompt.ask_migration_choice.call_count == 1
        assert h.completions == 0

        h.migrator.finish()
        assert h.completions == 1
        assert not h.state.is_in_progress

    def test_run_from_inside_prompt_is_dropped(self, prompt):
        h = Harness(prompt)

        def answer():
            h.run()
            return MigrationChoice.START_FRESH

        prompt.ask_migration_choice.side_effect = answer

        h.run()

        assert h.completions == 1
        assert prompt.ask_migration_choice.call_count == 1

    def test_duplicate_result_is_ignored(self, prompt):
        class DoubleReporter(FakeMigrator):
            def perform_migration(self, on_finished):
                on_finished(MigrationResult.success())
                on_finished(MigrationResult.failure("late"))

        h = Harness(prompt, migrator=DoubleReporter())

        h.run()

        assert h.completions == 1
        assert h.state.outcome.kind is MigrationOutcomeKind.SUCCESS
        prompt.show_error.assert_not_called()

    def test_latch_released_after_done(self, prompt):
        h = Harness(prompt, migrator=FakeMigrator(needs_migration=False))
        h.run()
        h.run()
        assert h.completions == 2
        assert h.factory.call_count == 2
