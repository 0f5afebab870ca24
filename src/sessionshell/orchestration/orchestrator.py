"""
Shell orchestrator: wires UI and lifecycle events to the coordination core.

The shell presents the same session records in two tabs, shares one player
surface between them and gates list loading on the legacy data migration.
View controllers, the store, the sync engine and the migrator stay outside;
they talk to the shell through the plain methods below and through
AppObserver events.
"""

import logging
from collections.abc import Callable
from typing import Optional

from sessionshell.core import ObserverManager, PlaybackContextTracker, SelectionCoordinator
from sessionshell.exceptions import ErrorContext, StorageInitializationError
from sessionshell.models import (
    AppConfig,
    PlaybackContext,
    RestoreDirective,
    SessionSelection,
    Tab,
    TransitionResult,
)
from sessionshell.orchestration.migration import MigrationOrchestrator
from sessionshell.protocols import (
    ActivityPublisher,
    AppEvent,
    AppObserver,
    ContentStore,
    ExecutionEnvironment,
    LiveObserver,
    MigrationPrompt,
    MigratorFactory,
    PlaybackContextEvent,
    SelectionEvent,
    StoreFactory,
    SyncEngine,
)

logger = logging.getLogger(__name__)


class ShellOrchestrator:
    """
    Top-level coordinator of the session shell.

    Architecture:
        ShellOrchestrator (this class)
        ├── Collaborators: store, sync_engine, activity_publisher, live_observer
        ├── Core: selection (SelectionCoordinator), playback (PlaybackContextTracker)
        ├── Migration: MigrationOrchestrator (gates list loading after sync)
        └── Observers (UIs): AppObserver instances

    Communication Rules:
    - UI events → shell methods (on_tab_activated, on_selection_changed, ...)
    - Shell → UIs: AppEvent notifications
    - Queries: read-only properties
    """

    def __init__(
        self,
        config: AppConfig,
        store_factory: StoreFactory,
        sync_engine: SyncEngine,
        migrator_factory: MigratorFactory,
        prompt: MigrationPrompt,
        environment: ExecutionEnvironment,
        activity_publisher: ActivityPublisher,
        terminate: Callable[[], None],
        live_observer: Optional[LiveObserver] = None,
    ):
        """
        Open the content store and build the coordination core.

        Raises:
            StorageInitializationError: If the primary content store cannot be opened
        """
        self.config = config
        self.sync_engine = sync_engine
        self.activity_publisher = activity_publisher
        self.live_observer = live_observer

        self.store: ContentStore = self._open_store(store_factory)

        self.selection = SelectionCoordinator()
        self.playback = PlaybackContextTracker()
        self.migration = MigrationOrchestrator(
            legacy_store_location=config.legacy_store_path,
            destination=self.store,
            migrator_factory=migrator_factory,
            prompt=prompt,
            environment=environment,
            terminate=terminate,
        )

        self._app_observers = ObserverManager[AppObserver](observer_type_name="app")
        self._started = False

        self.selection.register_observer(self)
        self.playback.register_observer(self)

    def _open_store(self, store_factory: StoreFactory) -> ContentStore:
        path = self.config.core_store_path
        try:
            with ErrorContext(f"open content store at {path}", logger_instance=logger):
                store = store_factory(path)
        except Exception as e:
            error = StorageInitializationError(path, str(e))
            error.log(logger)
            raise error from e
        logger.info(f"Content store opened at {store.location}")
        return store

    # =================================================================
    # Observers
    # =================================================================

    def register_observer(self, observer: AppObserver) -> None:
        self._app_observers.register(observer)

    def unregister_observer(self, observer: AppObserver) -> None:
        self._app_observers.unregister(observer)

    def _notify_observers(self, event: AppEvent, **kwargs) -> None:
        self._app_observers.notify("on_app_event", event, **kwargs)

    # =================================================================
    # Lifecycle
    # =================================================================

    def startup(self) -> None:
        """
        Called once the application finished launching.

        Lists are loaded right away from whatever the store holds; every
        completed sessions-and-schedule sync reloads them, gated on the
        migration workflow.
        """
        if self._started:
            logger.warning("Shell already started")
            return
        self._started = True

        self._notify_observers(AppEvent.STARTED)
        self.sync_engine.add_sessions_and_schedule_listener(self.on_sessions_and_schedule_synced)

        self.refresh()
        self.update_lists_after_sync()

    def shutdown(self) -> None:
        """Cleanup when the app closes."""
        logger.info("Shutting down shell")
        if self._started:
            self.sync_engine.remove_sessions_and_schedule_listener(self.on_sessions_and_schedule_synced)
            self._started = False

        close = getattr(self.store, "close", None)
        if callable(close):
            close()

    def refresh(self) -> None:
        """Ask the sync engine for fresh sessions, schedule and live videos."""
        logger.info("Refreshing sessions, schedule and live videos")
        self.sync_engine.sync_sessions_and_schedule()
        self.sync_engine.sync_live_videos()

    def on_sessions_and_schedule_synced(self) -> None:
        logger.debug("Sessions and schedule synced")
        self.update_lists_after_sync(migrate=True)

    def update_lists_after_sync(self, migrate: bool = False) -> None:
        """
        Reload the tab lists, optionally after the migration workflow.

        With `migrate`, lists load only inside the migration completion, so
        they never read the store while it is being migrated into.
        """
        if migrate:
            self.migration.run_if_needed(self._load_lists)
        else:
            self._load_lists()

    def _load_lists(self) -> None:
        tracks = list(self.store.tracks())
        sections = list(self.store.schedule_sections())
        logger.info(f"Loaded {len(tracks)} tracks and {len(sections)} schedule sections")
        self._notify_observers(AppEvent.LISTS_UPDATED, tracks=tracks, schedule_sections=sections)

        if self.live_observer is not None:
            self.live_observer.start()

    # =================================================================
    # UI events
    # =================================================================

    def on_tab_activated(self, tab: Tab) -> None:
        self.selection.set_active_tab(tab)

    def on_selection_changed(self, tab: Tab, selection: Optional[SessionSelection]) -> None:
        self.selection.set_selection(tab, selection)

    def play_selected_session(self) -> TransitionResult:
        """Start playback owned by the active tab and its current selection."""
        selection = self.selection.effective_selection()
        if selection is None:
            logger.debug("Nothing selected, not starting playback")
            return TransitionResult.REJECTED
        return self.playback.begin_playback(self.selection.active_tab, selection.session_identifier)

    def stop_playback(self) -> TransitionResult:
        return self.playback.release_playback()

    def on_detached_mode_entering(self) -> TransitionResult:
        return self.playback.enter_detached_mode()

    def on_detached_mode_exiting(self) -> TransitionResult:
        return self.playback.exit_detached_mode()

    def on_detached_mode_transition_finished(self) -> Optional[RestoreDirective]:
        return self.playback.complete_transition()

    # =================================================================
    # Core observers
    # =================================================================

    def on_selection_event(
        self,
        event: SelectionEvent,
        tab: Tab,
        selection: Optional[SessionSelection],
    ) -> None:
        if event is SelectionEvent.TAB_SELECTION_CHANGED:
            self._notify_observers(AppEvent.DETAIL_UPDATED, tab=tab, selection=selection)
            return

        self._notify_observers(AppEvent.SHELF_UPDATED, selection=selection)
        self.activity_publisher.update_current_activity(selection)

    def on_playback_context_event(
        self,
        event: PlaybackContextEvent,
        context: PlaybackContext,
        directive: Optional[RestoreDirective] = None,
    ) -> None:
        if event is not PlaybackContextEvent.RESTORE_REQUESTED or directive is None:
            return

        self.selection.set_active_tab(directive.tab)
        self._notify_observers(AppEvent.PLAYBACK_CONTEXT_RESTORED, directive=directive)

    # =================================================================
    # Read-Only State Access
    # =================================================================

    @property
    def active_tab(self) -> Tab:
        return self.selection.active_tab

    def effective_selection(self) -> Optional[SessionSelection]:
        return self.selection.effective_selection()

    @property
    def playback_context(self) -> PlaybackContext:
        return self.playback.context
