"""Observer protocol definitions for domain-specific events.

All callbacks run on the shell's single logical thread. Exceptions raised
by observers are caught and logged by ObserverManager; they never reach
the component that fired the event.
"""

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

from .events import AppEvent, PlaybackContextEvent, SelectionEvent

if TYPE_CHECKING:
    from sessionshell.models import PlaybackContext, RestoreDirective, SessionSelection, Tab


@runtime_checkable
class SelectionObserver(Protocol):
    """Observer that receives selection change events."""

    def on_selection_event(
        self,
        event: SelectionEvent,
        tab: "Tab",
        selection: Optional["SessionSelection"],
    ) -> None:
        """
        Handle selection change events.

        Args:
            event: The type of selection event
            tab: For TAB_SELECTION_CHANGED the tab that changed; for
                 EFFECTIVE_SELECTION_CHANGED the active tab
            selection: The new selection, or None if cleared
        """
        ...


@runtime_checkable
class PlaybackObserver(Protocol):
    """Observer that receives playback context events."""

    def on_playback_context_event(
        self,
        event: PlaybackContextEvent,
        context: "PlaybackContext",
        directive: Optional["RestoreDirective"] = None,
    ) -> None:
        """
        Handle playback context changes.

        Args:
            event: The type of playback context event
            context: Snapshot taken after the change
            directive: Restore target (RESTORE_REQUESTED only)
        """
        ...


@runtime_checkable
class AppObserver(Protocol):
    """Observer that receives application lifecycle events."""

    def on_app_event(self, event: AppEvent, **kwargs) -> None:
        """
        Handle application lifecycle events.

        Args:
            event: The type of application event
            **kwargs: Event-specific data (selection, tab, tracks, directive, ...)
        """
        ...
