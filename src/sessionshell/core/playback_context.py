"""Ownership bookkeeping for the shared player surface."""

import logging
from enum import Enum
from typing import Optional

from sessionshell.core.observer import ObserverManager
from sessionshell.models import (
    IdleOwnership,
    OwnedPlayback,
    PlaybackContext,
    RestoreDirective,
    Tab,
    TransitionResult,
)
from sessionshell.protocols import PlaybackContextEvent, PlaybackObserver

logger = logging.getLogger(__name__)


class _PendingTransition(Enum):
    ENTER_DETACHED = "enter_detached"
    EXIT_DETACHED = "exit_detached"


class PlaybackContextTracker:
    """
    Tracks which tab and session own the shared player surface.

    States:
        Idle ──begin_playback──▶ Owned
        Owned ──enter_detached_mode──▶ Transitioning ──complete_transition──▶ Owned+Detached
        Owned+Detached ──exit_detached_mode──▶ Transitioning ──complete_transition──▶ Idle
        Owned(any) ──release_playback──▶ Idle

    Leaving detached mode emits a RestoreDirective for the owner captured at
    begin_playback, unless restoring was invalidated in the meantime.

    While a transition is in flight, begin/enter/exit are refused with
    TransitionResult.BUSY. Operations that are not defined from the current
    state are refused with TransitionResult.REJECTED. Neither is an error;
    both are usually duplicate or late UI events.
    """

    def __init__(self) -> None:
        self._owner: IdleOwnership | OwnedPlayback = IdleOwnership()
        self._can_restore = False
        self._is_detached = False
        self._pending: Optional[_PendingTransition] = None
        self._observers = ObserverManager[PlaybackObserver](observer_type_name="playback")

    def register_observer(self, observer: PlaybackObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: PlaybackObserver) -> None:
        self._observers.unregister(observer)

    @property
    def context(self) -> PlaybackContext:
        """Snapshot of the current playback context."""
        return PlaybackContext(
            owner=self._owner,
            can_restore=self._can_restore,
            is_transitioning=self.is_transitioning,
            is_detached=self._is_detached,
        )

    @property
    def is_transitioning(self) -> bool:
        return self._pending is not None

    # =================================================================
    # Transitions
    # =================================================================

    def begin_playback(self, tab: Tab, session_identifier: str) -> TransitionResult:
        """Give ownership of the player to a tab and session."""
        if self.is_transitioning:
            return self._refuse("begin playback", TransitionResult.BUSY)
        if isinstance(self._owner, OwnedPlayback):
            return self._refuse("begin playback", TransitionResult.REJECTED)

        self._owner = OwnedPlayback(tab=Tab(tab), session_identifier=session_identifier)
        self._can_restore = True
        self._is_detached = False
        logger.info(f"Player owned by {self._owner.tab.value}/{session_identifier}")
        self._notify(PlaybackContextEvent.PLAYBACK_BEGAN)
        return TransitionResult.ACCEPTED

    def enter_detached_mode(self) -> TransitionResult:
        """Start moving the player into the overlay. Finish with complete_transition()."""
        if self.is_transitioning:
            return self._refuse("enter detached mode", TransitionResult.BUSY)
        if not isinstance(self._owner, OwnedPlayback) or self._is_detached:
            return self._refuse("enter detached mode", TransitionResult.REJECTED)

        self._pending = _PendingTransition.ENTER_DETACHED
        logger.debug("Entering detached mode")
        return TransitionResult.ACCEPTED

    def exit_detached_mode(self) -> TransitionResult:
        """Start leaving the overlay. Finish with complete_transition()."""
        if self.is_transitioning:
            return self._refuse("exit detached mode", TransitionResult.BUSY)
        if not isinstance(self._owner, OwnedPlayback) or not self._is_detached:
            return self._refuse("exit detached mode", TransitionResult.REJECTED)

        self._pending = _PendingTransition.EXIT_DETACHED
        logger.debug("Exiting detached mode")
        return TransitionResult.ACCEPTED

    def complete_transition(self) -> Optional[RestoreDirective]:
        """
        Finish the pending enter/exit transition.

        Returns:
            The restore directive when leaving detached mode with restoring
            allowed, otherwise None.
        """
        pending, self._pending = self._pending, None

        if pending is None:
            logger.debug("No context transition to complete")
            return None

        if pending is _PendingTransition.ENTER_DETACHED:
            self._is_detached = True
            logger.info("Player detached")
            self._notify(PlaybackContextEvent.DETACHED_MODE_ENTERED)
            return None

        directive = None
        if self._can_restore and isinstance(self._owner, OwnedPlayback):
            directive = RestoreDirective(
                tab=self._owner.tab,
                session_identifier=self._owner.session_identifier,
            )
            logger.info(f"Restoring playback context to {directive.tab.value}/{directive.session_identifier}")

        self._clear()
        if directive is not None:
            self._notify(PlaybackContextEvent.RESTORE_REQUESTED, directive)
        self._notify(PlaybackContextEvent.PLAYBACK_RELEASED)
        return directive

    def release_playback(self) -> TransitionResult:
        """Clear ownership after playback stopped outside the overlay flow."""
        if not isinstance(self._owner, OwnedPlayback):
            return self._refuse("release playback", TransitionResult.REJECTED)

        if self._pending is not None:
            logger.debug(f"Dropping pending {self._pending.value} transition")
        self._clear()
        logger.info("Player released")
        self._notify(PlaybackContextEvent.PLAYBACK_RELEASED)
        return TransitionResult.ACCEPTED

    def invalidate_restore(self) -> None:
        """Leaving detached mode will not restore the owner context."""
        if self._can_restore:
            logger.debug("Playback context restore invalidated")
        self._can_restore = False

    # =================================================================
    # Internals
    # =================================================================

    def _clear(self) -> None:
        self._owner = IdleOwnership()
        self._can_restore = False
        self._is_detached = False
        self._pending = None

    def _refuse(self, operation: str, result: TransitionResult) -> TransitionResult:
        logger.debug(f"Refused to {operation}: {result.value} (context={self.context})")
        return result

    def _notify(self, event: PlaybackContextEvent, directive: Optional[RestoreDirective] = None) -> None:
        self._observers.notify("on_playback_context_event", event, self.context, directive)
