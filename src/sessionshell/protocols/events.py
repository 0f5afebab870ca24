"""Domain events for observer pattern.

This module defines events that can occur within the shell:
- Selection events: per-tab and effective selection changes
- Playback context events: ownership of the shared player surface
- Application events: lifecycle, list loading and dependent displays
"""

from enum import Enum


class SelectionEvent(Enum):
    """
    Events for session selection changes.

    TAB_SELECTION_CHANGED fires for every per-tab change, active or not, and
    drives that tab's detail pane. EFFECTIVE_SELECTION_CHANGED fires whenever
    the effective selection is recomputed, including on every tab switch.
    """

    TAB_SELECTION_CHANGED = "tab_selection_changed"
    EFFECTIVE_SELECTION_CHANGED = "effective_selection_changed"


class PlaybackContextEvent(Enum):
    """Events from the playback context tracker."""

    PLAYBACK_BEGAN = "playback_began"  # A tab/session took ownership of the player
    DETACHED_MODE_ENTERED = "detached_mode_entered"  # Player moved to the overlay
    RESTORE_REQUESTED = "restore_requested"  # Leaving the overlay; bring the owner back
    PLAYBACK_RELEASED = "playback_released"  # Ownership cleared


class AppEvent(Enum):
    """Events from application lifecycle and state changes."""

    STARTED = "started"  # Shell finished launching
    LISTS_UPDATED = "lists_updated"  # Tracks and schedule sections reloaded from the store
    SHELF_UPDATED = "shelf_updated"  # Shelf must show the effective selection
    DETAIL_UPDATED = "detail_updated"  # A tab's detail pane must show its selection
    PLAYBACK_CONTEXT_RESTORED = "playback_context_restored"  # Owner tab reactivated after overlay
