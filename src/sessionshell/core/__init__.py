"""Coordination core: selection and playback context."""

from .observer import ObserverManager
from .playback_context import PlaybackContextTracker
from .selection import SelectionCoordinator

__all__ = ["ObserverManager", "PlaybackContextTracker", "SelectionCoordinator"]
