"""Effective selection across the Schedule and Videos tabs."""

import logging
from typing import Optional

from sessionshell.core.observer import ObserverManager
from sessionshell.models import SessionSelection, Tab
from sessionshell.protocols import SelectionEvent, SelectionObserver

logger = logging.getLogger(__name__)


class SelectionCoordinator:
    """
    Derives a single, tab-independent selection from two per-tab selections.

    Each tab keeps its own selection. The effective selection is always the
    selection stored for the active tab, and it is recomputed from scratch
    whenever the active tab changes or the active tab's selection changes.

    Observers receive:
    - TAB_SELECTION_CHANGED for every per-tab change (drives the tab's detail pane)
    - EFFECTIVE_SELECTION_CHANGED once per recomputation, even when the
      value is unchanged (drives the shelf and the current activity)
    """

    def __init__(self, active_tab: Tab = Tab.SCHEDULE) -> None:
        self._active_tab = active_tab
        self._selections: dict[Tab, Optional[SessionSelection]] = {tab: None for tab in Tab}
        self._effective: Optional[SessionSelection] = None
        self._observers = ObserverManager[SelectionObserver](observer_type_name="selection")

    def register_observer(self, observer: SelectionObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: SelectionObserver) -> None:
        self._observers.unregister(observer)

    # =================================================================
    # Mutations
    # =================================================================

    def set_active_tab(self, tab: Tab) -> None:
        """
        Activate a tab.

        Always publishes the effective selection, even when switching to the
        tab that is already active or whose selection equals the previous one.
        """
        tab = Tab(tab)
        if tab != self._active_tab:
            logger.info(f"Active tab: {self._active_tab.value} -> {tab.value}")
        self._active_tab = tab
        self._recompute()

    def set_selection(self, tab: Tab, selection: Optional[SessionSelection]) -> None:
        """
        Store a tab's selection.

        The effective selection is only recomputed (and published) when
        `tab` is the active tab; an inactive tab's selection is kept until
        that tab is activated.
        """
        tab = Tab(tab)
        self._selections[tab] = selection
        logger.debug(f"Selection in {tab.value}: {selection}")
        self._observers.notify("on_selection_event", SelectionEvent.TAB_SELECTION_CHANGED, tab, selection)

        if tab == self._active_tab:
            self._recompute()

    # =================================================================
    # Read-Only State Access
    # =================================================================

    def effective_selection(self) -> Optional[SessionSelection]:
        """The selection considered current, regardless of which tab is active."""
        return self._effective

    @property
    def active_tab(self) -> Tab:
        return self._active_tab

    def selection_for(self, tab: Tab) -> Optional[SessionSelection]:
        return self._selections[Tab(tab)]

    def _recompute(self) -> None:
        self._effective = self._selections[self._active_tab]
        self._observers.notify(
            "on_selection_event",
            SelectionEvent.EFFECTIVE_SELECTION_CHANGED,
            self._active_tab,
            self._effective,
        )
