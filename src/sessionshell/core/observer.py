"""In-process event dispatch.

ObserverManager is the explicit event bus of the shell: components hold one
per observer protocol and call `notify` with the callback name. There is no
global broadcast; observers must be registered with the component whose
events they want.
"""

import logging
from threading import Lock
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=object)


class ObserverManager(Generic[T]):
    """
    Observer list with registration, unregistration and isolated notification.

    Type Parameters:
        T: The observer protocol type (e.g., SelectionObserver, AppObserver)

    Registration is guarded by a lock; the lock is released before
    callbacks run, so an observer may register or unregister while being
    notified.

    Example:
        ```python
        class SelectionCoordinator:
            def __init__(self):
                self._observers = ObserverManager[SelectionObserver](observer_type_name="selection")

            def _publish(self, event, tab, selection):
                self._observers.notify("on_selection_event", event, tab, selection)
        ```
    """

    def __init__(self, observer_type_name: str = "observer"):
        """
        Args:
            observer_type_name: Name of the observer type for logging (e.g., "selection", "app")
        """
        self._observers: list[T] = []
        self._lock = Lock()
        self._observer_type_name = observer_type_name

    def register(self, observer: T) -> None:
        """Register an observer (idempotent - won't add duplicates)."""
        with self._lock:
            if observer not in self._observers:
                self._observers.append(observer)
                logger.debug(f"Registered {self._observer_type_name} observer: {observer}")
            else:
                logger.debug(f"{self._observer_type_name} observer already registered: {observer}")

    def unregister(self, observer: T) -> None:
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)
                logger.debug(f"Unregistered {self._observer_type_name} observer: {observer}")
            else:
                logger.warning(
                    f"Attempted to unregister unknown {self._observer_type_name} observer: {observer}"
                )

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """
        Call `callback_name` on every registered observer, in registration order.

        Error Handling:
            Exceptions in observer callbacks are logged but don't affect other
            observers or the caller.
        """
        with self._lock:
            observers = list(self._observers)

        for observer in observers:
            try:
                callback = getattr(observer, callback_name)
            except AttributeError:
                logger.error(
                    f"{self._observer_type_name} observer {observer} has no method '{callback_name}'"
                )
                continue

            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Error notifying {self._observer_type_name} observer {observer} via {callback_name}: {e}",
                    exc_info=True,
                )

    def clear(self) -> None:
        """Remove all registered observers."""
        with self._lock:
            count = len(self._observers)
            self._observers.clear()
        if count > 0:
            logger.debug(f"Cleared {count} {self._observer_type_name} observer(s)")

    def __contains__(self, observer: T) -> bool:
        with self._lock:
            return observer in self._observers

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)
