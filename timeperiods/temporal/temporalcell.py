"""Observable value holder.

A cell holds one immutable value that is replaced wholesale. Observers
registered with subscribe() are called with (new, old) after each
replacement. Observer exceptions propagate to the writer.
"""

import threading
from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")

Observer = Callable[[T, T], None]


class ObservableCell(Generic[T]):
    """
    Single-writer, multi-reader value cell with change notification.

    Examples:
        >>> cell = ObservableCell(1)
        >>> seen = []
        >>> unsubscribe = cell.subscribe(lambda new, old: seen.append((old, new)))
        >>> cell.value = 2
        >>> seen
        [(1, 2)]
        >>> unsubscribe()
    """

    def __init__(self, value: T):
        self._value = value
        self._observers: List[Observer] = []
        self._lock = threading.Lock()

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        """Replace the value; observers run only if it changed."""
        with self._lock:
            old = self._value
            if value == old:
                return
            self._value = value
            observers = list(self._observers)

        for observer in observers:
            observer(value, old)

    @property
    def value(self) -> T:
        return self.get()

    @value.setter
    def value(self, value: T) -> None:
        self.set(value)

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register an observer.

        Returns:
            Callable that removes the observer (safe to call twice)
        """
        with self._lock:
            self._observers.append(observer)

        def unsubscribe():
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def __repr__(self) -> str:
        return f"ObservableCell({self._value!r})"


__all__ = [
    "ObservableCell",
]
