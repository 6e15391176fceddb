"""
Write-once cell for process-wide reference tables.

The first successful set() wins. Later calls raise instead of
overwriting, so a table loaded at startup can be read without locking.
"""

import threading
from typing import Generic, Optional, Type, TypeVar

T = TypeVar("T")


class WriteOnce(Generic[T]):
    """
    Lock-guarded cell that accepts exactly one value.

    Example usage:
        _TABLE: WriteOnce[CoefficientTable] = WriteOnce(
            TableAlreadyLoadedError, "Coefficients already loaded."
        )
        _TABLE.set(table)
        _TABLE.get()  # -> table
    """

    def __init__(self, error_cls: Type[Exception], error_message: str):
        self._value: Optional[T] = None
        self._lock = threading.Lock()
        self._error_cls = error_cls
        self._error_message = error_message

    @property
    def is_set(self) -> bool:
        return self._value is not None

    def get(self) -> Optional[T]:
        """Stored value, or None before set()."""
        return self._value

    def set(self, value: T) -> None:
        """
        Store value once.

        Raises:
            error_cls: If a value is already stored
        """
        with self._lock:
            if self._value is not None:
                raise self._error_cls(self._error_message)
            self._value = value

    def _reset(self) -> None:
        # Test hook: module-level cells outlive individual tests.
        with self._lock:
            self._value = None
