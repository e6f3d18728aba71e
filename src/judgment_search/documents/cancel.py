from __future__ import annotations
import threading
from typing import Optional

from judgment_search.errors import OperationCancelled


class CancelToken:
    """Cancellation handle checked at every suspension point of the pipeline."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self, where: str = "") -> None:
        if self._event.is_set():
            raise OperationCancelled(f"cancelled{' at ' + where if where else ''}")


def check(cancel: Optional[CancelToken], where: str = "") -> None:
    if cancel is not None:
        cancel.raise_if_cancelled(where)


__all__ = ['CancelToken', 'check']
