import threading

from core.errors import OperationCancelled


class CancellationToken:
    """
    Shared flag tripped when the operator interrupts a prompt or a running
    dotenvx command.
    """

    def __init__(self):
        self._event = threading.Event()
        self.reason = None

    def cancel(self, reason: str = "interrupted"):
        if not self._event.is_set():
            self.reason = reason
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self):
        if self.cancelled:
            raise OperationCancelled(self.reason or "interrupted")
