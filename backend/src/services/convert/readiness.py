# convert/readiness.py
import threading


class Readiness:
    """Set-once readiness flag.

    Written once by the background initialization task, read by every
    conversion request. There is no way to go back to not-ready.
    """

    def __init__(self):
        self._event = threading.Event()

    @property
    def is_ready(self) -> bool:
        return self._event.is_set()

    def mark_ready(self):
        self._event.set()
