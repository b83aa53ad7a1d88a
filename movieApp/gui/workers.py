from __future__ import annotations
from concurrent.futures import Future
from typing import Any, Callable

from PySide6.QtCore import QRunnable

from movieApp.utils import log_debug


# ───────────────────────── Worker skeleton ────────────────────────────────
class _StoreTask(QRunnable):
    """
    One store call run on a QThreadPool.

    The outcome lands on `future`: the call's return value, or the exception
    it raised. Errors are logged here and not re-raised on the worker thread.
    """

    def __init__(self, label: str, fn: Callable[..., Any], *args: Any):
        super().__init__()
        self.label  = label
        self.fn     = fn
        self.args   = args
        self.future: Future = Future()

    def run(self):
        if not self.future.set_running_or_notify_cancel():
            return
        try:
            result = self.fn(*self.args)
        except Exception as e:
            log_debug(f"{self.label} worker error: {e!r}")
            self.future.set_exception(e)
        else:
            self.future.set_result(result)
