"""Async helpers.

A runner takes ``work`` (the network call) and ``callback`` (applies the
result to state). ``run_async`` executes both inline, which is what tests
use. ``TkRunner`` runs the work on a daemon thread and hands the result
back to the Tk event loop, so state is only touched from the UI thread.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional

from taskboard.utils.logger import get_logger

logger = get_logger(__name__)

Runner = Callable[[Callable[[], Any], Callable[[Any], Any]], Any]


def run_async(fn: Callable[[], Any], callback: Optional[Callable[[Any], Any]] = None) -> Any:
    result = fn()
    if callback is not None:
        return callback(result)
    return result


class TkRunner:
    """Run work in a background thread; deliver results via ``root.after``."""

    def __init__(self, root, on_error: Optional[Callable[[BaseException], None]] = None):
        self.root = root
        self.on_error = on_error

    def _post(self, fn: Callable[[], Any]) -> None:
        """Schedule ``fn`` on the Tk loop; drop it if the window is gone."""
        from tkinter import TclError

        try:
            self.root.after(0, fn)
        except (TclError, RuntimeError) as exc:
            logger.debug("Dropping background result; window closed (%s)", exc)

    def __call__(self, fn: Callable[[], Any], callback: Optional[Callable[[Any], Any]] = None) -> None:
        def wrapper():
            try:
                result = fn()
            except Exception as e:
                logger.exception("Background task failed")
                if self.on_error is not None:
                    self._post(lambda err=e: self.on_error(err))
                return
            if callback is not None:
                self._post(lambda cb=callback, res=result: cb(res))

        thread = threading.Thread(target=wrapper, daemon=True)
        thread.start()
        return None
