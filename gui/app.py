"""Main GUI application object.

Wires settings, the task store client, the controller and the Tk widgets
together, then runs the event loop.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from gui.controller import TaskListController
from gui.services.clients import get_task_client
from gui.state import AppState
from taskboard.config import Settings, get_settings
from taskboard.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


@dataclass
class TaskboardApp:
    """Window shell around one task list view."""

    settings: Settings = field(default_factory=get_settings)
    state: AppState = field(default_factory=AppState)
    controller: Optional[TaskListController] = None
    root: Optional[object] = None

    def run(self) -> None:  # pragma: no cover - UI code
        """Build the window, load tasks once, and enter the main loop."""
        import tkinter as tk
        from tkinter import ttk

        from gui.components.status_bar import StatusBar
        from gui.theme import ModernTheme, apply_theme
        from gui.utils.async_tasks import TkRunner
        from gui.views.task_list import TaskListView

        self.root = root = tk.Tk()
        root.title(self.settings.window_title)
        root.geometry("560x640")
        root.minsize(420, 360)
        apply_theme(ttk.Style(root), root, ModernTheme())

        client = get_task_client(self.settings)
        self.controller = TaskListController(
            client,
            state=self.state,
            runner=TkRunner(root, on_error=self._on_background_error),
            on_change=self._render,
        )

        outer = ttk.Frame(root, style="Main.TFrame", padding=24)
        outer.pack(fill=tk.BOTH, expand=True)
        self.view = TaskListView(outer, self.controller)
        self.view.pack(fill=tk.BOTH, expand=True)
        self.status_bar = StatusBar(root)
        self.status_bar.pack(fill=tk.X, side=tk.BOTTOM)

        root.protocol("WM_DELETE_WINDOW", self.shutdown)
        self._render(self.state)
        self.view.on_show()
        root.after(100, self.controller.load_all)

        logger.info("Task list started against %s", self.settings.api_url)
        root.mainloop()

    def _render(self, state: AppState) -> None:  # pragma: no cover - UI code
        self.view.render(state)
        self.status_bar.update_status(state)

    def _on_background_error(self, error: BaseException) -> None:  # pragma: no cover - UI code
        self.state.is_busy = False
        self.state.status_message = "Error"
        self.state.last_error = str(error)
        self._render(self.state)

    def shutdown(self) -> None:
        """Stop applying responses and close the window."""
        if self.controller is not None:
            self.controller.close()
        if self.root is not None:
            self.root.destroy()
            self.root = None


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, verbose=settings.verbose)
    TaskboardApp(settings=settings).run()


if __name__ == "__main__":
    main()
