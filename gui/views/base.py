"""Base class for GUI views.

A view is a ttk frame bound to a controller. Subclasses lay out widgets in
``_build`` and redraw from controller state in ``render``.
"""

import tkinter as tk
from tkinter import ttk


class BaseView(ttk.Frame):
    name = "base"

    def __init__(self, parent: tk.Misc, controller, **kwargs):
        kwargs.setdefault("style", "Panel.TFrame")
        kwargs.setdefault("padding", 16)
        super().__init__(parent, **kwargs)
        self.controller = controller
        self._build()

    def _build(self):  # pragma: no cover - UI code
        raise NotImplementedError

    def render(self, state):  # pragma: no cover - UI code
        raise NotImplementedError

    def on_show(self):  # pragma: no cover - UI code
        pass
