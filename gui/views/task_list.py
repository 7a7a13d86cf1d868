import tkinter as tk
from tkinter import ttk

from gui.components.confirm_dialog import ConfirmDialog
from gui.views.base import BaseView


class TaskListView(BaseView):
    """Draft entry, sorted task rows, and the delete confirmation dialog."""

    name = "tasks"

    def _build(self):  # pragma: no cover - UI code
        self._dialog = None

        ttk.Label(self, text="To-Do List", style="Header.TLabel").pack(pady=(0, 12))

        # Input & button
        entry_row = ttk.Frame(self, style="Panel.TFrame")
        entry_row.pack(fill=tk.X, pady=(0, 12))
        entry_row.columnconfigure(0, weight=1)

        self.draft_var = tk.StringVar(value="")
        self.draft_var.trace_add("write", lambda *_: self.controller.set_draft(self.draft_var.get()))
        self.entry = ttk.Entry(entry_row, textvariable=self.draft_var)
        self.entry.grid(row=0, column=0, sticky="ew", padx=(0, 8))
        self.entry.bind("<Return>", lambda _e: self._on_add())

        self.add_btn = ttk.Button(entry_row, text="Add", style="Accent.TButton", command=self._on_add)
        self.add_btn.grid(row=0, column=1)

        # Task rows
        self.list_frame = ttk.Frame(self, style="Panel.TFrame")
        self.list_frame.pack(fill=tk.BOTH, expand=True)
        self._check_vars = {}

    def on_show(self):  # pragma: no cover - UI code
        self.entry.focus_set()

    # ------------------- Actions ----------------------------
    def _on_add(self):  # pragma: no cover - UI code
        self.controller.add_task()

    def _on_toggle(self, task_id, var):  # pragma: no cover - UI code
        # Reflect confirmed remote state only; render will set the real value
        task = self.controller.state.find(task_id)
        if task is not None:
            var.set(task.completed)
        self.controller.toggle_task(task_id)

    # ------------------- Rendering ----------------------------
    def render(self, state):  # pragma: no cover - UI code
        if self.draft_var.get() != state.draft:
            self.draft_var.set(state.draft)

        for child in self.list_frame.winfo_children():
            child.destroy()
        self._check_vars = {}

        tasks = list(self.controller.sorted_tasks())
        if not tasks:
            ttk.Label(self.list_frame, text="No tasks available", style="Muted.TLabel").pack(pady=8)
        for task in tasks:
            self._render_row(task)

        self._sync_dialog(state)

    def _render_row(self, task):  # pragma: no cover - UI code
        prefix = "DoneRow" if task.completed else "Row"
        row = ttk.Frame(self.list_frame, style=f"{prefix}.TFrame", padding=(12, 6))
        row.pack(fill=tk.X, pady=3)

        var = tk.BooleanVar(value=task.completed)
        self._check_vars[task.id] = var
        ttk.Checkbutton(
            row,
            variable=var,
            style=f"{prefix}.TCheckbutton",
            command=lambda tid=task.id, v=var: self._on_toggle(tid, v),
        ).pack(side=tk.LEFT)
        ttk.Label(row, text=task.description, style=f"{prefix}.TLabel").pack(side=tk.LEFT, padx=(8, 0))

        ttk.Button(
            row,
            text="✕",
            width=3,
            style="Delete.TButton",
            command=lambda tid=task.id: self.controller.request_delete(tid),
        ).pack(side=tk.RIGHT)

    def _sync_dialog(self, state):  # pragma: no cover - UI code
        if state.confirm_open:
            if self._dialog is None:
                self._dialog = ConfirmDialog(
                    self,
                    on_confirm=self.controller.confirm_delete,
                    on_cancel=self.controller.cancel_delete,
                )
            self._dialog.set_busy(state.is_busy)
            self._dialog.show_error(state.last_error)
        elif self._dialog is not None:
            self._dialog.close()
            self._dialog = None
