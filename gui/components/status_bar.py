import tkinter as tk
from tkinter import ttk


class StatusBar(ttk.Frame):
    """
    Status bar for the task list.

    Displays: status message (or the last error), busy indicator,
    last request latency (ms), and open/done task counts.
    """

    def __init__(self, parent):
        super().__init__(parent, style="Panel.TFrame", padding=(6, 3))

        # Status message (left side)
        self.message_var = tk.StringVar(value="")
        self.message_label = ttk.Label(self, textvariable=self.message_var, style="Muted.TLabel")
        self.message_label.pack(side=tk.LEFT)

        # Metrics container (right side)
        metrics_frame = ttk.Frame(self, style="Panel.TFrame")
        metrics_frame.pack(side=tk.RIGHT)

        # Busy indicator
        self.busy_var = tk.StringVar(value="")
        ttk.Label(metrics_frame, textvariable=self.busy_var,
                  style="Muted.TLabel", width=2).pack(side=tk.RIGHT, padx=(4, 0))

        # Latency metric
        self.latency_var = tk.StringVar(value="")
        ttk.Label(metrics_frame, textvariable=self.latency_var,
                  style="Muted.TLabel", width=10).pack(side=tk.RIGHT, padx=(8, 0))

        # Task counts
        self.counts_var = tk.StringVar(value="")
        ttk.Label(metrics_frame, textvariable=self.counts_var,
                  style="Muted.TLabel").pack(side=tk.RIGHT, padx=(8, 0))

    def update_status(self, state):
        """Refresh status bar from app state."""
        if state.last_error:
            self.message_var.set(f"{state.status_message}: {state.last_error}")
            self.message_label.configure(style="Error.TLabel")
        else:
            self.message_var.set(state.status_message)
            self.message_label.configure(style="Muted.TLabel")
        self.busy_var.set("●" if state.is_busy else "")

        if state.last_latency_ms is not None:
            self.latency_var.set(f"{state.last_latency_ms:.0f}ms")
        else:
            self.latency_var.set("")

        open_count, done_count = state.counts()
        self.counts_var.set(f"{open_count} open · {done_count} done")
