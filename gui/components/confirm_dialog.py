import tkinter as tk
from tkinter import ttk


class ConfirmDialog(tk.Toplevel):
    """Modal delete confirmation.

    The dialog does not close itself: the owning view destroys it once the
    delete flow leaves PendingConfirm, so a failed delete keeps it open.

    Usage:
        ConfirmDialog(root, on_confirm=controller.confirm_delete,
                      on_cancel=controller.cancel_delete)
    """

    def __init__(self, parent, on_confirm, on_cancel,
                 message="Are you sure you want to delete this task?"):
        super().__init__(parent)
        self.withdraw()
        self.title("Delete task")
        self.resizable(False, False)
        self.transient(parent.winfo_toplevel())
        self.protocol("WM_DELETE_WINDOW", on_cancel)

        body = ttk.Frame(self, style="Panel.TFrame", padding=20)
        body.pack(fill=tk.BOTH, expand=True)

        ttk.Label(body, text=message, style="TLabel").pack(pady=(0, 12))

        self.error_var = tk.StringVar(value="")
        ttk.Label(body, textvariable=self.error_var, style="Error.TLabel",
                  wraplength=320).pack(pady=(0, 8))

        actions = ttk.Frame(body, style="Panel.TFrame")
        actions.pack()
        self.cancel_btn = ttk.Button(actions, text="Cancel", command=on_cancel)
        self.cancel_btn.pack(side=tk.LEFT, padx=8)
        self.delete_btn = ttk.Button(actions, text="Delete", style="Danger.TButton",
                                     command=on_confirm)
        self.delete_btn.pack(side=tk.LEFT, padx=8)

        self.bind("<Escape>", lambda _e: on_cancel())
        self.bind("<Return>", lambda _e: on_confirm())

        self._center_on(parent)
        self.deiconify()
        self.grab_set()
        self.delete_btn.focus_set()

    def _center_on(self, parent):
        self.update_idletasks()
        top = parent.winfo_toplevel()
        x = top.winfo_rootx() + (top.winfo_width() - self.winfo_reqwidth()) // 2
        y = top.winfo_rooty() + (top.winfo_height() - self.winfo_reqheight()) // 3
        self.wm_geometry(f"+{max(x, 0)}+{max(y, 0)}")

    def set_busy(self, busy):
        state = tk.DISABLED if busy else tk.NORMAL
        self.delete_btn.configure(state=state)

    def show_error(self, text):
        self.error_var.set(text or "")

    def close(self):
        try:
            self.grab_release()
        finally:
            self.destroy()
