"""Theme primitives for the GUI.

Palettes are plain frozen dataclasses; ``apply_theme`` turns one into ttk
styles on a clam base.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Base theme definition."""

    name: str = "Default"
    background_color: str = "#ffffff"
    panel_color: str = "#f3f4f6"
    row_color: str = "#e5e7eb"
    done_row_color: str = "#d1d5db"
    text_color: str = "#1f2937"  # slate-800
    muted_color: str = "#6b7280"
    accent_color: str = "#3b82f6"  # blue-500
    danger_color: str = "#dc2626"
    font_family: str = "Inter"


@dataclass(frozen=True)
class ModernTheme(Theme):
    """Dark default theme."""

    name: str = "Modern"
    background_color: str = "#111827"  # gray-900
    panel_color: str = "#1f2937"  # gray-800
    row_color: str = "#374151"  # gray-700
    done_row_color: str = "#4b5563"  # gray-600
    text_color: str = "#ffffff"
    muted_color: str = "#9ca3af"  # gray-400
    accent_color: str = "#3b82f6"
    danger_color: str = "#f87171"  # red-400


def apply_theme(style, root, theme: Theme) -> None:  # pragma: no cover - UI code
    """Configure ttk styles used by the views."""
    style.theme_use("clam")
    font = (theme.font_family, 11)

    style.configure("TFrame", background=theme.background_color)
    style.configure("Main.TFrame", background=theme.background_color)
    style.configure("Panel.TFrame", background=theme.panel_color)
    style.configure("Row.TFrame", background=theme.row_color)
    style.configure("DoneRow.TFrame", background=theme.done_row_color)

    style.configure("TLabel", background=theme.panel_color, foreground=theme.text_color, font=font)
    style.configure(
        "Header.TLabel",
        background=theme.panel_color,
        foreground=theme.text_color,
        font=(theme.font_family, 18, "bold"),
    )
    style.configure("Muted.TLabel", background=theme.panel_color, foreground=theme.muted_color, font=font)
    style.configure("Row.TLabel", background=theme.row_color, foreground=theme.text_color, font=font)
    style.configure(
        "DoneRow.TLabel",
        background=theme.done_row_color,
        foreground=theme.muted_color,
        font=(theme.font_family, 11, "overstrike"),
    )
    style.configure("Error.TLabel", background=theme.panel_color, foreground=theme.danger_color, font=font)

    style.configure("Row.TCheckbutton", background=theme.row_color)
    style.configure("DoneRow.TCheckbutton", background=theme.done_row_color)

    style.configure("TButton", padding=6)
    style.configure("Accent.TButton", background=theme.accent_color, foreground="#ffffff")
    style.map("Accent.TButton", background=[("active", "#2563eb")])
    style.configure("Danger.TButton", background=theme.danger_color, foreground="#ffffff")
    style.map("Danger.TButton", background=[("active", "#dc2626")])
    style.configure(
        "Delete.TButton",
        background=theme.row_color,
        foreground=theme.danger_color,
        borderwidth=0,
        padding=2,
    )
    style.configure("TEntry", fieldbackground=theme.row_color, foreground=theme.text_color)

    root.configure(bg=theme.background_color)
