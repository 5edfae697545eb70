"""
Terminal messages for releasemenu using 'rich'.
Status lines share one themed console; the selection summary is a table.
"""

import sys

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

COLORS = {
    "primary": "#00D4AA",    # Cyan
    "success": "#00C853",    # Green
    "warning": "#FFD600",    # Yellow
    "error": "#FF1744",      # Red
    "muted": "#78909C",      # Gray
}

releasemenu_theme = Theme({
    "primary": COLORS["primary"],
    "success": COLORS["success"],
    "warning": COLORS["warning"],
    "error": COLORS["error"],
    "muted": COLORS["muted"],
    "info": COLORS["muted"],
})


def supports_color():
    """Check if terminal supports colors."""
    if not hasattr(sys.stdout, "isatty"):
        return False
    if not sys.stdout.isatty():
        return False
    return True


console = Console(theme=releasemenu_theme, force_terminal=True if supports_color() else False)


def set_color(enabled):
    """Turn styled output on or off for the shared console."""
    console.no_color = not enabled


def print_error(message):
    """Print an error message."""
    console.print(f"Error: {message}", style="error", markup=False)


def print_success(message):
    """Print a success message."""
    console.print(f"✓ {message}", style="success", markup=False)


def print_warning(message):
    """Print a warning message."""
    console.print(f"⚠ {message}", style="warning", markup=False)


def print_info(message):
    """Print an info message."""
    console.print(message, style="info", markup=False)


def print_selection(updates):
    """Show the updates chosen in the menu."""
    if not updates:
        print_info("No updates selected.")
        return

    table = Table(title="Selected updates", title_style="primary", header_style="primary")
    table.add_column("CONTAINER")
    table.add_column("CURRENT", style="muted")
    table.add_column("TARGET", style="success")
    for update in updates:
        table.add_row(update.container, str(update.current), str(update.target))
    console.print(table)
    print_success(f"{len(updates)} update(s) selected")
