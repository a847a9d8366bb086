from __future__ import annotations

RICH_ACCENT = "blue"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"
RICH_BORDER_STYLE = RICH_ACCENT
RICH_GROUP_STYLE = "bold cyan"
RICH_CAPTION_STYLE = "dim"

SORT_MARKERS: dict[str, str] = {
    "asc": "↑",
    "desc": "↓",
    "none": "↕",
}

MESSAGE_TEMPLATES: dict[str, str] = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
    "success": "[green]✔ {message}[/green]",
}
