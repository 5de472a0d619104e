"""
Styling utilities for Cadenza CLI.
Provides status icons, dimmed text for technical messages and headers.
"""

from typing import Optional
from rich.console import Console
from rich.text import Text
from rich.panel import Panel
from rich.align import Align
from rich import box
from rich.markup import escape


class Styling:
    """Styling utilities for CLI output."""

    ART = {
        "notes": "♪  ♫  ♬",
    }

    def __init__(self, console: Console):
        self.console = console

    @staticmethod
    def dim(text: str) -> str:
        """Apply dimmed styling to text (for technical messages and paths)."""
        return f"[dim]{text}[/dim]"

    def success(self, message: str):
        self.console.print(f"[bold green]✓[/bold green] {message}")

    def error(self, message: str):
        self.console.print(f"[bold red]✗[/bold red] {message}")

    def warning(self, message: str):
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    def info(self, message: str):
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_path(self, path: str):
        """Print a dimmed path message."""
        self.console.print(f"  {self.dim(f'Path: {escape(path)}')}")

    def print_ascii_header(self, title: str, art_type: Optional[str] = None, style: str = "cyan"):
        """Print a header with optional ASCII art."""
        art = self.ART.get(art_type or "")
        if art:
            self.console.print(Align.center(Text(art, style=style)))

        panel = Panel(
            Align.center(Text(title, style=f"bold {style}")),
            border_style=style,
            box=box.ROUNDED,
            padding=(1, 2)
        )
        self.console.print(panel)
        self.console.print()
