"""Rich-powered console output for textgraph."""

from __future__ import annotations

import json

from rich.console import Console as RichConsole
from rich.panel import Panel

from textgraph.config import RenderConfig


class Console:
    """Terminal output for the textgraph CLI using Rich."""

    def __init__(self) -> None:
        self.console = RichConsole()

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {message}")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]![/yellow] {message}")

    def info(self, message: str) -> None:
        self.console.print(f"[blue]i[/blue] {message}")

    def drawing(self, text: str) -> None:
        """Print rendered graph text exactly as produced."""
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def show_config(self, config: RenderConfig, source: str = "defaults") -> None:
        self.console.print(
            Panel(f"[dim]{source}[/dim]", title="[bold]Render Config[/bold]", border_style="cyan")
        )
        self.console.print_json(json.dumps(config.model_dump(), ensure_ascii=False))
