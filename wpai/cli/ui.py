# wpai/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from wpai.cli.ui import ui

    ui.header("My Command")
    ui.success("Done!")
    name = ui.prompt_text("Enter name", default="default")
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.syntax import Syntax
from rich.table import Table

console = Console()


class UI:
    """Rich-styled output and prompts used by every command."""

    # -------------------------------------------------------------------------
    # Output Methods
    # -------------------------------------------------------------------------

    def header(self, title: str, subtitle: str = "") -> None:
        """Print a fitted command header."""
        if subtitle:
            content = f"[bold]{escape(title)}[/bold]\n[dim]{escape(subtitle)}[/dim]"
        else:
            content = f"[bold]{escape(title)}[/bold]"
        console.print(Panel.fit(content, border_style="blue"))

    def step(self, num: int, total: int, msg: str) -> None:
        """Print a step indicator."""
        console.print(f"\n[bold blue][{num}/{total}][/bold blue] [bold]{msg}[/bold]")

    def success(self, msg: str) -> None:
        console.print(f"[green]✓[/green] {escape(msg)}")

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {escape(msg)}", highlight=False)

    def warning(self, msg: str, detail: str = "") -> None:
        detail_str = f" [dim]({escape(detail)})[/dim]" if detail else ""
        console.print(f"[yellow]⚠[/yellow] {escape(msg)}{detail_str}")

    def info(self, msg: str) -> None:
        """Print an info/dim message."""
        console.print(f"[dim]{escape(msg)}[/dim]")

    def panel(self, content: str, title: str = "", style: str = "blue") -> None:
        """Print content in a full-width panel."""
        console.print(Panel(escape(content), title=title, border_style=style))

    def code(self, code: str, lexer: str = "php") -> None:
        """Print source with syntax highlighting."""
        console.print(Syntax(code, lexer, line_numbers=True, word_wrap=True))

    def key_values(self, title: str, rows: list[tuple[str, str]]) -> None:
        """Print a two-column table."""
        table = Table(title=title, show_header=False, title_justify="left")
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        for key, value in rows:
            table.add_row(escape(key), escape(value))
        console.print(table)

    # -------------------------------------------------------------------------
    # Prompt Methods
    # -------------------------------------------------------------------------

    def prompt_text(self, prompt: str, default: str = "") -> str:
        return Prompt.ask(prompt, default=default, console=console)

    def prompt_confirm(self, prompt: str, default: bool = True) -> bool:
        return Confirm.ask(prompt, default=default, console=console)

    def prompt_numbered_choice(self, prompt: str, choices: list[str], default: str = "") -> str:
        """
        Prompt for a numbered choice selection.

        The default option is always shown at position [1].

        Example output:
            Plugin type:
              [1] chatbot (default)
              [2] content_gen
            Choice [1]:
        """
        if not choices:
            return default

        if default not in choices:
            default = choices[0]

        ordered = [default] + [c for c in choices if c != default]

        console.print(f"  [bold]{prompt}:[/bold]")
        for i, choice in enumerate(ordered, 1):
            suffix = " [dim](default)[/dim]" if choice == default else ""
            console.print(f"    [cyan][{i}][/cyan] {escape(choice)}{suffix}")

        while True:
            response = Prompt.ask("  Choice", default="1", console=console)
            try:
                idx = int(response)
            except ValueError:
                console.print("  [red]Please enter a number[/red]")
                continue

            if 1 <= idx <= len(ordered):
                selected = ordered[idx - 1]
                console.print(f"  [dim]→ {selected}[/dim]")
                return selected
            console.print(f"  [red]Please enter 1-{len(ordered)}[/red]")


ui = UI()

__all__ = ["ui", "console", "UI"]
