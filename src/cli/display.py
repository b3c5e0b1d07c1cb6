"""Display components for CLI using Rich."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from src.android.aapt.executor import AaptResult

console = Console()


def show_error(title: str, message: str) -> None:
    """Display an error message."""
    console.print()
    console.print(
        Panel(
            f"[bold red]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="red",
        )
    )


def show_aapt_path(path: str) -> None:
    """Display the resolved aapt executable."""
    console.print(f"[bold cyan]aapt:[/] {escape(path)}")


def show_command(commands: list[str]) -> None:
    """Display an assembled command, one flag and its value per row."""
    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Token")

    for index, token in enumerate(commands):
        style = "bold yellow" if token.startswith("-") else None
        table.add_row(str(index), escape(token), style=style)

    console.print()
    console.print(
        Panel(
            table,
            title=f"[bold]aapt {escape(commands[1]) if len(commands) > 1 else ''}[/]",
            border_style="cyan",
        )
    )


def show_result(result: AaptResult) -> None:
    """Display the outcome of an aapt run."""
    if result.success:
        console.print()
        console.print(
            Panel(
                f"[bold green]aapt finished in {result.duration_seconds:.1f}s[/]",
                title="[bold]Success[/]",
                border_style="green",
            )
        )
        if result.stdout.strip():
            console.print(escape(result.stdout.rstrip()))
        return

    show_error(
        f"aapt failed (exit code {result.return_code})",
        result.error_message or result.stderr or "Unknown error",
    )
