"""Rich console output formatting utilities."""

from datetime import date

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from scpsl.models import ServerInfo, SuccessResponse

console = Console()

MISSING = "[dim]-[/dim]"


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_flag(value: bool | None) -> str:
    """Format an optional boolean server flag."""
    if value is None:
        return MISSING
    return "[green]yes[/green]" if value else "[red]no[/red]"


def format_last_online(value: date | None, today: date | None = None) -> str:
    """Format a LastOnline date, calling out today."""
    if value is None:
        return MISSING
    if value == (today or date.today()):
        return "today"
    return value.isoformat()


def create_servers_table(response: SuccessResponse) -> Table:
    """Create a rich table listing the servers of a success response.

    Columns for data the API did not return are still shown, filled with
    a dash, so the layout is stable across flag combinations.
    """
    table = Table(title=f"Servers ({len(response.servers)})")

    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Port", justify="right")
    table.add_column("Players", justify="right", style="magenta")
    table.add_column("Online", justify="center")
    table.add_column("Last Online", no_wrap=True)
    table.add_column("Version")
    table.add_column("FF", justify="center")
    table.add_column("WL", justify="center")
    table.add_column("Modded", justify="center")

    for server in response.servers:
        table.add_row(
            str(server.id),
            str(server.port),
            str(server.players_count) if server.players_count is not None else MISSING,
            format_flag(server.online),
            format_last_online(server.last_online),
            server.version or MISSING,
            format_flag(server.friendly_fire),
            format_flag(server.whitelist),
            format_flag(server.modded),
        )

    return table


def create_server_detail_panel(server: ServerInfo) -> Panel:
    """Create a panel with the info text and player list of one server."""
    lines = [f"[bold]Port:[/bold] {server.port}"]

    if server.info is not None:
        lines.append(f"[bold]Info:[/bold] {server.info}")
    if server.pastebin is not None:
        lines.append(f"[bold]Pastebin:[/bold] {server.pastebin}")
    if server.mods is not None:
        lines.append(f"[bold]Mods:[/bold] {server.mods}")

    if server.players is not None:
        lines.append("")
        lines.append(f"[bold cyan]Players ({len(server.players)})[/bold cyan]")
        for player in server.players:
            if player.nickname is not None:
                lines.append(f"  {player.nickname} [dim]({player.id})[/dim]")
            else:
                lines.append(f"  {player.id}")

    return Panel(
        "\n".join(lines),
        title=f"[bold]Server {server.id}[/bold]",
        border_style="blue",
    )
