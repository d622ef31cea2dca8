"""
PropMatch Command Line Interface

Provides CLI commands for browsing the client book and inventory
and for running the matching engine in either direction.
"""

from datetime import date
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

app = typer.Typer(
    name="propmatch",
    help="Client and property inventory matcher for real-estate agents",
    add_completion=False,
)
console = Console()

DATA_OPTION = typer.Option(
    None, "--data", "-d", help="JSON snapshot to load (defaults to APP_DATA_FILE)"
)


def _score_style(score: int) -> str:
    if score >= 90:
        return "green"
    elif score >= 75:
        return "blue"
    return "yellow"


def _load_state(data: Optional[Path]):
    """Load the application state, exiting with an error message on failure."""
    from propmatch.data.state import AppState
    from propmatch.utils.config import get_settings

    path = data or get_settings().data_file
    try:
        return AppState.from_json(path)
    except FileNotFoundError:
        console.print(f"[red]Error: Data file not found: {escape(str(path))}[/red]")
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(f"[red]Error: Invalid data file {escape(str(path))}:[/red]")
        console.print(f"[dim]{escape(str(e))}[/dim]")
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
):
    """Configure logging before any command runs."""
    from propmatch.utils.logger import setup_logging

    setup_logging("DEBUG" if verbose else None)


@app.command()
def version():
    """Show application version."""
    from propmatch import __app_name__, __version__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show configuration."""
    from propmatch.utils.config import get_settings

    settings = get_settings()

    table = Table(title="PropMatch Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Data File", str(settings.data_file))
    table.add_row("Match Threshold", str(settings.matching.min_score))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def clients(
    data: Optional[Path] = DATA_OPTION,
    search: str = typer.Option("", "--search", "-s", help="Search by name or phone"),
    status: Optional[str] = typer.Option(None, "--status", help="Filter by status (New/Cold/Warm/Hot/Cancelled)"),
):
    """List clients in the book."""
    from propmatch.core.inventory import ClientFilter, filter_clients
    from propmatch.utils.constants import ClientStatus

    state = _load_state(data)

    try:
        status_filter = ClientStatus(status) if status else None
    except ValueError:
        console.print(f"[red]Error: Unknown status: {escape(status)}[/red]")
        raise typer.Exit(1)

    found = filter_clients(state.clients, ClientFilter(search=search, status=status_filter))
    if not found:
        console.print("[yellow]No clients found.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Clients ({len(found)})")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Phone")
    table.add_column("Status", justify="center")
    table.add_column("Looking For")

    for client in found:
        req = client.requirement
        table.add_row(
            escape(client.id),
            escape(client.name),
            escape(client.phone),
            client.status,
            escape(f"{req.intent} • {req.property_type} • {', '.join(req.configurations)}"),
        )

    console.print(table)


@app.command()
def properties(
    data: Optional[Path] = DATA_OPTION,
    search: str = typer.Option("", "--search", "-s", help="Search by project or location"),
    location: Optional[str] = typer.Option(None, "--location", "-l", help="Main location"),
):
    """List properties in the inventory."""
    from propmatch.core.inventory import PropertyFilter, filter_properties
    from propmatch.utils.helpers import format_currency

    state = _load_state(data)
    found = filter_properties(
        state.properties, PropertyFilter(search=search, main_location=location)
    )
    if not found:
        console.print("[yellow]No properties found.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Properties ({len(found)})")
    table.add_column("ID", style="dim")
    table.add_column("Project", style="cyan")
    table.add_column("Location")
    table.add_column("Config")
    table.add_column("Size", justify="right")
    table.add_column("Price", justify="right")

    for prop in found:
        table.add_row(
            escape(prop.id),
            escape(prop.project_name),
            escape(f"{prop.sub_location}, {prop.main_location}"),
            escape(prop.bhk),
            f"{prop.size_sqft:,.0f} sq. ft.",
            format_currency(prop.price),
        )

    console.print(table)


@app.command()
def match_client(
    client_id: str = typer.Argument(..., help="Client ID to find properties for"),
    data: Optional[Path] = DATA_OPTION,
):
    """Find properties matching a client's requirement."""
    from propmatch.utils.helpers import format_currency

    state = _load_state(data)
    client = state.get_client(client_id)
    if not client:
        console.print(f"[red]Error: Client not found: {escape(client_id)}[/red]")
        raise typer.Exit(1)

    results = state.matches_for_client(client_id)
    if not results:
        console.print(f"[yellow]No matching properties for {escape(client.name)}.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Property Matches for {escape(client.name)}")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Property", style="cyan")
    table.add_column("Location")
    table.add_column("Price", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Reasons")

    for i, result in enumerate(results, 1):
        prop = result.property
        color = _score_style(result.score)
        table.add_row(
            str(i),
            escape(prop.project_name),
            escape(f"{prop.sub_location}, {prop.main_location}"),
            format_currency(prop.price),
            f"[{color}]{result.score}[/{color}]",
            ", ".join(result.reasons),
        )

    console.print(table)


@app.command()
def match_property(
    property_id: str = typer.Argument(..., help="Property ID to find clients for"),
    data: Optional[Path] = DATA_OPTION,
):
    """Find clients whose requirement matches a property."""
    state = _load_state(data)
    prop = state.get_property(property_id)
    if not prop:
        console.print(f"[red]Error: Property not found: {escape(property_id)}[/red]")
        raise typer.Exit(1)

    results = state.matches_for_property(property_id)
    if not results:
        console.print(f"[yellow]No matching clients for {escape(prop.project_name)}.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Client Matches for {escape(prop.project_name)}")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Client", style="cyan")
    table.add_column("Phone")
    table.add_column("Status", justify="center")
    table.add_column("Score", justify="right")
    table.add_column("Reasons")

    for i, result in enumerate(results, 1):
        color = _score_style(result.score)
        table.add_row(
            str(i),
            escape(result.client.name),
            escape(result.client.phone),
            result.client.status,
            f"[{color}]{result.score}[/{color}]",
            ", ".join(result.reasons),
        )

    console.print(table)


@app.command()
def dashboard(
    data: Optional[Path] = DATA_OPTION,
    on: Optional[str] = typer.Option(None, "--on", help="Day to report on (YYYY-MM-DD, default today)"),
):
    """Show headline counts and the day's follow-ups."""
    state = _load_state(data)

    try:
        today = date.fromisoformat(on) if on else date.today()
    except ValueError:
        console.print(f"[red]Error: Invalid date: {escape(on)}[/red]")
        raise typer.Exit(1)

    stats = state.dashboard_stats(today)
    console.print(f"[bold]Hello, {escape(state.agent.name.split(' ')[0])}![/bold]")
    console.print(f"  Active Clients: [cyan]{stats['active_clients']}[/cyan]")
    console.print(f"  Properties Listed: [cyan]{stats['properties_listed']}[/cyan]")
    console.print(f"  Today's Follow-ups: [cyan]{stats['todays_follow_ups']}[/cyan]")

    follow_ups = state.todays_follow_ups(today)
    if not follow_ups:
        console.print("\n[dim]No follow-ups scheduled for today.[/dim]")
        return

    console.print("\n[bold]Today's Follow-ups:[/bold]")
    for follow_up in follow_ups:
        client = state.get_client(follow_up.client_id)
        if client is None:
            continue
        console.print(f"  • [cyan]{escape(client.name)}[/cyan] ({escape(client.phone)}): {escape(follow_up.note)}")


@app.command()
def share(
    property_id: str = typer.Argument(..., help="Property ID to share"),
    data: Optional[Path] = DATA_OPTION,
):
    """Print the share message for a property."""
    from propmatch.utils.helpers import generate_share_message

    state = _load_state(data)
    prop = state.get_property(property_id)
    if not prop:
        console.print(f"[red]Error: Property not found: {escape(property_id)}[/red]")
        raise typer.Exit(1)

    console.print(
        generate_share_message(prop, state.agent),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


if __name__ == "__main__":
    app()
