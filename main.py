"""Console entry point for the WellMap route finder.

Usage:
    python main.py              # Interactive mode
    python main.py "Oviedo"     # Single query mode: route to Oviedo and save the map
"""

import asyncio
import sys
import webbrowser

from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import Prompt

from wellmap.client import MapClient, StaticGeolocator
from wellmap.config import settings
from wellmap.render import format_km, format_minutes, save_map
from wellmap.tools.export import route_to_gpx, save_gpx
from wellmap.utils.log import setup_logging


console = Console()

HELP = (
    "Type a city to route to it from your origin.\n\n"
    "[bold]Commands:[/bold]\n"
    "  • [cyan]here[/cyan]    fill the search with the city at your position\n"
    "  • [cyan]route[/cyan]   recompute the route to the current destination\n"
    "  • [cyan]google[/cyan]  open the current search in a web search\n"
    "  • [cyan]map[/cyan]     save the map as HTML and open it\n"
    "  • [cyan]gpx[/cyan]     export the route as a GPX track\n\n"
    "[dim]Type 'quit' to exit.[/dim]"
)


def alert(message: str) -> None:
    console.print(f"[yellow]⚠ {message}[/yellow]")


def format_route(client: MapClient) -> str:
    """Markdown shown in place of the browser's info panel."""
    state = client.state
    if state.route is None:
        if state.last_error:
            return f"❌ {state.last_error}"
        return "No route yet."

    lines = [
        f"## {state.place or state.input_text}",
        "",
        f"**Duration:** {format_minutes(state.route.duration)} minutes",
        f"**Distance:** {format_km(state.route.distance)} km",
    ]
    if state.destination is not None:
        lines.append(f"**Destination:** {state.destination.to_latlon()}")
    return "\n".join(lines)


async def run_search(client: MapClient, city: str) -> None:
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(f"📍 Finding {city}...", total=None)
        destination = await client.search(city)

    if destination is not None:
        console.print(Markdown(format_route(client)))
    elif city.strip():
        console.print(f"[red]Could not route to {city!r}: {client.state.last_error}[/red]")


async def handle_command(client: MapClient, command: str) -> None:
    """Run one interactive command."""
    state = client.state
    word = command.strip().lower()

    if word == "here":
        city = await client.use_my_location(StaticGeolocator(settings.position))
        if city:
            console.print(f"[green]✓[/green] Search set to [bold]{city}[/bold]")
    elif word == "route":
        if state.destination is None:
            console.print("[dim]Search for a city first.[/dim]")
            return
        await client.recalculate_route()
        console.print(Markdown(format_route(client)))
    elif word == "google":
        url = client.open_in_search()
        if url:
            console.print(f"[dim]Opened {url}[/dim]")
    elif word == "map":
        path = save_map(state, search_url=client.external_search_url(), interactive=False)
        console.print(f"[green]✓[/green] Map saved to {path}")
        webbrowser.open(path.resolve().as_uri())
    elif word == "gpx":
        if state.route is None:
            console.print("[dim]No route to export.[/dim]")
            return
        name = state.place or "route"
        path = save_gpx(route_to_gpx(state.route, name, state.origin, state.destination), name)
        console.print(f"[green]✓[/green] GPX saved to {path}")
    else:
        await run_search(client, command)


async def interactive_mode():
    """Run interactive mode."""

    console.print("\n[bold green]🗺️ WellMap[/bold green]\n")
    console.print(Panel(HELP, title="Welcome", border_style="green"))

    async with MapClient(settings=settings, alert=alert) as client:
        origin = client.state.origin
        console.print(f"[dim]Origin: {origin.to_latlon()}[/dim]")

        while True:
            try:
                console.print()
                user_input = Prompt.ask("[bold green]Search[/bold green]")

                if user_input.lower() in ["quit", "exit", "q"]:
                    console.print("\n[dim]Goodbye![/dim]\n")
                    break

                await handle_command(client, user_input)

            except KeyboardInterrupt:
                console.print("\n\n[dim]Session interrupted. Goodbye![/dim]\n")
                break


async def single_query(query: str):
    """Route to a single city and save the map."""
    async with MapClient(settings=settings, alert=alert) as client:
        await run_search(client, query)
        if client.state.route is not None:
            path = save_map(client.state, search_url=client.external_search_url(), interactive=False)
            console.print(f"[green]✓[/green] Map saved to {path}")


def main():
    """Main entry point."""
    load_dotenv()
    setup_logging(settings.log_level, console)

    missing = settings.validate_required()
    if missing:
        console.print(Panel(
            "[red]Missing or invalid configuration:[/red]\n" +
            "\n".join(f"  • {m}" for m in missing),
            title="Configuration Error",
            border_style="red",
        ))
        sys.exit(1)

    if len(sys.argv) > 1:
        query = " ".join(sys.argv[1:])
        asyncio.run(single_query(query))
    else:
        asyncio.run(interactive_mode())


if __name__ == "__main__":
    main()
