"""leandash CLI - Main commands."""
import json
import logging
from typing import Any, Callable, Optional

import requests
import typer
from rich.console import Console

from leandash import setup_logging
from leandash.core.api import DashboardClient, Region, ResponseHandler
from leandash.core.cookies import CookieStore
from leandash.core.exceptions import DashboardError, FatalConfigurationError

app = typer.Typer(
    name="leandash",
    help="LeanCloud dashboard API client",
    add_completion=False
)
console = Console()
err_console = Console(stderr=True)


def run_guarded(action: Callable[[], Any]) -> Any:
    """Top-level error handler for all commands."""
    try:
        return action()
    except FatalConfigurationError as e:
        err_console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(2)
    except (DashboardError, requests.RequestException) as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def print_response(response: requests.Response) -> None:
    if ResponseHandler.is_json(response) and response.content:
        console.print_json(response.text)
    elif response.text:
        console.print(response.text)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """LeanCloud dashboard API client."""
    if verbose:
        logging.basicConfig(format="%(asctime)s %(name)s %(levelname)s %(message)s")
        setup_logging(logging.DEBUG)


@app.command()
def request(
    method: str = typer.Argument(..., help="HTTP method (GET, POST, PUT, PATCH, DELETE)"),
    path: str = typer.Argument(..., help="API path, e.g. /1.1/clients/self"),
    data: Optional[str] = typer.Option(None, "--data", "-d", help="JSON request body"),
    region: str = typer.Option("cn-n1", "--region", "-r", help="Dashboard region"),
):
    """Send a request to the dashboard and print the response."""
    params = None
    if data is not None:
        try:
            params = json.loads(data)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid JSON: {e}", param_hint="--data")

    def do_request():
        client = DashboardClient.by_region(Region.parse(region))
        return client.do_request(method, path, params)

    print_response(run_guarded(do_request))


@app.command()
def whoami(
    region: str = typer.Option("cn-n1", "--region", "-r", help="Dashboard region"),
):
    """Show the logged in user."""
    info = run_guarded(lambda: DashboardClient.by_region(Region.parse(region)).get_user_info())
    console.print(f"Username: {info.get('username', '')}")
    console.print(f"Email: {info.get('email', '')}")


@app.command()
def logout():
    """Delete the saved dashboard session."""
    store = run_guarded(CookieStore)
    if not store.exists():
        console.print("[yellow]No active session[/yellow]")
        return
    run_guarded(store.delete)
    console.print("[green]Logged out successfully[/green]")


if __name__ == "__main__":
    app()
