"""CLI entrypoint for foodcourt tools."""

import json
import time
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from foodcourt.config import load_firebase_config
from foodcourt.logs import setup_logging

app = typer.Typer(
    name="foodcourt",
    help="Inspect and seed the food ordering Realtime Database",
    no_args_is_help=True,
)
console = Console()

# Default config path (src/foodcourt/cli.py -> repository root)
PACKAGE_ROOT = Path(__file__).parent.parent.parent
DEFAULT_FIREBASE_CONFIG = PACKAGE_ROOT / "configs" / "firebase.yaml"


class Environment(str, Enum):
    dev = "dev"
    prod = "prod"


EnvOption = Annotated[Environment, typer.Option(help="Environment: prod or dev")]
ConfigOption = Annotated[Path, typer.Option("--config", "-c", help="Firebase config path")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")]


def _load(env: Environment, config: Path, verbose: bool):
    setup_logging(verbose, console)
    return load_firebase_config(config, env.value)


def _dump(rows: list, output: Path | None):
    if output:
        with open(output, "w", encoding="utf-8") as f:
            json.dump([row.model_dump() for row in rows], f, indent=2, ensure_ascii=False)
        console.print(f"\n[green]Saved {len(rows)} records to {output}[/green]")


@app.command()
def dishes(
    pincode: Annotated[str | None, typer.Option(help="Only dishes served in this pincode")] = None,
    env: EnvOption = Environment.dev,
    config: ConfigOption = DEFAULT_FIREBASE_CONFIG,
    output: Annotated[Path | None, typer.Option(help="Output JSON file")] = None,
    verbose: VerboseOption = False,
):
    """List dishes with their customer prices."""
    from foodcourt.firebase.catalog import fetch_dishes

    firebase_config = _load(env, config, verbose)
    rows = fetch_dishes(firebase_config, pincode)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Key")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Pincode")
    table.add_column("Price", justify="right")
    table.add_column("Discount", justify="right")
    table.add_column("Customer", justify="right")
    table.add_column("Stock")

    for dish in rows:
        table.add_row(
            dish.key,
            dish.name[:40],
            dish.categoryId,
            dish.pincode,
            f"{dish.price.final:.2f}",
            f"{dish.discount:g}%",
            f"{dish.customerPrice:.2f}",
            "yes" if dish.isInStock else "[red]no[/red]",
        )

    console.print(table)
    _dump(rows, output)


@app.command()
def categories(
    env: EnvOption = Environment.dev,
    config: ConfigOption = DEFAULT_FIREBASE_CONFIG,
    verbose: VerboseOption = False,
):
    """List categories."""
    from foodcourt.firebase.catalog import fetch_categories

    firebase_config = _load(env, config, verbose)
    for category in fetch_categories(firebase_config):
        console.print(f"  {category.id}: {category.name}")


@app.command()
def banners(
    env: EnvOption = Environment.dev,
    config: ConfigOption = DEFAULT_FIREBASE_CONFIG,
    verbose: VerboseOption = False,
):
    """List slider banners."""
    from foodcourt.firebase.catalog import fetch_banners

    firebase_config = _load(env, config, verbose)
    for banner in fetch_banners(firebase_config):
        console.print(f"  {banner.title or '[dim]untitled[/dim]'}: {banner.downloadURL}")


@app.command()
def settings(
    env: EnvOption = Environment.dev,
    config: ConfigOption = DEFAULT_FIREBASE_CONFIG,
    verbose: VerboseOption = False,
):
    """Show theme and delivery settings."""
    from foodcourt.firebase.settings import fetch_app_settings

    firebase_config = _load(env, config, verbose)
    console.print_json(fetch_app_settings(firebase_config).model_dump_json())


def _print_orders(orders: list):
    table = Table(show_header=True, header_style="bold")
    table.add_column("Order")
    table.add_column("Placed", justify="right")
    table.add_column("Status")
    table.add_column("Customer status")
    table.add_column("Driver")

    for order in orders:
        driver = order.driverDetails
        table.add_row(
            order.k,
            time.strftime("%Y-%m-%d %H:%M", time.localtime(order.timestamp / 1000)),
            order.status,
            order.customerStatus,
            f"{driver.name} ({driver.mobile})" if driver else "",
        )

    console.print(table)


@app.command()
def orders(
    uid: Annotated[str, typer.Argument(help="Customer uid")],
    env: EnvOption = Environment.dev,
    config: ConfigOption = DEFAULT_FIREBASE_CONFIG,
    verbose: VerboseOption = False,
):
    """Show a customer's orders, newest first."""
    from foodcourt.firebase.orders import fetch_user_orders

    firebase_config = _load(env, config, verbose)
    _print_orders(fetch_user_orders(firebase_config, uid))


@app.command("watch-orders")
def watch_orders(
    uid: Annotated[str, typer.Argument(help="Customer uid")],
    env: EnvOption = Environment.dev,
    config: ConfigOption = DEFAULT_FIREBASE_CONFIG,
    verbose: VerboseOption = False,
):
    """Follow a customer's orders live until Ctrl+C."""
    from foodcourt.firebase.orders import listen_for_user_orders

    firebase_config = _load(env, config, verbose)
    unsubscribe = listen_for_user_orders(firebase_config, uid, _print_orders)
    console.print("[dim]Listening for order changes, press Ctrl+C to stop[/dim]")

    try:
        while True:
            time.sleep(60)
    except KeyboardInterrupt:
        console.print("\nStopping listener...")
    finally:
        unsubscribe()


@app.command()
def seed(
    env: EnvOption = Environment.dev,
    config: ConfigOption = DEFAULT_FIREBASE_CONFIG,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show what would be written")] = False,
    verbose: VerboseOption = False,
):
    """Write the placeholder catalog (categories, dishes, banners) to the database."""
    from foodcourt.firebase.seed import seed_catalog

    firebase_config = _load(env, config, verbose)
    console.print(f"[bold]Seeding catalog ({env.value})...[/bold]")
    written = seed_catalog(firebase_config, dry_run=dry_run)

    if dry_run:
        console.print("[yellow]DRY RUN - no changes were made[/yellow]")
    for path, count in written.items():
        console.print(f"  {path}: {count}")


@app.command()
def version():
    """Show version information."""
    from foodcourt import __version__

    console.print(f"foodcourt version {__version__}")


if __name__ == "__main__":
    app()
