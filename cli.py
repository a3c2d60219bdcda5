# cli.py
import argparse
import logging
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter

from sdk.productclient import ProductClient

console = Console()

SHELL_COMMANDS = ["list", "get", "create", "gql-list", "help", "quit"]


def setup_logging(level: str = "info"):
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
    )


# ---------------------------
# Display helpers
# ---------------------------
def _money(value: Optional[float]) -> str:
    return "-" if value is None else f"${value:.2f}"


def show_products(products: List[Dict[str, Any]], title: str = "📦 Products"):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(title=title, box=box.ROUNDED, header_style="bold cyan", title_style="bold magenta")
    table.add_column("ID", justify="right", style="dim", width=6)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Description", width=30)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Tax", justify="right", width=8)

    for p in products:
        table.add_row(
            str(p.get("id", "N/A")),
            p.get("name") or "N/A",
            p.get("description") or "-",
            _money(p.get("price")),
            _money(p.get("tax")),
        )
    console.print(table)


def show_product(product: Optional[Dict[str, Any]]):
    if product is None:
        console.print(Panel.fit("[red]Product not found[/red]", title="❌"))
        return
    show_products([product], title=f"Product {product.get('id')}")


def try_api(fn, *args, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner. Returns None and prints the
    error if the call fails.
    """
    try:
        with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"), transient=True) as progress:
            progress.add_task(description="Processing...", total=None)
            return fn(*args, **kwargs)
    except Exception as e:
        console.print(Panel.fit(f"[red]Error: {e}[/red]", title="Status"))
        return None


# ---------------------------
# Interactive shell
# ---------------------------
def run_shell(c: ProductClient):
    completer = WordCompleter(SHELL_COMMANDS, ignore_case=True)
    console.print(Panel("[bold blue]Product API shell[/bold blue]  (type [bold]help[/bold])", style="bold blue"))
    while True:
        try:
            line = prompt("products> ", completer=completer).strip()
        except (EOFError, KeyboardInterrupt):
            break
        if not line:
            continue
        cmd, _, rest = line.partition(" ")
        cmd = cmd.lower()

        if cmd in ("quit", "exit"):
            break
        elif cmd == "help":
            console.print("list | get <id> | create <name> <price> [description] | gql-list | quit")
        elif cmd == "list":
            show_products(try_api(c.list_products) or [])
        elif cmd == "gql-list":
            show_products(try_api(c.gql_products) or [], title="📦 Products (GraphQL)")
        elif cmd == "get":
            if not rest.strip().isdigit():
                console.print("[red]Please enter a numeric id.[/red]")
                continue
            show_product(try_api(c.get_product, int(rest)))
        elif cmd == "create":
            parts = rest.split(maxsplit=2)
            if len(parts) < 2:
                console.print("[red]Usage: create <name> <price> [description][/red]")
                continue
            try:
                price = float(parts[1])
            except ValueError:
                console.print("[red]Please enter a valid price.[/red]")
                continue
            created = try_api(c.create_product, parts[0], price, parts[2] if len(parts) > 2 else None)
            if created:
                console.print(Panel.fit(f"Created product [green]{created['id']}[/green]"))
        else:
            console.print(f"[yellow]Unknown command: {cmd}[/yellow]")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Product API")
    parser.add_argument("--base-url", default="http://127.0.0.1:3000", help="REST base URL")
    parser.add_argument("--graphql-url", default="http://127.0.0.1:4000/graphql", help="GraphQL endpoint URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    srv = subparsers.add_parser("serve", help="Run the REST and GraphQL servers")
    srv.add_argument("--host", help="Bind address")
    srv.add_argument("--rest-port", type=int, help="REST port (default 3000)")
    srv.add_argument("--graphql-port", type=int, help="GraphQL port (default 4000)")
    srv.add_argument("--log-level", help="Log level (default info)")

    subparsers.add_parser("list-products", help="List all products")
    subparsers.add_parser("gql-products", help="List all products through GraphQL")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--id", type=int, required=True, help="ID of the product")

    cp = subparsers.add_parser("create-product", help="Create a new product")
    cp.add_argument("--name", required=True, help="Product name")
    cp.add_argument("--price", type=float, required=True, help="Price")
    cp.add_argument("--description", help="Product description")
    cp.add_argument("--tax", type=float, help="Tax")

    subparsers.add_parser("shell", help="Interactive shell with autocompletion")

    args = parser.parse_args(argv)

    if args.command == "serve":
        from product_api.config import get_settings
        from product_api.main import run

        settings = get_settings()
        if args.host:
            settings.host = args.host
        if args.rest_port:
            settings.rest_port = args.rest_port
        if args.graphql_port:
            settings.graphql_port = args.graphql_port
        if args.log_level:
            settings.log_level = args.log_level.lower()
        setup_logging(settings.log_level)
        run(settings)
        return

    c = ProductClient(base_url=args.base_url, graphql_url=args.graphql_url)

    if args.command == "list-products":
        show_products(try_api(c.list_products) or [])
    elif args.command == "gql-products":
        show_products(try_api(c.gql_products) or [], title="📦 Products (GraphQL)")
    elif args.command == "get-product":
        show_product(try_api(c.get_product, args.id))
    elif args.command == "create-product":
        created = try_api(c.create_product, args.name, args.price, args.description, args.tax)
        if created:
            show_product(created)
    elif args.command == "shell":
        run_shell(c)


if __name__ == "__main__":
    main()
