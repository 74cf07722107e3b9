"""Portfolio CLI commands."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from cryptomania.core.portfolio.importers import export_entries_csv, load_store
from cryptomania.core.portfolio.store import SORT_KEYS, PortfolioStore

console = Console()
app = typer.Typer()


def _load(file_path: Path) -> PortfolioStore:
    """Load a CSV into a store, printing any skipped rows."""
    if not file_path.exists():
        console.print(f"[red]Error:[/red] File not found: {file_path}")
        raise typer.Exit(1)

    store, errors = load_store(file_path)
    for err in errors:
        console.print(f"[yellow]Skipped:[/yellow] {err}")
    return store


@app.command("show")
def show_portfolio(
    file_path: Path = typer.Argument(..., help="Portfolio CSV (id,name,symbol,price,quantity)"),
    sort: Optional[str] = typer.Option(
        None, "--sort", "-s", help=f"Sort by: {', '.join(SORT_KEYS)}"
    ),
):
    """List entries in a portfolio file."""
    store = _load(file_path)
    entries = store.list_sorted(sort)

    if not entries:
        console.print("[yellow]No entries found.[/yellow]")
        return

    table = Table(title="Portfolio")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Symbol", style="cyan")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Quantity", justify="right")
    table.add_column("Value", justify="right")

    for e in entries:
        table.add_row(
            str(e.id),
            e.name,
            e.symbol,
            f"${e.price:,}",
            f"{e.quantity:,}",
            f"${e.value:,.2f}",
        )

    console.print(table)
    console.print(f"\n[dim]Total entries: {len(entries)}[/dim]")
    console.print(f"[bold]Total Value:[/bold] ${store.portfolio_value():,.2f}")


@app.command("value")
def portfolio_value(
    file_path: Path = typer.Argument(..., help="Portfolio CSV"),
):
    """Print the total value of a portfolio file."""
    store = _load(file_path)
    typer.echo(str(store.portfolio_value()))


@app.command("validate")
def validate_portfolio(
    file_path: Path = typer.Argument(..., help="Portfolio CSV"),
):
    """Check every row of a portfolio file."""
    if not file_path.exists():
        console.print(f"[red]Error:[/red] File not found: {file_path}")
        raise typer.Exit(1)

    store, errors = load_store(file_path)
    for err in errors:
        console.print(f"[red]Invalid:[/red] {err}")

    console.print(f"[green]{len(store)} valid entries[/green]")
    if errors:
        console.print(f"[red]{len(errors)} invalid rows[/red]")
        raise typer.Exit(1)


@app.command("export")
def export_portfolio(
    file_path: Path = typer.Argument(..., help="Portfolio CSV"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output file path (default: stdout)"
    ),
    sort: Optional[str] = typer.Option(
        None, "--sort", "-s", help=f"Sort by: {', '.join(SORT_KEYS)}"
    ),
):
    """Write the valid entries of a portfolio file back out as CSV."""
    store = _load(file_path)
    csv_content = export_entries_csv(store.list_sorted(sort))

    if output:
        output.write_text(csv_content)
        console.print(f"[green]Exported {len(store)} entries to {output}[/green]")
    else:
        typer.echo(csv_content, nl=False)
