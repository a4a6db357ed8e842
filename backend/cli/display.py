"""Rich terminal rendering for session, pagination and filter state."""

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from modules.catalog import PageWindow, SaleType, ViewMode, sale_type_options
from modules.session import SessionState

console = Console()


def format_window(window: PageWindow, current_page: Optional[int] = None) -> Text:
    """Format a page window as a single line.

    The current page is highlighted and ellipses are dimmed.
    Example: [1, ..., 9, 10, 11, ..., 20] -> "1 … 9 [10] 11 … 20"
    """
    text = Text()
    for i, marker in enumerate(window):
        if i:
            text.append(" ")
        if marker is ...:
            text.append("…", style="dim")
        elif marker == current_page:
            text.append(f"[{marker}]", style="bold")
        else:
            text.append(str(marker))
    return text


def render_session(state: SessionState) -> None:
    """Print the session state."""
    if not state.is_signed_in:
        console.print("[dim]Signed out[/dim]")
        return

    if state.user is None:
        console.print("[yellow]Signed in[/yellow] [dim](no user record)[/dim]")
        return

    console.print(f"[green]Signed in[/green] as [bold]{state.user.email_id}[/bold]")
    if state.user.blockchain_id:
        console.print(f"[dim]Wallet: {state.user.blockchain_id}[/dim]")


def render_filters(
    active_sale_type: SaleType = SaleType.ALL,
    view_mode: ViewMode = ViewMode.GRID,
) -> None:
    """Print the sale-type options and view modes, marking the active ones."""
    table = Table(title="Catalog filters")
    table.add_column("Filter")
    table.add_column("Value")
    table.add_column("Label")

    for sale_type, label in sale_type_options():
        marker = " *" if sale_type == active_sale_type else ""
        table.add_row("sale type", sale_type.value + marker, label)
    for mode in ViewMode:
        marker = " *" if mode == view_mode else ""
        table.add_row("view", mode.value + marker, mode.value.title())

    console.print(table)
