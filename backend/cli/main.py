"""
Toto storefront command line.

Inspect and change the persisted client session, and preview catalog
pagination and filters from the terminal.

Usage:
    toto session status
    toto session sign-in alice@example.com --token abc123
    toto session sign-out
    toto pages 10 20
    toto filters
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from shared.config import get_settings
from shared.exceptions import StorefrontError
from shared.storage import JsonFileStorage, get_storage
from shared.wallet_config import get_wallet_config

from modules.catalog import Paginator, SaleType, ViewMode
from modules.session import SessionScope, User

from .display import console, format_window, render_filters, render_session


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toto",
        description="Toto storefront client session and catalog tools",
    )
    parser.add_argument(
        "--storage",
        type=Path,
        help="Path to the client storage file (default: TOTO_STORAGE_PATH or ~/.toto/storage.json)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    session = subparsers.add_parser("session", help="Manage the client session")
    session_commands = session.add_subparsers(dest="session_command", required=True)

    session_commands.add_parser("status", help="Show the restored session")

    sign_in = session_commands.add_parser("sign-in", help="Sign in and persist the user")
    sign_in.add_argument("email", help="User email address")
    sign_in.add_argument("--blockchain-id", help="Linked wallet address")
    sign_in.add_argument(
        "--token",
        help="Auth token to store alongside the user (normally issued by the login flow)",
    )

    session_commands.add_parser("sign-out", help="Sign out and clear stored credentials")

    pages = subparsers.add_parser("pages", help="Show the page window for a position")
    pages.add_argument("current", type=int, help="Current page (1-indexed)")
    pages.add_argument("total", type=int, help="Total number of pages")

    filters = subparsers.add_parser("filters", help="List catalog filter options")
    filters.add_argument(
        "--sale-type",
        type=SaleType,
        choices=list(SaleType),
        default=SaleType.ALL,
        help="Sale type to mark as active",
    )
    filters.add_argument(
        "--view",
        type=ViewMode,
        choices=list(ViewMode),
        default=ViewMode.GRID,
        help="View mode to mark as active",
    )

    subparsers.add_parser("wallet", help="Show the wallet connectivity configuration")

    return parser


def run_session_command(args: argparse.Namespace) -> None:
    settings = get_settings()
    storage = JsonFileStorage(args.storage) if args.storage else get_storage()

    with SessionScope(storage, settings) as store:
        if args.session_command == "sign-in":
            if args.token:
                storage.set_item(settings.auth_token_key, args.token)
            store.sign_in(User(email_id=args.email, blockchain_id=args.blockchain_id))
            if not args.token and storage.get_item(settings.auth_token_key) is None:
                console.print(
                    "[yellow]Warning:[/yellow] no auth token stored; "
                    "the session will not be restored on the next run"
                )
        elif args.session_command == "sign-out":
            store.sign_out()

        render_session(store.state)


def run_pages_command(args: argparse.Namespace) -> None:
    paginator = Paginator(args.current, args.total)
    if not paginator.visible:
        console.print("[dim]Single page, paginator hidden[/dim]")
        return

    line = format_window(paginator.window, paginator.current_page)
    prev_marker = "‹" if paginator.can_go_previous else "[dim]‹[/dim]"
    next_marker = "›" if paginator.can_go_next else "[dim]›[/dim]"
    console.print(prev_marker, line, next_marker)


def run_wallet_command() -> None:
    wallet = get_wallet_config()
    console.print(f"[bold]App:[/bold] {wallet.app_name}")
    console.print(f"[bold]Environment:[/bold] {wallet.app_env}")
    console.print(f"[bold]Chain:[/bold] {wallet.chain_name} ({wallet.chain_id})")
    console.print(f"[bold]Project ID:[/bold] {wallet.project_id}")


def main(argv: Optional[list[str]] = None) -> int:
    """Parse arguments and run a command. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "session":
            run_session_command(args)
        elif args.command == "pages":
            run_pages_command(args)
        elif args.command == "filters":
            render_filters(args.sale_type, args.view)
        elif args.command == "wallet":
            run_wallet_command()
    except StorefrontError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        return 1

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
