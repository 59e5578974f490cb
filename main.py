"""
main.py
-------
Command-line entry point for chefbook.

Responsibilities:
    - Initialize the database connection pool (and schema on request).
    - Dispatch a sub-command to the chef service.
    - Close the pool on exit.
"""

import argparse
import sys
from typing import Optional

from config import DEFAULT_PAGE_SIZE
from db.connection import close_pool, default_provider, init_pool
from db.init_db import create_tables
from errors import ChefBookError
from repositories.chef_repo import SORTABLE_COLUMNS, ChefRepository
from services.chef_service import ChefService
from utils.logger import get_logger, set_level
from utils.pagination import PageOptions

logger = get_logger(__name__)


def _add_page_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--page", type=int, default=1, help="1-based page number")
    parser.add_argument("--size", type=int, default=DEFAULT_PAGE_SIZE, help="Chefs per page")
    parser.add_argument("--sort", choices=sorted(SORTABLE_COLUMNS), default="id")
    parser.add_argument("--desc", action="store_true", help="Sort descending")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chefbook", description="Manage chef accounts")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log SQL at DEBUG level")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create the database schema")

    add = sub.add_parser("add", help="Register a new chef")
    add.add_argument("username")
    add.add_argument("email")
    add.add_argument("password")
    add.add_argument("--admin", action="store_true")

    show = sub.add_parser("show", help="Show one chef")
    show.add_argument("id", type=int)

    _add_page_arguments(sub.add_parser("list", help="List chefs page by page"))

    search = sub.add_parser("search", help="Search chefs by username")
    search.add_argument("term")
    _add_page_arguments(search)

    rename = sub.add_parser("rename", help="Change a chef's username")
    rename.add_argument("id", type=int)
    rename.add_argument("username")

    for name, help_text in (("promote", "Grant admin rights"), ("demote", "Revoke admin rights")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("id", type=int)

    delete = sub.add_parser("delete", help="Delete a chef")
    delete.add_argument("id", type=int)

    return parser


def run(args: argparse.Namespace, service: ChefService) -> str:
    """Execute one parsed command and return the text to print."""
    if args.command == "add":
        chef = service.register(args.username, args.email, args.password, is_admin=args.admin)
        return f"Created {chef}"
    if args.command == "show":
        return str(service.find(args.id))
    if args.command in ("list", "search"):
        options = PageOptions(
            page_number=args.page,
            page_size=args.size,
            sort_by=args.sort,
            sort_direction="DESC" if args.desc else "ASC",
        )
        term = args.term if args.command == "search" else None
        return service.format_page(service.list_page(options, term))
    if args.command == "rename":
        return f"Renamed {service.rename(args.id, args.username)}"
    if args.command == "promote":
        return f"Promoted {service.set_admin(args.id, True)}"
    if args.command == "demote":
        return f"Demoted {service.set_admin(args.id, False)}"
    if args.command == "delete":
        return f"Deleted {service.remove(args.id)}"
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[list[str]] = None) -> int:
    """Parse arguments, run the command, and return the exit status."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_level("DEBUG")

    init_pool()
    try:
        if args.command == "init-db":
            create_tables()
            print("Database schema created.")
            return 0
        service = ChefService(ChefRepository(default_provider()))
        print(run(args, service))
        return 0
    except (ValueError, ChefBookError) as e:
        logger.warning(f"Command {args.command!r} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        close_pool()


if __name__ == "__main__":
    sys.exit(main())
