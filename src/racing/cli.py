#!/usr/bin/env python3
"""Racing CLI for inspecting the races store."""

import argparse

import questionary
from rich.console import Console
from rich.table import Table

from racing import db
from racing.config import config
from racing.errors import RacingError
from racing.race import ListFilter, ListOrder, OrderDirection, RacesRepository, SortField
from racing.race.seed import seed

console = Console()


def races_table(races) -> Table:
    """Render races as a rich table."""
    table = Table(title=f"{len(races)} races")
    for column in ("ID", "Meeting", "Name", "No.", "Visible", "Start (UTC)", "Status"):
        table.add_column(column)
    for race in races:
        style = "green" if race.status.value == "OPEN" else "dim"
        table.add_row(
            race.id,
            race.meeting_id,
            race.name,
            str(race.number),
            "yes" if race.visible else "no",
            race.advertised_start_time.strftime("%Y-%m-%d %H:%M"),
            f"[{style}]{race.status.value}[/]",
        )
    return table


def build_filter(args) -> ListFilter | None:
    if not args.meeting_id and args.visible is None:
        return None
    return ListFilter(meeting_ids=args.meeting_id or [], visible=args.visible)


def build_order(args) -> ListOrder | None:
    if not args.order_by:
        return None
    return ListOrder(order_by=args.order_by, direction=args.direction)


def seed_races(args) -> None:
    """Create the races table and insert dummy races."""
    with db.get_connection() as conn:
        count = seed(conn, args.count, args.meetings)
    console.print(f"[green]Seeded {count} races across {args.meetings} meetings.[/]")


def list_races(args) -> None:
    """List races with optional filters and ordering."""
    with db.get_connection() as conn:
        races = RacesRepository(conn).list(build_filter(args), build_order(args))
    if not races:
        console.print("[red]No races found.[/]")
        return
    console.print(races_table(races))


def get_race(args) -> None:
    """Show a single race."""
    with db.get_connection() as conn:
        race = RacesRepository(conn).get(args.race_id)
    console.print(races_table([race]))


def browse_races(args) -> None:
    """Pick a race from the list and show its details."""
    with db.get_connection() as conn:
        races = RacesRepository(conn).list(build_filter(args), build_order(args))
    if not races:
        console.print("[red]No races found.[/]")
        return

    selected = questionary.select(
        "Select a race:",
        choices=[
            questionary.Choice(
                title=f"{r.name} (meeting {r.meeting_id}, {r.status.value})",
                value=r,
            )
            for r in races
        ],
    ).ask()

    # User pressed Ctrl+C or Escape
    if selected is None:
        console.print("[dim]Cancelled.[/]")
        return

    for key, value in selected.to_dict().items():
        console.print(f"[bold]{key}:[/] {value}")


def count_arg(minimum: int):
    """argparse type for integers no smaller than minimum."""

    def parse(value: str) -> int:
        number = int(value)
        if number < minimum:
            raise argparse.ArgumentTypeError(f"must be at least {minimum}, got {number}")
        return number

    return parse


def add_list_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--meeting-id", action="append", help="Filter by meeting id (repeatable)")
    visibility = parser.add_mutually_exclusive_group()
    visibility.add_argument("--visible", dest="visible", action="store_true", default=None)
    visibility.add_argument("--hidden", dest="visible", action="store_false")
    parser.set_defaults(visible=None)
    parser.add_argument("--order-by", choices=[f.value for f in SortField])
    parser.add_argument("--direction", choices=[d.name for d in OrderDirection])


def main(argv=None):
    parser = argparse.ArgumentParser(description="Racing CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    seed_parser = subparsers.add_parser("seed", help="Seed the races table with dummy data")
    seed_parser.add_argument("--count", type=count_arg(0), default=config.seed_race_count)
    seed_parser.add_argument("--meetings", type=count_arg(1), default=config.seed_meeting_count)

    add_list_arguments(subparsers.add_parser("list", help="List races"))
    add_list_arguments(subparsers.add_parser("browse", help="Browse races interactively"))

    get_parser = subparsers.add_parser("get", help="Show a race by id")
    get_parser.add_argument("race_id")

    args = parser.parse_args(argv)

    commands = {
        "seed": seed_races,
        "list": list_races,
        "get": get_race,
        "browse": browse_races,
    }
    try:
        commands[args.command](args)
    except RacingError as e:
        console.print(f"[red]{e}[/]")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
