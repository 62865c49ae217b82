"""CLI commands for the Record aggregate."""

from __future__ import annotations

import click

from recordshop.application.dto import ListQuery, RecordSpec
from recordshop.domain.exceptions import DomainException, ValidationError
from recordshop.domain.model.record import (
    Record,
    RecordCategory,
    RecordChanges,
    RecordFormat,
)
from recordshop.domain.model.value_objects import Money
from recordshop.infrastructure.bootstrap import Services

_FORMATS = [f.value for f in RecordFormat]
_CATEGORIES = [c.value for c in RecordCategory]


def _display_record(record: Record) -> None:
    """Shared formatting for displaying a single record."""
    click.echo(f"Record {record.id}")
    click.echo(f"  {record.artist} - {record.album}")
    click.echo(f"  {record.format.value} / {record.category.value}")
    click.echo(f"  Price: {record.price}   In stock: {record.quantity}")
    if record.mbid:
        click.echo(f"  MBID:  {record.mbid}")
    for number, title in enumerate(record.tracklist, start=1):
        click.echo(f"  {number:>3}. {title}")


@click.command("add")
@click.option("--artist", required=True, help="Artist name.")
@click.option("--album", required=True, help="Album title.")
@click.option("--price", required=True, help="Price (e.g. 24.99).")
@click.option("--quantity", required=True, type=int, help="Copies in stock.")
@click.option("--format", "fmt", required=True, help=f"One of {', '.join(_FORMATS)}.")
@click.option("--category", required=True, help=f"One of {', '.join(_CATEGORIES)}.")
@click.option("--mbid", default=None, help="MusicBrainz release ID for the tracklist.")
@click.pass_obj
def record_add(
    services: Services,
    artist: str,
    album: str,
    price: str,
    quantity: int,
    fmt: str,
    category: str,
    mbid: str | None,
) -> None:
    """Add a new record to the catalog."""
    spec = RecordSpec(
        artist=artist,
        album=album,
        price=price,
        quantity=quantity,
        format=fmt,
        category=category,
        mbid=mbid,
    )

    try:
        response = services.catalog.create_record(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(response.message)
    _display_record(response.data)


@click.command("update")
@click.option("--id", "record_id", required=True, help="Record ID.")
@click.option("--artist", default=None, help="New artist name.")
@click.option("--album", default=None, help="New album title.")
@click.option("--price", default=None, help="New price.")
@click.option("--quantity", default=None, type=int, help="New stock level.")
@click.option("--format", "fmt", default=None, help=f"One of {', '.join(_FORMATS)}.")
@click.option("--category", default=None, help=f"One of {', '.join(_CATEGORIES)}.")
@click.option("--mbid", default=None, help="New MusicBrainz release ID.")
@click.pass_obj
def record_update(
    services: Services,
    record_id: str,
    artist: str | None,
    album: str | None,
    price: str | None,
    quantity: int | None,
    fmt: str | None,
    category: str | None,
    mbid: str | None,
) -> None:
    """Update some fields of a record; the rest are left alone."""
    try:
        changes = RecordChanges(
            artist=artist,
            album=album,
            price=Money.of(price) if price is not None else None,
            quantity=quantity,
            format=_parse_or_fail(RecordFormat, fmt, "format"),
            category=_parse_or_fail(RecordCategory, category, "category"),
            mbid=mbid,
        )
        response = services.catalog.update_record(record_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(response.message)
    _display_record(response.data)


@click.command("list")
@click.option("--q", "term", default=None, help="Search artist, album and category.")
@click.option("--artist", default=None, help="Filter by artist.")
@click.option("--album", default=None, help="Filter by album.")
@click.option("--format", "fmt", default=None, help="Filter by format.")
@click.option("--category", default=None, help="Filter by category.")
@click.option("--page", default=1, type=int, show_default=True)
@click.option("--limit", default=20, type=int, show_default=True)
@click.pass_obj
def record_list(
    services: Services,
    term: str | None,
    artist: str | None,
    album: str | None,
    fmt: str | None,
    category: str | None,
    page: int,
    limit: int,
) -> None:
    """List records matching the filters, one page at a time."""
    try:
        query = ListQuery(
            term=term,
            artist=artist,
            album=album,
            format=fmt,
            category=category,
            page=page,
            limit=limit,
        )
        response = services.catalog.list_records(query)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    result = response.data
    if not result.records:
        click.echo("No records found.")
        return

    click.echo(f"{'ID':<34} {'Artist':<20} {'Album':<24} {'Format':<9} {'Price':>9} {'Qty':>5}")
    click.echo("-" * 106)
    for r in result.records:
        click.echo(
            f"{r.id:<34} {r.artist[:20]:<20} {r.album[:24]:<24} "
            f"{r.format.value:<9} {str(r.price):>9} {r.quantity:>5}"
        )
    p = result.pagination
    click.echo(
        f"Page {p.page}/{p.total_pages}  ({p.total_records} records, {p.limit} per page)"
    )


@click.command("show")
@click.option("--id", "record_id", required=True, help="Record ID to display.")
@click.pass_obj
def record_show(services: Services, record_id: str) -> None:
    """Show details of a record."""
    try:
        response = services.catalog.get_record(record_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_record(response.data)


@click.command("stock")
@click.option("--id", "record_id", required=True, help="Record ID.")
@click.option(
    "--delta",
    required=True,
    type=int,
    help="Copies to add (positive) or remove (negative).",
)
@click.pass_obj
def record_stock(services: Services, record_id: str, delta: int) -> None:
    """Restock or sell copies of a record."""
    try:
        response = services.catalog.adjust_stock(record_id, delta)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for {record_id} is now {response.data.quantity}")


def _parse_or_fail(enum_cls, raw: str | None, label: str):
    if raw is None:
        return None
    member = enum_cls.parse(raw)
    if member is None:
        raise ValidationError(f"Unknown record {label}: {raw!r}")
    return member
