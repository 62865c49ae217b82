"""Record aggregate — a catalog entry and its stock level.

A Record is created once (the store assigns its identifier), then mutated
through partial updates or stock adjustments.  It is never hard-deleted
by the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from recordshop.domain.exceptions import ValidationError
from recordshop.domain.model.value_objects import Money


class RecordFormat(Enum):
    VINYL = "Vinyl"
    CD = "CD"
    CASSETTE = "Cassette"
    DIGITAL = "Digital"

    @classmethod
    def parse(cls, raw: str | None) -> RecordFormat | None:
        """Resolve a member by name or value, or None if unrecognised."""
        return _parse_member(cls, raw)


class RecordCategory(Enum):
    ROCK = "Rock"
    JAZZ = "Jazz"
    HIPHOP = "Hip-Hop"
    CLASSICAL = "Classical"
    POP = "Pop"
    ALTERNATIVE = "Alternative"
    INDIE = "Indie"

    @classmethod
    def parse(cls, raw: str | None) -> RecordCategory | None:
        """Resolve a member by name or value, or None if unrecognised."""
        return _parse_member(cls, raw)


def _parse_member(enum_cls, raw):
    if raw is None:
        return None
    if isinstance(raw, enum_cls):
        return raw
    needle = str(raw).strip().lower()
    for member in enum_cls:
        if needle in (member.name.lower(), member.value.lower()):
            return member
    return None


@dataclass(frozen=True)
class RecordChanges:
    """A partial update: ``None`` means "leave this field alone"."""

    artist: str | None = None
    album: str | None = None
    price: Money | None = None
    quantity: int | None = None
    format: RecordFormat | None = None
    category: RecordCategory | None = None
    mbid: str | None = None


@dataclass
class Record:
    """Aggregate root for a catalog entry.

    Invariants:
    - ``quantity`` is never negative
    - ``artist`` and ``album`` are never blank

    Use ``Record.create()`` for new records.  The ``__init__`` stays simple
    so repositories can reconstitute persisted records without
    re-validating them.
    """

    id: str | None
    artist: str
    album: str
    price: Money
    quantity: int
    format: RecordFormat
    category: RecordCategory
    mbid: str | None = None
    tracklist: list[str] = field(default_factory=list)

    # --- Factory (used for NEW records only) ----------------------------------

    @staticmethod
    def create(
        artist: str,
        album: str,
        price: Money,
        quantity: int,
        format: RecordFormat,
        category: RecordCategory,
        mbid: str | None = None,
        tracklist: list[str] | None = None,
    ) -> Record:
        """Build a new, not yet persisted record, enforcing all invariants."""
        return Record(
            id=None,
            artist=_required_text(artist, "Artist"),
            album=_required_text(album, "Album"),
            price=price,
            quantity=_stock_level(quantity),
            format=_required_member(format, RecordFormat, "format"),
            category=_required_member(category, RecordCategory, "category"),
            mbid=normalize_mbid(mbid),
            tracklist=list(tracklist or []),
        )

    # --- State transitions ----------------------------------------------------

    def apply_changes(self, changes: RecordChanges) -> None:
        """Overlay every supplied field; fields left as ``None`` are untouched."""
        if changes.artist is not None:
            self.artist = _required_text(changes.artist, "Artist")
        if changes.album is not None:
            self.album = _required_text(changes.album, "Album")
        if changes.price is not None:
            self.price = changes.price
        if changes.quantity is not None:
            self.quantity = _stock_level(changes.quantity)
        if changes.format is not None:
            self.format = _required_member(changes.format, RecordFormat, "format")
        if changes.category is not None:
            self.category = _required_member(changes.category, RecordCategory, "category")
        mbid = normalize_mbid(changes.mbid)
        if mbid is not None:
            self.mbid = mbid

    def replace_tracklist(self, tracks: list[str]) -> None:
        self.tracklist = list(tracks)

    def adjust_stock(self, delta: int) -> None:
        """Restock (positive delta) or sell (negative delta).

        Raises ValidationError, leaving the quantity untouched, if the
        result would be negative.
        """
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise ValidationError(
                f"Stock delta must be an integer, got {type(delta).__name__}"
            )
        new_quantity = self.quantity + delta
        if new_quantity < 0:
            raise ValidationError(
                f"Insufficient stock for {self.artist} - {self.album} "
                f"(have {self.quantity}, change {delta})"
            )
        self.quantity = new_quantity


def normalize_mbid(mbid: str | None) -> str | None:
    """Blank external ids count as absent."""
    if mbid is None:
        return None
    mbid = mbid.strip()
    return mbid or None


# --- Internal helpers ---------------------------------------------------------


def _required_text(value: str, label: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()


def _stock_level(quantity: int) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError(
            f"Quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 0:
        raise ValidationError("Quantity cannot be negative")
    return quantity


def _required_member(value, enum_cls, label: str):
    if not isinstance(value, enum_cls):
        raise ValidationError(f"Unknown record {label}: {value!r}")
    return value
