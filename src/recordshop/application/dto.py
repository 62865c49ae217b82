"""Data Transfer Objects — plain containers that cross layer boundaries.

Inputs (``RecordSpec``, ``ListQuery``) normalise raw caller values;
outputs (``ApiResponse``, ``RecordPage``) form the success envelope
returned by the services.
"""

from __future__ import annotations

import hashlib
import json
import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from recordshop.domain.exceptions import ValidationError
from recordshop.domain.model.record import Record, RecordCategory, RecordFormat
from recordshop.domain.model.record_filter import RecordFilter

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
CACHE_KEY_PREFIX = "records:"


@dataclass(frozen=True)
class RecordSpec:
    """Input: the fields of a record to be created."""

    artist: str
    album: str
    price: str | int | Decimal
    quantity: int
    format: RecordFormat | str
    category: RecordCategory | str
    mbid: str | None = None


@dataclass(frozen=True)
class ListQuery:
    """Input: filters and pagination for the record listing.

    Blank text filters count as absent.  A format or category that is not
    a recognised member is dropped, so the listing behaves as if that
    filter had not been given.
    """

    term: str | None = None
    artist: str | None = None
    album: str | None = None
    format: RecordFormat | str | None = None
    category: RecordCategory | str | None = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        for name in ("term", "artist", "album"):
            object.__setattr__(self, name, _blank_to_none(getattr(self, name)))
        object.__setattr__(self, "format", _known_or_none(RecordFormat, self.format))
        object.__setattr__(
            self, "category", _known_or_none(RecordCategory, self.category)
        )
        _require_positive(self.page, "Page")
        _require_positive(self.limit, "Limit")

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def cache_key(self) -> str:
        """Deterministic key over every field, defaults included."""
        fields = [
            self.term,
            self.artist,
            self.album,
            self.format.value if self.format else None,
            self.category.value if self.category else None,
            self.page,
            self.limit,
        ]
        encoded = json.dumps(fields, separators=(",", ":"), ensure_ascii=False)
        return CACHE_KEY_PREFIX + hashlib.sha256(encoded.encode("utf-8")).hexdigest()

    def to_filter(self) -> RecordFilter:
        return RecordFilter(
            term=self.term,
            artist=self.artist,
            album=self.album,
            format=self.format,  # type: ignore[arg-type]
            category=self.category,  # type: ignore[arg-type]
        )


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int
    total_pages: int
    total_records: int

    @staticmethod
    def of(page: int, limit: int, total_records: int) -> Pagination:
        return Pagination(
            page=page,
            limit=limit,
            total_pages=math.ceil(total_records / limit),
            total_records=total_records,
        )


@dataclass(frozen=True)
class RecordPage:
    """Output: one page of the listing."""

    records: list[Record]
    pagination: Pagination
    from_cache: bool = False


@dataclass(frozen=True)
class ApiResponse:
    """Output: the success envelope of every service operation."""

    status: bool
    message: str
    data: Any = None

    @staticmethod
    def ok(message: str, data: Any = None) -> ApiResponse:
        return ApiResponse(status=True, message=message, data=data)


# --- Internal helpers ---------------------------------------------------------


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _known_or_none(enum_cls, raw):
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    member = enum_cls.parse(raw)
    if member is None:
        logger.debug("Ignoring unrecognised %s filter %r", enum_cls.__name__, raw)
    return member


def _require_positive(value: int, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be an integer, got {type(value).__name__}")
    if value < 1:
        raise ValidationError(f"{label} must be at least 1, got {value}")
