"""Filter expression evaluated by record repositories.

The expression is a plain value: repositories may translate it into their
own query language or evaluate it record by record with ``matches()``.
"""

from __future__ import annotations

from dataclasses import dataclass

from recordshop.domain.model.record import Record, RecordCategory, RecordFormat


@dataclass(frozen=True)
class RecordFilter:
    """Conjunction of optional conditions.

    - ``term`` matches when it is a case-insensitive substring of the
      artist OR the album OR the category value.
    - ``artist`` and ``album`` are case-insensitive substring matches.
    - ``format`` and ``category`` are equality matches.
    """

    term: str | None = None
    artist: str | None = None
    album: str | None = None
    format: RecordFormat | None = None
    category: RecordCategory | None = None

    def matches(self, record: Record) -> bool:
        if self.term is not None and not any(
            _contains(value, self.term)
            for value in (record.artist, record.album, record.category.value)
        ):
            return False
        if self.artist is not None and not _contains(record.artist, self.artist):
            return False
        if self.album is not None and not _contains(record.album, self.album):
            return False
        if self.format is not None and record.format != self.format:
            return False
        if self.category is not None and record.category != self.category:
            return False
        return True


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()
