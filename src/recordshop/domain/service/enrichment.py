"""Domain service: tracklist enrichment.

A record carrying an external id (a MusicBrainz release MBID) gets its
tracklist from a TracklistProvider.  The provider is an outside system,
so it is described here only as an abstract interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from recordshop.domain.model.record import Record, RecordChanges, normalize_mbid


class TracklistProvider(ABC):

    @abstractmethod
    def fetch_tracklist(self, mbid: str) -> list[str]:
        """Return the ordered track titles for ``mbid``.

        Implementations raise on any lookup failure; they never return a
        partial list.
        """


def needs_reenrichment(current: Record, changes: RecordChanges) -> bool:
    """True iff the update carries an external id different from the stored one.

    An absent or blank id in ``changes`` never triggers a lookup.
    """
    new_mbid = normalize_mbid(changes.mbid)
    return new_mbid is not None and new_mbid != current.mbid
