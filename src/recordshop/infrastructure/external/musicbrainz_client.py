"""MusicBrainz implementation of TracklistProvider.

Looks up a release by MBID and flattens its media into one ordered list
of track titles.
"""

from __future__ import annotations

import logging

import requests

from recordshop.domain.service.enrichment import TracklistProvider

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://musicbrainz.org/ws/2"
DEFAULT_USER_AGENT = "recordshop/0.1 ( https://github.com/recordshop )"


class TracklistLookupError(Exception):
    """The tracklist for an MBID could not be retrieved."""


class MusicBrainzClient(TracklistProvider):

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout!r}")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {"User-Agent": user_agent, "Accept": "application/json"}
        )

    def fetch_tracklist(self, mbid: str) -> list[str]:
        # GET /release/<mbid>?inc=recordings&fmt=json
        url = f"{self.base_url}/release/{mbid}"
        params = {"inc": "recordings", "fmt": "json"}
        logger.debug("Fetching tracklist for release %s", mbid)

        try:
            r = self.session.get(url, params=params, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as exc:
            raise TracklistLookupError(
                f"MusicBrainz lookup for release {mbid} failed: {exc}"
            ) from exc

        try:
            payload = r.json()
        except requests.JSONDecodeError as exc:
            raise TracklistLookupError(
                f"MusicBrainz returned invalid JSON for release {mbid}"
            ) from exc

        return self._parse_tracklist(mbid, payload)

    @staticmethod
    def _parse_tracklist(mbid: str, payload: dict) -> list[str]:
        try:
            media = sorted(payload.get("media") or [], key=lambda m: m.get("position", 0))
            titles: list[str] = []
            for medium in media:
                tracks = sorted(medium.get("tracks") or [], key=lambda t: t.get("position", 0))
                titles.extend(track["title"] for track in tracks)
        except (AttributeError, KeyError, TypeError) as exc:
            raise TracklistLookupError(
                f"Unexpected MusicBrainz payload for release {mbid}"
            ) from exc
        return titles
