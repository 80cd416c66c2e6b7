"""Golfers, their cheevos and ranking updates."""

from __future__ import annotations

import bisect
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo
from typing import Any

from golfcourse.catalog import Cheevo

_EARN_SQL = (
    "INSERT INTO trophies (user_id, trophy) VALUES (?, ?) ON CONFLICT DO NOTHING"
)

_TEED_OFF = datetime(2019, 7, 15, 20, 13, 21, tzinfo=timezone.utc)


@dataclass(frozen=True)
class FailingSolution:
    hole: str
    lang: str


def _json_field(item: dict[str, Any], key: str) -> str:
    value = item.get(key)
    if value is None:
        lowered = key.lower()
        value = next((v for k, v in item.items() if k.lower() == lowered), "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"failing solution {key!r} must be a string")
    return value


def parse_failing_solutions(src: str | bytes) -> list[FailingSolution]:
    """Parse a JSON array of {"Hole": ..., "Lang": ...} objects."""
    if isinstance(src, (bytes, bytearray, memoryview)):
        src = bytes(src).decode("utf-8")
    data = json.loads(src)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError("failing solutions must be a JSON array")
    solutions = []
    for item in data:
        if not isinstance(item, dict):
            raise ValueError("each failing solution must be a JSON object")
        solutions.append(
            FailingSolution(hole=_json_field(item, "Hole"), lang=_json_field(item, "Lang"))
        )
    return solutions


@dataclass(kw_only=True)
class Golfer:
    id: int = 0
    name: str = ""
    admin: bool = False
    show_country: bool = False
    cheevos: list[str] = field(default_factory=list)
    country: str = ""
    keymap: str = ""
    referrer: str = ""
    theme: str = ""
    delete: datetime | None = None
    failing_solutions: list[FailingSolution] = field(default_factory=list)
    time_zone: tzinfo | None = None

    def earn(self, db: Any, cheevo_id: str, cheevos: Mapping[str, Cheevo]) -> Cheevo | None:
        """Record the cheevo; return it if newly earned, None if already held."""
        cursor = db.execute(_EARN_SQL, (self.id, cheevo_id))
        earned = cheevos.get(cheevo_id) if cursor.rowcount == 1 else None

        if not self.earnt(cheevo_id):
            bisect.insort(self.cheevos, cheevo_id)

        return earned

    def earnt(self, cheevo_id: str) -> bool:
        """Whether the golfer holds the cheevo; cheevos is kept sorted."""
        i = bisect.bisect_left(self.cheevos, cheevo_id)
        return i < len(self.cheevos) and self.cheevos[i] == cheevo_id


@dataclass(kw_only=True)
class GolferInfo(Golfer):
    sponsor: bool = False
    bytes_points: int = 0
    chars_points: int = 0
    diamond: int = 0
    gold: int = 0
    silver: int = 0
    bronze: int = 0
    cheevos_earned: int = 0
    holes: int = 0
    langs: int = 0
    cheevos_total: int = 0
    holes_total: int = 0
    langs_total: int = 0
    teed_off: datetime = _TEED_OFF


@dataclass(frozen=True)
class RankState:
    joint: bool | None = None
    rank: int | None = None
    strokes: int | None = None


@dataclass(frozen=True)
class RankUpdate:
    scoring: str
    from_: RankState = field(default_factory=RankState)
    to: RankState = field(default_factory=RankState)
    beat: int | None = None