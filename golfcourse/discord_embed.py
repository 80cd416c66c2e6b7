"""Discord embeds announcing new record solutions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from golfcourse.catalog import Hole, Lang
from golfcourse.golfer import Golfer, RankUpdate

_SITE = "https://code.golf"
_AVATARS = "https://avatars.githubusercontent.com/"
_ARROW = "  →  "
_SCORINGS = ("bytes", "chars", "bytes/chars")


def comma(n: int) -> str:
    """Format an integer with commas between groups of thousands."""
    return f"{n:,}"


@dataclass
class RecAnnouncement:
    """A new record announcement; updates holds one batch of rank updates per solution."""

    golfer: Golfer
    hole: Hole
    lang: Lang
    updates: list[list[RankUpdate]] = field(default_factory=list)
    message: Any = None


def rec_announce_to_embed(announcement: RecAnnouncement) -> dict[str, Any]:
    """Build the Discord embed for an announcement, one field per improved scoring."""
    hole, lang, golfer = announcement.hole, announcement.lang, announcement.golfer

    values: dict[str, str] = {}
    for batch in announcement.updates:
        for update in batch:
            scoring = update.scoring
            if update.beat is not None:
                values[scoring] = (values.get(scoring) or comma(update.beat)) + _ARROW
            values[scoring] = values.get(scoring, "") + comma(update.to.strokes or 0)

    if values.get("bytes", "") == values.get("chars", ""):
        values = {"bytes/chars": values.get("bytes", "")}

    fields = [
        {"name": scoring.title(), "value": values[scoring], "inline": True}
        for scoring in _SCORINGS
        if values.get(scoring)
    ]

    dominant = "chars" if not values.get("bytes") and not values.get("bytes/chars") else "bytes"

    return {
        "title": f"New 🥇 on {hole.name} in {lang.name}!",
        "url": f"{_SITE}/rankings/holes/{hole.id}/{lang.id}/{dominant}",
        "fields": fields,
        "author": {
            "name": golfer.name,
            "icon_url": _AVATARS + golfer.name,
            "url": f"{_SITE}/golfers/{golfer.name}",
        },
    }