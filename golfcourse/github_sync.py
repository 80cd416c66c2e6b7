"""Periodic sync of ideas, contributors, sponsors and stargazers from the GitHub GraphQL API."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import requests

log = logging.getLogger(__name__)

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"

_RATE_LIMIT = "rateLimit { cost limit remaining resetAt }"
_PAGE_INFO = "pageInfo { endCursor hasNextPage }"
_REPOSITORY = 'repository(name: "code-golf", owner: "code-golf")'

_IDEAS_QUERY = f"""query($cursor: String) {{
  {_RATE_LIMIT}
  {_REPOSITORY} {{
    issues(after: $cursor, first: 100, labels: "idea", states: OPEN) {{
      nodes {{
        number
        thumbsDown: reactions(content: THUMBS_DOWN) {{ totalCount }}
        thumbsUp: reactions(content: THUMBS_UP) {{ totalCount }}
        title
      }}
      {_PAGE_INFO}
    }}
  }}
}}"""

_PULL_REQUESTS_QUERY = f"""query($cursor: String) {{
  {_RATE_LIMIT}
  {_REPOSITORY} {{
    pullRequests(after: $cursor, first: 100, states: MERGED) {{
      nodes {{
        author {{ ... on User {{ databaseId }} }}
        mergedAt
      }}
      {_PAGE_INFO}
    }}
  }}
}}"""

_SPONSORS_QUERY = f"""query {{
  {_RATE_LIMIT}
  viewer {{
    sponsorshipsAsMaintainer(first: 100) {{
      nodes {{
        sponsorEntity {{ ... on User {{ databaseId }} }}
      }}
    }}
  }}
}}"""

_STARS_QUERY = f"""query($cursor: String) {{
  {_RATE_LIMIT}
  {_REPOSITORY} {{
    stargazers(after: $cursor, first: 100) {{
      edges {{
        node {{ databaseId }}
        starredAt
      }}
      {_PAGE_INFO}
    }}
  }}
}}"""


class GraphQLError(RuntimeError):
    """The GraphQL endpoint answered with errors."""


@dataclass(frozen=True)
class RateLimit:
    cost: int
    limit: int
    remaining: int
    reset_at: datetime


class GraphQLClient:
    """A minimal GraphQL client authenticated with a bearer token."""

    def __init__(
        self,
        token: str | None = None,
        *,
        url: str = GITHUB_GRAPHQL_URL,
        session: Any = None,
        timeout: float = 30.0,
    ) -> None:
        self.token = os.environ.get("GITHUB_ACCESS_TOKEN", "") if token is None else token
        self.url = url
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def query(self, query: str, variables: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Run a query and return its data, raising on HTTP or GraphQL errors."""
        response = self.session.post(
            self.url,
            json={"query": query, "variables": dict(variables or {})},
            headers={"Authorization": f"Bearer {self.token}"},
            timeout=self.timeout,
        )
        response.raise_for_status()
        payload = response.json()
        if payload.get("errors"):
            messages = "; ".join(error.get("message", "") for error in payload["errors"])
            raise GraphQLError(messages)
        return payload["data"]


def _parse_time(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def _rate_limit(data: Mapping[str, Any]) -> RateLimit:
    return RateLimit(
        cost=data["cost"],
        limit=data["limit"],
        remaining=data["remaining"],
        reset_at=_parse_time(data["resetAt"]),
    )


@contextmanager
def _transaction(db: Any) -> Iterator[None]:
    try:
        yield
    except BaseException:
        db.rollback()
        raise
    else:
        db.commit()


def _paginate(client: Any, query: str, connection: str) -> Iterator[dict[str, Any]]:
    """Yield each page of a repository connection, following its cursor."""
    cursor = None
    while True:
        data = client.query(query, {"cursor": cursor})
        yield data
        page_info = data["repository"][connection]["pageInfo"]
        if not page_info["hasNextPage"]:
            return
        cursor = page_info["endCursor"]


def _user_id(entity: Mapping[str, Any] | None) -> int | None:
    return (entity or {}).get("databaseId")


def award_cheevos(db: Any, earned_users: Mapping[int, datetime], cheevo_id: str) -> None:
    """Make the cheevo's holders exactly earned_users, with their earned times."""
    remaining = dict(earned_users)

    with _transaction(db):
        rows = db.execute(
            "SELECT earned, user_id FROM trophies WHERE trophy = ?", (cheevo_id,)
        ).fetchall()

        for earned, user_id in rows:
            new_earned = remaining.pop(user_id, None)
            if new_earned is None:
                db.execute(
                    "DELETE FROM trophies WHERE trophy = ? AND user_id = ?",
                    (cheevo_id, user_id),
                )
            elif _parse_time(earned) != new_earned:
                db.execute(
                    "UPDATE trophies SET earned = ? WHERE trophy = ? AND user_id = ?",
                    (new_earned.isoformat(), cheevo_id, user_id),
                )

        for user_id, earned in remaining.items():
            db.execute(
                "INSERT INTO trophies (earned, user_id, trophy) SELECT ?, ?, ?"
                " WHERE EXISTS (SELECT * FROM users WHERE id = ?)",
                (earned.isoformat(), user_id, cheevo_id, user_id),
            )


def ideas(db: Any, client: Any) -> list[RateLimit]:
    """Replace the ideas table with the open issues labelled as ideas."""
    limits = []
    with _transaction(db):
        db.execute("DELETE FROM ideas")
        for data in _paginate(client, _IDEAS_QUERY, "issues"):
            limits.append(_rate_limit(data["rateLimit"]))
            for node in data["repository"]["issues"]["nodes"]:
                db.execute(
                    "INSERT INTO ideas VALUES (?, ?, ?, ?)",
                    (
                        node["number"],
                        node["thumbsDown"]["totalCount"],
                        node["thumbsUp"]["totalCount"],
                        node["title"],
                    ),
                )
    return limits


def pull_requests(db: Any, client: Any) -> list[RateLimit]:
    """Award the patch cheevo to authors of merged pull requests, dated by their first."""
    limits = []
    first_merged: dict[int, datetime] = {}

    for data in _paginate(client, _PULL_REQUESTS_QUERY, "pullRequests"):
        limits.append(_rate_limit(data["rateLimit"]))
        for node in data["repository"]["pullRequests"]["nodes"]:
            user_id = _user_id(node.get("author"))
            if user_id is None:
                continue
            merged_at = _parse_time(node["mergedAt"])
            if user_id not in first_merged or merged_at < first_merged[user_id]:
                first_merged[user_id] = merged_at

    award_cheevos(db, first_merged, "patches-welcome")
    return limits


def sponsors(db: Any, client: Any) -> list[RateLimit]:
    """Flag exactly the current sponsors among the users."""
    data = client.query(_SPONSORS_QUERY, None)
    limits = [_rate_limit(data["rateLimit"])]

    with _transaction(db):
        db.execute("UPDATE users SET sponsor = FALSE")
        for node in data["viewer"]["sponsorshipsAsMaintainer"]["nodes"]:
            user_id = _user_id(node.get("sponsorEntity"))
            if user_id is not None:
                db.execute("UPDATE users SET sponsor = TRUE WHERE id = ?", (user_id,))

    return limits


def stars(db: Any, client: Any) -> list[RateLimit]:
    """Award the star cheevo to stargazers of the repository."""
    limits = []
    starred: dict[int, datetime] = {}

    for data in _paginate(client, _STARS_QUERY, "stargazers"):
        limits.append(_rate_limit(data["rateLimit"]))
        for edge in data["repository"]["stargazers"]["edges"]:
            user_id = _user_id(edge.get("node"))
            if user_id is not None:
                starred[user_id] = _parse_time(edge["starredAt"])

    award_cheevos(db, starred, "my-god-its-full-of-stars")
    return limits


def run(db: Any, client: Any) -> list[RateLimit]:
    """Run every sync job and log the API budget spent; no-op without a token."""
    if not client.token:
        return []

    limits: list[RateLimit] = []
    for job in (ideas, pull_requests, sponsors, stars):
        limits.extend(job(db, client))

    if limits:
        last = limits[-1]
        resets_in = last.reset_at - datetime.now(timezone.utc)
        log.info(
            "GitHub API: Spent %d, %d/%d left, resets in %s",
            sum(limit.cost for limit in limits),
            last.remaining,
            last.limit,
            timedelta(seconds=round(resets_in.total_seconds())),
        )
    return limits