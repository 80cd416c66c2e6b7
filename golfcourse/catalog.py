"""Static catalogues of cheevos, countries, languages and holes, loaded from TOML."""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass, replace
from operator import attrgetter
from os import PathLike
from typing import Any

_MISSING = object()

_CATEGORY_STYLES = {
    "Art": ("red", "brush"),
    "Computing": ("orange", "cpu"),
    "Gaming": ("yellow", "joystick"),
    "Mathematics": ("green", "calculator"),
    "Sequence": ("blue", "sort-numeric-down"),
    "Transform": ("purple", "shuffle"),
}

_PRE_BLOCK = re.compile(r"(<pre\b.*?</pre>)", re.IGNORECASE | re.DOTALL)
_BLOCK_TAG = re.compile(
    r"\s*(</?(?:p|div|ul|ol|li|table|thead|tbody|tr|td|th|h[1-6]|br|hr"
    r"|blockquote|dl|dt|dd|section|header|footer|nav)\b[^>]*>)\s*",
    re.IGNORECASE,
)
_WHITESPACE = re.compile(r"\s+")


def _get(table: dict[str, Any], key: str, default: Any = "") -> Any:
    """Look a key up exactly, then case-insensitively."""
    value = table.get(key, _MISSING)
    if value is not _MISSING:
        return value
    lowered = key.lower()
    return next((v for k, v in table.items() if k.lower() == lowered), default)


def _read_toml(path: str | PathLike[str]) -> dict[str, Any]:
    with open(path, "rb") as handle:
        return tomllib.load(handle)


def _minify_html(html: str) -> str:
    """Collapse insignificant whitespace, leaving <pre> blocks untouched."""
    pieces = []
    for index, piece in enumerate(_PRE_BLOCK.split(html)):
        if index % 2:
            pieces.append(piece)
        else:
            collapsed = _WHITESPACE.sub(" ", piece)
            pieces.append(_BLOCK_TAG.sub(r"\1", collapsed))
    return "".join(pieces).strip()


def cheevo_id(name: str) -> str:
    """Derive a cheevo's URL identifier from its name."""
    for old, new in ((" ", "-"), ("!", ""), (",", ""), (";", "-"), ("’", "")):
        name = name.replace(old, new)
    return name.lower()


def hole_id(name: str) -> str:
    """Derive a hole's URL identifier from its name."""
    return name.replace("’", "").replace(" ", "-").lower()


def lang_id(name: str) -> str:
    """Derive a language's URL identifier from its name."""
    return name.lower().replace("#", "-sharp").replace("><>", "fish")


def flag(country_id: str) -> str:
    """Return the regional-indicator flag emoji for a two-letter country code."""
    return "".join(chr(0x1F1E6 - ord("A") + ord(letter)) for letter in country_id)


@dataclass(frozen=True)
class Cheevo:
    id: str
    name: str
    emoji: str = ""
    description: str = ""


@dataclass(frozen=True)
class CheevoCatalog:
    by_id: dict[str, Cheevo]
    ordered: list[Cheevo]
    tree: dict[str, list[Cheevo]]


@dataclass(frozen=True)
class Country:
    id: str
    name: str
    flag: str


@dataclass(frozen=True)
class CountryCatalog:
    by_id: dict[str, Country]
    tree: dict[str, list[Country]]


@dataclass(frozen=True)
class Lang:
    id: str
    name: str
    example: str = ""
    size: str = ""
    version: str = ""
    website: str = ""


@dataclass(frozen=True)
class LangCatalog:
    by_id: dict[str, Lang]
    ordered: list[Lang]


@dataclass(frozen=True)
class Hole:
    """A hole; links are (name, url) pairs."""

    id: str
    name: str
    category: str = ""
    category_color: str = ""
    category_icon: str = ""
    preamble: str = ""
    experiment: int = 0
    prev: str = ""
    next: str = ""
    links: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class HoleCatalog:
    by_id: dict[str, Hole]
    ordered: list[Hole]
    experimental_by_id: dict[str, Hole]
    experimental: list[Hole]


def load_cheevos(path: str | PathLike[str]) -> CheevoCatalog:
    """Load cheevos grouped by category; the flat list is sorted by name."""
    tree = {
        category: [_make_cheevo(entry) for entry in entries]
        for category, entries in _read_toml(path).items()
    }
    ordered = sorted(
        (cheevo for cheevos in tree.values() for cheevo in cheevos),
        key=attrgetter("name"),
    )
    return CheevoCatalog(
        by_id={cheevo.id: cheevo for cheevo in ordered}, ordered=ordered, tree=tree
    )


def _make_cheevo(entry: dict[str, Any]) -> Cheevo:
    name = _get(entry, "Name")
    return Cheevo(
        id=cheevo_id(name),
        name=name,
        emoji=_get(entry, "Emoji"),
        description=_get(entry, "Description"),
    )


def load_countries(path: str | PathLike[str]) -> CountryCatalog:
    """Load countries grouped by region, each given its flag emoji."""
    tree = {
        region: [
            Country(
                id=_get(entry, "ID"),
                name=_get(entry, "Name"),
                flag=flag(_get(entry, "ID")),
            )
            for entry in entries
        ]
        for region, entries in _read_toml(path).items()
    }
    by_id = {country.id: country for countries in tree.values() for country in countries}
    return CountryCatalog(by_id=by_id, tree=tree)


def load_langs(path: str | PathLike[str]) -> LangCatalog:
    """Load languages keyed by name, sorted case-insensitively."""
    langs = [
        Lang(
            id=lang_id(name),
            name=name,
            example=_get(entry, "Example").strip(),
            size=_get(entry, "Size"),
            version=_get(entry, "Version"),
            website=_get(entry, "Website"),
        )
        for name, entry in _read_toml(path).items()
    ]
    ordered = sorted(langs, key=lambda lang: lang.name.lower())
    return LangCatalog(by_id={lang.id: lang for lang in ordered}, ordered=ordered)


def _link_ring(holes: list[Hole]) -> list[Hole]:
    """Give every hole the ids of its neighbours, wrapping around at the ends."""
    if not holes:
        return []
    ids = [hole.id for hole in holes]
    prevs = ids[-1:] + ids[:-1]
    nexts = ids[1:] + ids[:1]
    return [replace(hole, prev=p, next=n) for hole, p, n in zip(holes, prevs, nexts)]


def load_holes(path: str | PathLike[str]) -> HoleCatalog:
    """Load holes, splitting out experimental ones and linking each list in a ring."""
    main: list[Hole] = []
    experimental: list[Hole] = []

    for name, entry in _read_toml(path).items():
        category = _get(entry, "Category")
        color, icon = _CATEGORY_STYLES.get(category, ("", ""))
        links = tuple(
            (_get(link, "Name"), _get(link, "URL")) for link in _get(entry, "Links", [])
        )
        hole = Hole(
            id=hole_id(name),
            name=name,
            category=category,
            category_color=color,
            category_icon=icon,
            preamble=_minify_html(_get(entry, "Preamble")),
            experiment=int(_get(entry, "Experiment", 0)),
            links=links,
        )
        (experimental if hole.experiment else main).append(hole)

    by_name = lambda hole: hole.name.lower()  # noqa: E731
    main = _link_ring(sorted(main, key=by_name))
    experimental = _link_ring(sorted(experimental, key=by_name))

    return HoleCatalog(
        by_id={hole.id: hole for hole in main},
        ordered=main,
        experimental_by_id={hole.id: hole for hole in experimental},
        experimental=experimental,
    )