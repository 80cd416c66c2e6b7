# golfcourse

Building blocks for a code golf site. It has the catalogues of holes,
languages, countries and achievements ("cheevos"), golfer bookkeeping, the
generators that produce each hole's arguments and expected output, a sync
job that reads data from the GitHub GraphQL API, and record-announcement
embeds for Discord.

## Installation

```
pip install golfcourse
```

## Catalogues (`golfcourse.catalog`)

The catalogues are read from TOML files:

```python
from golfcourse.catalog import load_cheevos, load_countries, load_holes, load_langs

holes = load_holes("holes.toml")          # HoleCatalog
langs = load_langs("langs.toml")          # LangCatalog
cheevos = load_cheevos("cheevos.toml")    # CheevoCatalog
countries = load_countries("countries.toml")  # CountryCatalog
```

- `load_holes` expects one table per hole, keyed by its name, with
  `Category`, `Preamble`, `Experiment` and `Links` (an array of tables with
  `Name` and `URL`). Preamble HTML has its insignificant whitespace collapsed,
  leaving `<pre>` blocks alone. Holes with a non-zero `Experiment` go into
  `experimental` and `experimental_by_id`; the rest go into `ordered` and
  `by_id`. Each list is sorted by name, ignoring case, and every hole gets the
  ids of its neighbours in `prev` and `next`, wrapping at the ends. The known
  categories also set `category_color` and `category_icon`.
- `load_langs` expects one table per language, keyed by its name, with
  `Example`, `Size`, `Version` and `Website`. Examples are stripped.
- `load_cheevos` expects arrays of tables (`Name`, `Emoji`, `Description`)
  grouped by category. `tree` keeps the grouping; `ordered` is sorted by name.
- `load_countries` expects arrays of tables (`ID`, `Name`) grouped by region.
  Each country is given its flag emoji.

Identifiers are made from display names with `hole_id`, `lang_id` and
`cheevo_id`. `flag("GB")` returns the regional-indicator flag for a country
code.

## Hole generators

Every generator returns a pair: a list of arguments and the expected output
as one string.

```python
from golfcourse.holes_text import arabic_to_roman, roman
from golfcourse.holes_numbers import wordify

args, expected = arabic_to_roman(reverse=False)
print(roman(1994))   # MCMXCIV
print(wordify(342))  # three hundred and forty-two
```

- `golfcourse.holes_pairs`: `brainfuck`, `css_colors`, `emojify`,
  `rock_paper_scissors_spock_lizard`, `united_states`. Fixed pairs served in
  random order.
- `golfcourse.holes_text`: `star_wars_opening_crawl`, `morse(reverse)`,
  `seven_segment`, `arabic_to_roman(reverse)`, and the helper `roman(n)`.
- `golfcourse.holes_numbers`: `ellipse_perimeters`, `lucky_tickets`,
  `ordinal_numbers`, `spelling_numbers`, `levenshtein_distance(words)`,
  `intersection` and `ten_pin_bowling`. The helpers behind them are public too:
  `perimeter`, `lucky_ticket_count`, `ordinal_suffix`, `wordify`,
  `levenshtein`, `calculate_intersection` and the `BBox` class.
  `levenshtein_distance` draws from the word list you pass in; no word list
  ships with the package.
- `golfcourse.holes_puzzles`: `sudoku(v2)`, `poker` and `pangram_grep`, with
  `print_sudoku`, `count_solutions(board, limit)`, `card_rune`,
  `straight_check` and `is_pangram`.
- `golfcourse.holes_maze`: `maze()` gives five mazes. `generate_maze(start)`
  builds one `Maze`, and `Maze.draw(solved)` renders it with or without the
  dotted path from `S` to `E`.

## Golfers (`golfcourse.golfer`)

`Golfer` keeps its `cheevos` list sorted. `Golfer.earn(db, cheevo_id, cheevos)`
inserts a trophy row through a DB-API connection that uses `?` placeholders,
such as `sqlite3`. It adds the id to the golfer's list and returns the
`Cheevo` from `cheevos` only if the insert added a row. `Golfer.earnt` reports
whether the golfer holds a cheevo. `parse_failing_solutions` reads a JSON array
of `{"Hole": ..., "Lang": ...}` objects into `FailingSolution` values.
`GolferInfo`, `RankState` and `RankUpdate` are plain data classes.

## GitHub synchronisation (`golfcourse.github_sync`)

```python
import sqlite3
from golfcourse.github_sync import GraphQLClient, run

client = GraphQLClient(token="token")   # defaults to $GITHUB_ACCESS_TOKEN
limits = run(sqlite3.connect("site.db"), client)
```

`run` calls `ideas`, `pull_requests`, `sponsors` and `stars` in turn. It logs
how much of the API budget was spent and returns the `RateLimit` of every
query. If the client has no token it does nothing.

- `ideas` replaces the `ideas` table with the open issues labelled "idea".
- `sponsors` sets the `sponsor` flag on users.
- `pull_requests` and `stars` pass the users and their earned times to
  `award_cheevos`. That function makes the `trophies` rows for a cheevo match
  them exactly, and only inserts rows for users that exist.

## Record announcements (`golfcourse.discord_embed`)

`rec_announce_to_embed(RecAnnouncement(...))` builds a Discord embed as a
dictionary. It has a title, a rankings URL, an author block and one inline
field per improved scoring. Bytes and chars are merged into one field when
they are equal. `comma(n)` formats numbers with thousands separators.

## What this package does not do

There is no web server, no routing and no page templates. There is no
database schema or migration. The SQL assumes that the tables it names exist.
No Discord bot connects or sends messages; the package only builds the embed
payload. No catalogue TOML files or word lists are bundled.

## Running the tests

```
pip install golfcourse[test]
pytest
```