import textwrap

import pytest

from golfcourse.catalog import (
    cheevo_id,
    flag,
    hole_id,
    lang_id,
    load_cheevos,
    load_countries,
    load_holes,
    load_langs,
)


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


def test_cheevo_id():
    assert cheevo_id("My God, It’s Full of Stars!") == "my-god-its-full-of-stars"
    assert cheevo_id("Patches Welcome") == "patches-welcome"


def test_lang_id():
    assert lang_id("C#") == "c-sharp"
    assert lang_id("><>") == "fish"


def test_hole_id():
    assert hole_id("Arabic to Roman") == "arabic-to-roman"
    assert hole_id("Pascal’s Triangle") == hole_id("Pascals Triangle")


def test_flag():
    assert flag("GB") == "🇬🇧"
    assert len(flag("US")) == 2


@pytest.fixture
def cheevos_path(tmp_path):
    return _write(
        tmp_path,
        "cheevos.toml",
        """
        [[Misc]]
        name = "Patches Welcome"
        emoji = "🩹"
        description = "Contribute a merged patch."

        [[Misc]]
        name = "My God, It’s Full of Stars"
        emoji = "🌌"
        description = "Star the repository."

        [[Holes]]
        name = "Hello, World!"
        emoji = "👋"
        description = "Solve a hole."
        """,
    )


def test_load_cheevos(cheevos_path):
    catalog = load_cheevos(cheevos_path)
    names = [c.name for c in catalog.ordered]
    assert names == sorted(names)
    assert len(names) == 3
    assert set(catalog.tree) == {"Misc", "Holes"}
    assert [c.name for c in catalog.tree["Misc"]] == [
        "Patches Welcome",
        "My God, It’s Full of Stars",
    ]
    stars = catalog.by_id["my-god-its-full-of-stars"]
    assert stars.emoji == "🌌"
    assert stars.description == "Star the repository."
    assert set(catalog.by_id) == {c.id for c in catalog.ordered}


def test_load_countries(tmp_path):
    path = _write(
        tmp_path,
        "countries.toml",
        """
        [[Europe]]
        id = "GB"
        name = "United Kingdom"

        [[Europe]]
        id = "FR"
        name = "France"
        """,
    )
    catalog = load_countries(path)
    assert catalog.by_id["GB"].name == "United Kingdom"
    assert catalog.by_id["GB"].flag == flag("GB")
    assert [c.id for c in catalog.tree["Europe"]] == ["GB", "FR"]


def test_load_langs(tmp_path):
    path = _write(
        tmp_path,
        "langs.toml",
        '''
        ["C#"]
        size = "100 MiB"
        version = "9.0"
        website = "https://example.com/cs"
        example = """
          Console.WriteLine(1);
        """

        [awk]
        example = "print 1"

        [Bash]
        example = "echo 1"
        ''',
    )
    catalog = load_langs(path)
    assert [lang.name for lang in catalog.ordered] == ["awk", "Bash", "C#"]
    sharp = catalog.by_id[lang_id("C#")]
    assert sharp.example == "Console.WriteLine(1);"
    assert sharp.version == "9.0"
    assert sharp.website == "https://example.com/cs"


@pytest.fixture
def holes_path(tmp_path):
    return _write(
        tmp_path,
        "holes.toml",
        '''
        ["Fizz Buzz"]
        category = "Sequence"
        preamble = """
        <p>Print the numbers
           from 1 to 100.</p>
        <pre>a
          b</pre>
        """
        links = [{name = "Wiki", url = "https://example.com/fizz"}]

        ["Arabic to Roman"]
        category = "Transform"
        preamble = "<p>x</p>"

        [quine]
        category = "Computing"
        preamble = "<p>q</p>"

        [Zeckendorf]
        category = "Mathematics"
        experiment = 42
        preamble = "<p>z</p>"
        ''',
    )


def test_load_holes_ring(holes_path):
    catalog = load_holes(holes_path)
    ids = [hole.id for hole in catalog.ordered]
    assert [hole.name for hole in catalog.ordered] == [
        "Arabic to Roman",
        "Fizz Buzz",
        "quine",
    ]
    for index, hole in enumerate(catalog.ordered):
        assert hole.prev == ids[index - 1]
        assert hole.next == ids[(index + 1) % len(ids)]
    assert set(catalog.by_id) == set(ids)
    assert "arabic-to-roman" in catalog.by_id


def test_load_holes_experimental(holes_path):
    catalog = load_holes(holes_path)
    assert list(catalog.experimental_by_id) == [hole_id("Zeckendorf")]
    only = catalog.experimental[0]
    assert only.experiment == 42
    assert only.prev == only.next == only.id
    assert only.category_color == "green"
    assert only.category_icon == "calculator"


def test_load_holes_details(holes_path):
    catalog = load_holes(holes_path)
    fizz = catalog.by_id[hole_id("Fizz Buzz")]
    assert fizz.category_color == "blue"
    assert fizz.category_icon == "sort-numeric-down"
    assert fizz.links == (("Wiki", "https://example.com/fizz"),)
    assert "a\n  b" in fizz.preamble
    before_pre = fizz.preamble.split("<pre>")[0]
    assert "\n" not in before_pre
    assert "  " not in before_pre
    assert fizz.preamble.startswith("<p>Print")


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_holes(tmp_path / "nope.toml")