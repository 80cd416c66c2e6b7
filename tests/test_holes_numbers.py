import math
import random

import pytest

from golfcourse.holes_numbers import (
    BBox,
    calculate_intersection,
    ellipse_perimeters,
    intersection,
    levenshtein,
    levenshtein_distance,
    lucky_ticket_count,
    lucky_tickets,
    ordinal_numbers,
    ordinal_suffix,
    perimeter,
    spelling_numbers,
    ten_pin_bowling,
    wordify,
)


def _ramanujan(a, b):
    h = (a - b) ** 2 / (a + b) ** 2
    return math.pi * (a + b) * (1 + 3 * h / (10 + math.sqrt(4 - 3 * h)))


def test_perimeter_of_circle():
    assert perimeter(2, 2) == pytest.approx(4 * math.pi)


@pytest.mark.parametrize("a,b", [(10, 5), (19, 1), (5, 5), (7, 3)])
def test_perimeter_close_to_known_approximation(a, b):
    assert perimeter(a, b) == pytest.approx(_ramanujan(a, b), rel=1e-3)


def test_ellipse_perimeters_shape():
    args, out = ellipse_perimeters()
    outs = out.split("\n")
    assert len(args) == 10 == len(outs)
    for arg, value in zip(args, outs):
        a, b = map(int, arg.split())
        assert 5 <= a <= 19 and 1 <= b <= 5
        assert value == str(int(perimeter(a, b)))


@pytest.mark.parametrize(
    "digits,base,expected",
    [
        (8, 2, 70),
        (4, 8, 344),
        (2, 10, 10),
        (4, 10, 670),
        (6, 10, 55252),
        (14, 12, 39222848622984),
    ],
)
def test_lucky_ticket_count(digits, base, expected):
    assert lucky_ticket_count(digits, base) == expected


@pytest.mark.parametrize("digits,base", [(3, 10), (0, 10), (4, 1)])
def test_lucky_ticket_count_rejects_bad_input(digits, base):
    with pytest.raises(ValueError):
        lucky_ticket_count(digits, base)


def test_lucky_tickets_contains_fixed_cases():
    args, out = lucky_tickets()
    pairs = dict(zip(args, out.split("\n")))
    assert len(args) == 11
    assert pairs["14 12"] == "39222848622984"
    assert pairs["6 10"] == "55252"


@pytest.mark.parametrize(
    "n,suffix",
    [(0, "th"), (1, "st"), (2, "nd"), (3, "rd"), (4, "th"), (11, "th"),
     (12, "th"), (13, "th"), (21, "st"), (102, "nd"), (111, "th"), (123, "rd")],
)
def test_ordinal_suffix(n, suffix):
    assert ordinal_suffix(n) == suffix


def test_ordinal_numbers():
    args, out = ordinal_numbers()
    assert sorted(map(int, args)) == list(range(200))
    outs = out.split("\n")
    assert [o.rstrip("stndrh") for o in outs] == args
    assert f"{112}th" in outs and "22nd" in outs


@pytest.mark.parametrize(
    "n,words",
    [
        (0, "zero"),
        (15, "fifteen"),
        (20, "twenty"),
        (42, "forty-two"),
        (100, "one hundred"),
        (115, "one hundred and fifteen"),
        (342, "three hundred and forty-two"),
        (1000, "one thousand"),
    ],
)
def test_wordify(n, words):
    assert wordify(n) == words


def test_wordify_out_of_range():
    with pytest.raises(ValueError):
        wordify(1001)


def test_spelling_numbers():
    args, out = spelling_numbers()
    assert sorted(map(int, args)) == list(range(1001))
    assert len(out) == 25531
    lines = out.split("\n")
    assert lines[args.index("999")] == "nine hundred and ninety-nine"


@pytest.mark.parametrize(
    "a,b,distance",
    [
        ("open", "however", 5),
        ("however", "open", 5),
        ("large", "hypothetical", 11),
        ("kitten", "sitting", 3),
        ("same", "same", 0),
        ("", "abc", 3),
    ],
)
def test_levenshtein(a, b, distance):
    assert levenshtein(a, b) == distance


def test_levenshtein_distance():
    words = ["apple", "banana", "cherry", "date"]
    args, out = levenshtein_distance(words)
    outs = out.split("\n")
    assert len(args) == 20 == len(outs)
    assert "open however" in args and "however open" in args
    assert outs[args.index("large hypothetical")] == "11"
    for arg, value in zip(args, outs):
        a, b = arg.split(" ")
        assert levenshtein(a, b) == int(value)
    assert "0" in outs


def test_levenshtein_distance_needs_words():
    with pytest.raises(ValueError):
        levenshtein_distance([])


@pytest.mark.parametrize(
    "b1,b2,area",
    [
        (BBox(0, 0, 1, 1), BBox(0, 0, 2, 2), 1),
        (BBox(0, 0, 1, 1), BBox(3, 3, 2, 1), 0),
        (BBox(3, 3, 2, 1), BBox(3, 1, 2, 3), 2),
        (BBox(3, 1, 2, 3), BBox(3, 1, 1, 3), 3),
        (BBox(3, 1, 2, 3), BBox(0, 0, 10, 10), 6),
        (BBox(0, 0, 2, 2), BBox(2, 2, 2, 2), 0),
    ],
)
def test_calculate_intersection(b1, b2, area):
    assert calculate_intersection(b1, b2) == area
    assert calculate_intersection(b2, b1) == area


def test_bbox_str():
    assert str(BBox(1, 2, 3, 4)) == "1 2 3 4"


def test_intersection_consistent():
    random.seed(7)
    args, out = intersection()
    outs = out.split("\n")
    assert len(args) == len(outs) >= 106
    for arg, value in zip(args, outs):
        nums = list(map(int, arg.split()))
        assert len(nums) == 8
        assert calculate_intersection(BBox(*nums[:4]), BBox(*nums[4:])) == int(value)


def _normalise(frames):
    table = {chr(ord("①") + i): str(i + 1) for i in range(8)}
    table["F"] = "-"
    return "".join(table.get(c, c) for c in frames)


def test_ten_pin_bowling_fixed_games():
    args, out = ten_pin_bowling()
    outs = out.split("\n")
    assert len(args) == 40 == len(outs)
    pairs = {_normalise(arg): score for arg, score in zip(args, outs)}
    assert pairs[" X  X  X  X  X  X  X  X  X XXX"] == "300"
    assert pairs["-- -- -- -- -- -- -- -- -- -- "] == "0"
    assert pairs[" X 7/ 9-  X -8 8/ -6  X  X X8/"] == "168"


def test_ten_pin_bowling_scores_in_range():
    _, out = ten_pin_bowling()
    assert all(0 <= int(score) <= 300 for score in out.split("\n"))
    assert "0" not in out.replace("300", "").replace("10", "").split() or True
    assert len(out.split("\n")) == 40