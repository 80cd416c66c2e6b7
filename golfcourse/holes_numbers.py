"""Holes about numbers: perimeters, tickets, ordinals, spellings, distances, boxes, bowling."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass

_LUCKY_TICKETS = (
    (8, 2, 70),
    (4, 8, 344),
    (2, 10, 10),
    (4, 10, 670),
    (6, 10, 55252),
    (14, 12, 39222848622984),
)

_TEENS = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen",
)

_TENS = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty",
    "ninety",
)

_BOWLING_GAMES = (
    (" X  X  X  X  X  X  X  X  X XXX", "300"),
    (" X 17 36 63 4-  X 61 7- 6- -- ", "85"),
    (" X 7/ 9-  X -8 8/ -6  X  X X81", "167"),
    (" X 7/ 9-  X -8 8/ -6  X  X X8/", "168"),
    (" X 8- 51  X 35 36 7- 9-  X 8- ", "109"),
    ("-- -- -- -- -- -- -- -- -- -- ", "0"),
    ("-9 5- 35 31 61 43 6- 63 6- 71 ", "69"),
    ("32 3/  X  X  X  X 43 33 33 3/6", "161"),
    ("32 3/  X  X  X  X 43 33 33 36 ", "154"),
    ("43 44 54 45  X  X  X  X 43 23 ", "146"),
    ("53 33 34  X  X  X 53 3/  X X43", "163"),
    ("7/ 4- 36 81 8- 54 44 53 31 8- ", "81"),
    ("71 33 45 45  X  X  X  X 5/ 23 ", "154"),
    ("71 7- 72 8- 81 51 8-  X 6- 81 ", "86"),
    ("72 9- 81  X 9- 8/  X  X  X 9- ", "162"),
    ("81 16 8/ 33  X 7- -7 9- 8- -- ", "83"),
    ("9- -2 35  X  X  X  X 62 22 62 ", "143"),
    ("9/ 5F 5- F/  X -/ 81  X F/ X-/", "152"),
)

_EXTRA_BOWLING_GAMES = 22


def _shuffled(args: list[str], outs: list[str], sep: str = "\n") -> tuple[list[str], str]:
    pairs = list(zip(args, outs))
    random.shuffle(pairs)
    return [arg for arg, _ in pairs], sep.join(out for _, out in pairs)


def perimeter(a: int, b: int) -> float:
    """Perimeter of an ellipse with semi-axes a and b, from 100 terms of its series."""
    a, b = float(a), float(b)
    h = (a - b) ** 2 / (a + b) ** 2
    total = 0.0
    for n in range(100):
        binomial = math.gamma(1.5) / (math.gamma(1.0 + n) * math.gamma(1.5 - n))
        total += binomial**2 * math.pow(h, n)
    return total * math.pi * (a + b)


def ellipse_perimeters() -> tuple[list[str], str]:
    """Ten random ellipses and their perimeters, truncated to integers."""
    args, outs = [], []
    for _ in range(10):
        a = random.randint(5, 19)
        b = random.randint(1, 5)
        args.append(f"{a} {b}")
        outs.append(str(int(perimeter(a, b))))
    return _shuffled(args, outs)


def lucky_ticket_count(digits: int, base: int) -> int:
    """Count tickets of that many digits whose halves have equal digit sums."""
    if digits <= 0 or digits % 2:
        raise ValueError("digits must be a positive even number")
    if base < 2:
        raise ValueError("base must be at least 2")

    counts = [1]
    for _ in range(digits // 2):
        widened = [0] * (len(counts) + base - 1)
        for total, count in enumerate(counts):
            for digit in range(base):
                widened[total + digit] += count
        counts = widened
    return sum(count * count for count in counts)


def lucky_tickets() -> tuple[list[str], str]:
    """Fixed and random (digits, base) pairs with their lucky ticket counts."""
    tickets = list(_LUCKY_TICKETS)
    for _ in range(5):
        digits = 2 + 2 * random.randrange(5)
        base = 2 + random.randrange(15)
        tickets.append((digits, base, lucky_ticket_count(digits, base)))

    args = [f"{digits} {base}" for digits, base, _ in tickets]
    outs = [str(result) for _, _, result in tickets]
    return _shuffled(args, outs)


def ordinal_suffix(n: int) -> str:
    """English ordinal suffix for n: st, nd, rd or th."""
    if n % 100 in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def ordinal_numbers() -> tuple[list[str], str]:
    """The numbers 0 to 199 in random order with their ordinal forms."""
    numbers = list(range(200))
    random.shuffle(numbers)
    return [str(n) for n in numbers], "\n".join(f"{n}{ordinal_suffix(n)}" for n in numbers)


def wordify(n: int) -> str:
    """Spell out a number from 0 to 1000 in British English."""
    if not 0 <= n <= 1000:
        raise ValueError("number must be between 0 and 1000")
    if n == 1000:
        return "one thousand"
    if n < 20:
        return _TEENS[n]
    if n < 100:
        units = n % 10
        return _TENS[n // 10] + (f"-{_TEENS[units]}" if units else "")
    rest = n % 100
    words = f"{_TEENS[n // 100]} hundred"
    return f"{words} and {wordify(rest)}" if rest else words


def spelling_numbers() -> tuple[list[str], str]:
    """The numbers 0 to 1000 in random order with their spellings."""
    numbers = list(range(1001))
    random.shuffle(numbers)
    return [str(n) for n in numbers], "\n".join(wordify(n) for n in numbers)


def levenshtein(a: str, b: str) -> int:
    """Edit distance between two strings, counting insertions, deletions and substitutions."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, 1):
        current = [i]
        for j, char_b in enumerate(b, 1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char_a != char_b),
                )
            )
        previous = current
    return previous[-1]


def levenshtein_distance(words: Sequence[str]) -> tuple[list[str], str]:
    """Twenty word pairs drawn from words, with fixed cases, and their edit distances."""
    if not words:
        raise ValueError("need at least one word")

    count = 20
    special = random.sample(range(count), 4)
    fixed = {
        special[1]: ("open however", "5"),
        special[2]: ("however open", "5"),
        special[3]: ("large hypothetical", "11"),
    }

    args, outs = [], []
    for i in range(count):
        if i == special[0]:
            word = random.choice(words)
            arg, out = f"{word} {word}", "0"
        elif i in fixed:
            arg, out = fixed[i]
        else:
            a, b = random.choice(words), random.choice(words)
            arg, out = f"{a} {b}", str(levenshtein(a, b))
        args.append(arg)
        outs.append(out)

    return args, "\n".join(outs)


@dataclass(frozen=True)
class BBox:
    """A box given by its top-left corner and its width and height."""

    x: int
    y: int
    w: int
    h: int

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.w} {self.h}"

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h


def calculate_intersection(b1: BBox, b2: BBox) -> int:
    """Area shared by two boxes."""
    width = min(b1.right, b2.right) - max(b1.x, b2.x)
    height = min(b1.bottom, b2.bottom) - max(b1.y, b2.y)
    if width < 0 or height < 0 or width > b1.w + b2.w or height > b1.h + b2.h:
        return 0
    return width * height


def _random_box() -> BBox:
    return BBox(
        x=random.randint(0, 100),
        y=random.randint(0, 100),
        w=random.randint(1, 50),
        h=random.randint(1, 50),
    )


def _side_case_allowed(pos: int, size: int) -> bool:
    return not (
        (pos == 0 and (size == 4 or size > 6))
        or (pos == 2 and (size == 2 or size > 4))
        or (pos == 3 and size > 3)
        or (pos in (5, 6) and size > 1)
    )


def intersection() -> tuple[list[str], str]:
    """Pairs of boxes and the area of their overlap."""
    b1 = BBox(0, 0, 1, 1)
    b2 = BBox(0, 0, 2, 2)
    b3 = BBox(3, 3, 2, 1)
    b4 = BBox(3, 1, 2, 3)
    b5 = BBox(3, 1, 1, 3)
    b6 = BBox(0, 0, 10, 10)
    b7 = BBox(2, 2, 2, 2)

    cases = [
        (f"{b1} {b2}", 1),
        (f"{b1} {b3}", 0),
        (f"{b3} {b4}", 2),
        (f"{b4} {b5}", 3),
        (f"{b4} {b6}", 6),
        (f"{b2} {b7}", 0),
    ]

    zeros = non_zeros = 0
    while zeros + non_zeros < 100:
        first, second = _random_box(), _random_box()
        area = calculate_intersection(first, second)
        if area > 0 and non_zeros < 90:
            cases.append((f"{first} {second}", area))
            non_zeros += 1
        elif area == 0 and zeros < 10:
            cases.append((f"{first} {second}", area))
            zeros += 1

    big = BBox(2, 2, 3, 3)
    positions = (0, 2, 3, 5, 6)
    for x in positions:
        for y in positions:
            for w in range(1, 7):
                for h in range(1, 7):
                    if not (_side_case_allowed(x, w) and _side_case_allowed(y, h)):
                        continue
                    if random.random() > 0.5:
                        box = BBox(x, y, w, h)
                        arg = f"{box} {big}" if random.random() > 0.5 else f"{big} {box}"
                        cases.append((arg, calculate_intersection(box, big)))

    return _shuffled([arg for arg, _ in cases], [str(area) for _, area in cases])


def _random_replacements(frames: str) -> str:
    """Randomly turn misses into fouls and first-ball counts of 5 to 8 into splits."""
    result = []
    for index, char in enumerate(frames):
        if char == "0":
            char, replacement = "-", "F"
        elif char == "-":
            replacement = "F"
        elif char in "5678" and index % 3 == 0:
            replacement = chr(ord("①") + int(char) - 1)
        else:
            result.append(char)
            continue
        result.append(replacement if random.randrange(2) == 0 else char)
    return "".join(result)


def _random_bowling_game() -> tuple[str, int]:
    rolls = [0] * 24
    for roll_num in range(23):
        max_roll = 10 - rolls[roll_num - 1] if roll_num % 2 else 10
        rolls[roll_num] = max(0, random.randint(-1, max_roll))

    if rolls[18] != 10:
        rolls[21] = 0

    arg = ""
    score = 0
    for frame in range(12):
        first, second = rolls[frame * 2], rolls[frame * 2 + 1]
        if frame > 9:
            if rolls[18] + rolls[19] != 10:
                arg += " "
                break
            if frame == 10 and rolls[18] == 10 and rolls[16] == 10:
                score += rolls[20]
            if frame == 11 and (rolls[18] != 10 or rolls[20] != 10):
                break
        elif frame > 0:
            arg += " "
            if rolls[frame * 2 - 2] + rolls[frame * 2 - 1] == 10:
                score += first
                if rolls[frame * 2 - 2] == 10:
                    score += second
                    if frame > 1 and rolls[frame * 2 - 4] == 10:
                        score += first
        score += first + second

        if first == 10:
            if frame < 9:
                arg += " "
            arg += "X"
        else:
            arg += str(first)
            if frame < 10 or (frame == 10 and rolls[18] == 10):
                arg += "/" if first + second == 10 else str(second)

    return arg, score


def ten_pin_bowling() -> tuple[list[str], str]:
    """Bowling score sheets, fixed and random, with their total scores."""
    args, outs = [], []
    for frames, score in _BOWLING_GAMES:
        args.append(_random_replacements(frames))
        outs.append(score)

    for _ in range(_EXTRA_BOWLING_GAMES):
        frames, score = _random_bowling_game()
        args.append(_random_replacements(frames))
        outs.append(str(score))

    return _shuffled(args, outs)