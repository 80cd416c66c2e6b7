"""Puzzle holes: sudoku boards, poker hands and pangram filtering."""

from __future__ import annotations

import random
import string
from collections.abc import Sequence

_BOARD_SIZE = 9
_BLOCK_SIZE = 3
_CELLS = _BOARD_SIZE * _BOARD_SIZE
_CELLS_TRIED = 51

_TOP = "┏━━━┯━━━┯━━━┳━━━┯━━━┯━━━┳━━━┯━━━┯━━━┓"
_BLOCK_BORDER = "┣━━━┿━━━┿━━━╋━━━┿━━━┿━━━╋━━━┿━━━┿━━━┫"
_ROW_BORDER = "┠───┼───┼───╂───┼───┼───╂───┼───┼───┨"
_BOTTOM = "┗━━━┷━━━┷━━━┻━━━┷━━━┷━━━┻━━━┷━━━┷━━━┛"

_FIRST_CARD = 0x1F0A1
_ROYAL = [0, 9, 10, 11, 12]
_HANDS_PER_TYPE = 3

_PANGRAMS = (
    "6>_4\"gv9lb?2!ic7}=-m'fd30ph].o%@w+[8unk&t1es<az(x;${^y#)q,rj\\5/*:",
    "a large fawn jumped quickly over white zinc boxes.",
    "all questions asked by five watched experts amaze the judge.",
    "a quick movement of the enemy will jeopardize six gunboats.",
    "back in june we delivered oxygen equipment of the same size.",
    "battle of thermopylae: quick javelin grazed wry xerxes.",
    "bored? craving a pub quiz fix? why, just come to the royal oak!",
    "bprsjzfwdqyaxgckilvunthemo",
    "brawny gods just flocked up to quiz and vex him.",
    "cute, kind, jovial, foxy physique, amazing beauty? wowser!",
    "fix problem quickly with galvanized jets.",
    "foxy parsons quiz and cajole the lovably dim wiki-girl.",
    "grumpy wizards make toxic brew for the evil queen and jack.",
    "hey zach, should i program a hex editor in java? why not sql or brainf--k!",
    "how razorback-jumping frogs can level six piqued gymnasts!",
    "jackie will budget for the most expensive zoology equipment.",
    "jack quietly moved up front and seized the big ball of wax.",
    "jim quickly realized that the beautiful gowns are expensive.",
    "just poets wax boldly as kings and queens march over fuzz.",
    "my faxed joke won a pager in the cable tv quiz show.",
    "quirky spud boys can jam after zapping five worthy polysixes.",
    "sixty zips were quickly picked from the woven jute bag.",
    "the quick brown fox jumps over the lazy dog.",
    "the wizard quickly jinxed the gnomes before they vaporized.",
    "when zombies arrive, quickly fax judge pat.",
)


# Sudoku


def print_sudoku(board: Sequence[Sequence[int]]) -> str:
    """Draw a 9x9 board with box-drawing characters; 0 is an empty cell."""
    lines = []
    for i, row in enumerate(board):
        if i == 0:
            lines.append(_TOP)
        elif i % _BLOCK_SIZE == 0:
            lines.append(_BLOCK_BORDER)
        else:
            lines.append(_ROW_BORDER)

        cells = "".join(
            ("┃" if j % _BLOCK_SIZE == 0 else "│") + f" {number if number else ' '} "
            for j, number in enumerate(row)
        )
        lines.append(cells + "┃")
    lines.append(_BOTTOM)
    return "\n".join(lines)


def _check_board(board: Sequence[Sequence[int]]) -> None:
    if len(board) != _BOARD_SIZE or any(len(row) != _BOARD_SIZE for row in board):
        raise ValueError("a sudoku board must be 9 rows of 9 cells")


def _candidates(board: list[list[int]], i: int, j: int) -> list[int]:
    """Numbers that may go in cell (i, j) given the rest of the board."""
    used = set(board[i]) | {row[j] for row in board}
    i0, j0 = i - i % _BLOCK_SIZE, j - j % _BLOCK_SIZE
    used |= {
        board[r][c]
        for r in range(i0, i0 + _BLOCK_SIZE)
        for c in range(j0, j0 + _BLOCK_SIZE)
    }
    return [n for n in range(1, _BOARD_SIZE + 1) if n not in used]


def count_solutions(board: Sequence[Sequence[int]], limit: int = 2) -> int:
    """Count the ways to complete the board, stopping once limit is reached."""
    _check_board(board)
    if limit < 1:
        raise ValueError("limit must be at least 1")

    grid = [list(row) for row in board]
    found = 0

    def search() -> None:
        nonlocal found
        best: tuple[int, int, list[int]] | None = None
        for i, row in enumerate(grid):
            for j, value in enumerate(row):
                if value:
                    continue
                options = _candidates(grid, i, j)
                if best is None or len(options) < len(best[2]):
                    best = (i, j, options)
                    if not options:
                        return
        if best is None:
            found += 1
            return

        i, j, options = best
        for number in options:
            grid[i][j] = number
            search()
            if found >= limit:
                break
        grid[i][j] = 0

    search()
    return min(found, limit)


def _fill(board: list[list[int]], cell: int = 0) -> bool:
    """Fill the board from cell onwards with a random valid completion."""
    if cell == _CELLS:
        return True
    i, j = divmod(cell, _BOARD_SIZE)
    options = _candidates(board, i, j)
    random.shuffle(options)
    for number in options:
        board[i][j] = number
        if _fill(board, cell + 1):
            return True
    board[i][j] = 0
    return False


def sudoku(v2: bool) -> tuple[list[str], str]:
    """A puzzle with a unique solution and that solution drawn as a grid.

    The puzzle is given as nine rows of digits and underscores, or, with v2,
    drawn as a grid like the solution.
    """
    board = [[0] * _BOARD_SIZE for _ in range(_BOARD_SIZE)]
    _fill(board)
    out = print_sudoku(board)

    for cell in random.sample(range(_CELLS), _CELLS)[:_CELLS_TRIED]:
        i, j = divmod(cell, _BOARD_SIZE)
        original = board[i][j]
        board[i][j] = 0
        if count_solutions(board, 2) >= 2:
            board[i][j] = original

    if v2:
        return [print_sudoku(board)], out
    args = ["".join(str(n) if n else "_" for n in row) for row in board]
    return args, out


# Poker


def card_rune(number: int, suit: int) -> str:
    """The playing-card character for a rank (0 is the ace) and suit."""
    if number > 10:
        number += 1  # skip the knight
    return chr(_FIRST_CARD + 16 * suit + number)


def straight_check(numbers: Sequence[int]) -> bool:
    """Whether five ranks form a straight, the ace counting high or low."""
    ranks = sorted(numbers)
    if ranks == _ROYAL:
        return True
    return all(b - a == 1 for a, b in zip(ranks, ranks[1:]))


def _perm(n: int) -> list[int]:
    return random.sample(range(n), n)


def _suit() -> int:
    return random.randrange(4)


def _poker_hands() -> list[tuple[str, list[str]]]:
    hands: list[tuple[str, list[str]]] = []

    def add(kind: str, cards: list[tuple[int, int]]) -> None:
        hands.append((kind, [card_rune(number, suit) for number, suit in cards]))

    made = 0
    while made < _HANDS_PER_TYPE:
        cards = _perm(13)
        if straight_check(cards[:5]):
            continue
        suits = _perm(4)
        add("High Card", [
            (cards[0], suits[0]),
            (cards[1], suits[1]),
            (cards[2], _suit()),
            (cards[3], _suit()),
            (cards[4], _suit()),
        ])
        made += 1

    for _ in range(_HANDS_PER_TYPE):
        cards, suits = _perm(13), _perm(4)
        add("Pair", [
            (cards[0], suits[0]),
            (cards[0], suits[1]),
            (cards[1], _suit()),
            (cards[2], _suit()),
            (cards[3], _suit()),
        ])

    for _ in range(_HANDS_PER_TYPE):
        cards, suits1, suits2 = _perm(13), _perm(4), _perm(4)
        add("Two Pair", [
            (cards[0], suits1[0]),
            (cards[0], suits1[1]),
            (cards[1], suits2[0]),
            (cards[1], suits2[1]),
            (cards[2], _suit()),
        ])

    for _ in range(_HANDS_PER_TYPE):
        cards, suits = _perm(13), _perm(4)
        add("Three of a Kind", [
            (cards[0], suits[0]),
            (cards[0], suits[1]),
            (cards[0], suits[2]),
            (cards[1], _suit()),
            (cards[2], _suit()),
        ])

    for _ in range(_HANDS_PER_TYPE):
        cards = _perm(13)
        add("Four of a Kind", [(cards[0], suit) for suit in range(4)] + [(cards[1], _suit())])

    for _ in range(_HANDS_PER_TYPE):
        cards, suits1, suits2 = _perm(13), _perm(4), _perm(4)
        add("Full House", [
            (cards[0], suits1[0]),
            (cards[0], suits1[1]),
            (cards[0], suits1[2]),
            (cards[1], suits2[0]),
            (cards[1], suits2[1]),
        ])

    made = 0
    while made < _HANDS_PER_TYPE:
        cards = _perm(13)
        if straight_check(cards[:5]):
            continue
        suit = _suit()
        add("Flush", [(card, suit) for card in cards[:5]])
        made += 1

    low_cards = _perm(9)
    low_cards[0] = 0  # at least one low ace
    low_cards[1] = 9  # at least one high ace
    for low in low_cards[:_HANDS_PER_TYPE]:
        suits = _perm(4)
        add("Straight", [
            (low, suits[0]),
            (low + 1, suits[1]),
            (low + 2, _suit()),
            (low + 3, _suit()),
            ((low + 4) % 13, _suit()),
        ])

    low_cards = _perm(9)
    low_cards[0] = 0  # at least one low ace
    low_cards[1] = 8  # nine to king, easily mistaken for a royal flush
    for low in low_cards[:_HANDS_PER_TYPE]:
        suit = _suit()
        add("Straight Flush", [(card % 13, suit) for card in range(low, low + 5)])

    for suit in range(4):
        add("Royal Flush", [(card % 13, suit) for card in range(9, 14)])

    # Code points spanning at most 13 that are nonetheless not flushes.
    for suit in range(3):
        start = 12 - random.randrange(3)
        end_offset = 4 + random.randrange(7)
        cards = [(start, suit)]
        for offset in _perm(end_offset)[:4]:
            card = start + offset + 1
            cards.append((card % 13, suit + card // 13))
        add("High Card", cards)

    # A wrap-around run that is not a straight.
    for suit in range(3):
        add("High Card", [(12, suit)] + [(card, suit + 1) for card in range(4)])

    return hands


def poker() -> tuple[list[str], str]:
    """Five-card hands as card characters, each with the name of its ranking."""
    hands = _poker_hands()
    random.shuffle(hands)

    args = []
    kinds = []
    for kind, cards in hands:
        random.shuffle(cards)
        args.append("".join(cards))
        kinds.append(kind)
    return args, "\n".join(kinds)


# Pangram grep


def is_pangram(text: str) -> bool:
    """Whether every letter a to z appears, in either case."""
    present = set(text)
    return all(
        letter in present or letter.upper() in present
        for letter in string.ascii_lowercase
    )


def _replace_letter(chars: list[str], old: str, new: str) -> None:
    chars[:] = [new if char == old else char for char in chars]


def _random_letter() -> str:
    return random.choice(string.ascii_lowercase)


def pangram_grep() -> tuple[list[str], str]:
    """Pangrams and near-misses; the answer lists the true pangrams in order."""
    originals = [list(text) for text in _PANGRAMS]
    random.shuffle(originals)

    pangrams = list(originals)
    for i, original in enumerate(originals):
        clone = list(original)

        old = chr(ord("a") + i)
        new = chr(ord("a") + (i + random.randint(1, 25)) % 26)
        _replace_letter(clone, old, new)

        for _ in range(random.randrange(5)):
            _replace_letter(clone, _random_letter(), _random_letter())

        pangrams.append(clone)

    for chars in pangrams:
        chars[:] = [
            char.upper() if "a" <= char <= "z" and random.randrange(2) == 0 else char
            for char in chars
        ]

    for chars in pangrams:
        for _ in range(random.randrange(8) - 4):
            extra = chr(ord("{") + random.randrange(4))
            chars.insert(random.randrange(len(chars)), extra)

    random.shuffle(pangrams)

    args = ["".join(chars) for chars in pangrams]
    return args, "\n".join(text for text in args if is_pangram(text))