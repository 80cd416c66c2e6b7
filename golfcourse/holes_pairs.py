"""Holes whose cases are fixed argument/answer pairs, served in random order."""

from __future__ import annotations

import itertools
import random
from collections.abc import Iterable

_BRAINFUCK = (
    (
        "+++++++++++++++[>++>+++>++++>+++++>++++++>+++++++>++++++++<<<<<<<-]"
        "+++++++++++++++>>>++++++.>>+++++++.>>-----.<-.<<<<<<-----.",
        "Bash",
    ),
    (
        "+++++++++++++++[>++>+++>++++>+++++>++++++>+++++++>++++++++<<<<<<<-]"
        "+++++++++++++++>>>>-.>+++++++.>>--.<<.<+++++++++.>++.>>----.<.>--.++++.<<<<<<<-----.",
        "JavaScript",
    ),
    (
        "+++++++++++++++++++++++++[>++>+++>++++>+++++<<<<-]"
        "+++++++++++++++++++++++++>>+.>>--------.<---.<<<---------------.",
        "Lua",
    ),
    (
        "+++++++++++++++++++++++++[>++>+++>++++>+++++<<<<-]"
        "+++++++++++++++++++++++++>>+++++.>+.>-----------.------.<<<<---------------.",
        "Perl",
    ),
    (
        "+++++++++++++++[>++>+++>++++>+++++>++++++>+++++++>++++++++<<<<<<<-]"
        "+++++++++++++++>>>>+++++.>>----.>------.------.<<<<<<++.>>------.<<<-----.",
        "Perl 6",
    ),
    (
        "+++++++++++++++++++++[>++>+++>++++>+++++>++++++<<<<<-]"
        "+++++++++++++++++++++>>>----.--------.++++++++.<<<-----------.",
        "PHP",
    ),
    (
        "+++++++++++++++++++++[>++>+++>++++>+++++>++++++<<<<<-]"
        "+++++++++++++++++++++>>>----.>>-----.-----.<-.>-----.-.<<<<<-----------.",
        "Python",
    ),
    (
        "+++++++++++++++++++++[>++>+++>++++>+++++>++++++<<<<<-]"
        "+++++++++++++++++++++>>>--.>>---------.<-------.>++++.<<<<<-----------.",
        "Ruby",
    ),
    (
        "++++++++++++++++++[>++>+++>++++>+++++>++++++>+++++++<<<<<<-]"
        "++++++++++++++++++>>>-----.>>+++.<++++++++++.+.<<<----.>>++++.>>.---.<+.<<<<--------.",
        "Code Golf",
    ),
    (
        ">" * 28
        + "+" * 26
        + "[-<<[+<]+[>]>][<<[[-]-----<]>[>]>]<<["
        + "+" * 96
        + "<]>[.>]++++++++++.",
        "abcdefghijklmnopqrstuvwxyz",
    ),
    (
        "+++++[>+++++[>++>++>+++>+++>++++>++++<<<<<<-]<-]"
        "+++++[>>[>]<[+.<<]>[++.>>>]<[+.<]>[-.>>]<[-.<<<]>[.>]<[+.<]<-]++++++++++.",
        "eL34NfeOL454KdeJ44JOdefePK55gQ67ShfTL787KegJ77JTeghfUK88iV9:XjgYL:;:KfiJ::JYfijgZK;;k[<=]"
        "lh^L=>=KgkJ==J^gklh_K>>m`?@bnicL@A@KhmJ@@JchmnidKAA",
    ),
)

# Whitespace-separated name/value tokens, four colours to a line.
_CSS_COLOR_TABLE = """
AliceBlue #f0f8ff  AntiqueWhite #faebd7  Aqua #00ffff  Aquamarine #7fffd4
Azure #f0ffff  Beige #f5f5dc  Bisque #ffe4c4  Black #000000
BlanchedAlmond #ffebcd  Blue #0000ff  BlueViolet #8a2be2  Brown #a52a2a
Burlywood #deb887  CadetBlue #5f9ea0  Chartreuse #7fff00  Chocolate #d2691e
Coral #ff7f50  CornflowerBlue #6495ed  Cornsilk #fff8dc  Crimson #dc143c
Cyan #00ffff  DarkBlue #00008b  DarkCyan #008b8b  DarkGoldenRod #b8860b
DarkGray #a9a9a9  DarkGreen #006400  DarkGrey #a9a9a9  DarkKhaki #bdb76b
DarkMagenta #8b008b  DarkOliveGreen #556b2f  DarkOrange #ff8c00  DarkOrchid #9932cc
DarkRed #8b0000  DarkSalmon #e9967a  DarkSeaGreen #8fbc8f  DarkSlateBlue #483d8b
DarkSlateGray #2f4f4f  DarkSlateGrey #2f4f4f  DarkTurquoise #00ced1  DarkViolet #9400d3
DeepPink #ff1493  DeepSkyBlue #00bfff  DimGray #696969  DimGrey #696969
DodgerBlue #1e90ff  FireBrick #b22222  FloralWhite #fffaf0  ForestGreen #228b22
Fuchsia #ff00ff  Gainsboro #dcdcdc  GhostWhite #f8f8ff  Gold #ffd700
GoldenRod #daa520  Gray #808080  Green #008000  GreenYellow #adff2f
Grey #808080  Honeydew #f0fff0  HotPink #ff69b4  IndianRed #cd5c5c
Indigo #4b0082  Ivory #fffff0  Khaki #f0e68c  Lavender #e6e6fa
LavenderBlush #fff0f5  LawnGreen #7cfc00  LemonChiffon #fffacd  LightBlue #add8e6
LightCoral #f08080  LightCyan #e0ffff  LightGoldenRodYellow #fafad2  LightGray #d3d3d3
LightGreen #90ee90  LightGrey #d3d3d3  LightPink #ffb6c1  LightSalmon #ffa07a
LightSeaGreen #20b2aa  LightSkyBlue #87cefa  LightSlateGray #778899  LightSlateGrey #778899
LightSteelBlue #b0c4de  LightYellow #ffffe0  Lime #00ff00  LimeGreen #32cd32
Linen #faf0e6  Magenta #ff00ff  Maroon #800000  MediumAquamarine #66cdaa
MediumBlue #0000cd  MediumOrchid #ba55d3  MediumPurple #9370db  MediumSeaGreen #3cb371
MediumSlateBlue #7b68ee  MediumSpringGreen #00fa9a  MediumTurquoise #48d1cc  MediumVioletRed #c71585
MidnightBlue #191970  MintCream #f5fffa  MistyRose #ffe4e1  Moccasin #ffe4b5
NavajoWhite #ffdead  Navy #000080  OldLace #fdf5e6  Olive #808000
OliveDrab #6b8e23  Orange #ffa500  OrangeRed #ff4500  Orchid #da70d6
PaleGoldenRod #eee8aa  PaleGreen #98fb98  PaleTurquoise #afeeee  PaleVioletRed #db7093
PapayaWhip #ffefd5  PeachPuff #ffdab9  Peru #cd853f  Pink #ffc0cb
Plum #dda0dd  PowderBlue #b0e0e6  Purple #800080  RebeccaPurple #663399
Red #ff0000  RosyBrown #bc8f8f  RoyalBlue #4169e1  SaddleBrown #8b4513
Salmon #fa8072  SandyBrown #f4a460  SeaGreen #2e8b57  SeaShell #fff5ee
Sienna #a0522d  Silver #c0c0c0  SkyBlue #87ceeb  SlateBlue #6a5acd
SlateGray #708090  SlateGrey #708090  Snow #fffafa  SpringGreen #00ff7f
SteelBlue #4682b4  Tan #d2b48c  Teal #008080  Thistle #d8bfd8
Tomato #ff6347  Turquoise #40e0d0  Violet #ee82ee  Wheat #f5deb3
White #ffffff  WhiteSmoke #f5f5f5  Yellow #ffff00  YellowGreen #9acd32
"""

# One emoji and the emoticon it stands for per line.
_EMOJI_TABLE = r"""
😀 :-D
🙂 :-)
😐 :-|
🙁 :-(
😕 :-\
😗 :-*
😮 :-O
🤐 :-#
😅 ':-D
😓 ':-(
😂 :'-)
😢 :'-(
😛 :-P
😜 ;-P
😝 X-P
😆 X-)
😇 O:-)
😉 ;-)
😳 :-$
😶 :-
😎 B-)
😏 :-J
😈 }:-)
👿 }:-(
😡 :-@
"""

# Postal code followed by the state's name.
_STATE_TABLE = """
AL Alabama
AK Alaska
AZ Arizona
AR Arkansas
CA California
CO Colorado
CT Connecticut
DE Delaware
DC District of Columbia
FL Florida
GA Georgia
HI Hawaii
ID Idaho
IL Illinois
IN Indiana
IA Iowa
KS Kansas
KY Kentucky
LA Louisiana
ME Maine
MD Maryland
MA Massachusetts
MI Michigan
MN Minnesota
MS Mississippi
MO Missouri
MT Montana
NE Nebraska
NV Nevada
NH New Hampshire
NJ New Jersey
NM New Mexico
NY New York
NC North Carolina
ND North Dakota
OH Ohio
OK Oklahoma
OR Oregon
PA Pennsylvania
RI Rhode Island
SC South Carolina
SD South Dakota
TN Tennessee
TX Texas
UT Utah
VT Vermont
VA Virginia
WA Washington
WV West Virginia
WI Wisconsin
WY Wyoming
"""

_MOVES = ("💎", "📄", "✂", "🖖", "🦎")

# (winner, verb, loser) for every pair of distinct moves.
_RULES = (
    ("📄", "covers", "💎"),
    ("💎", "crushes", "✂"),
    ("🖖", "vaporizes", "💎"),
    ("💎", "crushes", "🦎"),
    ("✂", "cuts", "📄"),
    ("📄", "disproves", "🖖"),
    ("🦎", "eats", "📄"),
    ("🖖", "smashes", "✂"),
    ("✂", "decapitates", "🦎"),
    ("🦎", "poisons", "🖖"),
)


def _css_colors_table() -> dict[str, str]:
    tokens = iter(_CSS_COLOR_TABLE.split())
    return dict(zip(tokens, tokens))


def _emoticons_table() -> dict[str, str]:
    pairs = (line.split(" ", 1) for line in _EMOJI_TABLE.strip().splitlines())
    return {emoticon: emoji for emoji, emoticon in pairs}


def _states_table() -> dict[str, str]:
    pairs = (line.split(" ", 1) for line in _STATE_TABLE.strip().splitlines())
    return {name: code for code, name in pairs}


def _rpssl_games() -> dict[str, str]:
    outcomes = {}
    for winner, verb, loser in _RULES:
        result = f"{winner} {verb} {loser}"
        outcomes[winner, loser] = outcomes[loser, winner] = result
    return {
        first + second: "Tie" if first == second else outcomes[first, second]
        for first, second in itertools.product(_MOVES, repeat=2)
    }


_CSS_COLORS = _css_colors_table()
_EMOTICONS = _emoticons_table()
_STATES = _states_table()
_RPSSL_GAMES = _rpssl_games()


def _shuffled(pairs: Iterable[tuple[str, str]]) -> tuple[list[str], str]:
    """Shuffle (argument, answer) pairs together; answers are newline-joined."""
    shuffled = list(pairs)
    random.shuffle(shuffled)
    args = [arg for arg, _ in shuffled]
    return args, "\n".join(out for _, out in shuffled)


def brainfuck() -> tuple[list[str], str]:
    """Brainfuck programs and the text each prints."""
    return _shuffled(_BRAINFUCK)


def css_colors() -> tuple[list[str], str]:
    """CSS colour names and their hex values."""
    return _shuffled(_CSS_COLORS.items())


def emojify() -> tuple[list[str], str]:
    """Text emoticons and their emoji."""
    return _shuffled(_EMOTICONS.items())


def rock_paper_scissors_spock_lizard() -> tuple[list[str], str]:
    """Every pairing of moves and the outcome of the game."""
    return _shuffled(_RPSSL_GAMES.items())


def united_states() -> tuple[list[str], str]:
    """US state names and their postal abbreviations."""
    return _shuffled(_STATES.items())