import re
from collections import defaultdict

from golfcourse.holes_pairs import (
    brainfuck,
    css_colors,
    emojify,
    rock_paper_scissors_spock_lizard,
    united_states,
)


def _pairs(args, out):
    outs = out.split("\n")
    assert len(args) == len(outs)
    return dict(zip(args, outs))


def _run_brainfuck(program):
    jumps = {}
    stack = []
    for pos, op in enumerate(program):
        if op == "[":
            stack.append(pos)
        elif op == "]":
            start = stack.pop()
            jumps[start] = pos
            jumps[pos] = start
    tape = defaultdict(int)
    ptr = pc = 0
    output = []
    while pc < len(program):
        op = program[pc]
        if op == "+":
            tape[ptr] = (tape[ptr] + 1) % 256
        elif op == "-":
            tape[ptr] = (tape[ptr] - 1) % 256
        elif op == ">":
            ptr += 1
        elif op == "<":
            ptr -= 1
        elif op == ".":
            output.append(chr(tape[ptr]))
        elif op == "[" and tape[ptr] == 0:
            pc = jumps[pc]
        elif op == "]" and tape[ptr] != 0:
            pc = jumps[pc]
        pc += 1
    return "".join(output)


def test_arguments_are_unique():
    results = [
        brainfuck(),
        css_colors(),
        emojify(),
        rock_paper_scissors_spock_lizard(),
        united_states(),
    ]
    for args, _ in results:
        assert len(args) == len(set(args))


def test_pairing_is_stable_across_shuffles():
    assert _pairs(*brainfuck()) == _pairs(*brainfuck())
    assert _pairs(*css_colors()) == _pairs(*css_colors())
    assert _pairs(*emojify()) == _pairs(*emojify())
    assert _pairs(*rock_paper_scissors_spock_lizard()) == _pairs(
        *rock_paper_scissors_spock_lizard()
    )
    assert _pairs(*united_states()) == _pairs(*united_states())


def test_brainfuck_programs_print_their_answers():
    pairs = _pairs(*brainfuck())
    assert len(pairs) == 11
    for program, expected in pairs.items():
        assert _run_brainfuck(program).rstrip("\n") == expected


def test_brainfuck_answers():
    _, out = brainfuck()
    names = set(out.split("\n"))
    assert {"Bash", "JavaScript", "Perl 6", "Code Golf", "abcdefghijklmnopqrstuvwxyz"} <= names


def test_css_colors_values():
    pairs = _pairs(*css_colors())
    assert len(pairs) == 148
    assert pairs["AliceBlue"] == "#f0f8ff"
    assert pairs["RebeccaPurple"] == "#663399"
    assert pairs["YellowGreen"] == "#9acd32"
    assert pairs["Aqua"] == pairs["Cyan"]
    assert pairs["DarkGray"] == pairs["DarkGrey"]
    assert all(re.fullmatch(r"#[0-9a-f]{6}", value) for value in pairs.values())


def test_emojify_values():
    pairs = _pairs(*emojify())
    assert len(pairs) == 25
    assert pairs[":-D"] == "😀"
    assert pairs[":-\\"] == "😕"
    assert pairs[":-"] == "😶"
    assert pairs["}:-("] == "👿"
    assert len(set(pairs.values())) == 25


def test_rock_paper_scissors_spock_lizard():
    pairs = _pairs(*rock_paper_scissors_spock_lizard())
    assert len(pairs) == 25
    for game, result in pairs.items():
        first, second = game[0], game[1:]
        if first == second:
            assert result == "Tie"
        else:
            assert first in result and second in result
    assert pairs["💎📄"] == pairs["📄💎"] == "📄 covers 💎"
    assert pairs["✂🦎"] == "✂ decapitates 🦎"
    assert pairs["🖖🦎"] == "🦎 poisons 🖖"


def test_united_states():
    pairs = _pairs(*united_states())
    assert len(pairs) == 51
    assert pairs["New York"] == "NY"
    assert pairs["District of Columbia"] == "DC"
    assert len(set(pairs.values())) == 51
    assert all(re.fullmatch(r"[A-Z]{2}", code) for code in pairs.values())