''' Source grammar

An instruction is a marker immediately followed by its operand. Anything
that is not an instruction or a comment is still matched, so the decoder
can report it with a position instead of a bare parse failure.
'''
from dataclasses import dataclass
from typing import Any
import re

import pyparsing as pp

from pleading.common.dialect import Dialect


@dataclass
class Token:
    text: str
    operand: str
    line: int
    column: int


def g_action(func: Any):
    def action(s: str, loc: int, toks: pp.ParseResults):
        text = toks[0]
        operand = ''.join(toks[1:])
        return (func, Token(text, operand, pp.lineno(loc, s), pp.col(loc, s)))

    return action


def g_charset(chars: set[str]) -> str:
    return ''.join(re.escape(c) for c in sorted(chars))


def build_grammar(handlers: Any, dialect: Dialect, tally: bool = False) -> pp.ParserElement:
    glyphs = g_charset(dialect.glyphs())

    marker = pp.one_of(list(dialect.markers))

    # Numbers may run straight into the next marker, tallies may not
    number = pp.Regex(rf'[+-]?[0-9]++(?![^\s#{glyphs}])')
    operand: pp.ParserElement = number

    if tally:
        operand = number | pp.Regex(rf'[{glyphs}]++(?![^\s#])')

    operand = operand.leave_whitespace()

    junk = pp.Regex(r'\S+')

    instruction = (marker + operand).set_parse_action(g_action(handlers.on_instruction))
    bad_operand = (marker + pp.Optional(junk.copy().leave_whitespace())) \
        .set_parse_action(g_action(handlers.on_bad_operand))
    unknown = junk.copy().set_parse_action(g_action(handlers.on_unknown))

    comment = pp.Suppress(pp.Regex(r'#[^\n]*'))

    statement = comment | instruction | bad_operand | unknown
    program = pp.ZeroOrMore(statement) + pp.StringEnd()
    program.parse_with_tabs()

    return program
