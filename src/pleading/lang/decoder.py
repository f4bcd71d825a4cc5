import logging as lg

import pyparsing as pp

import pleading.common.ops as ops
from pleading.common.dialect import Dialect, DEFAULT
from pleading.common.errors import DecodeError
from pleading.lang.grammar import Token, build_grammar
from pleading.lang.program import Instruction, Program


class Decoder:
    ''' Collects instructions from the parsed token stream '''
    instructions: list[Instruction]

    def __init__(self, dialect: Dialect):
        self.dialect = dialect
        self.instructions = list()

    def operand_value(self, token: Token) -> int:
        if token.operand[0] in '+-0123456789':
            return int(token.operand)

        # Tally
        return len(token.operand)

    # Handlers
    def on_instruction(self, token: Token):
        op = self.dialect.markers[token.text]
        value = self.operand_value(token)
        (low, high) = ops.operand_range(op)

        if value < low or value > high:
            raise DecodeError(
                f'Operand {value} of {token.text} is out of range [{low}, {high}]',
                token.line, token.column
            )

        lg.debug(f'Decoded {op.name} {value}')
        self.instructions.append(Instruction(op, value))

    def on_bad_operand(self, token: Token):
        if not token.operand:
            raise DecodeError(f'Missing operand after {token.text}', token.line, token.column)

        raise DecodeError(
            f'Invalid operand {token.operand!r} after {token.text}',
            token.line, token.column
        )

    def on_unknown(self, token: Token):
        raise DecodeError(f'Unrecognized symbol {token.text!r}', token.line, token.column)


def decode(source: str, dialect: Dialect = DEFAULT, tally: bool = False) -> Program:
    decoder = Decoder(dialect)
    grammar = build_grammar(Decoder, dialect, tally)

    try:
        actions = grammar.parse_string(source, parse_all=True)
    except pp.ParseBaseException as e:
        found = repr(source[e.loc]) if e.loc < len(source) else 'end of text'
        raise DecodeError(f'Unexpected {found}', e.lineno, e.col) from e

    for (func, token) in actions:  # type: ignore
        func(decoder, token)

    lg.info(f'Decoded {len(decoder.instructions)} instructions ({dialect.name})')
    return Program(decoder.instructions)
