from pathlib import Path

from pleading.common.ops import Op
from pleading.common.dialect import DEFAULT, Dialect
from pleading.lang.decoder import decode
from pleading.lang.program import Instruction, Program


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_file(filename: str) -> str:
    return find_file(filename).read_text(encoding='utf-8')


def decode_file(filename: str, dialect: Dialect = DEFAULT, tally: bool = False) -> Program:
    return decode(load_file(filename), dialect, tally)


def make_program(*pairs: tuple[Op, int]) -> Program:
    return Program(Instruction(op, operand) for (op, operand) in pairs)
