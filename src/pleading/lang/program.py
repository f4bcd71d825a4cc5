from dataclasses import dataclass
from typing import Iterable, Iterator

from pleading.common.ops import Op


@dataclass(frozen=True)
class Instruction:
    opcode: Op
    operand: int

    def __str__(self):
        return f'{self.opcode.name} {self.operand}'


class Program:
    ''' Immutable sequence of decoded instructions, addressed by index '''
    instructions: tuple[Instruction, ...]

    def __init__(self, instructions: Iterable[Instruction] = ()):
        self.instructions = tuple(instructions)

    def __len__(self):
        return len(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __eq__(self, other):
        if not isinstance(other, Program):
            return NotImplemented

        return self.instructions == other.instructions

    def __repr__(self):
        return f'Program({list(self.instructions)!r})'
