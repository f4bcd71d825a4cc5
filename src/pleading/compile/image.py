''' Binary program image

    'PLDG' | version:B | count:I | count * (opcode:B operand:q)

All fields are big-endian.
'''
import struct
import logging as lg

from pleading.common.ops import Op, operand_range
from pleading.common.errors import ImageError
from pleading.lang.program import Instruction, Program


MAGIC = b'PLDG'
VERSION = 1

HEADER_FMT = '>4sBI'
INSTRUCTION_FMT = '>Bq'
HEADER_SIZE = struct.calcsize(HEADER_FMT)
INSTRUCTION_SIZE = struct.calcsize(INSTRUCTION_FMT)


def is_image(data: bytes) -> bool:
    return data.startswith(MAGIC)


def encode_program(program: Program) -> bytes:
    bytestr = bytearray(struct.pack(HEADER_FMT, MAGIC, VERSION, len(program)))

    for instruction in program:
        lg.debug(f'Issuing {instruction}')
        bytestr += struct.pack(INSTRUCTION_FMT, instruction.opcode, instruction.operand)

    return bytes(bytestr)


def decode_image(data: bytes) -> Program:
    if len(data) < HEADER_SIZE:
        raise ImageError(f'Image is truncated ({len(data)} bytes)')

    (magic, version, count) = struct.unpack_from(HEADER_FMT, data)

    if magic != MAGIC:
        raise ImageError(f'Bad image magic {magic!r}')

    if version != VERSION:
        raise ImageError(f'Unsupported image version {version}')

    expected = HEADER_SIZE + count * INSTRUCTION_SIZE

    if len(data) != expected:
        raise ImageError(f'Image size mismatch (expected {expected} bytes, got {len(data)})')

    instructions = []

    for i in range(count):
        offset = HEADER_SIZE + i * INSTRUCTION_SIZE
        (code, operand) = struct.unpack_from(INSTRUCTION_FMT, data, offset)

        try:
            op = Op(code)
        except ValueError:
            raise ImageError(f'Unknown opcode 0x{code:X} at instruction {i}') from None

        (low, _) = operand_range(op)

        if operand < low:
            raise ImageError(f'Negative operand {operand} for {op.name} at instruction {i}')

        instructions.append(Instruction(op, operand))

    return Program(instructions)
