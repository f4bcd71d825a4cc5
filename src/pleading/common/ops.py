from enum import IntEnum


class Op(IntEnum):
    PUSH = 0x01         # N -> bottom
    FLOORDIV = 0x02     # pop v; floor(v / N) -> bottom
    SWAP = 0x03         # U[N] <-> U[0]
    DISCARD2MUL = 0x04  # pop a, b; discard N; a * b -> bottom
    DUPLICATE = 0x05    # U[0:N] -> bottom
    LOOPBACK = 0x06     # pop v; if v .ne 0 jmp IP - N


# Operands of these opcodes are values, the rest are counts or distances
SIGNED_OPERANDS = frozenset([Op.PUSH, Op.FLOORDIV])

WORD_BITS = 64
WORD_MIN = -(1 << (WORD_BITS - 1))
WORD_MAX = (1 << (WORD_BITS - 1)) - 1


def operand_range(op: Op) -> tuple[int, int]:
    if op in SIGNED_OPERANDS:
        return (WORD_MIN, WORD_MAX)

    return (0, WORD_MAX)


def wrap(value: int) -> int:
    ''' Wraps an arbitrary integer into the signed machine word '''
    return ((value - WORD_MIN) % (1 << WORD_BITS)) + WORD_MIN


def by_name(name: str) -> Op:
    try:
        return Op[name.upper()]
    except KeyError:
        raise KeyError(f'Unknown operation {name}') from None
