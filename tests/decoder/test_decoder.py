import pytest

from pleading.common.ops import Op, WORD_MAX, WORD_MIN
from pleading.common.dialect import ASCII
from pleading.common.errors import DecodeError
from pleading.lang.decoder import decode

import unit_utils
from unit_utils import make_program


def test_all_markers():
    program = decode('🥺5 💖2 👉👈1 💓0 ✨3 🫂4')

    assert program == make_program(
        (Op.PUSH, 5),
        (Op.FLOORDIV, 2),
        (Op.SWAP, 1),
        (Op.DISCARD2MUL, 0),
        (Op.DUPLICATE, 3),
        (Op.LOOPBACK, 4),
    )


def test_signed_operands():
    program = decode('🥺-7 💖+2')
    assert program == make_program((Op.PUSH, -7), (Op.FLOORDIV, 2))


def test_adjacent_tokens():
    assert decode('🥺5🥺3') == make_program((Op.PUSH, 5), (Op.PUSH, 3))


def test_comments_and_blank_lines():
    source = '# header\n\n🥺1  # trailing\n\t✨1\n'
    assert decode(source) == make_program((Op.PUSH, 1), (Op.DUPLICATE, 1))


def test_empty_source():
    assert len(decode('')) == 0


def test_unknown_symbol():
    with pytest.raises(DecodeError) as e:
        unit_utils.decode_file('testdata/badsymbol.pld')

    assert e.value.kind == 'SyntaxError'
    assert e.value.line == 2
    assert e.value.column == 4
    assert '🙂3' in e.value.message


def test_missing_operand():
    with pytest.raises(DecodeError, match='Missing operand'):
        decode('🥺 5')


def test_missing_operand_at_end():
    with pytest.raises(DecodeError, match='Missing operand'):
        decode('🥺1 ✨')


def test_invalid_operand():
    with pytest.raises(DecodeError, match='Invalid operand'):
        decode('🥺5.5')


def test_negative_count_rejected():
    with pytest.raises(DecodeError, match='out of range'):
        decode('🥺1 ✨-1')


def test_operand_range():
    program = decode(f'🥺{WORD_MAX} 🥺{WORD_MIN}')
    assert program == make_program((Op.PUSH, WORD_MAX), (Op.PUSH, WORD_MIN))

    with pytest.raises(DecodeError, match='out of range'):
        decode(f'🥺{WORD_MAX + 1}')

    with pytest.raises(DecodeError, match='out of range'):
        decode(f'🫂{WORD_MAX + 1}')


def test_tally_needs_flag():
    with pytest.raises(DecodeError, match='Invalid operand'):
        decode('🥺🥺🥺')


def test_tally_operands():
    program = unit_utils.decode_file('testdata/tally.pld', tally=True)

    assert program == make_program(
        (Op.PUSH, 2),
        (Op.PUSH, 1),
        (Op.PUSH, 3),
        (Op.SWAP, 2),
        (Op.DUPLICATE, 1),
    )


def test_ascii_dialect():
    program = decode('push5 dup1 div2 hug3', ASCII)

    assert program == make_program(
        (Op.PUSH, 5),
        (Op.DUPLICATE, 1),
        (Op.FLOORDIV, 2),
        (Op.LOOPBACK, 3),
    )


def test_markers_of_other_dialect_rejected():
    with pytest.raises(DecodeError, match='Unrecognized symbol'):
        decode('push5')


@pytest.mark.parametrize('separator', ['\f', '\v', '\u00a0', '\u3000'])
def test_unusual_whitespace_rejected(separator):
    with pytest.raises(DecodeError) as e:
        decode(f'🥺5{separator}🥺3')

    assert e.value.kind == 'SyntaxError'
    assert e.value.line == 1
    assert e.value.column == 3
