import pytest

from pleading.common.errors import DivisionByZero
from pleading.runtime.executor import Executor, State, execute

import unit_utils


def test_halving():
    program = unit_utils.decode_file('testdata/halving.pld')
    outcome = Executor(program).run()

    assert outcome.state == State.HALTED
    assert outcome.unstack == [0, 1, 3, 6, 12, 25, 50, 100]
    assert outcome.steps == 29


def test_product():
    program = unit_utils.decode_file('testdata/product.pld')
    assert execute(program) == [42]


def test_negative_floor():
    program = unit_utils.decode_file('testdata/negative.pld')
    assert execute(program) == [-4]


def test_tally():
    program = unit_utils.decode_file('testdata/tally.pld', tally=True)
    assert execute(program) == [2, 2, 1, 3]


def test_divzero():
    program = unit_utils.decode_file('testdata/divzero.pld')

    with pytest.raises(DivisionByZero) as e:
        execute(program)

    assert e.value.index == 1
