from dataclasses import dataclass
from enum import Enum
import logging as lg

import pleading.common.ops as ops
from pleading.common.ops import Op
from pleading.common.errors import Fault, DivisionByZero, InvalidJumpTarget, StepLimitExceeded
from pleading.lang.program import Program
from pleading.runtime.unstack import Unstack


class State(Enum):
    RUNNING = 'running'
    HALTED = 'halted'
    FAULTED = 'faulted'


@dataclass
class Outcome:
    state: State
    unstack: list[int]
    steps: int
    fault: Fault | None = None

    @property
    def halted(self) -> bool:
        return self.state == State.HALTED


class Executor():
    program: Program
    unstack: Unstack
    cursor: int         # Next instruction to fetch
    index: int          # Instruction being executed
    steps: int
    state: State
    fault: Fault | None

    def __init__(self, program: Program):
        self.program = program
        self.unstack = Unstack()
        self.cursor = 0
        self.index = 0
        self.steps = 0
        self.fault = None
        self.state = State.RUNNING if len(program) > 0 else State.HALTED

    # - Helpers - #

    def debug_dump(self):
        lg.debug(f'IP:{self.cursor} STEPS:{self.steps} U:{self.unstack.snapshot()}')

    def outcome(self) -> Outcome:
        return Outcome(self.state, self.unstack.snapshot(), self.steps, self.fault)

    # - Operations - #

    def push(self, n: int):
        self.unstack.push_bottom(n)

    def floordiv(self, n: int):
        self.unstack.require(1, 'floordiv')

        if n == 0:
            raise DivisionByZero('floordiv: division by zero')

        v = self.unstack.pop_bottom()
        self.unstack.push_bottom(ops.wrap(v // n))

    def swap(self, n: int):
        self.unstack.swap_with_bottom(n)

    def discard2mul(self, n: int):
        self.unstack.require(2 + n, 'discard2mul')
        a = self.unstack.pop_bottom()
        b = self.unstack.pop_bottom()
        self.unstack.discard(n)
        self.unstack.push_bottom(ops.wrap(a * b))

    def duplicate(self, n: int):
        self.unstack.duplicate_bottom(n)

    def loopback(self, n: int):
        v = self.unstack.pop_bottom()

        if v == 0:
            return

        target = self.index - n

        if target < 0:
            raise InvalidJumpTarget(f'loopback: jump target {target} is before the program start')

        self.cursor = target

    HANDLERS = {
        Op.PUSH: push,
        Op.FLOORDIV: floordiv,
        Op.SWAP: swap,
        Op.DISCARD2MUL: discard2mul,
        Op.DUPLICATE: duplicate,
        Op.LOOPBACK: loopback,
    }

    # -- Implementation -- #

    def step(self) -> bool:
        ''' Executes one instruction, returns False once the machine has stopped '''
        if self.state != State.RUNNING:
            return False

        self.index = self.cursor
        instruction = self.program[self.index]
        self.cursor += 1
        self.steps += 1

        handler = self.HANDLERS[instruction.opcode]

        try:
            handler(self, instruction.operand)
        except Fault as e:
            self.state = State.FAULTED
            self.fault = e.locate(self.index, self.unstack.snapshot())
            raise

        lg.debug(f'{self.index}: {instruction}')
        self.debug_dump()

        if self.cursor >= len(self.program):
            self.state = State.HALTED

        return self.state == State.RUNNING

    def run(self, max_steps: int | None = None) -> Outcome:
        try:
            while self.state == State.RUNNING:
                if max_steps is not None and self.steps >= max_steps:
                    raise StepLimitExceeded(max_steps, self.cursor, self.unstack.snapshot())

                self.step()

        except Fault as e:
            lg.info(f'{e.kind}: {e}')

        return self.outcome()


def execute(program: Program, max_steps: int | None = None) -> list[int]:
    ''' Runs the program to completion, returns the final unstack bottom-to-top '''
    outcome = Executor(program).run(max_steps)

    if outcome.fault is not None:
        raise outcome.fault

    return outcome.unstack
