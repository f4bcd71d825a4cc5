class PleadingError(Exception):
    kind = 'Error'


class DecodeError(PleadingError):
    ''' Malformed source text, raised before anything runs '''
    kind = 'SyntaxError'

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.message = message
        self.line = line
        self.column = column

        if line is not None:
            message = f'{message} (line {line}, column {column})'

        super().__init__(message)


class DialectError(PleadingError):
    kind = 'DialectError'


class ImageError(PleadingError):
    kind = 'ImageError'


class Fault(PleadingError):
    ''' Run-time fault, fatal to the run

    Primitives raise faults without a location; the executor fills in the
    instruction index and the unstack snapshot before re-raising.
    '''
    index: int | None
    unstack: list[int] | None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.index = None
        self.unstack = None

    def locate(self, index: int, unstack: list[int]):
        self.index = index
        self.unstack = unstack
        return self

    def __str__(self):
        if self.index is None:
            return self.message

        return f'{self.message} at {self.index}'


class StackUnderflow(Fault):
    kind = 'StackUnderflow'


class IndexOutOfRange(Fault):
    kind = 'IndexOutOfRange'


class DivisionByZero(Fault):
    kind = 'DivisionByZero'


class InvalidJumpTarget(Fault):
    kind = 'InvalidJumpTarget'


class StepLimitExceeded(PleadingError):
    ''' Raised by the embedding loop, not by the machine itself '''
    kind = 'StepLimitExceeded'

    def __init__(self, steps: int, index: int, unstack: list[int]):
        super().__init__(f'Step limit of {steps} exceeded at {index}')
        self.steps = steps
        self.index = index
        self.unstack = unstack
