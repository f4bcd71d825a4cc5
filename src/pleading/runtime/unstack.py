from collections import deque
from itertools import islice
from typing import Iterable, Iterator

from pleading.common.errors import StackUnderflow, IndexOutOfRange


class Unstack:
    ''' It's like a stack, but everything happens at the bottom

    Index 0 is the bottom. Iteration and snapshots run bottom-to-top.
    '''
    items: deque[int]

    def __init__(self, values: Iterable[int] = ()):
        self.items = deque(values)

    def __len__(self):
        return len(self.items)

    def __iter__(self) -> Iterator[int]:
        return iter(self.items)

    def __repr__(self):
        return f'Unstack({list(self.items)})'

    def snapshot(self) -> list[int]:
        return list(self.items)

    def require(self, n: int, what: str = 'operation'):
        if len(self.items) < n:
            raise StackUnderflow(
                f'{what}: unstack too small (expected at least {n}, had {len(self.items)})'
            )

    def check_index(self, n: int):
        if n < 0 or n >= len(self.items):
            raise IndexOutOfRange(f'index {n} is out of range for {len(self.items)} values')

    def push_bottom(self, value: int):
        self.items.appendleft(value)

    def pop_bottom(self) -> int:
        self.require(1, 'pop')
        return self.items.popleft()

    def nth_from_bottom(self, n: int) -> int:
        self.check_index(n)
        return self.items[n]

    def swap_with_bottom(self, n: int):
        self.check_index(n)
        self.items[0], self.items[n] = self.items[n], self.items[0]

    def discard(self, n: int):
        self.require(n, 'discard')

        for _ in range(n):
            self.items.popleft()

    def duplicate_bottom(self, n: int):
        self.require(n, 'duplicate')
        block = list(islice(self.items, n))
        # extendleft reverses, so feed it back to front
        self.items.extendleft(reversed(block))
