"""Hash dictionaries of integer keys: separate chaining and open addressing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from algolab.linkedlist import LinkedList

HashFunction = Callable[[int], int]

_DIVISOR = 17


@dataclass
class Pair:
    """A key and the value stored under it."""

    key: int
    value: int

    def __str__(self) -> str:
        return f"<{self.key} {self.value}>"


def division(key: int) -> int:
    """Division-method hash: the key modulo a fixed divisor."""
    return key % _DIVISOR


class TableFullError(Exception):
    """Raised when open addressing finds no slot for a key."""


class ChainedDict:
    """Hash table resolving collisions with a linked list per slot."""

    def __init__(self, size: int, hash_func: HashFunction = division) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self.size = size
        self.hash_func = hash_func
        self._chains = [LinkedList() for _ in range(size)]

    def _chain(self, key: int) -> LinkedList:
        return self._chains[self.hash_func(key) % self.size]

    def insert(self, key: int, value: int) -> None:
        """Store value under key, replacing any previous value."""
        chain = self._chain(key)
        for pair in chain:
            if pair.key == key:
                pair.value = value
                return
        chain.insert(chain.last(), Pair(key, value))

    def search(self, key: int) -> Optional[Pair]:
        """Return the pair stored under key, or None."""
        return next((pair for pair in self._chain(key) if pair.key == key), None)

    def delete(self, key: int) -> None:
        """Remove key; raise KeyError if it is absent."""
        chain = self._chain(key)
        for node in chain.nodes():
            if node.value.key == key:
                chain.delete(node)
                return
        raise KeyError(key)

    def dump(self) -> str:
        """Describe every non-empty chain, one pair per line."""
        lines: list[str] = []
        for index, chain in enumerate(self._chains):
            if not chain.is_empty():
                lines.append(f"List #{index}:")
                lines.extend(str(pair) for pair in chain)
        return "".join(line + "\n" for line in lines)


class OpenAddressingDict:
    """Hash table storing pairs directly in its cells, probing linearly.

    ``last_tries`` holds the number of cells examined by the latest
    insert or search.
    """

    def __init__(self, size: int, hash_func: HashFunction = division) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self.size = size
        self.hash_func = hash_func
        self._cells: list[Optional[Pair]] = [None] * size
        self.last_tries = 0

    def _step(self, key: int) -> int:
        return 0

    def probe(self, start: int, step: int, attempt: int) -> int:
        """Cell examined on the given attempt (0 is the home cell)."""
        return (start + attempt) % self.size

    def _locate(self, key: int) -> int:
        start = self.hash_func(key) % self.size
        step = self._step(key)
        tries = 1
        index = start
        while (
            (cell := self._cells[index]) is not None
            and cell.key != key
            and tries < self.size
        ):
            index = self.probe(start, step, tries)
            tries += 1
        self.last_tries = tries
        return index

    def insert(self, key: int, value: int) -> None:
        """Store value under key; raise TableFullError when probing gives up."""
        index = self._locate(key)
        if self.last_tries == self.size:
            raise TableFullError(f"no free cell for key {key}")
        cell = self._cells[index]
        if cell is not None and cell.key == key:
            cell.value = value
        else:
            self._cells[index] = Pair(key, value)

    def search(self, key: int) -> Optional[Pair]:
        """Return the pair stored under key, or None."""
        cell = self._cells[self._locate(key)]
        if cell is not None and cell.key == key:
            return cell
        return None

    def dump(self) -> str:
        """Describe every occupied cell."""
        lines: list[str] = []
        for index, cell in enumerate(self._cells):
            if cell is not None:
                lines.append(f"Cell #{index}:")
                lines.append(str(cell))
        return "".join(line + "\n" for line in lines)


class LinearProbingDict(OpenAddressingDict):
    """Open addressing stepping one cell at a time."""

    def probe(self, start: int, step: int, attempt: int) -> int:
        return (start + attempt) % self.size


class QuadraticProbingDict(OpenAddressingDict):
    """Open addressing with offsets 1, 4, 9, ... from the home cell."""

    def probe(self, start: int, step: int, attempt: int) -> int:
        return (start + attempt * attempt) % self.size


class DoubleHashingDict(OpenAddressingDict):
    """Open addressing whose step comes from a second hash function."""

    def __init__(
        self,
        size: int,
        hash_func: HashFunction = division,
        step_func: HashFunction = division,
    ) -> None:
        super().__init__(size, hash_func)
        self.step_func = step_func

    def _step(self, key: int) -> int:
        return self.step_func(key) % self.size

    def probe(self, start: int, step: int, attempt: int) -> int:
        return (start + attempt * step) % self.size