from app.services.enigma.alphabet import Alphabet
from app.services.enigma.cycles import parse_cycles


class Permutation:
    """
    A permutation of the indices of an alphabet, written in cycle notation.

    Each cycle maps a symbol to the next one in the cycle, the last wrapping
    to the first. Symbols that appear in no cycle map to themselves. Lookup
    tables for both directions are built once at construction.
    """

    def __init__(self, cycles: str, alphabet: Alphabet):
        self._alphabet = alphabet
        self._cycles = parse_cycles(cycles, alphabet)

        size = alphabet.size()
        forward = list(range(size))
        inverse = list(range(size))
        for cycle in self._cycles:
            for pos, index in enumerate(cycle):
                target = cycle[(pos + 1) % len(cycle)]
                forward[index] = target
                inverse[target] = index

        self._forward = tuple(forward)
        self._inverse = tuple(inverse)

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def cycles(self) -> list[tuple[int, ...]]:
        return list(self._cycles)

    def size(self) -> int:
        """Return the size of the alphabet I permute."""
        return self._alphabet.size()

    def wrap(self, p: int) -> int:
        """Return P modulo size(), always in [0, size())."""
        return p % self.size()

    def permute(self, p: int | str) -> int | str:
        """Apply this permutation to an index (mod size) or a symbol."""
        if isinstance(p, str):
            return self._alphabet.to_char(self._forward[self._alphabet.to_int(p)])
        return self._forward[self.wrap(p)]

    def invert(self, c: int | str) -> int | str:
        """Apply the inverse of this permutation to an index or a symbol."""
        if isinstance(c, str):
            return self._alphabet.to_char(self._inverse[self._alphabet.to_int(c)])
        return self._inverse[self.wrap(c)]

    def derangement(self) -> bool:
        """Return True iff no index maps to itself."""
        return all(target != index for index, target in enumerate(self._forward))

    @classmethod
    def identity(cls, alphabet: Alphabet) -> "Permutation":
        return cls("", alphabet)

    def __str__(self) -> str:
        return " ".join(
            "(" + "".join(self._alphabet.to_char(i) for i in cycle) + ")"
            for cycle in self._cycles
        )

    def __repr__(self) -> str:
        return f"Permutation({str(self)!r}, {self._alphabet!r})"
