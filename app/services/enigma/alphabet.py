import string
from typing import ClassVar

from app.core.exceptions import AlphabetError, ConfigError, RangeError


class Alphabet:
    """
    An ordered set of distinct symbols.

    The K-th symbol has index K (numbering from 0). Instances are immutable
    and may be shared freely between permutations, rotors and machines.
    """

    DEFAULT: ClassVar[str] = string.ascii_uppercase

    __slots__ = ("_chars", "_index")

    def __init__(self, chars: str = DEFAULT):
        if not chars:
            raise ConfigError("Alphabet must contain at least one symbol")

        index: dict[str, int] = {}
        for i, ch in enumerate(chars):
            if ch in index:
                raise ConfigError(
                    f"Alphabet symbol {ch!r} is duplicated",
                    {"symbol": ch},
                )
            index[ch] = i

        self._chars = chars
        self._index = index

    def size(self) -> int:
        """Return the number of symbols."""
        return len(self._chars)

    def contains(self, symbol: str) -> bool:
        """Return True if SYMBOL is in this alphabet."""
        return symbol in self._index

    def to_char(self, index: int) -> str:
        """Return the symbol at INDEX, where 0 <= INDEX < size()."""
        if index < 0 or index >= len(self._chars):
            raise RangeError(index, len(self._chars))
        return self._chars[index]

    def to_int(self, symbol: str) -> int:
        """Return the index of SYMBOL. Inverse of to_char()."""
        try:
            return self._index[symbol]
        except KeyError:
            raise AlphabetError(symbol) from None

    @property
    def chars(self) -> str:
        return self._chars

    def __len__(self) -> int:
        return len(self._chars)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._index

    def __iter__(self):
        return iter(self._chars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash(self._chars)

    def __repr__(self) -> str:
        return f"Alphabet({self._chars!r})"
