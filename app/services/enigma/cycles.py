"""
Cycle notation parsing.

Turns text such as ``"(AELTPHQXRU) (BKNW)(CMOY)"`` into a list of disjoint
index groups over an alphabet. Whitespace between and around groups is
ignored; anything else outside parentheses is an error.
"""
from dataclasses import dataclass
from enum import Enum

from app.core.exceptions import PermutationError
from app.services.enigma.alphabet import Alphabet


class TokenKind(str, Enum):
    """Lexical token kinds in cycle notation."""

    OPEN = "open"
    CLOSE = "close"
    SYMBOL = "symbol"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str
    position: int


def tokenize(text: str) -> list[Token]:
    """Split cycle text into tokens, dropping whitespace."""
    tokens = []
    for pos, ch in enumerate(text):
        if ch.isspace():
            continue
        if ch == "(":
            tokens.append(Token(TokenKind.OPEN, ch, pos))
        elif ch == ")":
            tokens.append(Token(TokenKind.CLOSE, ch, pos))
        else:
            tokens.append(Token(TokenKind.SYMBOL, ch, pos))
    return tokens


def parse_cycles(text: str, alphabet: Alphabet) -> list[tuple[int, ...]]:
    """
    Parse cycle notation into index groups.

    Args:
        text: Cycle notation, possibly empty
        alphabet: Alphabet the symbols belong to

    Returns:
        List of cycles, each a tuple of distinct indices

    Raises:
        PermutationError: On unbalanced or nested parentheses, empty groups,
            symbols outside a group or the alphabet, and repeated symbols.
    """
    cycles: list[tuple[int, ...]] = []
    seen: set[str] = set()
    current: list[int] | None = None

    for token in tokenize(text):
        if token.kind is TokenKind.OPEN:
            if current is not None:
                raise PermutationError(
                    f"Nested '(' at position {token.position}",
                    {"text": text, "position": token.position},
                )
            current = []
        elif token.kind is TokenKind.CLOSE:
            if current is None:
                raise PermutationError(
                    f"Unmatched ')' at position {token.position}",
                    {"text": text, "position": token.position},
                )
            if not current:
                raise PermutationError(
                    f"Empty cycle at position {token.position}",
                    {"text": text, "position": token.position},
                )
            cycles.append(tuple(current))
            current = None
        else:
            symbol = token.value
            if current is None:
                raise PermutationError(
                    f"Symbol {symbol!r} outside of a cycle",
                    {"text": text, "position": token.position},
                )
            if not alphabet.contains(symbol):
                raise PermutationError(
                    f"Cycle symbol {symbol!r} is not in the alphabet",
                    {"text": text, "symbol": symbol},
                )
            if symbol in seen:
                raise PermutationError(
                    f"Symbol {symbol!r} appears in more than one place",
                    {"text": text, "symbol": symbol},
                )
            seen.add(symbol)
            current.append(alphabet.to_int(symbol))

    if current is not None:
        raise PermutationError("Unterminated cycle", {"text": text})

    return cycles
