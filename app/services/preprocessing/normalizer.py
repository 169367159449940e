import re
import unicodedata
from dataclasses import dataclass
from enum import Enum


class NormalizationMode(str, Enum):
    """Message normalization modes."""

    STRICT = "strict"  # Whitespace removed, symbols untouched
    UPPERCASE = "uppercase"  # Whitespace removed, uppercased
    FILTER = "filter"  # Uppercased, anything outside the alphabet dropped


@dataclass
class NormalizedText:
    """Result of message normalization."""

    text: str
    removed_chars: dict[str, int]


class MessageNormalizer:
    """
    Prepares message lines for the machine and formats its output.

    In STRICT mode symbols outside the alphabet are kept, so the machine
    rejects them instead of silently dropping them.
    """

    def __init__(self, alphabet: str):
        self.alphabet = alphabet

    def normalize(
        self,
        text: str,
        mode: NormalizationMode = NormalizationMode.STRICT,
    ) -> str:
        return self.normalize_full(text, mode).text

    def normalize_full(
        self,
        text: str,
        mode: NormalizationMode = NormalizationMode.STRICT,
    ) -> NormalizedText:
        """
        Normalize text, also reporting what was dropped.

        Args:
            text: Input message
            mode: Normalization mode

        Returns:
            NormalizedText with the symbols removed in FILTER mode
        """
        removed_chars: dict[str, int] = {}

        if mode == NormalizationMode.STRICT:
            normalized = self.strip_whitespace(text)
        elif mode == NormalizationMode.UPPERCASE:
            normalized = self.strip_whitespace(text).upper()
        else:  # FILTER mode
            text = unicodedata.normalize("NFKC", text).upper()
            normalized = self._filter_chars(text, removed_chars)

        return NormalizedText(text=normalized, removed_chars=removed_chars)

    def _filter_chars(self, text: str, removed_chars: dict[str, int]) -> str:
        """Keep only alphabet symbols, tracking removed ones."""
        result = []
        allowed_set = set(self.alphabet)

        for char in text:
            if char in allowed_set:
                result.append(char)
            elif not char.isspace():
                removed_chars[char] = removed_chars.get(char, 0) + 1

        return "".join(result)

    def strip_whitespace(self, text: str) -> str:
        """Remove all whitespace from text."""
        return re.sub(r"\s+", "", text)


def format_groups(text: str, size: int = 5) -> str:
    """Split TEXT into space-separated groups of SIZE (the last may be shorter)."""
    if size <= 0:
        return text
    return " ".join(text[i:i + size] for i in range(0, len(text), size))
