from typing import Any


class EnigmaError(Exception):
    """Base exception for all machine errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigError(EnigmaError):
    """Raised when a machine configuration or setup is invalid."""

    pass


class AlphabetError(EnigmaError, LookupError):
    """Raised when a symbol is not part of the alphabet."""

    def __init__(self, symbol: str):
        super().__init__(
            f"Character {symbol!r} is not in the alphabet",
            {"symbol": symbol},
        )


class RangeError(AlphabetError, IndexError):
    """Raised when an index falls outside the alphabet."""

    def __init__(self, index: int, size: int):
        EnigmaError.__init__(
            self,
            f"Index {index} out of range 0-{size - 1}",
            {"index": index, "size": size},
        )


class PermutationError(EnigmaError):
    """Raised when cycle notation is malformed."""

    pass
