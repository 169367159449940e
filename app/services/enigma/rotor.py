from enum import Enum

from app.core.exceptions import ConfigError
from app.services.enigma.alphabet import Alphabet
from app.services.enigma.permutation import Permutation


class RotorKind(str, Enum):
    """The closed set of rotor variants."""

    MOVING = "moving"
    FIXED = "fixed"
    REFLECTOR = "reflector"

    @property
    def code(self) -> str:
        """Type letter used in configuration files."""
        return _KIND_CODES[self]

    @classmethod
    def from_code(cls, code: str) -> "RotorKind":
        for kind, letter in _KIND_CODES.items():
            if letter == code:
                return kind
        raise ConfigError(f"Invalid rotor type {code!r}", {"type": code})


_KIND_CODES = {
    RotorKind.MOVING: "M",
    RotorKind.FIXED: "N",
    RotorKind.REFLECTOR: "R",
}


class Rotor:
    """
    A rotor: a permutation plus a rotational setting and a ring setting.

    Behaviour that differs between variants (rotates, at_notch, advance) is
    selected by ``kind`` rather than by subclassing. Use the ``moving``,
    ``fixed`` and ``reflector`` constructors.
    """

    def __init__(
        self,
        name: str,
        kind: RotorKind,
        permutation: Permutation,
        notches: str = "",
    ):
        alphabet = permutation.alphabet
        if notches and kind is not RotorKind.MOVING:
            raise ConfigError(
                f"Rotor {name} is {kind.value} and cannot have notches",
                {"rotor": name, "notches": notches},
            )
        for notch in notches:
            if not alphabet.contains(notch):
                raise ConfigError(
                    f"Notch {notch!r} of rotor {name} is not in the alphabet",
                    {"rotor": name, "notch": notch},
                )
        if kind is RotorKind.REFLECTOR and not permutation.derangement():
            raise ConfigError(
                f"Reflector {name} must map every symbol to another symbol",
                {"rotor": name, "cycles": str(permutation)},
            )

        self.name = name
        self.kind = kind
        self.permutation = permutation
        self.notches = frozenset(notches)
        self.setting = 0
        self.ring_setting = 0

    @classmethod
    def moving(cls, name: str, permutation: Permutation, notches: str) -> "Rotor":
        return cls(name, RotorKind.MOVING, permutation, notches)

    @classmethod
    def fixed(cls, name: str, permutation: Permutation) -> "Rotor":
        return cls(name, RotorKind.FIXED, permutation)

    @classmethod
    def reflector(cls, name: str, permutation: Permutation) -> "Rotor":
        return cls(name, RotorKind.REFLECTOR, permutation)

    @property
    def alphabet(self) -> Alphabet:
        return self.permutation.alphabet

    def size(self) -> int:
        return self.permutation.size()

    def wrap(self, p: int) -> int:
        return self.permutation.wrap(p)

    def rotates(self) -> bool:
        """Return True iff this rotor has a pawl and can advance."""
        return self.kind is RotorKind.MOVING

    def reflecting(self) -> bool:
        return self.kind is RotorKind.REFLECTOR

    def at_notch(self) -> bool:
        """Return True iff my current setting is one of my notches."""
        if self.kind is not RotorKind.MOVING:
            return False
        return self.alphabet.to_char(self.setting) in self.notches

    def advance(self) -> None:
        """Advance one position. Non-rotating rotors stay put."""
        if self.kind is RotorKind.MOVING:
            self.setting = self.wrap(self.setting + 1)

    def set(self, posn: int | str) -> None:
        """Set my rotational position to POSN, an index or a symbol."""
        if isinstance(posn, str):
            posn = self.alphabet.to_int(posn)
        self.setting = self.wrap(posn)

    def set_ring(self, posn: int | str) -> None:
        """Set my ring position to POSN, an index or a symbol."""
        if isinstance(posn, str):
            posn = self.alphabet.to_int(posn)
        self.ring_setting = self.wrap(posn)

    def reset(self) -> None:
        self.setting = 0
        self.ring_setting = 0

    def convert_forward(self, p: int) -> int:
        """Translate P, entering from the right contact."""
        offset = self.setting - self.ring_setting
        mapped = self.permutation.permute(self.wrap(p + offset))
        return self.wrap(mapped - offset)

    def convert_backward(self, e: int) -> int:
        """Translate E, entering from the left contact."""
        offset = self.setting - self.ring_setting
        mapped = self.permutation.invert(self.wrap(e + offset))
        return self.wrap(mapped - offset)

    def __repr__(self) -> str:
        return (
            f"<Rotor {self.name} {self.kind.value} "
            f"pos={self.setting} ring={self.ring_setting}>"
        )
