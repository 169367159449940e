from typing import Iterator

from app.core.exceptions import ConfigError
from app.services.enigma.alphabet import Alphabet
from app.services.enigma.rotor import Rotor


class RotorPool:
    """
    The set of rotors available to a machine, keyed by name.

    The pool owns its Rotor objects. Machines refer to rotors by name and
    look them up here, so a rotor's mutable settings live in one place.
    """

    def __init__(self, alphabet: Alphabet, rotors: list[Rotor] | None = None):
        self.alphabet = alphabet
        self._rotors: dict[str, Rotor] = {}
        for rotor in rotors or []:
            self.add(rotor)

    def add(self, rotor: Rotor) -> Rotor:
        """Add ROTOR to the pool. Names must be unique."""
        if rotor.name in self._rotors:
            raise ConfigError(
                f"Rotor {rotor.name} is duplicated",
                {"rotor": rotor.name},
            )
        if rotor.alphabet != self.alphabet:
            raise ConfigError(
                f"Rotor {rotor.name} uses a different alphabet",
                {"rotor": rotor.name},
            )
        self._rotors[rotor.name] = rotor
        return rotor

    def get(self, name: str) -> Rotor:
        try:
            return self._rotors[name]
        except KeyError:
            raise ConfigError(f"Can't find rotor {name}", {"rotor": name}) from None

    def names(self) -> list[str]:
        return list(self._rotors)

    def __contains__(self, name: object) -> bool:
        return name in self._rotors

    def __len__(self) -> int:
        return len(self._rotors)

    def __iter__(self) -> Iterator[Rotor]:
        return iter(self._rotors.values())
