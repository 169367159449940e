import logging

from app.core.exceptions import ConfigError
from app.services.enigma.alphabet import Alphabet
from app.services.enigma.permutation import Permutation
from app.services.enigma.pool import RotorPool
from app.services.enigma.rotor import Rotor, RotorKind

logger = logging.getLogger(__name__)


class Machine:
    """
    A complete rotor machine.

    Slot 0 holds the reflector; higher slots are further right and faster.
    The machine stores rotor names and resolves them through its pool, which
    owns the rotors and their mutable settings.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        num_rotors: int,
        pawls: int,
        pool: RotorPool,
    ):
        if num_rotors <= 1:
            raise ConfigError(
                f"A machine needs more than one rotor slot, got {num_rotors}",
                {"num_rotors": num_rotors},
            )
        if not 0 <= pawls < num_rotors:
            raise ConfigError(
                f"Pawl count {pawls} must be in 0-{num_rotors - 1}",
                {"pawls": pawls, "num_rotors": num_rotors},
            )
        if pool.alphabet != alphabet:
            raise ConfigError("Rotor pool uses a different alphabet")

        self.alphabet = alphabet
        self._num_rotors = num_rotors
        self._pawls = pawls
        self._pool = pool
        self._slots: list[str] = []
        self._plugboard = Permutation.identity(alphabet)

    def num_rotors(self) -> int:
        """Return the number of rotor slots I have."""
        return self._num_rotors

    def num_pawls(self) -> int:
        """Return the number of pawls (and thus rotating rotors) I have."""
        return self._pawls

    @property
    def pool(self) -> RotorPool:
        return self._pool

    @property
    def plugboard(self) -> Permutation:
        return self._plugboard

    def rotor_names(self) -> list[str]:
        return list(self._slots)

    def rotor_at(self, slot: int) -> Rotor:
        return self._pool.get(self._slots[slot])

    def _rotors(self) -> list[Rotor]:
        return [self._pool.get(name) for name in self._slots]

    def insert_rotors(self, names: list[str]) -> None:
        """
        Fill my slots with the rotors NAMES from my pool.

        NAMES[0] must name a reflector, and the moving rotors must be exactly
        the rightmost num_pawls() of them. Rotor settings are left as they
        are. Nothing changes if any check fails.
        """
        if len(names) != self._num_rotors:
            raise ConfigError(
                f"Expected {self._num_rotors} rotors, got {len(names)}",
                {"rotors": list(names)},
            )

        seen: set[str] = set()
        rotors = []
        for name in names:
            if name in seen:
                raise ConfigError(
                    f"Rotor {name} is already in a slot",
                    {"rotor": name},
                )
            seen.add(name)
            rotors.append(self._pool.get(name))

        first_moving = self._num_rotors - self._pawls
        for slot, rotor in enumerate(rotors):
            if (slot == 0) != (rotor.kind is RotorKind.REFLECTOR):
                if slot == 0:
                    message = f"First rotor {rotor.name} must be a reflector"
                else:
                    message = f"Reflector {rotor.name} may only go in the first slot"
                raise ConfigError(message, {"rotor": rotor.name, "slot": slot})
            if rotor.rotates() != (slot >= first_moving):
                raise ConfigError(
                    f"Rotor {rotor.name} in slot {slot} does not match the "
                    f"{self._pawls} pawls",
                    {"rotor": rotor.name, "slot": slot, "pawls": self._pawls},
                )

        self._slots = list(names)
        logger.info("Inserted rotors %s", " ".join(names))

    def _check_settings(self, setting: str, what: str) -> None:
        if not self._slots:
            raise ConfigError("No rotors have been inserted")
        if len(setting) != self._num_rotors - 1:
            raise ConfigError(
                f"{what} {setting!r} has wrong length, expected {self._num_rotors - 1}",
                {"setting": setting},
            )
        for symbol in setting:
            if not self.alphabet.contains(symbol):
                raise ConfigError(
                    f"{what} symbol {symbol!r} is not in the alphabet",
                    {"setting": setting, "symbol": symbol},
                )

    def set_rotors(self, setting: str) -> None:
        """
        Set my rotors according to SETTING, a string of num_rotors()-1
        symbols. The first symbol is the leftmost non-reflector rotor.
        """
        self._check_settings(setting, "Rotor setting")
        for slot, symbol in enumerate(setting, start=1):
            self.rotor_at(slot).set(symbol)

    def set_ring_setting(self, ring_setting: str) -> None:
        """Set my ring settings, same format as set_rotors()."""
        self._check_settings(ring_setting, "Ring setting")
        for slot, symbol in enumerate(ring_setting, start=1):
            self.rotor_at(slot).set_ring(symbol)

    def set_plugboard(self, plugboard: Permutation) -> None:
        if plugboard.alphabet != self.alphabet:
            raise ConfigError("Plugboard uses a different alphabet")
        self._plugboard = plugboard

    def positions(self) -> str:
        """Return the current settings of my non-reflector rotors."""
        return "".join(
            self.alphabet.to_char(rotor.setting) for rotor in self._rotors()[1:]
        )

    def _step(self, rotors: list[Rotor]) -> None:
        # A rotor whose right neighbour is at a notch advances along with
        # that neighbour, which is then skipped; this produces double-stepping.
        last = len(rotors) - 1
        i = 0
        while i <= last:
            rotor = rotors[i]
            if rotor.rotates():
                if i == last:
                    rotor.advance()
                elif rotors[i + 1].at_notch():
                    rotor.advance()
                    rotors[i + 1].advance()
                    i += 1
            i += 1

    def convert_index(self, c: int) -> int:
        """
        Return the conversion of index C after first advancing the machine.
        """
        if not self._slots:
            raise ConfigError("No rotors have been inserted")

        rotors = self._rotors()
        self._step(rotors)

        c = self._plugboard.permute(c)
        for rotor in reversed(rotors):
            c = rotor.convert_forward(c)
        for rotor in rotors[1:]:
            c = rotor.convert_backward(c)
        c = self._plugboard.invert(c)
        return c

    def convert_message(self, msg: str) -> str:
        """Return the conversion of MSG, advancing once per symbol."""
        result = []
        for symbol in msg:
            converted = self.convert_index(self.alphabet.to_int(symbol))
            result.append(self.alphabet.to_char(converted))
        logger.debug("Converted %d symbols, rotors now at %s", len(msg), self.positions())
        return "".join(result)

    def convert(self, value: int | str) -> int | str:
        """Convert an index (returns an index) or a message (returns a message)."""
        if isinstance(value, str):
            return self.convert_message(value)
        return self.convert_index(value)
