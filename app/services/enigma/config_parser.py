"""
Parsing of machine configuration files and setup lines.

A configuration file looks like::

    ABCDEFGHIJKLMNOPQRSTUVWXYZ
    5 3
    I MQ (AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)
    Beta N (ALBEVFCYODJWUGNMQTZSKPR) (HIX)
    B R (AE) (BN) (CK) ...

and a setup line looks like::

    * B Beta III IV I AXLE [RINGS] (HQ) (EX) (IP) (TR) (BY)
"""
import logging
from dataclasses import dataclass
from pathlib import Path

from app.core.exceptions import ConfigError
from app.services.enigma.alphabet import Alphabet
from app.services.enigma.machine import Machine
from app.services.enigma.permutation import Permutation
from app.services.enigma.pool import RotorPool
from app.services.enigma.rotor import Rotor, RotorKind

logger = logging.getLogger(__name__)

SETUP_MARKER = "*"
RESERVED_SYMBOLS = frozenset("()*")


@dataclass(frozen=True)
class RotorSpec:
    """One rotor definition from a configuration file."""

    name: str
    kind: RotorKind
    cycles: str
    notches: str = ""

    def build(self, alphabet: Alphabet) -> Rotor:
        return Rotor(self.name, self.kind, Permutation(self.cycles, alphabet), self.notches)


@dataclass(frozen=True)
class MachineConfig:
    """Parsed contents of a configuration file."""

    alphabet: str
    num_rotors: int
    pawls: int
    rotors: tuple[RotorSpec, ...] = ()


@dataclass
class SetupDirective:
    """Parsed contents of a setup line."""

    rotors: list[str]
    setting: str
    ring_setting: str | None = None
    plugboard: str = ""


def _is_cycle(token: str) -> bool:
    return token.startswith("(")


def _parse_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ConfigError(f"{what} must be an integer, got {token!r}", {what: token}) from None


def parse_machine_config(text: str) -> MachineConfig:
    """
    Parse configuration file TEXT.

    Raises:
        ConfigError: On a truncated file, bad counts, an unknown rotor type
            or a duplicated rotor name.
    """
    tokens = text.split()
    if len(tokens) < 3:
        raise ConfigError("Configuration file truncated")

    alphabet = tokens[0]
    reserved = RESERVED_SYMBOLS.intersection(alphabet)
    if reserved:
        raise ConfigError(
            f"Alphabet may not contain {''.join(sorted(reserved))!r}",
            {"alphabet": alphabet},
        )
    num_rotors = _parse_int(tokens[1], "num_rotors")
    pawls = _parse_int(tokens[2], "pawls")

    specs: list[RotorSpec] = []
    names: set[str] = set()
    pos = 3
    while pos < len(tokens):
        name = tokens[pos]
        if _is_cycle(name):
            raise ConfigError(f"Expected a rotor name, got {name!r}")
        if pos + 1 >= len(tokens):
            raise ConfigError(f"Invalid description of rotor {name}", {"rotor": name})
        if name in names:
            raise ConfigError(f"Rotor {name} is duplicated", {"rotor": name})
        names.add(name)

        type_token = tokens[pos + 1]
        kind = RotorKind.from_code(type_token[0])
        notches = type_token[1:]
        pos += 2

        cycles = []
        while pos < len(tokens) and _is_cycle(tokens[pos]):
            cycles.append(tokens[pos])
            pos += 1

        specs.append(
            RotorSpec(name=name, kind=kind, cycles=" ".join(cycles), notches=notches)
        )

    return MachineConfig(
        alphabet=alphabet,
        num_rotors=num_rotors,
        pawls=pawls,
        rotors=tuple(specs),
    )


def load_machine_config(path: str | Path) -> MachineConfig:
    """Read and parse the configuration file at PATH."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"could not open {path}", {"path": str(path)}) from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"could not read {path}: not valid UTF-8", {"path": str(path)}) from e
    return parse_machine_config(text)


def build_machine(config: MachineConfig) -> Machine:
    """Build a fresh machine, with its own rotor pool, from CONFIG."""
    alphabet = Alphabet(config.alphabet)
    pool = RotorPool(alphabet)
    for spec in config.rotors:
        pool.add(spec.build(alphabet))

    logger.info(
        "Built machine: %d symbols, %d slots, %d pawls, %d rotors available",
        alphabet.size(),
        config.num_rotors,
        config.pawls,
        len(pool),
    )
    return Machine(alphabet, config.num_rotors, config.pawls, pool)


def is_setup_line(line: str) -> bool:
    return line.startswith(SETUP_MARKER)


def parse_setup_line(line: str, num_rotors: int) -> SetupDirective:
    """
    Parse a setup line for a machine with NUM_ROTORS slots.

    The leading marker is optional here; callers decide what a setup line is.
    """
    if is_setup_line(line):
        line = line[len(SETUP_MARKER):]
    tokens = line.split()

    if len(tokens) < num_rotors + 1:
        raise ConfigError(
            f"Setup line needs {num_rotors} rotors and a setting",
            {"line": line.strip()},
        )
    rotors = tokens[:num_rotors]
    setting = tokens[num_rotors]
    for token in rotors + [setting]:
        if _is_cycle(token):
            raise ConfigError(f"Unexpected cycle {token!r} in setup line", {"line": line.strip()})

    pos = num_rotors + 1
    ring_setting = None
    if pos < len(tokens) and not _is_cycle(tokens[pos]):
        ring_setting = tokens[pos]
        pos += 1

    cycles = tokens[pos:]
    for token in cycles:
        if not _is_cycle(token):
            raise ConfigError(f"Unexpected token {token!r} in setup line", {"line": line.strip()})

    return SetupDirective(
        rotors=rotors,
        setting=setting,
        ring_setting=ring_setting,
        plugboard=" ".join(cycles),
    )


def apply_setup(machine: Machine, directive: SetupDirective) -> None:
    """Insert rotors, then set positions, rings and plugboard, in that order."""
    machine.insert_rotors(directive.rotors)
    machine.set_rotors(directive.setting)
    if directive.ring_setting is not None:
        machine.set_ring_setting(directive.ring_setting)
    machine.set_plugboard(Permutation(directive.plugboard, machine.alphabet))
