"""Rotor cipher machine core."""

from app.services.enigma.alphabet import Alphabet
from app.services.enigma.config_parser import (
    MachineConfig,
    RotorSpec,
    SetupDirective,
    apply_setup,
    build_machine,
    load_machine_config,
    parse_machine_config,
    parse_setup_line,
)
from app.services.enigma.machine import Machine
from app.services.enigma.permutation import Permutation
from app.services.enigma.pool import RotorPool
from app.services.enigma.processor import MessageProcessor
from app.services.enigma.rotor import Rotor, RotorKind

__all__ = [
    "Alphabet",
    "Machine",
    "MachineConfig",
    "MessageProcessor",
    "Permutation",
    "Rotor",
    "RotorKind",
    "RotorPool",
    "RotorSpec",
    "SetupDirective",
    "apply_setup",
    "build_machine",
    "load_machine_config",
    "parse_machine_config",
    "parse_setup_line",
]
