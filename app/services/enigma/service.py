from dataclasses import dataclass, field

from app.services.enigma.config_parser import MachineConfig, SetupDirective, apply_setup, build_machine
from app.services.enigma.processor import MessageProcessor
from app.services.preprocessing.normalizer import MessageNormalizer, NormalizationMode, format_groups


@dataclass
class ConversionResult:
    """Result of running one message through a freshly set up machine."""

    output: str
    grouped: str
    initial_positions: str
    final_positions: str
    removed_chars: dict[str, int] = field(default_factory=dict)


def convert_message(
    config: MachineConfig,
    directive: SetupDirective,
    message: str,
    normalize: bool = False,
    group_size: int = 5,
) -> ConversionResult:
    """
    Build a machine from CONFIG, set it up with DIRECTIVE and convert MESSAGE.

    Every call gets its own machine, so callers never share rotor state.
    Encryption and decryption are the same operation.
    """
    machine = build_machine(config)
    apply_setup(machine, directive)
    initial = machine.positions()

    mode = NormalizationMode.FILTER if normalize else NormalizationMode.STRICT
    normalized = MessageNormalizer(config.alphabet).normalize_full(message, mode)
    output = machine.convert_message(normalized.text)

    return ConversionResult(
        output=output,
        grouped=format_groups(output, group_size),
        initial_positions=initial,
        final_positions=machine.positions(),
        removed_chars=normalized.removed_chars,
    )


def process_document(config: MachineConfig, text: str, group_size: int = 5) -> list[str]:
    """Run a whole input document (setup lines and messages) through a new machine."""
    processor = MessageProcessor(build_machine(config), group_size=group_size)
    return list(processor.process_lines(text.splitlines()))
