import logging
from typing import Iterable, Iterator

from app.core.exceptions import ConfigError
from app.services.enigma.config_parser import apply_setup, is_setup_line, parse_setup_line
from app.services.enigma.machine import Machine
from app.services.preprocessing.normalizer import MessageNormalizer, NormalizationMode, format_groups

logger = logging.getLogger(__name__)


class MessageProcessor:
    """
    Runs an input document through a machine.

    The document is a sequence of lines. A line starting with ``*`` sets the
    machine up, a blank line is copied through as a blank line, and any other
    line is a message whose symbols are converted and printed in groups.
    The first non-blank line must be a setup line.
    """

    def __init__(
        self,
        machine: Machine,
        group_size: int = 5,
        mode: NormalizationMode = NormalizationMode.STRICT,
    ):
        self.machine = machine
        self.group_size = group_size
        self.mode = mode
        self.normalizer = MessageNormalizer(machine.alphabet.chars)

    def process_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield one output line per input line."""
        configured = False
        for number, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                yield ""
            elif is_setup_line(line):
                directive = parse_setup_line(line, self.machine.num_rotors())
                apply_setup(self.machine, directive)
                configured = True
                logger.info("Line %d: machine set to %s", number, self.machine.positions())
            elif not configured:
                raise ConfigError(
                    "Missing setup line at the start of the input",
                    {"line": number},
                )
            else:
                message = self.normalizer.normalize(line, self.mode)
                yield format_groups(self.machine.convert_message(message), self.group_size)

    def process_text(self, text: str) -> str:
        """Process a whole document, returning the output text."""
        output = list(self.process_lines(text.splitlines()))
        if not output:
            return ""
        return "\n".join(output) + "\n"
