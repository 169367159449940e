"""Tests for message processing and output formatting."""

import pytest

from app.core.exceptions import AlphabetError, ConfigError
from app.services.enigma.config_parser import build_machine, parse_machine_config
from app.services.enigma.presets import NAVAL_CONFIG
from app.services.enigma.processor import MessageProcessor
from app.services.preprocessing.normalizer import MessageNormalizer, NormalizationMode, format_groups

SETUP = "* B Beta I II III AAAA"
NAVAL_SETUP = "* B Beta III IV I AXLE (HQ) (EX) (IP) (TR) (BY)"


class TestMessageProcessor:
    """Test suite for MessageProcessor."""

    @pytest.fixture
    def processor(self):
        return MessageProcessor(build_machine(parse_machine_config(NAVAL_CONFIG)))

    def new_processor(self):
        return MessageProcessor(build_machine(parse_machine_config(NAVAL_CONFIG)))

    def test_reference_message(self, processor):
        assert processor.process_text(f"{SETUP}\nAAAAA\n") == "BDZGO\n"

    def test_whitespace_removed_and_grouped(self, processor):
        output = processor.process_text(f"{SETUP}\nAAA AA\tAAAA A\n")
        assert output.startswith("BDZGO ")
        assert len(output.rstrip("\n")) == 11

    def test_blank_lines_preserved(self, processor):
        lines = list(processor.process_lines([SETUP, "AAAAA", "", "   ", "A"]))
        assert lines[0] == "BDZGO"
        assert lines[1] == ""
        assert lines[2] == ""
        assert len(lines[3]) == 1

    def test_setup_line_produces_no_output(self, processor):
        lines = list(processor.process_lines([SETUP, "AAAAA", SETUP, "AAAAA"]))
        assert lines == ["BDZGO", "BDZGO"]

    def test_machine_state_continues_across_lines(self, processor):
        joined = processor.process_text(f"{SETUP}\nAAAAAAAAAA\n")
        split = self.new_processor().process_text(f"{SETUP}\nAAAAA\nAAAAA\n")
        assert joined.replace(" ", "").replace("\n", "") == split.replace("\n", "")

    def test_missing_setup_line(self, processor):
        with pytest.raises(ConfigError):
            processor.process_text("HELLO\n")

    def test_leading_blank_lines_allowed(self, processor):
        assert processor.process_text(f"\n{SETUP}\nAAAAA\n") == "\nBDZGO\n"

    def test_unknown_symbol(self, processor):
        with pytest.raises(AlphabetError):
            processor.process_text(f"{SETUP}\nhello\n")

    def test_roundtrip(self, processor):
        message = "FROM his shoulder Hiawatha".upper()
        encoded = processor.process_text(f"{NAVAL_SETUP}\n{message}\n")
        decoded = self.new_processor().process_text(f"{NAVAL_SETUP}\n{encoded}")
        assert decoded.replace(" ", "") == message.replace(" ", "") + "\n"

    def test_custom_group_size(self):
        processor = MessageProcessor(
            build_machine(parse_machine_config(NAVAL_CONFIG)),
            group_size=3,
        )
        assert processor.process_text(f"{SETUP}\nAAAAA\n") == "BDZ GO\n"

    def test_uppercase_mode(self):
        processor = MessageProcessor(
            build_machine(parse_machine_config(NAVAL_CONFIG)),
            mode=NormalizationMode.UPPERCASE,
        )
        assert processor.process_text(f"{SETUP}\naaaaa\n") == "BDZGO\n"


class TestMessageNormalizer:
    """Test suite for MessageNormalizer."""

    @pytest.fixture
    def normalizer(self):
        return MessageNormalizer("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

    def test_strict_keeps_symbols(self, normalizer):
        assert normalizer.normalize("he llo\n") == "hello"

    def test_uppercase(self, normalizer):
        assert normalizer.normalize("he llo", NormalizationMode.UPPERCASE) == "HELLO"

    def test_filter_tracks_removed(self, normalizer):
        result = normalizer.normalize_full("Hello, World 42!", NormalizationMode.FILTER)
        assert result.text == "HELLOWORLD"
        assert result.removed_chars == {",": 1, "4": 1, "2": 1, "!": 1}


class TestFormatGroups:
    """Test suite for output grouping."""

    @pytest.mark.parametrize(
        "text, size, expected",
        [
            ("", 5, ""),
            ("ABC", 5, "ABC"),
            ("ABCDE", 5, "ABCDE"),
            ("ABCDEFGHIJKL", 5, "ABCDE FGHIJ KL"),
            ("ABCDEF", 2, "AB CD EF"),
        ],
    )
    def test_groups(self, text, size, expected):
        assert format_groups(text, size) == expected
