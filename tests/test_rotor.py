"""Tests for rotor variants."""

import pytest

from app.core.exceptions import AlphabetError, ConfigError
from app.services.enigma.alphabet import Alphabet
from app.services.enigma.permutation import Permutation
from app.services.enigma.rotor import Rotor, RotorKind


class TestRotor:
    """Test suite for Rotor."""

    @pytest.fixture
    def alphabet(self):
        return Alphabet("ABCDE")

    @pytest.fixture
    def perm(self, alphabet):
        return Permutation("(BACD)(E)", alphabet)

    @pytest.fixture
    def moving(self, perm):
        return Rotor.moving("M1", perm, "C")

    def test_new_rotor_at_zero(self, moving):
        assert moving.setting == 0
        assert moving.ring_setting == 0

    def test_variant_flags(self, alphabet, perm):
        fixed = Rotor.fixed("F1", perm)
        reflector = Rotor.reflector("R1", Permutation("(AB)(CDE)", alphabet))
        moving = Rotor.moving("M1", perm, "")

        assert moving.rotates() and not moving.reflecting()
        assert not fixed.rotates() and not fixed.reflecting()
        assert not reflector.rotates() and reflector.reflecting()

    def test_convert_at_zero_matches_permutation(self, moving, perm):
        for i in range(5):
            assert moving.convert_forward(i) == perm.permute(i)
            assert moving.convert_backward(i) == perm.invert(i)

    def test_convert_with_setting(self, moving):
        moving.set(1)
        # 0 -> wrap(0 + 1) = B -> A = 0 -> wrap(0 - 1) = 4
        assert moving.convert_forward(0) == 4
        assert moving.convert_backward(4) == 0

    def test_ring_setting_cancels_setting(self, moving, perm):
        moving.set("B")
        moving.set_ring("B")
        for i in range(5):
            assert moving.convert_forward(i) == perm.permute(i)

    def test_forward_backward_are_inverse(self, moving):
        for setting in range(5):
            for ring in range(5):
                moving.set(setting)
                moving.set_ring(ring)
                for i in range(5):
                    assert moving.convert_backward(moving.convert_forward(i)) == i

    def test_set_accepts_symbol_and_wraps_index(self, moving):
        moving.set("D")
        assert moving.setting == 3
        moving.set(7)
        assert moving.setting == 2
        moving.set(-1)
        assert moving.setting == 4

    def test_set_unknown_symbol(self, moving):
        with pytest.raises(AlphabetError):
            moving.set("Z")

    def test_at_notch(self, moving):
        assert not moving.at_notch()
        moving.set("C")
        assert moving.at_notch()

    def test_advance_wraps(self, moving):
        moving.set("E")
        moving.advance()
        assert moving.setting == 0

    def test_advance_cycle_raises_notch_once(self, moving):
        """One full revolution passes the notch exactly once."""
        hits = 0
        for _ in range(5):
            moving.advance()
            hits += moving.at_notch()
        assert hits == 1
        assert moving.setting == 0

    def test_fixed_rotor_never_moves(self, perm):
        fixed = Rotor.fixed("F1", perm)
        fixed.set("C")
        fixed.advance()
        assert fixed.setting == 2
        assert not fixed.at_notch()

    def test_reflector_requires_derangement(self, alphabet):
        with pytest.raises(ConfigError):
            Rotor.reflector("R1", Permutation("(AB)(CD)", alphabet))
        with pytest.raises(ConfigError):
            Rotor.reflector("R1", Permutation("(BACD)(E)", alphabet))

    def test_notches_only_on_moving_rotors(self, perm):
        with pytest.raises(ConfigError):
            Rotor(name="F1", kind=RotorKind.FIXED, permutation=perm, notches="A")

    def test_notch_must_be_in_alphabet(self, perm):
        with pytest.raises(ConfigError):
            Rotor.moving("M1", perm, "Q")

    def test_reset(self, moving):
        moving.set("D")
        moving.set_ring("B")
        moving.reset()
        assert (moving.setting, moving.ring_setting) == (0, 0)


class TestRotorKind:
    """Test suite for rotor type codes."""

    @pytest.mark.parametrize(
        "code, kind",
        [("M", RotorKind.MOVING), ("N", RotorKind.FIXED), ("R", RotorKind.REFLECTOR)],
    )
    def test_codes(self, code, kind):
        assert RotorKind.from_code(code) is kind
        assert kind.code == code

    def test_unknown_code(self):
        with pytest.raises(ConfigError):
            RotorKind.from_code("X")
